"""Optional: a value that may be absent.

The absent marker is ``None``; a present Optional never holds None.

Example:
    >>> Optional.of_nullable(os.environ.get("PORT")).map(int).filter(lambda p: p > 1024).get_or_else(8080)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Optional(Generic[T]):
    """Presence/absence wrapper. Immutable; map and filter return new instances."""

    __slots__ = ("_value",)

    def __init__(self, value: T | None) -> None:
        """Private constructor. Use of(), of_nullable() or empty() instead."""
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Optional is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Optional is immutable; cannot delete {name!r}")

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Wrap a value that must be present.

        Raises:
            ValueError: If value is None
        """
        if value is None:
            raise ValueError("Optional.of() requires a present value; use of_nullable() for None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None = None) -> Optional[T]:
        return cls(value)

    @classmethod
    def empty(cls) -> Optional[T]:
        return _EMPTY  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._value is None

    def is_not_empty(self) -> bool:
        return self._value is not None

    def get_or_else(self, default: T) -> T:
        return self._value if self._value is not None else default

    def get_or_raise(self, error_supplier: Callable[[], BaseException]) -> T:
        """Present value, or raise the exception built by error_supplier."""
        if self._value is not None:
            return self._value
        raise error_supplier()

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply mapper to a present value; a None from mapper gives an empty Optional."""
        if self._value is None:
            return _EMPTY  # type: ignore[return-value]
        return Optional(mapper(self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        if self._value is not None and predicate(self._value):
            return Optional(self._value)
        return _EMPTY  # type: ignore[return-value]

    def if_present(self, fn: Callable[[T], object]) -> Optional[T]:
        """Call fn with the value when present; return self. Exceptions from fn propagate."""
        if self._value is not None:
            fn(self._value)
        return self

    def __eq__(self, other: object) -> bool:
        return self._value == other._value if isinstance(other, Optional) else NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        """Truthy when a value is present (even a falsy one such as 0)."""
        return self._value is not None

    def __repr__(self) -> str:
        return "Optional.empty()" if self._value is None else f"Optional({self._value!r})"

    def __iter__(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value


_EMPTY: Optional[object] = Optional(None)
