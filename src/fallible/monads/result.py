"""Result type for explicit success/failure handling.

A ``Result`` holds exactly one of a success payload or a failure payload.
Failures are data: combinators short-circuit on them instead of raising, and
every combinator returns a new Result. The only exceptions that leave this
module are the ones a caller asks for with ``get_or_raise``.

- Mapping: map, flat_map, conditional_map, conditional_flat_map, map_failure
- Guarding: filter, as_failure_of
- Side effects: on_success, on_failure, always (raising handlers become failures)
- Unwrapping: get_or_none, get_or_default, get_or, get_or_raise, failure_or_none
- Async: lift_promise
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import warnings
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    NoReturn,
    TypeVar,
    overload,
)

from fallible.foundation.config import get_result_settings
from fallible.foundation.errors import Displayable, HandlerFault, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E", bound=Displayable)  # Failure type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F", bound=Displayable)  # Mapped failure type
R = TypeVar("R")

logger = logging.getLogger("fallible.monads.result")

# Discriminant values
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Success or failure of an operation, never both and never neither.

    Examples:
        >>> success_result(5).map(lambda x: x * 2).get_or_raise()
        10
        >>> failure_result("no luck").map(lambda x: x * 2).failure_or_none()
        'no luck'
        >>> (
        ...     success_result("42")
        ...     .flat_map(lambda s: success_result(int(s)) if s.isdigit() else failure_result("not a number"))
        ...     .filter(lambda n: n > 40)
        ...     .get_or_default(0)
        ... )
        42

    Notes:
        - The discriminant is an explicit flag, so ``None`` is a legal success payload
        - Instances are immutable; attribute assignment raises AttributeError
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use success_result() or failure_result() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    # ─── Factories ─────────────────────────────────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        """Construct a success."""
        return Result(value, _OK)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        """Construct a failure."""
        return Result(error, _ERR)

    @staticmethod
    def from_all(results: Iterable[Result[T, Any]]) -> Result[list[T], str]:
        """Success with every value, in order, only if every input succeeded.

        The failure only reports how many inputs failed; use for_each_result
        to keep the individual failure payloads.
        """
        items = list(results)
        values = [r._value for r in items if r._is_ok]
        if len(values) != len(items):
            return Result(f"All results were not successful; number_failed: {len(items) - len(values)}", _ERR)
        return Result(values, _OK)  # type: ignore[arg-type]

    @staticmethod
    def from_any(results: Iterable[Result[T, Any]]) -> Result[list[T], str]:
        """Success with the values of the inputs that succeeded; failures are dropped."""
        return Result([r._value for r in results if r._is_ok], _OK)  # type: ignore[arg-type]

    # ─── State ─────────────────────────────────────────────────────────

    @property
    def succeeded(self) -> bool:
        return self._is_ok

    @property
    def failed(self) -> bool:
        return not self._is_ok

    @property
    def value(self) -> T | None:
        """Success payload, or None on failure. Prefer the get_or_* accessors."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    @property
    def error(self) -> E | None:
        """Failure payload, or None on success."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Equality ──────────────────────────────────────────────────────

    def equals(self, other: object) -> bool:
        """Both successes with equal values, or both failures with equal errors."""
        return isinstance(other, Result) and self._is_ok == other._is_ok and self._value == other._value

    def non_equal(self, other: object) -> bool:
        return not self.equals(other)

    # ─── Mapping ───────────────────────────────────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """Apply mapper to a success value. Result[T,E] → (T→U) → Result[U,E]"""
        return Result(mapper(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def flat_map(self, next: Callable[[T], Result[U, E]]) -> Result[U, E]:  # noqa: A002
        """Chain a step that can itself fail. Result[T,E] → (T→Result[U,E]) → Result[U,E]

        Example:
            >>> def parse(s: str) -> Result[int, str]:
            ...     return success_result(int(s)) if s.isdigit() else failure_result(f"invalid: {s}")
            >>> success_result("7").flat_map(parse).get_or_raise()
            7
            >>> success_result("x").flat_map(parse).failure_or_none()
            'invalid: x'
        """
        return next(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def and_then(self, next: Callable[[T], Result[U, E]]) -> Result[U, E]:  # noqa: A002
        """Deprecated alias for flat_map."""
        warnings.warn("Result.and_then() is deprecated; use flat_map()", DeprecationWarning, stacklevel=2)
        return self.flat_map(next)

    def conditional_map(self, predicate: Callable[[T], bool], mapper: Callable[[T], T]) -> Result[T, E]:
        """Map only when predicate holds; otherwise pass the value through unchanged."""
        if not self._is_ok:
            return Result(self._value, _ERR)
        value: T = self._value  # type: ignore[assignment]
        return Result(mapper(value) if predicate(value) else value, _OK)

    def conditional_flat_map(self, predicate: Callable[[T], bool], next: Callable[[T], Result[T, E]]) -> Result[T, E]:  # noqa: A002
        """flat_map only when predicate holds; otherwise pass the value through unchanged."""
        if not self._is_ok:
            return Result(self._value, _ERR)
        value: T = self._value  # type: ignore[assignment]
        return next(value) if predicate(value) else Result(value, _OK)

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Apply mapper to a failure payload. Result[T,E] → (E→F) → Result[T,F]"""
        return Result(mapper(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    # ─── Guarding ──────────────────────────────────────────────────────

    @overload
    def filter(self, predicate: Callable[[T], bool]) -> Result[T, E | str]: ...

    @overload
    def filter(self, predicate: Callable[[T], bool], failure_provider: Callable[[], E]) -> Result[T, E]: ...

    def filter(
        self,
        predicate: Callable[[T], bool],
        failure_provider: Callable[[], E] | None = None,
    ) -> Result[T, E] | Result[T, E | str]:
        """Keep a success only if predicate holds.

        A rejected value becomes a failure from failure_provider(), or, when no
        provider is given, the configured predicate failure message (a str).
        """
        if not self._is_ok:
            return Result(self._value, _ERR)
        if predicate(self._value):  # type: ignore[arg-type]
            return Result(self._value, _OK)
        if failure_provider is not None:
            return Result(failure_provider(), _ERR)
        return Result(get_result_settings().predicate_failure_message, _ERR)

    def as_failure_of(self, fallback: E) -> Result[U, E]:
        """Retype as a failure, using fallback when there is no failure payload."""
        if not self._is_ok and self._value is not None:
            return Result(self._value, _ERR)
        return Result(fallback, _ERR)

    # ─── Side Effects ──────────────────────────────────────────────────

    def on_success(self, handler: Callable[[T], object]) -> Result[T, E | HandlerFault]:
        """Call handler with the success value; return self.

        If handler raises, the returned Result is a failure holding a HandlerFault.
        """
        if self._is_ok:
            try:
                handler(self._value)  # type: ignore[arg-type]
            except Exception as exc:  # noqa: BLE001 - handler faults become failures
                return _handler_fault("on_success", exc)
        return self

    def on_failure(self, handler: Callable[[E], object]) -> Result[T, E | HandlerFault]:
        """Call handler with the failure payload; return self."""
        if not self._is_ok:
            try:
                handler(self._value)  # type: ignore[arg-type]
            except Exception as exc:  # noqa: BLE001
                return _handler_fault("on_failure", exc)
        return self

    def always(self, handler: Callable[[], object]) -> Result[T, E | HandlerFault]:
        """Call handler regardless of state; return self."""
        try:
            handler()
        except Exception as exc:  # noqa: BLE001
            return _handler_fault("always", exc)
        return self

    # ─── Unwrapping ────────────────────────────────────────────────────

    def get_or_none(self) -> T | None:
        """Success value, or None on failure."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def get_or_default(self, default: T) -> T:
        """Success value, or default on failure."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def get_or(self, supplier: Callable[[], T]) -> T:
        """Success value, or supplier() on failure. supplier is not called on success."""
        return self._value if self._is_ok else supplier()  # type: ignore[return-value]

    def get_or_raise(self, error_supplier: Callable[[], BaseException] | None = None) -> T:
        """Success value, or raise.

        Raises:
            UnwrapError: On failure, with the failure's string form as message
            BaseException: Whatever error_supplier() builds, when given
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        if error_supplier is not None:
            raise error_supplier()
        raise UnwrapError(self._value)

    def failure_or_none(self) -> E | None:
        """Failure payload, or None on success."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    def match(self, *, success: Callable[[T], R], failure: Callable[[E], R]) -> R:
        """Exhaustive fold over both states."""
        return success(self._value) if self._is_ok else failure(self._value)  # type: ignore[arg-type]

    # ─── Async ─────────────────────────────────────────────────────────

    async def lift_promise(self) -> Result[U, E]:
        """Turn Result[Awaitable[X], E] into an awaited Result[X, E].

        - failure: stays a failure
        - awaitable settling to a Result: that Result is returned as-is
        - awaitable settling to a bare value: wrapped in a success
        - awaitable raising: failure carrying the exception
        - awaitable cancelled: failure carrying the CancelledError, unless the
          awaiting task itself is being cancelled, which propagates
        - success holding a non-awaitable: wrapped in a success

        Example:
            >>> async def fetch() -> Result[str, str]:
            ...     return success_result("yep")
            >>> (await success_result(fetch()).lift_promise()).get_or_raise()
            'yep'
        """
        if not self._is_ok:
            return Result(self._value, _ERR)
        if not inspect.isawaitable(self._value):
            return Result(self._value, _OK)  # type: ignore[arg-type]
        try:
            settled = await self._value
        except Exception as exc:  # noqa: BLE001 - rejection becomes a failure
            return Result(exc, _ERR)  # type: ignore[arg-type]
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            return Result(exc, _ERR)  # type: ignore[arg-type]
        return settled if isinstance(settled, Result) else Result(settled, _OK)

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __bool__(self) -> bool:
        """Truthy when succeeded."""
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Success' if self._is_ok else 'Failure'}({self._value!r})"

    __str__ = __repr__

    def __iter__(self) -> Iterator[T]:
        """Yields the success value once, or nothing on failure."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


def _handler_fault(operation: str, exc: Exception) -> Result[Any, HandlerFault]:
    cfg = get_result_settings()
    fault = HandlerFault.from_exception(operation, exc, include_trace=cfg.capture_handler_traces)
    if cfg.log_handler_faults:
        logger.warning(
            "Result.%s handler raised %s", operation, fault.exc_type,
            extra={"operation": operation, "fault_kind": fault.kind.value, "error": fault.message},
        )
    return Result(fault, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success_result(value: T) -> Result[T, Any]:
    """Construct a success."""
    return Result(value, _OK)


def failure_result(error: E) -> Result[Any, E]:
    """Construct a failure."""
    return Result(error, _ERR)
