"""Aggregation of many Results into one.

Two failure policies:
- all-or-nothing: result_from_all, for_each_result, for_each_element
- best-effort: result_from_any (failures dropped, never fails)

reduce_to_result folds values through a Result-producing reducer and keeps
going past failing steps so every failure is reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .result import _ERR, _OK, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
V = TypeVar("V")
S = TypeVar("S")


def result_from_all(results: Iterable[Result[T, Any]]) -> Result[list[T], str]:
    """[Result[T,E]] → Result[[T], str]. Success only if every input succeeded.

    Example:
        >>> result_from_all([success_result(1), success_result(2)]).get_or_raise()
        [1, 2]
        >>> result_from_all([success_result(1), failure_result("x")]).failure_or_none()
        'All results were not successful; number_failed: 1'
    """
    return Result.from_all(results)


def result_from_any(results: Iterable[Result[T, Any]]) -> Result[list[T], str]:
    """[Result[T,E]] → Result[[T], str]. Always a success; failing inputs are dropped."""
    return Result.from_any(results)


def _partition(results: Iterable[Result[U, F]]) -> Result[list[U], list[F]]:
    values: list[U] = []
    failures: list[F] = []
    for r in results:
        (values if r._is_ok else failures).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not failures else Result(failures, _ERR)


def for_each_result(
    results: Iterable[Result[T, E]],
    handler: Callable[[Result[T, E]], Result[U, F]] | None = None,
) -> Result[list[U], list[F]]:
    """Transform each Result, then collect.

    Success with every transformed value (input order) iff all transformed
    Results succeeded, otherwise failure with ALL failure payloads (input order).
    handler defaults to identity.

    Example:
        >>> for_each_result(
        ...     [success_result("an apple"), failure_result("bad")],
        ...     lambda r: r.map(lambda s: len(s.split())),
        ... ).failure_or_none()
        ['bad']
    """
    if handler is None:
        return _partition(results)  # type: ignore[arg-type]
    return _partition(handler(r) for r in results)


def for_each_element(
    elements: Iterable[V],
    handler: Callable[[V], Result[S, F]],
) -> Result[list[S], list[F]]:
    """Like for_each_result, over raw elements with a Result-producing handler.

    Example:
        >>> for_each_element([1, 2, 3], lambda e: failure_result("three sucks") if e == 3 else success_result(2 * e))
        Failure(['three sucks'])
    """
    return _partition(handler(e) for e in elements)


def reduce_to_result(
    values: Iterable[V],
    reducer: Callable[[S, V], Result[S, F]],
    initial_value: S,
    *,
    partial: bool = False,
) -> Result[S, list[F]]:
    """Left fold with a reducer that may fail.

    A failing step records its payload and leaves the accumulator as it was;
    the fold always visits every value.

    Outcome:
        partial=False: failure with every payload if any step failed, else
            success with the final accumulator (initial_value for no input).
        partial=True: failure only if steps failed and none succeeded;
            otherwise success with the accumulator built by the successful steps.
    """
    acc = initial_value
    failures: list[F] = []
    any_success = False
    for value in values:
        step = reducer(acc, value)
        if step._is_ok:
            acc, any_success = step._value, True  # type: ignore[assignment]
        else:
            failures.append(step._value)  # type: ignore[arg-type]

    if failures and not (partial and any_success):
        return Result(failures, _ERR)
    return Result(acc, _OK)
