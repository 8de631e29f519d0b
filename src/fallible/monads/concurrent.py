"""Asyncio bridge: many Result-producing awaitables into one Result."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from fallible.foundation.errors import FaultKind
from fallible.runtime.concurrency import fulfilled, gather_settled, rejected

from .collect import for_each_result
from .result import _ERR, _OK, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

V = TypeVar("V")
S = TypeVar("S")
F = TypeVar("F")

logger = logging.getLogger("fallible.monads.concurrent")


async def _invoke(handler: Callable[[V], Awaitable[Result[S, F]]], element: V) -> Result[S, F]:
    # a handler raising before returning its awaitable counts as a rejection of that element
    outcome = await handler(element)
    return outcome if isinstance(outcome, Result) else Result(outcome, _OK)


async def for_each_promise(
    elements: Iterable[V],
    handler: Callable[[V], Awaitable[Result[S, F]]],
) -> Result[list[S], list[Any]]:
    """Run handler over every element concurrently and combine the outcomes.

    All awaitables are launched at once (no concurrency limit) and awaited
    until every one has settled; one rejection does not cancel the others.

    Returns:
        - failure with the rejection exceptions, if any awaitable raised
        - otherwise for_each_result over the resolved Results: success with
          every value, or failure with every failure payload

    Both lists follow input order.

    Example:
        >>> async def halve(n: int) -> Result[int, str]:
        ...     return success_result(n // 2) if n % 2 == 0 else failure_result("odd")
        >>> await for_each_promise([2, 4], halve)
        Success([1, 2])
    """
    items = list(elements)
    try:
        settled = await gather_settled(_invoke(handler, e) for e in items)
    except Exception as exc:
        logger.exception(
            "failed to settle %d pending results", len(items),
            extra={"fault_kind": FaultKind.AGGREGATION.value},
        )
        return Result([exc], _ERR)

    if reasons := rejected(settled):
        logger.info(
            "%d of %d pending results rejected", len(reasons), len(items),
            extra={"fault_kind": FaultKind.AGGREGATION.value},
        )
        return Result(reasons, _ERR)
    return for_each_result(fulfilled(settled))
