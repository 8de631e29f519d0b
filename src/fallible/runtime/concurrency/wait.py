"""Wait-for-all-then-partition primitive for concurrent awaitables.

``gather_settled`` is the asyncio counterpart of JavaScript's
``Promise.allSettled()``: every awaitable runs to completion, none is
cancelled because a sibling failed, and each outcome is reported with its
status and original position.

Example:
    >>> settled = await gather_settled([fetch(1), fetch(2)])
    >>> for s in settled:
    ...     print(s.index, s.value if s.is_fulfilled else s.error)
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SettledStatus(StrEnum):
    """Status of a settled operation."""
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class Settled(Generic[T]):
    """Outcome of one awaitable after settlement.

    Attributes:
        status: 'fulfilled' or 'rejected'
        index: Position of the awaitable in the input
        value: Resolved value if fulfilled
        error: Exception if rejected
    """

    status: SettledStatus
    index: int
    value: T | None = None
    error: BaseException | None = None

    @property
    def is_fulfilled(self) -> bool:
        return self.status == SettledStatus.FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.status == SettledStatus.REJECTED


async def gather_settled(awaitables: Iterable[Awaitable[T]]) -> list[Settled[T]]:
    """Run all awaitables concurrently and wait for every one to settle.

    Never raises for an individual failure. The returned list is in input
    order, whatever order the awaitables finished in.
    """
    tasks = [asyncio.ensure_future(a) for a in awaitables]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)
    return [
        Settled(SettledStatus.REJECTED, i, error=out) if isinstance(out, BaseException)
        else Settled(SettledStatus.FULFILLED, i, value=out)
        for i, out in enumerate(outcomes)
    ]


def fulfilled(settled: Iterable[Settled[T]]) -> list[T]:
    """Values of the fulfilled entries, in order."""
    return [s.value for s in settled if s.is_fulfilled]  # type: ignore[misc]


def rejected(settled: Iterable[Settled[T]]) -> list[BaseException]:
    """Errors of the rejected entries, in order."""
    return [s.error for s in settled if s.is_rejected]  # type: ignore[misc]
