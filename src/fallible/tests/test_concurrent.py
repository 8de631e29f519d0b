"""Tests for for_each_promise and the settlement primitive."""

from __future__ import annotations

import asyncio
import logging

import pytest

from fallible import Result, failure_result, for_each_promise, success_result
from fallible.runtime.concurrency import SettledStatus, fulfilled, gather_settled, rejected


async def _double_later(elem: int) -> Result[int, str]:
    await asyncio.sleep(0.01)
    return success_result(elem * 2)


async def _halve_even(elem: int) -> Result[int, str]:
    await asyncio.sleep(0.01)
    if elem % 2:
        raise ValueError("number must be even")
    return success_result(elem // 2)


# ═════════════════════════════════════════════════════════════════════════════
# for_each_promise
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_all_promises_succeed() -> None:
    results = await for_each_promise([1, 2, 3, 4, 5], _double_later)
    assert results.get_or_raise() == [2, 4, 6, 8, 10]


@pytest.mark.asyncio
async def test_rejections_become_failure_list() -> None:
    results = await for_each_promise([1, 2, 3, 4, 5], _halve_even)

    assert results.failed
    assert [str(e) for e in results.error] == ["number must be even"] * 3
    assert all(isinstance(e, ValueError) for e in results.error)


@pytest.mark.asyncio
async def test_resolved_failures_are_collected() -> None:
    async def handler(elem: int) -> Result[int, str]:
        return failure_result(f"bad {elem}") if elem > 1 else success_result(elem)

    assert await for_each_promise([1, 2, 3], handler) == failure_result(["bad 2", "bad 3"])


@pytest.mark.asyncio
async def test_rejection_takes_precedence_over_resolved_failure() -> None:
    async def handler(elem: int) -> Result[int, str]:
        if elem == 1:
            raise RuntimeError("rejected")
        return failure_result("resolved failure")

    results = await for_each_promise([1, 2], handler)
    assert [str(e) for e in results.error] == ["rejected"]


@pytest.mark.asyncio
async def test_output_follows_input_order() -> None:
    """Later elements finish first; output still matches input order."""
    async def handler(elem: int) -> Result[int, str]:
        await asyncio.sleep(0.05 - elem * 0.01)
        return success_result(elem)

    assert await for_each_promise([1, 2, 3, 4], handler) == success_result([1, 2, 3, 4])


@pytest.mark.asyncio
async def test_runs_concurrently_without_short_circuit() -> None:
    started: list[int] = []
    finished: list[int] = []

    async def handler(elem: int) -> Result[int, str]:
        started.append(elem)
        await asyncio.sleep(0.01)
        if elem == 0:
            raise ValueError("first fails")
        finished.append(elem)
        return success_result(elem)

    results = await for_each_promise(range(5), handler)

    assert results.failed
    assert sorted(started) == [0, 1, 2, 3, 4]
    assert sorted(finished) == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_synchronous_handler_error_counts_as_rejection() -> None:
    def handler(elem: int):
        if elem == 2:
            raise KeyError("sync")
        return _double_later(elem)

    results = await for_each_promise([1, 2, 3], handler)

    assert results.failed
    assert len(results.error) == 1
    assert isinstance(results.error[0], KeyError)


@pytest.mark.asyncio
async def test_bare_values_are_wrapped() -> None:
    async def handler(elem: int) -> int:
        return elem + 1

    assert await for_each_promise([1, 2], handler) == success_result([2, 3])


@pytest.mark.asyncio
async def test_cancelled_element_counts_as_rejection() -> None:
    """A cancelled awaitable is a rejection here, as it is for lift_promise."""
    cancelled: asyncio.Future[Result[int, str]] = asyncio.get_running_loop().create_future()
    cancelled.cancel()

    async def handler(elem: int) -> Result[int, str]:
        return await cancelled if elem == 2 else success_result(elem)

    results = await for_each_promise([1, 2, 3], handler)
    lifted = await success_result(cancelled).lift_promise()

    assert results.failed
    assert [type(e) for e in results.error] == [asyncio.CancelledError]
    assert isinstance(lifted.error, asyncio.CancelledError)


@pytest.mark.asyncio
async def test_empty_input() -> None:
    assert await for_each_promise([], _double_later) == success_result([])


@pytest.mark.asyncio
async def test_rejections_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="fallible"):
        await for_each_promise([1, 2, 3], _halve_even)

    assert any("2 of 3 pending results rejected" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_settle_failure_is_reported_as_single_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    async def broken(awaitables: object) -> list:
        for a in awaitables:  # type: ignore[attr-defined]
            a.close()
        raise RuntimeError("event loop gone")

    monkeypatch.setattr("fallible.monads.concurrent.gather_settled", broken)

    results = await for_each_promise([1, 2], _double_later)

    assert results.failed
    assert len(results.error) == 1
    assert str(results.error[0]) == "event loop gone"


# ═════════════════════════════════════════════════════════════════════════════
# gather_settled
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_gather_settled_statuses_and_indexes() -> None:
    async def ok() -> int:
        return 1

    async def fail() -> int:
        raise ValueError("x")

    settled = await gather_settled([ok(), fail(), ok()])

    assert [s.status for s in settled] == [SettledStatus.FULFILLED, SettledStatus.REJECTED, SettledStatus.FULFILLED]
    assert [s.index for s in settled] == [0, 1, 2]
    assert fulfilled(settled) == [1, 1]
    assert [str(e) for e in rejected(settled)] == ["x"]
    assert settled[1].is_rejected and not settled[1].is_fulfilled
