"""Tests for aggregating lists of Results."""

from __future__ import annotations

from fallible import (
    Result,
    failure_result,
    for_each_element,
    for_each_result,
    reduce_to_result,
    result_from_all,
    result_from_any,
    success_result,
)

SENTENCES = [
    "an apple",
    "busy bumble bees",
    "changing clothing causes constipation",
    "doorknobs doorbells dinner ding dong",
]


def _word_count(result: Result[str, str]) -> Result[int, str]:
    return result.map(lambda s: len(s.split()))


# ═════════════════════════════════════════════════════════════════════════════
# result_from_all / result_from_any
# ═════════════════════════════════════════════════════════════════════════════


def test_from_all_successes() -> None:
    """All successes combine in input order."""
    combined = result_from_all([success_result(1), success_result(2), success_result(3)])
    assert combined.get_or_raise() == [1, 2, 3]


def test_from_all_with_failure() -> None:
    combined = result_from_all([success_result(1), failure_result("x"), failure_result("y")])

    assert combined.failed
    assert combined.error == "All results were not successful; number_failed: 2"


def test_from_all_empty() -> None:
    assert result_from_all([]) == success_result([])


def test_from_any_drops_failures() -> None:
    combined = result_from_any([success_result(1), failure_result("x"), success_result(3)])
    assert combined.get_or_raise() == [1, 3]


def test_from_any_never_fails() -> None:
    assert result_from_any([failure_result("a"), failure_result("b")]) == success_result([])


def test_static_variants_match_functions() -> None:
    results = [success_result(1), failure_result("x")]
    assert Result.from_all(results) == result_from_all(results)
    assert Result.from_any(results) == result_from_any(results)


def test_from_all_accepts_generator() -> None:
    assert result_from_all(success_result(i) for i in range(3)) == success_result([0, 1, 2])


# ═════════════════════════════════════════════════════════════════════════════
# for_each_result / for_each_element
# ═════════════════════════════════════════════════════════════════════════════


def test_for_each_result_transforms_and_combines() -> None:
    combined = for_each_result([success_result(s) for s in SENTENCES], _word_count)
    assert combined.get_or_raise() == [2, 3, 4, 5]


def test_for_each_result_keeps_every_failure() -> None:
    """Unlike result_from_all, each failure payload is preserved, in order."""
    results: list[Result[str, str]] = [
        success_result("an apple"),
        success_result("busy bumble bees"),
        failure_result("doorknobs doorbells dinner ding dong"),
        failure_result("oops only one operation ordinarily opens"),
    ]
    combined = for_each_result(results, _word_count)

    assert combined.failed
    assert combined.get_or_none() is None
    assert combined.error == [
        "doorknobs doorbells dinner ding dong",
        "oops only one operation ordinarily opens",
    ]


def test_for_each_result_handler_can_fail() -> None:
    combined = for_each_result(
        [success_result(1), success_result(2)],
        lambda r: r.filter(lambda v: v > 1, lambda: "too small"),
    )
    assert combined == failure_result(["too small"])


def test_for_each_result_identity_default() -> None:
    assert for_each_result([success_result(1), success_result(2)]) == success_result([1, 2])
    assert for_each_result([failure_result("a"), success_result(2)]) == failure_result(["a"])


def test_for_each_element_successes() -> None:
    result = for_each_element([1, 2, 3, 4, 5], lambda e: success_result(2 * e))
    assert result.get_or_default([]) == [2, 4, 6, 8, 10]


def test_for_each_element_fails_if_any_fails() -> None:
    result = for_each_element(
        [1, 2, 3, 4, 5],
        lambda e: failure_result("three sucks") if e == 3 else success_result(2 * e),
    )

    assert result.failed
    assert result.error == ["three sucks"]


def test_for_each_element_empty() -> None:
    assert for_each_element([], success_result) == success_result([])


# ═════════════════════════════════════════════════════════════════════════════
# reduce_to_result
# ═════════════════════════════════════════════════════════════════════════════


def test_reduce_accumulates() -> None:
    reduced = reduce_to_result(["a", "b"], lambda acc, v: success_result([*acc, v]), [])
    assert reduced.get_or_raise() == ["a", "b"]


def test_reduce_word_counts() -> None:
    reduced = reduce_to_result(SENTENCES, lambda acc, s: success_result([*acc, len(s.split())]), [])
    assert reduced.get_or_raise() == [2, 3, 4, 5]


def test_reduce_reports_failures() -> None:
    def reducer(acc: list[int], s: str) -> Result[list[int], str]:
        if s.startswith("d"):
            return failure_result("oops only one operation ordinarily opens")
        return success_result([*acc, len(s.split())])

    reduced = reduce_to_result(SENTENCES, reducer, [])

    assert reduced.failed
    assert reduced.get_or_none() is None
    assert reduced.error == ["oops only one operation ordinarily opens"]


def test_reduce_always_failing_collects_one_failure_per_input() -> None:
    reduced = reduce_to_result([1, 2, 3], lambda acc, v: failure_result(f"bad {v}"), 0)
    assert reduced.error == ["bad 1", "bad 2", "bad 3"]


def test_reduce_failed_step_keeps_accumulator() -> None:
    seen: list[int] = []

    def reducer(acc: int, v: int) -> Result[int, str]:
        seen.append(acc)
        return failure_result("odd") if v % 2 else success_result(acc + v)

    reduce_to_result([2, 3, 4], reducer, 0)
    assert seen == [0, 2, 2]


def test_reduce_unchanged_accumulator_is_still_success() -> None:
    """An accumulator that ends equal to the initial value is not a failure."""
    reduced = reduce_to_result([0, 0], lambda acc, v: success_result(acc + v), 0)
    assert reduced == success_result(0)


def test_reduce_empty_input() -> None:
    assert reduce_to_result([], lambda acc, v: success_result(acc + v), 10) == success_result(10)


def test_reduce_none_accumulator_is_success() -> None:
    assert reduce_to_result([1], lambda acc, v: success_result(None), None) == success_result(None)


def test_reduce_partial_keeps_successful_steps() -> None:
    reducer = lambda acc, v: failure_result("odd") if v % 2 else success_result(acc + v)  # noqa: E731

    assert reduce_to_result([1, 2, 3, 4], reducer, 0, partial=True) == success_result(6)
    assert reduce_to_result([1, 3], reducer, 0, partial=True) == failure_result(["odd", "odd"])
    assert reduce_to_result([1, 2, 3, 4], reducer, 0) == failure_result(["odd", "odd"])
