"""Solver correctness against an exhaustive dynamic-programming reference."""

from __future__ import annotations

import pytest

from packer.models import DENOMINATIONS
from packer.solver import decompose, min_boxes

LIMIT = 2000


def _reference_table(limit: int) -> list[int | None]:
    best: list[int | None] = [None] * (limit + 1)
    best[0] = 0
    for n in range(1, limit + 1):
        options = [best[n - d] for d in DENOMINATIONS if d <= n and best[n - d] is not None]
        best[n] = min(options) + 1 if options else None
    return best


REFERENCE = _reference_table(LIMIT)


def test_matches_reference_up_to_limit() -> None:
    for n in range(LIMIT + 1):
        count, ok = min_boxes(n)
        if REFERENCE[n] is None:
            assert not ok, f"{n} should be infeasible"
        else:
            assert ok, f"{n} should be feasible"
            assert count == REFERENCE[n], f"wrong count for {n}"


def test_zero_needs_no_boxes() -> None:
    assert min_boxes(0) == (0, True)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_tiny_targets_are_infeasible(n: int) -> None:
    assert min_boxes(n)[1] is False


def test_negative_target_is_infeasible() -> None:
    assert min_boxes(-5) == (0, False)
    assert decompose(-5) is None


def test_count_never_exceeds_all_fives_bound() -> None:
    for n in range(LIMIT + 1):
        count, ok = min_boxes(n)
        if ok:
            assert count <= -(-n // 5)


def test_prefers_large_box_over_many_small_ones() -> None:
    # 64 = 59 + 5, not 4 x 16
    assert min_boxes(64) == (2, True)
    assert decompose(64).counts == {59: 1, 42: 0, 16: 0, 5: 1}


@pytest.mark.parametrize("n", [5, 16, 42, 59])
def test_single_box(n: int) -> None:
    assert min_boxes(n) == (1, True)


def test_decompose_agrees_with_min_boxes() -> None:
    for n in range(0, 600):
        count, ok = min_boxes(n)
        parts = decompose(n)
        if not ok:
            assert parts is None
            continue
        assert parts.amount == n
        assert parts.total == count
        assert all(v >= 0 for v in parts.counts.values())


def test_large_target_stays_exact() -> None:
    n = 20_011
    count, ok = min_boxes(n)
    parts = decompose(n)
    assert ok
    assert parts.amount == n
    assert parts.total == count
    # Lower bound: every box holds at most 59.
    assert count >= -(-n // 59)
