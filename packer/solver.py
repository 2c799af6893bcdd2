"""Exact minimum-box search over the fixed box sizes.

Strategy
--------
Enumerate the number of the two largest boxes (59 and 42); their ranges are
short because the boxes are big. The remainder ``r`` is closed with 16s and
5s without another loop: since ``16 % 5 == 1``, ``r - 16*c`` is divisible by 5
exactly when ``c % 5 == r % 5``. Using as many 16s as possible minimises the
count, so ``c`` is the largest value ``<= r // 16`` in that residue class and
``d = (r - 16*c) // 5``.

Cost is O((N/59) * (N/42)) per target, independent of N/16 and N/5.
All functions are pure and safe to call from any worker.
"""
from __future__ import annotations

from typing import Iterator

from packer.models import DENOMINATIONS, Decomposition

_BIG, _MID, _SMALL, _UNIT = DENOMINATIONS


def _close_remainder(r: int) -> tuple[int, int] | None:
    """Return ``(c, d)`` with ``16c + 5d == r`` and maximal ``c``, or None."""
    max_c = r // _SMALL
    c = max_c - (max_c - r % _UNIT) % _UNIT
    if c < 0:
        return None
    return c, (r - _SMALL * c) // _UNIT


def _candidates(target: int) -> Iterator[tuple[int, int, int, int]]:
    for a in range(target // _BIG + 1):
        r1 = target - _BIG * a
        for b in range(r1 // _MID + 1):
            closed = _close_remainder(r1 - _MID * b)
            if closed is not None:
                yield a, b, closed[0], closed[1]


def _best(target: int) -> tuple[int, int, int, int] | None:
    if target < 0:
        return None
    best = None
    best_total = 0
    for cand in _candidates(target):
        total = sum(cand)
        if best is None or total < best_total:
            best, best_total = cand, total
    return best


def min_boxes(target: int) -> tuple[int, bool]:
    """Minimum number of boxes summing exactly to ``target``.

    Args:
        target: Amount to pack. Negative values are infeasible.

    Returns:
        ``(count, True)`` when an exact packing exists, ``(0, False)``
        otherwise. ``min_boxes(0) == (0, True)``.
    """
    best = _best(target)
    if best is None:
        return 0, False
    return sum(best), True


def decompose(target: int) -> Decomposition | None:
    """Box counts of an optimal packing of ``target`` (None if infeasible)."""
    best = _best(target)
    if best is None:
        return None
    return Decomposition(counts=dict(zip(DENOMINATIONS, best)))
