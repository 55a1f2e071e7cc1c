"""Highest single peak that a limited amount of earth can build on a landscape."""

from __future__ import annotations

import itertools
from bisect import bisect_right
from collections.abc import Sequence

_MAX_HEIGHT = 200000


def _feasible(height: int, w: list[int], prefix: list[int], budget: int) -> bool:
    n = len(w)
    right = [-1] * (n + 1)
    left = [-1] * (n + 1)

    keys: list[int] = []
    where: list[int] = []
    for i in range(n, 0, -1):
        push = w[i - 1] + i
        while keys and -keys[-1] <= push:
            keys.pop()
            where.pop()
        keys.append(-push)
        where.append(i)
        idx = bisect_right(keys, -(height + i))
        right[i] = where[idx - 1] - 1 if idx else -1

    keys.clear()
    where.clear()
    for i in range(1, n + 1):
        push = w[i - 1] - i
        while keys and -keys[-1] <= push:
            keys.pop()
            where.pop()
        keys.append(-push)
        where.append(i)
        idx = bisect_right(keys, -(height - i))
        left[i] = where[idx - 1] + 1 if idx else -1

    for i in range(1, n + 1):
        lo, hi = left[i], right[i]
        if lo == -1 or hi == -1:
            continue
        total = -(prefix[hi] - prefix[lo - 1])
        total += (i - lo + 1) * (2 * height - (i - lo)) // 2
        total += (hi - i + 1) * (2 * height - (hi - i)) // 2
        total -= height
        if total <= budget:
            return True
    return False


def max_peak(v: int, heights: Sequence[int]) -> int:
    """Return the greatest peak height reachable with v units of earth.

    The raised peak falls by one per column on each side and must meet the
    existing ground on both sides; heights above 200000 are not considered.
    """
    w = list(heights)
    if not w:
        raise ValueError("the landscape must have at least one column")
    prefix = [0, *itertools.accumulate(w)]
    low, high = max(w), _MAX_HEIGHT
    while low < high:
        mid = (low + high + 1) // 2
        if _feasible(mid, w, prefix, v):
            low = mid
        else:
            high = mid - 1
    return low