"""Minimum cost of an aqueduct of semicircular arches over ground points."""

from __future__ import annotations

import math
from collections.abc import Sequence

_INF = 1 << 60


def _span(dx: int, dy: int) -> int:
    return int(2 * (dx + dy) + math.sqrt(8 * dx * dy))


def min_arch_cost(h: int, a: int, b: int, points: Sequence[tuple[int, int]]) -> int | None:
    """Return the minimal cost, or None when no valid construction exists."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    n = len(xs)
    if n == 0:
        raise ValueError("at least one point is required")

    reach_r = [n - 1] * n
    reach_l = [0] * n
    for i in range(n):
        limit = math.inf
        for j in range(i, n):
            if xs[j] - xs[i] > limit:
                reach_r[i] = j - 1
                break
            limit = min(limit, _span(xs[j] - xs[i], h - ys[j]))
        limit = math.inf
        for j in range(i, -1, -1):
            if xs[i] - xs[j] > limit:
                reach_l[i] = j + 1
                break
            limit = min(limit, _span(xs[i] - xs[j], h - ys[j]))

    dp = [a * (h - ys[0])]
    for i in range(1, n):
        best = min(
            (dp[j] + (xs[j] - xs[i]) ** 2 * b
             for j in range(i - 1, reach_l[i] - 1, -1) if i <= reach_r[j]),
            default=_INF,
        )
        dp.append(best + a * (h - ys[i]))
    return None if dp[-1] >= _INF else dp[-1]