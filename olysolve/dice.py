"""Expected value from distributing units among counters, counting the top r."""

from __future__ import annotations

from math import comb


def _neg_binom(k: int, n: int) -> int:
    if k == 0:
        return int(n == 0)
    return comb(n + k - 1, n)


def expected_sum(n: int, d: int, r: int) -> float:
    """Return the expected value for n counters, d units and r selected."""
    total = 0
    for i in range(d):
        top = min(n, d // (i + 1))
        for j in range(1, top + 1):
            alternating = sum(
                (-1) ** k * _neg_binom(n, d - (j + k) * (i + 1)) * comb(n - j, k)
                for k in range(top - j + 1)
            )
            total += alternating * comb(n, j) * min(j, r)
    return total / comb(n + d - 1, d) + r