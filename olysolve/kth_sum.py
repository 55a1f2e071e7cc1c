"""K-th smallest total cost over all pairs of distinct length-r windows.

Every cell costs a[i] when no window covers it, b[i] when one window covers
it and c[i] when both windows cover it.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


class _Select:
    """Offline counter of (inserted key + query key <= x) pairs, in event order."""

    def __init__(self) -> None:
        self.disc: list[int] = []
        self.events: list[tuple[int, int]] = []
        self.lazy = 0

    def insert(self, key: int, weight: int) -> None:
        self.events.append((key - self.lazy, weight))
        self.disc.append(key - self.lazy)

    def query(self, x: int) -> None:
        self.events.append((x - self.lazy, 0))

    def build(self) -> None:
        self.disc = sorted(set(self.disc))
        self.events = [
            (bisect_left(self.disc, key) + 1, weight) if weight else (key, weight)
            for key, weight in self.events
        ]

    def count(self, x: int) -> int:
        size = len(self.disc)
        tree = [0] * (size + 1)
        total = 0
        for key, weight in self.events:
            if weight:
                k = key
                while k <= size:
                    tree[k] += weight
                    k += k & -k
            else:
                k = bisect_right(self.disc, x + key)
                while k:
                    total += tree[k]
                    k &= k - 1
        return total


def kth_smallest(
    r: int, k: int, a: Sequence[int], b: Sequence[int], c: Sequence[int]
) -> int:
    """Return the k-th smallest cost (1-based) among all unordered window pairs."""
    n = len(a)
    if len(b) != n or len(c) != n:
        raise ValueError("a, b and c must have the same length")
    if r < 1:
        raise ValueError("window length must be positive")

    once = [bi - ai for ai, bi in zip(a, b)]
    twice = [ci - bi for bi, ci in zip(b, c)]
    base = sum(a)

    cov, inter = _Select(), _Select()
    s0 = s1 = s2 = 0
    for i in range(n):
        s1 += once[i]
        if i >= r:
            s1 -= once[i - r]
            s0 += once[i - r]
        if i >= 2 * r:
            s0 -= once[i - 2 * r]
        if i >= 2 * r - 1:
            cov.insert(s0, 1)
            cov.query(-s1)
        s2 += twice[i]
        if i >= r:
            s2 -= twice[i - r]
        if i >= 2 * r - 1:
            inter.insert(s0, -1)
        if i >= r:
            inter.query(-s1)
        if i >= r - 1:
            inter.insert(s2, 1)
            inter.lazy += once[i - r + 1] - twice[i - r + 1]
    cov.build()
    inter.build()

    low, high = 0, sum(once) + sum(twice)
    while low < high:
        mid = (low + high) // 2
        if cov.count(mid) + inter.count(mid) < k:
            low = mid + 1
        else:
            high = mid
    return low + base