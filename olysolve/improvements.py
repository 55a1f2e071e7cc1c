"""Longest run obtainable by joining an increasing and a decreasing chain of positions."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _lis_lengths(values: Iterable[int]) -> list[int]:
    """Length of the longest strictly increasing subsequence of every prefix."""
    tails: list[int] = []
    lengths = []
    for x in values:
        pos = bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
        lengths.append(len(tails))
    return lengths


def max_improvement(perm: Sequence[int]) -> int:
    """Return the best split value for a permutation of 1..n.

    With p[x] the position of value x, the answer is the largest sum of the
    longest increasing chain of p over a prefix of values and the longest
    decreasing chain over the remaining suffix.
    """
    n = len(perm)
    if sorted(perm) != list(range(1, n + 1)):
        raise ValueError("expected a permutation of 1..n")
    position = [0] * n
    for index, value in enumerate(perm, 1):
        position[value - 1] = index
    prefix = [0, *_lis_lengths(position)]
    suffix = [*_lis_lengths(reversed(position))][::-1] + [0]
    return max(a + b for a, b in zip(prefix, suffix))