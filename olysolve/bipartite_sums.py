"""Count pairs of matchable vertex sets on both sides whose weights reach a threshold."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def _good_subset_sums(adjacency: list[int], weights: Sequence[int]) -> list[int]:
    """Sorted weights of subsets that, with all their subsets, meet Hall's condition."""
    size = 1 << len(adjacency)
    reach = [0] * size
    total = [0] * size
    good = [True] * size
    for s in range(1, size):
        low = s & -s
        j = low.bit_length() - 1
        rest = s ^ low
        reach[s] = reach[rest] | adjacency[j]
        total[s] = total[rest] + weights[j]
        ok = s.bit_count() <= reach[s].bit_count()
        t = s
        while ok and t:
            bit = t & -t
            ok = good[s ^ bit]
            t ^= bit
        good[s] = ok
    return sorted(total[s] for s in range(size) if good[s])


def count_strong_pairs(
    matrix: Sequence[str],
    left: Sequence[int],
    right: Sequence[int],
    threshold: int,
) -> int:
    """Return how many pairs of matchable left and right sets weigh at least threshold.

    ``matrix[i][j] == '1'`` joins left vertex i to right vertex j.
    """
    n, m = len(left), len(right)
    if len(matrix) != n or any(len(row) != m for row in matrix):
        raise ValueError("matrix shape does not match the weight lists")
    left_adj = [0] * n
    right_adj = [0] * m
    for i, row in enumerate(matrix):
        for j, ch in enumerate(row):
            if ch == "1":
                left_adj[i] |= 1 << j
                right_adj[j] |= 1 << i
            elif ch != "0":
                raise ValueError(f"invalid matrix entry {ch!r}")
    xs = _good_subset_sums(left_adj, left)
    ys = _good_subset_sums(right_adj, right)
    return sum(len(xs) - bisect_left(xs, threshold - y) for y in ys)