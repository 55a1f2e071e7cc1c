"""Online minimum-cost matching of arriving moles to holes in a binary tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_INF = 1 << 29


def process_moles(counts: Sequence[int], visits: Iterable[int]) -> list[int]:
    """Return the minimal total travel distance after each mole arrives.

    Vertex i (1-based) of the heap-shaped tree has counts[i-1] holes; every
    visit names the vertex where the next mole appears.
    """
    n = len(counts)
    if any(c < 0 for c in counts):
        raise ValueError("hole counts must be non-negative")
    capacity = [0, *counts]
    size = 2 * n + 2
    balance = [0] * size
    value = [_INF] * size
    best = [0] * size
    total = 0

    def update(o: int) -> None:
        left, right = 2 * o, 2 * o + 1
        if value[left] < value[right]:
            value[o], best[o] = value[left], best[left]
        else:
            value[o], best[o] = value[right], best[right]
        if capacity[o] and value[o] > 0:
            value[o], best[o] = 0, o
        value[o] += -1 if balance[o] < 0 else 1

    def toggle(o: int, x: int) -> None:
        nonlocal total
        while o:
            total -= abs(balance[o])
            balance[o] += x
            total += abs(balance[o])
            update(o)
            o >>= 1

    for i in range(n, 0, -1):
        update(i)

    results = []
    for p in visits:
        if not 1 <= p <= n:
            raise ValueError(f"vertex {p} is outside the tree")
        toggle(p, -1)
        hole = best[1]
        if hole == 0:
            raise ValueError("no free hole is left")
        capacity[hole] -= 1
        toggle(hole, 1)
        results.append(total)
    return results