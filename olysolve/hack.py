"""Count subarrays whose bitwise XOR equals their bitwise AND."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def count_and_xor_pairs(values: Sequence[int]) -> int:
    """Return the number of subarrays with XOR of elements equal to their AND."""
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    n = len(values)
    xs = [0] * (n + 1)
    for i, a in enumerate(values, 1):
        xs[i] = xs[i - 1] ^ a

    pending: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    segments: list[tuple[int, int]] = []
    for i, a in enumerate(values, 1):
        merged: list[tuple[int, int]] = []
        for and_value, start in [(v & a, s) for v, s in segments] + [(a, i)]:
            if not merged or merged[-1][0] != and_value:
                merged.append((and_value, start))
        segments = merged
        for j, (and_value, start) in enumerate(segments):
            end = i if j + 1 == len(segments) else segments[j + 1][1] - 1
            key = xs[i] ^ and_value
            pending[start - 1].append((key, -1))
            pending[end].append((key, 1))

    seen: Counter[int] = Counter()
    total = 0
    for i in range(1, n + 1):
        seen[xs[i - 1]] += 1
        for key, sign in pending[i]:
            total += sign * seen[key]
    return total