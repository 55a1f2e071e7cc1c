"""Fewest operations to align the cyclic rotations of seven-digit numbers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

_REPDIGIT = 1111111
_LIMIT = 10**7
_INF = 10**9


def _rotation_rank(value: int) -> int:
    rotations = [value]
    for _ in range(6):
        prev = rotations[-1]
        rotations.append(prev * 10 - prev // 1000000 * 9999999)
    return rotations.index(max(rotations))


def min_operations(values: Sequence[int]) -> int:
    """Return the minimal number of operations for the given numbers.

    Numbers are read as seven digits with leading zeros; numbers whose
    digits are all equal are ignored.
    """
    marks = [0]
    for v in values:
        if not 0 <= v < _LIMIT:
            raise ValueError(f"value {v} does not fit in seven digits")
        if v % _REPDIGIT:
            marks.append(_rotation_rank(v))
    marks.append(0)

    counts = [0] * 7
    for a, b in pairwise(marks):
        counts[(a - b) % 7] += 1

    answer = 0
    digit = [0] * 4
    for i in range(1, 4):
        u = min(counts[i], counts[7 - i])
        answer += u
        counts[i] -= u
        counts[7 - i] -= u
        if counts[7 - i]:
            counts[i], counts[7 - i] = counts[7 - i], counts[i]
            digit[i] = 7 - i
        else:
            digit[i] = i

    x, y, z = counts[1], counts[2], counts[3]
    layers = [[[_INF] * (z + 1) for _ in range(y + 1)] for _ in range(3)]
    for i in range(x + 1):
        cur = layers[i % 3]
        prev1 = layers[(i - 1) % 3]
        prev2 = layers[(i - 2) % 3]
        for j in range(y + 1):
            for k in range(z + 1):
                best = 0 if i == j == k == 0 else _INF
                if (i * digit[1] + j * digit[2] + k * digit[3]) % 7:
                    if i:
                        best = min(best, prev1[j][k] + 1)
                    if j:
                        best = min(best, cur[j - 1][k] + 1)
                    if k:
                        best = min(best, cur[j][k - 1] + 1)
                else:
                    if i and j:
                        best = min(best, prev1[j - 1][k] + 1)
                    if j and k:
                        best = min(best, cur[j - 1][k - 1] + 1)
                    if k and i:
                        best = min(best, prev1[j][k - 1] + 1)
                    if i >= 2:
                        best = min(best, prev2[j][k] + 1)
                    if j >= 2:
                        best = min(best, cur[j - 2][k] + 1)
                    if k >= 2:
                        best = min(best, cur[j][k - 2] + 1)
                cur[j][k] = best
    return layers[x % 3][y][z] + answer