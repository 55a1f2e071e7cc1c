"""Recover the smallest pattern whose repeated 3x3 XOR-stamping yields a grid."""

from __future__ import annotations

from collections.abc import Sequence


def _stamp(a: list[list[int]], i: int, j: int, bit: int) -> None:
    if bit:
        for row in a[i:i + 3]:
            row[j] ^= 1
            row[j + 1] ^= 1
            row[j + 2] ^= 1


def _all_zero(grid: list[list[int]]) -> bool:
    return not any(any(row) for row in grid)


def reconstruct(grid: Sequence[str]) -> list[str]:
    """Return the trimmed rows ('#'/'.') of the most reduced pattern."""
    n = len(grid)
    m = len(grid[0]) if n else 0
    a = [[0] * (m + 4) for _ in range(n + 4)]
    for i, line in enumerate(grid):
        for j, ch in enumerate(line[:m]):
            a[i + 2][j + 2] = int(ch == "#")

    while True:
        b = [[0] * (m + 4) for _ in range(n + 4)]
        saved = [row[:] for row in a]
        for i in range(n):
            for j in range(m):
                b[i + 3][j + 3] = a[i + 2][j + 2]
                _stamp(a, i + 2, j + 2, b[i + 3][j + 3])

        filled = [(i, j) for i, row in enumerate(a) for j, v in enumerate(row) if v]
        if filled:
            px = min(i for i, _ in filled)
            py = min(j for _, j in filled)
            if px < n + 2 and py < m + 2:
                a[px][py] ^= 1
                for i in range(px - 2, n):
                    for j in range(py - 2, m):
                        t = a[i + 2][j + 2]
                        b[i + 3][j + 3] ^= t
                        _stamp(a, i + 2, j + 2, t)

        if _all_zero(a) and not _all_zero(b):
            a = b
        else:
            a = saved
            break

    cells = [(i, j) for i, row in enumerate(a) for j, v in enumerate(row) if v]
    if not cells:
        return []
    xl = min(i for i, _ in cells)
    xr = max(i for i, _ in cells)
    yl = min(j for _, j in cells)
    yr = max(j for _, j in cells)
    return ["".join(".#"[v] for v in a[i][yl:yr + 1]) for i in range(xl, xr + 1)]