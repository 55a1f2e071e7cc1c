"""Count triangles drawn on a triangular lattice given as ASCII art."""

from __future__ import annotations

from collections.abc import Sequence


def _char(s: str, k: int) -> str:
    return s[k] if 0 <= k < len(s) else " "


class _Fenwick:
    def __init__(self, size: int) -> None:
        self._tree = [0] * size

    def add(self, k: int, x: int) -> None:
        while k < len(self._tree):
            self._tree[k] += x
            k += k & -k

    def prefix(self, k: int) -> int:
        total = 0
        while k:
            total += self._tree[k]
            k &= k - 1
        return total


def count_triangles(rows: int, cols: int, lines: Sequence[str]) -> int:
    """Return the number of triangles in the drawing of 2*rows-1 lines."""
    n = rows
    width = (rows + cols) // 2 + 3
    vis = [[[False, False, False] for _ in range(width)] for _ in range(n + 3)]
    m = 0
    for i in range(1, n + 1):
        top = lines[2 * (i - 1)]
        for j in range(cols):
            if (i + j) % 2 == 1:
                col = (i + j + 1) // 2
                vis[i][col][0] = _char(top, 2 * j + 1) == "-"
                m = max(m, col)
        if i == n:
            break
        mid = lines[2 * i - 1]
        for j in range(cols):
            if (i + j) % 2 == 1:
                col = (i + j + 1) // 2
                if 2 * j + 1 < len(mid):
                    vis[i][col][2] = mid[2 * j + 1] == "\\"
                if j > 0:
                    vis[i][col][1] = _char(mid, 2 * j - 1) == "/"

    right = [[0] * (m + 3) for _ in range(n + 2)]
    for i in range(1, n + 1):
        for j in range(m, 0, -1):
            if vis[i][j][0]:
                right[i][j] = right[i][j + 1] + 1

    fw = [_Fenwick(m + 2) for _ in range(n + 3)]
    left = [0] * (n + 2)
    up = [0] * (n + 2)
    down = [0] * (n + 2)
    ans = 0
    for j in range(1, m + 1):
        for i in range(1, n + 1):
            if not vis[i - 1][j - 1][2]:
                t = -1
                while True:
                    fw[i + t + 1].add(j + t + 1, 1)
                    t += 1
                    if not vis[i + t][j + t][2]:
                        break
        for i in range(1, n + 1):
            left[i] = left[i] + 1 if vis[i][j - 1][0] else 0
        for i in range(1, n + 1):
            up[i] = up[i - 1] + 1 if vis[i - 1][j][1] else 0
        for i in range(n, 0, -1):
            down[i] = down[i + 1] + 1 if vis[i][j][1] else 0
        for i in range(1, n + 1):
            ql = j - min(down[i], left[i])
            qr = j + min(up[i], right[i][j])
            ans += fw[i].prefix(qr) - fw[i].prefix(ql - 1) - 1
        for i in range(1, n + 1):
            if not vis[i][j][2]:
                t = 0
                while True:
                    fw[i - t].add(j - t, -1)
                    t += 1
                    if not vis[i - t][j - t][2]:
                        break
    return ans