"""Area covered by axis-aligned squares and diagonal diamonds on a grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass
class _Coverage:
    """Cell coverage counts for a rectangular block of unit cells."""

    row0: int
    col0: int
    rows: list[list[int]]

    def covered(self, i: int, j: int) -> bool:
        r = i - self.row0
        c = j - self.col0
        if 0 <= r < len(self.rows):
            row = self.rows[r]
            if 0 <= c < len(row):
                return row[c] > 0
        return False


def _coverage(rects: list[tuple[int, int, int, int]]) -> _Coverage:
    """Build coverage from inclusive cell ranges (r0, r1, c0, c1)."""
    if not rects:
        return _Coverage(0, 0, [])
    row0 = min(r[0] for r in rects)
    row1 = max(r[1] for r in rects)
    col0 = min(r[2] for r in rects)
    col1 = max(r[3] for r in rects)
    height = row1 - row0 + 2
    width = col1 - col0 + 2
    diff = [[0] * width for _ in range(height)]
    for r0, r1, c0, c1 in rects:
        diff[r0 - row0][c0 - col0] += 1
        diff[r0 - row0][c1 - col0 + 1] -= 1
        diff[r1 - row0 + 1][c0 - col0] -= 1
        diff[r1 - row0 + 1][c1 - col0 + 1] += 1
    rows = []
    running = [0] * width
    for line in diff:
        running = [a + b for a, b in zip(running, accumulate(line))]
        rows.append(running)
    return _Coverage(row0, col0, rows)


def covered_area(shapes: Sequence[tuple[str, int, int, int]]) -> float:
    """Return the area of the union of the shapes.

    Each shape is (kind, x, y, d): kind 'A' is a square of side d centred at
    (x, y), kind 'B' a diamond with diagonals d centred at (x, y).
    """
    squares = []
    diamonds = []
    cells = []
    for kind, x, y, d in shapes:
        h = d // 2
        if kind not in ("A", "B"):
            raise ValueError(f"unknown shape kind {kind!r}")
        if h <= 0:
            continue
        box = (x - h, x + h - 1, y - h, y + h - 1)
        cells.append(box)
        if kind == "A":
            squares.append(box)
        else:
            u, v = x + y, x - y
            diamonds.append((u - h, u + h - 1, v - h, v + h - 1))
    if not cells:
        return 0.0

    square_cover = _coverage(squares)
    diamond_cover = _coverage(diamonds)
    quarters = 0
    for cx in range(min(c[0] for c in cells), max(c[1] for c in cells) + 1):
        for cy in range(min(c[2] for c in cells), max(c[3] for c in cells) + 1):
            if square_cover.covered(cx, cy):
                quarters += 4
                continue
            u, v = cx + cy, cx - cy
            quarters += sum(
                diamond_cover.covered(a, b)
                for a, b in ((u, v), (u, v - 1), (u + 1, v), (u + 1, v - 1))
            )
    return quarters * 0.25