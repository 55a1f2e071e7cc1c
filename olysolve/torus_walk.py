"""A walker on a toroidal grid that always steps to the best cell of the next column."""

from __future__ import annotations

from collections.abc import Sequence

_Position = tuple[int, int]


class TorusWalker:
    """Walk a grid that wraps around in both directions.

    From cell (x, y) the walker steps into column y + 1, choosing among rows
    x - 1, x and x + 1 the cell with the largest value; ties go to the larger
    row index. The walker starts in the top-left cell.
    """

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if not grid or not grid[0]:
            raise ValueError("the grid must have at least one cell")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all grid rows must have the same length")
        self._cells = [list(row) for row in grid]
        self._rows = len(grid)
        self._cols = width
        self._pos: _Position = (0, 0)

    def _next(self, pos: _Position) -> _Position:
        x, y = pos
        ny = (y + 1) % self._cols
        best = (0, 0)
        for row in ((x - 1) % self._rows, x, (x + 1) % self._rows):
            best = max(best, (self._cells[row][ny], row))
        return best[1], ny

    def move(self, k: int) -> tuple[int, int]:
        """Take k steps and return the new 1-based (row, column)."""
        if k < 0:
            raise ValueError("the number of steps must be non-negative")
        seen: dict[_Position, int] = {}
        path: list[_Position] = []
        pos = self._pos
        step = 0
        while step < k:
            if pos in seen:
                start = seen[pos]
                pos = path[start + (k - step) % (step - start)]
                break
            seen[pos] = step
            path.append(pos)
            pos = self._next(pos)
            step += 1
        self._pos = pos
        return pos[0] + 1, pos[1] + 1

    def change(self, x: int, y: int, z: int) -> None:
        """Set the value of the 1-based cell (x, y) to z."""
        if not (1 <= x <= self._rows and 1 <= y <= self._cols):
            raise ValueError(f"cell ({x}, {y}) is outside the grid")
        self._cells[x - 1][y - 1] = z