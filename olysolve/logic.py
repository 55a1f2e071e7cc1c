"""Implication formulas whose satisfying assignments are exactly three given rows."""

from __future__ import annotations

from collections.abc import Sequence


def _literal(x: int) -> str:
    return ("!x" if x < 0 else "x") + str(abs(x))


def build_implications(rows: Sequence[Sequence[int]]) -> list[str] | None:
    """Return implications "a -> b" over x1..xn describing the rows, or None.

    The three rows are bit vectors of equal length; None means no such set of
    two-literal implications was found.
    """
    if len(rows) != 3:
        raise ValueError("exactly three rows are required")
    n = len(rows[0])
    if any(len(row) != n for row in rows):
        raise ValueError("all rows must have the same length")
    columns = [0] * n
    for i, row in enumerate(rows):
        for j, bit in enumerate(row):
            if bit not in (0, 1):
                raise ValueError(f"invalid bit {bit!r}")
            columns[j] |= bit << i

    anchor = [0, 0, 0]
    for var, value in enumerate(columns, 1):
        for j in range(3):
            if value == 1 << j:
                anchor[j] = var
            elif value == 7 - (1 << j):
                anchor[j] = -var
    if anchor.count(0) != 1:
        return None

    result: list[str] = []

    def both_ways(x: int, y: int) -> None:
        result.append(f"{_literal(x)} -> {_literal(y)}")
        result.append(f"{_literal(y)} -> {_literal(x)}")

    for var, value in enumerate(columns, 1):
        if value == 0:
            result.append(f"{_literal(var)} -> {_literal(-var)}")
        elif value == 7:
            result.append(f"{_literal(-var)} -> {_literal(var)}")
        else:
            for j in range(3):
                if value == 1 << j:
                    both_ways(var, anchor[j])
                elif value == 7 - (1 << j):
                    both_ways(-var, anchor[j])

    for i in range(3):
        for j in range(i):
            if anchor[i] and anchor[j]:
                result.append(f"{_literal(anchor[i])} -> {_literal(-anchor[j])}")
                break
    return result