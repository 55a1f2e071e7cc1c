"""Numbers whose decimal digits are all 0 or 1 and reappear as their low binary bits."""

from __future__ import annotations


def nth_number(goal: int) -> str:
    """Return the goal-th (1-based) such number, smallest first.

    A number qualifies when it is written with the digits 0 and 1 only and its
    binary representation ends with that very digit string.
    """
    if goal < 1:
        raise ValueError("goal must be a positive integer")
    rank = 0
    width = 0
    candidates = [0, 1]
    while True:
        low: list[int] = []
        high: list[int] = []
        lead = 10**width
        scale = 10 ** (width + 1)
        for value in candidates:
            if value >= lead:
                rank += 1
                if rank == goal:
                    return str(value)
            if not (value >> (width + 1)) & 1:
                low.append(value)
                high.append(value + scale)
        candidates = low + high
        width += 1