"""Classify the positions of a two-player game played on a directed graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def classify_positions(n: int, edges: Sequence[tuple[int, int]]) -> tuple[str, str]:
    """Return two rows of 'W', 'L' or 'D' for vertices 1..n, one per player."""
    succ: list[list[int]] = [[] for _ in range(n + 1)]
    pred: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves the vertex range")
        succ[u].append(v)
        pred[v].append(u)

    remaining = [[len(s) for s in succ], [0] * (n + 1)]
    infinite = [[True] * (n + 1) for _ in range(2)]
    queue: deque[tuple[int, int]] = deque()

    def settle(f: int, x: int) -> None:
        queue.append((f, x))
        infinite[f][x] = False

    for i in range(1, n + 1):
        if remaining[0][i] == 0:
            settle(0, i)
            settle(1, i)
    while queue:
        f, x = queue.popleft()
        if f == 0:
            for y in pred[x]:
                if infinite[1][y]:
                    settle(1, y)
        else:
            for y in pred[x]:
                remaining[0][y] -= 1
                if remaining[0][y] == 0:
                    settle(0, y)

    for f in (0, 1):
        for i in range(1, n + 1):
            remaining[f][i] += sum(not infinite[1 - f][j] for j in succ[i])

    win = [[-1] * (n + 1) for _ in range(2)]

    def decide(f: int, x: int, outcome: int) -> None:
        if win[f][x] != -1:
            return
        queue.append((f, x))
        win[f][x] = outcome

    for f in (0, 1):
        for i in range(1, n + 1):
            if remaining[f][i] == 0 and not infinite[f][i]:
                decide(f, i, 0)
    while queue:
        f, x = queue.popleft()
        other = 1 - f
        if win[f][x] == 0:
            for y in pred[x]:
                if not infinite[other][y]:
                    decide(other, y, 1)
        else:
            for y in pred[x]:
                if not infinite[other][y]:
                    remaining[other][y] -= 1
                    if remaining[other][y] == 0:
                        decide(other, y, 0)

    rows = []
    for f in (0, 1):
        chars = []
        for j in range(1, n + 1):
            if not infinite[f][j] and win[f][j] == -1:
                win[f][j] = 1 - f
            chars.append("DLW"[win[f][j] + 1])
        rows.append("".join(chars))
    return rows[0], rows[1]