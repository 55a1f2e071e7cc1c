"""Shortest distances between vertices of a triangulated convex polygon."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

_Query = tuple[int, int, int]


def _bfs(graph: dict[int, list[int]], start: int) -> dict[int, int]:
    dist = {start: 0}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            if v not in dist:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _solve(
    nodes: list[int],
    edges: list[tuple[int, int]],
    queries: list[_Query],
    answers: list[float],
) -> None:
    position = {u: i for i, u in enumerate(nodes, 1)}
    size = len(nodes)
    graph: dict[int, list[int]] = {u: [] for u in nodes}
    best = math.inf
    left = right = 0
    for u, v in edges:
        gap = abs(size - 2 * (position[v] - position[u]))
        if gap < best:
            best, left, right = gap, u, v
        graph[u].append(v)
        graph[v].append(u)

    for start in (left, right):
        dist = _bfs(graph, start)
        for x, y, index in queries:
            answers[index] = min(answers[index], dist[x] + dist[y])

    if size == 3:
        return

    def side(u: int) -> int:
        if u in (left, right):
            return 0
        return 1 if left < u < right else -1

    nodes_low = [u for u in nodes if side(u) <= 0]
    nodes_high = [u for u in nodes if side(u) >= 0]
    edges_low = [(u, v) for u, v in edges if side(u) <= 0 and side(v) <= 0]
    edges_high = [(u, v) for u, v in edges if side(u) >= 0 and side(v) >= 0]
    queries_low: list[_Query] = []
    queries_high: list[_Query] = []
    for query in queries:
        x, y, _ = query
        if side(x) == side(y) == 1:
            queries_high.append(query)
        elif side(x) == side(y) == -1:
            queries_low.append(query)

    if edges_low:
        _solve(nodes_low, edges_low, queries_low, answers)
    if edges_high:
        _solve(nodes_high, edges_high, queries_high, answers)


def triangulation_distances(
    n: int,
    diagonals: Sequence[tuple[int, int]],
    queries: Sequence[tuple[int, int]],
) -> list[int]:
    """Return the edge distance for each query pair.

    The polygon has vertices 1..n in order and is triangulated by the n-3
    given diagonals.
    """
    if n < 3:
        raise ValueError("a polygon needs at least three vertices")
    if len(diagonals) != n - 3:
        raise ValueError("a triangulation has exactly n-3 diagonals")
    edges = [(i, i + 1) for i in range(1, n)] + [(1, n)]
    for u, v in diagonals:
        if not (1 <= u <= n and 1 <= v <= n) or u == v:
            raise ValueError(f"invalid diagonal ({u}, {v})")
        edges.append((min(u, v), max(u, v)))

    answers: list[float] = []
    tasks: list[_Query] = []
    for index, (x, y) in enumerate(queries):
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"query ({x}, {y}) leaves the vertex range")
        answers.append(0 if x == y else math.inf)
        tasks.append((x, y, index))

    _solve(list(range(1, n + 1)), edges, tasks, answers)
    return [int(a) for a in answers]