"""Cheapest route when the k most expensive road tolls are paid in bulk."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def _shortest(graph: list[list[tuple[int, int]]], target: int, threshold: int) -> int | None:
    dist = {1: 0}
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        if u == target:
            break
        for v, z in graph[u]:
            nd = d + max(0, z - threshold)
            if v not in dist or dist[v] > nd:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist.get(target)


def min_travel_cost(n: int, edges: Sequence[tuple[int, int, int]], k: int) -> int | None:
    """Return the minimal cost from node 1 to node n, or None if unreachable."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        graph[u].append((v, w))
        graph[v].append((u, w))
    best = None
    for threshold in sorted({0, *(w for _, _, w in edges)}):
        dist = _shortest(graph, n, threshold)
        if dist is None:
            return None
        cost = dist + k * threshold
        if best is None or cost < best:
            best = cost
    return best