"""Plan sleeping and eating hours for maximal delight under window limits."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class _FlowNetwork:
    """Unit-augmenting maximum-cost flow with Bellman-Ford style search."""

    def __init__(self, size: int) -> None:
        self.adjacency: list[list[int]] = [[] for _ in range(size)]
        self.target: list[int] = []
        self.capacity: list[int] = []
        self.cost: list[int] = []

    def _add(self, u: int, v: int, w: int, c: int) -> None:
        self.adjacency[u].append(len(self.target))
        self.target.append(v)
        self.capacity.append(w)
        self.cost.append(c)

    def link(self, u: int, v: int, w: int, c: int) -> int:
        """Add an edge with its residual twin; return the twin's index."""
        self._add(u, v, w, c)
        self._add(v, u, 0, -c)
        return len(self.target) - 1

    def _longest_paths(self, source: int) -> tuple[list[bool], list[int], list[int]]:
        size = len(self.adjacency)
        reached = [False] * size
        dist = [0] * size
        via = [-1] * size
        in_queue = [False] * size
        reached[source] = True
        in_queue[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            in_queue[u] = False
            for e in reversed(self.adjacency[u]):
                v = self.target[e]
                candidate = dist[u] + self.cost[e]
                if self.capacity[e] and (not reached[v] or dist[v] < candidate):
                    reached[v] = True
                    via[v] = e
                    dist[v] = candidate
                    if not in_queue[v]:
                        in_queue[v] = True
                        queue.append(v)
        return reached, dist, via

    def max_cost_flow(self, source: int, sink: int) -> int:
        total = 0
        while True:
            reached, dist, via = self._longest_paths(source)
            if not reached[sink]:
                return total
            total += dist[sink]
            u = sink
            while u != source:
                e = via[u]
                self.capacity[e] -= 1
                self.capacity[e ^ 1] += 1
                u = self.target[e ^ 1]


def max_delight(
    k: int,
    min_sleep: int,
    min_eat: int,
    sleep: Sequence[int],
    eat: Sequence[int],
) -> tuple[int, str]:
    """Return the best total and a schedule of 'S'/'E' per hour.

    Every run of k consecutive hours must hold at least min_sleep sleeping
    hours and at least min_eat eating hours.
    """
    n = len(sleep)
    if len(eat) != n:
        raise ValueError("sleep and eat must have the same length")
    if not 1 <= k <= n:
        raise ValueError("window length must lie between 1 and the number of hours")
    if min_sleep < 0 or min_eat < 0 or min_sleep + min_eat > k:
        raise ValueError("window requirements cannot be met")

    max_eat = k - min_sleep
    m = n - k + 1
    source, sink = m + 1, m + 2
    network = _FlowNetwork(m + 3)
    balance = [0] * (m + 1)
    total = 0
    choice_edges = []
    for i in range(1, n + 1):
        gain = eat[i - 1] - sleep[i - 1]
        total += sleep[i - 1]
        x, y = min(i, m), max(0, i - k)
        edge = network.link(x, y, 1, gain)
        choice_edges.append(edge)
        if gain > 0:
            total += gain
            network.capacity[edge] += 1
            network.capacity[edge ^ 1] -= 1
            balance[y] += 1
            balance[x] -= 1
    for i in range(1, m + 1):
        balance[i] += min_eat
        balance[i - 1] -= min_eat
        network.link(i - 1, i, max_eat - min_eat, 0)
    for i, amount in enumerate(balance):
        if amount > 0:
            network.link(source, i, amount, 0)
        elif amount < 0:
            network.link(i, sink, -amount, 0)
    total += network.max_cost_flow(source, sink)
    plan = "".join("E" if network.capacity[e] else "S" for e in choice_edges)
    return total, plan