"""Check whether tree paths can be laid out as non-crossing chain intervals."""

from __future__ import annotations

from collections.abc import Sequence


def _root_tree(n: int, graph: list[list[int]]) -> tuple[list[int], list[int]]:
    parent = [0] * (n + 1)
    depth = [0] * (n + 1)
    parent[1] = -1
    stack = [1]
    while stack:
        u = stack.pop()
        for v in graph[u]:
            if not parent[v]:
                parent[v] = u
                depth[v] = depth[u] + 1
                stack.append(v)
    return parent, depth


def paths_form_chain(
    n: int, edges: Sequence[tuple[int, int]], pairs: Sequence[tuple[int, int]]
) -> bool:
    """Return True when the paths between the given pairs are compatible."""
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    parent, depth = _root_tree(n, graph)

    top = list(range(n + 1))

    def find(x: int) -> int:
        root = x
        while top[root] != root:
            root = top[root]
        while top[x] != root:
            top[x], x = root, top[x]
        return root

    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for s, t in pairs:
        x, y = find(s), find(t)
        while x != y:
            if depth[x] < depth[y]:
                x, y = y, x
            adj[x].append(parent[x])
            adj[parent[x]].append(x)
            top[x] = parent[x]
            x = find(x)

    if any(len(links) > 2 for links in adj):
        return False

    pos = [0] * (n + 1)
    right = [0] * (n + 1)
    for i in range(1, n + 1):
        if len(adj[i]) == 1:
            x = i
            while adj[x]:
                y = adj[x][-1]
                pos[y] = pos[x] + 1
                right[x] = y
                adj[y].remove(x)
                adj[x].clear()
                x = y

    spans = sorted(
        (abs(pos[s] - pos[t]), index)
        for index, (s, t) in enumerate(pairs)
        if pos[s] != pos[t]
    )
    tl = list(range(n + 1))
    tr = list(range(n + 1))
    for _, index in spans:
        x, y = pairs[index]
        if pos[x] > pos[y]:
            x, y = y, x
        if tl[x] != x or tr[y] != y:
            return False
        while tr[x] != y:
            nxt = right[tr[x]]
            tl[nxt] = x
            tr[tr[x]] = tr[nxt]
            tl[tr[nxt]] = x
            tr[x] = tr[nxt]
    return True