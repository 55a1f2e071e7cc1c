"""Count trie words ending with each reversed query, via an automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_ALPHA = 26


def count_matches(entries: Sequence[tuple[str, int]], queries: Sequence[str]) -> list[int]:
    """For each query return how many entry nodes its reversed form ends."""
    goto: list[list[int]] = [[-1] * _ALPHA]
    weight = [0]

    def new_node() -> int:
        goto.append([-1] * _ALPHA)
        weight.append(0)
        return len(goto) - 1

    pos = [0]
    for ch, parent in entries:
        node = new_node()
        goto[pos[parent]][ord(ch) - ord("A")] = node
        weight[node] += 1
        pos.append(node)

    query_nodes = []
    for word in queries:
        t = 0
        for ch in reversed(word):
            c = ord(ch) - ord("A")
            if goto[t][c] == -1:
                goto[t][c] = new_node()
            t = goto[t][c]
        query_nodes.append(t)

    fail = [0] * len(goto)
    order = []
    queue = deque([0])
    while queue:
        p = queue.popleft()
        order.append(p)
        for c in range(_ALPHA):
            child = goto[p][c]
            if child != -1:
                queue.append(child)
                fail[child] = 0 if p == 0 else goto[fail[p]][c]
            else:
                goto[p][c] = 0 if p == 0 else goto[fail[p]][c]

    for node in reversed(order[1:]):
        weight[fail[node]] += weight[node]
    return [weight[node] for node in query_nodes]