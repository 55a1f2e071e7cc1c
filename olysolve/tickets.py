"""Cheapest set of one-way and round-trip tickets covering a journey."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from itertools import pairwise

_INF = 1 << 50
_ROUND = 2
_REVERSED = 1


def _matched(directions: list[int], first: int) -> int:
    """Greedily pair trips in direction ``first`` with later opposite trips."""
    waiting = 0
    pairs = 0
    for d in directions:
        if d == first:
            waiting += 1
        elif waiting:
            waiting -= 1
            pairs += 1
    return pairs


def min_ticket_cost(
    n: int,
    journey: Sequence[int],
    offers: Sequence[tuple[int, int, str, int]],
) -> int:
    """Return the minimal price of tickets for travelling the journey in order.

    Each offer is (u, v, kind, price): kind "R" is a round trip u -> v -> u,
    anything else a one-way ticket u -> v. Stations are numbered 1..n.
    """
    for station in journey:
        if not 1 <= station <= n:
            raise ValueError(f"station {station} is outside 1..{n}")

    trips: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for x, y in pairwise(journey):
        trips[(min(x, y), max(x, y))].append(int(x > y))

    prices: dict[tuple[int, int, int], int] = {}
    for u, v, kind, price in offers:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"offer ({u}, {v}) leaves the station range")
        typ = _ROUND if kind == "R" else 0
        if u > v:
            u, v = v, u
            typ |= _REVERSED
        key = (typ, u, v)
        prices[key] = min(prices.get(key, price), price)

    total = 0
    for (u, v), directions in trips.items():
        f = [prices.get((t, u, v), _INF) for t in range(4)]
        f[0] = min(f[0], f[2])
        f[1] = min(f[1], f[3])
        for d in set(directions):
            if f[d] >= _INF:
                raise ValueError(f"no ticket covers the trip between {u} and {v}")
        f[2] = min(0, f[2] - f[0] - f[1])
        f[3] = min(0, f[3] - f[0] - f[1])
        total += sum(f[d] for d in directions)
        pairs = min(directions.count(0), directions.count(1))
        if f[2] < f[3]:
            sel = _matched(directions, 0)
            total += f[2] * sel + f[3] * (pairs - sel)
        else:
            sel = _matched(directions, 1)
            total += f[3] * sel + f[2] * (pairs - sel)
    return total