"""Slices of the sequence of all lists of distinct primes, written out in full.

Lists are ordered by their sum and, within a sum, by the order in which a
depth-first search that prefers smaller primes meets them. Each list is
written as "[p1, p2, ...], " and the pieces are concatenated.
"""

from __future__ import annotations

from functools import lru_cache

_LIMIT = 2600
_CAP = 10**18 + 5


def _primes_below(limit: int) -> list[int]:
    sieve = [True] * limit
    primes = []
    for i in range(2, limit):
        if sieve[i]:
            primes.append(i)
            sieve[i * i::i] = [False] * len(range(i * i, limit, i))
    return primes


@lru_cache(maxsize=1)
def _tables() -> tuple[list[int], list[list[int]], list[list[int]]]:
    primes = _primes_below(_LIMIT)
    n = len(primes)
    counts: list[list[int]] = [[]] * (n + 1)
    lengths: list[list[int]] = [[]] * (n + 1)
    counts[n] = [1] + [0] * (_LIMIT - 1)
    lengths[n] = [2] + [0] * (_LIMIT - 1)
    for i in range(n - 1, -1, -1):
        p = primes[i]
        width = len(str(p)) + 2
        nc, nl = counts[i + 1], lengths[i + 1]
        counts[i] = nc[:p] + [min(_CAP, x + y) for x, y in zip(nc[p:], nc)]
        lengths[i] = nl[:p] + [
            min(_CAP, x + y + c * width) for x, y, c in zip(nl[p:], nl, nc)
        ]
    return primes, counts, lengths


def prime_list_slice(a: int, b: int) -> str:
    """Return characters a..b (1-based, inclusive) of the written sequence."""
    if a < 1 or b < a:
        raise ValueError("need 1 <= a <= b")
    primes, counts, lengths = _tables()
    n = len(primes)
    progress = 0
    skipped = 0
    taken = 0
    pieces: list[str] = []

    def walk(i: int, j: int, cur: str) -> None:
        nonlocal progress, skipped, taken
        if progress == 0:
            span = lengths[i][j] + len(cur) * counts[i][j]
            if skipped + span < a:
                skipped += span
                return
        if i == n:
            progress = 1
            taken += len(cur) + 2
            pieces.append("[" + cur[:-2] + "], ")
            if skipped + taken > b:
                progress = 2
            return
        p = primes[i]
        if j >= p and counts[i + 1][j - p]:
            walk(i + 1, j - p, f"{cur}{p}, ")
        if progress == 2:
            return
        if counts[i + 1][j]:
            walk(i + 1, j, cur)

    for total in range(1, _LIMIT):
        walk(0, total, "")
        if progress == 2:
            break
    text = "".join(pieces)
    start = a - skipped - 1
    return text[start:start + b - a + 1]