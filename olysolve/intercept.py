"""Locate a target moving at an unknown constant speed with interval checks."""

from __future__ import annotations

from collections.abc import Callable

_MAX_ROUNDS = 100
_INITIAL_BOUND = (1 << 31) - 1


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def intercept(xr: int, vr: int, check: Callable[[int, int], bool]) -> int | None:
    """Return the target's position once it is pinned down, or None.

    ``check(l, r)`` reports whether the target currently lies in [l, r]; each
    call advances time by one unit. ``xr`` bounds the starting position and is
    not needed by the search, which starts from a wider bound; ``vr`` bounds the
    speed.
    """
    vl = 0
    lows: list[int] = []
    highs: list[int] = []
    for t in range(_MAX_ROUNDS):
        lo, hi = 0, _INITIAL_BOUND
        for i, (pl, pr) in enumerate(zip(lows, highs)):
            lo = max(lo, pl + (t - i) * vl)
            hi = min(hi, pr + (t - i) * vr)
        if lo == hi and vl == vr:
            return lo
        mid = (lo + hi) >> 1
        if check(lo, mid):
            hi = mid
        else:
            lo = mid + 1
        lows.append(lo)
        highs.append(hi)
        for i in range(t):
            vl = max(vl, _div(lo - highs[i] + (t - i - 1), t - i))
            vr = min(vr, _div(hi - lows[i], t - i))
    return None