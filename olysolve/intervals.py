"""Smallest segments of a permutation holding consecutive values around a query."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def minimal_good_segments(
    perm: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[tuple[int, int]]:
    """For each (l, r) return the shortest (a, b) with a <= l, r <= b whose
    entries form a set of consecutive integers. Positions are 1-based."""
    n = len(perm)
    if sorted(perm) != list(range(1, n + 1)):
        raise ValueError("expected a permutation of 1..n")
    p = [0, *perm]
    q = [0] * (n + 1)
    for i, x in enumerate(perm, 1):
        q[x] = i
    for l, r in queries:
        if not 1 <= l <= r <= n:
            raise ValueError(f"invalid query ({l}, {r})")

    answers: list[tuple[int, int]] = [(0, 0)] * len(queries)
    reach: list[tuple[int, int]] = [(-1, -1)] * (n + 2)

    def sweep(indices: Iterable[int], l: int, r: int, mid: int) -> None:
        pl = pr = cl = cr = mid
        vl = vr = p[mid]
        for i in indices:
            cl = min(cl, i)
            cr = max(cr, i)
            ok = True
            while ok and (cl < pl or cr > pr):
                if cl < pl:
                    pl -= 1
                    x = p[pl]
                else:
                    pr += 1
                    x = p[pr]
                while vl > x or vr < x:
                    if vl > x:
                        vl -= 1
                        j = q[vl]
                    else:
                        vr += 1
                        j = q[vr]
                    if j < l or j > r:
                        ok = False
                        break
                    cl = min(cl, j)
                    cr = max(cr, j)
            if not ok:
                break
            reach[i] = (pl, pr)

    def solve(l: int, r: int, tasks: list[tuple[int, int, int]]) -> None:
        if not tasks:
            return
        mid = (l + r) >> 1
        reach[l:r + 1] = [(-1, -1)] * (r - l + 1)
        reach[mid] = (mid, mid)
        sweep(range(mid - 1, l - 1, -1), l, r, mid)
        sweep(range(mid + 1, r + 1), l, r, mid)
        left_tasks = []
        right_tasks = []
        for ql, qr, index in tasks:
            if reach[ql][0] != -1 and reach[qr][0] != -1:
                answers[index] = (
                    min(reach[ql][0], reach[qr][0]),
                    max(reach[ql][1], reach[qr][1]),
                )
            if qr < mid:
                left_tasks.append((ql, qr, index))
            elif ql > mid:
                right_tasks.append((ql, qr, index))
        solve(l, mid - 1, left_tasks)
        solve(mid + 1, r, right_tasks)

    solve(1, n, [(l, r, index) for index, (l, r) in enumerate(queries)])
    return answers