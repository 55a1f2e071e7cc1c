"""Solve a subset-sum instance modulo 2**64.

Small instances use meet-in-the-middle; large ones recover a hidden
superincreasing sequence from the odd multiplier that disguises it.
"""

from __future__ import annotations

from collections.abc import Sequence

_BITS = 64
_MASK = (1 << _BITS) - 1
_SMALL = 42


def _subsets(weights: Sequence[int], offset: int) -> list[tuple[int, int]]:
    combos = [(0, 0)]
    for index, weight in enumerate(weights, offset):
        bit = 1 << index
        combos = [
            item
            for total, mask in combos
            for item in ((total, mask), ((total + weight) & _MASK, mask | bit))
        ]
    return combos


def _meet_in_middle(weights: list[int], target: int) -> int:
    half = len(weights) // 2
    first: dict[int, int] = {}
    for total, mask in _subsets(weights[:half], 0):
        first.setdefault(total, mask)
    answer = 0
    for total, mask in _subsets(weights[half:], half):
        match = first.get((target - total) & _MASK)
        if match is not None:
            answer = mask | match
    return answer


def _unmask(weights: list[int], target: int) -> int:
    n = len(weights)
    head = weights[0]
    if head == 0:
        raise ValueError("the first weight must be non-zero")
    low_bit = head & -head
    odd_part = head // low_bit
    limit = (_MASK // low_bit) >> (n - 1)
    shift = low_bit.bit_length() - 1
    inverse = pow(odd_part, -1, 1 << _BITS)
    answer = 0
    for a0 in range(1, limit + 1, 2):
        base = (a0 * inverse) & _MASK
        for lc in range(low_bit):
            factor = (base + (lc << (_BITS - shift))) & _MASK if lc else base
            plain = [(w * factor) & _MASK for w in weights]
            rest = (target * factor) & _MASK
            chosen = 0
            for i in range(n - 1, -1, -1):
                if rest >= plain[i]:
                    rest -= plain[i]
                    chosen |= 1 << i
            if rest == 0:
                answer = chosen
    return answer


def solve_subset_sum(weights: Sequence[int], target: int) -> str:
    """Return a '0'/'1' string selecting weights that sum to target mod 2**64."""
    values = [w & _MASK for w in weights]
    target &= _MASK
    if len(values) <= _SMALL:
        answer = _meet_in_middle(values, target)
    else:
        answer = _unmask(values, target)
    return "".join(str((answer >> i) & 1) for i in range(len(values)))