"""Find a hidden bit string with a judge that only reports full or half matches."""

from __future__ import annotations

import random
from collections.abc import Callable


class _Solved(Exception):
    def __init__(self, answer: str) -> None:
        super().__init__(answer)
        self.answer = answer


def _flip(bit: str) -> str:
    return "1" if bit == "0" else "0"


def find_hidden(
    n: int,
    ask: Callable[[str], int],
    rng: random.Random | None = None,
) -> str | None:
    """Return the hidden string once the judge confirms it, else None.

    ``ask(s)`` must return n when s matches completely, n // 2 when exactly
    half of its bits match, and any other value otherwise.
    """
    if n < 1:
        raise ValueError("length must be positive")
    rng = rng or random.Random()

    def is_half(bits: list[str]) -> bool:
        text = "".join(bits)
        reply = ask(text)
        if reply == n:
            raise _Solved(text)
        return reply == n // 2

    try:
        while True:
            bits = [str(rng.getrandbits(1)) for _ in range(n)]
            if is_half(bits):
                break
        differs = [False] * n
        bits[0] = _flip(bits[0])
        for i in range(1, n):
            bits[i] = _flip(bits[i])
            differs[i] = is_half(bits)
            bits[i] = _flip(bits[i])
        bits[0] = _flip(bits[0])
        bits = [_flip(b) if d else b for b, d in zip(bits, differs)]
        is_half(bits)
        is_half([_flip(b) for b in bits])
    except _Solved as found:
        return found.answer
    return None