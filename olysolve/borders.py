"""Order words by their chain of borders short enough to fit in a given length."""

from __future__ import annotations

from collections.abc import Sequence


def _prefix_function(word: str) -> list[int]:
    pi = [0] * len(word)
    k = 0
    for j in range(1, len(word)):
        while k and word[j] != word[k]:
            k = pi[k - 1]
        if word[j] == word[k]:
            k += 1
        pi[j] = k
    return pi


def _key(word: str, n: int) -> list[int]:
    length = len(word)
    pi = _prefix_function(word)
    key = [length]
    x = pi[length - 1] if length else 0
    while x and length * 2 - x <= n:
        key.append(x)
        x = pi[x - 1]
    return key


def sort_by_borders(n: int, words: Sequence[str]) -> list[str]:
    """Return the words sorted by their border lists (compared lexicographically)."""
    return sorted(words, key=lambda w: _key(w, n))