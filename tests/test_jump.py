import random

import pytest

from olysolve.jump import find_hidden


def _judge(hidden):
    n = len(hidden)
    calls = []

    def ask(text):
        calls.append(text)
        correct = sum(a == b for a, b in zip(text, hidden))
        if correct == n:
            return n
        if correct == n // 2:
            return n // 2
        return 0

    return ask, calls


@pytest.mark.parametrize("hidden", ["01", "1100", "10101010", "0000000000", "1110010111"])
def test_recovers_hidden_string(hidden):
    ask, calls = _judge(hidden)
    result = find_hidden(len(hidden), ask, random.Random(7))
    assert result == hidden
    assert calls[-1] == hidden


@pytest.mark.parametrize("seed", range(5))
def test_recovers_with_various_seeds(seed):
    generator = random.Random(100 + seed)
    hidden = "".join(generator.choice("01") for _ in range(12))
    ask, calls = _judge(hidden)
    assert find_hidden(12, ask, random.Random(seed)) == hidden
    assert all(len(c) == 12 for c in calls)


def test_rejects_empty_length():
    with pytest.raises(ValueError):
        find_hidden(0, lambda s: 0)