import random

import pytest

from olysolve.hack import count_and_xor_pairs


def test_all_zero_counts_every_subarray():
    values = [0, 0, 0, 0]
    n = len(values)
    assert count_and_xor_pairs(values) == n * (n + 1) // 2


def test_single_element():
    assert count_and_xor_pairs([5]) == 1


def test_equal_pair_only_singletons():
    values = [1, 1]
    assert count_and_xor_pairs(values) == len(values)


def test_distinct_bits_only_singletons():
    values = [1, 2]
    assert count_and_xor_pairs(values) == len(values)


def test_empty():
    assert count_and_xor_pairs([]) == 0


def test_bounds_on_random_inputs():
    rng = random.Random(7)
    for _ in range(20):
        values = [rng.randrange(8) for _ in range(rng.randrange(1, 12))]
        n = len(values)
        result = count_and_xor_pairs(values)
        assert n <= result <= n * (n + 1) // 2


def test_rejects_negative():
    with pytest.raises(ValueError):
        count_and_xor_pairs([1, -2])