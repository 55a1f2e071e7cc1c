import random

import pytest

from olysolve.rotations import min_operations


def test_empty_needs_nothing():
    assert min_operations([]) == 0


def test_repdigits_are_ignored():
    assert min_operations([0, 1111111, 7777777]) == min_operations([])


def test_single_unsorted_rotation():
    assert min_operations([1234567]) == 1


def test_already_canonical_rotation():
    assert min_operations([7123456]) == min_operations([])


def test_inserting_repdigits_does_not_change_result():
    rng = random.Random(3)
    for _ in range(10):
        values = [rng.randrange(10**7) for _ in range(rng.randrange(1, 6))]
        padded = [2222222, *values, 9999999]
        assert min_operations(padded) == min_operations(values)


def test_result_is_non_negative():
    rng = random.Random(5)
    values = [rng.randrange(10**7) for _ in range(8)]
    assert min_operations(values) >= 0


@pytest.mark.parametrize("bad", [-1, 10**7])
def test_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        min_operations([bad])