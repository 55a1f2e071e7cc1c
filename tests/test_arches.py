import pytest

from olysolve.arches import min_arch_cost


def test_single_pillar():
    assert min_arch_cost(10, 3, 5, [(0, 4)]) == 18


def test_two_pillars():
    assert min_arch_cost(10, 1, 1, [(0, 0), (10, 0)]) == 120


def test_too_wide_is_impossible():
    assert min_arch_cost(10, 1, 1, [(0, 0), (100, 0)]) is None


def test_no_points_rejected():
    with pytest.raises(ValueError):
        min_arch_cost(10, 1, 1, [])