import random

import pytest

from olysolve.tree_paths import paths_form_chain

LINE = [(1, 2), (2, 3), (3, 4), (4, 5)]


def test_crossing_intervals_are_rejected():
    assert paths_form_chain(5, LINE, [(1, 3), (2, 4)]) is False


def test_nested_intervals_are_accepted():
    assert paths_form_chain(5, LINE, [(1, 4), (2, 3)]) is True


def test_branching_union_is_rejected():
    star = [(1, 2), (1, 3), (1, 4)]
    assert paths_form_chain(4, star, [(2, 3), (2, 4)]) is False


def test_crossing_is_order_independent():
    first = paths_form_chain(5, LINE, [(2, 4), (1, 3)])
    second = paths_form_chain(5, LINE, [(1, 3), (2, 4)])
    assert first == second
    assert not first


@pytest.mark.parametrize("seed", range(8))
def test_single_path_always_fits(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 10)
    edges = [(i, rng.randint(1, i - 1)) for i in range(2, n + 1)]
    s, t = rng.randint(1, n), rng.randint(1, n)
    assert paths_form_chain(n, edges, [(s, t)])


def test_repeated_pair_is_accepted():
    assert paths_form_chain(5, LINE, [(1, 3), (3, 1), (1, 3)])