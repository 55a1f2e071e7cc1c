import random
from itertools import combinations

import pytest

from olysolve.kth_sum import kth_smallest


def _all_pair_costs(r, a, b, c):
    n = len(a)
    levels = (a, b, c)
    costs = []
    for p, q in combinations(range(n - r + 1), 2):
        cover = [0] * n
        for start in (p, q):
            for t in range(start, start + r):
                cover[t] += 1
        costs.append(sum(levels[cover[i]][i] for i in range(n)))
    return sorted(costs)


def _random_case(rng):
    n = rng.randint(2, 8)
    r = rng.randint(1, n - 1)
    a = [rng.randint(0, 9) for _ in range(n)]
    b = [x + rng.randint(0, 9) for x in a]
    c = [x + rng.randint(0, 9) for x in b]
    return r, a, b, c


@pytest.mark.parametrize("seed", range(25))
def test_matches_enumeration_of_all_pairs(seed):
    rng = random.Random(seed)
    r, a, b, c = _random_case(rng)
    costs = _all_pair_costs(r, a, b, c)
    for k, expected in enumerate(costs, start=1):
        assert kth_smallest(r, k, a, b, c) == expected


def test_single_cell_windows():
    a = [1, 1, 1]
    b = [2, 3, 4]
    c = [9, 9, 9]
    assert kth_smallest(1, 1, a, b, c) == 6
    assert kth_smallest(1, 3, a, b, c) == 8


def test_results_are_non_decreasing_in_k():
    rng = random.Random(99)
    r, a, b, c = 2, [rng.randint(0, 5) for _ in range(7)], None, None
    b = [x + rng.randint(0, 5) for x in a]
    c = [x + rng.randint(0, 5) for x in b]
    total = len(list(combinations(range(len(a) - r + 1), 2)))
    values = [kth_smallest(r, k, a, b, c) for k in range(1, total + 1)]
    assert values == sorted(values)


def test_rejects_non_positive_window():
    with pytest.raises(ValueError):
        kth_smallest(0, 1, [1, 2], [1, 2], [1, 2])


def test_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        kth_smallest(1, 1, [1, 2], [1], [1, 2])