import random

import pytest

from olysolve.knapsack import solve_subset_sum

MOD = 1 << 64


def _selected_sum(weights, bits):
    return sum(w for w, b in zip(weights, bits) if b == "1") % MOD


@pytest.mark.parametrize("n", [1, 2, 5, 12, 20])
def test_small_instances_are_solved(n):
    rng = random.Random(n)
    weights = [rng.getrandbits(64) for _ in range(n)]
    hidden = [rng.randint(0, 1) for _ in range(n)]
    target = sum(w for w, h in zip(weights, hidden) if h) % MOD
    bits = solve_subset_sum(weights, target)
    assert len(bits) == n
    assert set(bits) <= {"0", "1"}
    assert _selected_sum(weights, bits) == target


def test_unreachable_target_gives_empty_selection():
    assert solve_subset_sum([2, 4], 3) == "00"


def test_empty_instance():
    assert solve_subset_sum([], 0) == ""


def test_large_disguised_superincreasing_instance():
    n = 60
    rng = random.Random(4)
    multiplier = rng.getrandbits(64) | 1
    weights = [((1 << i) * multiplier) % MOD for i in range(n)]
    hidden = "".join(str(rng.randint(0, 1)) for _ in range(n))
    target = sum(w for w, h in zip(weights, hidden) if h == "1") % MOD
    assert solve_subset_sum(weights, target) == hidden


def test_large_instance_rejects_zero_first_weight():
    with pytest.raises(ValueError):
        solve_subset_sum([0] * 43, 0)