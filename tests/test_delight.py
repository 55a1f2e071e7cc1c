import itertools
import random

import pytest

from olysolve.delight import max_delight


def _feasible(plan, k, min_sleep, min_eat):
    for start in range(len(plan) - k + 1):
        window = plan[start:start + k]
        if window.count("S") < min_sleep or window.count("E") < min_eat:
            return False
    return True


def _value(plan, sleep, eat):
    return sum(e if c == "E" else s for c, s, e in zip(plan, sleep, eat))


def test_single_window_example():
    assert max_delight(3, 1, 1, [1, 5, 3], [4, 2, 1]) == (12, "ESS")


def test_no_limits_takes_best_each_hour():
    sleep = [3, 1, 7, 2, 9]
    eat = [1, 4, 2, 8, 0]
    total, plan = max_delight(2, 0, 0, sleep, eat)
    assert total == sum(max(s, e) for s, e in zip(sleep, eat))
    assert _value(plan, sleep, eat) == total


def test_all_sleep_forced():
    sleep = [1, 1, 1, 1]
    eat = [9, 9, 9, 9]
    total, plan = max_delight(2, 2, 0, sleep, eat)
    assert plan == "S" * 4
    assert total == sum(sleep)


@pytest.mark.parametrize("seed", range(5))
def test_schedule_is_feasible_and_optimal(seed):
    rng = random.Random(seed)
    n, k = 8, 3
    min_sleep, min_eat = rng.randint(0, 2), rng.randint(0, 1)
    sleep = [rng.randint(0, 20) for _ in range(n)]
    eat = [rng.randint(0, 20) for _ in range(n)]
    total, plan = max_delight(k, min_sleep, min_eat, sleep, eat)
    assert len(plan) == n
    assert _feasible(plan, k, min_sleep, min_eat)
    assert _value(plan, sleep, eat) == total
    for bits in itertools.product("SE", repeat=n):
        candidate = "".join(bits)
        if _feasible(candidate, k, min_sleep, min_eat):
            assert _value(candidate, sleep, eat) <= total


def test_invalid_requirements():
    with pytest.raises(ValueError):
        max_delight(2, 2, 1, [1, 2], [3, 4])


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        max_delight(1, 0, 0, [1, 2], [3])