import pytest

from olysolve.intercept import intercept


class _Target:
    def __init__(self, start, speed):
        self.start = start
        self.speed = speed
        self.time = 0

    def position(self):
        return self.start + self.speed * self.time

    def check(self, lo, hi):
        inside = lo <= self.position() <= hi
        self.time += 1
        return inside


@pytest.mark.parametrize(
    "start,speed",
    [(0, 0), (0, 10), (100, 0), (37, 3), (58, 7), (1, 1), (99, 9)],
)
def test_finds_current_position(start, speed):
    target = _Target(start, speed)
    result = intercept(100, 10, target.check)
    assert result == target.position()


def test_uses_fewer_than_hundred_checks():
    target = _Target(42, 5)
    result = intercept(100, 10, target.check)
    assert result == target.position()
    assert target.time < 100


def test_checks_are_well_formed():
    target = _Target(13, 2)
    calls = []

    def check(lo, hi):
        calls.append((lo, hi))
        return target.check(lo, hi)

    assert intercept(100, 5, check) == target.position()
    assert all(lo <= hi for lo, hi in calls)