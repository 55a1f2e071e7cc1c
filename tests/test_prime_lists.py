import pytest

from olysolve.prime_lists import prime_list_slice


def test_first_list():
    assert prime_list_slice(1, 4) == "[2],"


def test_opening_lists():
    assert prime_list_slice(1, 20) == "[2], [3], [2, 3], [5"


@pytest.mark.parametrize("a,b", [(3, 9), (17, 40), (55, 120), (1, 1)])
def test_slices_agree_with_longer_prefix(a, b):
    prefix = prime_list_slice(1, 150)
    assert prime_list_slice(a, b) == prefix[a - 1:b]


def test_far_slice_consistency():
    start = 10**6
    wide = prime_list_slice(start - 10, start + 60)
    narrow = prime_list_slice(start, start + 50)
    assert len(narrow) == 51
    assert narrow == wide[10:61]
    assert set(narrow) <= set("0123456789[], ")


@pytest.mark.parametrize("a,b", [(0, 5), (5, 4)])
def test_invalid_range(a, b):
    with pytest.raises(ValueError):
        prime_list_slice(a, b)