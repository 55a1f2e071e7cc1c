import pytest

from olysolve.squares_area import covered_area


def test_empty():
    assert covered_area([]) == 0.0


def test_square_area_is_side_squared():
    assert covered_area([("A", 0, 0, 2)]) == pytest.approx(2 * 2)


def test_diamond_area_is_half_diagonal_squared():
    assert covered_area([("B", 3, -1, 2)]) == pytest.approx(2 * 2 / 2)


def test_larger_shapes_match_formulas():
    assert covered_area([("A", 5, 5, 6)]) == pytest.approx(36)
    assert covered_area([("B", 5, 5, 6)]) == pytest.approx(18)


def test_diamond_inside_square_adds_nothing():
    alone = covered_area([("A", 1, 1, 4)])
    assert covered_area([("A", 1, 1, 4), ("B", 1, 1, 4)]) == pytest.approx(alone)


def test_duplicates_count_once():
    shape = ("B", 0, 0, 4)
    assert covered_area([shape, shape]) == pytest.approx(covered_area([shape]))


def test_disjoint_shapes_add_up():
    a = ("A", -20, 0, 4)
    b = ("B", 20, 0, 4)
    assert covered_area([a, b]) == pytest.approx(covered_area([a]) + covered_area([b]))


def test_union_between_max_and_sum():
    a = ("A", 0, 0, 4)
    b = ("B", 2, 1, 6)
    union = covered_area([a, b])
    area_a, area_b = covered_area([a]), covered_area([b])
    assert max(area_a, area_b) <= union <= area_a + area_b


def test_rejects_unknown_kind():
    with pytest.raises(ValueError):
        covered_area([("C", 0, 0, 2)])