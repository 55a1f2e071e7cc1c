import pytest

from olysolve.bipartite_sums import count_strong_pairs


def test_single_edge_zero_threshold_counts_all_pairs():
    assert count_strong_pairs(["1"], [5], [7], 0) == 4


def test_single_edge_middle_threshold():
    assert count_strong_pairs(["1"], [5], [7], 6) == 2


def test_threshold_above_total_weight():
    assert count_strong_pairs(["1"], [5], [7], 13) == count_strong_pairs(["0"], [5], [7], 1)


def test_no_edges_only_empty_sets():
    assert count_strong_pairs(["0"], [5], [7], 0) == 1


def test_monotone_in_threshold():
    matrix = ["110", "011", "101"]
    left = [3, 1, 4]
    right = [1, 5, 9]
    counts = [count_strong_pairs(matrix, left, right, t) for t in range(0, 30, 3)]
    assert counts == sorted(counts, reverse=True)
    assert counts[0] >= counts[-1]


def test_symmetric_under_transpose():
    matrix = ["10", "11"]
    transposed = ["11", "01"]
    left, right = [2, 3], [4, 1]
    for t in range(0, 12):
        assert count_strong_pairs(matrix, left, right, t) == count_strong_pairs(
            transposed, right, left, t
        )


def test_rejects_bad_shape():
    with pytest.raises(ValueError):
        count_strong_pairs(["10"], [1, 2], [3, 4], 0)


def test_rejects_bad_entry():
    with pytest.raises(ValueError):
        count_strong_pairs(["x"], [1], [1], 0)