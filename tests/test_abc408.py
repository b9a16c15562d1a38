import pytest

from abcsolver.abc408 import (
    can_stay_awake,
    distinct_sorted,
    max_moves,
    min_flips,
    min_guard_count,
    min_or_path,
)


def test_stay_awake_within_limit():
    assert can_stay_awake(5, [5, 10, 15]) is True


def test_stay_awake_first_gap_too_long():
    assert can_stay_awake(5, [6]) is False


def test_stay_awake_later_gap_too_long():
    assert can_stay_awake(3, [2, 4, 8]) is False


def test_distinct_sorted():
    assert distinct_sorted([3, 1, 3, 2, 1]) == [1, 2, 3]


def test_guard_count_without_guards():
    assert min_guard_count(3, []) == 0


def test_guard_count_full_cover():
    assert min_guard_count(4, [(1, 4), (1, 4)]) == 2


def test_guard_count_gap_in_coverage():
    assert min_guard_count(5, [(1, 2), (4, 5)]) == min_guard_count(5, [])


def test_guard_count_bad_range():
    with pytest.raises(ValueError):
        min_guard_count(3, [(2, 4)])


@pytest.mark.parametrize("s", ["0000", "1111", "0011100", "1"])
def test_flips_already_valid(s):
    assert min_flips(s) == 0


@pytest.mark.parametrize("s", ["101", "1001001", "0110110", "10101"])
def test_flips_bounds(s):
    result = min_flips(s)
    assert 0 < result <= s.count("1")


def test_flips_rejects_other_characters():
    with pytest.raises(ValueError):
        min_flips("012")


def test_or_path_single_edge():
    assert min_or_path(2, [(1, 2, 13)]) == 13


def test_or_path_picks_cheaper_parallel_edge():
    assert min_or_path(2, [(1, 2, 5), (1, 2, 3)]) == 3


def test_or_path_combines_weights():
    assert min_or_path(3, [(1, 2, 1), (2, 3, 2), (1, 3, 4)]) == 1 | 2


def test_max_moves_single():
    assert max_moves([1], 1, 1) == max_moves([], 1, 1)


def test_max_moves_increasing_chain():
    heights = [1, 2, 3, 4, 5]
    assert max_moves(heights, 1, len(heights)) == len(heights) - 1


def test_max_moves_height_gap_too_large():
    heights = [3, 1, 2]
    assert max_moves(heights, len(heights), 5) == max_moves([1], 1, 1)