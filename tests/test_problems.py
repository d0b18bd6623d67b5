import statistics

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import kadane
from algokit.problems import (
    calculate_minimum_hp,
    find_median_sorted_arrays,
    largest_rectangle_area,
    length_of_longest_substring,
    longest_palindrome,
    max_subarray_sum,
    rot_oranges,
    trap,
)


@given(st.text(alphabet="abcd", max_size=30))
def test_longest_substring_is_achieved_and_maximal(s):
    n = length_of_longest_substring(s)
    windows = [s[i : i + n] for i in range(len(s) - n + 1)]
    assert any(len(set(w)) == len(w) for w in windows)
    assert all(len(set(s[i : i + n + 1])) <= n for i in range(len(s) - n))


def test_longest_substring_of_distinct_characters_is_whole():
    assert length_of_longest_substring("abcdef") == len("abcdef")
    assert length_of_longest_substring("") == 0


def test_trap_classic_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@given(st.lists(st.integers(min_value=0, max_value=20), max_size=30))
def test_trap_is_symmetric_and_non_negative(heights):
    water = trap(heights)
    assert water >= 0
    assert water == trap(heights[::-1])


@given(st.lists(st.integers(min_value=0, max_value=20), max_size=30))
def test_trap_holds_nothing_on_a_slope(heights):
    assert trap(sorted(heights)) == 0


@given(st.integers(min_value=0, max_value=50))
def test_trap_single_basin(depth):
    assert trap([depth, 0, depth]) == depth


@given(st.text(alphabet="ab", max_size=16))
def test_longest_palindrome_invariants(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    if s:
        assert len(result) >= 1
    longer = [
        s[i : i + size]
        for size in range(len(result) + 1, len(s) + 1)
        for i in range(len(s) - size + 1)
    ]
    assert not any(piece == piece[::-1] for piece in longer)


def test_longest_palindrome_of_palindrome_is_itself():
    assert longest_palindrome("racecar") == "racecar"


def test_largest_rectangle_classic_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@given(st.lists(st.integers(min_value=0, max_value=30), min_size=1, max_size=25))
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=1, max_value=20))
def test_largest_rectangle_of_flat_histogram(height, width):
    assert largest_rectangle_area([height] * width) == height * width


def test_largest_rectangle_of_empty_histogram():
    assert largest_rectangle_area([]) == 0


def test_dungeon_classic_example():
    assert calculate_minimum_hp([[-2, -3, 3], [-5, -10, 1], [10, 30, -5]]) == 7


@given(
    st.lists(
        st.lists(st.integers(min_value=0, max_value=10), min_size=3, max_size=3),
        min_size=1,
        max_size=4,
    )
)
def test_dungeon_without_damage_needs_one(dungeon):
    assert calculate_minimum_hp(dungeon) == 1


@given(
    st.lists(
        st.lists(st.integers(min_value=-20, max_value=20), min_size=2, max_size=2),
        min_size=1,
        max_size=4,
    )
)
def test_dungeon_result_is_at_least_one(dungeon):
    assert calculate_minimum_hp(dungeon) >= 1


@given(st.integers(min_value=1, max_value=100))
def test_dungeon_single_cell_damage(damage):
    assert calculate_minimum_hp([[-damage]]) == damage + 1


def test_dungeon_rejects_empty():
    with pytest.raises(ValueError):
        calculate_minimum_hp([])
    with pytest.raises(ValueError):
        calculate_minimum_hp([[]])


@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=40))
def test_max_subarray_sum_agrees_with_kadane(nums):
    assert max_subarray_sum(nums) == kadane(nums)


def test_max_subarray_sum_rejects_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@given(st.integers(min_value=0, max_value=15))
def test_rot_oranges_along_a_row(fresh):
    assert rot_oranges([[2] + [1] * fresh]) == fresh


def test_rot_oranges_unreachable_orange():
    assert rot_oranges([[2, 0, 1]]) == -1


def test_rot_oranges_does_not_modify_grid():
    grid = [[2, 1, 0, 2, 1], [1, 0, 1, 2, 1], [1, 0, 0, 2, 1]]
    copy = [row[:] for row in grid]
    assert rot_oranges(grid) >= 0
    assert grid == copy


def test_rot_oranges_rejects_unknown_cell():
    with pytest.raises(ValueError):
        rot_oranges([[2, 5]])


@given(
    st.lists(st.integers(min_value=-100, max_value=100), max_size=15),
    st.lists(st.integers(min_value=-100, max_value=100), max_size=15),
)
def test_median_matches_statistics(first, second):
    if not first and not second:
        with pytest.raises(ValueError):
            find_median_sorted_arrays(first, second)
        return
    expected = statistics.median(sorted(first + second))
    assert find_median_sorted_arrays(sorted(first), sorted(second)) == pytest.approx(expected)