from hypothesis import given
from hypothesis import strategies as st

from algokit.searching import (
    binary_search,
    exponential_search,
    linear_search,
    ternary_search,
)

sorted_lists = st.lists(st.integers(min_value=-50, max_value=50)).map(sorted)


def test_ternary_search_driver_example():
    assert ternary_search(list(range(1, 11)), 5) == 4


def test_ternary_search_driver_missing():
    assert ternary_search(list(range(1, 11)), 50) is None


def test_exponential_search_driver_example():
    assert exponential_search([2, 3, 4, 10, 40], 10) == 3


def test_linear_search_driver_example():
    assert linear_search([2, 3, 4, 10, 40], 10) == 3


def test_empty_sequence():
    assert binary_search([], 7) is None
    assert ternary_search([], 7) is None
    assert exponential_search([], 7) is None
    assert linear_search([], 7) is None


@given(values=sorted_lists, target=st.integers(min_value=-60, max_value=60))
def test_sorted_search_finds_present_values(values, target):
    results = [
        binary_search(values, target),
        ternary_search(values, target),
        exponential_search(values, target),
    ]
    for result in results:
        if target in values:
            assert values[result] == target
        else:
            assert result is None


@given(values=st.lists(st.integers(), min_size=1, unique=True).map(sorted))
def test_every_element_found_at_its_index(values):
    for index, value in enumerate(values):
        assert binary_search(values, value) == index
        assert ternary_search(values, value) == index
        assert exponential_search(values, value) == index


@given(
    values=st.lists(st.integers(min_value=-10, max_value=10)),
    target=st.integers(min_value=-12, max_value=12),
)
def test_linear_search_returns_first_occurrence(values, target):
    result = linear_search(values, target)
    if target in values:
        assert result == values.index(target)
    else:
        assert result is None


def test_linear_search_unsorted_input():
    values = [9, 1, 7, 1, 3]
    assert linear_search(values, 1) == values.index(1)
    assert linear_search(values, 3) == len(values) - 1


def test_single_element():
    assert binary_search([8], 8) == 0
    assert binary_search([8], 9) is None
    assert ternary_search([8], 8) == 0
    assert ternary_search([8], 9) is None
    assert exponential_search([8], 8) == 0
    assert exponential_search([8], 9) is None
    assert linear_search([8], 8) == 0
    assert linear_search([8], 9) is None


def test_values_outside_range():
    values = [2, 3, 4, 10, 40]
    below = values[0] - 1
    above = values[-1] + 1
    assert binary_search(values, below) is None
    assert binary_search(values, above) is None
    assert ternary_search(values, below) is None
    assert ternary_search(values, above) is None
    assert exponential_search(values, below) is None
    assert exponential_search(values, above) is None