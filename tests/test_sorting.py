import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    bucket_sort,
    count_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_descending,
)

GENERAL = st.lists(st.integers(-1000, 1000))
NON_NEGATIVE = st.lists(st.integers(0, 300))


@given(values=GENERAL)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@given(values=GENERAL)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(values=GENERAL)
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


@given(values=GENERAL)
def test_insertion_sort_matches_sorted(values):
    assert insertion_sort(values) == sorted(values)


@given(values=GENERAL)
def test_selection_sort_matches_sorted(values):
    assert selection_sort(values) == sorted(values)


@given(values=NON_NEGATIVE)
def test_count_sort_matches_sorted(values):
    assert count_sort(values) == sorted(values)


@given(values=NON_NEGATIVE)
def test_bucket_sort_matches_sorted(values):
    assert bucket_sort(values) == sorted(values)


def test_input_is_left_unchanged():
    original = [5, 3, 9, 1, 3]
    values = list(original)
    assert bubble_sort(values) == [1, 3, 3, 5, 9]
    assert merge_sort(values) == [1, 3, 3, 5, 9]
    assert quick_sort(values) == [1, 3, 3, 5, 9]
    assert insertion_sort(values) == [1, 3, 3, 5, 9]
    assert selection_sort(values) == [1, 3, 3, 5, 9]
    assert count_sort(values) == [1, 3, 3, 5, 9]
    assert bucket_sort(values) == [1, 3, 3, 5, 9]
    assert values == original


def test_empty_input():
    assert bubble_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert count_sort([]) == []
    assert bucket_sort([]) == []


def test_count_sort_rejects_negatives():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])


def test_bucket_sort_rejects_negatives():
    with pytest.raises(ValueError):
        bucket_sort([3, -1, 2])


@given(values=st.lists(st.integers(-100, 100)))
def test_bubble_sort_with_reversed_comparator(values):
    assert bubble_sort(values, lambda a, b: a < b) == sorted(values, reverse=True)


@given(values=st.lists(st.integers()))
def test_sort_descending(values):
    result = sort_descending(values)
    assert sorted(result) == sorted(values)
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_merge_sort_floats():
    values = [2.5, -1.0, 2.5, 0.0]
    assert merge_sort(values) == sorted(values)