"""Everyday list algorithms: gaps, subarray sums, duplicates, missing values, set operations."""

from __future__ import annotations

import bisect
from itertools import groupby
from typing import List, Optional, Sequence, Tuple


def _require_items(values: Sequence, what: str) -> None:
    if not values:
        raise ValueError(f"{what} needs at least one value")


def gap_count(values: Sequence[int]) -> int:
    """How many integers are skipped between neighbouring values.

    Only gaps where a value is followed by a larger one count.
    """
    return sum(
        following - current - 1
        for current, following in zip(values, values[1:])
        if current + 1 < following
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    _require_items(values, "max_subarray_sum")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_suffix_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty suffix ``values[i:]``."""
    _require_items(values, "max_suffix_sum")
    best = None
    running = 0
    for value in reversed(values):
        running += value
        if best is None or running >= best:
            best = running
    return best


def alternate_swap(values: Sequence) -> List:
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...); an odd last item stays."""
    items = list(values)
    for index in range(0, len(items) - 1, 2):
        items[index], items[index + 1] = items[index + 1], items[index]
    return items


def is_sorted(values: Sequence) -> bool:
    """Whether the values are in non-decreasing order."""
    return all(current <= following for current, following in zip(values, values[1:]))


def delete_at(values: Sequence, index: int) -> List:
    """A copy of ``values`` without the element at ``index``."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for {len(values)} values")
    return [*values[:index], *values[index + 1:]]


def insert_at(values: Sequence, index: int, value) -> List:
    """A copy of ``values`` with ``value`` placed at ``index`` (0..len allowed)."""
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} out of range for {len(values)} values")
    return [*values[:index], value, *values[index:]]


def insert_sorted(values: Sequence, value) -> List:
    """A copy of an ascending list with ``value`` inserted after any equal values."""
    items = list(values)
    bisect.insort_right(items, value)
    return items


def duplicate_counts(values: Sequence) -> List[Tuple[object, int]]:
    """``(value, count)`` for each run of two or more equal neighbours in a sorted list."""
    counted = ((value, sum(1 for _ in run)) for value, run in groupby(values))
    return [(value, count) for value, count in counted if count > 1]


def duplicates(values: Sequence) -> List:
    """Each value of a sorted list that is repeated, reported once."""
    return [value for value, _ in duplicate_counts(values)]


def first_missing(values: Sequence[int]) -> Optional[int]:
    """First integer missing from an ascending run of consecutive integers.

    Returns None when nothing is missing.
    """
    if not values:
        return None
    offset = values[0]
    for index, value in enumerate(values):
        if value - index != offset:
            return value - 1
    return None


def missing_elements(values: Sequence[int]) -> List[int]:
    """All integers missing between the first and last value of an ascending list."""
    if not values:
        return []
    offset = values[0]
    missing: List[int] = []
    for index, value in enumerate(values):
        while offset < value - index:
            missing.append(index + offset)
            offset += 1
    return missing


def missing_elements_hashed(values: Sequence[int]) -> List[int]:
    """Integers between the minimum and maximum that do not occur; order of input is free."""
    if not values:
        return []
    present = set(values)
    return [number for number in range(min(present), max(present) + 1) if number not in present]


def missing_natural(values: Sequence[int]) -> int:
    """The one number missing from 1..n, where n is the last value of the list."""
    _require_items(values, "missing_natural")
    last = values[-1]
    return last * (last + 1) // 2 - sum(values)


def pair_sums(values: Sequence[int], target: int) -> List[Tuple[int, int]]:
    """Pairs from an ascending list adding up to ``target``, found with two pointers."""
    pairs: List[Tuple[int, int]] = []
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            pairs.append((values[low], values[high]))
            low += 1
            high -= 1
        elif total > target:
            high -= 1
        else:
            low += 1
    return pairs


def intersection(first: Sequence, second: Sequence) -> List:
    """Values of the shorter list that also appear in the longer one.

    For each value of the shorter list (the first one on a tie), every equal
    element of the other list is reported, in that list's order.
    """
    shorter, longer = (first, second) if len(first) <= len(second) else (second, first)
    return [match for value in shorter for match in longer if match == value]


def union(first: Sequence, second: Sequence) -> List:
    """All of ``first``, then each value of ``second`` not already collected."""
    result = list(first)
    for value in second:
        if value not in result:
            result.append(value)
    return result


def merge_sorted(first: Sequence, second: Sequence) -> List:
    """Merge two ascending lists into one ascending list."""
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def negatives_first(values: Sequence[int]) -> List[int]:
    """Rearrange so every negative value comes before every non-negative one."""
    items = list(values)
    low, high = 0, len(items) - 1
    while low < high:
        while low < len(items) and items[low] < 0:
            low += 1
        while high >= 0 and items[high] >= 0:
            high -= 1
        if low < high:
            items[low], items[high] = items[high], items[low]
    return items


def search_descending(values: Sequence, key) -> int:
    """Binary search in a descending list: the index of ``key``, or ``len(values)``."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = (start + end) // 2
        if values[middle] == key:
            return middle
        if values[middle] < key:
            end = middle - 1
        else:
            start = middle + 1
    return len(values)


def second_largest(values: Sequence):
    """The largest value smaller than the maximum, or None when all values are equal."""
    _require_items(values, "second_largest")
    top = max(values)
    rest = [value for value in values if value != top]
    return max(rest) if rest else None


def column_wave(matrix: Sequence[Sequence]) -> List[List]:
    """The columns of a rectangular matrix, each read top to bottom."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*matrix)]