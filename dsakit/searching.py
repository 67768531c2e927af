"""Searching in lists: linear, binary, interpolation and bound lookups."""

from __future__ import annotations

import bisect
from typing import Optional, Sequence


def binary_search(values: Sequence, key) -> Optional[int]:
    """Index of ``key`` in an ascending sequence, or None if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = (start + end) // 2
        if values[middle] == key:
            return middle
        if key < values[middle]:
            end = middle - 1
        else:
            start = middle + 1
    return None


def linear_search(values: Sequence, key) -> Optional[int]:
    """Index of the first occurrence of ``key``, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def _truncating_divide(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def interpolation_position(values: Sequence[int], key: int) -> Optional[int]:
    """Position estimated by one interpolation step over a uniform sorted list.

    Returns the estimate when it lies inside the list, otherwise None.
    """
    if not values:
        raise ValueError("cannot interpolate in an empty sequence")
    low, high = 0, len(values) - 1
    spread = values[high] - values[low]
    if spread == 0:
        return low if values[low] == key else None
    position = low + _truncating_divide((high - low) * (key - values[low]), spread)
    if 0 <= position < len(values):
        return position
    return None


def contains_sorted(values: Sequence, key) -> bool:
    """Whether ``key`` occurs in an ascending sequence."""
    index = bisect.bisect_left(values, key)
    return index < len(values) and values[index] == key


def lower_bound(values: Sequence, key) -> int:
    """First index whose value is not less than ``key``."""
    return bisect.bisect_left(values, key)


def upper_bound(values: Sequence, key) -> int:
    """First index whose value is greater than ``key``."""
    return bisect.bisect_right(values, key)


def find_index(values: Sequence, key) -> int:
    """Index of the first ``key``, or ``len(values)`` when it is absent."""
    found = linear_search(values, key)
    return len(values) if found is None else found