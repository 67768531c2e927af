"""Comparison and distribution sorts over lists of numbers.

Every function returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional


def _greater(first, second) -> bool:
    return first > second


def bubble_sort(values: Iterable, out_of_order: Optional[Callable] = None) -> List:
    """Bubble sort; ``out_of_order(a, b)`` is True when ``a`` must move past ``b``.

    The default comparator swaps when ``a > b``, giving ascending order.
    A pass with no swaps ends the sort early.
    """
    should_swap = out_of_order if out_of_order is not None else _greater
    items = list(values)
    for done in range(len(items) - 1):
        swapped = False
        for position in range(len(items) - done - 1):
            if should_swap(items[position], items[position + 1]):
                items[position], items[position + 1] = items[position + 1], items[position]
                swapped = True
        if not swapped:
            break
    return items


def _check_non_negative(items: List[int]) -> None:
    for item in items:
        if item < 0:
            raise ValueError(f"distribution sorts need non-negative integers, got {item}")


def count_sort(values: Iterable[int]) -> List[int]:
    """Counting sort for non-negative integers."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items)
    counts = [0] * (max(items) + 1)
    for item in items:
        counts[item] += 1
    return [number for number, count in enumerate(counts) for _ in range(count)]


def bucket_sort(values: Iterable[int]) -> List[int]:
    """Bin sort for non-negative integers: one bin per possible value."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items)
    bins: List[List[int]] = [[] for _ in range(max(items) + 1)]
    for item in items:
        bins[item].append(item)
    return [item for bucket in bins for item in bucket]


def _merge(left: List, right: List) -> List:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> List:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: List, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for position in range(low, high):
        if items[position] < pivot:
            boundary += 1
            items[boundary], items[position] = items[position], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> List:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot = _partition(items, low, high)
            ranges.append((low, pivot - 1))
            ranges.append((pivot + 1, high))
    return items


def insertion_sort(values: Iterable) -> List:
    """Insertion sort, shifting larger elements right."""
    items = list(values)
    for index in range(1, len(items)):
        current = items[index]
        position = index - 1
        while position >= 0 and items[position] > current:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current
    return items


def selection_sort(values: Iterable) -> List:
    """Selection sort, swapping the smallest remaining element into place."""
    items = list(values)
    for index in range(len(items) - 1):
        smallest = min(range(index, len(items)), key=items.__getitem__)
        items[index], items[smallest] = items[smallest], items[index]
    return items


def sort_descending(values: Iterable) -> List:
    """Largest first."""
    return sorted(values, reverse=True)