"""Array-backed max-heaps: building, deleting and heap sort.

Heaps are plain lists with the root at position 0. The index helpers work
with 1-based positions, the numbering where a node ``i`` has children
``2i`` and ``2i + 1``.
"""

from __future__ import annotations

from typing import Iterable, List


def _sift_up(heap: List, index: int) -> None:
    value = heap[index]
    while index > 0 and value > heap[(index - 1) // 2]:
        parent = (index - 1) // 2
        heap[index] = heap[parent]
        index = parent
    heap[index] = value


def _sift_down(heap: List, index: int, size: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and heap[largest] < heap[left]:
            largest = left
        if right < size and heap[largest] < heap[right]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def _sort_heap_in_place(heap: List) -> List:
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap


def build_heap_by_insertion(values: Iterable) -> List:
    """Return a max-heap built by inserting the values one at a time."""
    heap = list(values)
    for index in range(1, len(heap)):
        _sift_up(heap, index)
    return heap


def delete_max(heap: List):
    """Remove and return the largest element of a max-heap list."""
    if not heap:
        raise IndexError("delete from an empty heap")
    last = heap.pop()
    if not heap:
        return last
    top = heap[0]
    heap[0] = last
    _sift_down(heap, 0, len(heap))
    return top


def heap_sort(values: Iterable) -> List:
    """Sort ascending by building a heap with insertions, then deleting."""
    return _sort_heap_in_place(build_heap_by_insertion(values))


def heapify(values: Iterable) -> List:
    """Return a max-heap built bottom-up by sifting internal nodes down."""
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, index, len(heap))
    return heap


def heap_sort_heapify(values: Iterable) -> List:
    """Sort ascending using a bottom-up heapify as the first phase."""
    return _sort_heap_in_place(heapify(values))


def parent_index(index: int, size: int) -> int:
    """1-based parent position of ``index``; the root has no parent."""
    if index <= 1 or index > size:
        raise IndexError(f"position {index} has no parent in a heap of {size}")
    return index // 2


def left_child_index(index: int, size: int) -> int:
    """1-based left child position of ``index``."""
    if index < 1 or 2 * index > size:
        raise IndexError(f"position {index} has no left child in a heap of {size}")
    return 2 * index


def right_child_index(index: int, size: int) -> int:
    """1-based right child position of ``index``."""
    if index < 1 or 2 * index + 1 > size:
        raise IndexError(f"position {index} has no right child in a heap of {size}")
    return 2 * index + 1