"""Hash tables for integer keys: linear probing, quadratic probing, chaining."""

from __future__ import annotations

import bisect
from typing import Iterable, List, Optional


class TableFullError(Exception):
    """Raised when an open-addressing table has no reachable free slot."""


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError("table size must be positive")
    return size


def _probe_insert(slots: List[Optional[int]], positions: Iterable[int], key: int) -> int:
    for position in positions:
        if slots[position] is None:
            slots[position] = key
            return position
    raise TableFullError(f"no free slot for key {key}")


class LinearProbingTable:
    """Open addressing that tries home, home + 1, home + 2, ... in turn."""

    def __init__(self, size: int = 10):
        self._slots: List[Optional[int]] = [None] * _check_size(size)

    def _positions(self, key: int):
        size = len(self._slots)
        home = key % size
        return ((home + step) % size for step in range(size))

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it landed in."""
        return _probe_insert(self._slots, self._positions(key), key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding ``key``, or None if it is not stored."""
        for position in self._positions(key):
            if self._slots[position] == key:
                return position
        return None

    def slots(self) -> List[Optional[int]]:
        """A copy of the slot array; empty slots are None."""
        return list(self._slots)


class QuadraticProbingTable:
    """Open addressing that tries home + i*i for i = 0, 1, 2, ..."""

    def __init__(self, size: int = 10):
        self._slots: List[Optional[int]] = [None] * _check_size(size)

    def _positions(self, key: int):
        size = len(self._slots)
        home = key % size
        return ((home + step * step) % size for step in range(size))

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it landed in."""
        return _probe_insert(self._slots, self._positions(key), key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding ``key``; an empty slot on the way ends the search."""
        for position in self._positions(key):
            stored = self._slots[position]
            if stored == key:
                return position
            if stored is None:
                return None
        return None

    def slots(self) -> List[Optional[int]]:
        """A copy of the slot array; empty slots are None."""
        return list(self._slots)


class ChainedHashTable:
    """Separate chaining with each bucket kept in ascending order."""

    def __init__(self, size: int = 10):
        self._buckets: List[List[int]] = [[] for _ in range(_check_size(size))]

    def _bucket(self, key: int) -> List[int]:
        return self._buckets[key % len(self._buckets)]

    def insert(self, key: int) -> None:
        """Add ``key`` to its bucket, keeping the bucket sorted."""
        bisect.insort_left(self._bucket(key), key)

    def search(self, key: int) -> bool:
        """Whether ``key`` is stored."""
        return key in self._bucket(key)

    __contains__ = search

    def chains(self) -> List[List[int]]:
        """Copies of every bucket, in bucket order."""
        return [list(bucket) for bucket in self._buckets]

    def display(self) -> str:
        """One line per bucket with its keys joined by ' -> '."""
        return "\n".join(" -> ".join(map(str, bucket)) for bucket in self._buckets)