"""Array-backed queues and a simple FIFO drain helper."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional, Tuple


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear array queue of fixed capacity.

    Slots freed by dequeuing are not reused: once ``capacity`` values have
    been enqueued the queue reports full, however many were taken out.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List = []
        self._front = 0

    def enqueue(self, value) -> None:
        if self.is_full():
            raise QueueFullError(f"queue of capacity {self.capacity} is full")
        self._items.append(value)

    def dequeue(self):
        """Remove and return the oldest value."""
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        value = self._items[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items) - self._front


class CircularQueue:
    """A circular array queue over ``size`` slots, one of which stays unused.

    It therefore holds at most ``size - 1`` values, and slots are reused as
    values are dequeued.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: List[Optional[object]] = [None] * size
        self._front = 0
        self._rear = 0

    def enqueue(self, value) -> None:
        if self.is_full():
            raise QueueFullError(f"circular queue of size {self.size} is full")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self):
        """Remove and return the oldest value."""
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size


def drain(values: Iterable) -> Iterator[Tuple[int, object]]:
    """Queue every value, then yield ``(position, value)`` in FIFO order from 1."""
    queue = deque(values)
    position = 0
    while queue:
        position += 1
        yield position, queue.popleft()