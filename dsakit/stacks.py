"""Stacks and stack-based expression utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


@dataclass
class _Link:
    value: object
    below: Optional[_Link] = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self, values=()):
        self._top: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value) -> None:
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("pop from an empty stack")
        value = self._top.value
        self._top = self._top.below
        self._size -= 1
        return value

    def __iter__(self) -> Iterator:
        """Values from top to bottom."""
        link = self._top
        while link is not None:
            yield link.value
            link = link.below

    def __len__(self) -> int:
        return self._size


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List = []

    def push(self, value) -> None:
        if self.is_full():
            raise StackOverflowError(f"stack of capacity {self.capacity} is full")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self):
        """The top value, left in place."""
        if self.is_empty():
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator:
        """Values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


_PAIRS = {")": "(", "}": "{", "]": "["}


def is_balanced(expression: str) -> bool:
    """Whether the (), {} and [] brackets in ``expression`` nest correctly."""
    opened: List[str] = []
    for char in expression:
        if char in "({[":
            opened.append(char)
        elif char in _PAIRS:
            if not opened or opened.pop() != _PAIRS[char]:
                return False
    return not opened


def precedence(operator: str) -> int:
    """2 for * and /, 1 for + and -, 0 for anything else."""
    if operator in "+-" and operator:
        return 1
    if operator in "*/" and operator:
        return 2
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    ASCII letters and digits are operands; every other character is an
    operator ranked by :func:`precedence`. An operator is pushed only when it
    outranks the one on top of the stack, otherwise the top is emitted first.
    """
    output: List[str] = []
    operators: List[str] = []
    for char in expression:
        if char.isascii() and char.isalnum():
            output.append(char)
            continue
        while operators and precedence(char) <= precedence(operators[-1]):
            output.append(operators.pop())
        operators.append(char)
    output.extend(reversed(operators))
    return "".join(output)