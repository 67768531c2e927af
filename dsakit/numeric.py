"""Small numeric problems: Fibonacci, counting trees, tree heights, coins, permutations."""

from __future__ import annotations

import bisect
import math
from typing import List, NamedTuple, Sequence, Tuple

COINS: Tuple[int, ...] = (1, 2, 5, 10, 20, 50, 100, 200, 500, 2000)
"""Denominations used by :func:`greedy_coins`, ascending."""


class TreeCounts(NamedTuple):
    """Numbers of distinct binary trees on a given number of nodes."""

    unlabelled: int
    labelled: int


class Range(NamedTuple):
    """Inclusive lower and upper limits."""

    minimum: int
    maximum: int


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(1) == fibonacci(2) == 1``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """``n!`` for non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.factorial(n)


def combinations(n: int, r: int) -> int:
    """Ways to choose ``r`` of ``n`` items."""
    if n < 0 or not 0 <= r <= n:
        raise ValueError("need 0 <= r <= n")
    return math.comb(n, r)


def tree_counts(nodes: int) -> TreeCounts:
    """Binary trees on ``nodes`` nodes: shapes (Catalan number) and labelled trees."""
    if nodes < 0:
        raise ValueError("node count must not be negative")
    catalan = combinations(2 * nodes, nodes) // (nodes + 1)
    return TreeCounts(catalan, catalan * factorial(nodes))


def height_range(nodes: int) -> Range:
    """Least and greatest height (in edges) of a binary tree with ``nodes`` nodes."""
    if nodes < 1:
        raise ValueError("a tree needs at least one node")
    return Range((nodes + 1).bit_length() - 2, nodes - 1)


def node_range(height: int) -> Range:
    """Fewest and most nodes of a binary tree whose height (in edges) is ``height``."""
    if height < 0:
        raise ValueError("height must not be negative")
    return Range(height + 1, 2 ** (height + 1) - 1)


def series_sum(n: int) -> int:
    """1 + 2 + ... + n; zero when ``n`` is below 1."""
    return n * (n + 1) // 2 if n > 0 else 0


def greedy_coins(amount: int) -> List[int]:
    """Pay ``amount`` greedily, always taking the largest coin that still fits."""
    paid: List[int] = []
    while amount > 0:
        coin = COINS[bisect.bisect_right(COINS, amount) - 1]
        paid.append(coin)
        amount -= coin
    return paid


def next_permutation(values: Sequence) -> List:
    """The lexicographically next arrangement of ``values``.

    After the last arrangement (descending order) it wraps round to the
    first one (ascending order).
    """
    items = list(values)
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = len(items) - 1
        while items[successor] <= items[pivot]:
            successor -= 1
        items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def rotate_left(values: Sequence, shift: int) -> List:
    """``values`` rotated so the element at ``shift`` comes first (0 <= shift <= len)."""
    if not 0 <= shift <= len(values):
        raise ValueError(f"shift {shift} out of range for {len(values)} values")
    return [*values[shift:], *values[:shift]]