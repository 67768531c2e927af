"""Self-balancing AVL binary search tree with insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``height`` counts nodes on the longest downward path."""

    key: int
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update_height(node)
    balance = _balance_factor(node)
    if balance == 2:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance == -2:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _rightmost(node: AVLNode) -> AVLNode:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """An AVL tree of distinct keys; inserting an existing key changes nothing."""

    def __init__(self, keys=()):
        self.root: Optional[AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key) -> bool:
        """Insert ``key``; return True if it was not already present."""
        self.root, added = self._insert(self.root, key)
        if added:
            self._size += 1
        return added

    def _insert(self, node: Optional[AVLNode], key):
        if node is None:
            return AVLNode(key), True
        if key < node.key:
            node.left, added = self._insert(node.left, key)
        elif key > node.key:
            node.right, added = self._insert(node.right, key)
        else:
            return node, False
        return _rebalance(node), added

    def delete(self, key) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self.root = self._delete(self.root, key)
        self._size -= 1

    def _delete(self, node: Optional[AVLNode], key) -> Optional[AVLNode]:
        if node is None:
            raise KeyError(key)
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None and node.right is None:
                return None
            if _height(node.left) > _height(node.right):
                replacement = _rightmost(node.left)
                node.key = replacement.key
                node.left = self._delete(node.left, replacement.key)
            else:
                replacement = _leftmost(node.right)
                node.key = replacement.key
                node.right = self._delete(node.right, replacement.key)
        return _rebalance(node)

    def _walk_preorder(self) -> Iterator[int]:
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node.key
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def _walk_inorder(self) -> Iterator[int]:
        pending: List[AVLNode] = []
        node = self.root
        while node is not None or pending:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def preorder(self) -> List[int]:
        """Keys in root, left, right order."""
        return list(self._walk_preorder())

    def inorder(self) -> List[int]:
        """Keys in ascending order."""
        return list(self._walk_inorder())

    def __iter__(self) -> Iterator[int]:
        return self._walk_inorder()

    def __contains__(self, key) -> bool:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size