"""Binary trees built level by level, with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence

NO_CHILD = -1
"""Marker in :func:`build_tree` input meaning "this child is absent"."""


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from values given in level order.

    The first value is the root. Then, for each node in breadth-first order,
    the next two values are its left and right child; ``NO_CHILD`` (-1)
    means that child is absent. Running out of values leaves the remaining
    children absent. An empty input gives None.
    """
    supply = iter(values)
    try:
        root = TreeNode(next(supply))
    except StopIteration:
        return None
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(supply, NO_CHILD)
        if left != NO_CHILD:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(supply, NO_CHILD)
        if right != NO_CHILD:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def preorder(root: Optional[TreeNode]) -> List[int]:
    """Node values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> List[int]:
    """Node values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> List[int]:
    """Node values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def levelorder(root: Optional[TreeNode]) -> List[int]:
    """Node values level by level, left to right."""
    if root is None:
        return []
    result = [root.data]
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for child in (node.left, node.right):
            if child is not None:
                result.append(child.data)
                pending.append(child)
    return result


def iterative_preorder(root: Optional[TreeNode]) -> List[int]:
    """Preorder traversal driven by an explicit stack."""
    result: List[int] = []
    stack: List[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return result


def iterative_inorder(root: Optional[TreeNode]) -> List[int]:
    """Inorder traversal driven by an explicit stack."""
    result: List[int] = []
    stack: List[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def iterative_postorder(root: Optional[TreeNode]) -> List[int]:
    """Postorder traversal; each stacked node is revisited once its right side is done."""
    result: List[int] = []
    stack: List[tuple] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append((node, False))
            node = node.left
        else:
            top, right_done = stack.pop()
            if right_done:
                result.append(top.data)
            else:
                stack.append((top, True))
                node = top.right
    return result


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


class Family(NamedTuple):
    """A node of an array-stored tree with its children."""

    parent: object
    left: object
    right: object


def array_children(values: Sequence) -> List[Family]:
    """Parent and children of each internal node of a tree stored in an array.

    ``values`` holds positions 1..n in order; position ``i`` has its left
    child at ``2i`` and its right child at ``2i + 1``. A missing right child
    is None.
    """
    count = len(values)
    return [
        Family(
            values[position - 1],
            values[2 * position - 1],
            values[2 * position] if 2 * position < count else None,
        )
        for position in range(1, count // 2 + 1)
    ]