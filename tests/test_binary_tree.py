import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import (
    NO_CHILD,
    Family,
    TreeNode,
    array_children,
    build_tree,
    height,
    inorder,
    iterative_inorder,
    iterative_postorder,
    iterative_preorder,
    levelorder,
    postorder,
    preorder,
)

FULL = [1, 2, 3, 4, 5, 6, 7] + [NO_CHILD] * 8

tree_inputs = st.lists(
    st.one_of(st.integers(min_value=0, max_value=100), st.just(NO_CHILD)),
    min_size=1,
    max_size=40,
)


def test_empty_input_builds_no_tree():
    assert build_tree([]) is None


@pytest.mark.parametrize(
    "walk",
    [preorder, inorder, postorder, levelorder, iterative_preorder,
     iterative_inorder, iterative_postorder],
)
def test_traversals_of_empty_tree(walk):
    assert walk(None) == []


def test_height_of_empty_tree():
    assert height(None) == 0


def test_full_tree_preorder():
    assert preorder(build_tree(FULL)) == [1, 2, 4, 5, 3, 6, 7]


def test_full_tree_inorder():
    assert inorder(build_tree(FULL)) == [4, 2, 5, 1, 6, 3, 7]


def test_full_tree_postorder():
    assert postorder(build_tree(FULL)) == [4, 5, 2, 6, 7, 3, 1]


def test_levelorder_round_trips_full_input():
    assert levelorder(build_tree(FULL)) == [v for v in FULL if v != NO_CHILD]


def test_build_links_children():
    root = build_tree([10, 20, NO_CHILD, NO_CHILD, 30])
    assert root.data == 10
    assert root.right is None
    assert root.left.data == 20
    assert root.left.left is None
    assert root.left.right.data == 30


def test_left_chain_height_equals_node_count():
    root = build_tree([1, 2, NO_CHILD, 3, NO_CHILD, 4, NO_CHILD])
    assert height(root) == len(preorder(root))
    assert inorder(root) == list(reversed(preorder(root)))


def test_trailing_values_are_ignored_once_tree_is_complete():
    root = build_tree([5, NO_CHILD, NO_CHILD, 8, 9])
    assert levelorder(root) == [5]


def test_manual_nodes():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert inorder(root) == sorted(preorder(root))


@given(tree_inputs)
def test_iterative_matches_recursive(values):
    root = build_tree(values)
    assert iterative_preorder(root) == preorder(root)
    assert iterative_inorder(root) == inorder(root)
    assert iterative_postorder(root) == postorder(root)


@given(tree_inputs)
def test_traversals_visit_same_nodes(values):
    root = build_tree(values)
    order = preorder(root)
    assert sorted(order) == sorted(inorder(root)) == sorted(postorder(root))
    assert sorted(order) == sorted(levelorder(root))
    assert order[0] == root.data == postorder(root)[-1] == levelorder(root)[0]


@given(tree_inputs)
def test_levelorder_is_prefix_of_present_values(values):
    present = [values[0]] + [v for v in values[1:] if v != NO_CHILD]
    visited = levelorder(build_tree(values))
    assert visited == present[: len(visited)]


@given(tree_inputs)
def test_height_bounds(values):
    root = build_tree(values)
    count = len(preorder(root))
    assert count.bit_length() <= height(root) <= count


def test_array_children_odd_count():
    values = ["A", "B", "C", "D", "E"]
    assert array_children(values) == [
        Family(values[0], values[1], values[2]),
        Family(values[1], values[3], values[4]),
    ]


def test_array_children_missing_right():
    values = ["A", "B", "C", "D"]
    families = array_children(values)
    assert len(families) == len(values) // 2
    assert families[-1] == Family(values[1], values[3], None)


def test_array_children_single_node():
    assert array_children(["A"]) == []