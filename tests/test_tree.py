import pytest

from algokit.tree import (
    TreeNode,
    build_level_order,
    build_preorder,
    count_internal,
    count_leaves,
    height,
    inorder,
    level_order,
    postorder,
    preorder,
    size,
    total,
)

# The example tree documented alongside the traversals:
#              1
#          2       7
#      3       6        8
#  4       5          9    10
PREORDER_INPUT = [1, 2, 3, 4, -1, -1, 5, -1, -1, 6, -1, -1, 7, -1, 8, 9, -1, -1, 10, -1, -1]
LEVEL_INPUT = [1, 2, 7, 3, 6, -1, 8, 4, 5, -1, -1, 9, 10, -1, -1, -1, -1, -1, -1, -1, -1]

PRE = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
IN = [4, 3, 5, 2, 6, 1, 7, 9, 8, 10]
POST = [4, 5, 3, 6, 2, 9, 10, 8, 7, 1]


@pytest.fixture
def tree():
    return build_preorder(PREORDER_INPUT)


def test_traversals_match_documented_example(tree):
    assert preorder(tree) == PRE
    assert inorder(tree) == IN
    assert postorder(tree) == POST


def test_level_order_builder_gives_same_tree():
    root = build_level_order(LEVEL_INPUT)
    assert preorder(root) == PRE
    assert inorder(root) == IN
    assert postorder(root) == POST


def test_level_order_reproduces_level_input(tree):
    assert level_order(tree) == [v for v in LEVEL_INPUT if v != -1]


def test_preorder_builder_round_trip(tree):
    assert preorder(tree) == [v for v in PREORDER_INPUT if v != -1]


def test_size_and_total(tree):
    assert size(tree) == len(PRE)
    assert total(tree) == sum(PRE)


def test_leaf_and_internal_counts(tree):
    assert count_leaves(tree) == 5
    assert count_internal(tree) == size(tree) - count_leaves(tree)


def test_height(tree):
    assert height(tree) == 4


def test_empty_tree():
    assert build_preorder([-1]) is None
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert size(None) == 0
    assert total(None) == 0
    assert count_leaves(None) == 0
    assert count_internal(None) == 0
    assert height(None) == 0


def test_single_node():
    root = TreeNode(7)
    assert height(root) == 1
    assert count_leaves(root) == 1
    assert count_internal(root) == 0
    assert level_order(root) == [7]


def test_build_preorder_runs_out():
    with pytest.raises(ValueError):
        build_preorder([1, 2, -1])


def test_build_level_order_runs_out():
    with pytest.raises(ValueError):
        build_level_order([1, 2])


def test_build_level_order_empty():
    with pytest.raises(ValueError):
        build_level_order([])


def test_level_order_single_root_no_children():
    root = build_level_order([5, -1, -1])
    assert preorder(root) == [5]
    assert root.left is None and root.right is None