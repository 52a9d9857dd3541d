from algokit.tree import build_level_order, build_preorder, height, level_order, preorder, size
from algokit.tree_properties import mirror
from algokit.tree_views import (
    boundary,
    diagonal_order,
    left_view,
    right_view,
    top_view,
    vertical_order,
)

EXAMPLE = [1, 2, 3, 4, -1, -1, 5, -1, -1, 6, -1, -1, 7, -1, 8, 9, -1, -1, 10, -1, -1]
RIGHT_CHAIN = [1, -1, 2, -1, 3, -1, -1]


def example():
    return build_preorder(EXAMPLE)


def test_left_view_example():
    assert left_view(example()) == [1, 2, 3, 4]


def test_left_view_length_is_height():
    assert len(left_view(example())) == height(example())


def test_right_view_is_left_view_of_mirror():
    assert right_view(example()) == left_view(mirror(example()))


def test_views_of_empty_tree():
    assert left_view(None) == []
    assert right_view(None) == []
    assert top_view(None) == []
    assert vertical_order(None) == []
    assert diagonal_order(None) == []
    assert boundary(None) == []


def test_top_view_example():
    assert top_view(example()) == [4, 3, 2, 1, 7, 8, 10]


def test_top_view_of_right_chain():
    chain = build_preorder(RIGHT_CHAIN)
    assert top_view(chain) == preorder(chain)


def test_vertical_order_keeps_every_value():
    tree = example()
    result = vertical_order(tree)
    assert len(result) == size(tree)
    assert sorted(result) == sorted(preorder(tree))


def test_vertical_order_of_right_chain():
    chain = build_preorder(RIGHT_CHAIN)
    assert vertical_order(chain) == preorder(chain)


def test_diagonal_order_example():
    assert diagonal_order(example()) == [1, 7, 8, 10, 2, 6, 9, 3, 5, 4]


def test_diagonal_order_of_right_chain():
    chain = build_preorder(RIGHT_CHAIN)
    assert diagonal_order(chain) == preorder(chain)


def test_boundary_of_small_tree():
    tree = build_level_order([1, 2, 3, -1, -1, -1, -1])
    assert boundary(tree) == level_order(tree)


def test_boundary_single_node():
    assert boundary(build_level_order([5, -1, -1])) == [5]


def test_boundary_starts_at_root_and_covers_leaves():
    tree = example()
    result = boundary(tree)
    assert result[0] == tree.value
    assert len(result) == len(set(result))
    assert set(result) <= set(preorder(tree))