"""Binary trees: construction from value streams, traversals and simple counts."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree level by level: the root, then a left and right value per node.

    ``-1`` marks a missing child.
    """
    stream = iter(values)
    root = TreeNode(_take(stream))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(stream)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = _take(stream)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def build_preorder(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree depth first from preorder values where ``-1`` marks an empty subtree."""
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Node, left, right."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Left, node, right."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Left, right, node."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Breadth-first values, left to right within each level."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return result


def size(root: Optional[TreeNode]) -> int:
    """Number of nodes."""
    if root is None:
        return 0
    return 1 + size(root.left) + size(root.right)


def total(root: Optional[TreeNode]) -> int:
    """Sum of all node values."""
    if root is None:
        return 0
    return root.value + total(root.left) + total(root.right)


def count_leaves(root: Optional[TreeNode]) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def count_internal(root: Optional[TreeNode]) -> int:
    """Number of nodes with at least one child."""
    if root is None or (root.left is None and root.right is None):
        return 0
    return 1 + count_internal(root.left) + count_internal(root.right)


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))