"""Views of a binary tree: left, right, top, vertical, diagonal and boundary."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import Optional

from .tree import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def left_view(root: Optional[TreeNode]) -> list[int]:
    """First node seen on each level from the left."""
    return [level[0].value for level in _levels(root)]


def right_view(root: Optional[TreeNode]) -> list[int]:
    """First node seen on each level from the right."""
    return [level[-1].value for level in _levels(root)]


def _columns(root: Optional[TreeNode]) -> Iterator[tuple[int, TreeNode]]:
    if root is None:
        return
    queue = deque([(0, root)])
    while queue:
        column, node = queue.popleft()
        yield column, node
        if node.left is not None:
            queue.append((column - 1, node.left))
        if node.right is not None:
            queue.append((column + 1, node.right))


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Topmost node of each vertical column, leftmost column first."""
    first: dict[int, int] = {}
    for column, node in _columns(root):
        first.setdefault(column, node.value)
    return [first[column] for column in sorted(first)]


def vertical_order(root: Optional[TreeNode]) -> list[int]:
    """Values column by column from the left, top to bottom within a column."""
    columns: defaultdict[int, list[int]] = defaultdict(list)
    for column, node in _columns(root):
        columns[column].append(node.value)
    return [value for column in sorted(columns) for value in columns[column]]


def diagonal_order(root: Optional[TreeNode]) -> list[int]:
    """Values diagonal by diagonal; a left step starts the next diagonal."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)

    def visit(node: Optional[TreeNode], diagonal: int) -> None:
        if node is None:
            return
        diagonals[diagonal].append(node.value)
        visit(node.left, diagonal + 1)
        visit(node.right, diagonal)

    visit(root, 0)
    return [value for diagonal in sorted(diagonals) for value in diagonals[diagonal]]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def boundary(root: Optional[TreeNode]) -> list[int]:
    """Root, left edge without leaves, all leaves, then right edge bottom up."""
    if root is None:
        return []
    result = [root.value]

    node = root.left
    while node is not None and not _is_leaf(node):
        result.append(node.value)
        node = node.left if node.left is not None else node.right

    if not _is_leaf(root):

        def leaves(current: Optional[TreeNode]) -> None:
            if current is None:
                return
            if _is_leaf(current):
                result.append(current.value)
                return
            leaves(current.left)
            leaves(current.right)

        leaves(root)

    right_edge = []
    node = root.right
    while node is not None and not _is_leaf(node):
        right_edge.append(node.value)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result