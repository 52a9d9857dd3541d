"""Rebuild a binary tree from its inorder listing and a preorder or postorder one."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from .tree import TreeNode


def _check(inorder: Sequence[int], other: Sequence[int]) -> None:
    if len(inorder) != len(other):
        raise ValueError("traversals must have the same length")


def _position(inorder: Sequence[int], value: int, start: int, end: int) -> int:
    for index in range(start, end + 1):
        if inorder[index] == value:
            return index
    raise ValueError(f"value {value} does not fit the inorder traversal")


def _next(order: Iterator[int]) -> int:
    try:
        return next(order)
    except StopIteration:
        raise ValueError("traversals do not describe the same tree") from None


def build_from_preorder(
    inorder: Sequence[int], preorder: Sequence[int]
) -> Optional[TreeNode]:
    """Build the tree whose inorder and preorder listings are given; values must be distinct."""
    _check(inorder, preorder)
    order = iter(preorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(_next(order))
        position = _position(inorder, node.value, start, end)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(inorder) - 1)


def build_from_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Build the tree whose inorder and postorder listings are given; values must be distinct."""
    _check(inorder, postorder)
    order = reversed(postorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(_next(order))
        position = _position(inorder, node.value, start, end)
        node.right = build(position + 1, end)
        node.left = build(start, position - 1)
        return node

    return build(0, len(inorder) - 1)