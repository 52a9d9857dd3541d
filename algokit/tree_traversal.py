"""Traversals without recursion: explicit stacks and Morris threading; flattening."""

from __future__ import annotations

from typing import Optional

from .tree import TreeNode


def iterative_preorder(root: Optional[TreeNode]) -> list[int]:
    """Node, left, right using an explicit stack."""
    if root is None:
        return []
    stack = [root]
    result: list[int] = []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_postorder(root: Optional[TreeNode]) -> list[int]:
    """Left, right, node: node-right-left order collected and reversed."""
    if root is None:
        return []
    stack = [root]
    result: list[int] = []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def iterative_inorder(root: Optional[TreeNode]) -> list[int]:
    """Left, node, right; each node is pushed once unvisited and once visited."""
    if root is None:
        return []
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    result: list[int] = []
    while stack:
        node, visited = stack.pop()
        if visited:
            result.append(node.value)
            continue
        if node.right is not None:
            stack.append((node.right, False))
        stack.append((node, True))
        if node.left is not None:
            stack.append((node.left, False))
    return result


def _predecessor(node: TreeNode) -> TreeNode:
    current = node.left
    while current.right is not None and current.right is not node:
        current = current.right
    return current


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """Inorder in constant extra space; temporary threads are removed again."""
    result: list[int] = []
    node = root
    while node is not None:
        if node.left is None:
            result.append(node.value)
            node = node.right
            continue
        previous = _predecessor(node)
        if previous.right is None:
            previous.right = node
            node = node.left
        else:
            previous.right = None
            result.append(node.value)
            node = node.right
    return result


def morris_preorder(root: Optional[TreeNode]) -> list[int]:
    """Preorder in constant extra space; temporary threads are removed again."""
    result: list[int] = []
    node = root
    while node is not None:
        if node.left is None:
            result.append(node.value)
            node = node.right
            continue
        previous = _predecessor(node)
        if previous.right is None:
            result.append(node.value)
            previous.right = node
            node = node.left
        else:
            previous.right = None
            node = node.right
    return result


def flatten(root: Optional[TreeNode]) -> None:
    """Turn the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            last = node.left
            while last.right is not None:
                last = last.right
            last.right = node.right
            node.right = node.left
            node.left = None
        node = node.right