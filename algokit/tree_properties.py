"""Whole-tree properties: identity, mirroring, balance, spiral order, cousins, burning, paths."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .tree import TreeNode, height


def is_identical(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True if both trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.value == second.value
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    mirror(root.left)
    mirror(root.right)
    return root


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    balanced = True

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal balanced
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        if abs(left - right) > 1:
            balanced = False
        return 1 + max(left, right)

    depth(root)
    return balanced


def spiral_order(root: Optional[TreeNode]) -> list[int]:
    """Level order that alternates direction, driven by two stacks."""
    if root is None:
        return []
    forward: list[TreeNode] = [root]
    backward: list[TreeNode] = []
    result: list[int] = []
    while forward or backward:
        if forward:
            while forward:
                node = forward.pop()
                result.append(node.value)
                if node.right is not None:
                    backward.append(node.right)
                if node.left is not None:
                    backward.append(node.left)
        else:
            while backward:
                node = backward.pop()
                result.append(node.value)
                if node.left is not None:
                    forward.append(node.left)
                if node.right is not None:
                    forward.append(node.right)
    return result


def _locate(root: TreeNode, value: int) -> Optional[tuple[int, Optional[TreeNode]]]:
    queue: deque[tuple[TreeNode, Optional[TreeNode], int]] = deque([(root, None, 0)])
    while queue:
        node, parent, level = queue.popleft()
        if node.value == value:
            return level, parent
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, node, level + 1))
    return None


def are_cousins(root: Optional[TreeNode], a: int, b: int) -> bool:
    """True if ``a`` and ``b`` sit on the same level under different parents."""
    if root is None:
        return False
    first = _locate(root, a)
    second = _locate(root, b)
    if first is None or second is None:
        return False
    (level_a, parent_a), (level_b, parent_b) = first, second
    return level_a == level_b and parent_a is not parent_b


def _find(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    if root is None:
        return None
    if root.value == target:
        return root
    return _find(root.left, target) or _find(root.right, target)


def min_burn_time(root: Optional[TreeNode], target: int) -> int:
    """Seconds for fire started at ``target`` to reach every node, one edge per second."""
    start = _find(root, target)
    if start is None:
        raise ValueError(f"target {target} not in the tree")
    timer = 0

    # Positive results are subtree heights; negative ones the distance to the fire.
    def burn(node: Optional[TreeNode]) -> int:
        nonlocal timer
        if node is None:
            return 0
        if node.value == target:
            return -1
        left = burn(node.left)
        right = burn(node.right)
        if left < 0:
            timer = max(timer, -left + right)
            return left - 1
        if right < 0:
            timer = max(timer, -right + left)
            return right - 1
        return 1 + max(left, right)

    burn(root)
    return max(timer, height(start) - 1)


def max_special_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along a path between two leaves."""
    if root is None:
        raise ValueError("empty tree has no path")
    best: Optional[int] = None

    def down(node: TreeNode) -> int:
        nonlocal best
        if node.left is None and node.right is None:
            return node.value
        if node.left is not None and node.right is not None:
            left = down(node.left)
            right = down(node.right)
            through = node.value + left + right
            best = through if best is None else max(best, through)
            return node.value + max(left, right)
        child = node.left if node.left is not None else node.right
        return node.value + down(child)

    value = down(root)
    if root.left is not None and root.right is not None:
        return best
    return value if best is None else max(value, best)