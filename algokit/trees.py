"""Binary tree nodes and queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest path from ``root`` to a leaf."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        queue.extend((child, depth + 1) for child in (node.left, node.right) if child)
    raise AssertionError("unreachable: every finite tree has a leaf")


__all__ = ["TreeNode", "min_depth"]