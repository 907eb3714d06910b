"""Max-heap checks on binary trees and BST-to-max-heap conversion."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from dsakit.bst import TreeNode, inorder


@dataclass(frozen=True)
class HeapInfo:
    """The largest value in a subtree and whether the subtree is a max-heap."""

    max_value: float
    is_heap: bool


def check_max_heap(root: TreeNode | None) -> HeapInfo:
    """Check that every node is strictly greater than its children."""
    if root is None:
        return HeapInfo(-math.inf, True)
    if root.left is None and root.right is None:
        return HeapInfo(root.data, True)
    left = check_max_heap(root.left)
    right = check_max_heap(root.right)
    if (
        root.data > left.max_value
        and root.data > right.max_value
        and left.is_heap
        and right.is_heap
    ):
        return HeapInfo(root.data, True)
    return HeapInfo(max(root.data, left.max_value, right.max_value), False)


def is_max_heap(root: TreeNode | None) -> bool:
    """Return True if the tree satisfies the max-heap property."""
    return check_max_heap(root).is_heap


def _postorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    order: list[TreeNode] = []
    while stack:
        node = stack.pop()
        order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed(order)


def bst_to_max_heap(root: TreeNode | None) -> TreeNode | None:
    """Refill a BST's nodes in post-order with its sorted values, making a max-heap."""
    values = inorder(root)
    for node, value in zip(_postorder_nodes(root), values):
        node.data = value
    return root