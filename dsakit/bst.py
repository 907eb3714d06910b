"""Binary search tree operations and conversions to and from a sorted doubly linked list."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node.

    When a tree is turned into a doubly linked list, ``left`` is the
    previous node and ``right`` the next one.
    """

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the left."""
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value > node.data:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left


def build_bst(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree by inserting ``values`` in order."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def min_node(root: TreeNode | None) -> TreeNode | None:
    """Return the leftmost node, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node


def max_node(root: TreeNode | None) -> TreeNode | None:
    """Return the rightmost node, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.right is not None:
        node = node.right
    return node


def search(root: TreeNode | None, target: Any) -> bool:
    """Return True if ``target`` is stored in the tree."""
    node = root
    while node is not None:
        if target == node.data:
            return True
        node = node.right if target > node.data else node.left
    return False


def delete(root: TreeNode | None, target: Any) -> TreeNode | None:
    """Remove one node holding ``target`` and return the new root.

    A node with two children takes the largest value of its left subtree.
    """
    if root is None:
        return None
    if target == root.data:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        replacement = max_node(root.left)
        assert replacement is not None
        root.data = replacement.data
        root.left = delete(root.left, replacement.data)
        return root
    if root.data > target:
        root.left = delete(root.left, target)
    else:
        root.right = delete(root.right, target)
    return root


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node-left-right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left-node-right order (sorted for a BST)."""
    return [node.data for node in _inorder_nodes(root)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left-right-node order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[Any]] = []
    queue = deque([root]) if root is not None else deque()
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def bst_from_sorted(values: Sequence[Any]) -> TreeNode | None:
    """Build a balanced tree from sorted ``values``, using the lower middle as root."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = (start + end) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)


def bst_to_dll(root: TreeNode | None) -> TreeNode | None:
    """Relink the tree's nodes into a sorted doubly linked list and return its head."""
    head: TreeNode | None = None
    previous: TreeNode | None = None
    for node in list(_inorder_nodes(root)):
        node.left = previous
        if previous is None:
            head = node
        else:
            previous.right = node
        previous = node
    if previous is not None:
        previous.right = None
    return head


def dll_to_bst(head: TreeNode | None, count: int) -> TreeNode | None:
    """Relink the first ``count`` nodes of a sorted doubly linked list into a balanced tree."""
    cursor = head

    def build(n: int) -> TreeNode | None:
        nonlocal cursor
        if cursor is None or n <= 0:
            return None
        left_subtree = build(n // 2)
        if cursor is None:
            return left_subtree
        node = cursor
        cursor = cursor.right
        node.left = left_subtree
        node.right = build(n - n // 2 - 1)
        return node

    return build(count)


def dll_values(head: TreeNode | None) -> list[Any]:
    """Return the values of a doubly linked list, following ``right`` links."""
    result: list[Any] = []
    node = head
    while node is not None:
        result.append(node.data)
        node = node.right
    return result