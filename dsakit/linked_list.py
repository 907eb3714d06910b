"""Singly linked lists: a list container and node-level algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list that keeps its head, tail and size."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        node = ListNode(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        node = ListNode(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at_position(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"position must be between 1 and {self._size + 1}, got {position}"
            )
        if position == 1:
            self.insert_at_head(value)
            return
        if position == self._size + 1:
            self.insert_at_tail(value)
            return
        previous = self._node_at(position - 1)
        previous.next = ListNode(value, previous.next)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(
                f"position must be between 1 and {self._size}, got {position}"
            )
        if position == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self.tail:
                self.tail = previous
        removed.next = None
        self._size -= 1
        return removed.data

    def _node_at(self, position: int) -> ListNode:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)


def values_of(head: ListNode | None) -> list[Any]:
    """Return the values from ``head`` to the end of the chain."""
    result: list[Any] = []
    node = head
    while node is not None:
        result.append(node.data)
        node = node.next
    return result


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a chain of nodes holding ``values`` and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the chain in place and return the new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def add_one(head: ListNode | None) -> ListNode:
    """Add one to the number whose digits, most significant first, are in the chain."""
    if head is None:
        raise ValueError("cannot add one to an empty list")
    head = reverse(head)
    assert head is not None
    carry = 1
    node: ListNode | None = head
    last = head
    while node is not None and carry:
        total = node.data + carry
        node.data = total % 10
        carry = total // 10
        last = node
        node = node.next
    if carry:
        last.next = ListNode(carry)
    result = reverse(head)
    assert result is not None
    return result


def loop_start(head: ListNode | None) -> ListNode | None:
    """Return the node where a loop begins, or None if the chain ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return slow


def remove_loop(head: ListNode | None) -> ListNode | None:
    """Break a loop, if any, so that the chain ends; return the head."""
    start = loop_start(head)
    if start is None:
        return head
    node = start
    while node.next is not start:
        node = node.next  # type: ignore[assignment]
    node.next = None
    return head


def reverse_in_groups(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each run of ``k`` nodes in place; a shorter last run is reversed too."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    new_head: ListNode | None = None
    previous_tail: ListNode | None = None
    node = head
    while node is not None:
        group_head = node
        previous: ListNode | None = None
        for _ in range(k):
            if node is None:
                break
            following = node.next
            node.next = previous
            previous = node
            node = following
        if previous_tail is None:
            new_head = previous
        else:
            previous_tail.next = previous
        previous_tail = group_head
    return new_head