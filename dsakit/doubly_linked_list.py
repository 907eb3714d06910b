"""A doubly linked list with 1-based positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any
    prev: DNode | None = field(default=None, repr=False)
    next: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that keeps its head, tail and size."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DNode | None = None
        self.tail: DNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        node = DNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        node = DNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at_position(self, value: Any, position: int) -> None:
        """Insert at 1-based ``position``; positions past the end append."""
        if self.head is None:
            self.insert_at_head(value)
            return
        if position < 1:
            raise IndexError(f"position must be at least 1, got {position}")
        if position == 1:
            self.insert_at_head(value)
            return
        if position >= self._size + 1:
            self.insert_at_tail(value)
            return
        current = self._node_at(position)
        previous = current.prev
        assert previous is not None
        node = DNode(value, prev=previous, next=current)
        previous.next = node
        current.prev = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(
                f"position must be between 1 and {self._size}, got {position}"
            )
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def _node_at(self, position: int) -> DNode:
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

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)