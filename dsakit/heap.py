"""A bounded binary max-heap and in-place heap helpers on lists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class HeapOverflowError(Exception):
    """Raised when inserting into a heap that is already at capacity."""


def heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items (max-heap)."""
    if size > len(values):
        raise ValueError("size exceeds the length of values")
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and values[largest] < values[left]:
            largest = left
        if right < size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_heap(values: list[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, size, index)


def heap_sort(values: list[Any]) -> None:
    """Sort ``values`` in place in ascending order."""
    build_heap(values)
    for end in range(len(values) - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        heapify(values, end, 0)


class MaxHeap:
    """A max-heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value``, moving it up to its place."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError(f"heap is full (capacity {self.capacity})")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] > items[parent]:
                items[index], items[parent] = items[parent], items[index]
                index = parent
            else:
                break

    def pop(self) -> Any:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return top

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items in their stored (level) order."""
        return iter(list(self._items))