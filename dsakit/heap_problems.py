"""Heap-based solutions: k-th order statistics, running median, k-way merge."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def _checked(values: Iterable[int], k: int) -> list[int]:
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    return items


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value (1-based) using a bounded max-heap."""
    items = _checked(values, k)
    heap = [-value for value in items[:k]]
    heapq.heapify(heap)
    for value in items[k:]:
        if value < -heap[0]:
            heapq.heapreplace(heap, -value)
    return -heap[0]


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest value (1-based) using a bounded min-heap."""
    items = _checked(values, k)
    heap = items[:k]
    heapq.heapify(heap)
    for value in items[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


class RunningMedian:
    """Median of a stream, kept with a max-heap and a min-heap."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap stored negated
        self._upper: list[int] = []
        self._median = 0.0

    def add(self, value: int) -> float:
        """Add ``value`` to the stream and return the new median."""
        lower, upper = self._lower, self._upper
        if len(lower) == len(upper):
            if value > self._median:
                heapq.heappush(upper, value)
                median = upper[0]
            else:
                heapq.heappush(lower, -value)
                median = -lower[0]
        elif len(lower) > len(upper):
            if value > self._median:
                heapq.heappush(upper, value)
            else:
                heapq.heappush(upper, -heapq.heappop(lower))
                heapq.heappush(lower, -value)
            median = (upper[0] - lower[0]) / 2
        else:
            if value > self._median:
                heapq.heappush(lower, -heapq.heappop(upper))
                heapq.heappush(upper, value)
            else:
                heapq.heappush(lower, -value)
            median = (upper[0] - lower[0]) / 2
        self._median = float(median)
        return self._median


def running_medians(values: Iterable[int]) -> list[float]:
    """Return the median after each value of the stream."""
    tracker = RunningMedian()
    return [tracker.add(value) for value in values]


def merge_k_sorted(arrays: Sequence[Sequence[int]]) -> list[int]:
    """Merge already sorted sequences into one sorted list."""
    heap = [(row[0], index, 0) for index, row in enumerate(arrays) if row]
    heapq.heapify(heap)
    merged: list[int] = []
    while heap:
        value, row_index, col_index = heapq.heappop(heap)
        merged.append(value)
        next_col = col_index + 1
        row = arrays[row_index]
        if next_col < len(row):
            heapq.heappush(heap, (row[next_col], row_index, next_col))
    return merged