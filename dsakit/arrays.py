"""Small utilities for 2-D integer matrices and flat arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain

Matrix = Sequence[Sequence[int]]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix with each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def find_target(matrix: Matrix, key: int) -> bool:
    """Return True if ``key`` occurs anywhere in the matrix."""
    return any(key in row for row in matrix)


def max_element(matrix: Matrix) -> int:
    """Return the largest value in the matrix."""
    values = list(chain.from_iterable(matrix))
    if not values:
        raise ValueError("max_element() of an empty matrix")
    return max(values)


def row_sums(matrix: Matrix) -> list[int]:
    """Return the sum of every row, in row order."""
    return [sum(row) for row in matrix]


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of the main diagonal, one entry per row."""
    return sum(row[index] for index, row in enumerate(matrix))


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix whose rows are the columns of ``matrix``."""
    return [list(column) for column in zip(*matrix)]


def segregate_negatives(values: Iterable[int]) -> list[int]:
    """Move negative numbers to the front using a two-pointer swap.

    Returns a new list; the relative order inside each part is not kept.
    Zero is treated as non-negative.
    """
    result = list(values)
    left, right = 0, len(result) - 1
    while left <= right:
        if result[left] < 0:
            left += 1
        elif result[right] >= 0:
            right -= 1
        else:
            result[left], result[right] = result[right], result[left]
            left += 1
            right -= 1
    return result