"""Operations on rectangular two-dimensional lists."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def rotate_counter_clockwise(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Rotate a rectangular matrix 90 degrees counter-clockwise.

    The width is taken from the first row; an empty matrix, or one whose
    first row is empty, gives an empty list.
    """
    if not matrix or not matrix[0]:
        return []
    width = len(matrix[0])
    return [[row[width - 1 - col] for row in matrix] for col in range(width)]