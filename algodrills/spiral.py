"""Read a matrix in clockwise spiral order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    result: list[T] = []
    if not matrix:
        return result

    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1

        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1

        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1

        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result