"""Matrix routines: clockwise rotation and spiral traversal."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _check_rectangular(matrix: Sequence[Sequence[int]]) -> int:
    width = len(matrix[0]) if matrix else 0
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows must have the same length")
    return width


def rotate_clockwise(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place.

    Transposes the matrix, then reverses each row.
    """
    size = _check_square(matrix)
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def rotated_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a new matrix holding ``matrix`` turned 90 degrees clockwise."""
    _check_rectangular(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order from the top left."""
    width = _check_rectangular(matrix)
    if not matrix or width == 0:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, width - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(row[right] for row in matrix[top : bottom + 1])
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result