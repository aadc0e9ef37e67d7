"""Best square of ones in a binary matrix and best contiguous subarray sum."""

from __future__ import annotations

from collections.abc import Sequence


def maximal_square(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest square holding only 1s in ``matrix``.

    ``matrix`` is left unchanged.
    """
    if not matrix:
        return 0
    sides = [list(row) for row in matrix]
    best = 0
    for r, row in enumerate(sides):
        for c, cell in enumerate(row):
            if cell != 1:
                continue
            if r == 0 or c == 0:
                best = max(best, 1)
            else:
                side = min(sides[r - 1][c - 1], sides[r - 1][c], row[c - 1]) + 1
                best = max(best, side)
                row[c] = side
    return best * best


def maximum_subarray(array: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous part of ``array``.

    Raises ``ValueError`` if ``array`` is empty.
    """
    if not array:
        raise ValueError("array must not be empty")
    running = best = array[0]
    for value in array[1:]:
        running = running + value if running > 0 else value
        best = max(best, running)
    return best