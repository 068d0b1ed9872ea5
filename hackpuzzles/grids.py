"""Puzzles on square grids of characters."""

from __future__ import annotations

from collections.abc import Sequence


def _check_square(grid: Sequence[str]) -> int:
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    return size


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with ``X`` every interior cell deeper than its four neighbours.

    A cell is a cavity when its character is strictly greater than the cells
    above, below, left and right of it. Border cells are never marked.
    """
    size = _check_square(grid)
    result = [list(row) for row in grid]
    for i in range(1, size - 1):
        for j in range(1, size - 1):
            cell = grid[i][j]
            neighbours = (grid[i - 1][j], grid[i + 1][j], grid[i][j - 1], grid[i][j + 1])
            if all(cell > other for other in neighbours):
                result[i][j] = "X"
    return ["".join(row) for row in result]


def mark_nines(grid: Sequence[str]) -> list[str]:
    """Replace every interior ``9`` with ``X``, leaving the border untouched."""
    size = _check_square(grid)
    last = size - 1
    return [
        "".join(
            "X" if ch == "9" and 0 < i < last and 0 < j < last else ch
            for j, ch in enumerate(row)
        )
        for i, row in enumerate(grid)
    ]


def grid_search(grid: Sequence[str], pattern: Sequence[str]) -> bool:
    """Tell whether every row of ``pattern`` occurs inside some row of ``grid``."""
    return all(any(piece in row for row in grid) for piece in pattern)