"""Matrix routines: spirals, rotation, zero propagation and sudoku checks."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")

_EMPTY_CELL = "."


def spiral_order(matrix: Iterable[Iterable[T]]) -> list[T]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    result: list[T] = []
    while rows:
        result.extend(rows.pop(0))
        # Turn what is left a quarter counter-clockwise so the next edge is on top.
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def generate_spiral(n: int) -> list[list[int]]:
    """Return an n by n matrix filled with 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("matrix size must not be negative")
    grid = [[0] * n for _ in range(n)]
    coordinates = [[(i, j) for j in range(n)] for i in range(n)]
    for number, (i, j) in enumerate(spiral_order(coordinates), start=1):
        grid[i][j] = number
    return grid


def rotate(matrix: MutableSequence[MutableSequence[T]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("only square matrices can be rotated")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def is_valid_sudoku(board: Sequence[Sequence[Hashable]]) -> bool:
    """Check that no filled cell repeats in its row, column or 3x3 box.

    Cells holding "." are empty; the board need not be solvable.
    """
    seen: set[tuple] = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == _EMPTY_CELL:
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", i // 3, j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True