"""Grid representation for the playfield.

The grid is a tuple of rows, each a tuple of cells.  A cell is either
``None`` (empty) or the :class:`~tetris_core.tetromino.Piece` that was locked
into it, so all cells of one locked piece share the same object.  Every
function here returns a new grid and leaves its input untouched.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Piece


# Dimensions of the playfield.
GRID_WIDTH = 10
GRID_HEIGHT = 20

Cell = Optional[Piece]
Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]


def empty_row(width: int = GRID_WIDTH) -> Row:
    return (None,) * width


def create_empty_grid() -> Grid:
    """Return a new grid with every cell empty."""

    return tuple(empty_row() for _ in range(GRID_HEIGHT))


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_HEIGHT and 0 <= col < GRID_WIDTH


def get_cell(grid: Grid, row: int, col: int) -> Cell:
    """Safely return the cell at ``(row, col)``.

    Raises:
        IndexError: If the coordinates are outside the grid.
    """
    if in_bounds(row, col):
        return grid[row][col]
    raise IndexError("Cell out of bounds")


def is_occupied(grid: Grid, row: int, col: int) -> bool:
    """Return ``True`` if a locked piece sits at ``(row, col)``.

    Coordinates outside the grid count as empty.  Falling pieces may hang one
    column past either side wall and the cells beneath them must not report a
    collision.
    """

    return in_bounds(row, col) and grid[row][col] is not None


def occupancy(grid: Grid) -> NDArray[np.bool_]:
    """Return a ``GRID_HEIGHT x GRID_WIDTH`` boolean mask of filled cells."""

    return np.array([[cell is not None for cell in row] for row in grid], dtype=bool)


def find_full_rows(grid: Grid) -> List[int]:
    """Return the indices of rows without empty cells, in ascending order."""

    return [int(i) for i in np.flatnonzero(occupancy(grid).all(axis=1))]


def clear_row(grid: Grid, row: int) -> Grid:
    """Remove ``row`` and insert an empty row at the top.

    The remaining rows keep their relative order, so everything above the
    removed row moves down by one.

    Raises:
        IndexError: If ``row`` is not a valid row index.
    """

    if not 0 <= row < len(grid):
        raise IndexError("Row out of bounds")
    return (empty_row(len(grid[row])),) + grid[:row] + grid[row + 1:]


def lock_piece(grid: Grid, piece: Piece) -> Grid:
    """Return a copy of ``grid`` with ``piece`` written into its cells.

    Cells outside the grid and cells that are already taken are skipped.
    """

    rows = [list(row) for row in grid]
    for p in piece.positions:
        if in_bounds(p.y, p.x) and rows[p.y][p.x] is None:
            rows[p.y][p.x] = piece
    return tuple(tuple(row) for row in rows)
