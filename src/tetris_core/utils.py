"""Collision helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import GRID_HEIGHT, GRID_WIDTH, Cell, Grid, in_bounds, is_occupied
from .tetromino import Piece


def has_vertical_collision(piece: Piece, grid: Grid) -> bool:
    """Return ``True`` if ``piece`` cannot fall one more row.

    This holds when any cell already sits on the bottom row or when the
    cell directly beneath it is occupied.  The check looks at the piece where
    it is now; callers testing a move pass the moved piece.
    """

    return any(
        p.y >= GRID_HEIGHT - 1 or is_occupied(grid, p.y + 1, p.x)
        for p in piece.positions
    )


def has_horizontal_collision(piece: Piece, dx: int) -> bool:
    """Return ``True`` if shifting ``piece`` by ``dx`` leaves the allowed columns.

    The allowed range is one column wider than the grid on each side, so a
    candidate column of ``-1`` or ``GRID_WIDTH`` still passes.  Locked cells
    are not considered.
    """

    return any(
        p.x + dx < -1 or p.x + dx >= GRID_WIDTH + 1 for p in piece.positions
    )


def render_grid(grid: Grid, active: Optional[Piece] = None) -> List[List[Cell]]:
    """Return a copy of the grid with the falling piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without locking the piece.  Cells of ``active`` that fall outside the
    grid are left out.
    """

    frame = [list(row) for row in grid]
    if active is not None:
        for p in active.positions:
            if in_bounds(p.y, p.x):
                frame[p.y][p.x] = active
    return frame
