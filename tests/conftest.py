from __future__ import annotations

from typing import Dict, Iterable, Tuple

import pytest

from tetris_core.board import GRID_HEIGHT, GRID_WIDTH, Grid
from tetris_core.tetromino import Piece, Position, TetrominoType


def make_piece(shape: TetrominoType, *cells: Tuple[int, int], color: str = "grey", id: str = "test") -> Piece:
    return Piece(shape, tuple(Position(x, y) for x, y in cells), color, id)


@pytest.fixture
def filler() -> Piece:
    """Piece used to stand in for previously locked blocks."""

    return make_piece(TetrominoType.O, (0, 0), (0, 1), (1, 0), (1, 1), color="grey", id="filler")


@pytest.fixture
def build_grid(filler):
    """Return a factory building a grid from ``{row: columns}``."""

    def build(rows: Dict[int, Iterable[int]]) -> Grid:
        grid = [[None] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
        for row, cols in rows.items():
            for col in cols:
                grid[row][col] = filler
        return tuple(tuple(r) for r in grid)

    return build
