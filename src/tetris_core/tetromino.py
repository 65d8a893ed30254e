"""Tetromino definitions and basic behaviour.

This module holds the value types the rest of the engine is built from: grid
positions, the falling piece and the fixed catalog of seven shapes new pieces
are drawn from.  It also implements the rotation transform.  Everything here
is immutable; operations return new pieces instead of changing existing ones.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

import numpy as np


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


@dataclass(frozen=True)
class Position:
    """Integer grid coordinates, ``x`` is the column and ``y`` the row."""

    x: int
    y: int


Cells = Tuple[Position, ...]


def _cells(*coords: Tuple[int, int]) -> Cells:
    return tuple(Position(x, y) for x, y in coords)


@dataclass(frozen=True)
class PieceTemplate:
    """Catalog entry describing a shape in its spawn orientation.

    ``pivot`` is the index of the cell that stays fixed when the piece is
    rotated.  It was chosen by hand for each layout rather than computed from
    the geometry.
    """

    shape: TetrominoType
    positions: Cells
    color: str
    pivot: int = 1


# Spawn layouts, listed cell by cell.  The T piece pokes one row above the
# grid when it appears.
CATALOG: Dict[TetrominoType, PieceTemplate] = {
    TetrominoType.I: PieceTemplate(
        TetrominoType.I, _cells((3, 0), (4, 0), (5, 0), (6, 0)), "aqua"
    ),
    TetrominoType.J: PieceTemplate(
        TetrominoType.J, _cells((3, 0), (4, 1), (3, 1), (5, 1)), "blue"
    ),
    TetrominoType.L: PieceTemplate(
        TetrominoType.L, _cells((3, 1), (4, 1), (5, 1), (5, 0)), "orangered"
    ),
    TetrominoType.O: PieceTemplate(
        TetrominoType.O, _cells((3, 0), (3, 1), (4, 0), (4, 1)), "yellow"
    ),
    TetrominoType.S: PieceTemplate(
        TetrominoType.S, _cells((3, 1), (4, 1), (4, 0), (5, 0)), "green"
    ),
    TetrominoType.T: PieceTemplate(
        TetrominoType.T, _cells((3, 0), (4, 0), (5, 0), (4, -1)), "blueviolet"
    ),
    TetrominoType.Z: PieceTemplate(
        TetrominoType.Z, _cells((3, 0), (4, 1), (4, 0), (5, 1)), "red"
    ),
}


@dataclass(frozen=True)
class Piece:
    """A falling (or locked) piece.

    ``id`` only identifies the piece for renderers; it takes no part in
    equality so two pieces with the same cells compare equal.
    """

    shape: TetrominoType
    positions: Cells
    color: str
    id: str = field(default="", compare=False)

    @property
    def pivot(self) -> Position:
        """Return the cell the piece rotates around."""

        return self.positions[CATALOG[self.shape].pivot]

    def with_positions(self, positions: Iterable[Position]) -> "Piece":
        return replace(self, positions=tuple(positions))

    def translate(self, dx: int, dy: int) -> "Piece":
        """Return a copy of the piece moved ``dx`` columns and ``dy`` rows."""

        return self.with_positions(Position(p.x + dx, p.y + dy) for p in self.positions)


_RNG = random.Random()


def _new_id(rng: random.Random) -> str:
    return uuid.UUID(int=rng.getrandbits(128), version=4).hex


def spawn_piece(shape: TetrominoType, rng: Optional[random.Random] = None) -> Piece:
    """Return a fresh piece of ``shape`` at its spawn location."""

    rng = rng or _RNG
    template = CATALOG[shape]
    return Piece(template.shape, template.positions, template.color, _new_id(rng))


def draw_random_piece(rng: Optional[random.Random] = None) -> Piece:
    """Return a new piece whose shape is picked uniformly from the catalog.

    Every call is an independent draw; there is no bag or repeat protection.
    ``rng`` defaults to a generator shared by this module.
    """

    rng = rng or _RNG
    shape = rng.choice(list(CATALOG))
    return spawn_piece(shape, rng)


def rotation_matrix(degrees: float) -> np.ndarray:
    """Return the 2x2 matrix rotating column vectors by ``degrees``."""

    rad = np.deg2rad(degrees)
    cos, sin = np.cos(rad), np.sin(rad)
    return np.array([[cos, -sin], [sin, cos]])


def rotate_piece(piece: Piece, degrees: float = 90.0) -> Piece:
    """Return ``piece`` rotated about its pivot cell.

    With rows growing downwards a positive angle turns the piece clockwise on
    screen.  Each cell is taken relative to the pivot, rotated and moved back;
    the results are rounded to whole cells.  No bounds or collision checks
    happen here.
    """

    index = CATALOG[piece.shape].pivot
    coords = np.array([(p.x, p.y) for p in piece.positions], dtype=float)
    pivot = np.array([piece.pivot.x, piece.pivot.y], dtype=float)
    rotated = (coords - pivot) @ rotation_matrix(degrees).T + pivot
    cells = np.rint(rotated).astype(int)
    return piece.with_positions(
        piece.positions[i] if i == index else Position(int(x), int(y))
        for i, (x, y) in enumerate(cells)
    )
