"""High level game state container."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .board import Grid, create_empty_grid
from .tetromino import Piece, draw_random_piece


# Points awarded for each cleared row.
ROW_CLEAR_POINTS = 100


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game session.

    Commands never modify a state; they build the next one.  ``highscore``
    outlives restarts while ``score`` starts again from zero.
    """

    current_piece: Piece
    next_piece: Piece
    grid: Grid
    score: int = 0
    highscore: int = 0
    game_end: bool = False


def initial_state(highscore: int = 0, rng: Optional[random.Random] = None) -> GameState:
    """Return a fresh game with two random pieces and an empty grid."""

    return GameState(
        current_piece=draw_random_piece(rng),
        next_piece=draw_random_piece(rng),
        grid=create_empty_grid(),
        score=0,
        highscore=highscore,
        game_end=False,
    )


def update_high_score(score: int, highscore: int) -> int:
    """Return the larger of the current score and the best score so far."""

    return score if score > highscore else highscore
