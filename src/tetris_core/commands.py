"""Commands and the reducer that advances the game one step at a time.

Four command types drive the game.  :func:`reduce_state` maps a state and a
command to the next state, and :func:`run_commands` folds it over a sequence
of commands, yielding every state along the way.

Once a game has ended only :class:`Restart` has any effect; every other
command hands the terminal state back unchanged.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Union

from .board import clear_row, find_full_rows, lock_piece
from .game_state import ROW_CLEAR_POINTS, GameState, initial_state, update_high_score
from .tetromino import Piece, draw_random_piece, rotate_piece
from .utils import has_horizontal_collision, has_vertical_collision


@dataclass(frozen=True)
class Move:
    """Shift the falling piece by ``dx`` columns and ``dy`` rows."""

    dx: int
    dy: int


@dataclass(frozen=True)
class Rotate:
    """Turn the falling piece 90 degrees clockwise.

    Only the sign of ``direction`` is used, and only by the wall check.
    """

    direction: int = 1


@dataclass(frozen=True)
class Tick:
    """One timer step.  ``elapsed`` counts the ticks emitted so far."""

    elapsed: int = 0


@dataclass(frozen=True)
class Restart:
    """Start a new game.

    The new game keeps the larger of ``highscore`` and the best score of the
    game being replaced.
    """

    highscore: int = 0


Command = Union[Move, Rotate, Tick, Restart]


def _sign(value: int) -> int:
    return -1 if value < 0 else 1


def _try_place(state: GameState, candidate: Piece, direction: int) -> GameState:
    """Return ``state`` with ``candidate`` as the falling piece if it fits."""

    if has_horizontal_collision(candidate, _sign(direction)):
        return state
    if has_vertical_collision(candidate, state.grid):
        return state
    return replace(state, current_piece=candidate)


def _move(state: GameState, command: Move) -> GameState:
    candidate = state.current_piece.translate(command.dx, command.dy)
    return _try_place(state, candidate, command.dx)


def _rotate(state: GameState, command: Rotate) -> GameState:
    candidate = rotate_piece(state.current_piece)
    return _try_place(state, candidate, command.direction)


def _tick(state: GameState, rng: Optional[random.Random]) -> GameState:
    # Clear at most one row per tick; later ticks pick up the rest.
    full_rows = find_full_rows(state.grid)
    if full_rows:
        score = state.score + ROW_CLEAR_POINTS
        return replace(
            state,
            grid=clear_row(state.grid, full_rows[0]),
            score=score,
            highscore=update_high_score(score, state.highscore),
        )

    if any(cell is not None for cell in state.grid[0]):
        return replace(state, game_end=True)

    piece = state.current_piece
    if not has_vertical_collision(piece, state.grid):
        return replace(state, current_piece=piece.translate(0, 1))

    return replace(
        state,
        current_piece=state.next_piece,
        next_piece=draw_random_piece(rng),
        grid=lock_piece(state.grid, piece),
    )


def reduce_state(
    state: GameState, command: Command, rng: Optional[random.Random] = None
) -> GameState:
    """Return the state that follows ``state`` after applying ``command``.

    ``rng`` supplies the pieces drawn on lock and restart.

    Raises:
        TypeError: If ``command`` is not one of the four command types.
    """

    if isinstance(command, Restart):
        return initial_state(update_high_score(command.highscore, state.highscore), rng)
    if not isinstance(command, (Move, Rotate, Tick)):
        raise TypeError(f"Unknown command: {command!r}")
    if state.game_end:
        return state
    if isinstance(command, Move):
        return _move(state, command)
    if isinstance(command, Rotate):
        return _rotate(state, command)
    return _tick(state, rng)


def run_commands(
    state: GameState,
    commands: Iterable[Command],
    rng: Optional[random.Random] = None,
) -> Iterator[GameState]:
    """Yield the state produced by each command, in order.

    The initial ``state`` itself is not yielded.
    """

    states = itertools.accumulate(
        commands, lambda s, c: reduce_state(s, c, rng), initial=state
    )
    next(states)
    return states
