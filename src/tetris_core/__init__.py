"""Pure state-transition engine for a falling-block puzzle game."""

from .board import GRID_HEIGHT, GRID_WIDTH, clear_row, create_empty_grid, find_full_rows, lock_piece
from .tetromino import CATALOG, Piece, Position, TetrominoType, draw_random_piece, rotate_piece
from .game_state import GameState, initial_state
from .commands import Command, Move, Restart, Rotate, Tick, reduce_state, run_commands
from .controls import KEY_BINDINGS, TICK_RATE_MS, command_for_key, merge_events
from .utils import has_horizontal_collision, has_vertical_collision, render_grid
from .highscore import HighScoreStore, MemoryHighScoreStore
from .session import GameSession

__all__ = [
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "CATALOG",
    "KEY_BINDINGS",
    "TICK_RATE_MS",
    "Command",
    "GameSession",
    "GameState",
    "HighScoreStore",
    "MemoryHighScoreStore",
    "Move",
    "Piece",
    "Position",
    "Restart",
    "Rotate",
    "TetrominoType",
    "Tick",
    "clear_row",
    "command_for_key",
    "create_empty_grid",
    "draw_random_piece",
    "find_full_rows",
    "has_horizontal_collision",
    "has_vertical_collision",
    "initial_state",
    "lock_piece",
    "merge_events",
    "reduce_state",
    "render_grid",
    "rotate_piece",
    "run_commands",
]
