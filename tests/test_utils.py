from tetris_core.board import GRID_HEIGHT, GRID_WIDTH, create_empty_grid
from tetris_core.tetromino import TetrominoType
from tetris_core.utils import has_horizontal_collision, has_vertical_collision, render_grid

from conftest import make_piece


def test_vertical_collision_on_bottom_row():
    piece = make_piece(TetrominoType.I, (0, 19), (1, 19), (2, 19), (3, 19))
    assert has_vertical_collision(piece, create_empty_grid())


def test_no_vertical_collision_in_open_space():
    piece = make_piece(TetrominoType.O, (3, 10), (3, 11), (4, 10), (4, 11))
    assert not has_vertical_collision(piece, create_empty_grid())


def test_vertical_collision_with_cell_below(build_grid):
    piece = make_piece(TetrominoType.O, (3, 10), (3, 11), (4, 10), (4, 11))
    assert has_vertical_collision(piece, build_grid({12: [4]}))
    assert not has_vertical_collision(piece, build_grid({12: [5]}))


def test_vertical_collision_ignores_columns_outside_grid(build_grid):
    # A cell hanging past the left wall must not see the right-most column.
    piece = make_piece(TetrominoType.I, (-1, 4), (0, 4), (1, 4), (2, 4))
    assert not has_vertical_collision(piece, build_grid({5: [GRID_WIDTH - 1]}))


def test_vertical_collision_for_cells_above_grid(build_grid):
    piece = make_piece(TetrominoType.T, (3, 1), (4, 1), (5, 1), (4, 0))
    assert not has_vertical_collision(piece.translate(0, -1), build_grid({1: [7]}))
    assert has_vertical_collision(piece.translate(0, -1), build_grid({1: [4]}))


def test_horizontal_collision_allows_one_column_overhang():
    left = make_piece(TetrominoType.I, (0, 5), (0, 6), (0, 7), (0, 8))
    assert not has_horizontal_collision(left, -1)
    assert has_horizontal_collision(left, -2)

    right = make_piece(TetrominoType.I, (GRID_WIDTH - 1, 5), (GRID_WIDTH - 1, 6), (GRID_WIDTH - 1, 7), (GRID_WIDTH - 1, 8))
    assert not has_horizontal_collision(right, 1)
    assert has_horizontal_collision(right, 2)


def test_horizontal_collision_ignores_locked_cells():
    piece = make_piece(TetrominoType.O, (3, 10), (3, 11), (4, 10), (4, 11))
    assert not has_horizontal_collision(piece, 1)


def test_render_grid_overlays_without_locking(build_grid, filler):
    grid = build_grid({19: [0]})
    piece = make_piece(TetrominoType.T, (3, 0), (4, 0), (5, 0), (4, -1))
    frame = render_grid(grid, piece)

    assert len(frame) == GRID_HEIGHT
    assert frame[0][3] is piece and frame[0][5] is piece
    assert frame[19][0] is filler
    assert all(cell is None for cell in grid[0])


def test_render_grid_without_piece_is_a_copy(build_grid):
    grid = build_grid({3: [2]})
    frame = render_grid(grid)
    assert frame == [list(row) for row in grid]
    frame[3][2] = None
    assert grid[3][2] is not None
