import random
from collections import Counter

import pytest

from tetris_core.tetromino import (
    CATALOG,
    Piece,
    Position,
    TetrominoType,
    draw_random_piece,
    rotate_piece,
    spawn_piece,
)


def test_catalog_has_seven_four_cell_shapes():
    assert set(CATALOG) == set(TetrominoType)
    for shape, template in CATALOG.items():
        assert template.shape is shape
        assert len(template.positions) == 4
        assert len(set(template.positions)) == 4
        assert template.pivot == 1


def test_draw_random_piece_copies_catalog_entry():
    piece = draw_random_piece(random.Random(3))
    template = CATALOG[piece.shape]
    assert piece.positions == template.positions
    assert piece.color == template.color
    assert piece.id


def test_draw_random_piece_gives_unique_ids():
    rng = random.Random(0)
    ids = {draw_random_piece(rng).id for _ in range(100)}
    assert len(ids) == 100


def test_draw_random_piece_covers_every_shape():
    rng = random.Random(1)
    counts = Counter(draw_random_piece(rng).shape for _ in range(7000))
    assert set(counts) == set(TetrominoType)
    # Uniform draws: each shape lands well inside 1000 +/- 200.
    assert all(800 < n < 1200 for n in counts.values()), counts


def test_piece_equality_ignores_id():
    a = spawn_piece(TetrominoType.S, random.Random(1))
    b = spawn_piece(TetrominoType.S, random.Random(2))
    assert a.id != b.id
    assert a == b


def test_translate_returns_new_piece():
    piece = spawn_piece(TetrominoType.O)
    moved = piece.translate(2, 3)
    assert moved.positions == (Position(5, 3), Position(5, 4), Position(6, 3), Position(6, 4))
    assert piece.positions == CATALOG[TetrominoType.O].positions
    assert moved.id == piece.id


def test_rotate_i_piece_turns_vertical_about_second_cell():
    piece = spawn_piece(TetrominoType.I)
    rotated = rotate_piece(piece)
    assert rotated.positions == (Position(4, -1), Position(4, 0), Position(4, 1), Position(4, 2))
    assert rotated.pivot == piece.pivot == Position(4, 0)


@pytest.mark.parametrize("shape", list(TetrominoType))
def test_four_rotations_restore_every_shape(shape):
    piece = spawn_piece(shape).translate(0, 5)
    rotated = piece
    for _ in range(4):
        rotated = rotate_piece(rotated)
    assert rotated.positions == piece.positions
    assert all(isinstance(p.x, int) and isinstance(p.y, int) for p in rotated.positions)


@pytest.mark.parametrize("shape", list(TetrominoType))
def test_rotation_keeps_pivot_fixed(shape):
    piece = spawn_piece(shape).translate(1, 4)
    assert rotate_piece(piece).positions[1] == piece.positions[1]


def test_rotation_is_clockwise_on_screen():
    # A cell to the right of the pivot moves below it.
    piece = Piece(
        TetrominoType.L,
        (Position(4, 4), Position(5, 5), Position(6, 5), Position(5, 4)),
        "orangered",
    )
    rotated = rotate_piece(piece)
    assert rotated.positions[2] == Position(5, 6)
    assert rotated.positions[3] == Position(6, 5)
