# tests/test_piece.py
from __future__ import annotations

import pytest

from tetris_engine.game.core.board import Board
from tetris_engine.game.core.piece import ActivePiece
from tetris_engine.game.core.types import Position, Rotation, TetrominoShape

W, H = 10, 20


@pytest.mark.parametrize("rotation", list(Rotation))
def test_clockwise_then_counter_clockwise_is_identity(rotation: Rotation) -> None:
    assert rotation.clockwise().counter_clockwise() == rotation
    assert rotation.counter_clockwise().clockwise() == rotation


@pytest.mark.parametrize("rotation", list(Rotation))
def test_four_rotations_return_to_start(rotation: Rotation) -> None:
    r_cw = rotation
    r_ccw = rotation
    for _ in range(4):
        r_cw = r_cw.clockwise()
        r_ccw = r_ccw.counter_clockwise()
    assert r_cw == rotation
    assert r_ccw == rotation


def test_rotation_cycle_order() -> None:
    assert Rotation.R0.clockwise() == Rotation.R90
    assert Rotation.R270.clockwise() == Rotation.R0
    assert Rotation.R0.counter_clockwise() == Rotation.R270


@pytest.mark.parametrize("shape", list(TetrominoShape))
@pytest.mark.parametrize("width", [5, 6, 7, 10, 15, 20])
def test_spawned_piece_is_inside_the_board(shape: TetrominoShape, width: int) -> None:
    piece = ActivePiece.spawn(shape, width)
    assert piece.position == Position(width // 2, 1)
    assert piece.rotation == Rotation.R0
    for p in piece.blocks:
        assert 0 <= p.x < width
        assert 0 <= p.y < 2


@pytest.mark.parametrize("shape", list(TetrominoShape))
@pytest.mark.parametrize("rotation", list(Rotation))
def test_every_orientation_has_four_distinct_blocks(shape: TetrominoShape, rotation: Rotation) -> None:
    piece = ActivePiece(shape, Position(5, 5), rotation)
    assert len(set(piece.blocks)) == 4


def test_i_piece_blocks_horizontal_and_vertical() -> None:
    horizontal = ActivePiece(TetrominoShape.I, Position(5, 1), Rotation.R0)
    assert set(horizontal.blocks) == {Position(4, 1), Position(5, 1), Position(6, 1), Position(7, 1)}

    vertical = ActivePiece(TetrominoShape.I, Position(5, 1), Rotation.R90)
    assert set(vertical.blocks) == {Position(5, 0), Position(5, 1), Position(5, 2), Position(5, 3)}


def test_moves_shift_the_pivot() -> None:
    board = Board.empty(width=W, height=H)
    piece = ActivePiece.spawn(TetrominoShape.T, W)

    left = piece.try_move_left(board)
    right = piece.try_move_right(board)
    down = piece.try_move_down(board)

    assert left is not None and left.position == Position(4, 1)
    assert right is not None and right.position == Position(6, 1)
    assert down is not None and down.position == Position(5, 2)


def test_moves_into_walls_and_floor_fail() -> None:
    board = Board.empty(width=W, height=H)

    at_left_wall = ActivePiece(TetrominoShape.I, Position(1, 5), Rotation.R0)
    assert at_left_wall.try_move_left(board) is None

    at_right_wall = ActivePiece(TetrominoShape.I, Position(7, 5), Rotation.R0)
    assert at_right_wall.try_move_right(board) is None

    on_floor = ActivePiece(TetrominoShape.O, Position(0, H - 2), Rotation.R0)
    assert on_floor.try_move_down(board) is None
    assert on_floor.has_landed(board)


def test_moves_into_filled_cells_fail() -> None:
    board = Board.empty(width=W, height=H).place([Position(3, 1)], TetrominoShape.Z)
    piece = ActivePiece.spawn(TetrominoShape.I, W)  # covers x=4..7 on row 1
    assert piece.try_move_left(board) is None
    assert piece.try_move_right(board) is not None


def test_hard_drop_lands_on_the_floor() -> None:
    board = Board.empty(width=W, height=H)
    piece = ActivePiece.spawn(TetrominoShape.T, W)

    dropped = piece.hard_drop_on(board)

    assert dropped.position == Position(5, H - 1)
    assert max(p.y for p in dropped.blocks) == H - 1
    assert dropped.has_landed(board)
    # already resting: distance 0
    assert dropped.hard_drop_on(board) == dropped


def test_rotation_in_open_space_keeps_position() -> None:
    board = Board.empty(width=W, height=H)
    piece = ActivePiece(TetrominoShape.T, Position(5, 10), Rotation.R0)

    cw = piece.rotate_on(board, clockwise=True)
    ccw = piece.rotate_on(board, clockwise=False)

    assert cw == ActivePiece(TetrominoShape.T, Position(5, 10), Rotation.R90)
    assert ccw == ActivePiece(TetrominoShape.T, Position(5, 10), Rotation.R270)


def test_o_piece_rotation_keeps_its_cells() -> None:
    board = Board.empty(width=W, height=H)
    piece = ActivePiece.spawn(TetrominoShape.O, W)

    rotated = piece.rotate_on(board, clockwise=True)

    assert rotated is not None
    assert rotated.rotation == Rotation.R90
    assert set(rotated.blocks) == set(piece.blocks)


def test_i_piece_kicks_off_the_left_wall() -> None:
    board = Board.empty(width=W, height=H)
    vertical = ActivePiece(TetrominoShape.I, Position(0, 5), Rotation.R90)

    rotated = vertical.rotate_on(board, clockwise=True)

    assert rotated == ActivePiece(TetrominoShape.I, Position(2, 5), Rotation.R180)


def test_t_piece_kicks_off_the_left_wall() -> None:
    board = Board.empty(width=W, height=H)
    piece = ActivePiece(TetrominoShape.T, Position(0, 5), Rotation.R90)

    rotated = piece.rotate_on(board, clockwise=True)

    assert rotated == ActivePiece(TetrominoShape.T, Position(1, 5), Rotation.R180)


def test_rotation_fails_when_no_kick_fits() -> None:
    rows = ["I" * W for _ in range(H)]
    rows[10] = "IIII....II"
    board = Board.from_rows(rows)
    piece = ActivePiece(TetrominoShape.I, Position(5, 10), Rotation.R0)
    assert board.can_place(piece.blocks)

    assert piece.rotate_on(board, clockwise=True) is None
    assert piece.rotate_on(board, clockwise=False) is None
