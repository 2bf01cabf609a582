# src/tetris_engine/game/core/tetrominoes.py
from __future__ import annotations

from typing import Dict, Tuple

from tetris_engine.game.core.types import Position, TetrominoShape

# Board / cell encoding
EMPTY_CELL: int = 0

# Canonical kind order. board_id = index + 1 (0 reserved for empty).
SHAPE_ORDER: Tuple[TetrominoShape, ...] = tuple(TetrominoShape)

NUM_SHAPES: int = len(SHAPE_ORDER)

# Pivot-relative footprints in rotation state R0 (y grows downward).
SHAPE_BLOCKS: Dict[TetrominoShape, Tuple[Position, ...]] = {
    TetrominoShape.I: (Position(-1, 0), Position(0, 0), Position(1, 0), Position(2, 0)),
    TetrominoShape.O: (Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
    TetrominoShape.T: (Position(-1, 0), Position(0, 0), Position(1, 0), Position(0, -1)),
    TetrominoShape.S: (Position(-1, 0), Position(0, 0), Position(0, -1), Position(1, -1)),
    TetrominoShape.Z: (Position(-1, -1), Position(0, -1), Position(0, 0), Position(1, 0)),
    TetrominoShape.J: (Position(-1, -1), Position(-1, 0), Position(0, 0), Position(1, 0)),
    TetrominoShape.L: (Position(-1, 0), Position(0, 0), Position(1, 0), Position(1, -1)),
}

_BOARD_IDS: Dict[TetrominoShape, int] = {s: i + 1 for i, s in enumerate(SHAPE_ORDER)}


def base_blocks(shape: TetrominoShape) -> Tuple[Position, ...]:
    return SHAPE_BLOCKS[shape]


def board_id(shape: TetrominoShape) -> int:
    """
    Categorical board id: board_id in {1..7} with 0 reserved for empty.
    """
    return _BOARD_IDS[shape]


def board_id_to_shape(bid: int) -> TetrominoShape:
    b = int(bid)
    if b <= 0 or b > NUM_SHAPES:
        raise KeyError(f"board_id out of range: {b} (valid 1..{NUM_SHAPES}, 0 is empty)")
    return SHAPE_ORDER[b - 1]


__all__ = [
    "EMPTY_CELL",
    "SHAPE_ORDER",
    "NUM_SHAPES",
    "SHAPE_BLOCKS",
    "base_blocks",
    "board_id",
    "board_id_to_shape",
]
