# src/tetris_engine/game/core/rotation.py
from __future__ import annotations

from typing import Dict, Tuple

from tetris_engine.game.core.tetrominoes import base_blocks
from tetris_engine.game.core.types import Position, Rotation, TetrominoShape

# Offsets tried in order after a rotation; the first placement that fits wins.
# I gets wider horizontal kicks (its pivot sits between cells).
I_KICKS: Tuple[Position, ...] = (
    Position(0, 0),
    Position(-2, 0),
    Position(2, 0),
    Position(-2, 1),
    Position(2, -1),
)

# O never changes footprint, so it never needs a kick.
O_KICKS: Tuple[Position, ...] = (Position(0, 0),)

JLSTZ_KICKS: Tuple[Position, ...] = (
    Position(0, 0),
    Position(-1, 0),
    Position(1, 0),
    Position(0, -1),
    Position(-1, -1),
    Position(1, -1),
)

WALL_KICKS: Dict[TetrominoShape, Tuple[Position, ...]] = {
    TetrominoShape.I: I_KICKS,
    TetrominoShape.O: O_KICKS,
    TetrominoShape.T: JLSTZ_KICKS,
    TetrominoShape.S: JLSTZ_KICKS,
    TetrominoShape.Z: JLSTZ_KICKS,
    TetrominoShape.J: JLSTZ_KICKS,
    TetrominoShape.L: JLSTZ_KICKS,
}


def kick_offsets(shape: TetrominoShape) -> Tuple[Position, ...]:
    return WALL_KICKS[shape]


def rotate_offset(p: Position, rotation: Rotation) -> Position:
    """
    Rotate a pivot-relative offset clockwise by `rotation` (screen coordinates, y down).
    """
    if rotation is Rotation.R0:
        return p
    if rotation is Rotation.R90:
        return Position(-p.y, p.x)
    if rotation is Rotation.R180:
        return Position(-p.x, -p.y)
    return Position(p.y, -p.x)


def rotated_blocks(shape: TetrominoShape, rotation: Rotation) -> Tuple[Position, ...]:
    """
    Pivot-relative footprint of `shape` in `rotation`.

    O is rotation-invariant: its rotation state may advance but its cells never move.
    """
    blocks = base_blocks(shape)
    if shape is TetrominoShape.O:
        return blocks
    return tuple(rotate_offset(p, rotation) for p in blocks)


__all__ = [
    "I_KICKS",
    "O_KICKS",
    "JLSTZ_KICKS",
    "WALL_KICKS",
    "kick_offsets",
    "rotate_offset",
    "rotated_blocks",
]
