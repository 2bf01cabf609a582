# src/tetris_engine/game/core/piece.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from tetris_engine.game.core.board import Board
from tetris_engine.game.core.rotation import kick_offsets, rotated_blocks
from tetris_engine.game.core.types import Position, Rotation, TetrominoShape

# Pivot row at spawn. Every R0 footprint reaches at most one row above its pivot.
SPAWN_ROW: int = 1


@dataclass(frozen=True)
class ActivePiece:
    """
    The falling piece: shape + pivot position + rotation state.

    Replaced wholesale on every successful move/rotate/drop; the try_* methods
    return None when the board does not accept the result.
    """

    shape: TetrominoShape
    position: Position
    rotation: Rotation = Rotation.R0

    @classmethod
    def spawn(cls, shape: TetrominoShape, board_width: int) -> "ActivePiece":
        return cls(shape=shape, position=Position(int(board_width) // 2, SPAWN_ROW), rotation=Rotation.R0)

    @property
    def blocks(self) -> Tuple[Position, ...]:
        return tuple(p + self.position for p in rotated_blocks(self.shape, self.rotation))

    def moved(self, dx: int = 0, dy: int = 0) -> "ActivePiece":
        return replace(self, position=self.position.shifted(dx, dy))

    def _try(self, candidate: "ActivePiece", board: Board) -> Optional["ActivePiece"]:
        return candidate if board.can_place(candidate.blocks) else None

    def try_move_left(self, board: Board) -> Optional["ActivePiece"]:
        return self._try(self.moved(dx=-1), board)

    def try_move_right(self, board: Board) -> Optional["ActivePiece"]:
        return self._try(self.moved(dx=+1), board)

    def try_move_down(self, board: Board) -> Optional["ActivePiece"]:
        # None here means "landed"
        return self._try(self.moved(dy=+1), board)

    def has_landed(self, board: Board) -> bool:
        return board.can_place(self.blocks) and not board.can_place(self.moved(dy=+1).blocks)

    def hard_drop_on(self, board: Board) -> "ActivePiece":
        return self.moved(dy=board.drop_distance(self.blocks))

    def rotate_on(self, board: Board, *, clockwise: bool) -> Optional["ActivePiece"]:
        nrot = self.rotation.clockwise() if clockwise else self.rotation.counter_clockwise()
        rotated = replace(self, rotation=nrot)
        for offset in kick_offsets(self.shape):
            candidate = replace(rotated, position=rotated.position + offset)
            if board.can_place(candidate.blocks):
                return candidate
        return None


__all__ = ["ActivePiece", "SPAWN_ROW"]
