# src/tetris_engine/game/core/events.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tetris_engine.game.core.piece import ActivePiece
from tetris_engine.game.core.types import TetrominoShape


@dataclass(frozen=True)
class PieceMoved:
    piece: ActivePiece


@dataclass(frozen=True)
class PieceRotated:
    piece: ActivePiece


@dataclass(frozen=True)
class PieceLocked:
    piece: ActivePiece


@dataclass(frozen=True)
class LinesCleared:
    count: int
    score_gained: int


@dataclass(frozen=True)
class LevelUp:
    new_level: int


@dataclass(frozen=True)
class PieceSpawned:
    piece: ActivePiece
    next_shape: TetrominoShape


@dataclass(frozen=True)
class GamePaused:
    pass


@dataclass(frozen=True)
class GameResumed:
    pass


@dataclass(frozen=True)
class GameOver:
    final_score: int


DomainEvent = Union[
    PieceMoved,
    PieceRotated,
    PieceLocked,
    LinesCleared,
    LevelUp,
    PieceSpawned,
    GamePaused,
    GameResumed,
    GameOver,
]


__all__ = [
    "DomainEvent",
    "PieceMoved",
    "PieceRotated",
    "PieceLocked",
    "LinesCleared",
    "LevelUp",
    "PieceSpawned",
    "GamePaused",
    "GameResumed",
    "GameOver",
]
