# src/tetris_engine/game/core/__init__.py
from __future__ import annotations

from tetris_engine.game.core.board import Board
from tetris_engine.game.core.events import (
    DomainEvent,
    GameOver,
    GamePaused,
    GameResumed,
    LevelUp,
    LinesCleared,
    PieceLocked,
    PieceMoved,
    PieceRotated,
    PieceSpawned,
)
from tetris_engine.game.core.game import TetrisGame, Transition
from tetris_engine.game.core.piece import ActivePiece
from tetris_engine.game.core.piece_queue import (
    BagPieceQueue,
    PieceQueue,
    UniformPieceQueue,
    make_piece_queue,
)
from tetris_engine.game.core.rules import ScoreState, drop_interval, level_for_lines, score_for_clears
from tetris_engine.game.core.types import (
    EMPTY,
    Cell,
    Empty,
    Filled,
    GameCommand,
    GamePhase,
    Position,
    Rotation,
    TetrominoShape,
    parse_command,
)

__all__ = [
    "Board",
    "ActivePiece",
    "PieceQueue",
    "BagPieceQueue",
    "UniformPieceQueue",
    "make_piece_queue",
    "ScoreState",
    "score_for_clears",
    "level_for_lines",
    "drop_interval",
    "TetrisGame",
    "Transition",
    "Position",
    "TetrominoShape",
    "Rotation",
    "Cell",
    "Empty",
    "Filled",
    "EMPTY",
    "GamePhase",
    "GameCommand",
    "parse_command",
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
