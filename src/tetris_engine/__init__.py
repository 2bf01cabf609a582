# src/tetris_engine/__init__.py
from __future__ import annotations

from tetris_engine.config import EngineConfig, LevelConfig, ScoreConfig, SpeedConfig, load_engine_config
from tetris_engine.game.core import (
    ActivePiece,
    Board,
    GameCommand,
    GamePhase,
    Position,
    Rotation,
    ScoreState,
    TetrisGame,
    TetrominoShape,
)

__version__ = "0.1.0"

__all__ = [
    "TetrisGame",
    "Board",
    "ActivePiece",
    "ScoreState",
    "Position",
    "Rotation",
    "TetrominoShape",
    "GameCommand",
    "GamePhase",
    "EngineConfig",
    "ScoreConfig",
    "LevelConfig",
    "SpeedConfig",
    "load_engine_config",
]
