# src/tetris_engine/config/__init__.py
from __future__ import annotations

from tetris_engine.config.base import ConfigBase
from tetris_engine.config.game_config import (
    EngineConfig,
    GridConfig,
    LevelConfig,
    PieceRule,
    ScoreConfig,
    SpeedConfig,
)
from tetris_engine.config.io import load_engine_config, load_yaml, to_plain_dict

__all__ = [
    "ConfigBase",
    "EngineConfig",
    "GridConfig",
    "ScoreConfig",
    "LevelConfig",
    "SpeedConfig",
    "PieceRule",
    "load_yaml",
    "load_engine_config",
    "to_plain_dict",
]
