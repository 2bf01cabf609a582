# src/tetris_engine/config/io.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from tetris_engine.config.game_config import EngineConfig
from tetris_engine.utils.paths import default_config_path

logger = logging.getLogger(__name__)


def to_plain_dict(cfg: Any) -> dict[str, Any]:
    if isinstance(cfg, BaseModel):
        return cfg.model_dump(mode="json")
    raise TypeError(f"unsupported config type: {type(cfg).__name__}")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise FileNotFoundError(f"config file not found: {cfg_path}")
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping, got {type(data)!r}")
    return data


def load_engine_config(path: Path | None = None) -> EngineConfig:
    """
    Load and validate an EngineConfig.

    path=None loads the packaged default (configs/default.yaml).
    Missing keys fall back to model defaults; unknown keys are rejected.
    """
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg = EngineConfig.model_validate(load_yaml(cfg_path))
    logger.debug("loaded engine config from %s: %s", str(cfg_path), to_plain_dict(cfg))
    return cfg


__all__ = [
    "to_plain_dict",
    "load_yaml",
    "load_engine_config",
]
