# src/tetris_engine/utils/paths.py
from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """
    Return the installed tetris_engine package directory.
    """
    return Path(__file__).resolve().parents[1]


def configs_dir() -> Path:
    """
    Return package_root/configs (must exist).
    """
    p = package_root() / "configs"
    if not p.is_dir():
        raise FileNotFoundError(f"Configs directory not found: {p}")
    return p


def default_config_path() -> Path:
    return configs_dir() / "default.yaml"


__all__ = ["package_root", "configs_dir", "default_config_path"]
