# src/tetris_engine/config/game_config.py
from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator, model_validator

from tetris_engine.config.base import ConfigBase

PieceRule = Literal["bag7", "uniform"]

# Smallest board every spawned piece fits on.
MIN_GRID_WIDTH = 5
MIN_GRID_HEIGHT = 2


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise TypeError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except ValueError as e:
        raise TypeError(f"{where} must be an int-like value, got {value!r}") from e


class GridConfig(ConfigBase):
    """
    Board size. Pieces spawn with their pivot at (width // 2, 1): the I piece
    spans x in [width // 2 - 1, width // 2 + 2] and footprints use rows 0..1.
    """

    width: int = Field(default=10, ge=MIN_GRID_WIDTH)
    height: int = Field(default=20, ge=MIN_GRID_HEIGHT)


class ScoreConfig(ConfigBase):
    """
    Base points per simultaneous line clear (multiplied by the level at clear time).
    """

    single_line: int = Field(default=100, ge=0)
    double_line: int = Field(default=300, ge=0)
    triple_line: int = Field(default=500, ge=0)
    tetris: int = Field(default=800, ge=0)


class LevelConfig(ConfigBase):
    lines_per_level: int = Field(default=10, ge=1)


class SpeedConfig(ConfigBase):
    """
    Gravity curve. Advisory only: the engine never reads a clock, callers drive Tick.
    """

    base_drop_interval_ms: int = Field(default=1000, ge=0)
    min_drop_interval_ms: int = Field(default=100, ge=0)
    decrease_per_level_ms: int = Field(default=50, ge=0)

    @model_validator(mode="after")
    def _min_not_above_base(self) -> "SpeedConfig":
        if self.min_drop_interval_ms > self.base_drop_interval_ms:
            raise ValueError(
                "speed.min_drop_interval_ms must be <= speed.base_drop_interval_ms "
                f"(got {self.min_drop_interval_ms} > {self.base_drop_interval_ms})"
            )
        return self


class EngineConfig(ConfigBase):
    """
    Root config (engine-facing).

    Keep this as the single home for things that conceptually belong to the engine:
      - seed + piece rule + bag size (piece sequence)
      - grid dimensions
      - scoring / level / gravity tables
    """

    seed: int = Field(default=12345, ge=0)
    piece_rule: PieceRule = "bag7"
    bag_copies: int = Field(default=1, ge=1)
    grid: GridConfig = Field(default_factory=GridConfig)
    score: ScoreConfig = Field(default_factory=ScoreConfig)
    level: LevelConfig = Field(default_factory=LevelConfig)
    speed: SpeedConfig = Field(default_factory=SpeedConfig)

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> int:
        return _as_int(v, where="seed")

    @field_validator("piece_rule", mode="before")
    @classmethod
    def _piece_rule_lower(cls, v: object) -> str:
        return str(v).strip().lower()


__all__ = [
    "PieceRule",
    "MIN_GRID_WIDTH",
    "MIN_GRID_HEIGHT",
    "GridConfig",
    "ScoreConfig",
    "LevelConfig",
    "SpeedConfig",
    "EngineConfig",
]
