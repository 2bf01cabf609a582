# src/tetris_engine/game/core/rules.py
from __future__ import annotations

from dataclasses import dataclass, replace

from tetris_engine.config.game_config import LevelConfig, ScoreConfig, SpeedConfig

HARD_DROP_POINTS_PER_ROW: int = 2


def score_for_clears(cleared: int, cfg: ScoreConfig) -> int:
    """Base points for a simultaneous clear of `cleared` rows (before the level multiplier)."""
    if cleared == 1:
        return cfg.single_line
    if cleared == 2:
        return cfg.double_line
    if cleared == 3:
        return cfg.triple_line
    if cleared == 4:
        return cfg.tetris
    return 0


def level_for_lines(total_lines: int, cfg: LevelConfig) -> int:
    return 1 + int(total_lines) // int(cfg.lines_per_level)


def drop_interval(level: int, cfg: SpeedConfig) -> int:
    """
    Gravity interval in ms for `level`: non-increasing in level, floored at the minimum.

    Advisory output for the caller's timer; the engine itself never reads a clock.
    """
    decrease = (int(level) - 1) * int(cfg.decrease_per_level_ms)
    return max(int(cfg.min_drop_interval_ms), int(cfg.base_drop_interval_ms) - decrease)


@dataclass(frozen=True)
class ScoreState:
    """
    Score / level / cumulative lines.

    Monotone within a game: add_lines and add_hard_drop_bonus never decrease
    score or level (tables and distances are non-negative).
    """

    score: int = 0
    level: int = 1
    lines_cleared: int = 0

    @classmethod
    def initial(cls) -> "ScoreState":
        return cls(score=0, level=1, lines_cleared=0)

    def add_lines(self, count: int, score_config: ScoreConfig, level_config: LevelConfig) -> "ScoreState":
        # multiplier is the level BEFORE this clear; level-up applies from the next clear on
        c = int(count)
        if c == 0:
            return self
        gained = score_for_clears(c, score_config) * self.level
        total = self.lines_cleared + c
        return ScoreState(
            score=self.score + gained,
            level=level_for_lines(total, level_config),
            lines_cleared=total,
        )

    def add_hard_drop_bonus(self, distance: int) -> "ScoreState":
        return replace(self, score=self.score + HARD_DROP_POINTS_PER_ROW * max(0, int(distance)))


__all__ = [
    "HARD_DROP_POINTS_PER_ROW",
    "ScoreState",
    "score_for_clears",
    "level_for_lines",
    "drop_interval",
]
