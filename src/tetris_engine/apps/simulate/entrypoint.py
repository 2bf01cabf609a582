# src/tetris_engine/apps/simulate/entrypoint.py
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from tetris_engine.config.game_config import EngineConfig
from tetris_engine.config.io import load_engine_config
from tetris_engine.game.core.events import GameOver, LevelUp, LinesCleared, PieceLocked
from tetris_engine.game.core.game import TetrisGame
from tetris_engine.game.core.types import GameCommand
from tetris_engine.utils.logging import setup_logger

# Pause toggles are left out: a random driver would just stall the game.
DRIVER_COMMANDS: tuple[GameCommand, ...] = (
    GameCommand.MOVE_LEFT,
    GameCommand.MOVE_RIGHT,
    GameCommand.SOFT_DROP,
    GameCommand.HARD_DROP,
    GameCommand.ROTATE_CW,
    GameCommand.ROTATE_CCW,
    GameCommand.TICK,
)


@dataclass(frozen=True)
class SimulationSummary:
    steps: int
    pieces_locked: int
    lines_cleared: int
    score: int
    level: int
    game_over: bool
    drop_interval_ms: int


def apply_overrides(cfg: EngineConfig, args: argparse.Namespace) -> EngineConfig:
    """
    CLI overrides win over the config file. Re-validated through pydantic.
    """
    grid: dict = {}
    if args.width is not None:
        grid["width"] = int(args.width)
    if args.height is not None:
        grid["height"] = int(args.height)

    top: dict = {}
    if args.seed is not None:
        top["seed"] = int(args.seed)
    if args.bag_copies is not None:
        top["bag_copies"] = int(args.bag_copies)
    if args.piece_rule is not None:
        top["piece_rule"] = str(args.piece_rule)
    if grid:
        top["grid"] = cfg.grid.with_updates(**grid)
    return cfg.with_updates(**top) if top else cfg


def simulate(
        cfg: EngineConfig,
        *,
        steps: int,
        driver_seed: int,
        logger_name: str = "tetris_engine.apps.simulate",
        log_level: str = "info",
) -> SimulationSummary:
    logger = setup_logger(name=logger_name, use_rich=True, level=log_level)

    game = TetrisGame.from_config(cfg)
    rng = np.random.default_rng(int(driver_seed))

    logger.info(
        "[simulate] seed=%d piece_rule=%s bag_copies=%d grid=%dx%d steps=%d",
        cfg.seed, cfg.piece_rule, cfg.bag_copies, cfg.grid.width, cfg.grid.height, int(steps),
    )

    steps_done = 0
    pieces_locked = 0
    while steps_done < int(steps) and not game.is_over:
        cmd = DRIVER_COMMANDS[int(rng.integers(0, len(DRIVER_COMMANDS)))]
        game, events = game.handle(cmd)
        steps_done += 1

        for ev in events:
            logger.debug("[simulate] step=%d cmd=%s event=%r", steps_done, cmd.name, ev)
            if isinstance(ev, PieceLocked):
                pieces_locked += 1
            elif isinstance(ev, LinesCleared):
                logger.info("[simulate] step=%d cleared=%d gained=%d", steps_done, ev.count, ev.score_gained)
            elif isinstance(ev, LevelUp):
                logger.info("[simulate] step=%d level_up=%d", steps_done, ev.new_level)
            elif isinstance(ev, GameOver):
                logger.warning("[simulate] step=%d game over final_score=%d", steps_done, ev.final_score)

    st = game.score_state
    summary = SimulationSummary(
        steps=steps_done,
        pieces_locked=pieces_locked,
        lines_cleared=st.lines_cleared,
        score=st.score,
        level=st.level,
        game_over=game.is_over,
        drop_interval_ms=game.drop_interval(cfg.speed),
    )
    logger.info(
        "[simulate] DONE steps=%d pieces=%d lines=%d score=%d level=%d game_over=%s drop_interval_ms=%d",
        summary.steps, summary.pieces_locked, summary.lines_cleared, summary.score,
        summary.level, summary.game_over, summary.drop_interval_ms,
    )
    return summary


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play a seeded random command stream through the engine (headless) and report the outcome."
    )
    parser.add_argument("--config", type=str, default=None, help="Engine config YAML (default: packaged default.yaml).")
    parser.add_argument("--steps", type=int, default=10_000, help="Maximum number of commands to issue.")
    parser.add_argument("--seed", type=int, default=None, help="Override the piece-sequence seed.")
    parser.add_argument("--driver-seed", type=int, default=0, help="Seed of the random command stream.")
    parser.add_argument("--piece-rule", type=str, default=None, choices=["bag7", "uniform"])
    parser.add_argument("--bag-copies", type=int, default=None, help="Copies of each shape per bag (bag7 rule).")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="info", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def run_simulation(args: argparse.Namespace) -> int:
    cfg = load_engine_config(Path(args.config) if args.config else None)
    cfg = apply_overrides(cfg, args)
    simulate(cfg, steps=int(args.steps), driver_seed=int(args.driver_seed), log_level=str(args.log_level))
    return 0


__all__ = [
    "DRIVER_COMMANDS",
    "SimulationSummary",
    "apply_overrides",
    "simulate",
    "parse_args",
    "run_simulation",
]
