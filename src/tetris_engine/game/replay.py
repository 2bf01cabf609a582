# src/tetris_engine/game/replay.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

from tetris_engine.config.game_config import EngineConfig
from tetris_engine.game.core.events import DomainEvent
from tetris_engine.game.core.game import TetrisGame
from tetris_engine.game.core.types import GameCommand, TetrominoShape, parse_command

REPLAY_FORMAT_VERSION = "1.0"


@dataclass(frozen=True)
class ReplayStep:
    command: GameCommand
    events: Tuple[DomainEvent, ...]


@dataclass(frozen=True)
class ReplayMetadata:
    """
    Summary of a recorded session, for listings and sanity checks.

    initial_shape/next_shape describe the game the log starts from; the final_*
    fields describe the game the recording ended on.
    """

    version: str
    grid_width: int
    grid_height: int
    initial_shape: TetrominoShape
    next_shape: TetrominoShape
    final_score: int
    final_level: int
    final_lines_cleared: int

    @classmethod
    def describe(cls, *, initial: TetrisGame, final: TetrisGame) -> "ReplayMetadata":
        st = final.score_state
        return cls(
            version=REPLAY_FORMAT_VERSION,
            grid_width=initial.board.width,
            grid_height=initial.board.height,
            initial_shape=initial.active_piece.shape,
            next_shape=initial.next_shape,
            final_score=st.score,
            final_level=st.level,
            final_lines_cleared=st.lines_cleared,
        )


@dataclass(frozen=True)
class ReplayLog:
    """
    Everything needed to rebuild a session: seed + config + the command stream.

    Engine state is never stored; replay re-runs the commands against a freshly
    seeded game, which is valid because handle() is deterministic.
    """

    seed: int
    config: EngineConfig
    commands: Tuple[GameCommand, ...] = ()
    metadata: Optional[ReplayMetadata] = None

    def new_game(self) -> TetrisGame:
        return TetrisGame.from_config(self.config, seed=self.seed)


@dataclass(frozen=True)
class ReplayRecorder:
    """
    Persistent recorder: record() returns a new recorder with one more step.
    """

    seed: int
    config: EngineConfig
    steps: Tuple[ReplayStep, ...] = field(default_factory=tuple)

    def record(self, command: GameCommand | str, events: Iterable[DomainEvent]) -> "ReplayRecorder":
        step = ReplayStep(command=parse_command(command), events=tuple(events))
        return replace(self, steps=self.steps + (step,))

    @property
    def events(self) -> List[DomainEvent]:
        return [ev for s in self.steps for ev in s.events]

    def to_log(self, final_game: Optional[TetrisGame] = None) -> ReplayLog:
        log = ReplayLog(seed=self.seed, config=self.config, commands=tuple(s.command for s in self.steps))
        if final_game is None:
            return log
        return replace(log, metadata=ReplayMetadata.describe(initial=log.new_game(), final=final_game))


@dataclass(frozen=True)
class ReplayPlayer:
    """
    Step-by-step playback of a ReplayLog, one command per advance().

    Contracts:
      - advance() returns a new player plus the events of that command; a
        finished player returns (self, []).
      - The player finishes when the commands run out or the game is over.
      - progress is step_index / len(commands), 1.0 for an empty log.
    """

    log: ReplayLog
    game: TetrisGame
    step_index: int = 0
    is_finished: bool = False

    @classmethod
    def start(cls, log: ReplayLog) -> "ReplayPlayer":
        return cls(log=log, game=log.new_game(), is_finished=len(log.commands) == 0)

    @property
    def progress(self) -> float:
        total = len(self.log.commands)
        if total == 0:
            return 1.0
        return self.step_index / total

    def advance(self) -> Tuple["ReplayPlayer", List[DomainEvent]]:
        if self.is_finished:
            return self, []
        game, events = self.game.handle(self.log.commands[self.step_index])
        step_index = self.step_index + 1
        finished = step_index >= len(self.log.commands) or game.is_over
        return replace(self, game=game, step_index=step_index, is_finished=finished), events

    def run_to_end(self) -> "ReplayPlayer":
        player = self
        while not player.is_finished:
            player, _ = player.advance()
        return player


def run_commands(
        game: TetrisGame,
        commands: Iterable[GameCommand | str],
) -> Tuple[TetrisGame, List[ReplayStep]]:
    """
    Feed commands through handle() in order. Commands after game over still
    produce a (no-op) step so step indices line up with the input stream.
    """
    steps: List[ReplayStep] = []
    for c in commands:
        cmd = parse_command(c)
        game, events = game.handle(cmd)
        steps.append(ReplayStep(command=cmd, events=tuple(events)))
    return game, steps


def replay(log: ReplayLog) -> Tuple[TetrisGame, List[ReplayStep]]:
    return run_commands(log.new_game(), log.commands)


__all__ = [
    "REPLAY_FORMAT_VERSION",
    "ReplayStep",
    "ReplayMetadata",
    "ReplayLog",
    "ReplayRecorder",
    "ReplayPlayer",
    "run_commands",
    "replay",
]
