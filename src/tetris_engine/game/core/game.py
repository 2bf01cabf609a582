# src/tetris_engine/game/core/game.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from tetris_engine.config.game_config import EngineConfig, LevelConfig, ScoreConfig, SpeedConfig
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
from tetris_engine.game.core.piece import ActivePiece
from tetris_engine.game.core.piece_queue import PieceQueue, make_piece_queue
from tetris_engine.game.core.rules import ScoreState, drop_interval
from tetris_engine.game.core.types import GameCommand, GamePhase, TetrominoShape, parse_command

Transition = Tuple["TetrisGame", List[DomainEvent]]


@dataclass(frozen=True)
class TetrisGame:
    """
    Aggregate root: one immutable game state.

    Contracts:

      - handle(command) is pure: it returns (new_game, events) and never mutates self.
      - Illegal moves/rotations are no-ops (same state, no events), never exceptions.
      - A blocked descent (SOFT_DROP/TICK) or HARD_DROP runs the lock procedure;
        OVER is only reached there, when the next piece cannot spawn.
      - OVER is terminal: every command returns (self, []).
      - Events are not retained; callers that want a log accumulate them.
      - Same seed + config + commands => identical states and events.
    """

    board: Board
    active_piece: ActivePiece
    piece_queue: PieceQueue
    score_state: ScoreState
    phase: GamePhase
    score_config: ScoreConfig
    level_config: LevelConfig

    @classmethod
    def create(
            cls,
            *,
            seed: int,
            width: int,
            height: int,
            score_config: Optional[ScoreConfig] = None,
            level_config: Optional[LevelConfig] = None,
            piece_rule: str = "bag7",
            bag_copies: int = 1,
    ) -> "TetrisGame":
        queue = make_piece_queue(seed=seed, rule=piece_rule, bag_copies=bag_copies)
        first, queue = queue.next()
        return cls(
            board=Board.empty(width=width, height=height),
            active_piece=ActivePiece.spawn(first, width),
            piece_queue=queue,
            score_state=ScoreState.initial(),
            phase=GamePhase.PLAYING,
            score_config=score_config if score_config is not None else ScoreConfig(),
            level_config=level_config if level_config is not None else LevelConfig(),
        )

    @classmethod
    def from_config(cls, cfg: EngineConfig, *, seed: Optional[int] = None) -> "TetrisGame":
        return cls.create(
            seed=cfg.seed if seed is None else int(seed),
            width=cfg.grid.width,
            height=cfg.grid.height,
            score_config=cfg.score,
            level_config=cfg.level,
            piece_rule=cfg.piece_rule,
            bag_copies=cfg.bag_copies,
        )

    # ---- read accessors (renderer-facing) ------------------------------------------

    @property
    def next_shape(self) -> TetrominoShape:
        return self.piece_queue.peek()

    @property
    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    @property
    def is_paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.OVER

    def drop_interval(self, speed_config: SpeedConfig) -> int:
        return drop_interval(self.score_state.level, speed_config)

    # ---- state machine --------------------------------------------------------------

    def handle(self, command: GameCommand | str) -> Transition:
        cmd = parse_command(command)

        if self.phase is GamePhase.OVER:
            return self, []

        if self.phase is GamePhase.PAUSED:
            if cmd is GameCommand.TOGGLE_PAUSE:
                return replace(self, phase=GamePhase.PLAYING), [GameResumed()]
            return self, []

        if cmd is GameCommand.MOVE_LEFT:
            return self._apply_move(self.active_piece.try_move_left(self.board))
        if cmd is GameCommand.MOVE_RIGHT:
            return self._apply_move(self.active_piece.try_move_right(self.board))
        if cmd is GameCommand.SOFT_DROP or cmd is GameCommand.TICK:
            return self._soft_drop()
        if cmd is GameCommand.HARD_DROP:
            return self._hard_drop()
        if cmd is GameCommand.ROTATE_CW:
            return self._rotate(clockwise=True)
        if cmd is GameCommand.ROTATE_CCW:
            return self._rotate(clockwise=False)
        if cmd is GameCommand.TOGGLE_PAUSE:
            return replace(self, phase=GamePhase.PAUSED), [GamePaused()]
        raise ValueError(f"unhandled game command {cmd!r}")

    # ---- internals -----------------------------------------------------------------

    def _apply_move(self, moved: Optional[ActivePiece]) -> Transition:
        if moved is None:
            return self, []
        return replace(self, active_piece=moved), [PieceMoved(moved)]

    def _rotate(self, *, clockwise: bool) -> Transition:
        rotated = self.active_piece.rotate_on(self.board, clockwise=clockwise)
        if rotated is None:
            return self, []
        return replace(self, active_piece=rotated), [PieceRotated(rotated)]

    def _soft_drop(self) -> Transition:
        moved = self.active_piece.try_move_down(self.board)
        if moved is None:
            return self._lock_piece()
        return replace(self, active_piece=moved), [PieceMoved(moved)]

    def _hard_drop(self) -> Transition:
        dropped = self.active_piece.hard_drop_on(self.board)
        distance = dropped.position.y - self.active_piece.position.y
        with_drop = replace(
            self,
            active_piece=dropped,
            score_state=self.score_state.add_hard_drop_bonus(distance),
        )
        locked, lock_events = with_drop._lock_piece()
        return locked, [PieceMoved(dropped), *lock_events]

    def _lock_piece(self) -> Transition:
        """
        Lock the active piece, clear lines, score, then spawn the next piece.

        Event order: PieceLocked, [LinesCleared], [LevelUp], then GameOver or PieceSpawned.
        """
        piece = self.active_piece
        events: List[DomainEvent] = [PieceLocked(piece)]

        locked_board = self.board.place(piece.blocks, piece.shape)
        cleared_board, cleared = locked_board.clear_completed_rows()

        old = self.score_state
        new_score = old.add_lines(cleared, self.score_config, self.level_config)
        if cleared > 0:
            events.append(LinesCleared(count=cleared, score_gained=new_score.score - old.score))
        if new_score.level > old.level:
            events.append(LevelUp(new_level=new_score.level))

        shape, next_queue = self.piece_queue.next()
        spawned = ActivePiece.spawn(shape, cleared_board.width)

        if cleared_board.is_blocked(spawned.blocks):
            # spawned piece is discarded and the queue is not advanced; the phase gates play
            events.append(GameOver(final_score=new_score.score))
            over = replace(self, board=cleared_board, score_state=new_score, phase=GamePhase.OVER)
            return over, events

        events.append(PieceSpawned(piece=spawned, next_shape=next_queue.peek()))
        game = replace(
            self,
            board=cleared_board,
            active_piece=spawned,
            piece_queue=next_queue,
            score_state=new_score,
        )
        return game, events


__all__ = ["TetrisGame", "Transition"]
