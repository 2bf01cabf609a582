# tests/test_replay.py
from __future__ import annotations

from tetris_engine.config.game_config import EngineConfig, GridConfig
from tetris_engine.game.core.events import PieceMoved
from tetris_engine.game.core.game import TetrisGame
from tetris_engine.game.core.types import GameCommand
from tetris_engine.game.replay import (
    REPLAY_FORMAT_VERSION,
    ReplayLog,
    ReplayMetadata,
    ReplayPlayer,
    ReplayRecorder,
    ReplayStep,
    replay,
    run_commands,
)

COMMANDS = [
    GameCommand.MOVE_LEFT,
    GameCommand.ROTATE_CW,
    GameCommand.TICK,
    GameCommand.HARD_DROP,
    GameCommand.TOGGLE_PAUSE,
    GameCommand.MOVE_RIGHT,
    GameCommand.TOGGLE_PAUSE,
    GameCommand.HARD_DROP,
]


def test_run_commands_records_one_step_per_command() -> None:
    game = TetrisGame.create(seed=9, width=10, height=20)

    final, steps = run_commands(game, COMMANDS)

    assert [s.command for s in steps] == COMMANDS
    assert steps[2].events == (PieceMoved(steps[2].events[0].piece),)
    # paused MOVE_RIGHT is ignored
    assert steps[5].events == ()
    assert final.is_playing


def test_run_commands_accepts_names() -> None:
    game = TetrisGame.create(seed=9, width=10, height=20)
    assert run_commands(game, ["left", "cw"]) == run_commands(game, [GameCommand.MOVE_LEFT, GameCommand.ROTATE_CW])


def test_recorder_is_persistent() -> None:
    cfg = EngineConfig(seed=9)
    empty = ReplayRecorder(seed=9, config=cfg)
    one = empty.record(GameCommand.TICK, [])

    assert empty.steps == ()
    assert one.steps == (ReplayStep(command=GameCommand.TICK, events=()),)


def test_recorded_session_replays_to_the_same_state() -> None:
    cfg = EngineConfig(seed=21, grid=GridConfig(width=8, height=16))
    game = TetrisGame.from_config(cfg)
    rec = ReplayRecorder(seed=cfg.seed, config=cfg)

    for cmd in COMMANDS * 5:
        game, events = game.handle(cmd)
        rec = rec.record(cmd, events)

    log = rec.to_log()
    replayed, steps = replay(log)

    assert isinstance(log, ReplayLog)
    assert log.commands == tuple(COMMANDS * 5)
    assert replayed == game
    assert [ev for s in steps for ev in s.events] == rec.events


def test_replay_log_seed_overrides_config_seed() -> None:
    log = ReplayLog(seed=4, config=EngineConfig(seed=99))
    assert log.new_game() == TetrisGame.create(seed=4, width=10, height=20)


def _recorded(cfg: EngineConfig, commands: list) -> tuple:
    game = TetrisGame.from_config(cfg)
    rec = ReplayRecorder(seed=cfg.seed, config=cfg)
    for cmd in commands:
        game, events = game.handle(cmd)
        rec = rec.record(cmd, events)
    return game, rec


def test_to_log_without_final_game_has_no_metadata() -> None:
    _, rec = _recorded(EngineConfig(seed=2), COMMANDS)
    assert rec.to_log().metadata is None


def test_to_log_records_final_state_metadata() -> None:
    cfg = EngineConfig(seed=13, grid=GridConfig(width=8, height=18))
    final, rec = _recorded(cfg, COMMANDS * 2)

    meta = rec.to_log(final).metadata
    start = TetrisGame.from_config(cfg)

    assert isinstance(meta, ReplayMetadata)
    assert meta.version == REPLAY_FORMAT_VERSION
    assert (meta.grid_width, meta.grid_height) == (8, 18)
    assert meta.initial_shape == start.active_piece.shape
    assert meta.next_shape == start.next_shape
    assert meta.final_score == final.score_state.score
    assert meta.final_score > 0
    assert meta.final_level == final.score_state.level
    assert meta.final_lines_cleared == final.score_state.lines_cleared


def test_player_steps_reproduce_replay() -> None:
    cfg = EngineConfig(seed=21)
    final, rec = _recorded(cfg, COMMANDS * 2)
    log = rec.to_log(final)

    player = ReplayPlayer.start(log)
    assert player.progress == 0.0
    assert not player.is_finished

    events = []
    progress = [player.progress]
    while not player.is_finished:
        player, step_events = player.advance()
        events.extend(step_events)
        progress.append(player.progress)

    replayed, steps = replay(log)
    assert player.game == replayed == final
    assert events == [ev for s in steps for ev in s.events] == rec.events
    assert player.step_index == len(log.commands)
    assert progress == sorted(progress)
    assert progress[-1] == 1.0


def test_finished_player_does_not_advance() -> None:
    _, rec = _recorded(EngineConfig(seed=21), [GameCommand.TICK])
    player = ReplayPlayer.start(rec.to_log()).run_to_end()

    again, events = player.advance()

    assert player.is_finished
    assert again is player
    assert events == []


def test_player_stops_at_game_over() -> None:
    log = ReplayLog(seed=1, config=EngineConfig(seed=1), commands=(GameCommand.HARD_DROP,) * 500)

    player = ReplayPlayer.start(log).run_to_end()

    assert player.is_finished
    assert player.game.is_over
    assert player.step_index < 500
    assert player.progress < 1.0
    assert player.game == replay(log)[0]


def test_empty_log_is_finished_from_the_start() -> None:
    player = ReplayPlayer.start(ReplayLog(seed=3, config=EngineConfig()))
    assert player.is_finished
    assert player.progress == 1.0
    assert player.game == TetrisGame.create(seed=3, width=10, height=20)
