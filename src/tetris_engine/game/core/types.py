# src/tetris_engine/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


@dataclass(frozen=True)
class Position:
    """Board coordinate: x grows rightward, y grows downward. Unbounded by itself."""

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def shifted(self, dx: int = 0, dy: int = 0) -> Position:
        return Position(self.x + int(dx), self.y + int(dy))


class TetrominoShape(Enum):
    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


class Rotation(Enum):
    R0 = 0
    R90 = 1
    R180 = 2
    R270 = 3

    def clockwise(self) -> Rotation:
        return Rotation((self.value + 1) % 4)

    def counter_clockwise(self) -> Rotation:
        return Rotation((self.value - 1) % 4)


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Filled:
    # shape is kept for coloring only; gameplay only asks "empty or not"
    shape: TetrominoShape


Cell = Union[Empty, Filled]

EMPTY: Empty = Empty()


class GamePhase(Enum):
    PLAYING = auto()
    PAUSED = auto()
    OVER = auto()


class GameCommand(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    HARD_DROP = auto()
    ROTATE_CW = auto()
    ROTATE_CCW = auto()
    TOGGLE_PAUSE = auto()
    TICK = auto()


_COMMAND_ALIASES: dict[str, GameCommand] = {
    "moveleft": GameCommand.MOVE_LEFT,
    "left": GameCommand.MOVE_LEFT,
    "moveright": GameCommand.MOVE_RIGHT,
    "right": GameCommand.MOVE_RIGHT,
    "softdrop": GameCommand.SOFT_DROP,
    "down": GameCommand.SOFT_DROP,
    "harddrop": GameCommand.HARD_DROP,
    "drop": GameCommand.HARD_DROP,
    "rotatecw": GameCommand.ROTATE_CW,
    "rotcw": GameCommand.ROTATE_CW,
    "cw": GameCommand.ROTATE_CW,
    "rotateccw": GameCommand.ROTATE_CCW,
    "rotccw": GameCommand.ROTATE_CCW,
    "ccw": GameCommand.ROTATE_CCW,
    "togglepause": GameCommand.TOGGLE_PAUSE,
    "pause": GameCommand.TOGGLE_PAUSE,
    "tick": GameCommand.TICK,
}


def parse_command(command: GameCommand | str) -> GameCommand:
    """
    Normalize a command.

    Accepts a GameCommand or a name in any of the usual spellings:
    "MoveLeft", "move_left", "MOVE_LEFT", "left", "rotate-cw", ...
    """
    if isinstance(command, GameCommand):
        return command
    key = str(command).strip().lower().replace("_", "").replace("-", "").replace(" ", "")
    try:
        return _COMMAND_ALIASES[key]
    except KeyError as e:
        known = sorted(c.name for c in GameCommand)
        raise ValueError(f"unknown game command {command!r}. known commands={known!r}") from e


__all__ = [
    "Position",
    "TetrominoShape",
    "Rotation",
    "Empty",
    "Filled",
    "Cell",
    "EMPTY",
    "GamePhase",
    "GameCommand",
    "parse_command",
]
