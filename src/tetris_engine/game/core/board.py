# src/tetris_engine/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from tetris_engine.game.core.tetrominoes import EMPTY_CELL, board_id, board_id_to_shape
from tetris_engine.game.core.types import EMPTY, Cell, Empty, Filled, Position, TetrominoShape


def _frozen(grid: np.ndarray) -> np.ndarray:
    grid.setflags(write=False)
    return grid


@dataclass(frozen=True, eq=False)
class Board:
    """
    Immutable grid of locked cells.

    Contracts:
      - grid has shape (height, width), dtype uint8, and is read-only.
      - grid cell values are board ids: 0 = empty, 1..7 = shape index + 1.
      - width/height never change; every operation returns a new Board.
      - Boards compare by value (dimensions + cells).
    """

    width: int
    height: int
    grid: np.ndarray

    def __post_init__(self) -> None:
        g = np.asarray(self.grid, dtype=np.uint8)
        if g.shape != (int(self.height), int(self.width)):
            raise ValueError(f"grid shape {g.shape} does not match (height, width)=({self.height}, {self.width})")
        # a read-only view can still be written through its base
        if g.flags.writeable or not g.flags.owndata:
            g = _frozen(g.copy())
        object.__setattr__(self, "grid", g)

    @classmethod
    def empty(cls, *, width: int, height: int) -> "Board":
        w, h = int(width), int(height)
        return cls(width=w, height=h, grid=_frozen(np.full((h, w), EMPTY_CELL, dtype=np.uint8)))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first.

        '.' marks an empty cell, a shape letter (I O T S Z J L) a filled one.
        """
        if not isinstance(rows, (list, tuple)) or len(rows) == 0:
            raise ValueError("rows must be a non-empty list of strings")

        width = None
        out: List[List[int]] = []
        for r in rows:
            if not isinstance(r, str) or len(r) == 0:
                raise ValueError(f"rows must be non-empty strings, got {r!r}")
            if width is None:
                width = len(r)
            elif len(r) != width:
                raise ValueError(f"rows must have equal width, got widths {width} and {len(r)}")

            row: List[int] = []
            for ch in r:
                if ch == ".":
                    row.append(EMPTY_CELL)
                    continue
                try:
                    row.append(board_id(TetrominoShape(ch.upper())))
                except ValueError as e:
                    raise ValueError(f"unknown board character {ch!r} in row {r!r}") from e
            out.append(row)

        grid = np.asarray(out, dtype=np.uint8)
        return cls(width=int(grid.shape[1]), height=int(grid.shape[0]), grid=_frozen(grid))

    # ---- queries --------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Position) -> Optional[Cell]:
        if not self.in_bounds(pos):
            return None
        v = int(self.grid[pos.y, pos.x])
        if v == EMPTY_CELL:
            return EMPTY
        return Filled(board_id_to_shape(v))

    def is_empty(self, pos: Position) -> bool:
        return self.in_bounds(pos) and int(self.grid[pos.y, pos.x]) == EMPTY_CELL

    def can_place(self, blocks: Iterable[Position]) -> bool:
        return all(self.is_empty(p) for p in blocks)

    def is_blocked(self, blocks: Iterable[Position]) -> bool:
        return not self.can_place(blocks)

    def drop_distance(self, blocks: Sequence[Position]) -> int:
        """
        Number of extra rows the blocks can fall while still fitting.

        Tests one more row at a time (occupancy below can be irregular).
        """
        distance = 0
        while self.can_place([p.shifted(dy=distance + 1) for p in blocks]):
            distance += 1
        return distance

    def completed_rows(self) -> List[int]:
        full = np.all(self.grid != EMPTY_CELL, axis=1)
        return [int(y) for y in np.flatnonzero(full)]

    # ---- updates (copy-on-write) ----------------------------------------------------

    def place_cell(self, pos: Position, cell: Cell) -> "Board":
        if not self.in_bounds(pos):
            return self
        grid = self.grid.copy()
        grid[pos.y, pos.x] = EMPTY_CELL if isinstance(cell, Empty) else board_id(cell.shape)
        return Board(width=self.width, height=self.height, grid=_frozen(grid))

    def place(self, blocks: Iterable[Position], shape: TetrominoShape) -> "Board":
        bid = board_id(shape)
        grid = self.grid.copy()
        for p in blocks:
            if self.in_bounds(p):
                grid[p.y, p.x] = bid
        return Board(width=self.width, height=self.height, grid=_frozen(grid))

    def clear_completed_rows(self) -> Tuple["Board", int]:
        full = np.all(self.grid != EMPTY_CELL, axis=1)
        cleared = int(full.sum())
        if cleared <= 0:
            return self, 0
        new_rows = np.full((cleared, self.width), EMPTY_CELL, dtype=np.uint8)
        grid = np.vstack([new_rows, self.grid[~full]])
        return Board(width=self.width, height=self.height, grid=_frozen(grid)), cleared

    # ---- views ----------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Read-only (height, width) board-id grid, for renderers."""
        return self.grid

    def to_rows(self) -> List[str]:
        rows: List[str] = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                v = int(self.grid[y, x])
                chars.append("." if v == EMPTY_CELL else board_id_to_shape(v).value)
            rows.append("".join(chars))
        return rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.grid, other.grid))
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, filled={int(np.count_nonzero(self.grid))})"


__all__ = ["Board"]
