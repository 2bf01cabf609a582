# src/tetris_engine/game/core/piece_queue.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Tuple

import numpy as np

from tetris_engine.game.core.tetrominoes import NUM_SHAPES, SHAPE_ORDER
from tetris_engine.game.core.types import TetrominoShape
from tetris_engine.utils.seed import stream_seed, to_u64


class PieceQueue(ABC):
    """
    Piece sequence interface.

    Contracts:
      - Queues are values: next() returns the drawn shape and a NEW queue,
        the receiver is left untouched.
      - peek() is the shape the next call to next() returns, no matter how
        often it is called.
      - The sequence is a pure function of the seed (no global RNG).
    """

    @abstractmethod
    def peek(self) -> TetrominoShape:
        raise NotImplementedError

    @abstractmethod
    def next(self) -> Tuple[TetrominoShape, "PieceQueue"]:
        raise NotImplementedError


@lru_cache(maxsize=256)
def _bag_order(seed: int, bag_index: int, bag_copies: int) -> Tuple[TetrominoShape, ...]:
    # Build bag with N copies of each kind, then shuffle with a per-bag stream.
    bag = [s for s in SHAPE_ORDER for _ in range(int(bag_copies))]
    rng = np.random.default_rng(stream_seed(base_seed=seed, stream_id=bag_index))
    order = rng.permutation(len(bag))
    return tuple(bag[int(i)] for i in order)


@dataclass(frozen=True)
class BagPieceQueue(PieceQueue):
    """
    K-bag randomizer (generalization of 7-bag).

    Parameters:
      - bag_copies: how many copies of each kind are placed into a bag before shuffling.
          * bag_copies=1 -> classic 7-bag: every aligned block of 7 draws holds each shape once.
          * bag_copies>1 -> larger bag: N copies of each piece per bag.

    State is (seed, bag_index, cursor); bag k is shuffled by an RNG seeded from
    stream_seed(seed, k), so any position in the sequence is reproducible.
    """

    seed: int
    bag_copies: int = 1
    bag_index: int = 0
    cursor: int = 0

    def __post_init__(self) -> None:
        if int(self.bag_copies) <= 0:
            raise ValueError(f"BagPieceQueue.bag_copies must be >= 1 (got {self.bag_copies})")
        object.__setattr__(self, "seed", to_u64(self.seed))

    @classmethod
    def from_seed(cls, seed: int, *, bag_copies: int = 1) -> "BagPieceQueue":
        return cls(seed=seed, bag_copies=bag_copies)

    def _bag(self) -> Tuple[TetrominoShape, ...]:
        return _bag_order(self.seed, self.bag_index, int(self.bag_copies))

    def peek(self) -> TetrominoShape:
        return self._bag()[self.cursor]

    def next(self) -> Tuple[TetrominoShape, "BagPieceQueue"]:
        shape = self.peek()
        cursor = self.cursor + 1
        if cursor >= len(self._bag()):
            return shape, replace(self, bag_index=self.bag_index + 1, cursor=0)
        return shape, replace(self, cursor=cursor)


@dataclass(frozen=True)
class UniformPieceQueue(PieceQueue):
    """
    Uniform piece selection: draw n is chosen by an RNG seeded from stream_seed(seed, n).
    Repeats and droughts are possible.
    """

    seed: int
    draws: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", to_u64(self.seed))

    @classmethod
    def from_seed(cls, seed: int) -> "UniformPieceQueue":
        return cls(seed=seed)

    def peek(self) -> TetrominoShape:
        rng = np.random.default_rng(stream_seed(base_seed=self.seed, stream_id=self.draws))
        return SHAPE_ORDER[int(rng.integers(0, NUM_SHAPES))]

    def next(self) -> Tuple[TetrominoShape, "UniformPieceQueue"]:
        return self.peek(), replace(self, draws=self.draws + 1)


def make_piece_queue(*, seed: int, rule: str = "bag7", bag_copies: int = 1) -> PieceQueue:
    """
    bag_copies sizes the bag (7 * bag_copies pieces); the uniform rule has no bag and ignores it.
    """
    r = str(rule).strip().lower()
    if r == "bag7":
        return BagPieceQueue.from_seed(seed, bag_copies=bag_copies)
    if r == "uniform":
        return UniformPieceQueue.from_seed(seed)
    raise ValueError(f"unknown piece rule {rule!r} (expected 'bag7' or 'uniform')")


__all__ = [
    "PieceQueue",
    "BagPieceQueue",
    "UniformPieceQueue",
    "make_piece_queue",
]
