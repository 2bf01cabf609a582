# src/tetris_engine/utils/seed.py
"""
Stateless seed derivation for the piece queues.

A queue never holds an RNG object; it re-derives a 64-bit seed for the
stream it needs (bag index for the 7-bag, draw index for uniform) and hands
that to numpy. Nothing here keeps state.
"""
from __future__ import annotations

MASK64 = 0xFFFFFFFFFFFFFFFF


def to_u64(x: int) -> int:
    """Wrap any Python int (negative seeds too) into [0, 2^64)."""
    return int(x) & MASK64


def splitmix64(x: int) -> int:
    # SplitMix64 finalizer
    z = (to_u64(x) + 0x9E3779B97F4A7C15) & MASK64
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & MASK64
    return int((z ^ (z >> 31)) & MASK64)


def stream_seed(*, base_seed: int, stream_id: int) -> int:
    """
    Seed for stream `stream_id` of `base_seed`.

    Equal inputs give equal seeds; neighbouring stream ids give unrelated ones.
    """
    return splitmix64(splitmix64(base_seed) ^ to_u64(stream_id))


__all__ = [
    "MASK64",
    "to_u64",
    "splitmix64",
    "stream_seed",
]
