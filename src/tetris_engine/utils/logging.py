# src/tetris_engine/utils/logging.py
from __future__ import annotations

import logging
from typing import Union

from rich.logging import RichHandler

PLAIN_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"


def _level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def _make_handler(use_rich: bool) -> logging.Handler:
    if not use_rich:
        plain = logging.StreamHandler()
        plain.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return plain
    rich = RichHandler(rich_tracebacks=True, show_time=True, show_level=True, show_path=False)
    rich.setFormatter(logging.Formatter("%(message)s"))
    return rich


def setup_logger(*, name: str, use_rich: bool = True, level: Union[str, int] = "info") -> logging.Logger:
    """
    (Re)configure a named logger with exactly one handler.

    Calling it again for the same name replaces the handler instead of stacking
    another one. Unknown level names fall back to INFO.
    """
    logger = logging.getLogger(str(name))
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(_level(level))
    logger.addHandler(_make_handler(bool(use_rich)))
    return logger


__all__ = ["PLAIN_FORMAT", "setup_logger"]
