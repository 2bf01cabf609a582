# src/tetris_engine/config/base.py
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

C = TypeVar("C", bound="ConfigBase")


class ConfigBase(BaseModel):
    """
    Strict, immutable config node: unknown keys are errors, fields cannot be reassigned.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def with_updates(self: C, **changes: Any) -> C:
        """
        Copy with some fields replaced, validated again (unlike model_copy(update=...)).
        """
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


__all__ = ["ConfigBase"]
