# src/tetris_classic/config/base.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ConfigBase(BaseModel):
    """Frozen settings node: unknown keys are rejected, strings are stripped."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        str_strip_whitespace=True,
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
