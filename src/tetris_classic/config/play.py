# src/tetris_classic/config/play.py
from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from tetris_classic.config.base import ConfigBase
from tetris_classic.game.core.constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_TICK_MS,
    LINE_SCORE,
    SPAWN_X,
    SPAWN_Y,
)
from tetris_classic.scores.highscore import DEFAULT_SCORE_FILE

RotationMode = Literal["unchecked", "reject"]
LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_PLAYER_NAME = "Player"


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str)):
        raise ValueError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{where} must be an int-like value, got {value!r}") from e


class GameConfig(ConfigBase):
    """
    Engine-facing settings.

    spawn_x/spawn_y default to the classic fixed anchor (4, 0) and are not
    re-centered when cols changes. On a board too narrow for the anchor the
    first piece that does not fit ends the game.
    """

    rows: int = Field(default=DEFAULT_ROWS, ge=1)
    cols: int = Field(default=DEFAULT_COLS, ge=1)
    spawn_x: int = SPAWN_X
    spawn_y: int = Field(default=SPAWN_Y, ge=0)
    tick_ms: int = Field(default=DEFAULT_TICK_MS, ge=1)
    line_score: int = Field(default=LINE_SCORE, ge=0)
    rotation: RotationMode = "unchecked"
    seed: Optional[int] = Field(default=None, ge=0)

    @field_validator("rows", "cols", "tick_ms", mode="before")
    @classmethod
    def _ints(cls, v: object, info: ValidationInfo) -> int:
        return _as_int(v, where=f"game.{info.field_name}")

    @field_validator("rotation", mode="before")
    @classmethod
    def _rotation_lower(cls, v: object) -> str:
        return str(v).strip().lower()


class ScoresConfig(ConfigBase):
    enabled: bool = True
    path: Path = Path(DEFAULT_SCORE_FILE)


class UIConfig(ConfigBase):
    cell: int = Field(default=30, ge=8, le=96)
    fps: int = Field(default=60, ge=1)
    show_grid: bool = True
    title: str = "Basic Tetris - Player Name & Score"


class PlayConfig(ConfigBase):
    player_name: Optional[str] = None
    log_level: LogLevel = "info"
    game: GameConfig = Field(default_factory=GameConfig)
    scores: ScoresConfig = Field(default_factory=ScoresConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _level_lower(cls, v: object) -> str:
        return str(v).strip().lower()


def resolve_player_name(raw: Optional[str]) -> str:
    name = "" if raw is None else str(raw).strip()
    return name or DEFAULT_PLAYER_NAME


__all__ = [
    "DEFAULT_PLAYER_NAME",
    "GameConfig",
    "LogLevel",
    "PlayConfig",
    "RotationMode",
    "ScoresConfig",
    "UIConfig",
    "resolve_player_name",
]
