# src/tetris_classic/config/__init__.py
from __future__ import annotations

from tetris_classic.config.base import ConfigBase
from tetris_classic.config.io import load_play_config, load_yaml, to_plain_dict
from tetris_classic.config.play import (
    DEFAULT_PLAYER_NAME,
    GameConfig,
    PlayConfig,
    ScoresConfig,
    UIConfig,
    resolve_player_name,
)

__all__ = [
    "ConfigBase",
    "DEFAULT_PLAYER_NAME",
    "GameConfig",
    "PlayConfig",
    "ScoresConfig",
    "UIConfig",
    "load_play_config",
    "load_yaml",
    "resolve_player_name",
    "to_plain_dict",
]
