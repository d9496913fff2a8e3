# src/tetris_classic/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from omegaconf import OmegaConf
from pydantic import BaseModel

from tetris_classic.config.base import ConfigBase
from tetris_classic.config.play import PlayConfig


def to_plain_dict(cfg: Any) -> dict[str, Any]:
    if isinstance(cfg, ConfigBase):
        return cfg.to_dict()
    if isinstance(cfg, BaseModel):
        return cfg.model_dump(mode="json")
    if isinstance(cfg, Mapping):
        return dict(cfg)
    raise TypeError(f"unsupported config type: {type(cfg).__name__}")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg = OmegaConf.load(Path(path))
    data = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return data


def load_play_config(
        path: Optional[Path] = None,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
) -> PlayConfig:
    """
    Build a PlayConfig from (optional) YAML plus dotted-key overrides.

    overrides use dotted keys, e.g. {"game.seed": 3, "ui.cell": 24}; None values
    are skipped so unset CLI flags leave the file untouched.
    """
    base = OmegaConf.create(load_yaml(path) if path is not None else {})
    nested = _nest({k: v for k, v in (overrides or {}).items() if v is not None})
    if nested:
        base = OmegaConf.merge(base, OmegaConf.create(nested))
    data = OmegaConf.to_container(base, resolve=True)
    if not isinstance(data, dict):
        raise TypeError("config must resolve to a mapping")
    return PlayConfig.model_validate(data)


def _nest(flat: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for dotted, value in flat.items():
        *parents, leaf = str(dotted).split(".")
        node = out
        for key in parents:
            node = node.setdefault(key, {})
        node[leaf] = str(value) if isinstance(value, Path) else value
    return out


__all__ = ["load_play_config", "load_yaml", "to_plain_dict"]
