# src/tetris_classic/runtime/__init__.py
from __future__ import annotations

from tetris_classic.runtime.session import GameSession, TickTimer

__all__ = ["GameSession", "TickTimer"]
