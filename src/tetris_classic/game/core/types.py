# src/tetris_classic/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    QUIT = "quit"


class Phase(Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    LINE_CLEARING = "line_clearing"
    GAME_OVER = "game_over"
    STOPPED = "stopped"


class RotationPolicy(Enum):
    UNCHECKED = "unchecked"
    REJECT = "reject"


@dataclass(frozen=True)
class StepEvent:
    """
    What a single tick/command did.

    moved:      the current piece changed position or pattern
    locked:     the current piece was committed into the grid
    terminated: the engine stopped (game over or quit)
    """

    moved: bool = False
    locked: bool = False
    lines_cleared: int = 0
    game_over: bool = False
    terminated: bool = False


@dataclass(frozen=True)
class PieceView:
    kind: str
    mask: np.ndarray
    color_name: str
    rgb: Tuple[int, int, int]
    board_id: int
    x: int
    y: int


@dataclass(frozen=True)
class State:
    """
    Render-facing snapshot.

    Contracts:
      - grid is a COPY of the settled board (no active overlay).
      - grid cells: 0 = empty, 1..K = board id (kind_idx + 1).
      - active/next masks are read-only arrays shared with the engine.
    """

    grid: np.ndarray
    active: Optional[PieceView]
    next: Optional[PieceView]
    score: int
    lines: int
    phase: Phase
    player_name: str
    high_score_name: str
    high_score: int

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def running(self) -> bool:
        return self.phase is Phase.FALLING
