# src/tetris_classic/game/core/piece_rules.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from tetris_classic.game.core.constants import SPAWN_X, SPAWN_Y
from tetris_classic.game.core.piece import Piece
from tetris_classic.game.core.pieceset import PieceSet


@dataclass
class PieceFactory:
    """
    Uniform piece generator over a PieceSet.

    Stateless apart from the injected RNG: every call to generate() draws one
    kind uniformly and returns a fresh Piece at the spawn anchor.
    """

    pieces: PieceSet
    spawn_x: int = SPAWN_X
    spawn_y: int = SPAWN_Y
    _rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def __post_init__(self) -> None:
        if len(self.pieces) == 0:
            raise ValueError("PieceFactory requires a non-empty PieceSet")

    @classmethod
    def seeded(
            cls,
            pieces: PieceSet,
            *,
            seed: Optional[int],
            spawn_x: int = SPAWN_X,
            spawn_y: int = SPAWN_Y,
    ) -> "PieceFactory":
        return cls(pieces=pieces, spawn_x=spawn_x, spawn_y=spawn_y, _rng=np.random.default_rng(seed))

    def set_rng(self, rng: np.random.Generator) -> None:
        self._rng = rng

    def make(self, kind: str) -> Piece:
        return Piece.from_def(
            self.pieces.get(kind),
            board_id=self.pieces.board_id(kind),
            x=self.spawn_x,
            y=self.spawn_y,
        )

    def generate(self) -> Piece:
        kinds = self.pieces.kinds()
        i = int(self._rng.integers(0, len(kinds)))
        return self.make(kinds[i])


__all__ = ["PieceFactory"]
