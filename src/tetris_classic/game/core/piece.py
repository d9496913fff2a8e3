# src/tetris_classic/game/core/piece.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

import numpy as np

from tetris_classic.game.core.pieceset import RGB, PieceDef
from tetris_classic.game.core.rotation import rotate_mask


@dataclass(eq=False)
class Piece:
    """
    One tetromino: kind tag, occupancy mask, color and a mutable anchor.

    (x, y) is the top-left of the mask in grid coordinates. The mask itself is
    a read-only array; rotate() swaps in a new array instead of editing it.
    Nothing here checks bounds or collisions, that is the Grid's job.
    """

    kind: str
    mask: np.ndarray
    rotation: str
    color_name: str
    rgb: RGB
    board_id: int
    x: int = 0
    y: int = 0

    @classmethod
    def from_def(cls, d: PieceDef, *, board_id: int, x: int, y: int) -> "Piece":
        return cls(
            kind=d.kind,
            mask=d.shape,
            rotation=d.rotation,
            color_name=d.color_name,
            rgb=d.rgb,
            board_id=int(board_id),
            x=int(x),
            y=int(y),
        )

    @property
    def shape(self) -> Tuple[int, int]:
        h, w = self.mask.shape
        return int(h), int(w)

    def translate(self, dx: int, dy: int) -> None:
        self.x += int(dx)
        self.y += int(dy)

    def rotate(self) -> None:
        self.mask = rotate_mask(self.mask, rule=self.rotation)

    def rotated(self) -> "Piece":
        return replace(self, mask=rotate_mask(self.mask, rule=self.rotation))

    def offsets(self) -> Iterator[Tuple[int, int]]:
        """Occupied (row, col) offsets inside the mask."""
        h, w = self.mask.shape
        for i in range(h):
            for j in range(w):
                if self.mask[i, j] != 0:
                    yield i, j

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Occupied absolute (row, col) positions at the current anchor."""
        for i, j in self.offsets():
            yield self.y + i, self.x + j

    def same_pattern(self, other: "Piece") -> bool:
        return self.mask.shape == other.mask.shape and bool(np.array_equal(self.mask, other.mask))


__all__ = ["Piece"]
