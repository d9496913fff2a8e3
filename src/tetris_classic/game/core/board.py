# src/tetris_classic/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tetris_classic.game.core.constants import EMPTY_CELL
from tetris_classic.game.core.piece import Piece


class PlacementError(IndexError):
    """A piece was locked with cells outside the grid."""


@dataclass
class Grid:
    h: int
    w: int
    cells: np.ndarray  # settled blocks only (0=empty, >=1 board ids)

    @classmethod
    def empty(cls, *, h: int, w: int) -> "Grid":
        if int(h) <= 0 or int(w) <= 0:
            raise ValueError(f"grid dimensions must be positive, got h={h} w={w}")
        return cls(h=int(h), w=int(w), cells=np.zeros((int(h), int(w)), dtype=np.uint8))

    def copy(self) -> "Grid":
        return Grid(h=self.h, w=self.w, cells=self.cells.copy())

    def can_place(self, piece: Piece, x: int, y: int) -> bool:
        """
        True iff the piece's mask fits at anchor (x, y).

        Cells above the top edge (row < 0) are allowed and never collide.
        """
        for i, j in piece.offsets():
            col = int(x) + j
            row = int(y) + i
            if col < 0 or col >= self.w or row >= self.h:
                return False
            if row >= 0 and self.cells[row, col] != EMPTY_CELL:
                return False
        return True

    def in_bounds(self, piece: Piece, x: int, y: int) -> bool:
        """Like can_place, but settled cells do not count as collisions."""
        for i, j in piece.offsets():
            col = int(x) + j
            if col < 0 or col >= self.w or int(y) + i >= self.h:
                return False
        return True

    def lock(self, piece: Piece) -> None:
        """
        Write the piece's board id into the grid at its current anchor.

        The engine only locks pieces that passed can_place or in_bounds. A cell
        outside the grid raises PlacementError instead of wrapping around via
        negative indexing.
        """
        cells = list(piece.cells())
        for row, col in cells:
            if not (0 <= row < self.h and 0 <= col < self.w):
                raise PlacementError(
                    f"cannot lock {piece.kind!r} at x={piece.x} y={piece.y}: cell (row={row}, col={col}) "
                    f"is outside the {self.h}x{self.w} grid"
                )
        for row, col in cells:
            self.cells[row, col] = piece.board_id

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.cells[int(row)] != EMPTY_CELL))

    def clear_lines(self) -> int:
        """
        Remove full rows, scanning top to bottom.

        Each full row is collapsed on the spot: every row above it moves down
        by one and row 0 becomes empty. The scan then continues with the next
        index.
        """
        cleared = 0
        for i in range(self.h):
            if not self.is_row_full(i):
                continue
            cleared += 1
            for k in range(i, 0, -1):
                self.cells[k] = self.cells[k - 1]
            self.cells[0] = EMPTY_CELL
        return cleared

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))


__all__ = ["Grid", "PlacementError"]
