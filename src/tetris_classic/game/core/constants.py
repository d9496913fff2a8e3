# src/tetris_classic/game/core/constants.py
from __future__ import annotations

# Board / cell encoding
EMPTY_CELL: int = 0

# Default board geometry
DEFAULT_ROWS: int = 20
DEFAULT_COLS: int = 10

# Fixed spawn anchor (top-left of the piece mask, not bbox-centered)
SPAWN_X: int = 4
SPAWN_Y: int = 0

# Fixed gravity interval, no speed progression
DEFAULT_TICK_MS: int = 500

# Flat score per cleared line
LINE_SCORE: int = 100

CLASSIC_NUM_PIECES: int = 7
