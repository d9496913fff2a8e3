# src/tetris_classic/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    bg: Color = (0, 0, 0)
    panel_bg: Color = (16, 16, 20)
    empty: Color = (0, 0, 0)
    grid: Color = (64, 64, 64)
    border: Color = (90, 90, 105)

    text: Color = (255, 255, 255)
    muted: Color = (170, 170, 185)
    accent: Color = (0, 255, 120)
    warn: Color = (240, 160, 90)

    fallback_piece: Color = (180, 180, 200)

    overlay_rgba: Tuple[int, int, int, int] = (0, 0, 0, 170)
