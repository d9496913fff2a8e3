# src/tetris_classic/game/rendering/pygame/window.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

from tetris_classic.game.rendering.pygame.sidebar import SIDEBAR_W


@dataclass(frozen=True)
class WindowSpec:
    width: int
    height: int
    title: str = "Basic Tetris - Player Name & Score"


@dataclass(frozen=True)
class Layout:
    origin: Tuple[int, int]
    margin: int
    sidebar_x: int
    sidebar_y: int
    sidebar_w: int
    window: WindowSpec


def create_window(spec: WindowSpec) -> pygame.Surface:
    pygame.display.set_caption(spec.title)
    return pygame.display.set_mode((int(spec.width), int(spec.height)))


def compute_layout(
        *,
        board_h: int,
        board_w: int,
        cell: int,
        title: str = WindowSpec.title,
        sidebar_w: int = SIDEBAR_W,
        pad: int = 16,
) -> Layout:
    """
    Single source of truth for window geometry: board on the left, sidebar on
    the right, `pad` pixels around both.
    """
    ox = int(pad)
    oy = int(pad)

    margin = 2
    sidebar_x = ox + int(board_w) * int(cell) + int(pad)
    sidebar_y = oy - margin

    window_w = int(sidebar_x) + int(sidebar_w) + int(pad)
    window_h = int(oy) + int(board_h) * int(cell) + int(pad)

    return Layout(
        origin=(ox, oy),
        margin=int(margin),
        sidebar_x=int(sidebar_x),
        sidebar_y=int(sidebar_y),
        sidebar_w=int(sidebar_w),
        window=WindowSpec(width=int(window_w), height=int(window_h), title=str(title)),
    )
