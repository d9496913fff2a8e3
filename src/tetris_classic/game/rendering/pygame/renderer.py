# src/tetris_classic/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pygame

from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.types import State
from tetris_classic.game.rendering.pygame.grid import draw_grid
from tetris_classic.game.rendering.pygame.palette import Color, Palette
from tetris_classic.game.rendering.pygame.sidebar import draw_sidebar
from tetris_classic.game.rendering.pygame.surf import BlockCache, TextCache
from tetris_classic.game.rendering.pygame.window import Layout

__all__ = ["Color", "Palette", "TetrisRenderer"]


@dataclass(frozen=True)
class Fonts:
    main: pygame.font.Font
    small: pygame.font.Font
    tiny: pygame.font.Font


class TetrisRenderer:
    def __init__(
        self,
        *,
        cell: int,
        show_grid_lines: bool,
        pieces: PieceSet,
        palette: Optional[Palette] = None,
    ) -> None:
        self.cell = int(cell)
        self.show_grid_lines = bool(show_grid_lines)
        self.pieces = pieces
        self.palette = palette or Palette()

        main = pygame.font.SysFont("consolas", 20) or pygame.font.SysFont(None, 20)
        small = pygame.font.SysFont("consolas", 16) or pygame.font.SysFont(None, 16)
        tiny = pygame.font.SysFont("consolas", 13) or pygame.font.SysFont(None, 13)
        self.fonts = Fonts(main=main, small=small, tiny=tiny)

        self.blocks = BlockCache()
        self.text = TextCache()

    def render(self, *, screen: pygame.Surface, state: State, layout: Layout) -> None:
        screen.fill(self.palette.bg)

        draw_grid(
            screen=screen,
            state=state,
            origin=layout.origin,
            margin=layout.margin,
            cell=self.cell,
            show_grid_lines=self.show_grid_lines,
            palette=self.palette,
            pieces=self.pieces,
            blocks=self.blocks,
        )

        draw_sidebar(
            screen=screen,
            state=state,
            x=layout.sidebar_x,
            y=layout.sidebar_y,
            w=layout.sidebar_w,
            cell=self.cell,
            palette=self.palette,
            blocks=self.blocks,
            text=self.text,
            font_small=self.fonts.small,
            font_tiny=self.fonts.tiny,
        )

    def render_banner(self, *, screen: pygame.Surface, lines: Sequence[str], color: Optional[Color] = None) -> None:
        """
        Dim the whole window and center `lines` on top (game over / quit prompt).
        """
        w, h = screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(self.palette.overlay_rgba)
        screen.blit(overlay, (0, 0))

        line_h = self.fonts.main.get_linesize()
        y = (h - line_h * len(lines)) // 2
        for i, text in enumerate(lines):
            font = self.fonts.main if i == 0 else self.fonts.small
            tw = font.size(text)[0]
            self.text.draw(
                screen=screen,
                font=font,
                text=text,
                pos=((w - tw) // 2, y),
                color=(color or self.palette.warn) if i == 0 else self.palette.text,
            )
            y += line_h
