# src/tetris_classic/game/rendering/pygame/sidebar.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from tetris_classic.game.core.types import State
from tetris_classic.game.rendering.pygame.grid import draw_mask
from tetris_classic.game.rendering.pygame.palette import Palette
from tetris_classic.game.rendering.pygame.surf import BlockCache, TextCache

SIDEBAR_W = 220


@dataclass(frozen=True)
class SidebarLayout:
    """
    Pixel geometry for the sidebar panels.
    """

    panel_gap_y: int = 12
    title_pad_x: int = 10
    title_pad_y: int = 8

    next_panel_h: int = 130
    next_box_y_offset: int = 34

    score_panel_h: int = 96
    score_row_y_offset: int = 34
    score_row_h: int = 22

    controls_panel_h: int = 140
    controls_row_y_offset: int = 34
    controls_row_h: int = 18
    controls_desc_x_offset: int = 70


_LAYOUT = SidebarLayout()

_CONTROLS = (
    ("Left", "move left"),
    ("Right", "move right"),
    ("Down", "soft drop"),
    ("Up", "rotate"),
    ("Esc", "quit"),
)


def draw_sidebar(
        *,
        screen: pygame.Surface,
        state: State,
        x: int,
        y: int,
        w: int,
        cell: int,
        palette: Palette,
        blocks: BlockCache,
        text: TextCache,
        font_small: pygame.font.Font,
        font_tiny: pygame.font.Font,
) -> None:
    """
    NEXT preview (half-size cells), player/high score, controls legend.
    """
    _panel(screen=screen, palette=palette, text=text, font=font_small, x=x, y=y, w=w, h=_LAYOUT.next_panel_h, title="Next:")
    if state.next is not None:
        preview_cell = max(4, int(cell) // 2)
        mh, mw = state.next.mask.shape
        box_x = int(x) + (int(w) - int(mw) * preview_cell) // 2
        box_y = int(y) + _LAYOUT.next_box_y_offset
        draw_mask(
            screen=screen,
            mask=state.next.mask,
            color=state.next.rgb,
            dst=(box_x, box_y),
            cell=preview_cell,
            outline=palette.grid,
            blocks=blocks,
        )

    score_y = int(y) + _LAYOUT.next_panel_h + _LAYOUT.panel_gap_y
    _panel(screen=screen, palette=palette, text=text, font=font_small, x=x, y=score_y, w=w, h=_LAYOUT.score_panel_h, title=None)
    yy = score_y + _LAYOUT.title_pad_y
    rows = (
        f"{state.player_name}'s Score: {state.score}",
        f"High Score: {state.high_score_name} - {state.high_score}",
        f"Lines: {state.lines}",
    )
    for row in rows:
        text.draw(screen=screen, font=font_tiny, text=row, pos=(int(x) + _LAYOUT.title_pad_x, yy), color=palette.text)
        yy += _LAYOUT.score_row_h

    ctrl_y = score_y + _LAYOUT.score_panel_h + _LAYOUT.panel_gap_y
    _panel(
        screen=screen,
        palette=palette,
        text=text,
        font=font_small,
        x=x,
        y=ctrl_y,
        w=w,
        h=_LAYOUT.controls_panel_h,
        title="Controls",
    )
    yy = ctrl_y + _LAYOUT.controls_row_y_offset
    key_x = int(x) + _LAYOUT.title_pad_x
    for key, desc in _CONTROLS:
        text.draw(screen=screen, font=font_tiny, text=key, pos=(key_x, yy), color=palette.accent)
        text.draw(screen=screen, font=font_tiny, text=desc, pos=(key_x + _LAYOUT.controls_desc_x_offset, yy), color=palette.muted)
        yy += _LAYOUT.controls_row_h


def _panel(
        *,
        screen: pygame.Surface,
        palette: Palette,
        text: TextCache,
        font: pygame.font.Font,
        x: int,
        y: int,
        w: int,
        h: int,
        title: Optional[str],
) -> None:
    rect = pygame.Rect(int(x), int(y), int(w), int(h))
    pygame.draw.rect(screen, palette.panel_bg, rect)
    pygame.draw.rect(screen, palette.border, rect, width=2)
    if title:
        pos = (int(x) + _LAYOUT.title_pad_x, int(y) + _LAYOUT.title_pad_y)
        text.draw(screen=screen, font=font, text=title, pos=pos, color=palette.text)
