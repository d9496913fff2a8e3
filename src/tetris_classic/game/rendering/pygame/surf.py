# src/tetris_classic/game/rendering/pygame/surf.py
from __future__ import annotations

from typing import Dict, Tuple

import pygame

Color = Tuple[int, int, int]


def lighten(rgb: Color, amount: float) -> Color:
    """Move each channel `amount` (0..1) of the way towards white."""
    a = min(max(float(amount), 0.0), 1.0)
    r, g, b = rgb
    return (round(r + (255 - r) * a), round(g + (255 - g) * a), round(b + (255 - b) * a))


def darken(rgb: Color, amount: float) -> Color:
    """Move each channel `amount` (0..1) of the way towards black."""
    a = min(max(float(amount), 0.0), 1.0)
    r, g, b = rgb
    return (round(r * (1.0 - a)), round(g * (1.0 - a)), round(b * (1.0 - a)))


class BlockCache:
    """
    Pre-rendered cell surfaces keyed by (size, rgb).

    block(): a tetromino square with a light top/left edge and a dark
    bottom/right edge. plain(): a flat fill, used for empty board cells.
    """

    def __init__(self, *, bevel: int = 3) -> None:
        self.bevel = int(bevel)
        self._blocks: Dict[Tuple[int, Color], pygame.Surface] = {}
        self._plain: Dict[Tuple[int, Color], pygame.Surface] = {}

    def __len__(self) -> int:
        return len(self._blocks) + len(self._plain)

    def edge_width(self, size: int) -> int:
        # a 15px preview cell gets a 2px edge, a 30px board cell the full bevel
        return max(1, min(self.bevel, int(size) // 6))

    def block(self, *, size: int, rgb: Color) -> pygame.Surface:
        key = (int(size), tuple(rgb))
        surf = self._blocks.get(key)
        if surf is None:
            surf = self._render_block(int(size), key[1])
            self._blocks[key] = surf
        return surf

    def plain(self, *, size: int, rgb: Color) -> pygame.Surface:
        key = (int(size), tuple(rgb))
        surf = self._plain.get(key)
        if surf is None:
            surf = pygame.Surface((key[0], key[0]))
            surf.fill(key[1])
            self._plain[key] = surf
        return surf

    def _render_block(self, size: int, rgb: Color) -> pygame.Surface:
        surf = pygame.Surface((size, size))
        surf.fill(rgb)
        e = self.edge_width(size)
        hi = lighten(rgb, 0.45)
        lo = darken(rgb, 0.45)
        surf.fill(lo, pygame.Rect(0, size - e, size, e))
        surf.fill(lo, pygame.Rect(size - e, 0, e, size))
        surf.fill(hi, pygame.Rect(0, 0, size - e, e))
        surf.fill(hi, pygame.Rect(0, 0, e, size - e))
        return surf


class TextCache:
    """
    Rendered text surfaces keyed by (font, text, color).

    Sidebar strings only change when a piece locks, so most frames blit
    cached surfaces. The cache is dropped wholesale once it holds `limit`
    entries.
    """

    def __init__(self, *, limit: int = 256) -> None:
        self.limit = int(limit)
        self._surfs: Dict[Tuple[int, str, Color], pygame.Surface] = {}

    def __len__(self) -> int:
        return len(self._surfs)

    def render(self, *, font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
        key = (id(font), str(text), tuple(color))
        surf = self._surfs.get(key)
        if surf is None:
            if len(self._surfs) >= self.limit:
                self._surfs.clear()
            surf = font.render(str(text), True, color)
            self._surfs[key] = surf
        return surf

    def draw(
            self,
            *,
            screen: pygame.Surface,
            font: pygame.font.Font,
            text: str,
            pos: Tuple[int, int],
            color: Color,
    ) -> None:
        screen.blit(self.render(font=font, text=text, color=color), pos)


__all__ = ["BlockCache", "Color", "TextCache", "darken", "lighten"]
