from __future__ import annotations

import pygame
import pytest

from tetris_classic.game.rendering.pygame.surf import BlockCache, TextCache, darken, lighten


def _rgb(surf: pygame.Surface, x: int, y: int):
    return tuple(surf.get_at((x, y)))[:3]


def test_lighten_and_darken_stay_in_range() -> None:
    assert lighten((0, 128, 255), 0.5) == (128, 192, 255)
    assert darken((0, 128, 255), 0.5) == (0, 64, 128)
    assert lighten((10, 20, 30), 2.0) == (255, 255, 255)
    assert darken((10, 20, 30), -1.0) == (10, 20, 30)


def test_block_has_light_and_dark_edges() -> None:
    blocks = BlockCache(bevel=3)
    rgb = (0, 0, 255)
    surf = blocks.block(size=30, rgb=rgb)

    assert surf.get_size() == (30, 30)
    assert _rgb(surf, 15, 15) == rgb
    assert _rgb(surf, 1, 15) == lighten(rgb, 0.45)
    assert _rgb(surf, 15, 1) == lighten(rgb, 0.45)
    assert _rgb(surf, 28, 15) == darken(rgb, 0.45)
    assert _rgb(surf, 15, 28) == darken(rgb, 0.45)


@pytest.mark.parametrize("size, edge", [(6, 1), (15, 2), (30, 3), (96, 3)])
def test_edge_width_scales_with_cell_size(size, edge) -> None:
    assert BlockCache(bevel=3).edge_width(size) == edge


def test_surfaces_are_cached_per_size_and_color() -> None:
    blocks = BlockCache()
    a = blocks.block(size=30, rgb=(255, 0, 0))

    assert blocks.block(size=30, rgb=(255, 0, 0)) is a
    assert blocks.block(size=15, rgb=(255, 0, 0)) is not a
    assert _rgb(blocks.plain(size=30, rgb=(0, 0, 0)), 0, 0) == (0, 0, 0)
    assert len(blocks) == 3


class _CountingFont:
    def __init__(self) -> None:
        self.calls = 0

    def render(self, text, antialias, color):
        self.calls += 1
        return pygame.Surface((8 * len(text), 10))


def test_text_is_rendered_once_until_the_cache_fills() -> None:
    font = _CountingFont()
    texts = TextCache(limit=2)

    first = texts.render(font=font, text="Lines: 0", color=(255, 255, 255))
    assert texts.render(font=font, text="Lines: 0", color=(255, 255, 255)) is first
    assert font.calls == 1

    texts.render(font=font, text="Lines: 1", color=(255, 255, 255))
    texts.render(font=font, text="Lines: 2", color=(255, 255, 255))
    assert len(texts) == 1
    assert font.calls == 3
