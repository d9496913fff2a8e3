# src/tetris_classic/game/rendering/pygame/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.types import PieceView, State
from tetris_classic.game.rendering.pygame.palette import Color, Palette
from tetris_classic.game.rendering.pygame.surf import BlockCache


@dataclass(frozen=True)
class GridRenderCfg:
    border_width: int = 2
    grid_line_width: int = 1


CFG = GridRenderCfg()


def draw_grid(
        *,
        screen: pygame.Surface,
        state: State,
        origin: Tuple[int, int],
        margin: int,
        cell: int,
        show_grid_lines: bool,
        palette: Palette,
        pieces: PieceSet,
        blocks: BlockCache,
) -> None:
    """
    Draw the settled grid, then overlay the falling piece from `state.active`.

    `state.grid` holds board ids (0 = empty, 1..K = kind_idx + 1).
    """
    arr = np.asarray(state.grid)
    ox, oy = origin
    h, w = int(arr.shape[0]), int(arr.shape[1])

    for y in range(h):
        for x in range(w):
            bid = int(arr[y, x])
            if bid <= 0:
                surf = blocks.plain(size=cell, rgb=palette.empty)
            else:
                surf = blocks.block(size=cell, rgb=_board_id_to_color(board_id=bid, palette=palette, pieces=pieces))
            screen.blit(surf, (ox + x * cell, oy + y * cell))

    if state.active is not None:
        _draw_piece(
            screen=screen,
            piece=state.active,
            origin=origin,
            cell=cell,
            board_h=h,
            board_w=w,
            blocks=blocks,
        )

    if show_grid_lines:
        for y in range(h + 1):
            pygame.draw.line(screen, palette.grid, (ox, oy + y * cell), (ox + w * cell, oy + y * cell), CFG.grid_line_width)
        for x in range(w + 1):
            pygame.draw.line(screen, palette.grid, (ox + x * cell, oy), (ox + x * cell, oy + h * cell), CFG.grid_line_width)

    pygame.draw.rect(
        screen,
        palette.border,
        pygame.Rect(ox - margin, oy - margin, w * cell + 2 * margin, h * cell + 2 * margin),
        width=int(CFG.border_width),
    )


def _draw_piece(
        *,
        screen: pygame.Surface,
        piece: PieceView,
        origin: Tuple[int, int],
        cell: int,
        board_h: int,
        board_w: int,
        blocks: BlockCache,
) -> None:
    # cells outside the board (above the top edge, or pushed out by an
    # unchecked rotation) are not drawn
    ox, oy = origin
    mh, mw = piece.mask.shape
    for yy in range(int(mh)):
        for xx in range(int(mw)):
            if int(piece.mask[yy, xx]) == 0:
                continue
            gx = int(piece.x) + xx
            gy = int(piece.y) + yy
            if not (0 <= gx < board_w and 0 <= gy < board_h):
                continue
            screen.blit(blocks.block(size=cell, rgb=piece.rgb), (ox + gx * cell, oy + gy * cell))


def draw_mask(
        *,
        screen: pygame.Surface,
        mask: np.ndarray,
        color: Color,
        dst: Tuple[int, int],
        cell: int,
        outline: Optional[Color],
        blocks: BlockCache,
) -> None:
    """Draw a bare piece mask with its top-left at `dst` (used by the NEXT preview)."""
    dx, dy = dst
    mh, mw = mask.shape
    for yy in range(int(mh)):
        for xx in range(int(mw)):
            rect = pygame.Rect(dx + xx * cell, dy + yy * cell, cell, cell)
            if int(mask[yy, xx]) != 0:
                screen.blit(blocks.block(size=cell, rgb=color), rect.topleft)
            if outline is not None:
                pygame.draw.rect(screen, outline, rect, width=1)


def _board_id_to_color(*, board_id: int, palette: Palette, pieces: PieceSet) -> Color:
    if int(board_id) <= 0:
        return palette.empty
    try:
        c = pieces.color_for_board_id(int(board_id))
    except ValueError:
        return palette.fallback_piece
    return c if c is not None else palette.fallback_piece
