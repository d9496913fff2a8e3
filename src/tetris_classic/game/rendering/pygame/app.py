# src/tetris_classic/game/rendering/pygame/app.py
from __future__ import annotations

import logging
from enum import Enum

import pygame

from tetris_classic.game.core.types import Command, State
from tetris_classic.game.rendering.pygame.renderer import TetrisRenderer
from tetris_classic.game.rendering.pygame.window import compute_layout, create_window
from tetris_classic.runtime.session import GameSession

LOG = logging.getLogger("tetris_classic.app")

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_ESCAPE: Command.QUIT,
}

_CONFIRM_KEYS = {pygame.K_y, pygame.K_RETURN}
_CANCEL_KEYS = {pygame.K_n, pygame.K_ESCAPE}


class _Mode(Enum):
    PLAYING = "playing"
    CONFIRM_QUIT = "confirm_quit"
    GAME_OVER = "game_over"


def run_play(
        *,
        session: GameSession,
        cell: int,
        fps: int,
        show_grid: bool,
        title: str,
) -> State:
    """
    Drive a GameSession from the pygame event loop until the player leaves.

    Key events become queued commands; the session pumps them together with
    the gravity tick once per frame. Returns the final snapshot.
    """
    engine = session.engine
    layout = compute_layout(board_h=engine.rows, board_w=engine.cols, cell=cell, title=title)

    pygame.init()
    try:
        screen = create_window(layout.window)
        clock = pygame.time.Clock()
        renderer = TetrisRenderer(cell=cell, show_grid_lines=show_grid, pieces=engine.pieces)

        state = session.start(pygame.time.get_ticks())
        mode = _Mode.GAME_OVER if state.game_over else _Mode.PLAYING

        running = True
        while running:
            clock.tick(fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    if mode is _Mode.PLAYING:
                        session.submit(Command.QUIT)
                        session.pump(pygame.time.get_ticks())
                    running = False
                    break
                if event.type != pygame.KEYDOWN:
                    continue

                if mode is _Mode.PLAYING:
                    cmd = KEYMAP.get(event.key)
                    if cmd is not None:
                        session.submit(cmd)
                elif mode is _Mode.CONFIRM_QUIT:
                    if event.key in _CONFIRM_KEYS:
                        running = False
                        break
                    if event.key in _CANCEL_KEYS:
                        session.resume(pygame.time.get_ticks())
                        mode = _Mode.PLAYING
                else:
                    running = False
                    break

            if mode is _Mode.PLAYING and running:
                events = session.pump(pygame.time.get_ticks())
                if any(ev.terminated for ev in events):
                    mode = _Mode.GAME_OVER if session.snapshot().game_over else _Mode.CONFIRM_QUIT

            state = session.snapshot()
            renderer.render(screen=screen, state=state, layout=layout)
            if mode is _Mode.CONFIRM_QUIT:
                renderer.render_banner(screen=screen, lines=["Quit Game", "Do you want to quit? (Y/N)"])
            elif mode is _Mode.GAME_OVER:
                renderer.render_banner(
                    screen=screen,
                    lines=["Game Over!", f"{state.player_name}'s Score: {state.score}", "press any key"],
                )
            pygame.display.flip()
    finally:
        pygame.quit()

    LOG.info("%s finished with score %d", state.player_name, state.score)
    return state
