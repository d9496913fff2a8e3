# src/tetris_classic/cli/play.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional

from tetris_classic.config.io import load_play_config
from tetris_classic.config.play import DEFAULT_PLAYER_NAME, resolve_player_name
from tetris_classic.game.factory import make_engine_from_cfg
from tetris_classic.runtime.session import GameSession
from tetris_classic.utils.logging import setup_logger
from tetris_classic.utils.paths import relpath


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play classic Tetris (pygame).")
    ap.add_argument("--config", type=Path, default=None, help="YAML config (see configs/play.yaml)")
    ap.add_argument("--name", type=str, default=None, help="player name (prompted when omitted)")
    ap.add_argument("--no-prompt", action="store_true", help=f"never prompt; use '{DEFAULT_PLAYER_NAME}' if unnamed")

    # --- game ---
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tick-ms", type=int, default=None, help="gravity interval in ms (fixed)")
    ap.add_argument(
        "--rotation",
        type=str,
        default=None,
        choices=["unchecked", "reject"],
        help="unchecked: rotate without legality checks | reject: undo rotations that collide",
    )
    ap.add_argument("--score-file", type=Path, default=None)

    # --- ui ---
    ap.add_argument("--cell", type=int, default=None)
    ap.add_argument("--fps", type=int, default=None)
    ap.add_argument("--show-grid", dest="show_grid", action="store_true", default=None)
    ap.add_argument("--no-grid", dest="show_grid", action="store_false")

    ap.add_argument("--log-level", type=str, default=None, choices=["debug", "info", "warning", "error"])
    return ap.parse_args(argv)


def prompt_player_name(input_fn: Callable[[str], str] = input) -> str:
    """
    Ask for the player's name; blank input or EOF gives "Player".
    """
    try:
        raw = input_fn("Enter your name: ")
    except EOFError:
        raw = ""
    return resolve_player_name(raw)


def run(args: argparse.Namespace, *, input_fn: Callable[[str], str] = input) -> int:
    cfg = load_play_config(
        args.config,
        overrides={
            "game.seed": args.seed,
            "game.tick_ms": args.tick_ms,
            "game.rotation": args.rotation,
            "scores.path": args.score_file,
            "ui.cell": args.cell,
            "ui.fps": args.fps,
            "ui.show_grid": args.show_grid,
            "log_level": args.log_level,
        },
    )
    logger = setup_logger(name="tetris_classic", use_rich=True, level=cfg.log_level)

    if args.name is not None:
        name = resolve_player_name(args.name)
    elif cfg.player_name is not None or args.no_prompt:
        name = resolve_player_name(cfg.player_name)
    else:
        name = prompt_player_name(input_fn)

    engine = make_engine_from_cfg(cfg, player_name=name)
    if cfg.scores.enabled:
        logger.info("high scores: %s", relpath(cfg.scores.path, base=Path.cwd()))

    # imported late: pygame prints a banner on import
    from tetris_classic.game.rendering.pygame.app import run_play

    session = GameSession(engine=engine, tick_ms=cfg.game.tick_ms)
    run_play(
        session=session,
        cell=cfg.ui.cell,
        fps=cfg.ui.fps,
        show_grid=cfg.ui.show_grid,
        title=cfg.ui.title,
    )
    return 0


def main() -> int:
    return run(parse_args())


if __name__ == "__main__":
    raise SystemExit(main())
