# src/tetris_classic/game/factory.py
from __future__ import annotations

from typing import Optional

from tetris_classic.config.play import PlayConfig, resolve_player_name
from tetris_classic.game.core.game import GameEngine
from tetris_classic.game.core.piece_rules import PieceFactory
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.scores.highscore import HighScoreStore


def make_engine_from_cfg(
        cfg: PlayConfig,
        *,
        player_name: Optional[str] = None,
        pieces: Optional[PieceSet] = None,
) -> GameEngine:
    """
    Construct an (unstarted) engine from a validated PlayConfig.

    player_name falls back to cfg.player_name, then to "Player".
    """
    g = cfg.game
    piece_set = pieces or PieceSet.classic7()
    factory = PieceFactory.seeded(piece_set, seed=g.seed, spawn_x=g.spawn_x, spawn_y=g.spawn_y)
    store = HighScoreStore(path=cfg.scores.path) if cfg.scores.enabled else None

    return GameEngine(
        rows=g.rows,
        cols=g.cols,
        factory=factory,
        spawn_x=g.spawn_x,
        spawn_y=g.spawn_y,
        line_score=g.line_score,
        rotation=g.rotation,
        player_name=resolve_player_name(player_name if player_name is not None else cfg.player_name),
        score_store=store,
    )


__all__ = ["make_engine_from_cfg"]
