from __future__ import annotations

from typing import Iterable, List

import pytest

from tetris_classic.game.core.game import GameEngine
from tetris_classic.game.core.piece import Piece
from tetris_classic.game.core.piece_rules import PieceFactory
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.scores.highscore import HighScoreStore


class ScriptedFactory(PieceFactory):
    """Deals kinds from a fixed list, then repeats the fallback kind."""

    def __init__(self, pieces: PieceSet, kinds: Iterable[str], *, fallback: str = "O") -> None:
        super().__init__(pieces=pieces)
        self.queue: List[str] = list(kinds)
        self.fallback = fallback

    def generate(self) -> Piece:
        kind = self.queue.pop(0) if self.queue else self.fallback
        return self.make(kind)


@pytest.fixture(scope="session")
def pieces() -> PieceSet:
    return PieceSet.classic7()


def make_engine(
        pieces: PieceSet,
        kinds: Iterable[str] = (),
        *,
        store: HighScoreStore | None = None,
        rotation: str = "unchecked",
        player_name: str = "Alice",
        fallback: str = "O",
) -> GameEngine:
    engine = GameEngine(
        factory=ScriptedFactory(pieces, kinds, fallback=fallback),
        rotation=rotation,
        player_name=player_name,
        score_store=store,
    )
    engine.start()
    return engine


def fill_row(engine: GameEngine, row: int, *, except_cols: Iterable[int] = (), board_id: int = 7) -> None:
    skip = set(except_cols)
    for c in range(engine.cols):
        if c not in skip:
            engine.grid.cells[row, c] = board_id


def tick_until_locked(engine: GameEngine, limit: int = 100):
    for _ in range(limit):
        ev = engine.tick()
        if ev.locked:
            return ev
    raise AssertionError("piece never locked")
