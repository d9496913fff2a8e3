# src/tetris_classic/game/core/rules.py
from __future__ import annotations

from dataclasses import dataclass

from tetris_classic.game.core.constants import LINE_SCORE


@dataclass(frozen=True)
class ScoreConfig:
    per_line: int = LINE_SCORE


def score_for_clears(cleared: int, cfg: ScoreConfig) -> int:
    # flat: no combo/tetris bonus
    if cleared <= 0:
        return 0
    return int(cleared) * int(cfg.per_line)
