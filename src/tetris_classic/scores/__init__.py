# src/tetris_classic/scores/__init__.py
from __future__ import annotations

from tetris_classic.scores.highscore import (
    DEFAULT_SCORE_FILE,
    HighScore,
    HighScoreStore,
    ScoreFileError,
    load_high_score,
    read_high_score,
    write_high_score,
)

__all__ = [
    "DEFAULT_SCORE_FILE",
    "HighScore",
    "HighScoreStore",
    "ScoreFileError",
    "load_high_score",
    "read_high_score",
    "write_high_score",
]
