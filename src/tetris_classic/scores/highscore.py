# src/tetris_classic/scores/highscore.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

LOG = logging.getLogger("tetris_classic.scores")

DEFAULT_SCORE_FILE = "score.txt"


class ScoreFileError(Exception):
    """The score file could not be read, parsed or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = str(reason)


@dataclass(frozen=True)
class HighScore:
    name: str
    score: int

    @classmethod
    def default(cls) -> "HighScore":
        return cls(name="None", score=0)

    def to_line(self) -> str:
        # no escaping: a comma inside the name breaks the next load
        return f"{self.name},{int(self.score)}"

    @classmethod
    def parse(cls, line: str) -> "HighScore":
        """
        Parse one 'name,score' line. Fields past the second are ignored.
        Raises ValueError when the line has no usable name/score pair.
        """
        parts = line.strip().split(",")
        if len(parts) < 2:
            raise ValueError(f"expected 'name,score', got {line!r}")
        name, raw_score = parts[0], parts[1].strip()
        try:
            score = int(raw_score)
        except ValueError as e:
            raise ValueError(f"score must be an integer, got {raw_score!r}") from e
        return cls(name=name, score=score)


def read_high_score(path: Path) -> HighScore:
    """
    Strict read. Raises ScoreFileError if the file is missing, unreadable,
    empty or malformed.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ScoreFileError(p, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ScoreFileError(p, f"unreadable ({e})") from e

    lines = text.splitlines()
    if not lines:
        raise ScoreFileError(p, "empty file")
    try:
        return HighScore.parse(lines[0])
    except ValueError as e:
        raise ScoreFileError(p, f"malformed ({e})") from e


def load_high_score(path: Path) -> HighScore:
    """
    Defaulting read: any ScoreFileError degrades to HighScore.default().
    """
    try:
        return read_high_score(path)
    except ScoreFileError as e:
        if isinstance(e.__cause__, FileNotFoundError):
            LOG.debug("no high score file at %s, using default", e.path)
        else:
            LOG.warning("ignoring high score file: %s", e)
        return HighScore.default()


def write_high_score(path: Path, record: HighScore) -> None:
    """
    Overwrite the score file with a single line. Raises ScoreFileError.
    """
    p = Path(path)
    try:
        p.write_text(record.to_line(), encoding="utf-8")
    except OSError as e:
        raise ScoreFileError(p, f"unwritable ({e})") from e


@dataclass(frozen=True)
class HighScoreStore:
    """
    File-backed high score persistence used by the engine.

    load() never raises; save_if_higher() logs and swallows write failures so
    a broken score file never interrupts play.
    """

    path: Path

    def load(self) -> HighScore:
        return load_high_score(self.path)

    def save_if_higher(self, *, name: str, score: int, current: HighScore) -> bool:
        if int(score) <= int(current.score):
            return False
        record = HighScore(name=str(name), score=int(score))
        try:
            write_high_score(self.path, record)
        except ScoreFileError as e:
            LOG.warning("could not save high score: %s", e)
            return False
        LOG.info("new high score %s - %d saved to %s", record.name, record.score, self.path)
        return True


__all__ = [
    "DEFAULT_SCORE_FILE",
    "HighScore",
    "HighScoreStore",
    "ScoreFileError",
    "load_high_score",
    "read_high_score",
    "write_high_score",
]
