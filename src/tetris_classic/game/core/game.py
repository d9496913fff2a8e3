# src/tetris_classic/game/core/game.py
from __future__ import annotations

import logging
from typing import Optional, Union

from tetris_classic.game.core.board import Grid
from tetris_classic.game.core.constants import DEFAULT_COLS, DEFAULT_ROWS, LINE_SCORE, SPAWN_X, SPAWN_Y
from tetris_classic.game.core.piece import Piece
from tetris_classic.game.core.piece_rules import PieceFactory
from tetris_classic.game.core.pieceset import PieceSet
from tetris_classic.game.core.rules import ScoreConfig, score_for_clears
from tetris_classic.game.core.types import Command, Phase, PieceView, RotationPolicy, State, StepEvent
from tetris_classic.scores.highscore import HighScore, HighScoreStore

LOG = logging.getLogger("tetris_classic.engine")

_COMMAND_ALIASES = {
    "left": Command.MOVE_LEFT,
    "move_left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "move_right": Command.MOVE_RIGHT,
    "down": Command.SOFT_DROP,
    "soft_drop": Command.SOFT_DROP,
    "rotate": Command.ROTATE,
    "rot": Command.ROTATE,
    "up": Command.ROTATE,
    "quit": Command.QUIT,
    "escape": Command.QUIT,
}

_NOOP = StepEvent()


def normalize_command(cmd: Union[Command, str]) -> Command:
    if isinstance(cmd, Command):
        return cmd
    key = str(cmd).strip().lower()
    try:
        return _COMMAND_ALIASES[key]
    except KeyError as e:
        raise ValueError(f"unknown command {cmd!r}. known={sorted(_COMMAND_ALIASES)!r}") from e


class GameEngine:
    """
    Classic falling-block state machine.

    Contracts:

      - Not thread-safe. Callers serialize tick()/command() (see GameSession).
      - tick() is the only path that locks a piece. SOFT_DROP moves down or
        does nothing.
      - Score grows by line_score per cleared line (flat, additive).
      - After GAME_OVER no tick or command has any effect. After QUIT the
        engine is STOPPED until resume().
      - The high score is loaded once at start() and only used as the bar a
        finished game must beat to be saved. It is not updated in memory.
    """

    def __init__(
            self,
            *,
            rows: int = DEFAULT_ROWS,
            cols: int = DEFAULT_COLS,
            pieces: Optional[PieceSet] = None,
            factory: Optional[PieceFactory] = None,
            spawn_x: int = SPAWN_X,
            spawn_y: int = SPAWN_Y,
            line_score: int = LINE_SCORE,
            rotation: Union[RotationPolicy, str] = RotationPolicy.UNCHECKED,
            player_name: str = "Player",
            score_store: Optional[HighScoreStore] = None,
            seed: Optional[int] = None,
    ) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"board must be at least 1x1, got rows={self.rows} cols={self.cols}")

        self.spawn_x = int(spawn_x)
        self.spawn_y = int(spawn_y)
        if self.spawn_y < 0:
            raise ValueError(f"spawn_y must be >= 0, got {self.spawn_y}")

        if factory is None:
            factory = PieceFactory.seeded(
                pieces or PieceSet.classic7(),
                seed=seed,
                spawn_x=self.spawn_x,
                spawn_y=self.spawn_y,
            )
        self.factory = factory
        self.pieces = factory.pieces

        self.rotation = RotationPolicy(rotation) if isinstance(rotation, str) else rotation
        self.score_cfg = ScoreConfig(per_line=int(line_score))
        self.player_name = str(player_name)
        self.score_store = score_store

        self.grid = Grid.empty(h=self.rows, w=self.cols)
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.high_score = HighScore.default()
        self.phase = Phase.IDLE

    # ---- lifecycle -----------------------------------------------------------------

    def start(self) -> State:
        self.grid = Grid.empty(h=self.rows, w=self.cols)
        self.score = 0
        self.lines = 0
        self.high_score = self.score_store.load() if self.score_store is not None else HighScore.default()

        self._set_phase(Phase.SPAWNING)
        self.current = self._at_spawn(self.factory.generate())
        self.next = self.factory.generate()

        LOG.info(
            "game started for %s (%dx%d, high score %s - %d)",
            self.player_name,
            self.rows,
            self.cols,
            self.high_score.name,
            self.high_score.score,
        )
        self._fall_or_top_out()
        return self.state()

    @property
    def running(self) -> bool:
        return self.phase is Phase.FALLING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def resume(self) -> bool:
        """Continue after a cancelled quit. Returns False unless STOPPED."""
        if self.phase is not Phase.STOPPED:
            return False
        self._set_phase(Phase.FALLING)
        LOG.info("game resumed")
        return True

    # ---- inputs --------------------------------------------------------------------

    def tick(self) -> StepEvent:
        if not self.running:
            return self._idle_event()

        if self._try_move(dx=0, dy=+1):
            return StepEvent(moved=True)

        cleared = self._lock_and_advance()
        if self.game_over:
            return StepEvent(locked=True, lines_cleared=cleared, game_over=True, terminated=True)
        return StepEvent(locked=True, lines_cleared=cleared)

    def command(self, cmd: Union[Command, str]) -> StepEvent:
        c = normalize_command(cmd)
        if not self.running:
            return self._idle_event()

        if c is Command.MOVE_LEFT:
            return StepEvent(moved=self._try_move(dx=-1, dy=0))
        if c is Command.MOVE_RIGHT:
            return StepEvent(moved=self._try_move(dx=+1, dy=0))
        if c is Command.SOFT_DROP:
            return StepEvent(moved=self._try_move(dx=0, dy=+1))
        if c is Command.ROTATE:
            return StepEvent(moved=self._rotate())
        if c is Command.QUIT:
            return self.quit()
        raise ValueError(f"unhandled command {c!r}")

    def quit(self) -> StepEvent:
        if not self.running:
            return self._idle_event()
        self._set_phase(Phase.STOPPED)
        LOG.info("quit requested by %s at score %d", self.player_name, self.score)
        self._persist()
        return StepEvent(terminated=True)

    # ---- snapshot ------------------------------------------------------------------

    def state(self) -> State:
        return State(
            grid=self.grid.cells.copy(),
            active=_view(self.current),
            next=_view(self.next),
            score=int(self.score),
            lines=int(self.lines),
            phase=self.phase,
            player_name=self.player_name,
            high_score_name=self.high_score.name,
            high_score=int(self.high_score.score),
        )

    # ---- internals -----------------------------------------------------------------

    def _require_current(self) -> Piece:
        if self.current is None:
            raise RuntimeError("GameEngine.start() must be called first")
        return self.current

    def _idle_event(self) -> StepEvent:
        if self.phase is Phase.IDLE:
            raise RuntimeError("GameEngine.start() must be called first")
        return StepEvent(game_over=self.game_over, terminated=True) if self.game_over else _NOOP

    def _set_phase(self, phase: Phase) -> None:
        if phase is not self.phase:
            LOG.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _at_spawn(self, piece: Piece) -> Piece:
        piece.x = self.spawn_x
        piece.y = self.spawn_y
        return piece

    def _try_move(self, dx: int, dy: int) -> bool:
        p = self._require_current()
        if not self.grid.can_place(p, p.x + dx, p.y + dy):
            return False
        p.translate(dx, dy)
        return True

    def _rotate(self) -> bool:
        """
        UNCHECKED ignores settled cells but never leaves the board's walls or
        floor. REJECT also refuses overlaps.
        """
        p = self._require_current()
        candidate = p.rotated()
        if candidate.same_pattern(p):
            return False

        if self.rotation is RotationPolicy.UNCHECKED:
            ok = self.grid.in_bounds(candidate, candidate.x, candidate.y)
        else:
            ok = self.grid.can_place(candidate, candidate.x, candidate.y)
        if not ok:
            return False
        p.mask = candidate.mask
        return True

    def _lock_and_advance(self) -> int:
        p = self._require_current()

        self._set_phase(Phase.LOCKING)
        self.grid.lock(p)

        self._set_phase(Phase.LINE_CLEARING)
        cleared = int(self.grid.clear_lines())
        self.lines += cleared
        self.score += score_for_clears(cleared, self.score_cfg)
        if cleared:
            LOG.debug("cleared %d line(s), score %d", cleared, self.score)

        self._set_phase(Phase.SPAWNING)
        if self.next is None:
            raise RuntimeError("GameEngine.start() must be called first")
        self.current = self._at_spawn(self.next)
        self.next = self.factory.generate()
        self._fall_or_top_out()
        return cleared

    def _fall_or_top_out(self) -> None:
        p = self._require_current()
        if not self.grid.can_place(p, p.x, p.y):
            self._set_phase(Phase.GAME_OVER)
            LOG.info("Game Over! %s's Score: %d", self.player_name, self.score)
            self._persist()
            return
        self._set_phase(Phase.FALLING)

    def _persist(self) -> None:
        if self.score_store is None:
            return
        self.score_store.save_if_higher(name=self.player_name, score=self.score, current=self.high_score)


def _view(p: Optional[Piece]) -> Optional[PieceView]:
    if p is None:
        return None
    return PieceView(
        kind=p.kind,
        mask=p.mask,
        color_name=p.color_name,
        rgb=p.rgb,
        board_id=p.board_id,
        x=int(p.x),
        y=int(p.y),
    )


__all__ = ["GameEngine", "normalize_command"]
