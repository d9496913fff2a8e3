# src/tetris_classic/runtime/session.py
from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Union

from tetris_classic.game.core.game import GameEngine, normalize_command
from tetris_classic.game.core.types import Command, State, StepEvent

LOG = logging.getLogger("tetris_classic.session")


@dataclass
class TickTimer:
    """
    Fixed-interval timer driven by the caller's clock.

    Missed intervals coalesce into a single due tick; input never resets it.
    """

    interval_ms: int
    _last_ms: Optional[int] = None
    _running: bool = False

    def start(self, now_ms: int) -> None:
        self._last_ms = int(now_ms)
        self._running = True

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def due(self, now_ms: int) -> bool:
        if not self._running or self._last_ms is None:
            return False
        if int(now_ms) - self._last_ms < int(self.interval_ms):
            return False
        self._last_ms = int(now_ms)
        return True


@dataclass
class GameSession:
    """
    Serializes every engine mutation behind one lock and one command queue.

    submit() may be called from any thread. pump() is the single consumer:
    it drains queued commands in FIFO order, then fires at most one tick if
    the timer is due. A QUIT stops the timer before that tick can fire.
    """

    engine: GameEngine
    tick_ms: int
    _commands: "queue.Queue[Command]" = field(default_factory=queue.Queue)
    _lock: threading.Lock = field(default_factory=threading.Lock)
    _timer: TickTimer = field(init=False)

    def __post_init__(self) -> None:
        self._timer = TickTimer(interval_ms=int(self.tick_ms))

    def start(self, now_ms: int) -> State:
        with self._lock:
            st = self.engine.start()
            if st.running:
                self._timer.start(now_ms)
            return st

    @property
    def ticking(self) -> bool:
        return self._timer.running

    def submit(self, cmd: Union[Command, str]) -> None:
        self._commands.put(normalize_command(cmd))

    def pump(self, now_ms: int) -> List[StepEvent]:
        events: List[StepEvent] = []
        with self._lock:
            while True:
                try:
                    cmd = self._commands.get_nowait()
                except queue.Empty:
                    break
                ev = self.engine.command(cmd)
                if (cmd is Command.QUIT or ev.terminated) and self._timer.running:
                    self._timer.stop()
                    LOG.debug("tick timer stopped after %s", cmd.value)
                events.append(ev)

            if self._timer.due(now_ms):
                ev = self.engine.tick()
                if ev.terminated:
                    self._timer.stop()
                events.append(ev)
        return events

    def resume(self, now_ms: int) -> bool:
        with self._lock:
            if not self.engine.resume():
                return False
            self._timer.start(now_ms)
            return True

    def snapshot(self) -> State:
        with self._lock:
            return self.engine.state()


__all__ = ["GameSession", "TickTimer"]
