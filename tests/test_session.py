from __future__ import annotations

import threading

from conftest import ScriptedFactory, make_engine
from tetris_classic.game.core.game import GameEngine
from tetris_classic.game.core.types import Command, Phase
from tetris_classic.runtime.session import GameSession, TickTimer


def _session(pieces, kinds=("O",), tick_ms: int = 500) -> GameSession:
    s = GameSession(engine=make_engine(pieces, kinds), tick_ms=tick_ms)
    s.start(0)
    return s


def test_timer_fires_once_per_interval_and_coalesces() -> None:
    t = TickTimer(interval_ms=500)
    assert not t.due(1000)

    t.start(0)
    assert not t.due(499)
    assert t.due(500)
    assert not t.due(999)
    # two intervals missed: a single tick, re-armed from now
    assert t.due(2100)
    assert not t.due(2500)
    assert t.due(2600)

    t.stop()
    assert not t.due(10_000)


def test_pump_ticks_on_schedule(pieces) -> None:
    s = _session(pieces)

    assert s.pump(499) == []
    evs = s.pump(500)
    assert len(evs) == 1 and evs[0].moved
    assert s.snapshot().active.y == 1

    assert len(s.pump(1600)) == 1
    assert s.snapshot().active.y == 2


def test_commands_apply_before_the_tick(pieces) -> None:
    s = _session(pieces)
    s.submit("left")
    s.submit(Command.MOVE_LEFT)
    s.submit("down")

    evs = s.pump(500)

    assert len(evs) == 4
    assert all(ev.moved for ev in evs)
    st = s.snapshot()
    assert (st.active.x, st.active.y) == (2, 2)


def test_quit_stops_the_timer_in_the_same_pump(pieces) -> None:
    s = _session(pieces)
    s.submit("quit")

    evs = s.pump(500)

    assert len(evs) == 1 and evs[0].terminated
    assert not s.ticking
    assert s.snapshot().phase is Phase.STOPPED
    assert s.snapshot().active.y == 0
    assert s.pump(5000) == []


def test_resume_restarts_ticking(pieces) -> None:
    s = _session(pieces)
    s.submit("quit")
    s.pump(100)

    assert s.resume(1000)
    assert s.ticking
    assert s.pump(1400) == []
    assert s.pump(1500)[0].moved
    assert not s.resume(2000)


def test_game_over_stops_the_timer(pieces) -> None:
    s = _session(pieces, kinds=("O", "O"))
    s.engine.grid.cells[2, 4] = 1

    evs = s.pump(500)

    assert evs[0].game_over
    assert not s.ticking


def test_submit_from_many_threads(pieces) -> None:
    s = _session(pieces, tick_ms=10_000)

    def mash() -> None:
        for _ in range(5):
            s.submit("rotate")

    workers = [threading.Thread(target=mash) for _ in range(4)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    evs = s.pump(1)
    assert len(evs) == 20
    # O never changes pattern
    assert not any(ev.moved for ev in evs)


def test_snapshot_is_detached(pieces) -> None:
    s = _session(pieces)
    st = s.snapshot()
    st.grid[5, 5] = 3
    assert s.snapshot().grid[5, 5] == 0


def test_game_over_at_start_never_arms_the_timer(pieces) -> None:
    s = GameSession(engine=GameEngine(cols=4, factory=ScriptedFactory(pieces, ["O"])), tick_ms=500)

    st = s.start(0)

    assert st.game_over
    assert not s.ticking
    assert s.pump(10_000) == []
