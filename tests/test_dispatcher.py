import threading

import pytest

from framevision.core.dispatcher import Dispatcher, RealtimeTimer, SoloTask
from framevision.core.errors import InvalidArgumentError, UnknownRoutineError


def test_unknown_routine():
    d = Dispatcher()
    with pytest.raises(UnknownRoutineError):
        d.start_routine("AutoWood")
    with pytest.raises(KeyError):
        d.run_task(SoloTask("AutoFight"))


def test_invalid_tasks_and_timers():
    d = Dispatcher()
    with pytest.raises(InvalidArgumentError):
        d.run_task(None)
    with pytest.raises(InvalidArgumentError):
        d.run_task(SoloTask(""))
    with pytest.raises(InvalidArgumentError):
        d.add_timer(None)
    with pytest.raises(InvalidArgumentError):
        d.add_timer(RealtimeTimer(""))
    with pytest.raises(InvalidArgumentError):
        d.register_routine("x", "not callable")


def test_timer_registry():
    d = Dispatcher()
    d.add_timer(RealtimeTimer("AutoPick", {"interval": 50}))
    d.add_timer(RealtimeTimer("AutoPick", {"interval": 25}))
    assert [t.config for t in d.timers()] == [{"interval": 25}]
    d.remove_timer("AutoPick")
    assert d.timers() == []


def test_routine_runs_on_worker():
    d = Dispatcher()
    done = threading.Event()
    got = {}

    def routine(value):
        got["value"] = value
        done.set()

    d.register_routine("AutoDomain", routine)
    assert d.routine_names() == ["AutoDomain"]
    d.start()
    try:
        d.start_routine("AutoDomain", value=3)
        assert done.wait(2.0)
    finally:
        d.stop(timeout=2.0)
    assert got == {"value": 3}


def test_failing_routine_does_not_stop_worker():
    d = Dispatcher()
    done = threading.Event()
    statuses = []

    def boom():
        raise RuntimeError("template missing")

    d.register_routine("boom", boom)
    d.register_routine("ok", done.set)
    d.start(status_callback=statuses.append)
    try:
        d.start_routine("boom")
        d.start_routine("ok")
        assert done.wait(2.0)
    finally:
        d.stop(timeout=2.0)
    assert statuses == ["Routine error: template missing"]
