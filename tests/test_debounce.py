from __future__ import annotations

import threading
import time

import pytest

from scrunch.debounce import Debouncer


class Recorder:
    def __init__(self) -> None:
        self.calls = []
        self.event = threading.Event()

    def __call__(self, *args, **kwargs) -> None:
        self.calls.append((args, kwargs))
        self.event.set()


def test_only_last_trigger_runs():
    recorder = Recorder()
    debouncer = Debouncer(recorder, delay=0.05)
    for value in range(5):
        debouncer.trigger(value, source="slider")
    assert recorder.event.wait(2)
    time.sleep(0.1)
    assert recorder.calls == [((4,), {"source": "slider"})]
    assert not debouncer.pending


def test_cancel_drops_pending_call():
    recorder = Recorder()
    debouncer = Debouncer(recorder, delay=0.05)
    debouncer.trigger(1)
    assert debouncer.pending
    debouncer.cancel()
    time.sleep(0.15)
    assert recorder.calls == []
    assert not debouncer.pending


def test_flush_runs_pending_call_immediately():
    recorder = Recorder()
    debouncer = Debouncer(recorder, delay=10)
    debouncer.trigger(3)
    assert debouncer.flush()
    assert recorder.calls == [((3,), {})]
    assert not debouncer.flush()


def test_instances_do_not_share_state():
    first, second = Recorder(), Recorder()
    a = Debouncer(first, delay=0.05)
    b = Debouncer(second, delay=0.05)
    a.trigger("a")
    b.trigger("b")
    assert first.event.wait(2)
    assert second.event.wait(2)
    assert first.calls == [(("a",), {})]
    assert second.calls == [(("b",), {})]


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Debouncer(lambda: None, delay=-1)
