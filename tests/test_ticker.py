from threading import Event
import time

import pytest

from numclass_app.core.services.ticker import ThreadTicker


def test_ticker_calls_back_until_stopped():
    ticker = ThreadTicker(interval_seconds=0.01)
    calls = []
    reached = Event()

    def callback():
        calls.append(1)
        if len(calls) >= 3:
            reached.set()

    ticker.start(callback)
    assert ticker.is_running
    assert reached.wait(2)
    ticker.stop()
    assert not ticker.is_running
    settled = len(calls)
    time.sleep(0.05)
    assert len(calls) <= settled + 1


def test_restart_replaces_previous_callback():
    ticker = ThreadTicker(interval_seconds=0.01)
    first_calls = []
    second_reached = Event()
    ticker.start(lambda: first_calls.append(1))
    ticker.start(second_reached.set)
    assert second_reached.wait(2)
    settled = len(first_calls)
    time.sleep(0.05)
    ticker.stop()
    assert len(first_calls) <= settled + 1


def test_failing_callback_stops_ticking(caplog):
    ticker = ThreadTicker(interval_seconds=0.01)
    attempts = []

    def callback():
        attempts.append(1)
        raise RuntimeError("boom")

    ticker.start(callback)
    deadline = time.monotonic() + 2
    while ticker.is_running and time.monotonic() < deadline:
        time.sleep(0.01)
    assert not ticker.is_running
    time.sleep(0.05)
    assert len(attempts) == 1
    assert "Tick callback failed" in caplog.text


def test_stop_without_start_is_harmless():
    ticker = ThreadTicker(interval_seconds=0.01)
    ticker.stop()
    assert not ticker.is_running


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        ThreadTicker(interval_seconds=0)


def test_failure_of_replaced_callback_keeps_new_ticker_running():
    ticker = ThreadTicker(interval_seconds=0.01)
    release = Event()
    second_reached = Event()

    def failing():
        release.wait(2)
        raise RuntimeError("boom")

    ticker.start(failing)
    time.sleep(0.03)
    ticker.start(second_reached.set)
    release.set()
    assert second_reached.wait(2)
    time.sleep(0.03)
    assert ticker.is_running
    ticker.stop()
