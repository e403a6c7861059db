"""Cancellable periodic task driving the elapsed-time counter."""

from __future__ import annotations

import logging
from threading import Event, Lock, Thread
from typing import Callable, Protocol

from numclass_app.constants.game_constants import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class Ticker(Protocol):
    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    @property
    def is_running(self) -> bool: ...


class ThreadTicker:
    """Calls a callback once per interval from a daemon thread until stopped.

    ``stop`` never blocks on the ticking thread, so it is safe to call while
    holding a lock the callback also takes. A callback that was already in
    flight when ``stop`` ran may still complete; callers that care tag their
    callbacks (see ``ClassificationSession``).
    """

    def __init__(self, interval_seconds: float = TICK_INTERVAL_SECONDS) -> None:
        if interval_seconds <= 0:
            raise ValueError("Tick interval must be positive.")
        self._interval = interval_seconds
        self._lock = Lock()
        self._thread: Thread | None = None
        self._stop_event: Event | None = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._thread is not None

    def start(self, callback: Callable[[], None]) -> None:
        stop_event = Event()
        thread = Thread(
            target=self._run,
            args=(callback, stop_event),
            name="GameTicker",
            daemon=True,
        )
        with self._lock:
            if self._stop_event is not None:
                self._stop_event.set()
            self._stop_event = stop_event
            self._thread = thread
        thread.start()

    def stop(self) -> None:
        with self._lock:
            stop_event = self._stop_event
            self._thread = None
            self._stop_event = None
        if stop_event is not None:
            stop_event.set()

    def _run(self, callback: Callable[[], None], stop_event: Event) -> None:
        while not stop_event.wait(self._interval):
            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed; stopping ticker")
                self._halt(stop_event)

    def _halt(self, stop_event: Event) -> None:
        stop_event.set()
        with self._lock:
            # A restart may already have installed a newer thread.
            if self._stop_event is stop_event:
                self._thread = None
                self._stop_event = None
