"""Sway event listener -- keeps the window registry in sync from a worker thread."""

from __future__ import annotations

import enum
import threading
import time
from typing import Any, Callable, Protocol

from i3ipc import Event

from swaydgets.log import get_logger
from swaydgets.platform.commands import connect, disconnect
from swaydgets.platform.windows import WindowRecord, extract_windows

log = get_logger(name="listener")

# Backoff after consecutive refresh failures: 0.5s, 1s, 2s ... capped at 30s.
# Events arriving meanwhile collapse into one refresh when it expires.
BACKOFF_BASE_S = 0.5
BACKOFF_MAX_S = 30.0


class ListenerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    # Initial connection failed; the dock cannot work
    FAILED = "failed"
    # Subscription failed or ended; registry keeps its last snapshot
    DEGRADED = "degraded"


class RefreshStrategy(Protocol):
    """How the listener turns a window event into a new window list."""

    def fetch(self, conn: Any | None = None) -> list[WindowRecord]: ...


class FullTreeRefresh:
    """Re-fetch and re-extract the whole tree over a fresh connection.

    Window event payloads do not carry enough of the tree to patch it
    locally, so every event costs one get_tree round trip.
    """

    def __init__(self, connect: Callable[[], Any] = connect) -> None:
        self._connect = connect

    def fetch(self, conn: Any | None = None) -> list[WindowRecord]:
        if conn is not None:
            return extract_windows(conn.get_tree())
        conn = self._connect()
        try:
            return extract_windows(conn.get_tree())
        finally:
            disconnect(conn)


def backoff_delay(failures: int) -> float:
    """Seconds to skip events for after `failures` consecutive refresh errors."""
    if failures <= 0:
        return 0.0
    return min(BACKOFF_BASE_S * 2 ** (failures - 1), BACKOFF_MAX_S)


class WindowListener:
    """Owns the sway IPC subscription and writes snapshots into the registry.

    Runs on its own daemon thread and never touches GTK state; the only
    way out to the UI is the registry and the on_fatal callback.
    """

    def __init__(
        self,
        registry: Any,
        on_fatal: Callable[[], None] | None = None,
        connect: Callable[[], Any] = connect,
        strategy: RefreshStrategy | None = None,
        clock: Callable[[], float] = time.monotonic,
        timer: Callable[[float, Callable[[], None]], Any] = threading.Timer,
    ) -> None:
        self._registry = registry
        self._on_fatal = on_fatal
        self._connect = connect
        self._strategy = strategy or FullTreeRefresh(connect)
        self._clock = clock
        self.state = ListenerState.IDLE
        self._thread: threading.Thread | None = None
        self._failures = 0
        self._retry_after = 0.0
        # Set when the registry is known stale: a refresh failed or was deferred
        self._pending = False
        self._timer = timer
        self._retry_timer: Any = None
        self._lock = threading.RLock()

    def start(self) -> threading.Thread:
        """Spawn the worker thread (once)."""
        if self._thread is None:
            self._thread = threading.Thread(
                target=self.run, name="swaydgets-listener", daemon=True
            )
            self._thread.start()
        return self._thread

    def run(self) -> None:
        """Worker body: connect, publish the first snapshot, then block on events."""
        try:
            conn = self._connect()
        except Exception as exc:
            log.error("Cannot connect to sway, dock disabled: %s", exc)
            self.state = ListenerState.FAILED
            if self._on_fatal:
                self._on_fatal()
            return

        self.state = ListenerState.RUNNING
        try:
            self._registry.replace(self._strategy.fetch(conn))
        except Exception as exc:
            log.warning("Initial window tree fetch failed: %s", exc)

        try:
            conn.on(Event.WINDOW, self._on_window_event)
            conn.main()
        except Exception as exc:
            log.error("Window event subscription failed: %s", exc)
            self.state = ListenerState.DEGRADED
            return

        log.warning("Window event subscription ended, dock will no longer update")
        self.state = ListenerState.DEGRADED

    def _on_window_event(self, _conn: Any, event: Any) -> None:
        """Any window event (new, close, focus, move, title...) triggers a refresh."""
        self._refresh(getattr(event, "change", "?"))

    def _on_retry(self) -> None:
        """Backoff timer expired: catch up on what was deferred meanwhile."""
        with self._lock:
            if self._pending:
                self._refresh("retry", force=True)

    def _refresh(self, change: str, force: bool = False) -> None:
        with self._lock:
            now = self._clock()
            if not force and now < self._retry_after:
                log.debug("Deferring window::%s refresh until backoff ends", change)
                self._pending = True
                return
            try:
                records = self._strategy.fetch()
            except Exception as exc:
                self._failures += 1
                delay = backoff_delay(self._failures)
                self._retry_after = now + delay
                self._pending = True
                self._schedule_retry(delay)
                log.warning(
                    "Refresh after window::%s failed (%d in a row, retry in %.1fs): %s",
                    change,
                    self._failures,
                    delay,
                    exc,
                )
                return
            self._failures = 0
            self._retry_after = 0.0
            self._pending = False
            self._registry.replace(records)

    def _schedule_retry(self, delay: float) -> None:
        if self._retry_timer is not None:
            self._retry_timer.cancel()
        timer = self._timer(delay, self._on_retry)
        timer.daemon = True
        timer.start()
        self._retry_timer = timer
