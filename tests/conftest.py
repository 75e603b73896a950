"""Shared fixtures: a manual-clock stand-in for the GLib main loop."""

from __future__ import annotations

import pytest


class FakeGLib:
    """Just enough of GLib for timer-driven tests: a clock you advance by hand.

    Timestamps are microseconds like GLib.get_monotonic_time(); timeout
    callbacks fire in due order while advancing and are rescheduled when
    they return True.
    """

    PRIORITY_HIGH = -100

    def __init__(self) -> None:
        self.now_us = 0
        self._next_id = 1
        self.sources: dict[int, list] = {}
        self.idle_calls: list = []

    def get_monotonic_time(self) -> int:
        return self.now_us

    def timeout_add(self, interval_ms, callback, *args):
        source_id = self._next_id
        self._next_id += 1
        self.sources[source_id] = [
            self.now_us + interval_ms * 1000,
            interval_ms,
            callback,
            args,
        ]
        return source_id

    def source_remove(self, source_id):
        del self.sources[source_id]
        return True

    def idle_add(self, callback, *args):
        self.idle_calls.append((callback, args))
        return 0

    def run_idle(self) -> None:
        calls, self.idle_calls = self.idle_calls, []
        for callback, args in calls:
            callback(*args)

    def advance_to(self, t_ms: float) -> None:
        target = int(t_ms * 1000)
        while True:
            due = sorted(
                (entry[0], source_id)
                for source_id, entry in self.sources.items()
                if entry[0] <= target
            )
            if not due:
                break
            due_us, source_id = due[0]
            self.now_us = due_us
            _, interval_ms, callback, args = self.sources[source_id]
            keep = callback(*args)
            if source_id in self.sources:
                if keep:
                    self.sources[source_id][0] = due_us + interval_ms * 1000
                else:
                    del self.sources[source_id]
        self.now_us = target


@pytest.fixture
def fake_glib() -> FakeGLib:
    return FakeGLib()
