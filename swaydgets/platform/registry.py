"""Shared window registry -- the listener thread writes, the GTK loop reads."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import NamedTuple

from swaydgets.log import get_logger
from swaydgets.platform.windows import WindowRecord

log = get_logger(name="registry")


class Snapshot(NamedTuple):
    """Copy of the registry contents at one generation."""

    generation: int
    records: tuple[WindowRecord, ...]


class WindowRegistry:
    """Current window list, always replaced wholesale under a lock.

    Only replace() and snapshot() touch the list; the lock is held just
    long enough to swap or copy it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: tuple[WindowRecord, ...] = ()
        self._generation = 0

    def replace(self, records: Iterable[WindowRecord]) -> None:
        """Install a complete new window list (listener thread)."""
        new_records = tuple(records)
        with self._lock:
            self._records = new_records
            self._generation += 1
            generation = self._generation
        log.debug("Registry generation %d: %d windows", generation, len(new_records))

    def snapshot(self) -> Snapshot | None:
        """Copy of the current list, or None when the lock is busy.

        Never blocks: the GTK loop calls this, and a busy lock just means
        there is no update for this cycle.
        """
        if not self._lock.acquire(blocking=False):
            log.debug("Registry busy, skipping this cycle")
            return None
        try:
            return Snapshot(self._generation, self._records)
        finally:
            self._lock.release()
