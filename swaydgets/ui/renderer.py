"""Dock renderer -- polls the window registry and rebuilds the launcher strip."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import GLib  # noqa: E402

from swaydgets.log import get_logger
from swaydgets.platform.commands import FocusWindow
from swaydgets.platform.icons import resolve_icon

log = get_logger(name="renderer")

if TYPE_CHECKING:
    from swaydgets.platform.commands import CommandExecutor
    from swaydgets.platform.registry import WindowRegistry
    from swaydgets.platform.windows import WindowRecord
    from swaydgets.ui.dock_window import DockSurface

REFRESH_INTERVAL_MS = 1000


class DockEntry(NamedTuple):
    """One launcher button: what it shows and what clicking it does."""

    icon_name: str
    label: str
    command: FocusWindow


def build_entries(records: Iterable[WindowRecord]) -> list[DockEntry]:
    """Entries for every titled window, in registry order."""
    return [
        DockEntry(
            icon_name=resolve_icon(record.app_id),
            label=record.title,
            command=FocusWindow(record.id),
        )
        for record in records
        if record.title
    ]


class DockRenderer:
    """Rebuilds the dock strip from registry snapshots on a fixed period.

    Each new snapshot clears the strip and repopulates it; snapshots the
    strip already shows, and cycles where the registry is busy, leave the
    last rendering in place.
    """

    def __init__(
        self,
        registry: WindowRegistry,
        surface: DockSurface,
        executor: CommandExecutor,
    ) -> None:
        self._registry = registry
        self._surface = surface
        self._executor = executor
        self._rendered_generation = -1
        self._timer_id = 0

    @property
    def running(self) -> bool:
        return self._timer_id != 0

    def start(self) -> None:
        """Render once now, then every REFRESH_INTERVAL_MS."""
        if self._timer_id:
            return
        self.refresh()
        self._timer_id = GLib.timeout_add(REFRESH_INTERVAL_MS, self._on_tick)

    def stop(self) -> None:
        if self._timer_id:
            GLib.source_remove(self._timer_id)
            self._timer_id = 0

    def _on_tick(self) -> bool:
        self.refresh()
        return True

    def refresh(self) -> bool:
        """Redraw from the registry; True when the strip was rebuilt."""
        snapshot = self._registry.snapshot()
        if snapshot is None:
            return False
        if snapshot.generation == self._rendered_generation:
            return False

        entries = build_entries(snapshot.records)
        self._surface.clear_children()
        for entry in entries:
            self._surface.add_entry(
                entry.icon_name, entry.label, self._click_handler(entry.command)
            )
        self._rendered_generation = snapshot.generation
        log.debug(
            "Rendered generation %d: %d entries", snapshot.generation, len(entries)
        )
        return True

    def _click_handler(self, command: FocusWindow):
        def on_click() -> None:
            self._executor.execute(command)

        return on_click
