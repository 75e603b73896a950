"""Dock engine -- wires registry, listener, surfaces, visibility and renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import GLib  # noqa: E402

from swaydgets.log import get_logger
from swaydgets.platform.commands import CommandExecutor
from swaydgets.platform.listener import WindowListener
from swaydgets.platform.registry import WindowRegistry
from swaydgets.ui.dock_window import DetectorWindow, DockWindow
from swaydgets.ui.renderer import DockRenderer
from swaydgets.ui.visibility import VisibilityController

log = get_logger(name="dock")

if TYPE_CHECKING:
    from swaydgets.core.config import DockConfig


class Dock:
    """One dock instance for the configured edge.

    The listener thread only writes the registry; everything else runs
    on the GTK main loop.
    """

    def __init__(self, config: DockConfig) -> None:
        self._config = config
        edge = config.edge_enum
        self.registry = WindowRegistry()
        self.executor = CommandExecutor()
        self.window = DockWindow(edge)
        self.detector = DetectorWindow(edge)
        self.visibility = VisibilityController(self.window, config.hide_timeout)
        self.renderer = DockRenderer(self.registry, self.window, self.executor)
        self.listener = WindowListener(self.registry, on_fatal=self._on_listener_fatal)
        self.enabled = True

        self.window.connect_pointer(self.visibility)
        self.detector.connect_pointer(self.visibility)

    def start(self) -> None:
        """Show the detector strip and start tracking windows."""
        log.info(
            "Starting dock on %s edge (hide timeout %d ms)",
            self._config.edge,
            self._config.hide_timeout,
        )
        self.window.hide()
        self.detector.show_all()
        self.listener.start()
        self.renderer.start()

    def disable(self) -> bool:
        """Stop rendering and hide both surfaces; other widgets keep running."""
        if self.enabled:
            self.enabled = False
            self.renderer.stop()
            self.visibility.reset()
            self.window.hide()
            self.detector.hide()
            log.error("Dock disabled: no connection to sway")
        return False

    def _on_listener_fatal(self) -> None:
        # Called on the listener thread
        GLib.idle_add(self.disable)
