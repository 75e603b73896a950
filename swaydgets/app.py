"""Application entry point -- loads config, builds the widgets, runs the GTK loop."""

from __future__ import annotations

import faulthandler
import signal

# Print Python traceback on SIGSEGV/SIGABRT/SIGFPE to stderr.
# Also dumps on SIGUSR1 for on-demand debugging (kill -USR1 <pid>).
faulthandler.enable()
faulthandler.register(signal.SIGUSR1)

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import GLib, Gtk  # noqa: E402

from swaydgets.core.config import Config
from swaydgets.dock import Dock
from swaydgets.log import get_logger
from swaydgets.ui.calendar import CALENDAR_CSS, CalendarWindow
from swaydgets.ui.dock_window import DOCK_CSS, apply_css

log = get_logger(name="app")


def main() -> None:
    """Entry point for the widgets application."""
    config = Config.load()
    log.info("Configuration loaded: %s", config)

    apply_css(DOCK_CSS + CALENDAR_CSS)

    calendar = None
    if config.calendar.enabled:
        calendar = CalendarWindow(config.calendar)
        calendar.show_all()

    dock = None
    if config.dock.enabled:
        dock = Dock(config.dock)
        dock.start()

    if calendar is None and dock is None:
        log.warning("No widgets enabled in configuration, nothing to show")
        return

    # Graceful shutdown on SIGINT/SIGTERM
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGINT, _quit)
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGTERM, _quit)

    Gtk.main()


def _quit() -> bool:
    Gtk.main_quit()
    return False
