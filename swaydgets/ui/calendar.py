"""Calendar panel -- a month view pinned to the desktop background layer."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import gi

gi.require_version("Gtk", "3.0")
gi.require_version("GtkLayerShell", "0.1")
from gi.repository import Gtk, GtkLayerShell  # noqa: E402

from swaydgets.log import get_logger

log = get_logger(name="calendar")

if TYPE_CHECKING:
    from swaydgets.core.config import CalendarConfig

CALENDAR_CSS = b"""
.swaydgets-calendar > box {
    background-color: rgba(40, 40, 40, 0.9);
    border-radius: 12px;
    padding: 10px;
}
.swaydgets-calendar calendar {
    color: white;
    background: rgba(60, 60, 60, 0.7);
    border-radius: 8px;
    padding: 5px;
}
.swaydgets-calendar calendar:selected {
    background-color: #3584e4;
    color: white;
    border-radius: 20px;
}
.swaydgets-calendar calendar.header {
    color: white;
    font-weight: bold;
}
.swaydgets-calendar button {
    background-color: rgba(70, 70, 70, 0.8);
    color: white;
    border-radius: 4px;
    border: none;
    padding: 5px;
}
.swaydgets-calendar button:hover {
    background-color: rgba(90, 90, 90, 0.8);
}
"""


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, 0-based month) pair by `delta` months, wrapping years.

    Gtk.Calendar counts months from 0.
    """
    total = year * 12 + month + delta
    return total // 12, total % 12


class CalendarWindow(Gtk.Window):
    """Month calendar with Previous / Today / Next navigation."""

    def __init__(self, config: CalendarConfig) -> None:
        super().__init__(type=Gtk.WindowType.TOPLEVEL)
        self.set_title("swaydgets calendar")
        self.set_size_request(config.width, config.height)

        GtkLayerShell.init_for_window(self)
        GtkLayerShell.set_layer(self, GtkLayerShell.Layer.BACKGROUND)
        GtkLayerShell.set_namespace(self, "swaydgets-calendar")
        GtkLayerShell.auto_exclusive_zone_enable(self)
        GtkLayerShell.set_anchor(self, GtkLayerShell.Edge.TOP, True)
        GtkLayerShell.set_anchor(self, GtkLayerShell.Edge.LEFT, True)
        GtkLayerShell.set_margin(self, GtkLayerShell.Edge.TOP, config.y)
        GtkLayerShell.set_margin(self, GtkLayerShell.Edge.LEFT, config.x)
        self.get_style_context().add_class("swaydgets-calendar")

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=10)
        for side in ("start", "end", "top", "bottom"):
            getattr(vbox, f"set_margin_{side}")(12)

        self.calendar = Gtk.Calendar()
        self.calendar.set_display_options(
            Gtk.CalendarDisplayOptions.SHOW_HEADING
            | Gtk.CalendarDisplayOptions.SHOW_DAY_NAMES
            | Gtk.CalendarDisplayOptions.SHOW_WEEK_NUMBERS
        )
        today = datetime.date.today()
        self.calendar.select_month(today.month - 1, today.year)
        self.calendar.select_day(today.day)
        self.calendar.mark_day(today.day)

        nav = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=5)
        nav.set_halign(Gtk.Align.CENTER)
        for text, handler in (
            ("◀ Previous", self._on_previous),
            ("Today", self._on_today),
            ("Next ▶", self._on_next),
        ):
            button = Gtk.Button(label=text)
            button.connect("clicked", handler)
            nav.pack_start(button, True, True, 5)

        vbox.pack_start(self.calendar, True, True, 0)
        vbox.pack_end(nav, False, False, 5)
        self.add(vbox)
        log.info("Calendar created at (%d, %d)", config.x, config.y)

    def _shift(self, delta: int) -> None:
        year, month, _day = self.calendar.get_date()
        year, month = shift_month(year, month, delta)
        self.calendar.select_month(month, year)

    def _on_previous(self, _button: Gtk.Button) -> None:
        self._shift(-1)

    def _on_next(self, _button: Gtk.Button) -> None:
        self._shift(1)

    def _on_today(self, _button: Gtk.Button) -> None:
        today = datetime.date.today()
        self.calendar.select_month(today.month - 1, today.year)
        self.calendar.select_day(today.day)
