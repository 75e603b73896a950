"""Dock and detector surfaces -- GTK layer-shell windows anchored to a screen edge."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

import cairo
import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
gi.require_version("GtkLayerShell", "0.1")
from gi.repository import Gdk, Gtk, GtkLayerShell, Pango  # noqa: E402

from swaydgets.core.edge import (
    DETECTOR_THICKNESS,
    DOCK_THICKNESS,
    Edge,
    EdgeLayout,
    Orientation,
    resolve_layout,
)
from swaydgets.log import get_logger

_log = get_logger("dock_window")

if TYPE_CHECKING:
    from swaydgets.ui.visibility import VisibilityController


class DockSurface(Protocol):
    """What the dock engine needs from the strip it draws into."""

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def clear_children(self) -> None: ...

    def add_entry(
        self, icon_name: str, label: str, on_click: Callable[[], None]
    ) -> None: ...


LAYER_EDGES = {
    Edge.LEFT: GtkLayerShell.Edge.LEFT,
    Edge.RIGHT: GtkLayerShell.Edge.RIGHT,
    Edge.TOP: GtkLayerShell.Edge.TOP,
    Edge.BOTTOM: GtkLayerShell.Edge.BOTTOM,
}

GTK_ORIENTATIONS = {
    Orientation.HORIZONTAL: Gtk.Orientation.HORIZONTAL,
    Orientation.VERTICAL: Gtk.Orientation.VERTICAL,
}

# Titles longer than this are ellipsized at the end
LABEL_MAX_CHARS = 10
ENTRY_SPACING = 5
ENTRY_PADDING = 5
ICON_LABEL_SPACING = 2

DOCK_CSS = b"""
.swaydgets-dock button {
    background-color: rgba(40, 40, 40, 0.8);
    border-radius: 6px;
    padding: 3px;
}
.swaydgets-dock button:hover {
    background-color: rgba(80, 80, 80, 0.9);
}
.swaydgets-dock label {
    color: white;
    font-size: 9px;
}
"""


def apply_css(css: bytes) -> None:
    """Install a stylesheet for the whole screen."""
    provider = Gtk.CssProvider()
    provider.load_from_data(css)
    screen = Gdk.Screen.get_default()
    if screen is None:
        _log.warning("No default screen, skipping stylesheet")
        return
    Gtk.StyleContext.add_provider_for_screen(
        screen, provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )


def init_layer_surface(
    window: Gtk.Window, layout: EdgeLayout, layer: GtkLayerShell.Layer, namespace: str
) -> None:
    """Turn a toplevel into a layer-shell surface anchored per `layout`."""
    GtkLayerShell.init_for_window(window)
    GtkLayerShell.set_layer(window, layer)
    GtkLayerShell.set_namespace(window, namespace)
    for edge in layout.anchors:
        GtkLayerShell.set_anchor(window, LAYER_EDGES[edge], True)
    window.set_default_size(layout.width, layout.height)


def _paint_transparent(_widget: Gtk.Widget, cr: cairo.Context) -> bool:
    cr.set_source_rgba(0.0, 0.0, 0.0, 0.0)
    cr.set_operator(cairo.OPERATOR_SOURCE)
    cr.paint()
    cr.set_operator(cairo.OPERATOR_OVER)
    return False


def _make_transparent(window: Gtk.Window) -> None:
    screen = window.get_screen()
    visual = screen.get_rgba_visual() or screen.get_system_visual()
    window.set_visual(visual)
    window.set_app_paintable(True)
    window.connect("draw", _paint_transparent)


class DockWindow(Gtk.Window):
    """The launcher strip: one button per window, laid out along the edge."""

    def __init__(self, edge: Edge) -> None:
        super().__init__(type=Gtk.WindowType.TOPLEVEL)
        self.layout = resolve_layout(edge, DOCK_THICKNESS)
        self.set_title("swaydgets dock")
        init_layer_surface(self, self.layout, GtkLayerShell.Layer.TOP, "swaydgets-dock")
        _make_transparent(self)
        self.get_style_context().add_class("swaydgets-dock")

        self._box = Gtk.Box(
            orientation=GTK_ORIENTATIONS[self.layout.orientation],
            spacing=ENTRY_SPACING,
        )
        if self.layout.orientation == Orientation.HORIZONTAL:
            self._box.set_halign(Gtk.Align.CENTER)
        else:
            self._box.set_valign(Gtk.Align.CENTER)
        self._box.set_margin_start(ENTRY_PADDING)
        self._box.set_margin_end(ENTRY_PADDING)
        self._box.set_margin_top(ENTRY_PADDING)
        self._box.set_margin_bottom(ENTRY_PADDING)
        self.add(self._box)

    def show(self) -> None:
        self.show_all()

    def clear_children(self) -> None:
        for child in self._box.get_children():
            self._box.remove(child)

    def add_entry(
        self, icon_name: str, label: str, on_click: Callable[[], None]
    ) -> None:
        """Append a button with icon and ellipsized title.

        Icon sits above the label on a horizontal dock and beside it on a
        vertical one.
        """
        button = Gtk.Button()
        inner = Gtk.Box(
            orientation=GTK_ORIENTATIONS[self.layout.entry_orientation],
            spacing=ICON_LABEL_SPACING,
        )
        icon = Gtk.Image.new_from_icon_name(icon_name, Gtk.IconSize.DND)
        inner.pack_start(icon, True, True, 0)

        title = Gtk.Label(label=label)
        title.set_max_width_chars(LABEL_MAX_CHARS)
        title.set_ellipsize(Pango.EllipsizeMode.END)
        inner.pack_start(title, False, False, 0)

        button.add(inner)
        button.set_tooltip_text(label)
        button.connect("clicked", lambda _button: on_click())
        self._box.pack_start(button, False, False, ENTRY_PADDING)
        button.show_all()

    def connect_pointer(self, controller: VisibilityController) -> None:
        """Route enter/leave crossings on the dock to the visibility controller."""
        self.add_events(
            Gdk.EventMask.ENTER_NOTIFY_MASK | Gdk.EventMask.LEAVE_NOTIFY_MASK
        )
        self.connect("enter-notify-event", self._on_enter, controller)
        self.connect("leave-notify-event", self._on_leave, controller)

    @staticmethod
    def _on_enter(
        _widget: Gtk.Widget, _event: Gdk.EventCrossing, controller: VisibilityController
    ) -> bool:
        controller.on_pointer_enter()
        return False

    @staticmethod
    def _on_leave(
        _widget: Gtk.Widget, event: Gdk.EventCrossing, controller: VisibilityController
    ) -> bool:
        controller.on_pointer_leave(event.detail)
        return False


class DetectorWindow(Gtk.Window):
    """Thin always-present strip at the dock edge that senses the pointer."""

    def __init__(self, edge: Edge) -> None:
        super().__init__(type=Gtk.WindowType.TOPLEVEL)
        self.layout = resolve_layout(edge, DETECTOR_THICKNESS)
        self.set_title("swaydgets dock detector")
        init_layer_surface(
            self, self.layout, GtkLayerShell.Layer.OVERLAY, "swaydgets-detector"
        )
        self.set_size_request(self.layout.width, self.layout.height)
        _make_transparent(self)
        self.add_events(Gdk.EventMask.ENTER_NOTIFY_MASK)

    def connect_pointer(self, controller: VisibilityController) -> None:
        self.connect("enter-notify-event", self._on_enter, controller)

    @staticmethod
    def _on_enter(
        _widget: Gtk.Widget, _event: Gdk.EventCrossing, controller: VisibilityController
    ) -> bool:
        _log.debug("Pointer entered dock detector")
        controller.on_pointer_enter()
        return False
