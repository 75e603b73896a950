"""Dock visibility controller -- debounced show/hide driven by pointer crossings."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, NamedTuple

import gi

gi.require_version("Gdk", "3.0")
from gi.repository import Gdk, GLib  # noqa: E402

from swaydgets.log import get_logger  # noqa: E402

if TYPE_CHECKING:
    from swaydgets.ui.dock_window import DockSurface

log = get_logger(name="visibility")


class VisibilityState(enum.Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"
    PENDING_HIDE = "pending_hide"


# Leave details meaning the pointer really left the dock's widget
# hierarchy. INFERIOR/VIRTUAL mean it only moved onto a child or between
# siblings inside the dock.
QUALIFYING_LEAVE_DETAILS = frozenset(
    {
        Gdk.NotifyType.NONLINEAR,
        Gdk.NotifyType.NONLINEAR_VIRTUAL,
        Gdk.NotifyType.ANCESTOR,
    }
)


def is_qualifying_leave(detail: Gdk.NotifyType) -> bool:
    return detail in QUALIFYING_LEAVE_DETAILS


class PendingHide(NamedTuple):
    """A scheduled hide: when it is due and which arming it belongs to."""

    deadline_us: int
    token: int
    source_id: int


class VisibilityController:
    """Shows the dock on pointer enter, hides it hide_timeout ms after a real leave.

    State machine:

      HIDDEN --enter--> VISIBLE --qualifying leave--> PENDING_HIDE
                           ^                              |  |
                           +-----------enter--------------+  | deadline
                                                             v
                                                           HIDDEN

    Every PENDING_HIDE owns exactly one timeout source and a token; any
    transition removes the source and bumps the token, so a timer armed
    for an earlier leave can never hide the dock.
    """

    def __init__(self, surface: DockSurface, hide_timeout_ms: int) -> None:
        self._surface = surface
        self._hide_timeout_ms = hide_timeout_ms
        self.state = VisibilityState.HIDDEN
        self.pending: PendingHide | None = None
        self._generation = 0

    def on_pointer_enter(self) -> None:
        """Pointer entered the detector strip or the dock itself."""
        log.debug("on_pointer_enter: state=%s", self.state.value)
        if self.state == VisibilityState.VISIBLE:
            return
        self._cancel_pending()
        self.state = VisibilityState.VISIBLE
        self._surface.show()

    def on_pointer_leave(self, detail: Gdk.NotifyType) -> None:
        """Pointer left the dock; only a real exit arms the hide timer."""
        if self.state != VisibilityState.VISIBLE:
            return
        if not is_qualifying_leave(detail):
            log.debug("Ignoring leave with detail %s", detail)
            return

        self._cancel_pending()
        token = self._generation
        deadline = GLib.get_monotonic_time() + self._hide_timeout_ms * 1000
        source_id = GLib.timeout_add(
            self._hide_timeout_ms, self._on_hide_timeout, token
        )
        self.pending = PendingHide(
            deadline_us=deadline, token=token, source_id=source_id
        )
        self.state = VisibilityState.PENDING_HIDE
        log.info(
            "Pointer left dock (detail: %s), hiding in %d ms",
            detail,
            self._hide_timeout_ms,
        )

    def reset(self) -> None:
        """Drop any pending hide and force the dock hidden."""
        self._cancel_pending()
        if self.state != VisibilityState.HIDDEN:
            self.state = VisibilityState.HIDDEN
            self._surface.hide()

    def _on_hide_timeout(self, token: int) -> bool:
        pending = self.pending
        if pending is None or pending.token != token:
            log.debug("Stale hide timer %d ignored", token)
            return False
        # The source is finished once this returns False
        self.pending = None
        self._generation += 1
        self.state = VisibilityState.HIDDEN
        self._surface.hide()
        log.debug("Dock hidden")
        return False

    def _cancel_pending(self) -> None:
        if self.pending is not None:
            GLib.source_remove(self.pending.source_id)
            self.pending = None
        self._generation += 1
