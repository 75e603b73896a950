"""Window records extracted from the sway container tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from i3ipc import Con

# sway node type for tiled application containers
CONTAINER_TYPE = "con"


@dataclass(frozen=True)
class WindowRecord:
    """One application window as shown in the dock."""

    id: int
    title: str
    app_id: str
    focused: bool = False


def _window_properties(node: Con) -> dict[str, Any] | None:
    ipc_data = getattr(node, "ipc_data", None) or {}
    return ipc_data.get("window_properties")


def is_app_window(node: Con) -> bool:
    """True for titled containers backed by a Wayland app_id or X11 properties."""
    if node.type != CONTAINER_TYPE or node.name is None:
        return False
    return bool(node.app_id) or _window_properties(node) is not None


def _app_identifier(node: Con) -> str:
    """app_id, falling back to the X11 window class."""
    if node.app_id:
        return node.app_id
    props = _window_properties(node) or {}
    return node.window_class or props.get("class") or ""


def extract_windows(tree: Con) -> list[WindowRecord]:
    """Flatten a container tree into window records, depth-first.

    A node's tiled children are visited before its floating children and
    every subtree is finished before moving on to the next sibling.
    """
    windows: list[WindowRecord] = []
    _collect(tree, windows)
    return windows


def _collect(node: Con, windows: list[WindowRecord]) -> None:
    if is_app_window(node):
        windows.append(
            WindowRecord(
                id=node.id,
                title=node.name or "",
                app_id=_app_identifier(node),
                focused=bool(node.focused),
            )
        )
    for child in node.nodes or ():
        _collect(child, windows)
    for child in node.floating_nodes or ():
        _collect(child, windows)
