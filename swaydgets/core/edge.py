"""Screen edge types and the edge -> layout mapping shared by dock surfaces."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Edge(str, enum.Enum):
    """Screen edge a widget surface is anchored to.

    Coordinate convention:
      main axis  -- along the dock (horizontal for BOTTOM/TOP, vertical for LEFT/RIGHT)
      cross axis -- perpendicular to the dock (toward/away from screen edge)
    """

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class Orientation(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Cross-axis thickness of the dock strip and of the pointer detector strip
DOCK_THICKNESS = 60
DETECTOR_THICKNESS = 1
# Requested length along the main axis
MAIN_AXIS_LENGTH = 800


class EdgeLayout(NamedTuple):
    """Placement of a surface anchored to one screen edge."""

    edge: Edge
    orientation: Orientation
    # The two edges the surface stretches between (main axis)
    span: tuple[Edge, Edge]
    width: int
    height: int

    @property
    def anchors(self) -> tuple[Edge, Edge, Edge]:
        """Every edge the surface is anchored to: its own plus the span pair."""
        return (self.edge, *self.span)

    @property
    def entry_orientation(self) -> Orientation:
        """Axis along which an entry stacks its icon and label.

        Cross axis of the dock: icon above label on a horizontal dock,
        icon beside label on a vertical one.
        """
        if self.orientation == Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


def is_horizontal(edge: Edge) -> bool:
    """True for bottom/top (entries laid out left-to-right)."""
    return edge in (Edge.BOTTOM, Edge.TOP)


def orientation_for(edge: Edge) -> Orientation:
    return Orientation.HORIZONTAL if is_horizontal(edge) else Orientation.VERTICAL


def resolve_layout(edge: Edge, thickness: int = DOCK_THICKNESS) -> EdgeLayout:
    """Map an edge to orientation, anchors and size for a surface of `thickness`."""
    orientation = orientation_for(edge)
    if orientation == Orientation.HORIZONTAL:
        return EdgeLayout(
            edge=edge,
            orientation=orientation,
            span=(Edge.LEFT, Edge.RIGHT),
            width=MAIN_AXIS_LENGTH,
            height=thickness,
        )
    return EdgeLayout(
        edge=edge,
        orientation=orientation,
        span=(Edge.TOP, Edge.BOTTOM),
        width=thickness,
        height=MAIN_AXIS_LENGTH,
    )
