"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from interiors.domain import ZoneTreeInfo
from interiors.domain.drawer_layout import (
    BoxBounds,
    DrawerBoxDimensions,
    DrawerZoneBounds,
)
from interiors.domain.entities import DrawersZone, ShelvesZone


@dataclass(frozen=True)
class CabinetDimensions:
    """Outer cabinet dimensions in millimeters."""

    width: float
    height: float
    depth: float
    body_thickness: float = 18.0

    @property
    def interior_width(self) -> float:
        return max(self.width - 2 * self.body_thickness, 0.0)

    @property
    def interior_height(self) -> float:
        return max(self.height - 2 * self.body_thickness, 0.0)

    def validate(self) -> list[str]:
        """Validate dimensions and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.depth <= 0:
            errors.append("Depth must be positive")
        if self.body_thickness <= 0:
            errors.append("Body thickness must be positive")
        elif self.interior_width <= 0 or self.interior_height <= 0:
            errors.append("Body thickness leaves no interior space")
        return errors


@dataclass
class DrawerZoneLayout:
    """Resolved geometry of one drawer zone.

    Attributes:
        bounds: Vertical extent of the drawer zone and its front.
        boxes: Vertical extent of each box behind the front.
        box_dimensions: Manufacturing dimensions, parallel to ``boxes``.
        above_box_shelves: Shelves placed above reduced boxes.
    """

    bounds: DrawerZoneBounds
    boxes: list[BoxBounds] = field(default_factory=list)
    box_dimensions: list[DrawerBoxDimensions] = field(default_factory=list)
    above_box_shelves: list[ShelfPlacement] = field(default_factory=list)


@dataclass
class DrawerLayout:
    """Resolved drawers for one DRAWERS leaf."""

    zone: DrawersZone
    start_x: float
    width: float
    drawer_zones: list[DrawerZoneLayout] = field(default_factory=list)


@dataclass
class ShelfPlacement:
    """A single shelf panel."""

    y: float
    depth_mm: float
    width: float


@dataclass
class ShelfLayout:
    """Resolved shelves for one SHELVES leaf."""

    zone: ShelvesZone
    start_x: float
    width: float
    shelves: list[ShelfPlacement] = field(default_factory=list)


@dataclass
class InteriorLayout:
    """Complete resolved interior of a cabinet.

    Attributes:
        cabinet: Outer cabinet dimensions the layout was computed for.
        tree_info: Flattened leaf and partition rectangles.
        drawer_layouts: One entry per DRAWERS leaf.
        shelf_layouts: One entry per SHELVES leaf.
    """

    cabinet: CabinetDimensions
    tree_info: ZoneTreeInfo
    drawer_layouts: list[DrawerLayout] = field(default_factory=list)
    shelf_layouts: list[ShelfLayout] = field(default_factory=list)

    @property
    def shelf_count(self) -> int:
        return sum(len(layout.shelves) for layout in self.shelf_layouts)

    @property
    def drawer_box_count(self) -> int:
        return sum(
            len(zone.boxes)
            for layout in self.drawer_layouts
            for zone in layout.drawer_zones
        )

    @property
    def partition_count(self) -> int:
        return len(self.tree_info.partition_bounds)
