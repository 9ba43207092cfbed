"""Enums and leaf-level value objects for cabinet interior configuration.

Zones themselves live in ``entities``; this module holds the sizing configs,
partitions, shelves and drawer descriptors that zones carry. All objects are
frozen dataclasses of plain data so that trees can be shared between undo
revisions and serialized by callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ZoneContentType(str, Enum):
    """What a zone contains.

    Attributes:
        EMPTY: Open space with no physical content.
        SHELVES: Zone filled with shelves.
        DRAWERS: Zone filled with drawer zones and boxes.
        NESTED: Zone subdivided into child zones.
    """

    EMPTY = "EMPTY"
    SHELVES = "SHELVES"
    DRAWERS = "DRAWERS"
    NESTED = "NESTED"


class DivisionDirection(str, Enum):
    """Axis along which a nested zone stacks its children.

    HORIZONTAL stacks children bottom to top (horizontal dividing lines).
    VERTICAL places children left to right as columns separated by partitions.
    """

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class HeightMode(str, Enum):
    """Height sizing mode relative to siblings."""

    RATIO = "RATIO"
    EXACT = "EXACT"


class WidthMode(str, Enum):
    """Width sizing mode relative to siblings."""

    FIXED = "FIXED"
    PROPORTIONAL = "PROPORTIONAL"


class DepthPreset(str, Enum):
    """Depth presets shared by shelves and partitions."""

    FULL = "FULL"
    HALF = "HALF"
    CUSTOM = "CUSTOM"


class ShelfMode(str, Enum):
    """Shelf distribution mode.

    UNIFORM derives positions from a count; MANUAL keeps one ShelfConfig per
    shelf, optionally with an explicit position.
    """

    UNIFORM = "UNIFORM"
    MANUAL = "MANUAL"


class SlideType(str, Enum):
    """Drawer slide mounting types."""

    SIDE_MOUNT = "SIDE_MOUNT"
    UNDERMOUNT = "UNDERMOUNT"
    BOTTOM_MOUNT = "BOTTOM_MOUNT"
    CENTER_MOUNT = "CENTER_MOUNT"


@dataclass(frozen=True)
class HeightConfig:
    """Height configuration for a zone.

    Attributes:
        mode: RATIO shares the remaining height, EXACT requests millimeters.
        ratio: Share of remaining height in RATIO mode.
        exact_mm: Requested height in EXACT mode.
    """

    mode: HeightMode = HeightMode.RATIO
    ratio: float | None = 1.0
    exact_mm: float | None = None

    @classmethod
    def of_ratio(cls, ratio: float) -> "HeightConfig":
        return cls(mode=HeightMode.RATIO, ratio=ratio)

    @classmethod
    def of_exact(cls, exact_mm: float) -> "HeightConfig":
        return cls(mode=HeightMode.EXACT, ratio=None, exact_mm=exact_mm)

    @property
    def is_exact(self) -> bool:
        """True when this config claims a fixed share in the first pass."""
        return self.mode == HeightMode.EXACT and bool(self.exact_mm)


@dataclass(frozen=True)
class WidthConfig:
    """Width configuration for a zone inside a VERTICAL parent.

    Attributes:
        mode: FIXED requests millimeters, PROPORTIONAL shares the remainder.
        fixed_mm: Requested width in FIXED mode.
        ratio: Share of remaining width in PROPORTIONAL mode.
    """

    mode: WidthMode = WidthMode.PROPORTIONAL
    fixed_mm: float | None = None
    ratio: float | None = 1.0

    @classmethod
    def of_fixed(cls, fixed_mm: float) -> "WidthConfig":
        return cls(mode=WidthMode.FIXED, fixed_mm=fixed_mm, ratio=None)

    @classmethod
    def of_ratio(cls, ratio: float) -> "WidthConfig":
        return cls(mode=WidthMode.PROPORTIONAL, ratio=ratio)

    @property
    def is_fixed(self) -> bool:
        return self.mode == WidthMode.FIXED and bool(self.fixed_mm)


@dataclass(frozen=True)
class Partition:
    """Vertical divider placed between two adjacent columns.

    Attributes:
        id: Unique partition identifier.
        enabled: Whether the partition is shown as a physical panel.
        depth_preset: FULL, HALF or CUSTOM depth.
        custom_depth: Depth in mm when depth_preset is CUSTOM.
        material_id: Optional material override.
    """

    id: str
    enabled: bool = False
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class ShelfConfig:
    """Individual shelf settings, used in MANUAL mode.

    Attributes:
        id: Unique shelf identifier.
        depth_preset: Per-shelf depth preset.
        custom_depth: Per-shelf custom depth in mm.
        position_y: Explicit offset from the bottom of the zone in mm.
        material_id: Optional material override.
    """

    id: str
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None
    position_y: float | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class ShelvesConfig:
    """Shelf content of a SHELVES zone.

    Attributes:
        mode: UNIFORM or MANUAL distribution.
        count: Number of shelves.
        depth_preset: Zone-level depth preset.
        custom_depth: Zone-level custom depth in mm.
        material_id: Zone-level material override.
        shelves: Individual shelf configs (MANUAL mode).
    """

    mode: ShelfMode = ShelfMode.UNIFORM
    count: int = 2
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None
    shelves: tuple[ShelfConfig, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DrawerFront:
    """Descriptor for a visible drawer front.

    Attributes:
        handle: Optional handle style identifier.
        material_id: Optional front material override.
    """

    handle: str | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class DrawerBox:
    """A single physical drawer box sized by ratio within its drawer zone."""

    height_ratio: float = 1.0


@dataclass(frozen=True)
class AboveBoxShelf:
    """Shelf placed in the space above a reduced-height drawer box."""

    id: str
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None


@dataclass(frozen=True)
class DrawerZone:
    """One visually distinct band of a DRAWERS zone.

    A drawer zone may stack several boxes behind a single front. When
    ``front`` is None the drawer is internal and has no visible front.

    Attributes:
        id: Unique drawer zone identifier.
        height_ratio: Share of the drawer section height.
        front: Front descriptor, or None for an internal drawer.
        boxes: Ordered boxes, bottom to top.
        box_to_front_ratio: Fraction of the zone height used by boxes.
        above_box_content: Shelves placed above the boxes.
    """

    id: str
    height_ratio: float = 1.0
    front: DrawerFront | None = field(default_factory=DrawerFront)
    boxes: tuple[DrawerBox, ...] = field(default_factory=lambda: (DrawerBox(),))
    box_to_front_ratio: float | None = None
    above_box_content: tuple[AboveBoxShelf, ...] | None = None

    @property
    def has_external_front(self) -> bool:
        return self.front is not None

    @property
    def effective_box_to_front_ratio(self) -> float:
        """Box-to-front ratio, forced to 1.0 for internal drawers."""
        if self.front is None or self.box_to_front_ratio is None:
            return 1.0
        return self.box_to_front_ratio


@dataclass(frozen=True)
class DrawerConfig:
    """Drawer content of a DRAWERS zone.

    Attributes:
        slide_type: Slide mounting type for every box in the zone.
        zones: Drawer zones from bottom to top.
        box_material_id: Optional material override for box panels.
        bottom_material_id: Optional material override for box bottoms.
    """

    slide_type: SlideType = SlideType.SIDE_MOUNT
    zones: tuple[DrawerZone, ...] = field(default_factory=tuple)
    box_material_id: str | None = None
    bottom_material_id: str | None = None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in the cabinet front plane (mm).

    ``start_x``/``start_y`` are the lower-left corner.
    """

    start_x: float
    start_y: float
    width: float
    height: float
