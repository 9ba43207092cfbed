"""Numeric limits and hardware presets for interior layout.

Limits are passed explicitly into engine entry points so alternate
configurations (and tests) can substitute their own values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .value_objects import SlideType


@dataclass(frozen=True)
class SlidePreset:
    """Clearances consumed by a drawer slide type.

    Attributes:
        side_offset: Clearance per side between box and cabinet side (mm).
        depth_offset: Rear clearance subtracted from cabinet depth (mm).
    """

    side_offset: float
    depth_offset: float


# Side mount and bottom mount need 13mm per side, undermount 21mm,
# center mount runs under the box and needs none.
SLIDE_PRESETS: Mapping[SlideType, SlidePreset] = MappingProxyType(
    {
        SlideType.SIDE_MOUNT: SlidePreset(side_offset=13.0, depth_offset=50.0),
        SlideType.UNDERMOUNT: SlidePreset(side_offset=21.0, depth_offset=50.0),
        SlideType.BOTTOM_MOUNT: SlidePreset(side_offset=13.0, depth_offset=50.0),
        SlideType.CENTER_MOUNT: SlidePreset(side_offset=0.0, depth_offset=50.0),
    }
)


@dataclass(frozen=True)
class InteriorLimits:
    """Structural limits and layout constants for cabinet interiors.

    All lengths are in millimeters.

    Attributes:
        max_zone_depth: Number of tree levels allowed (root is level 0).
        max_children_per_zone: Maximum children of a nested zone.
        max_drawer_zones_per_zone: Maximum drawer zones in a DRAWERS zone.
        max_boxes_per_drawer_zone: Maximum boxes stacked behind one front.
        max_shelves_per_zone: Maximum shelves in a SHELVES zone.
        max_shelves_above_drawer: Maximum shelves above a reduced drawer box.
        min_zone_height_mm: Smallest EXACT zone height.
        min_zone_width_mm: Smallest FIXED zone width.
        partition_depth_min: Smallest CUSTOM partition depth.
        custom_shelf_depth_min: Smallest CUSTOM shelf depth.
        custom_shelf_depth_max: Largest CUSTOM shelf depth.
        custom_shelf_depth_offset: Clearance kept behind a custom shelf.
        shelf_setback: Front setback subtracted from cabinet depth.
        shelf_position_bottom_offset: Relative offset of the lowest uniform shelf.
        single_shelf_position: Relative position of a lone uniform shelf.
        box_height_reduction: Box side height reduction from available space.
        min_box_side_height: Floor for drawer box side height.
        drawer_bottom_thickness: Default drawer bottom panel thickness.
        box_to_front_ratio_min: Lower bound for box-to-front ratio.
        box_to_front_ratio_max: Upper bound for box-to-front ratio.
        min_ratio: Lower bound for drawer zone and box ratios.
        max_ratio: Upper bound for drawer zone ratios.
        default_drawer_zone_count: Drawer zones created for a new DRAWERS zone.
        default_shelf_count: Shelves created for a new SHELVES zone.
        slide_presets: Clearances per drawer slide type.
    """

    max_zone_depth: int = 4
    max_children_per_zone: int = 6
    max_drawer_zones_per_zone: int = 8
    max_boxes_per_drawer_zone: int = 4
    max_shelves_per_zone: int = 10
    max_shelves_above_drawer: int = 4
    min_zone_height_mm: float = 50.0
    min_zone_width_mm: float = 100.0
    partition_depth_min: float = 50.0
    custom_shelf_depth_min: float = 50.0
    custom_shelf_depth_max: float = 1000.0
    custom_shelf_depth_offset: float = 10.0
    shelf_setback: float = 10.0
    shelf_position_bottom_offset: float = 0.05
    single_shelf_position: float = 0.5
    box_height_reduction: float = 30.0
    min_box_side_height: float = 50.0
    drawer_bottom_thickness: float = 3.0
    box_to_front_ratio_min: float = 0.1
    box_to_front_ratio_max: float = 1.0
    min_ratio: float = 0.1
    max_ratio: float = 10.0
    default_drawer_zone_count: int = 3
    default_shelf_count: int = 2
    slide_presets: Mapping[SlideType, SlidePreset] = field(
        default_factory=lambda: SLIDE_PRESETS, hash=False
    )

    def __post_init__(self) -> None:
        # Keep a read-only copy of the caller's mapping.
        object.__setattr__(
            self, "slide_presets", MappingProxyType(dict(self.slide_presets))
        )
        if self.max_zone_depth < 1:
            raise ValueError("max_zone_depth must be at least 1")
        if self.max_children_per_zone < 1:
            raise ValueError("max_children_per_zone must be at least 1")
        if self.max_drawer_zones_per_zone < 1:
            raise ValueError("max_drawer_zones_per_zone must be at least 1")
        if self.max_boxes_per_drawer_zone < 1:
            raise ValueError("max_boxes_per_drawer_zone must be at least 1")

    def slide_preset(self, slide_type: SlideType) -> SlidePreset:
        return self.slide_presets[slide_type]


DEFAULT_LIMITS = InteriorLimits()
