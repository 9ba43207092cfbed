"""Drawer configuration and layout within a DRAWERS zone.

A DRAWERS zone is split into drawer zones (one visible front each, or an
internal drawer without a front), and each drawer zone into one or more
stacked boxes. Heights at both levels are distributed by ratio only.

Configuration helpers return modified copies and enforce limits by silent
no-op or clamping. Calculators are pure functions of their arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .distribution import clamp, distribute_by_ratio, round_half_up
from .ids import generate_above_box_shelf_id, generate_zone_id
from .limits import DEFAULT_LIMITS, InteriorLimits, SlidePreset
from .value_objects import (
    AboveBoxShelf,
    DepthPreset,
    DrawerBox,
    DrawerConfig,
    DrawerFront,
    DrawerZone,
    SlideType,
)


@dataclass(frozen=True)
class DrawerZoneBounds:
    """Vertical extent of one drawer zone.

    Attributes:
        zone: The drawer zone.
        zone_index: Index in the drawer config, bottom first.
        start_y: Bottom of the zone in mm.
        height: Zone height in mm.
        front_height: Height of the visible front (always the full zone).
        box_total_height: Height available to the zone's boxes.
    """

    zone: DrawerZone
    zone_index: int
    start_y: float
    height: float
    front_height: float
    box_total_height: float


@dataclass(frozen=True)
class BoxBounds:
    """Vertical extent of one drawer box within its zone.

    Attributes:
        box_index: Index of the box in its zone, bottom first.
        start_y: Bottom of the box space in mm.
        height: Unrounded box space height in mm.
        height_mm: Box space height rounded to whole millimeters.
    """

    box_index: int
    start_y: float
    height: float
    height_mm: float


@dataclass(frozen=True)
class DrawerBoxDimensions:
    """Manufacturing dimensions of a drawer box.

    Attributes:
        box_width: Outer width of the box in mm.
        box_depth: Front-to-back depth of the box in mm.
        box_side_height: Height of the box sides in mm.
        bottom_thickness: Thickness of the bottom panel in mm.
    """

    box_width: float
    box_depth: float
    box_side_height: float
    bottom_thickness: float


# =============================================================================
# Creators
# =============================================================================


def create_drawer_zone(has_external_front: bool = True) -> DrawerZone:
    """Create a drawer zone with one box."""
    return DrawerZone(
        id=generate_zone_id(),
        height_ratio=1.0,
        front=DrawerFront() if has_external_front else None,
        boxes=(DrawerBox(height_ratio=1.0),),
    )


def create_drawer_config(
    zone_count: int | None = None,
    slide_type: SlideType = SlideType.SIDE_MOUNT,
    has_external_fronts: bool = True,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    """Create a drawer configuration with equally sized zones.

    The zone count is clamped to ``[1, max_drawer_zones_per_zone]``.
    """
    if zone_count is None:
        zone_count = limits.default_drawer_zone_count
    count = int(clamp(zone_count, 1, limits.max_drawer_zones_per_zone))
    zones = tuple(create_drawer_zone(has_external_fronts) for _ in range(count))
    return DrawerConfig(slide_type=slide_type, zones=zones)


def create_box(
    height_ratio: float = 1.0,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerBox:
    return DrawerBox(height_ratio=max(limits.min_ratio, height_ratio))


def create_above_box_shelf(
    depth_preset: DepthPreset = DepthPreset.FULL,
) -> AboveBoxShelf:
    return AboveBoxShelf(id=generate_above_box_shelf_id(), depth_preset=depth_preset)


def clone_drawer_config(config: DrawerConfig) -> DrawerConfig:
    """Copy a drawer configuration, assigning new drawer zone and shelf ids."""
    zones = []
    for zone in config.zones:
        above = zone.above_box_content
        if above is not None:
            above = tuple(
                replace(shelf, id=generate_above_box_shelf_id()) for shelf in above
            )
        zones.append(replace(zone, id=generate_zone_id(), above_box_content=above))
    return replace(config, zones=tuple(zones))


# =============================================================================
# Updaters
# =============================================================================


def get_drawer_zone_by_id(config: DrawerConfig, zone_id: str) -> DrawerZone | None:
    for zone in config.zones:
        if zone.id == zone_id:
            return zone
    return None


def get_drawer_zone_index(config: DrawerConfig, zone_id: str) -> int:
    for index, zone in enumerate(config.zones):
        if zone.id == zone_id:
            return index
    return -1


def add_drawer_zone(
    config: DrawerConfig,
    zone: DrawerZone | None = None,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    """Append a drawer zone; no-op at ``max_drawer_zones_per_zone``."""
    if len(config.zones) >= limits.max_drawer_zones_per_zone:
        return config
    new_zone = zone if zone is not None else create_drawer_zone()
    return replace(config, zones=config.zones + (new_zone,))


def remove_drawer_zone(config: DrawerConfig, zone_id: str) -> DrawerConfig:
    """Remove a drawer zone; the last remaining zone is kept."""
    if len(config.zones) <= 1:
        return config
    return replace(config, zones=tuple(z for z in config.zones if z.id != zone_id))


def update_drawer_zone(config: DrawerConfig, zone_id: str, **changes) -> DrawerConfig:
    """Apply field changes to the drawer zone with ``zone_id``."""
    return replace(
        config,
        zones=tuple(
            replace(z, **changes) if z.id == zone_id else z for z in config.zones
        ),
    )


def move_drawer_zone(config: DrawerConfig, zone_id: str, direction: str) -> DrawerConfig:
    """Move a drawer zone one step. 'up' moves toward the top (higher index)."""
    index = get_drawer_zone_index(config, zone_id)
    if index == -1:
        return config

    new_index = index + 1 if direction == "up" else index - 1
    if new_index < 0 or new_index >= len(config.zones):
        return config

    zones = list(config.zones)
    zones[index], zones[new_index] = zones[new_index], zones[index]
    return replace(config, zones=tuple(zones))


def set_zone_height_ratio(
    config: DrawerConfig,
    zone_id: str,
    ratio: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    return update_drawer_zone(
        config,
        zone_id,
        height_ratio=clamp(ratio, limits.min_ratio, limits.max_ratio),
    )


def toggle_zone_front(config: DrawerConfig, zone_id: str) -> DrawerConfig:
    """Switch a drawer zone between external front and internal drawer."""
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None:
        return config
    front = DrawerFront() if zone.front is None else None
    return update_drawer_zone(config, zone_id, front=front)


def set_box_to_front_ratio(
    config: DrawerConfig,
    zone_id: str,
    ratio: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    return update_drawer_zone(
        config,
        zone_id,
        box_to_front_ratio=clamp(
            ratio, limits.box_to_front_ratio_min, limits.box_to_front_ratio_max
        ),
    )


def add_box(
    config: DrawerConfig,
    zone_id: str,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    """Stack another box in a drawer zone; no-op at the box limit."""
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None or len(zone.boxes) >= limits.max_boxes_per_drawer_zone:
        return config
    return update_drawer_zone(
        config, zone_id, boxes=zone.boxes + (create_box(limits=limits),)
    )


def remove_box(config: DrawerConfig, zone_id: str, box_index: int) -> DrawerConfig:
    """Remove a box by index; the last box of a zone is kept."""
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None or len(zone.boxes) <= 1:
        return config
    if box_index < 0 or box_index >= len(zone.boxes):
        return config
    boxes = zone.boxes[:box_index] + zone.boxes[box_index + 1 :]
    return update_drawer_zone(config, zone_id, boxes=boxes)


def set_box_height_ratio(
    config: DrawerConfig,
    zone_id: str,
    box_index: int,
    ratio: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None or box_index < 0 or box_index >= len(zone.boxes):
        return config
    boxes = tuple(
        DrawerBox(height_ratio=max(limits.min_ratio, ratio)) if i == box_index else box
        for i, box in enumerate(zone.boxes)
    )
    return update_drawer_zone(config, zone_id, boxes=boxes)


def add_above_box_shelf(
    config: DrawerConfig,
    zone_id: str,
    depth_preset: DepthPreset = DepthPreset.FULL,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerConfig:
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None:
        return config

    current = zone.above_box_content or ()
    if len(current) >= limits.max_shelves_above_drawer:
        return config

    return update_drawer_zone(
        config,
        zone_id,
        above_box_content=current + (create_above_box_shelf(depth_preset),),
    )


def remove_above_box_shelf(
    config: DrawerConfig, zone_id: str, shelf_id: str
) -> DrawerConfig:
    zone = get_drawer_zone_by_id(config, zone_id)
    if zone is None or zone.above_box_content is None:
        return config

    remaining = tuple(s for s in zone.above_box_content if s.id != shelf_id)
    return update_drawer_zone(
        config, zone_id, above_box_content=remaining or None
    )


def set_slide_type(config: DrawerConfig, slide_type: SlideType) -> DrawerConfig:
    return replace(config, slide_type=slide_type)


def convert_to_internal(config: DrawerConfig) -> DrawerConfig:
    """Remove every external front."""
    return replace(
        config, zones=tuple(replace(z, front=None) for z in config.zones)
    )


def convert_to_external(config: DrawerConfig) -> DrawerConfig:
    """Give every drawer zone an external front, keeping existing ones."""
    return replace(
        config,
        zones=tuple(
            z if z.front is not None else replace(z, front=DrawerFront())
            for z in config.zones
        ),
    )


# =============================================================================
# Calculators
# =============================================================================


def calculate_zone_bounds(
    zones: tuple[DrawerZone, ...] | list[DrawerZone],
    total_height: float,
    body_thickness: float,
) -> list[DrawerZoneBounds]:
    """Split a drawer section into drawer zone bounds.

    The interior height (total minus top and bottom panels) is shared by
    ``height_ratio``. Positions start at ``body_thickness`` and run upward.
    The visible front always spans the whole zone; boxes use
    ``height * box_to_front_ratio``, with the ratio forced to 1.0 for
    internal drawers.

    Args:
        zones: Drawer zones, bottom first.
        total_height: Outer height of the drawer section in mm.
        body_thickness: Thickness of the top and bottom panels in mm.

    Returns:
        One DrawerZoneBounds per drawer zone.
    """
    if not zones:
        return []

    interior_height = max(total_height - body_thickness * 2, 0.0)
    heights = distribute_by_ratio(
        interior_height, [max(0.0, z.height_ratio) for z in zones]
    )

    bounds: list[DrawerZoneBounds] = []
    current_y = body_thickness
    for index, (zone, height) in enumerate(zip(zones, heights)):
        bounds.append(
            DrawerZoneBounds(
                zone=zone,
                zone_index=index,
                start_y=current_y,
                height=height,
                front_height=height,
                box_total_height=height * zone.effective_box_to_front_ratio,
            )
        )
        current_y += height
    return bounds


def calculate_box_bounds(
    zone: DrawerZone,
    zone_start_y: float,
    box_total_height: float,
) -> list[BoxBounds]:
    """Split the box space of a drawer zone among its boxes by ratio.

    Box heights are rounded here since boxes are final manufacturing
    geometry.
    """
    if not zone.boxes:
        return []

    heights = distribute_by_ratio(
        box_total_height, [max(0.0, b.height_ratio) for b in zone.boxes]
    )

    bounds: list[BoxBounds] = []
    current_y = zone_start_y
    for index, height in enumerate(heights):
        bounds.append(
            BoxBounds(
                box_index=index,
                start_y=current_y,
                height=height,
                height_mm=round_half_up(height),
            )
        )
        current_y += height
    return bounds


def calculate_box_dimensions(
    cabinet_width: float,
    cabinet_depth: float,
    box_space_height: float,
    body_thickness: float,
    slide_config: SlidePreset,
    bottom_thickness: float | None = None,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawerBoxDimensions:
    """Calculate drawer box dimensions for a slide type.

    Formulas:
        - box_width = cabinet_width - 2 * body_thickness - 2 * side_offset
        - box_depth = cabinet_depth - depth_offset
        - box_side_height = max(box_space_height - box_height_reduction, 50)

    Args:
        cabinet_width: Outer width of the (virtual) cabinet in mm.
        cabinet_depth: Outer depth of the cabinet in mm.
        box_space_height: Vertical space available to the box in mm.
        body_thickness: Cabinet side thickness in mm.
        slide_config: Slide clearances.
        bottom_thickness: Box bottom thickness, defaulting to the limits value.
        limits: Layout constants.

    Returns:
        DrawerBoxDimensions for the box.
    """
    if bottom_thickness is None:
        bottom_thickness = limits.drawer_bottom_thickness

    box_width = cabinet_width - 2 * body_thickness - 2 * slide_config.side_offset
    box_depth = cabinet_depth - slide_config.depth_offset
    box_side_height = max(
        box_space_height - limits.box_height_reduction, limits.min_box_side_height
    )

    return DrawerBoxDimensions(
        box_width=box_width,
        box_depth=box_depth,
        box_side_height=box_side_height,
        bottom_thickness=bottom_thickness,
    )


def get_slide_config(
    slide_type: SlideType,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> SlidePreset:
    return limits.slide_preset(slide_type)


def calculate_drawer_width(
    cabinet_width: float,
    body_thickness: float,
    slide_type: SlideType,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> float:
    slide = limits.slide_preset(slide_type)
    return cabinet_width - 2 * body_thickness - 2 * slide.side_offset


def calculate_above_box_shelf_positions(bounds: DrawerZoneBounds) -> list[float]:
    """Y-positions of shelves placed above a reduced drawer box.

    Shelves only exist when the zone has above-box content and its boxes
    leave space (box_total_height < height). The first shelf rests on top of
    the boxes; shelf ``i`` sits ``i / n`` of the way into the free space.
    """
    shelves = bounds.zone.above_box_content or ()
    if not shelves or bounds.box_total_height >= bounds.height:
        return []

    boxes_top = bounds.start_y + bounds.box_total_height
    free_space = bounds.height - bounds.box_total_height
    count = len(shelves)
    return [boxes_top + (i / count) * free_space for i in range(count)]


# =============================================================================
# Queries
# =============================================================================


def get_total_box_count(config: DrawerConfig) -> int:
    return sum(len(zone.boxes) for zone in config.zones)


def get_front_count(config: DrawerConfig) -> int:
    return sum(1 for zone in config.zones if zone.front is not None)


def has_external_fronts(config: DrawerConfig) -> bool:
    return any(zone.front is not None for zone in config.zones)


def zone_has_reduced_box(zone: DrawerZone) -> bool:
    return zone.front is not None and zone.effective_box_to_front_ratio < 1


def get_summary(config: DrawerConfig) -> str:
    """Short human-readable description of a drawer configuration."""
    zone_count = len(config.zones)
    front_count = get_front_count(config)
    box_count = get_total_box_count(config)

    if front_count == 0:
        return f"{box_count} internal drawers"
    if front_count == zone_count and box_count == zone_count:
        return f"{zone_count} drawers"
    return f"{front_count} fronts, {box_count} drawers"
