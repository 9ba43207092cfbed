"""Shelf configuration and positioning within a SHELVES zone.

Configuration helpers return modified copies; limits are enforced by
silent clamping. Calculators turn a shelves config plus the zone's
assigned rectangle into shelf Y-positions and depths.
"""

from __future__ import annotations

from dataclasses import replace

from .distribution import clamp, round_half_up
from .ids import generate_shelf_id
from .limits import DEFAULT_LIMITS, InteriorLimits
from .value_objects import DepthPreset, ShelfConfig, ShelfMode, ShelvesConfig


# =============================================================================
# Creators
# =============================================================================


def create_shelf(depth_preset: DepthPreset = DepthPreset.FULL) -> ShelfConfig:
    """Create a single shelf config."""
    return ShelfConfig(id=generate_shelf_id(), depth_preset=depth_preset)


def create_custom_shelf(
    custom_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelfConfig:
    """Create a shelf with a clamped custom depth."""
    return ShelfConfig(
        id=generate_shelf_id(),
        depth_preset=DepthPreset.CUSTOM,
        custom_depth=clamp(
            custom_depth,
            limits.custom_shelf_depth_min,
            limits.custom_shelf_depth_max,
        ),
    )


def create_shelves_config(
    count: int | None = None,
    mode: ShelfMode = ShelfMode.UNIFORM,
    depth_preset: DepthPreset = DepthPreset.FULL,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelvesConfig:
    """Create a shelves configuration.

    The count is clamped to ``[0, max_shelves_per_zone]``. In MANUAL mode one
    ShelfConfig is created per shelf.
    """
    if count is None:
        count = limits.default_shelf_count
    clamped = int(clamp(count, 0, limits.max_shelves_per_zone))

    shelves: tuple[ShelfConfig, ...] = ()
    if mode == ShelfMode.MANUAL:
        shelves = tuple(create_shelf(depth_preset) for _ in range(clamped))

    return ShelvesConfig(
        mode=mode,
        count=clamped,
        depth_preset=depth_preset,
        shelves=shelves,
    )


def clone_shelves_config(config: ShelvesConfig) -> ShelvesConfig:
    """Copy a shelves configuration, assigning new shelf ids."""
    return replace(
        config,
        shelves=tuple(
            replace(shelf, id=generate_shelf_id()) for shelf in config.shelves
        ),
    )


# =============================================================================
# Updaters
# =============================================================================


def set_shelf_count(
    config: ShelvesConfig,
    count: int,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelvesConfig:
    """Set the shelf count, growing or trimming MANUAL shelves from the end."""
    new_count = int(clamp(count, 0, limits.max_shelves_per_zone))

    shelves = config.shelves
    if config.mode == ShelfMode.MANUAL:
        if new_count > config.count:
            added = tuple(
                create_shelf(config.depth_preset)
                for _ in range(new_count - config.count)
            )
            shelves = shelves + added
        elif new_count < config.count:
            shelves = shelves[:new_count]

    return replace(config, count=new_count, shelves=shelves)


def set_shelf_mode(config: ShelvesConfig, mode: ShelfMode) -> ShelvesConfig:
    """Switch distribution mode, seeding individual shelves for MANUAL."""
    if config.mode == mode:
        return config

    if mode == ShelfMode.MANUAL and not config.shelves:
        shelves = tuple(
            create_shelf(config.depth_preset) for _ in range(config.count)
        )
        return replace(config, mode=mode, shelves=shelves)

    return replace(config, mode=mode)


def set_depth_preset(config: ShelvesConfig, preset: DepthPreset) -> ShelvesConfig:
    return replace(config, depth_preset=preset)


def set_custom_depth(
    config: ShelvesConfig,
    depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelvesConfig:
    return replace(
        config,
        custom_depth=clamp(
            depth, limits.custom_shelf_depth_min, limits.custom_shelf_depth_max
        ),
    )


def add_shelf(
    config: ShelvesConfig,
    shelf: ShelfConfig | None = None,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelvesConfig:
    """Append a shelf; no-op at ``max_shelves_per_zone``."""
    if config.count >= limits.max_shelves_per_zone:
        return config

    new_shelf = shelf if shelf is not None else create_shelf(config.depth_preset)
    return replace(
        config,
        count=config.count + 1,
        shelves=config.shelves + (new_shelf,),
    )


def remove_shelf(config: ShelvesConfig, shelf_id: str) -> ShelvesConfig:
    """Remove a shelf by id; no-op when the count is already zero."""
    if config.count <= 0:
        return config

    return replace(
        config,
        count=max(0, config.count - 1),
        shelves=tuple(s for s in config.shelves if s.id != shelf_id),
    )


def update_shelf(config: ShelvesConfig, shelf_id: str, **changes) -> ShelvesConfig:
    """Apply field changes to the shelf with ``shelf_id``."""
    return replace(
        config,
        shelves=tuple(
            replace(s, **changes) if s.id == shelf_id else s for s in config.shelves
        ),
    )


# =============================================================================
# Calculators
# =============================================================================


def calculate_width(cabinet_width: float, body_thickness: float) -> float:
    """Shelf width spanning the cabinet interior."""
    return max(cabinet_width - body_thickness * 2, 0.0)


def calculate_depth(
    preset: DepthPreset,
    custom_depth: float | None,
    cabinet_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> float:
    """Resolve a depth preset into millimeters.

    FULL is the cabinet depth minus the front setback, HALF is that halved
    and rounded, CUSTOM uses ``custom_depth`` and falls back to half depth.
    """
    base_depth = cabinet_depth - limits.shelf_setback

    if preset == DepthPreset.HALF:
        return round_half_up(base_depth / 2)
    if preset == DepthPreset.CUSTOM:
        if custom_depth is not None:
            return custom_depth
        return round_half_up(base_depth / 2)
    return base_depth


def calculate_effective_depth(
    shelf: ShelfConfig | None,
    config: ShelvesConfig,
    cabinet_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> float:
    """Depth for one shelf, resolving individual settings before zone settings.

    Args:
        shelf: Individual shelf config, or None when the shelf has none.
        config: Zone-level shelves configuration.
        cabinet_depth: Cabinet outer depth in mm.
        limits: Layout constants.

    Returns:
        Shelf depth in mm.
    """
    if shelf is not None:
        custom = shelf.custom_depth
        if custom is None:
            custom = config.custom_depth
        return calculate_depth(shelf.depth_preset, custom, cabinet_depth, limits)

    return calculate_depth(
        config.depth_preset, config.custom_depth, cabinet_depth, limits
    )


def calculate_positions(
    config: ShelvesConfig,
    section_start_y: float,
    section_height: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> list[float]:
    """Calculate shelf Y-positions from bottom to top.

    UNIFORM mode:
        - a single shelf sits at ``single_shelf_position`` (the middle)
        - otherwise shelf ``i`` sits at
          ``(i / count) * (1 - bottom_offset) + bottom_offset``, so the first
          shelf is lifted off the bottom and spacing runs up to the top

    MANUAL mode uses each shelf's ``position_y`` as an offset from the zone
    bottom, falling back to ``(i + 1) / (len(shelves) + 1)`` of the height.

    Args:
        config: Shelves configuration.
        section_start_y: Bottom of the zone in mm.
        section_height: Height of the zone in mm.
        limits: Layout constants.

    Returns:
        Absolute Y-positions in mm.

    Example:
        >>> # count=3, bottom_offset=0.05, zone (0, 600) -> [30, 220, 410]
    """
    if config.count == 0:
        return []

    positions: list[float] = []

    if config.mode == ShelfMode.UNIFORM:
        bottom_offset = limits.shelf_position_bottom_offset
        count = config.count
        for i in range(count):
            if count == 1:
                ratio = limits.single_shelf_position
            else:
                ratio = (i / count) * (1 - bottom_offset) + bottom_offset
            positions.append(section_start_y + ratio * section_height)
        return positions

    shelf_count = len(config.shelves)
    for i, shelf in enumerate(config.shelves):
        if shelf.position_y is not None:
            positions.append(section_start_y + shelf.position_y)
        else:
            ratio = (i + 1) / (shelf_count + 1)
            positions.append(section_start_y + ratio * section_height)
    return positions


def calculate_z_offset(shelf_depth: float, cabinet_depth: float) -> float:
    """Offset from the cabinet's depth center for a recessed shelf."""
    return (cabinet_depth - shelf_depth) / 2


def calculate_max_custom_depth(
    cabinet_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> float:
    return cabinet_depth - limits.custom_shelf_depth_offset
