"""Recursive zone tree operations.

Every operation is pure: updaters return a new tree and reuse untouched
subtrees, so earlier revisions (undo history) stay valid. Structural limits
are enforced silently; an operation that cannot apply returns the original
reference, which callers can detect with ``is``.

The ``checked_*`` functions are a fallible counterpart for callers that
prefer an explicit error over a silent no-op.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import replace

from . import drawer_layout, shelf_layout
from .distribution import clamp
from .entities import (
    DrawersZone,
    EmptyZone,
    NestedZone,
    ShelvesZone,
    Zone,
)
from .ids import generate_partition_id, generate_zone_id
from .limits import DEFAULT_LIMITS, InteriorLimits
from .value_objects import (
    DepthPreset,
    DivisionDirection,
    DrawerConfig,
    HeightConfig,
    Partition,
    ShelvesConfig,
    WidthConfig,
    ZoneContentType,
)


class ZoneLimitError(ValueError):
    """Raised by the checked API when a structural limit blocks an edit."""

    pass


ZoneUpdater = Callable[[Zone], Zone]


# =============================================================================
# Creators
# =============================================================================


def create_zone(
    content_type: ZoneContentType,
    depth: int,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> Zone:
    """Create a zone with content-appropriate defaults.

    SHELVES get a uniform shelves config, DRAWERS a default drawer config with
    external fronts, NESTED a horizontal division with one empty child.
    """
    zone_id = generate_zone_id()

    if content_type == ZoneContentType.SHELVES:
        return ShelvesZone(
            id=zone_id,
            depth=depth,
            shelves_config=shelf_layout.create_shelves_config(limits=limits),
        )
    if content_type == ZoneContentType.DRAWERS:
        return DrawersZone(
            id=zone_id,
            depth=depth,
            drawer_config=drawer_layout.create_drawer_config(limits=limits),
        )
    if content_type == ZoneContentType.NESTED:
        return NestedZone(
            id=zone_id,
            depth=depth,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(create_empty(depth + 1),),
        )
    return EmptyZone(id=zone_id, depth=depth)


def create_empty(depth: int) -> EmptyZone:
    return EmptyZone(id=generate_zone_id(), depth=depth)


def create_with_shelves(
    count: int,
    depth: int,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ShelvesZone:
    """Create a SHELVES zone with ``count`` shelves (clamped)."""
    return ShelvesZone(
        id=generate_zone_id(),
        depth=depth,
        shelves_config=shelf_layout.create_shelves_config(count, limits=limits),
    )


def create_with_drawers(
    zone_count: int,
    depth: int,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> DrawersZone:
    """Create a DRAWERS zone with ``zone_count`` drawer zones (clamped)."""
    return DrawersZone(
        id=generate_zone_id(),
        depth=depth,
        drawer_config=drawer_layout.create_drawer_config(zone_count, limits=limits),
    )


def create_partition(
    depth_preset: DepthPreset = DepthPreset.FULL,
    enabled: bool = False,
) -> Partition:
    return Partition(
        id=generate_partition_id(), enabled=enabled, depth_preset=depth_preset
    )


def create_nested(
    direction: DivisionDirection,
    depth: int,
    child_count: int = 2,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> Zone:
    """Create a nested zone with empty children.

    At or beyond ``max_zone_depth - 1`` the children would exceed the depth
    limit, so an EMPTY zone is returned instead.

    Args:
        direction: Division direction of the new zone.
        depth: Tree level of the new zone.
        child_count: Number of empty children, clamped to
            ``[1, max_children_per_zone]``.
        limits: Structural limits.

    Returns:
        A NestedZone, or an EmptyZone when nesting is not allowed.
    """
    if depth >= limits.max_zone_depth - 1:
        return create_empty(depth)

    count = int(clamp(child_count, 1, limits.max_children_per_zone))
    children = tuple(create_empty(depth + 1) for _ in range(count))
    partitions: tuple[Partition, ...] = ()
    if direction == DivisionDirection.VERTICAL:
        partitions = tuple(create_partition() for _ in range(count - 1))

    return NestedZone(
        id=generate_zone_id(),
        depth=depth,
        division_direction=direction,
        children=children,
        partitions=partitions,
    )


def clone_zone(zone: Zone) -> Zone:
    """Deep copy a zone tree, assigning fresh ids to every node."""
    new_id = generate_zone_id()

    if isinstance(zone, ShelvesZone):
        return replace(
            zone,
            id=new_id,
            shelves_config=shelf_layout.clone_shelves_config(zone.shelves_config),
        )
    if isinstance(zone, DrawersZone):
        return replace(
            zone,
            id=new_id,
            drawer_config=drawer_layout.clone_drawer_config(zone.drawer_config),
        )
    if isinstance(zone, NestedZone):
        return replace(
            zone,
            id=new_id,
            children=tuple(clone_zone(child) for child in zone.children),
            partitions=tuple(
                replace(p, id=generate_partition_id()) for p in zone.partitions
            ),
        )
    return replace(zone, id=new_id)


# =============================================================================
# Updaters
# =============================================================================


def update_content_type(
    zone: Zone,
    content_type: ZoneContentType,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> Zone:
    """Switch a zone's content type, discarding the previous content config.

    Identity and sizing are kept. Returns the original zone when the type is
    unchanged or when NESTED is requested at the depth limit.
    """
    if zone.content_type == content_type:
        return zone

    if content_type == ZoneContentType.NESTED and not can_nest(zone, limits):
        return zone

    common = dict(
        id=zone.id,
        depth=zone.depth,
        height_config=zone.height_config,
        width_config=zone.width_config,
    )

    if content_type == ZoneContentType.SHELVES:
        return ShelvesZone(
            **common, shelves_config=shelf_layout.create_shelves_config(limits=limits)
        )
    if content_type == ZoneContentType.DRAWERS:
        return DrawersZone(
            **common, drawer_config=drawer_layout.create_drawer_config(limits=limits)
        )
    if content_type == ZoneContentType.NESTED:
        return NestedZone(
            **common,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(create_empty(zone.depth + 1),),
        )
    return EmptyZone(**common)


def set_division_direction(zone: Zone, direction: DivisionDirection) -> Zone:
    """Change a nested zone's direction.

    Switching to VERTICAL tops up partitions so there is one per gap.
    """
    if not isinstance(zone, NestedZone):
        return zone
    if zone.division_direction == direction:
        return zone

    partitions = zone.partitions
    if direction == DivisionDirection.VERTICAL:
        partitions = _fit_partitions(partitions, len(zone.children))
    return replace(zone, division_direction=direction, partitions=partitions)


def _fit_partitions(
    partitions: tuple[Partition, ...], child_count: int
) -> tuple[Partition, ...]:
    """Pad or trim partitions to one per gap between ``child_count`` children."""
    wanted = max(0, child_count - 1)
    if len(partitions) > wanted:
        return partitions[:wanted]
    missing = wanted - len(partitions)
    return partitions + tuple(create_partition() for _ in range(missing))


def add_child(
    zone: Zone,
    child: Zone | None = None,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> Zone:
    """Append a child to a nested zone.

    No-op for non-nested zones and at ``max_children_per_zone``. VERTICAL
    zones receive a partition for the new gap.
    """
    if not can_add_child(zone, limits):
        return zone

    assert isinstance(zone, NestedZone)
    new_child = child if child is not None else create_empty(zone.depth + 1)
    children = zone.children + (new_child,)

    partitions = zone.partitions
    if zone.is_vertical:
        partitions = _fit_partitions(partitions, len(children))

    return replace(zone, children=children, partitions=partitions)


def remove_child(zone: Zone, child_id: str) -> Zone:
    """Remove a child by id, trimming surplus partitions.

    A nested zone always keeps at least one child; removing the last one
    returns the original zone.
    """
    if not isinstance(zone, NestedZone) or not zone.children:
        return zone
    if len(zone.children) <= 1:
        return zone

    children = tuple(c for c in zone.children if c.id != child_id)
    if len(children) == len(zone.children):
        return zone

    partitions = zone.partitions[: max(0, len(children) - 1)]
    return replace(zone, children=children, partitions=partitions)


def update_child(zone: Zone, child_id: str, updater: ZoneUpdater) -> Zone:
    """Apply ``updater`` to the direct child with ``child_id``."""
    if not isinstance(zone, NestedZone) or not zone.children:
        return zone

    return replace(
        zone,
        children=tuple(
            updater(child) if child.id == child_id else child
            for child in zone.children
        ),
    )


def move_child(zone: Zone, child_id: str, direction: str) -> Zone:
    """Move a child one step within its parent.

    The meaning of ``direction`` follows the on-screen layout:

    - HORIZONTAL (stacked bottom to top): 'up' moves to a higher index,
      toward the top of the stack
    - VERTICAL (columns left to right): 'up' moves to a lower index,
      toward the left

    Moves past either end and unknown ids return the original zone.
    """
    if not isinstance(zone, NestedZone) or not zone.children:
        return zone

    index = next(
        (i for i, child in enumerate(zone.children) if child.id == child_id), -1
    )
    if index == -1:
        return zone

    if zone.division_direction == DivisionDirection.HORIZONTAL:
        new_index = index + 1 if direction == "up" else index - 1
    else:
        new_index = index - 1 if direction == "up" else index + 1

    if new_index < 0 or new_index >= len(zone.children):
        return zone

    children = list(zone.children)
    children[index], children[new_index] = children[new_index], children[index]
    return replace(zone, children=tuple(children))


def set_height_config(zone: Zone, config: HeightConfig) -> Zone:
    return replace(zone, height_config=config)


def set_width_config(zone: Zone, config: WidthConfig | None) -> Zone:
    return replace(zone, width_config=config)


def update_shelves_config(zone: Zone, **changes) -> Zone:
    """Apply field changes to a SHELVES zone's config."""
    if not isinstance(zone, ShelvesZone):
        return zone
    return replace(zone, shelves_config=replace(zone.shelves_config, **changes))


def replace_shelves_config(zone: Zone, config: ShelvesConfig) -> Zone:
    if not isinstance(zone, ShelvesZone):
        return zone
    return replace(zone, shelves_config=config)


def update_drawer_config(zone: Zone, **changes) -> Zone:
    """Apply field changes to a DRAWERS zone's config."""
    if not isinstance(zone, DrawersZone):
        return zone
    return replace(zone, drawer_config=replace(zone.drawer_config, **changes))


def replace_drawer_config(zone: Zone, config: DrawerConfig) -> Zone:
    if not isinstance(zone, DrawersZone):
        return zone
    return replace(zone, drawer_config=config)


def add_partition(zone: Zone, after_index: int) -> Zone:
    """Insert a partition at ``after_index`` if a gap is missing one."""
    if not isinstance(zone, NestedZone) or not zone.is_vertical:
        return zone

    max_partitions = max(0, len(zone.children) - 1)
    if len(zone.partitions) >= max_partitions:
        return zone

    partitions = list(zone.partitions)
    partitions.insert(after_index, create_partition())
    return replace(zone, partitions=tuple(partitions))


def update_partition(zone: Zone, partition_id: str, **changes) -> Zone:
    if not isinstance(zone, NestedZone) or not zone.partitions:
        return zone
    return replace(
        zone,
        partitions=tuple(
            replace(p, **changes) if p.id == partition_id else p
            for p in zone.partitions
        ),
    )


def remove_partition(zone: Zone, partition_id: str) -> Zone:
    if not isinstance(zone, NestedZone) or not zone.partitions:
        return zone
    return replace(
        zone,
        partitions=tuple(p for p in zone.partitions if p.id != partition_id),
    )


def update_at_path(zone: Zone, path: list[str], updater: ZoneUpdater) -> Zone:
    """Apply ``updater`` to the zone reached by following ``path``.

    Only the ancestors along the path are rebuilt; every sibling subtree is
    reused as-is. A path that cannot be followed returns the original zone.

    Args:
        zone: Root of the (sub)tree.
        path: Child ids from ``zone`` down to the target; ``[]`` targets
            ``zone`` itself.
        updater: Function returning the replacement zone.

    Returns:
        The updated tree.
    """
    if not path:
        return updater(zone)
    if not isinstance(zone, NestedZone) or not zone.children:
        return zone

    next_id, rest = path[0], path[1:]
    changed = False
    children: list[Zone] = []
    for child in zone.children:
        if child.id == next_id:
            updated = update_at_path(child, rest, updater)
            changed = changed or updated is not child
            children.append(updated)
        else:
            children.append(child)

    if not changed:
        return zone
    return replace(zone, children=tuple(children))


def update_zone_by_id(root: Zone, zone_id: str, updater: ZoneUpdater) -> Zone:
    """Locate ``zone_id`` and apply ``updater`` along its path."""
    path = find_zone_path(root, zone_id)
    if path is None:
        return root
    return update_at_path(root, path, updater)


# =============================================================================
# Queries
# =============================================================================


def _children(zone: Zone) -> tuple[Zone, ...]:
    if isinstance(zone, NestedZone):
        return zone.children
    return ()


def find_zone_by_id(zone: Zone, zone_id: str) -> Zone | None:
    """Find a zone anywhere in the tree, or None."""
    if zone.id == zone_id:
        return zone
    for child in _children(zone):
        found = find_zone_by_id(child, zone_id)
        if found is not None:
            return found
    return None


def find_zone_path(zone: Zone, target_id: str) -> list[str] | None:
    """Child ids from ``zone`` down to ``target_id``.

    Returns ``[]`` when ``zone`` is the target and None when it is absent.
    """
    if zone.id == target_id:
        return []
    for child in _children(zone):
        child_path = find_zone_path(child, target_id)
        if child_path is not None:
            return [child.id, *child_path]
    return None


def find_parent_zone(zone: Zone, child_id: str) -> NestedZone | None:
    """Find the nested zone that directly contains ``child_id``."""
    if not isinstance(zone, NestedZone):
        return None
    for child in zone.children:
        if child.id == child_id:
            return zone
        found = find_parent_zone(child, child_id)
        if found is not None:
            return found
    return None


def iter_zones(zone: Zone) -> Iterator[Zone]:
    """Yield every zone in pre-order."""
    yield zone
    for child in _children(zone):
        yield from iter_zones(child)


def get_all_zones(zone: Zone) -> list[Zone]:
    return list(iter_zones(zone))


def get_all_partitions(zone: Zone) -> list[Partition]:
    partitions: list[Partition] = []
    for node in iter_zones(zone):
        if isinstance(node, NestedZone):
            partitions.extend(node.partitions)
    return partitions


def count_zones(zone: Zone) -> int:
    """Number of zones in the tree including ``zone``."""
    return 1 + sum(count_zones(child) for child in _children(zone))


def get_max_depth(zone: Zone) -> int:
    return max([zone.depth, *(get_max_depth(c) for c in _children(zone))])


def has_nested_zones(zone: Zone) -> bool:
    return any(isinstance(node, NestedZone) for node in iter_zones(zone))


def can_add_child(zone: Zone, limits: InteriorLimits = DEFAULT_LIMITS) -> bool:
    if not isinstance(zone, NestedZone):
        return False
    return len(zone.children) < limits.max_children_per_zone


def can_nest(zone: Zone, limits: InteriorLimits = DEFAULT_LIMITS) -> bool:
    return zone.depth < limits.max_zone_depth - 1


def get_summary(zone: Zone) -> str:
    """Short human-readable description of a zone's content."""
    if isinstance(zone, ShelvesZone):
        return f"Shelves ({zone.shelves_config.count})"
    if isinstance(zone, DrawersZone):
        return f"Drawers ({len(zone.drawer_config.zones)})"
    if isinstance(zone, NestedZone):
        noun = "columns" if zone.is_vertical else "rows"
        return f"{len(zone.children)} {noun}"
    return "Empty"


# =============================================================================
# Checked API
# =============================================================================


def checked_create_nested(
    direction: DivisionDirection,
    depth: int,
    child_count: int = 2,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> NestedZone:
    """Like :func:`create_nested` but raises instead of substituting EMPTY."""
    if depth >= limits.max_zone_depth - 1:
        raise ZoneLimitError(
            f"Cannot nest at depth {depth}: maximum zone depth is "
            f"{limits.max_zone_depth}"
        )
    if not 1 <= child_count <= limits.max_children_per_zone:
        raise ZoneLimitError(
            f"Child count {child_count} outside 1..{limits.max_children_per_zone}"
        )
    zone = create_nested(direction, depth, child_count, limits)
    assert isinstance(zone, NestedZone)
    return zone


def checked_add_child(
    zone: Zone,
    child: Zone | None = None,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> NestedZone:
    """Like :func:`add_child` but raises when the child cannot be added."""
    if not isinstance(zone, NestedZone):
        raise ZoneLimitError(
            f"Zone {zone.id} is {zone.content_type.value}, not NESTED"
        )
    if len(zone.children) >= limits.max_children_per_zone:
        raise ZoneLimitError(
            f"Zone {zone.id} already has {len(zone.children)} children, "
            f"max is {limits.max_children_per_zone}"
        )
    result = add_child(zone, child, limits)
    assert isinstance(result, NestedZone)
    return result


def checked_remove_child(zone: Zone, child_id: str) -> NestedZone:
    """Like :func:`remove_child` but raises when nothing would be removed."""
    if not isinstance(zone, NestedZone):
        raise ZoneLimitError(
            f"Zone {zone.id} is {zone.content_type.value}, not NESTED"
        )
    if all(child.id != child_id for child in zone.children):
        raise ZoneLimitError(f"Zone {zone.id} has no child {child_id}")
    if len(zone.children) <= 1:
        raise ZoneLimitError(f"Cannot remove the last child of zone {zone.id}")
    result = remove_child(zone, child_id)
    assert isinstance(result, NestedZone)
    return result


def checked_update_content_type(
    zone: Zone,
    content_type: ZoneContentType,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> Zone:
    """Like :func:`update_content_type` but raises at the depth limit."""
    if content_type == ZoneContentType.NESTED and not can_nest(zone, limits):
        raise ZoneLimitError(
            f"Cannot nest zone {zone.id} at depth {zone.depth}: maximum zone "
            f"depth is {limits.max_zone_depth}"
        )
    return update_content_type(zone, content_type, limits)
