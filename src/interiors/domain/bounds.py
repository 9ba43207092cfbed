"""Flatten a zone tree into leaf and partition rectangles.

The calculator walks the tree once, top-down and depth-first, handing each
nested zone's rectangle to its children via the distribution solver. Only
leaves are recorded; nested zones are pure containers. Partitions between
VERTICAL children are emitted as separate rectangles centered on the gap.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .distribution import clamp, distribute_heights, distribute_widths, round_half_up
from .entities import NestedZone, Zone
from .limits import DEFAULT_LIMITS, InteriorLimits
from .value_objects import DepthPreset, DivisionDirection, Partition, Rect
from .zone_tree import count_zones, create_partition, get_max_depth


@dataclass(frozen=True)
class ZoneBounds:
    """Rectangle assigned to a leaf zone.

    Attributes:
        zone: The leaf zone.
        start_x: Left edge in mm.
        start_y: Bottom edge in mm.
        width: Width in mm.
        height: Height in mm.
        depth: Tree level of the zone.
    """

    zone: Zone
    start_x: float
    start_y: float
    width: float
    height: float
    depth: int

    @property
    def rect(self) -> Rect:
        return Rect(self.start_x, self.start_y, self.width, self.height)


@dataclass(frozen=True)
class PartitionBounds:
    """Placement of a vertical partition panel.

    Attributes:
        partition: The partition config.
        x: Center line of the panel in mm.
        start_y: Bottom edge in mm.
        height: Panel height in mm.
        depth_mm: Front-to-back depth of the panel in mm.
    """

    partition: Partition
    x: float
    start_y: float
    height: float
    depth_mm: float


@dataclass(frozen=True)
class ZoneTreeInfo:
    """Flattened result of a bounds calculation."""

    leaf_zone_bounds: list[ZoneBounds] = field(default_factory=list)
    partition_bounds: list[PartitionBounds] = field(default_factory=list)
    total_zone_count: int = 0
    max_depth: int = 0


def calculate_partition_depth(
    partition: Partition,
    cabinet_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> float:
    """Resolve a partition's depth preset into millimeters.

    FULL spans the cabinet depth minus the front setback, HALF is half of
    that rounded, CUSTOM uses ``custom_depth`` (the unrounded half when
    unset) clamped to ``[partition_depth_min, full]``.
    """
    full_depth = cabinet_depth - limits.shelf_setback

    if partition.depth_preset == DepthPreset.HALF:
        return round_half_up(full_depth / 2)
    if partition.depth_preset == DepthPreset.CUSTOM:
        custom = partition.custom_depth
        if custom is None:
            custom = full_depth / 2
        return clamp(custom, limits.partition_depth_min, full_depth)
    return full_depth


def calculate_bounds(
    zone: Zone,
    parent_bounds: Rect,
    body_thickness: float,
    cabinet_depth: float,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ZoneTreeInfo:
    """Calculate leaf and partition rectangles for a zone tree.

    Args:
        zone: Root of the tree.
        parent_bounds: Rectangle assigned to the root (usually the cabinet
            interior).
        body_thickness: Partition thickness in mm.
        cabinet_depth: Cabinet outer depth in mm, used for partition depth.
        limits: Layout constants.

    Returns:
        ZoneTreeInfo with leaves in pre-order and partitions in the order
        they were encountered.
    """
    leaves: list[ZoneBounds] = []
    partitions: list[PartitionBounds] = []

    def visit(node: Zone, bounds: Rect) -> None:
        if not isinstance(node, NestedZone) or not node.children:
            leaves.append(
                ZoneBounds(
                    zone=node,
                    start_x=bounds.start_x,
                    start_y=bounds.start_y,
                    width=bounds.width,
                    height=bounds.height,
                    depth=node.depth,
                )
            )
            return

        if node.division_direction == DivisionDirection.VERTICAL:
            widths = distribute_widths(node.children, bounds.width, body_thickness)
            current_x = bounds.start_x
            last = len(node.children) - 1
            for index, (child, width) in enumerate(zip(node.children, widths)):
                visit(
                    child,
                    Rect(current_x, bounds.start_y, width, bounds.height),
                )
                current_x += width

                if index < last:
                    if index < len(node.partitions):
                        partition = node.partitions[index]
                    else:
                        partition = create_partition()
                    partitions.append(
                        PartitionBounds(
                            partition=partition,
                            x=current_x + body_thickness / 2,
                            start_y=bounds.start_y,
                            height=bounds.height,
                            depth_mm=calculate_partition_depth(
                                partition, cabinet_depth, limits
                            ),
                        )
                    )
                    current_x += body_thickness
        else:
            heights = distribute_heights(node.children, bounds.height)
            current_y = bounds.start_y
            for child, height in zip(node.children, heights):
                visit(
                    child,
                    Rect(bounds.start_x, current_y, bounds.width, height),
                )
                current_y += height

    visit(zone, parent_bounds)

    return ZoneTreeInfo(
        leaf_zone_bounds=leaves,
        partition_bounds=partitions,
        total_zone_count=count_zones(zone),
        max_depth=get_max_depth(zone),
    )
