"""Interior layout service.

Runs the full layout pipeline for a cabinet interior: the zone tree is
flattened into leaf rectangles, then every DRAWERS and SHELVES leaf is
refined into drawer zones, boxes and shelf positions.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from interiors.application.dtos import (
    CabinetDimensions,
    DrawerLayout,
    DrawerZoneLayout,
    InteriorLayout,
    ShelfLayout,
    ShelfPlacement,
)
from interiors.domain import drawer_layout, shelf_layout
from interiors.domain.bounds import ZoneBounds, calculate_bounds
from interiors.domain.entities import DrawersZone, ShelvesZone, Zone
from interiors.domain.limits import DEFAULT_LIMITS, InteriorLimits
from interiors.domain.value_objects import Rect, ShelfMode

logger = logging.getLogger(__name__)


class InteriorLayoutService:
    """Compute the resolved interior of a cabinet from its zone tree.

    Leaves are treated as virtual cabinets when refining drawers: a DRAWERS
    leaf of height ``h`` is laid out as a cabinet of height ``h + 2t`` so
    the drawer calculators can subtract panel thickness the same way they
    would for a full cabinet.

    Example:
        >>> from interiors.domain import zone_tree
        >>> service = InteriorLayoutService()
        >>> layout = service.generate(
        ...     CabinetDimensions(width=600, height=720, depth=560),
        ...     zone_tree.create_with_shelves(3, depth=0),
        ... )
    """

    def __init__(self, limits: InteriorLimits = DEFAULT_LIMITS) -> None:
        self.limits = limits

    def interior_rect(self, cabinet: CabinetDimensions) -> Rect:
        """Rectangle between the cabinet's side, top and bottom panels.

        X is centered on the cabinet; Y starts on top of the bottom panel.
        """
        inner_width = cabinet.interior_width
        return Rect(
            start_x=-inner_width / 2,
            start_y=cabinet.body_thickness,
            width=inner_width,
            height=cabinet.interior_height,
        )

    def generate(self, cabinet: CabinetDimensions, root_zone: Zone) -> InteriorLayout:
        """Generate the interior layout.

        Args:
            cabinet: Outer cabinet dimensions.
            root_zone: Root of the interior zone tree.

        Returns:
            InteriorLayout with leaf and partition bounds plus resolved
            drawers and shelves.

        Raises:
            ValueError: If the cabinet dimensions leave no interior.
        """
        errors = cabinet.validate()
        if errors:
            raise ValueError("; ".join(errors))

        rect = self.interior_rect(cabinet)
        logger.debug(
            f"Generating interior for {cabinet.width}x{cabinet.height}x"
            f"{cabinet.depth} cabinet, interior {rect.width}x{rect.height}"
        )

        tree_info = calculate_bounds(
            root_zone,
            rect,
            cabinet.body_thickness,
            cabinet.depth,
            self.limits,
        )
        logger.debug(
            f"Zone tree: {tree_info.total_zone_count} zones, "
            f"{len(tree_info.leaf_zone_bounds)} leaves, "
            f"{len(tree_info.partition_bounds)} partitions, "
            f"max depth {tree_info.max_depth}"
        )

        layout = InteriorLayout(cabinet=cabinet, tree_info=tree_info)
        for leaf in tree_info.leaf_zone_bounds:
            if isinstance(leaf.zone, DrawersZone):
                layout.drawer_layouts.append(
                    self._layout_drawers(leaf, leaf.zone, cabinet)
                )
            elif isinstance(leaf.zone, ShelvesZone):
                layout.shelf_layouts.append(
                    self._layout_shelves(leaf, leaf.zone, cabinet)
                )

        logger.debug(
            f"Resolved {layout.drawer_box_count} drawer boxes and "
            f"{layout.shelf_count} shelves"
        )
        return layout

    def _layout_drawers(
        self,
        leaf: ZoneBounds,
        zone: DrawersZone,
        cabinet: CabinetDimensions,
    ) -> DrawerLayout:
        t = cabinet.body_thickness
        config = zone.drawer_config
        slide = drawer_layout.get_slide_config(config.slide_type, self.limits)
        virtual_width = leaf.width + 2 * t
        y_offset = leaf.start_y - t

        result = DrawerLayout(zone=zone, start_x=leaf.start_x, width=leaf.width)
        zone_bounds = drawer_layout.calculate_zone_bounds(
            config.zones, leaf.height + 2 * t, t
        )
        for bounds in zone_bounds:
            bounds = replace(bounds, start_y=bounds.start_y + y_offset)
            boxes = drawer_layout.calculate_box_bounds(
                bounds.zone, bounds.start_y, bounds.box_total_height
            )
            dimensions = [
                drawer_layout.calculate_box_dimensions(
                    virtual_width,
                    cabinet.depth,
                    box.height,
                    t,
                    slide,
                    limits=self.limits,
                )
                for box in boxes
            ]

            above_shelves = bounds.zone.above_box_content or ()
            positions = drawer_layout.calculate_above_box_shelf_positions(bounds)
            shelves = [
                ShelfPlacement(
                    y=y,
                    depth_mm=shelf_layout.calculate_depth(
                        shelf.depth_preset,
                        shelf.custom_depth,
                        cabinet.depth,
                        self.limits,
                    ),
                    width=leaf.width,
                )
                for shelf, y in zip(above_shelves, positions)
            ]

            result.drawer_zones.append(
                DrawerZoneLayout(
                    bounds=bounds,
                    boxes=boxes,
                    box_dimensions=dimensions,
                    above_box_shelves=shelves,
                )
            )

        logger.debug(
            f"Zone {zone.id}: {len(result.drawer_zones)} drawer zones "
            f"({config.slide_type.value})"
        )
        return result

    def _layout_shelves(
        self,
        leaf: ZoneBounds,
        zone: ShelvesZone,
        cabinet: CabinetDimensions,
    ) -> ShelfLayout:
        config = zone.shelves_config
        positions = shelf_layout.calculate_positions(
            config, leaf.start_y, leaf.height, self.limits
        )

        result = ShelfLayout(zone=zone, start_x=leaf.start_x, width=leaf.width)
        for index, y in enumerate(positions):
            shelf = None
            if config.mode == ShelfMode.MANUAL and index < len(config.shelves):
                shelf = config.shelves[index]
            result.shelves.append(
                ShelfPlacement(
                    y=y,
                    depth_mm=shelf_layout.calculate_effective_depth(
                        shelf, config, cabinet.depth, self.limits
                    ),
                    width=leaf.width,
                )
            )

        logger.debug(f"Zone {zone.id}: {len(result.shelves)} shelves")
        return result
