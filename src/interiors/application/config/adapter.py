"""Adapter between configuration schema models and domain zones.

``config_to_zone`` builds a domain tree from a parsed configuration,
deriving tree depth from nesting and generating ids that were omitted.
``zone_to_config`` converts a domain tree back into schema models, so a
tree can be saved and reloaded without loss.
"""

from interiors.application.config.schema import (
    AboveBoxShelfSchema,
    CabinetSchema,
    DrawerBoxSchema,
    DrawerConfigSchema,
    DrawerFrontSchema,
    DrawerZoneSchema,
    HeightConfigSchema,
    InteriorConfiguration,
    PartitionSchema,
    ShelfSchema,
    ShelvesConfigSchema,
    WidthConfigSchema,
    ZoneSchema,
)
from interiors.application.dtos import CabinetDimensions
from interiors.domain import drawer_layout, shelf_layout, zone_tree
from interiors.domain.entities import (
    DrawersZone,
    EmptyZone,
    NestedZone,
    ShelvesZone,
    Zone,
)
from interiors.domain.ids import (
    generate_above_box_shelf_id,
    generate_partition_id,
    generate_shelf_id,
    generate_zone_id,
)
from interiors.domain.value_objects import (
    AboveBoxShelf,
    DivisionDirection,
    DrawerBox,
    DrawerConfig,
    DrawerFront,
    DrawerZone,
    HeightConfig,
    Partition,
    ShelfConfig,
    ShelvesConfig,
    WidthConfig,
    ZoneContentType,
)


# =============================================================================
# Schema -> domain
# =============================================================================


def config_to_cabinet(
    config: InteriorConfiguration | CabinetSchema,
) -> CabinetDimensions:
    """Convert the cabinet section of a configuration to CabinetDimensions."""
    cabinet = config.cabinet if isinstance(config, InteriorConfiguration) else config
    return CabinetDimensions(
        width=cabinet.width,
        height=cabinet.height,
        depth=cabinet.depth,
        body_thickness=cabinet.body_thickness,
    )


def _height_to_domain(schema: HeightConfigSchema) -> HeightConfig:
    return HeightConfig(mode=schema.mode, ratio=schema.ratio, exact_mm=schema.exact_mm)


def _width_to_domain(schema: WidthConfigSchema | None) -> WidthConfig | None:
    if schema is None:
        return None
    return WidthConfig(mode=schema.mode, fixed_mm=schema.fixed_mm, ratio=schema.ratio)


def _partition_to_domain(schema: PartitionSchema) -> Partition:
    return Partition(
        id=schema.id or generate_partition_id(),
        enabled=schema.enabled,
        depth_preset=schema.depth_preset,
        custom_depth=schema.custom_depth,
        material_id=schema.material_id,
    )


def shelves_config_to_domain(schema: ShelvesConfigSchema) -> ShelvesConfig:
    return ShelvesConfig(
        mode=schema.mode,
        count=schema.count,
        depth_preset=schema.depth_preset,
        custom_depth=schema.custom_depth,
        material_id=schema.material_id,
        shelves=tuple(
            ShelfConfig(
                id=shelf.id or generate_shelf_id(),
                depth_preset=shelf.depth_preset,
                custom_depth=shelf.custom_depth,
                position_y=shelf.position_y,
                material_id=shelf.material_id,
            )
            for shelf in schema.shelves
        ),
    )


def _drawer_zone_to_domain(schema: DrawerZoneSchema) -> DrawerZone:
    front = None
    if schema.front is not None:
        front = DrawerFront(
            handle=schema.front.handle, material_id=schema.front.material_id
        )

    above = None
    if schema.above_box_content is not None:
        above = tuple(
            AboveBoxShelf(
                id=shelf.id or generate_above_box_shelf_id(),
                depth_preset=shelf.depth_preset,
                custom_depth=shelf.custom_depth,
            )
            for shelf in schema.above_box_content
        )

    return DrawerZone(
        id=schema.id or generate_zone_id(),
        height_ratio=schema.height_ratio,
        front=front,
        boxes=tuple(DrawerBox(height_ratio=box.height_ratio) for box in schema.boxes),
        box_to_front_ratio=schema.box_to_front_ratio,
        above_box_content=above,
    )


def drawer_config_to_domain(schema: DrawerConfigSchema) -> DrawerConfig:
    return DrawerConfig(
        slide_type=schema.slide_type,
        zones=tuple(_drawer_zone_to_domain(zone) for zone in schema.zones),
        box_material_id=schema.box_material_id,
        bottom_material_id=schema.bottom_material_id,
    )


def config_to_zone(schema: ZoneSchema, depth: int = 0) -> Zone:
    """Build a domain zone tree from a zone schema.

    Missing content configs get the same defaults as a freshly created zone.
    A VERTICAL zone that lists no partitions gets one per gap between its
    children; an explicit partition list is kept as written and checked by
    the validator.

    Args:
        schema: Parsed zone configuration.
        depth: Tree level of ``schema`` (0 for the root).

    Returns:
        The domain zone with its subtree.
    """
    common = dict(
        id=schema.id or generate_zone_id(),
        depth=depth,
        height_config=_height_to_domain(schema.height_config),
        width_config=_width_to_domain(schema.width_config),
    )

    if schema.content_type == ZoneContentType.SHELVES:
        if schema.shelves_config is None:
            shelves = shelf_layout.create_shelves_config()
        else:
            shelves = shelves_config_to_domain(schema.shelves_config)
        return ShelvesZone(**common, shelves_config=shelves)

    if schema.content_type == ZoneContentType.DRAWERS:
        if schema.drawer_config is None:
            drawers = drawer_layout.create_drawer_config()
        else:
            drawers = drawer_config_to_domain(schema.drawer_config)
        return DrawersZone(**common, drawer_config=drawers)

    if schema.content_type == ZoneContentType.NESTED:
        direction = schema.division_direction or DivisionDirection.HORIZONTAL
        children = tuple(config_to_zone(child, depth + 1) for child in schema.children)
        partitions = tuple(_partition_to_domain(p) for p in schema.partitions)
        if direction == DivisionDirection.VERTICAL and not partitions:
            partitions = tuple(
                zone_tree.create_partition() for _ in range(max(0, len(children) - 1))
            )
        return NestedZone(
            **common,
            division_direction=direction,
            children=children,
            partitions=partitions,
        )

    return EmptyZone(**common)


# =============================================================================
# Domain -> schema
# =============================================================================


def _shelves_config_to_schema(config: ShelvesConfig) -> ShelvesConfigSchema:
    return ShelvesConfigSchema(
        mode=config.mode,
        count=config.count,
        depth_preset=config.depth_preset,
        custom_depth=config.custom_depth,
        material_id=config.material_id,
        shelves=[
            ShelfSchema(
                id=shelf.id,
                depth_preset=shelf.depth_preset,
                custom_depth=shelf.custom_depth,
                position_y=shelf.position_y,
                material_id=shelf.material_id,
            )
            for shelf in config.shelves
        ],
    )


def _drawer_config_to_schema(config: DrawerConfig) -> DrawerConfigSchema:
    zones = []
    for zone in config.zones:
        front = None
        if zone.front is not None:
            front = DrawerFrontSchema(
                handle=zone.front.handle, material_id=zone.front.material_id
            )
        above = None
        if zone.above_box_content is not None:
            above = [
                AboveBoxShelfSchema(
                    id=shelf.id,
                    depth_preset=shelf.depth_preset,
                    custom_depth=shelf.custom_depth,
                )
                for shelf in zone.above_box_content
            ]
        zones.append(
            DrawerZoneSchema(
                id=zone.id,
                height_ratio=zone.height_ratio,
                front=front,
                boxes=[DrawerBoxSchema(height_ratio=b.height_ratio) for b in zone.boxes],
                box_to_front_ratio=zone.box_to_front_ratio,
                above_box_content=above,
            )
        )
    return DrawerConfigSchema(
        slide_type=config.slide_type,
        zones=zones,
        box_material_id=config.box_material_id,
        bottom_material_id=config.bottom_material_id,
    )


def zone_to_config(zone: Zone) -> ZoneSchema:
    """Convert a domain zone tree back into a zone schema."""
    height = zone.height_config
    width = zone.width_config
    fields = dict(
        id=zone.id,
        content_type=zone.content_type,
        height_config=HeightConfigSchema(
            mode=height.mode, ratio=height.ratio, exact_mm=height.exact_mm
        ),
        width_config=(
            None
            if width is None
            else WidthConfigSchema(
                mode=width.mode, fixed_mm=width.fixed_mm, ratio=width.ratio
            )
        ),
    )

    if isinstance(zone, ShelvesZone):
        fields["shelves_config"] = _shelves_config_to_schema(zone.shelves_config)
    elif isinstance(zone, DrawersZone):
        fields["drawer_config"] = _drawer_config_to_schema(zone.drawer_config)
    elif isinstance(zone, NestedZone):
        fields["division_direction"] = zone.division_direction
        fields["children"] = [zone_to_config(child) for child in zone.children]
        fields["partitions"] = [
            PartitionSchema(
                id=p.id,
                enabled=p.enabled,
                depth_preset=p.depth_preset,
                custom_depth=p.custom_depth,
                material_id=p.material_id,
            )
            for p in zone.partitions
        ]

    return ZoneSchema(**fields)
