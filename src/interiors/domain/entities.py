"""Zone entities forming the recursive interior tree.

A zone is one of four variants sharing identity, sizing and tree level:

- EmptyZone: open space
- ShelvesZone: carries a ShelvesConfig
- DrawersZone: carries a DrawerConfig
- NestedZone: carries ordered children and the partitions between them

Variants are frozen; every structural edit in ``zone_tree`` returns a new
value and reuses untouched subtrees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .value_objects import (
    DivisionDirection,
    DrawerConfig,
    HeightConfig,
    Partition,
    ShelvesConfig,
    WidthConfig,
    ZoneContentType,
)


@dataclass(frozen=True)
class _ZoneBase:
    """Fields shared by every zone variant.

    Attributes:
        id: Unique zone identifier.
        depth: Tree level, 0 for the root.
        height_config: Height sizing relative to siblings.
        width_config: Width sizing relative to siblings (VERTICAL parents).
    """

    content_type: ClassVar[ZoneContentType]

    id: str
    depth: int = 0
    height_config: HeightConfig = field(default_factory=HeightConfig)
    width_config: WidthConfig | None = None

    @property
    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class EmptyZone(_ZoneBase):
    """Zone with no physical content."""

    content_type: ClassVar[ZoneContentType] = ZoneContentType.EMPTY


@dataclass(frozen=True)
class ShelvesZone(_ZoneBase):
    """Zone filled with shelves."""

    content_type: ClassVar[ZoneContentType] = ZoneContentType.SHELVES

    shelves_config: ShelvesConfig = field(default_factory=ShelvesConfig)


@dataclass(frozen=True)
class DrawersZone(_ZoneBase):
    """Zone filled with drawers."""

    content_type: ClassVar[ZoneContentType] = ZoneContentType.DRAWERS

    drawer_config: DrawerConfig = field(default_factory=DrawerConfig)


@dataclass(frozen=True)
class NestedZone(_ZoneBase):
    """Zone subdivided into child zones.

    Attributes:
        division_direction: HORIZONTAL stacks children bottom to top,
            VERTICAL lays them out left to right.
        children: Ordered child zones.
        partitions: Dividers between adjacent children, used for VERTICAL.
    """

    content_type: ClassVar[ZoneContentType] = ZoneContentType.NESTED

    division_direction: DivisionDirection = DivisionDirection.HORIZONTAL
    children: tuple["Zone", ...] = field(default_factory=tuple)
    partitions: tuple[Partition, ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_vertical(self) -> bool:
        return self.division_direction == DivisionDirection.VERTICAL


Zone = Union[EmptyZone, ShelvesZone, DrawersZone, NestedZone]

ZONE_TYPES: dict[ZoneContentType, type] = {
    ZoneContentType.EMPTY: EmptyZone,
    ZoneContentType.SHELVES: ShelvesZone,
    ZoneContentType.DRAWERS: DrawersZone,
    ZoneContentType.NESTED: NestedZone,
}
