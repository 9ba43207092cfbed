"""Domain layer - zone tree model and layout calculations."""

from . import drawer_layout, shelf_layout, zone_tree
from .bounds import (
    PartitionBounds,
    ZoneBounds,
    ZoneTreeInfo,
    calculate_bounds,
    calculate_partition_depth,
)
from .distribution import distribute_by_ratio, distribute_heights, distribute_widths
from .entities import (
    DrawersZone,
    EmptyZone,
    NestedZone,
    ShelvesZone,
    Zone,
)
from .limits import DEFAULT_LIMITS, SLIDE_PRESETS, InteriorLimits, SlidePreset
from .validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_tree,
    validate_zone,
)
from .value_objects import (
    AboveBoxShelf,
    DepthPreset,
    DivisionDirection,
    DrawerBox,
    DrawerConfig,
    DrawerFront,
    DrawerZone,
    HeightConfig,
    HeightMode,
    Partition,
    Rect,
    ShelfConfig,
    ShelfMode,
    ShelvesConfig,
    SlideType,
    WidthConfig,
    WidthMode,
    ZoneContentType,
)
from .zone_tree import ZoneLimitError

__all__ = [
    "AboveBoxShelf",
    "DEFAULT_LIMITS",
    "DepthPreset",
    "DivisionDirection",
    "DrawerBox",
    "DrawerConfig",
    "DrawerFront",
    "DrawerZone",
    "DrawersZone",
    "EmptyZone",
    "HeightConfig",
    "HeightMode",
    "InteriorLimits",
    "NestedZone",
    "Partition",
    "PartitionBounds",
    "Rect",
    "SLIDE_PRESETS",
    "ShelfConfig",
    "ShelfMode",
    "ShelvesConfig",
    "ShelvesZone",
    "SlidePreset",
    "SlideType",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WidthConfig",
    "WidthMode",
    "Zone",
    "ZoneBounds",
    "ZoneContentType",
    "ZoneLimitError",
    "ZoneTreeInfo",
    "calculate_bounds",
    "calculate_partition_depth",
    "distribute_by_ratio",
    "distribute_heights",
    "distribute_widths",
    "drawer_layout",
    "shelf_layout",
    "validate_tree",
    "validate_zone",
    "zone_tree",
]
