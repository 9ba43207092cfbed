"""Validation of zone trees and their leaf configurations.

Validators never raise. They collect every violation into a
ValidationResult so callers can display all problems at once. Paths follow
the zone-id chain from the root, with dotted/indexed suffixes for fields
inside a zone, e.g. ``root/zone_ab/zone_cd.drawer_config.zones[1]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .entities import DrawersZone, NestedZone, ShelvesZone, Zone
from .limits import DEFAULT_LIMITS, InteriorLimits
from .value_objects import (
    DepthPreset,
    DrawerConfig,
    DrawerZone,
    HeightMode,
    ShelfConfig,
    ShelfMode,
    ShelvesConfig,
    WidthMode,
)

ROOT_PATH = "root"


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Location of the invalid field (e.g. "root/zone_ab.height_config")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Location of the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the tree has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def messages(self) -> list[str]:
        """Error messages without their paths."""
        return [error.message for error in self.errors]

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 when valid (warnings allowed), 1 on errors."""
        return 1 if self.errors else 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


# =============================================================================
# Zone validation
# =============================================================================


def validate_zone(
    zone: Zone,
    path: str = ROOT_PATH,
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    """Validate a single zone without descending into its children.

    Checks depth, sizing configs, child count and partition count, plus the
    leaf configuration of SHELVES and DRAWERS zones.
    """
    result = ValidationResult()

    if zone.depth >= limits.max_zone_depth:
        result.add_error(
            path,
            f"Zone depth {zone.depth} exceeds maximum {limits.max_zone_depth - 1}",
            zone.depth,
        )

    height = zone.height_config
    if height.mode == HeightMode.RATIO and (height.ratio or 0) <= 0:
        result.add_error(
            f"{path}.height_config.ratio", "Height ratio must be positive", height.ratio
        )
    if (
        height.mode == HeightMode.EXACT
        and (height.exact_mm or 0) < limits.min_zone_height_mm
    ):
        result.add_error(
            f"{path}.height_config.exact_mm",
            f"Exact height must be at least {limits.min_zone_height_mm:g}mm",
            height.exact_mm,
        )

    width = zone.width_config
    if (
        width is not None
        and width.mode == WidthMode.FIXED
        and (width.fixed_mm or 0) < limits.min_zone_width_mm
    ):
        result.add_error(
            f"{path}.width_config.fixed_mm",
            f"Fixed width must be at least {limits.min_zone_width_mm:g}mm",
            width.fixed_mm,
        )

    if isinstance(zone, NestedZone):
        _validate_nested(zone, path, result, limits)
    elif isinstance(zone, ShelvesZone):
        result.merge(
            validate_shelves_config(
                zone.shelves_config, f"{path}.shelves_config", limits
            )
        )
    elif isinstance(zone, DrawersZone):
        result.merge(
            validate_drawer_config(zone.drawer_config, f"{path}.drawer_config", limits)
        )

    return result


def _validate_nested(
    zone: NestedZone,
    path: str,
    result: ValidationResult,
    limits: InteriorLimits,
) -> None:
    child_count = len(zone.children)
    if child_count == 0:
        result.add_error(
            f"{path}.children", "Nested zone must have at least one child"
        )
    if child_count > limits.max_children_per_zone:
        result.add_error(
            f"{path}.children",
            f"Zone has {child_count} children, max is {limits.max_children_per_zone}",
            child_count,
        )

    for child in zone.children:
        if child.depth != zone.depth + 1:
            result.add_error(
                f"{path}/{child.id}",
                f"Child depth {child.depth} does not follow parent depth "
                f"{zone.depth}",
                child.depth,
            )

    if zone.is_vertical and child_count > 0:
        expected = child_count - 1
        if len(zone.partitions) != expected:
            result.add_error(
                f"{path}.partitions",
                f"Vertical zone with {child_count} children needs {expected} "
                f"partitions, has {len(zone.partitions)}",
                len(zone.partitions),
            )

    for index, partition in enumerate(zone.partitions):
        if partition.depth_preset == DepthPreset.CUSTOM and partition.custom_depth is None:
            result.add_warning(
                f"{path}.partitions[{index}]",
                "CUSTOM partition has no custom depth, half depth will be used",
                "Set custom_depth or use the HALF preset",
            )


def validate_tree(
    zone: Zone,
    limits: InteriorLimits = DEFAULT_LIMITS,
    path: str = ROOT_PATH,
) -> ValidationResult:
    """Validate a zone and all of its descendants.

    Args:
        zone: Root of the tree to validate.
        limits: Structural limits to validate against.
        path: Path of ``zone``; children extend it with their ids.

    Returns:
        ValidationResult holding every error and warning in the tree.
    """
    result = validate_zone(zone, path, limits)
    if isinstance(zone, NestedZone):
        for child in zone.children:
            result.merge(validate_tree(child, limits, f"{path}/{child.id}"))
    return result


# =============================================================================
# Drawer validation
# =============================================================================


def validate_drawer_config(
    config: DrawerConfig,
    path: str = "drawer_config",
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    result = ValidationResult()

    zone_count = len(config.zones)
    if zone_count < 1:
        result.add_error(
            f"{path}.zones", "Drawer configuration must have at least one zone"
        )
    if zone_count > limits.max_drawer_zones_per_zone:
        result.add_error(
            f"{path}.zones",
            f"Cannot have more than {limits.max_drawer_zones_per_zone} zones",
            zone_count,
        )

    for index, zone in enumerate(config.zones):
        result.merge(validate_drawer_zone(zone, f"{path}.zones[{index}]", limits))

    return result


def validate_drawer_zone(
    zone: DrawerZone,
    path: str = "zone",
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    """Validate one drawer zone: ratio, boxes and above-box shelves."""
    result = ValidationResult()

    if zone.height_ratio <= 0:
        result.add_error(
            f"{path}.height_ratio", "Height ratio must be positive", zone.height_ratio
        )

    box_count = len(zone.boxes)
    if box_count < 1:
        result.add_error(f"{path}.boxes", "Zone must have at least one box")
    if box_count > limits.max_boxes_per_drawer_zone:
        result.add_error(
            f"{path}.boxes",
            f"Cannot have more than {limits.max_boxes_per_drawer_zone} boxes per zone",
            box_count,
        )
    for index, box in enumerate(zone.boxes):
        if box.height_ratio <= 0:
            result.add_error(
                f"{path}.boxes[{index}].height_ratio",
                "Box height ratio must be positive",
                box.height_ratio,
            )

    ratio = zone.box_to_front_ratio
    if ratio is not None:
        if not limits.box_to_front_ratio_min <= ratio <= limits.box_to_front_ratio_max:
            result.add_error(
                f"{path}.box_to_front_ratio",
                f"Box-to-front ratio must be between "
                f"{limits.box_to_front_ratio_min:g} and "
                f"{limits.box_to_front_ratio_max:g}",
                ratio,
            )
        elif zone.front is None and ratio < 1:
            result.add_warning(
                f"{path}.box_to_front_ratio",
                "Internal drawer ignores box-to-front ratio",
                "Add a front or remove box_to_front_ratio",
            )

    above = zone.above_box_content or ()
    if len(above) > limits.max_shelves_above_drawer:
        result.add_error(
            f"{path}.above_box_content",
            f"Cannot have more than {limits.max_shelves_above_drawer} shelves "
            f"above drawer",
            len(above),
        )

    return result


# =============================================================================
# Shelf validation
# =============================================================================


def validate_shelves_config(
    config: ShelvesConfig,
    path: str = "shelves_config",
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    result = ValidationResult()

    if config.count < 0:
        result.add_error(
            f"{path}.count", "Shelf count cannot be negative", config.count
        )
    if config.count > limits.max_shelves_per_zone:
        result.add_error(
            f"{path}.count",
            f"Shelf count cannot exceed {limits.max_shelves_per_zone}",
            config.count,
        )

    if config.mode == ShelfMode.MANUAL and len(config.shelves) != config.count:
        result.add_error(
            f"{path}.shelves",
            "In MANUAL mode, shelves array length must match count",
            len(config.shelves),
        )

    if config.depth_preset == DepthPreset.CUSTOM:
        if config.custom_depth is None:
            result.add_error(
                f"{path}.custom_depth",
                "Custom depth must be specified when using CUSTOM preset",
            )
        elif not _custom_depth_in_range(config.custom_depth, limits):
            result.add_error(
                f"{path}.custom_depth",
                f"Custom depth must be between {limits.custom_shelf_depth_min:g} "
                f"and {limits.custom_shelf_depth_max:g}mm",
                config.custom_depth,
            )

    if config.mode == ShelfMode.MANUAL:
        for index, shelf in enumerate(config.shelves):
            result.merge(validate_shelf(shelf, f"{path}.shelves[{index}]", limits))

    return result


def validate_shelf(
    shelf: ShelfConfig,
    path: str = "shelf",
    limits: InteriorLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    """Validate an individual shelf.

    A CUSTOM shelf without its own depth is valid; it falls back to the
    zone-level custom depth.
    """
    result = ValidationResult()
    if (
        shelf.depth_preset == DepthPreset.CUSTOM
        and shelf.custom_depth is not None
        and not _custom_depth_in_range(shelf.custom_depth, limits)
    ):
        result.add_error(
            f"{path}.custom_depth",
            f"Shelf custom depth must be between "
            f"{limits.custom_shelf_depth_min:g} and "
            f"{limits.custom_shelf_depth_max:g}mm",
            shelf.custom_depth,
        )
    return result


def _custom_depth_in_range(depth: float, limits: InteriorLimits) -> bool:
    return limits.custom_shelf_depth_min <= depth <= limits.custom_shelf_depth_max
