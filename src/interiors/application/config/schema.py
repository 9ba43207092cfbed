"""Pydantic configuration schema models for cabinet interiors.

This module defines the JSON configuration format for an interior zone tree
plus the cabinet dimensions it is laid out in. It uses Pydantic v2 for
validation and serialization.

Domain enums are reused directly so that configuration values and domain
values never drift apart. Structural limits (depth, child counts, minimum
sizes) are deliberately not enforced here; the domain validator reports
those so the ``validate`` command can list every problem in one pass.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from interiors.domain.value_objects import (
    DepthPreset,
    DivisionDirection,
    HeightMode,
    ShelfMode,
    SlideType,
    WidthMode,
    ZoneContentType,
)

# Supported schema versions for configuration files
# Version 1.0: Initial interior zone tree schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


# =============================================================================
# Sizing
# =============================================================================


class HeightConfigSchema(BaseModel):
    """Height of a zone relative to its siblings.

    Attributes:
        mode: RATIO shares the remaining height, EXACT requests millimeters.
        ratio: Share of the remaining height in RATIO mode.
        exact_mm: Requested height in millimeters in EXACT mode.
    """

    model_config = ConfigDict(extra="forbid")

    mode: HeightMode = HeightMode.RATIO
    ratio: float | None = 1.0
    exact_mm: float | None = None

    @model_validator(mode="after")
    def validate_mode_fields(self) -> "HeightConfigSchema":
        """Validate that EXACT mode carries a height."""
        if self.mode == HeightMode.EXACT and self.exact_mm is None:
            raise ValueError("exact_mm is required when mode is EXACT")
        return self


class WidthConfigSchema(BaseModel):
    """Width of a zone inside a VERTICAL parent.

    Attributes:
        mode: FIXED requests millimeters, PROPORTIONAL shares the remainder.
        fixed_mm: Requested width in millimeters in FIXED mode.
        ratio: Share of the remaining width in PROPORTIONAL mode.
    """

    model_config = ConfigDict(extra="forbid")

    mode: WidthMode = WidthMode.PROPORTIONAL
    fixed_mm: float | None = None
    ratio: float | None = 1.0

    @model_validator(mode="after")
    def validate_mode_fields(self) -> "WidthConfigSchema":
        """Validate that FIXED mode carries a width."""
        if self.mode == WidthMode.FIXED and self.fixed_mm is None:
            raise ValueError("fixed_mm is required when mode is FIXED")
        return self


class PartitionSchema(BaseModel):
    """Vertical divider between two adjacent columns."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    enabled: bool = False
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = Field(default=None, gt=0)
    material_id: str | None = None


# =============================================================================
# Shelves
# =============================================================================


class ShelfSchema(BaseModel):
    """Individual shelf settings for MANUAL mode.

    Attributes:
        id: Shelf identifier (generated when omitted).
        depth_preset: Per-shelf depth preset.
        custom_depth: Per-shelf custom depth in mm.
        position_y: Offset from the bottom of the zone in mm.
        material_id: Optional material override.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None
    position_y: float | None = Field(default=None, ge=0)
    material_id: str | None = None


class ShelvesConfigSchema(BaseModel):
    """Shelf content of a SHELVES zone."""

    model_config = ConfigDict(extra="forbid")

    mode: ShelfMode = ShelfMode.UNIFORM
    count: int = 2
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None
    shelves: list[ShelfSchema] = Field(default_factory=list)


# =============================================================================
# Drawers
# =============================================================================


class DrawerFrontSchema(BaseModel):
    """Visible drawer front."""

    model_config = ConfigDict(extra="forbid")

    handle: str | None = None
    material_id: str | None = None


class DrawerBoxSchema(BaseModel):
    """Single drawer box sized by ratio within its drawer zone."""

    model_config = ConfigDict(extra="forbid")

    height_ratio: float = 1.0


class AboveBoxShelfSchema(BaseModel):
    """Shelf above a reduced-height drawer box."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    depth_preset: DepthPreset = DepthPreset.FULL
    custom_depth: float | None = None


class DrawerZoneSchema(BaseModel):
    """One band of a DRAWERS zone.

    Set ``front`` to null for an internal drawer without a visible front.

    Attributes:
        id: Drawer zone identifier (generated when omitted).
        height_ratio: Share of the drawer section height.
        front: Front descriptor, or null for an internal drawer.
        boxes: Boxes stacked behind the front, bottom first.
        box_to_front_ratio: Fraction of the zone height used by boxes.
        above_box_content: Shelves placed above reduced boxes.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    height_ratio: float = 1.0
    front: DrawerFrontSchema | None = Field(default_factory=DrawerFrontSchema)
    boxes: list[DrawerBoxSchema] = Field(
        default_factory=lambda: [DrawerBoxSchema()]
    )
    box_to_front_ratio: float | None = None
    above_box_content: list[AboveBoxShelfSchema] | None = None


class DrawerConfigSchema(BaseModel):
    """Drawer content of a DRAWERS zone."""

    model_config = ConfigDict(extra="forbid")

    slide_type: SlideType = SlideType.SIDE_MOUNT
    zones: list[DrawerZoneSchema] = Field(default_factory=list)
    box_material_id: str | None = None
    bottom_material_id: str | None = None


# =============================================================================
# Zones
# =============================================================================


class ZoneSchema(BaseModel):
    """A zone in the interior tree.

    ``content_type`` decides which of the content fields may be present:

    - SHELVES: ``shelves_config``
    - DRAWERS: ``drawer_config``
    - NESTED: ``division_direction``, ``children`` and ``partitions``
    - EMPTY: none of them

    Tree depth is not part of the configuration; it is derived from nesting.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    content_type: ZoneContentType = ZoneContentType.EMPTY
    height_config: HeightConfigSchema = Field(default_factory=HeightConfigSchema)
    width_config: WidthConfigSchema | None = None
    shelves_config: ShelvesConfigSchema | None = None
    drawer_config: DrawerConfigSchema | None = None
    division_direction: DivisionDirection | None = None
    children: list["ZoneSchema"] = Field(default_factory=list)
    partitions: list[PartitionSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_content_fields(self) -> "ZoneSchema":
        """Validate that only the content matching content_type is present."""
        content = self.content_type
        if self.shelves_config is not None and content != ZoneContentType.SHELVES:
            raise ValueError(
                f"'shelves_config' is only allowed for SHELVES zones, "
                f"not {content.value}"
            )
        if self.drawer_config is not None and content != ZoneContentType.DRAWERS:
            raise ValueError(
                f"'drawer_config' is only allowed for DRAWERS zones, "
                f"not {content.value}"
            )
        if content != ZoneContentType.NESTED:
            if self.children or self.partitions or self.division_direction:
                raise ValueError(
                    "'children', 'partitions' and 'division_direction' are only "
                    f"allowed for NESTED zones, not {content.value}"
                )
        return self


ZoneSchema.model_rebuild()


class CabinetSchema(BaseModel):
    """Outer cabinet dimensions the interior is laid out in.

    Attributes:
        width: Outer width in mm.
        height: Outer height in mm.
        depth: Outer depth in mm.
        body_thickness: Panel thickness in mm, also used for partitions.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    body_thickness: float = Field(default=18.0, gt=0)

    @model_validator(mode="after")
    def validate_interior_space(self) -> "CabinetSchema":
        """Validate that the side panels leave interior space."""
        inner = 2 * self.body_thickness
        if inner >= self.width or inner >= self.height:
            raise ValueError(
                f"body_thickness ({self.body_thickness}) leaves no interior "
                f"space in a {self.width}x{self.height} cabinet"
            )
        return self


class InteriorConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet: Outer cabinet dimensions.
        root_zone: Root of the interior zone tree.

    Example:
        >>> config = InteriorConfiguration(
        ...     schema_version="1.0",
        ...     cabinet=CabinetSchema(width=600, height=720, depth=560),
        ...     root_zone=ZoneSchema(content_type=ZoneContentType.SHELVES),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetSchema
    root_zone: ZoneSchema = Field(default_factory=ZoneSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
