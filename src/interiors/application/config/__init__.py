"""Configuration schema and loading for cabinet interiors.

Public API:
    - InteriorConfiguration: Root configuration model
    - CabinetSchema: Cabinet dimensions model
    - ZoneSchema: Recursive zone model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_zone / zone_to_config: Convert between schema and domain trees
    - config_to_cabinet: Convert cabinet dimensions

Example:
    >>> from pathlib import Path
    >>> from interiors.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wardrobe.json"))
    ...     print(f"Cabinet: {config.cabinet.width}x{config.cabinet.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from interiors.application.config.adapter import (
    config_to_cabinet,
    config_to_zone,
    zone_to_config,
)
from interiors.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from interiors.application.config.schema import (
    SUPPORTED_VERSIONS,
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

__all__ = [
    "AboveBoxShelfSchema",
    "CabinetSchema",
    "ConfigError",
    "DrawerBoxSchema",
    "DrawerConfigSchema",
    "DrawerFrontSchema",
    "DrawerZoneSchema",
    "HeightConfigSchema",
    "InteriorConfiguration",
    "PartitionSchema",
    "SUPPORTED_VERSIONS",
    "ShelfSchema",
    "ShelvesConfigSchema",
    "WidthConfigSchema",
    "ZoneSchema",
    "config_to_cabinet",
    "config_to_zone",
    "load_config",
    "load_config_from_dict",
    "zone_to_config",
]
