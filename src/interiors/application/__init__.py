"""Application layer - configuration, orchestration and result DTOs."""

from .dtos import (
    CabinetDimensions,
    DrawerLayout,
    DrawerZoneLayout,
    InteriorLayout,
    ShelfLayout,
    ShelfPlacement,
)
from .services import InteriorLayoutService

__all__ = [
    "CabinetDimensions",
    "DrawerLayout",
    "DrawerZoneLayout",
    "InteriorLayout",
    "InteriorLayoutService",
    "ShelfLayout",
    "ShelfPlacement",
]
