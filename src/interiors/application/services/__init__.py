"""Application services."""

from interiors.application.services.interior_layout import InteriorLayoutService

__all__ = ["InteriorLayoutService"]
