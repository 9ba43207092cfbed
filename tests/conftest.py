"""Pytest configuration and shared fixtures for interior layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from interiors.application import CabinetDimensions
from interiors.domain import (
    DEFAULT_LIMITS,
    DivisionDirection,
    InteriorLimits,
    NestedZone,
    zone_tree,
)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def limits() -> InteriorLimits:
    return DEFAULT_LIMITS


@pytest.fixture
def cabinet() -> CabinetDimensions:
    """A 600 x 720 x 560 mm base cabinet with 18 mm panels."""
    return CabinetDimensions(width=600, height=720, depth=560, body_thickness=18)


@pytest.fixture
def two_columns() -> NestedZone:
    """Root split into two equal EMPTY columns with one partition."""
    zone = zone_tree.create_nested(DivisionDirection.VERTICAL, depth=0, child_count=2)
    assert isinstance(zone, NestedZone)
    return zone


@pytest.fixture
def three_rows() -> NestedZone:
    """Root split into three equal EMPTY rows."""
    zone = zone_tree.create_nested(
        DivisionDirection.HORIZONTAL, depth=0, child_count=3
    )
    assert isinstance(zone, NestedZone)
    return zone


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Wardrobe-style interior: drawers at the bottom, two columns above."""
    return {
        "schema_version": "1.0",
        "cabinet": {"width": 600, "height": 720, "depth": 560, "body_thickness": 18},
        "root_zone": {
            "id": "root",
            "content_type": "NESTED",
            "division_direction": "HORIZONTAL",
            "children": [
                {
                    "id": "drawers",
                    "content_type": "DRAWERS",
                    "height_config": {"mode": "EXACT", "exact_mm": 300},
                    "drawer_config": {
                        "slide_type": "SIDE_MOUNT",
                        "zones": [
                            {"id": "dz1", "height_ratio": 1},
                            {"id": "dz2", "height_ratio": 1},
                        ],
                    },
                },
                {
                    "id": "columns",
                    "content_type": "NESTED",
                    "division_direction": "VERTICAL",
                    "children": [
                        {
                            "id": "left",
                            "content_type": "SHELVES",
                            "shelves_config": {"count": 3},
                        },
                        {"id": "right", "content_type": "EMPTY"},
                    ],
                },
            ],
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Write configuration data to a JSON file and return its path."""

    def _write(data: Any, name: str = "interior.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
