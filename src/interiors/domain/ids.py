"""Opaque identifier generation for zones, partitions and shelves.

Identifiers are only ever compared for equality; their structure carries
no meaning.
"""

from __future__ import annotations

import uuid


def generate_id(prefix: str = "id") -> str:
    """Generate a unique identifier with the given prefix."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def generate_zone_id() -> str:
    return generate_id("zone")


def generate_partition_id() -> str:
    return generate_id("partition")


def generate_shelf_id() -> str:
    return generate_id("shelf")


def generate_above_box_shelf_id() -> str:
    return generate_id("above_shelf")
