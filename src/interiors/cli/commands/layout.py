"""Layout command for printing the resolved interior of a configuration."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from interiors.application import InteriorLayout, InteriorLayoutService
from interiors.application.config import (
    ConfigError,
    config_to_cabinet,
    config_to_zone,
    load_config,
)
from interiors.cli.commands.validate import display_load_error
from interiors.domain import validate_tree, zone_tree


class OutputFormat(str, Enum):
    """Output formats for the layout command."""

    TEXT = "text"
    JSON = "json"


def layout_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Compute and print the interior layout of a configuration file.

    The zone tree is validated first; a tree with errors is not laid out.

    Example:
        interiors layout wardrobe.json --format json
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    root = config_to_zone(config.root_zone)
    result = validate_tree(root)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)

    layout = InteriorLayoutService().generate(config_to_cabinet(config), root)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(layout_to_dict(layout), indent=2))
    else:
        typer.echo(format_layout(layout))


def _mm(value: float) -> float:
    return round(value, 2)


def layout_to_dict(layout: InteriorLayout) -> dict[str, Any]:
    """Convert an InteriorLayout into JSON-serializable data."""
    info = layout.tree_info
    cabinet = layout.cabinet
    return {
        "cabinet": {
            "width": cabinet.width,
            "height": cabinet.height,
            "depth": cabinet.depth,
            "body_thickness": cabinet.body_thickness,
        },
        "total_zone_count": info.total_zone_count,
        "max_depth": info.max_depth,
        "leaves": [
            {
                "zone_id": leaf.zone.id,
                "content_type": leaf.zone.content_type.value,
                "depth": leaf.depth,
                "start_x": _mm(leaf.start_x),
                "start_y": _mm(leaf.start_y),
                "width": _mm(leaf.width),
                "height": _mm(leaf.height),
            }
            for leaf in info.leaf_zone_bounds
        ],
        "partitions": [
            {
                "partition_id": p.partition.id,
                "enabled": p.partition.enabled,
                "x": _mm(p.x),
                "start_y": _mm(p.start_y),
                "height": _mm(p.height),
                "depth": _mm(p.depth_mm),
            }
            for p in info.partition_bounds
        ],
        "drawers": [
            {
                "zone_id": drawers.zone.id,
                "slide_type": drawers.zone.drawer_config.slide_type.value,
                "drawer_zones": [
                    {
                        "drawer_zone_id": dz.bounds.zone.id,
                        "has_front": dz.bounds.zone.has_external_front,
                        "start_y": _mm(dz.bounds.start_y),
                        "front_height": _mm(dz.bounds.front_height),
                        "box_total_height": _mm(dz.bounds.box_total_height),
                        "boxes": [
                            {
                                "start_y": _mm(box.start_y),
                                "height_mm": box.height_mm,
                                "box_width": _mm(dims.box_width),
                                "box_depth": _mm(dims.box_depth),
                                "box_side_height": _mm(dims.box_side_height),
                            }
                            for box, dims in zip(dz.boxes, dz.box_dimensions)
                        ],
                        "above_box_shelves": [
                            {"y": _mm(s.y), "depth": _mm(s.depth_mm)}
                            for s in dz.above_box_shelves
                        ],
                    }
                    for dz in drawers.drawer_zones
                ],
            }
            for drawers in layout.drawer_layouts
        ],
        "shelves": [
            {
                "zone_id": shelves.zone.id,
                "shelves": [
                    {"y": _mm(s.y), "depth": _mm(s.depth_mm), "width": _mm(s.width)}
                    for s in shelves.shelves
                ],
            }
            for shelves in layout.shelf_layouts
        ],
    }


def format_layout(layout: InteriorLayout) -> str:
    """Format an InteriorLayout as a human-readable report."""
    info = layout.tree_info
    cabinet = layout.cabinet
    lines = [
        f"Cabinet {cabinet.width:g} x {cabinet.height:g} x {cabinet.depth:g} mm "
        f"(body {cabinet.body_thickness:g} mm)",
        f"Zones: {info.total_zone_count} total, "
        f"{len(info.leaf_zone_bounds)} leaves, max depth {info.max_depth}",
        "",
        "Leaves:",
    ]
    for leaf in info.leaf_zone_bounds:
        lines.append(
            f"  {leaf.zone.id}  {zone_tree.get_summary(leaf.zone):<14}"
            f"x={leaf.start_x:.1f} y={leaf.start_y:.1f} "
            f"w={leaf.width:.1f} h={leaf.height:.1f}"
        )

    if info.partition_bounds:
        lines.append("")
        lines.append("Partitions:")
        for p in info.partition_bounds:
            state = "" if p.partition.enabled else " (disabled)"
            lines.append(
                f"  x={p.x:.1f} y={p.start_y:.1f} h={p.height:.1f} "
                f"depth={p.depth_mm:.1f}{state}"
            )

    for drawers in layout.drawer_layouts:
        lines.append("")
        lines.append(f"Drawers in {drawers.zone.id}:")
        for index, dz in enumerate(drawers.drawer_zones, start=1):
            front = "front" if dz.bounds.zone.has_external_front else "internal"
            lines.append(
                f"  [{index}] {front} y={dz.bounds.start_y:.1f} "
                f"h={dz.bounds.front_height:.1f} "
                f"boxes={dz.bounds.box_total_height:.1f}"
            )
            for box, dims in zip(dz.boxes, dz.box_dimensions):
                lines.append(
                    f"      box {box.height_mm:g}mm space: "
                    f"{dims.box_width:.1f} x {dims.box_depth:.1f} x "
                    f"{dims.box_side_height:.1f}"
                )
            for shelf in dz.above_box_shelves:
                lines.append(
                    f"      shelf y={shelf.y:.1f} depth={shelf.depth_mm:.1f}"
                )

    for shelves in layout.shelf_layouts:
        lines.append("")
        lines.append(f"Shelves in {shelves.zone.id}:")
        for shelf in shelves.shelves:
            lines.append(
                f"  y={shelf.y:.1f} depth={shelf.depth_mm:.1f} "
                f"width={shelf.width:.1f}"
            )

    return "\n".join(lines)
