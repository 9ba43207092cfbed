"""Size distribution among sibling zones.

These functions know nothing about the tree. They turn sibling sizing
configs plus a total extent into concrete sizes using the same two-pass
approach as section width resolution: fixed sizes are claimed first, then
the remainder is shared by ratio.

Results are left unrounded. Rounding happens once at final geometry
emission so errors do not compound across nested levels.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .entities import Zone


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> float:
    """Round to the nearest whole millimeter with halves rounding up."""
    return float(math.floor(value + 0.5))


def distribute_by_ratio(total: float, ratios: Sequence[float]) -> list[float]:
    """Distribute a total among items proportionally to their ratios.

    Args:
        total: Amount to distribute.
        ratios: Non-negative ratios, one per item.

    Returns:
        Shares parallel to ``ratios``. When every ratio is zero the total
        is split evenly.

    Example:
        >>> distribute_by_ratio(90.0, [1, 2])
        [30.0, 60.0]
    """
    if not ratios:
        return []

    total_ratio = sum(ratios)
    if total_ratio == 0:
        share = total / len(ratios)
        return [share for _ in ratios]

    return [(ratio / total_ratio) * total for ratio in ratios]


def _two_pass(
    fixed: list[float | None],
    ratios: list[float],
    available: float,
) -> list[float]:
    """Claim fixed sizes, then share the remainder among the rest by ratio."""
    available = max(0.0, available)

    fixed_total = 0.0
    claimed: list[float | None] = []
    for size in fixed:
        if size is None:
            claimed.append(None)
            continue
        size = clamp(size, 0.0, available)
        fixed_total += size
        claimed.append(size)

    remaining = max(0.0, available - fixed_total)

    flexible_count = sum(1 for size in claimed if size is None)
    total_ratio = sum(
        ratio for size, ratio in zip(claimed, ratios) if size is None
    )

    result: list[float] = []
    for size, ratio in zip(claimed, ratios):
        if size is not None:
            result.append(size)
        elif total_ratio > 0:
            result.append((ratio / total_ratio) * remaining)
        else:
            result.append(remaining / flexible_count)
    return result


def distribute_widths(
    children: Sequence[Zone],
    total_width: float,
    partition_thickness: float,
) -> list[float]:
    """Distribute width among VERTICAL siblings.

    Algorithm:
    1. Subtract one partition thickness per gap between children
    2. Each FIXED child claims ``min(fixed_mm, available)``
    3. The non-negative remainder is shared by PROPORTIONAL ratio
       (a missing ratio counts as 1; all-zero ratios share evenly)

    Args:
        children: Sibling zones in left-to-right order.
        total_width: Width of the parent rectangle in mm.
        partition_thickness: Thickness of each partition in mm.

    Returns:
        Unrounded widths parallel to ``children``.

    Example:
        >>> # FIXED 200, ratio 1, ratio 2 in 600mm with 18mm partitions
        >>> # available = 600 - 2*18 = 564, remaining = 364
        >>> # -> [200, 121.33, 242.67]
    """
    if not children:
        return []

    partitions_total = partition_thickness * max(0, len(children) - 1)
    available = total_width - partitions_total

    fixed: list[float | None] = []
    ratios: list[float] = []
    for child in children:
        config = child.width_config
        if config is not None and config.is_fixed:
            fixed.append(float(config.fixed_mm))
        else:
            fixed.append(None)
        ratio = config.ratio if config is not None else None
        ratios.append(1.0 if ratio is None else max(0.0, float(ratio)))

    return _two_pass(fixed, ratios, available)


def distribute_heights(
    children: Sequence[Zone],
    total_height: float,
) -> list[float]:
    """Distribute height among HORIZONTAL siblings.

    Same two passes as :func:`distribute_widths` with EXACT in place of
    FIXED and RATIO in place of PROPORTIONAL. No partitions are subtracted.

    Args:
        children: Sibling zones in bottom-to-top order.
        total_height: Height of the parent rectangle in mm.

    Returns:
        Unrounded heights parallel to ``children``.
    """
    if not children:
        return []

    fixed: list[float | None] = []
    ratios: list[float] = []
    for child in children:
        config = child.height_config
        fixed.append(float(config.exact_mm) if config.is_exact else None)
        ratios.append(1.0 if config.ratio is None else max(0.0, float(config.ratio)))

    return _two_pass(fixed, ratios, total_height)
