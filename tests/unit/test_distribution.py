"""Unit tests for sibling size distribution.

Covers the two-pass width and height distribution (fixed sizes first, the
remainder shared by ratio) and the single-pass ratio split used by drawers.
"""

import math

import pytest

from interiors.domain import (
    DivisionDirection,
    HeightConfig,
    WidthConfig,
    WidthMode,
    zone_tree,
)
from interiors.domain.distribution import (
    clamp,
    distribute_by_ratio,
    distribute_heights,
    distribute_widths,
    round_half_up,
)
from interiors.domain.entities import EmptyZone


def _column(width_config: WidthConfig | None = None) -> EmptyZone:
    return EmptyZone(id="c", depth=1, width_config=width_config)


def _row(height_config: HeightConfig) -> EmptyZone:
    return EmptyZone(id="r", depth=1, height_config=height_config)


class TestHelpers:
    """Tests for clamp and rounding helpers."""

    def test_clamp_inside_range(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_clamp_below_and_above(self) -> None:
        assert clamp(-3, 0, 10) == 0
        assert clamp(42, 0, 10) == 10

    def test_round_half_up(self) -> None:
        """Halves round toward positive infinity."""
        assert round_half_up(272.5) == 273
        assert round_half_up(272.4) == 272
        assert round_half_up(2.5) == 3


class TestDistributeByRatio:
    """Tests for distribute_by_ratio."""

    def test_proportional_split(self) -> None:
        assert distribute_by_ratio(90.0, [1, 2]) == pytest.approx([30.0, 60.0])

    def test_zero_ratios_split_evenly(self) -> None:
        assert distribute_by_ratio(90.0, [0, 0, 0]) == pytest.approx([30.0] * 3)

    def test_empty_ratios(self) -> None:
        assert distribute_by_ratio(100.0, []) == []


class TestDistributeWidths:
    """Tests for distribute_widths with FIXED and PROPORTIONAL children."""

    def test_fixed_then_proportional(self) -> None:
        """FIXED 200, ratio 1, ratio 2 in 600mm with 18mm partitions."""
        children = [
            _column(WidthConfig.of_fixed(200)),
            _column(WidthConfig.of_ratio(1)),
            _column(WidthConfig.of_ratio(2)),
        ]
        widths = distribute_widths(children, 600, 18)
        assert widths == pytest.approx([200, 121.333, 242.667], abs=0.01)

    def test_two_equal_columns(self) -> None:
        """Two PROPORTIONAL columns share width minus one partition."""
        widths = distribute_widths([_column(), _column()], 600, 18)
        assert widths == pytest.approx([291, 291])

    def test_missing_width_config_counts_as_ratio_one(self) -> None:
        children = [_column(None), _column(WidthConfig.of_ratio(3))]
        widths = distribute_widths(children, 418, 18)
        assert widths == pytest.approx([100, 300])

    def test_widths_and_partitions_sum_to_total(self) -> None:
        children = [
            _column(WidthConfig.of_fixed(150)),
            _column(WidthConfig.of_ratio(1.5)),
            _column(WidthConfig.of_ratio(0.5)),
            _column(),
        ]
        widths = distribute_widths(children, 1200, 18)
        assert sum(widths) + 3 * 18 == pytest.approx(1200)

    def test_fixed_exceeding_available_is_capped(self) -> None:
        """Overflowing FIXED widths are capped and the rest get zero."""
        children = [_column(WidthConfig.of_fixed(800)), _column()]
        widths = distribute_widths(children, 600, 18)
        assert widths == pytest.approx([582, 0])

    def test_negative_available_never_negative(self) -> None:
        children = [_column(), _column(), _column()]
        widths = distribute_widths(children, 20, 18)
        assert all(w >= 0 and not math.isnan(w) for w in widths)
        assert widths == pytest.approx([0, 0, 0])

    def test_all_zero_ratios_split_evenly(self) -> None:
        children = [_column(WidthConfig.of_ratio(0)), _column(WidthConfig.of_ratio(0))]
        widths = distribute_widths(children, 218, 18)
        assert widths == pytest.approx([100, 100])

    def test_fixed_with_zero_mm_is_proportional(self) -> None:
        """A FIXED child without a width is treated as flexible."""
        children = [_column(WidthConfig(mode=WidthMode.FIXED, fixed_mm=0))]
        assert distribute_widths(children, 500, 18) == pytest.approx([500])

    def test_no_children(self) -> None:
        assert distribute_widths([], 600, 18) == []


class TestDistributeHeights:
    """Tests for distribute_heights with EXACT and RATIO children."""

    def test_exact_then_ratio(self) -> None:
        children = [
            _row(HeightConfig.of_exact(300)),
            _row(HeightConfig.of_ratio(1)),
            _row(HeightConfig.of_ratio(1)),
        ]
        heights = distribute_heights(children, 684)
        assert heights == pytest.approx([300, 192, 192])

    def test_no_partition_subtraction(self) -> None:
        children = [_row(HeightConfig()), _row(HeightConfig())]
        assert distribute_heights(children, 600) == pytest.approx([300, 300])

    def test_ratio_weights(self) -> None:
        children = [_row(HeightConfig.of_ratio(1)), _row(HeightConfig.of_ratio(3))]
        assert distribute_heights(children, 400) == pytest.approx([100, 300])

    def test_overflowing_exact_heights_clamp_remainder(self) -> None:
        children = [
            _row(HeightConfig.of_exact(500)),
            _row(HeightConfig.of_exact(500)),
            _row(HeightConfig.of_ratio(1)),
        ]
        heights = distribute_heights(children, 600)
        assert heights == pytest.approx([500, 500, 0])
        assert all(h >= 0 for h in heights)

    def test_uses_zone_tree_children(self) -> None:
        """Works directly on children of a nested zone."""
        nested = zone_tree.create_nested(
            DivisionDirection.HORIZONTAL, depth=0, child_count=4
        )
        assert distribute_heights(nested.children, 800) == pytest.approx([200] * 4)
