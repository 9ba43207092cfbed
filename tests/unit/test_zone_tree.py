"""Unit tests for zone tree creation, updates and queries."""

import pytest

from interiors.domain import (
    DEFAULT_LIMITS,
    DepthPreset,
    DivisionDirection,
    DrawersZone,
    EmptyZone,
    HeightConfig,
    InteriorLimits,
    NestedZone,
    ShelfMode,
    ShelvesZone,
    WidthConfig,
    ZoneContentType,
    ZoneLimitError,
    zone_tree,
)


def _strip_ids(zone) -> dict:
    """Structural fingerprint of a tree with every id removed."""
    data = {
        "type": zone.content_type,
        "depth": zone.depth,
        "height": zone.height_config,
        "width": zone.width_config,
    }
    if isinstance(zone, ShelvesZone):
        config = zone.shelves_config
        data["shelves"] = (config.mode, config.count, len(config.shelves))
    if isinstance(zone, DrawersZone):
        data["drawers"] = [
            (z.height_ratio, z.front, z.boxes) for z in zone.drawer_config.zones
        ]
    if isinstance(zone, NestedZone):
        data["direction"] = zone.division_direction
        data["children"] = [_strip_ids(c) for c in zone.children]
        data["partitions"] = [
            (p.enabled, p.depth_preset, p.custom_depth) for p in zone.partitions
        ]
    return data


@pytest.fixture
def nested_tree() -> NestedZone:
    """Root with rows [SHELVES, columns[EMPTY, DRAWERS]]."""
    columns = zone_tree.create_nested(DivisionDirection.VERTICAL, depth=1)
    columns = zone_tree.update_child(
        columns,
        columns.children[1].id,
        lambda z: zone_tree.update_content_type(z, ZoneContentType.DRAWERS),
    )
    root = zone_tree.create_nested(DivisionDirection.HORIZONTAL, depth=0, child_count=1)
    root = zone_tree.update_child(
        root,
        root.children[0].id,
        lambda z: zone_tree.update_content_type(z, ZoneContentType.SHELVES),
    )
    root = zone_tree.add_child(root, columns)
    assert isinstance(root, NestedZone)
    return root


class TestCreateZone:
    """Tests for create_zone defaults per content type."""

    def test_create_empty(self) -> None:
        zone = zone_tree.create_zone(ZoneContentType.EMPTY, depth=1)
        assert isinstance(zone, EmptyZone)
        assert zone.depth == 1
        assert zone.height_config == HeightConfig()
        assert zone.width_config is None

    def test_create_shelves(self) -> None:
        zone = zone_tree.create_zone(ZoneContentType.SHELVES, depth=0)
        assert isinstance(zone, ShelvesZone)
        assert zone.shelves_config.mode == ShelfMode.UNIFORM
        assert zone.shelves_config.count == 2

    def test_create_drawers(self) -> None:
        """DRAWERS default to three zones with external fronts."""
        zone = zone_tree.create_zone(ZoneContentType.DRAWERS, depth=0)
        assert isinstance(zone, DrawersZone)
        assert len(zone.drawer_config.zones) == 3
        assert all(z.front is not None for z in zone.drawer_config.zones)

    def test_create_nested_has_one_empty_child(self) -> None:
        zone = zone_tree.create_zone(ZoneContentType.NESTED, depth=0)
        assert isinstance(zone, NestedZone)
        assert zone.division_direction == DivisionDirection.HORIZONTAL
        assert len(zone.children) == 1
        assert isinstance(zone.children[0], EmptyZone)
        assert zone.children[0].depth == 1

    def test_ids_are_unique(self) -> None:
        ids = {zone_tree.create_empty(0).id for _ in range(50)}
        assert len(ids) == 50

    def test_create_with_shelves_clamps_count(self) -> None:
        assert zone_tree.create_with_shelves(99, depth=0).shelves_config.count == 10
        assert zone_tree.create_with_shelves(-2, depth=0).shelves_config.count == 0

    def test_create_with_drawers_clamps_count(self) -> None:
        zone = zone_tree.create_with_drawers(0, depth=0)
        assert len(zone.drawer_config.zones) == 1
        zone = zone_tree.create_with_drawers(20, depth=0)
        assert len(zone.drawer_config.zones) == 8


class TestCreateNested:
    """Tests for create_nested."""

    def test_vertical_gets_partition_per_gap(self) -> None:
        zone = zone_tree.create_nested(DivisionDirection.VERTICAL, 0, child_count=4)
        assert isinstance(zone, NestedZone)
        assert len(zone.children) == 4
        assert len(zone.partitions) == 3
        assert all(p.depth_preset == DepthPreset.FULL for p in zone.partitions)

    def test_horizontal_has_no_partitions(self) -> None:
        zone = zone_tree.create_nested(DivisionDirection.HORIZONTAL, 0, child_count=3)
        assert isinstance(zone, NestedZone)
        assert zone.partitions == ()

    def test_children_are_one_level_deeper(self) -> None:
        zone = zone_tree.create_nested(DivisionDirection.VERTICAL, 1)
        assert all(child.depth == 2 for child in zone.children)

    def test_child_count_clamped(self) -> None:
        high = zone_tree.create_nested(DivisionDirection.VERTICAL, 0, child_count=10)
        low = zone_tree.create_nested(DivisionDirection.VERTICAL, 0, child_count=0)
        assert len(high.children) == 6
        assert len(high.partitions) == 5
        assert len(low.children) == 1
        assert low.partitions == ()

    def test_depth_cap_returns_empty(self) -> None:
        """At max_zone_depth - 1 an EMPTY zone is substituted."""
        zone = zone_tree.create_nested(DivisionDirection.VERTICAL, depth=3)
        assert isinstance(zone, EmptyZone)
        assert zone.depth == 3

    def test_depth_below_cap_nests(self) -> None:
        zone = zone_tree.create_nested(DivisionDirection.VERTICAL, depth=2)
        assert isinstance(zone, NestedZone)

    def test_custom_limits(self) -> None:
        limits = InteriorLimits(max_zone_depth=2)
        assert isinstance(
            zone_tree.create_nested(DivisionDirection.VERTICAL, 1, limits=limits),
            EmptyZone,
        )


class TestCloneZone:
    """Tests for clone_zone."""

    def test_clone_assigns_fresh_ids(self, nested_tree: NestedZone) -> None:
        clone = zone_tree.clone_zone(nested_tree)
        original_ids = {z.id for z in zone_tree.get_all_zones(nested_tree)}
        clone_ids = {z.id for z in zone_tree.get_all_zones(clone)}
        assert original_ids.isdisjoint(clone_ids)

        original_partitions = {p.id for p in zone_tree.get_all_partitions(nested_tree)}
        clone_partitions = {p.id for p in zone_tree.get_all_partitions(clone)}
        assert original_partitions.isdisjoint(clone_partitions)

    def test_clone_is_structurally_equal(self, nested_tree: NestedZone) -> None:
        clone = zone_tree.clone_zone(nested_tree)
        assert _strip_ids(clone) == _strip_ids(nested_tree)

    def test_clone_renews_drawer_zone_ids(self) -> None:
        zone = zone_tree.create_with_drawers(2, depth=0)
        clone = zone_tree.clone_zone(zone)
        original = {z.id for z in zone.drawer_config.zones}
        cloned = {z.id for z in clone.drawer_config.zones}
        assert original.isdisjoint(cloned)


class TestFind:
    """Tests for find_zone_by_id, find_zone_path and find_parent_zone."""

    def test_find_root(self, nested_tree: NestedZone) -> None:
        assert zone_tree.find_zone_by_id(nested_tree, nested_tree.id) is nested_tree
        assert zone_tree.find_zone_path(nested_tree, nested_tree.id) == []

    def test_find_deep_zone(self, nested_tree: NestedZone) -> None:
        columns = nested_tree.children[1]
        target = columns.children[1]
        assert zone_tree.find_zone_by_id(nested_tree, target.id) is target
        assert zone_tree.find_zone_path(nested_tree, target.id) == [
            columns.id,
            target.id,
        ]

    def test_find_missing(self, nested_tree: NestedZone) -> None:
        assert zone_tree.find_zone_by_id(nested_tree, "nope") is None
        assert zone_tree.find_zone_path(nested_tree, "nope") is None
        assert zone_tree.find_parent_zone(nested_tree, "nope") is None

    def test_find_parent(self, nested_tree: NestedZone) -> None:
        columns = nested_tree.children[1]
        assert zone_tree.find_parent_zone(nested_tree, columns.id) is nested_tree
        assert (
            zone_tree.find_parent_zone(nested_tree, columns.children[0].id) is columns
        )
        assert zone_tree.find_parent_zone(nested_tree, nested_tree.id) is None


class TestUpdateAtPath:
    """Tests for path-copying updates."""

    def test_only_ancestors_are_rebuilt(self, nested_tree: NestedZone) -> None:
        shelves, columns = nested_tree.children
        target = columns.children[0]
        path = zone_tree.find_zone_path(nested_tree, target.id)

        updated = zone_tree.update_at_path(
            nested_tree,
            path,
            lambda z: zone_tree.set_height_config(z, HeightConfig.of_exact(200)),
        )

        assert updated is not nested_tree
        assert updated.children[0] is shelves
        assert updated.children[1] is not columns
        assert updated.children[1].children[1] is columns.children[1]
        assert updated.children[1].children[0].height_config.exact_mm == 200
        # previous revision is untouched
        assert target.height_config == HeightConfig()

    def test_empty_path_updates_root(self, nested_tree: NestedZone) -> None:
        updated = zone_tree.update_at_path(
            nested_tree, [], lambda z: zone_tree.set_width_config(z, WidthConfig())
        )
        assert updated.width_config == WidthConfig()

    def test_unresolvable_path_returns_original(self, nested_tree: NestedZone) -> None:
        updated = zone_tree.update_at_path(
            nested_tree, ["missing"], lambda z: zone_tree.create_empty(z.depth)
        )
        assert updated is nested_tree

    def test_path_through_leaf_returns_original(self, nested_tree: NestedZone) -> None:
        shelves = nested_tree.children[0]
        updated = zone_tree.update_at_path(
            nested_tree, [shelves.id, "deeper"], lambda z: z
        )
        assert updated is nested_tree

    def test_update_zone_by_id(self, nested_tree: NestedZone) -> None:
        target = nested_tree.children[1].children[1]
        updated = zone_tree.update_zone_by_id(
            nested_tree,
            target.id,
            lambda z: zone_tree.update_content_type(z, ZoneContentType.SHELVES),
        )
        found = zone_tree.find_zone_by_id(updated, target.id)
        assert isinstance(found, ShelvesZone)


class TestAddRemoveChild:
    """Tests for add_child and remove_child."""

    def test_add_child_appends_empty(self, three_rows: NestedZone) -> None:
        updated = zone_tree.add_child(three_rows)
        assert len(updated.children) == 4
        assert isinstance(updated.children[-1], EmptyZone)
        assert updated.children[-1].depth == 1

    def test_add_child_to_vertical_adds_partition(self, two_columns: NestedZone) -> None:
        updated = zone_tree.add_child(two_columns)
        assert len(updated.children) == 3
        assert len(updated.partitions) == 2
        assert updated.partitions[0] is two_columns.partitions[0]

    def test_add_child_at_limit_is_noop(self) -> None:
        full = zone_tree.create_nested(DivisionDirection.VERTICAL, 0, child_count=6)
        assert zone_tree.add_child(full) is full

    def test_add_child_to_leaf_is_noop(self) -> None:
        leaf = zone_tree.create_empty(0)
        assert zone_tree.add_child(leaf) is leaf

    def test_remove_child_trims_partitions(self, two_columns: NestedZone) -> None:
        three = zone_tree.add_child(two_columns)
        updated = zone_tree.remove_child(three, three.children[1].id)
        assert len(updated.children) == 2
        assert len(updated.partitions) == 1

    def test_remove_last_child_is_noop(self) -> None:
        single = zone_tree.create_nested(DivisionDirection.HORIZONTAL, 0, child_count=1)
        assert zone_tree.remove_child(single, single.children[0].id) is single

    def test_remove_unknown_child_is_noop(self, three_rows: NestedZone) -> None:
        assert zone_tree.remove_child(three_rows, "missing") is three_rows


class TestMoveChild:
    """Tests for move_child direction semantics."""

    def test_horizontal_up_moves_to_higher_index(self, three_rows: NestedZone) -> None:
        first = three_rows.children[0]
        updated = zone_tree.move_child(three_rows, first.id, "up")
        assert updated.children[1] is first

    def test_horizontal_down_moves_to_lower_index(self, three_rows: NestedZone) -> None:
        second = three_rows.children[1]
        updated = zone_tree.move_child(three_rows, second.id, "down")
        assert updated.children[0] is second

    def test_vertical_up_moves_left(self, two_columns: NestedZone) -> None:
        right = two_columns.children[1]
        updated = zone_tree.move_child(two_columns, right.id, "up")
        assert updated.children[0] is right

    def test_vertical_down_moves_right(self, two_columns: NestedZone) -> None:
        left = two_columns.children[0]
        updated = zone_tree.move_child(two_columns, left.id, "down")
        assert updated.children[1] is left

    def test_out_of_range_is_noop(self, three_rows: NestedZone) -> None:
        top = three_rows.children[-1]
        assert zone_tree.move_child(three_rows, top.id, "up") is three_rows
        bottom = three_rows.children[0]
        assert zone_tree.move_child(three_rows, bottom.id, "down") is three_rows

    def test_unknown_child_is_noop(self, three_rows: NestedZone) -> None:
        assert zone_tree.move_child(three_rows, "missing", "up") is three_rows


class TestUpdateContentType:
    """Tests for update_content_type."""

    def test_same_type_returns_original(self) -> None:
        zone = zone_tree.create_with_shelves(3, depth=0)
        assert zone_tree.update_content_type(zone, ZoneContentType.SHELVES) is zone

    def test_switch_keeps_identity_and_sizing(self) -> None:
        zone = zone_tree.set_height_config(
            zone_tree.create_with_shelves(3, depth=1), HeightConfig.of_exact(250)
        )
        updated = zone_tree.update_content_type(zone, ZoneContentType.DRAWERS)
        assert isinstance(updated, DrawersZone)
        assert updated.id == zone.id
        assert updated.depth == 1
        assert updated.height_config.exact_mm == 250

    def test_switch_to_nested(self) -> None:
        zone = zone_tree.create_empty(1)
        updated = zone_tree.update_content_type(zone, ZoneContentType.NESTED)
        assert isinstance(updated, NestedZone)
        assert len(updated.children) == 1
        assert updated.children[0].depth == 2

    def test_nested_at_depth_cap_returns_original(self) -> None:
        zone = zone_tree.create_empty(3)
        assert zone_tree.update_content_type(zone, ZoneContentType.NESTED) is zone

    def test_switch_to_empty_discards_config(self) -> None:
        zone = zone_tree.create_with_drawers(2, depth=0)
        updated = zone_tree.update_content_type(zone, ZoneContentType.EMPTY)
        assert isinstance(updated, EmptyZone)
        assert not hasattr(updated, "drawer_config")


class TestDivisionAndPartitions:
    """Tests for direction switching and partition edits."""

    def test_switch_to_vertical_seeds_partitions(self, three_rows: NestedZone) -> None:
        updated = zone_tree.set_division_direction(
            three_rows, DivisionDirection.VERTICAL
        )
        assert len(updated.partitions) == 2

    def test_switch_to_horizontal_keeps_partitions(
        self, two_columns: NestedZone
    ) -> None:
        updated = zone_tree.set_division_direction(
            two_columns, DivisionDirection.HORIZONTAL
        )
        assert updated.partitions == two_columns.partitions

    def test_same_direction_is_noop(self, two_columns: NestedZone) -> None:
        assert (
            zone_tree.set_division_direction(two_columns, DivisionDirection.VERTICAL)
            is two_columns
        )

    def test_update_partition(self, two_columns: NestedZone) -> None:
        partition = two_columns.partitions[0]
        updated = zone_tree.update_partition(
            two_columns,
            partition.id,
            enabled=True,
            depth_preset=DepthPreset.CUSTOM,
            custom_depth=300,
        )
        assert updated.partitions[0].enabled is True
        assert updated.partitions[0].custom_depth == 300
        assert updated.partitions[0].id == partition.id

    def test_remove_and_add_partition(self, two_columns: NestedZone) -> None:
        partition = two_columns.partitions[0]
        removed = zone_tree.remove_partition(two_columns, partition.id)
        assert removed.partitions == ()
        restored = zone_tree.add_partition(removed, 0)
        assert len(restored.partitions) == 1

    def test_add_partition_when_complete_is_noop(
        self, two_columns: NestedZone
    ) -> None:
        assert zone_tree.add_partition(two_columns, 0) is two_columns


class TestLeafConfigUpdates:
    """Tests for shelves and drawer config updates on the right variant."""

    def test_update_shelves_config(self) -> None:
        zone = zone_tree.create_with_shelves(2, depth=0)
        updated = zone_tree.update_shelves_config(zone, count=5)
        assert updated.shelves_config.count == 5

    def test_update_shelves_config_on_wrong_variant(self) -> None:
        zone = zone_tree.create_with_drawers(2, depth=0)
        assert zone_tree.update_shelves_config(zone, count=5) is zone

    def test_update_drawer_config_on_wrong_variant(self) -> None:
        zone = zone_tree.create_empty(0)
        assert zone_tree.update_drawer_config(zone, zones=()) is zone


class TestQueries:
    """Tests for tree queries."""

    def test_count_zones(self, nested_tree: NestedZone) -> None:
        assert zone_tree.count_zones(nested_tree) == 5
        assert zone_tree.count_zones(nested_tree) == 1 + sum(
            zone_tree.count_zones(c) for c in nested_tree.children
        )

    def test_max_depth(self, nested_tree: NestedZone) -> None:
        assert zone_tree.get_max_depth(nested_tree) == 2
        assert zone_tree.get_max_depth(zone_tree.create_empty(0)) == 0

    def test_has_nested_zones(self, nested_tree: NestedZone) -> None:
        assert zone_tree.has_nested_zones(nested_tree) is True
        assert zone_tree.has_nested_zones(zone_tree.create_empty(0)) is False

    def test_get_all_zones_preorder(self, nested_tree: NestedZone) -> None:
        zones = zone_tree.get_all_zones(nested_tree)
        assert zones[0] is nested_tree
        assert zones[1] is nested_tree.children[0]
        assert zones[2] is nested_tree.children[1]

    def test_can_nest(self) -> None:
        assert zone_tree.can_nest(zone_tree.create_empty(2)) is True
        assert zone_tree.can_nest(zone_tree.create_empty(3)) is False

    def test_can_add_child(self, two_columns: NestedZone) -> None:
        assert zone_tree.can_add_child(two_columns) is True
        assert zone_tree.can_add_child(zone_tree.create_empty(0)) is False

    def test_summary(self, two_columns: NestedZone, three_rows: NestedZone) -> None:
        assert zone_tree.get_summary(two_columns) == "2 columns"
        assert zone_tree.get_summary(three_rows) == "3 rows"
        assert zone_tree.get_summary(zone_tree.create_empty(0)) == "Empty"
        shelves = zone_tree.create_with_shelves(4, depth=0)
        assert zone_tree.get_summary(shelves) == "Shelves (4)"


class TestCheckedApi:
    """Tests for the raising variants of limit-enforcing operations."""

    def test_checked_create_nested_at_cap(self) -> None:
        with pytest.raises(ZoneLimitError, match="maximum zone depth"):
            zone_tree.checked_create_nested(DivisionDirection.VERTICAL, depth=3)

    def test_checked_create_nested_bad_count(self) -> None:
        with pytest.raises(ZoneLimitError, match="outside"):
            zone_tree.checked_create_nested(
                DivisionDirection.VERTICAL, depth=0, child_count=7
            )

    def test_checked_add_child_at_limit(self) -> None:
        full = zone_tree.create_nested(DivisionDirection.VERTICAL, 0, child_count=6)
        with pytest.raises(ZoneLimitError, match="max is 6"):
            zone_tree.checked_add_child(full)

    def test_checked_add_child_to_leaf(self) -> None:
        with pytest.raises(ZoneLimitError, match="not NESTED"):
            zone_tree.checked_add_child(zone_tree.create_empty(0))

    def test_checked_remove_last_child(self) -> None:
        single = zone_tree.create_nested(DivisionDirection.HORIZONTAL, 0, child_count=1)
        with pytest.raises(ZoneLimitError, match="last child"):
            zone_tree.checked_remove_child(single, single.children[0].id)

    def test_checked_update_content_type(self) -> None:
        with pytest.raises(ZoneLimitError):
            zone_tree.checked_update_content_type(
                zone_tree.create_empty(3), ZoneContentType.NESTED
            )

    def test_zone_limit_error_is_value_error(self) -> None:
        assert issubclass(ZoneLimitError, ValueError)

    def test_checked_success_matches_silent(self, two_columns: NestedZone) -> None:
        updated = zone_tree.checked_add_child(two_columns, limits=DEFAULT_LIMITS)
        assert len(updated.children) == 3
