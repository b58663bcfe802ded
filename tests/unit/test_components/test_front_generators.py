"""Unit tests for drawer sizing and the standard front generator."""

from typing import Callable

import pytest

from kitchenplan.domain.components import (
    DRAWER_PROPORTIONS,
    Assembly,
    combination_drawer_section,
    distribute_drawer_heights,
)
from kitchenplan.domain.components.fronts import rotate_about_y
from kitchenplan.domain.kinds import ApplianceHousing, Sink
from kitchenplan.domain.recipes import RecipeOverrides
from kitchenplan.domain.value_objects import (
    ApplianceKind,
    CabinetCategory,
    PartKind,
    Side,
    Size3,
    Vector3,
)

BuildFn = Callable[..., Assembly]


class TestDrawerDistribution:
    """Tests for drawer height proportions."""

    def test_three_drawers(self) -> None:
        """Deeper drawers go to the bottom of the stack."""
        assert distribute_drawer_heights(3, 900) == pytest.approx([225, 297, 378])

    @pytest.mark.parametrize("count", sorted(DRAWER_PROPORTIONS))
    def test_heights_fill_section(self, count: int) -> None:
        heights = distribute_drawer_heights(count, 720)
        assert len(heights) == count
        assert sum(heights) == pytest.approx(720)

    def test_unlisted_count_splits_evenly(self) -> None:
        assert distribute_drawer_heights(6, 600) == [100] * 6

    def test_no_drawers(self) -> None:
        assert distribute_drawer_heights(0, 600) == []
        assert distribute_drawer_heights(3, 0) == []

    def test_combination_section(self) -> None:
        assert combination_drawer_section(1, 735) == 180
        assert combination_drawer_section(2, 735) == 320
        assert combination_drawer_section(5, 2000) == 750
        assert combination_drawer_section(0, 735) == 0

    def test_combination_section_capped(self) -> None:
        """The drawer section never exceeds 60% of the carcass."""
        assert combination_drawer_section(4, 500) == pytest.approx(300)


class TestRotateAboutY:
    """Tests for the front offset rotation."""

    def test_quarter_turn_maps_z_to_x(self) -> None:
        x, z = rotate_about_y(0, 10, 90)
        assert x == pytest.approx(10)
        assert z == pytest.approx(0)

    def test_no_rotation(self) -> None:
        assert rotate_about_y(3, 4, 0) == (3, 4)


class TestSingleDoor:
    """Tests for single door fronts."""

    def test_door_size_and_position(self, build: BuildFn) -> None:
        """The door covers the carcass less the reveals."""
        door = build().part("door")
        assert door is not None
        assert door.kind == PartKind.DOOR
        assert door.size == Size3(596, 730, 18)
        assert door.position == Vector3(0, 67, 297.5)
        assert door.metadata["hinge_side"] == "Left"

    def test_handle_opposite_hinge(self, build: BuildFn) -> None:
        """Handle sits 40mm from the free edge, on the drill grid near the bottom."""
        handle = build().part("door handle")
        assert handle is not None
        assert handle.kind == PartKind.HANDLE
        assert handle.position == Vector3(258, -221, 321.5)
        assert handle.size == Size3(12, 128, 30)
        assert handle.metadata["hole_spacing"] == 128

    def test_hinge_side_from_instance(self, build: BuildFn) -> None:
        assembly = build(instance={"hinge_side": Side.RIGHT})
        assert assembly.part("door").metadata["hinge_side"] == "Right"
        assert assembly.part("door handle").position.x == -258

    def test_wall_handle_near_bottom_of_door(self, build: BuildFn) -> None:
        """Wall door handles are measured down from the top edge."""
        assembly = build(CabinetCategory.WALL)
        door = assembly.part("door")
        handle = assembly.part("door handle")
        assert door is not None and handle is not None
        assert door.size.height == 715
        assert handle.position.y == pytest.approx(door.position.y + 288)


class TestDoorPairs:
    """Tests for two-door fronts."""

    def test_pair_hinges_outward(self, build: BuildFn) -> None:
        assembly = build(width=900, door_count=2)
        left = assembly.part("left door")
        right = assembly.part("right door")
        assert left is not None and right is not None
        assert left.metadata["hinge_side"] == "Left"
        assert right.metadata["hinge_side"] == "Right"
        assert left.size.width == right.size.width == 447
        assert left.position.x == pytest.approx(-224.5)
        assert right.position.x == pytest.approx(224.5)

    def test_handles_meet_in_middle(self, build: BuildFn) -> None:
        assembly = build(width=900, door_count=2)
        left = assembly.part("left door handle")
        right = assembly.part("right door handle")
        assert left is not None and right is not None
        assert left.position.x == pytest.approx(-41)
        assert right.position.x == pytest.approx(41)

    def test_more_than_two_doors_built_as_pair(self, build: BuildFn) -> None:
        assembly = build(width=900, overrides=RecipeOverrides(door_count=3))
        assert assembly.count(PartKind.DOOR) == 2


class TestDrawerFronts:
    """Tests for drawer stacks."""

    def test_three_drawer_stack(self, build: BuildFn) -> None:
        """Drawer fronts fill the carcass top down, less the drawer gap."""
        assembly = build(drawer_count=3)
        fronts = assembly.parts_of(PartKind.DRAWER_FRONT)
        assert [f.label for f in fronts] == ["drawer 1", "drawer 2", "drawer 3"]
        slots = distribute_drawer_heights(3, 730)
        for front, slot in zip(fronts, slots):
            assert front.size.height == pytest.approx(slot - 2)
            assert "hinge_side" not in front.metadata
        assert fronts[0].position.y == pytest.approx(432 - slots[0] / 2)
        assert fronts[0].position.y > fronts[2].position.y

    def test_drawer_handles_centred_and_rotated(self, build: BuildFn) -> None:
        assembly = build(drawer_count=3)
        front = assembly.part("drawer 1")
        handle = assembly.part("drawer 1 handle")
        assert front is not None and handle is not None
        assert handle.position.x == pytest.approx(0)
        assert handle.position.y == pytest.approx(front.position.y)
        assert handle.rotation.z == 90


class TestCombination:
    """Tests for door-and-drawer cabinets."""

    def test_drawer_above_divider_above_door(self, build: BuildFn) -> None:
        assembly = build(door_count=1, drawer_count=1)
        drawer = assembly.part("drawer 1")
        divider = assembly.part("divider")
        door = assembly.part("door")
        assert drawer is not None and divider is not None and door is not None
        assert drawer.size.height == 178
        assert drawer.position.y == 345
        assert divider.size == Size3(564, 18, 559)
        assert divider.position.y == 246
        assert door.size.height == 534
        assert door.position.y == -31


class TestSinkFronts:
    """Tests for sink cabinets."""

    def test_false_front_above_doors(self, build: BuildFn) -> None:
        assembly = build(width=900, kind=Sink(has_false_front=True))
        false_front = assembly.part("false front")
        left = assembly.part("left door")
        assert false_front is not None and left is not None
        assert false_front.kind == PartKind.FALSE_FRONT
        assert false_front.size == Size3(896, 80, 18)
        assert false_front.position.y == 392
        assert left.size.height == 648
        assert left.position.y == 26
        handle = assembly.part("false front handle")
        assert handle is not None
        assert handle.position.x == pytest.approx(0)
        assert handle.position.y == pytest.approx(392)
        assert handle.rotation.z == 90

    def test_plain_sink_has_no_false_front(self, build: BuildFn) -> None:
        assembly = build(width=900, kind=Sink())
        assert assembly.count(PartKind.FALSE_FRONT) == 0
        assert assembly.count(PartKind.DOOR) == 2


class TestApplianceFronts:
    """Tests for appliance housing fronts."""

    def test_housing_without_drawer_has_no_fronts(self, build: BuildFn) -> None:
        assembly = build(kind=ApplianceHousing(ApplianceKind.OVEN))
        assert assembly.count(PartKind.DOOR) == 0
        assert assembly.count(PartKind.DRAWER_FRONT) == 0

    def test_housing_top_drawer(self, build: BuildFn) -> None:
        assembly = build(kind=ApplianceHousing(ApplianceKind.OVEN), drawer_count=1)
        drawer = assembly.part("drawer 1")
        assert drawer is not None
        assert drawer.size.height == 178
        assert drawer.position.y == 345
