"""Unit tests for the box carcass and interior shelf generators.

A 600 x 870 x 575 base cabinet stands on a 135mm toe kick, so its carcass
spans y = -300 to y = 435 in cabinet coordinates.
"""

from typing import Callable

import pytest

from kitchenplan.domain.components import Assembly, shelf_heights
from kitchenplan.domain.value_objects import CabinetCategory, PartKind, Size3, Vector3

BuildFn = Callable[..., Assembly]


class TestStandardCarcass:
    """Tests for StandardCarcassGenerator."""

    def test_base_part_order(self, build: BuildFn) -> None:
        """Parts come out in the fixed assembly order."""
        assembly = build()
        assert assembly.labels == [
            "left gable",
            "right gable",
            "bottom",
            "back",
            "kickboard",
            "leg 1",
            "leg 2",
            "leg 3",
            "leg 4",
            "shelf 1",
            "door",
            "door handle",
            "benchtop",
        ]

    def test_gables_run_full_carcass_height(self, build: BuildFn) -> None:
        assembly = build()
        left = assembly.part("left gable")
        right = assembly.part("right gable")
        assert left is not None and right is not None
        assert left.size == Size3(18, 735, 575)
        assert left.position == Vector3(-291, 67.5, 0)
        assert right.position == Vector3(291, 67.5, 0)

    def test_bottom_sits_between_gables(self, build: BuildFn) -> None:
        bottom = build().part("bottom")
        assert bottom is not None
        assert bottom.size == Size3(564, 18, 559)
        assert bottom.position == Vector3(0, -291, 8)

    def test_back_is_inset_by_setback(self, build: BuildFn) -> None:
        """The back panel sits 16mm forward of the rear edge."""
        back = build().part("back")
        assert back is not None
        assert back.size == Size3(564, 735, 3)
        assert back.position.z == pytest.approx(-273)

    def test_base_has_no_top(self, build: BuildFn) -> None:
        assert build().count(PartKind.TOP) == 0

    def test_wall_cabinet_has_top(self, build: BuildFn) -> None:
        """Wall cabinets hang without a plinth and get a top panel."""
        assembly = build(CabinetCategory.WALL)
        top = assembly.part("top")
        back = assembly.part("back")
        assert top is not None and back is not None
        assert top.size == Size3(564, 18, 334)
        assert top.position.y == 351
        # The back stops under the top
        assert back.size.height == 702
        assert assembly.count(PartKind.KICKBOARD) == 0
        assert assembly.count(PartKind.LEG) == 0

    def test_materials_by_group(self, build: BuildFn) -> None:
        assembly = build()
        assert assembly.part("left gable").material_ref == "white melamine"
        assert assembly.part("door").material_ref == "oak veneer"
        assert assembly.part("kickboard").material_ref == "black"


class TestShelfHeights:
    """Tests for shelf spacing."""

    def test_single_shelf_centred(self) -> None:
        assert shelf_heights(0, 600, 1) == [300]

    def test_even_spacing(self) -> None:
        assert shelf_heights(0, 600, 2) == [200, 400]

    def test_empty_cases(self) -> None:
        assert shelf_heights(0, 600, 0) == []
        assert shelf_heights(600, 0, 2) == []


class TestInteriorShelves:
    """Tests for InteriorShelfGenerator."""

    def test_base_shelf(self, build: BuildFn) -> None:
        """One adjustable shelf, held back from the front edge."""
        shelf = build().part("shelf 1")
        assert shelf is not None
        assert shelf.size == Size3(564, 18, 539)
        assert shelf.position == Vector3(0, 76.5, -2)
        assert shelf.metadata["adjustable"] is True

    def test_tall_cabinet_has_five_shelves(self, build: BuildFn) -> None:
        assembly = build(CabinetCategory.TALL)
        shelves = assembly.parts_of(PartKind.SHELF)
        assert len(shelves) == 5
        heights = [shelf.position.y for shelf in shelves]
        assert heights == sorted(heights)

    def test_wall_shelf_setback(self, build: BuildFn) -> None:
        """Wall shelves use the shallower 10mm front setback."""
        shelf = build(CabinetCategory.WALL).part("shelf 1")
        assert shelf is not None
        assert shelf.size.depth == 350 - 16 - 10

    def test_drawer_base_has_no_shelves(self, build: BuildFn) -> None:
        assert build(drawer_count=3).count(PartKind.SHELF) == 0

    def test_combination_shelf_below_divider(self, build: BuildFn) -> None:
        """Combination cabinets keep shelves under the drawer divider."""
        assembly = build(door_count=1, drawer_count=1)
        shelf = assembly.part("shelf 1")
        divider = assembly.part("divider")
        assert shelf is not None and divider is not None
        assert shelf.position.y == pytest.approx(-22.5)
        assert shelf.position.y < divider.position.y
