"""Unit tests for domain value objects and entities.

These tests verify:
- Rotation normalization and the width/depth swap at quarter turns
- BoundingBox construction and overlap rules
- RoomConfig validation and the L-shape cutout
- GlobalDimensions validation and category lookups
- CabinetInstance footprint and transform helpers
"""

import math

import pytest

from kitchenplan.domain.entities import CabinetInstance, CatalogProduct
from kitchenplan.domain.kinds import Corner, Standard
from kitchenplan.domain.value_objects import (
    BoundingBox,
    CabinetCategory,
    CornerType,
    GlobalDimensions,
    RoomConfig,
    RoomShape,
    Side,
    Size3,
    WallId,
    is_quarter_turn,
    normalize_rotation,
)


class TestRotation:
    """Tests for rotation helpers."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(0, 0), (90, 90), (360, 0), (-90, 270), (44, 0), (46, 90), (540, 180)],
    )
    def test_normalize_rotation(self, raw: float, expected: int) -> None:
        """Rotations should snap to the nearest right angle in [0, 360)."""
        assert normalize_rotation(raw) == expected

    def test_quarter_turns(self) -> None:
        """Only 90 and 270 degrees swap width and depth."""
        assert is_quarter_turn(90)
        assert is_quarter_turn(270)
        assert not is_quarter_turn(0)
        assert not is_quarter_turn(180)


class TestSize3:
    """Tests for Size3 value object."""

    def test_volume(self) -> None:
        assert Size3(10, 20, 30).volume == 6000

    def test_rejects_non_positive(self) -> None:
        """Size3 should reject zero or negative dimensions."""
        with pytest.raises(ValueError, match="must be positive"):
            Size3(0, 10, 10)


class TestBoundingBox:
    """Tests for BoundingBox footprints."""

    def test_around(self) -> None:
        """around() should centre a box on the given point."""
        box = BoundingBox.around(1000, 287.5, 600, 575)
        assert box.left == 700
        assert box.right == 1300
        assert box.back == 0
        assert box.front == 575
        assert box.center_x == 1000
        assert box.center_z == 287.5
        assert box.width == 600
        assert box.depth == 575

    def test_touching_boxes_do_not_overlap(self) -> None:
        """Boxes sharing an edge should not overlap."""
        a = BoundingBox(0, 600, 0, 575)
        b = BoundingBox(600, 1200, 0, 575)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_overlap(self) -> None:
        a = BoundingBox(0, 600, 0, 575)
        b = BoundingBox(500, 1100, 0, 575)
        assert a.overlaps(b)

    def test_padding_tolerates_shallow_overlap(self) -> None:
        """Overlaps up to the padding should be tolerated."""
        a = BoundingBox(0, 600, 0, 575)
        b = BoundingBox(596, 1196, 0, 575)
        assert a.overlaps(b)
        assert not a.overlaps(b, padding=5.0)


class TestRoomConfig:
    """Tests for RoomConfig validation."""

    def test_rectangle_has_no_cutout(self) -> None:
        room = RoomConfig(width=4000, depth=3000)
        assert room.shape == RoomShape.RECTANGLE
        assert room.cutout is None

    def test_l_shape_cutout(self) -> None:
        """The cutout should occupy the front-right corner."""
        room = RoomConfig(
            width=4000,
            depth=3000,
            shape=RoomShape.L_SHAPE,
            cutout_width=1000,
            cutout_depth=1200,
        )
        assert room.cutout == BoundingBox(3000, 4000, 1800, 3000)

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            RoomConfig(width=0, depth=3000)

    def test_rejects_cutout_larger_than_room(self) -> None:
        with pytest.raises(ValueError, match="smaller than the room"):
            RoomConfig(
                width=4000,
                depth=3000,
                shape=RoomShape.L_SHAPE,
                cutout_width=4000,
                cutout_depth=1000,
            )


class TestGlobalDimensions:
    """Tests for GlobalDimensions defaults and lookups."""

    def test_category_lookups(self) -> None:
        dims = GlobalDimensions()
        assert dims.height_for(CabinetCategory.BASE) == 870
        assert dims.depth_for(CabinetCategory.BASE) == 575
        assert dims.height_for(CabinetCategory.WALL) == 720
        assert dims.depth_for(CabinetCategory.WALL) == 350
        assert dims.height_for(CabinetCategory.TALL) == 2100
        assert dims.depth_for(CabinetCategory.TALL) == 580

    def test_accessory_uses_base_dimensions(self) -> None:
        dims = GlobalDimensions()
        assert dims.height_for(CabinetCategory.ACCESSORY) == dims.base_height

    def test_reveals_default_to_unset(self) -> None:
        """Reveal overrides should be None unless configured."""
        dims = GlobalDimensions()
        assert dims.door_gap is None
        assert dims.top_reveal is None

    def test_rejects_negative_reveal(self) -> None:
        with pytest.raises(ValueError, match="door_gap must be non-negative"):
            GlobalDimensions(door_gap=-1)

    def test_rejects_zero_board_thickness(self) -> None:
        with pytest.raises(ValueError, match="board_thickness must be positive"):
            GlobalDimensions(board_thickness=0)


class TestWallId:
    """Tests for wall facing rotations."""

    def test_facing_rotations(self) -> None:
        """Each wall should turn a cabinet's back toward it."""
        assert WallId.BACK.facing_rotation == 0
        assert WallId.LEFT.facing_rotation == 270
        assert WallId.RIGHT.facing_rotation == 90
        assert WallId.FRONT.facing_rotation == 180

    def test_side_opposite(self) -> None:
        assert Side.LEFT.opposite is Side.RIGHT
        assert Side.RIGHT.opposite is Side.LEFT


class TestCabinetInstance:
    """Tests for CabinetInstance footprints."""

    def test_effective_size_unrotated(self) -> None:
        cab = CabinetInstance("a", "p", width=600, depth=575)
        assert cab.effective_width == 600
        assert cab.effective_depth == 575

    @pytest.mark.parametrize("rotation", [90, 270])
    def test_effective_size_swaps_at_quarter_turns(self, rotation: int) -> None:
        """A 600 x 575 cabinet turned 90 or 270 degrees spans 575 x 600."""
        cab = CabinetInstance("a", "p", width=600, depth=575, rotation=rotation)
        assert cab.effective_width == 575
        assert cab.effective_depth == 600

    def test_footprint_is_rotation_aware(self) -> None:
        cab = CabinetInstance("a", "p", x=287.5, z=1000, rotation=270)
        assert cab.footprint() == BoundingBox(0, 575, 700, 1300)

    def test_with_transform_returns_copy(self) -> None:
        """with_transform should leave the original untouched."""
        cab = CabinetInstance("a", "p")
        moved = cab.with_transform(100, 200, 450)
        assert (moved.x, moved.z, moved.rotation) == (100, 200, 90)
        assert (cab.x, cab.z, cab.rotation) == (0, 0, 0)

    def test_has_valid_dimensions(self) -> None:
        assert CabinetInstance("a", "p").has_valid_dimensions()
        assert not CabinetInstance("a", "p", width=0).has_valid_dimensions()
        assert not CabinetInstance("a", "p", depth=math.nan).has_valid_dimensions()


class TestCatalogProduct:
    """Tests for CatalogProduct."""

    def test_defaults_to_standard_kind(self) -> None:
        product = CatalogProduct("p", "Product", CabinetCategory.BASE)
        assert product.kind == Standard()
        assert product.corner_type is None

    def test_corner_type(self) -> None:
        product = CatalogProduct(
            "p", "Corner", CabinetCategory.BASE, kind=Corner(CornerType.BLIND)
        )
        assert product.corner_type == CornerType.BLIND

    def test_rejects_negative_counts(self) -> None:
        with pytest.raises(ValueError, match="door_count must be non-negative"):
            CatalogProduct("p", "Product", CabinetCategory.BASE, door_count=-1)
