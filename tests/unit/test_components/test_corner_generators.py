"""Unit tests for corner cabinet generators.

Corner cabinets are laid out with the corner in the back-left. L-shape
and diagonal tests use a 900 x 870 x 900 cabinet; blind corner tests use
a 900 x 870 x 575 cabinet.
"""

import math
from typing import Callable

import pytest

from kitchenplan.domain.components import Assembly, WarningCode
from kitchenplan.domain.kinds import Corner
from kitchenplan.domain.recipes import RecipeOverrides
from kitchenplan.domain.value_objects import CornerType, PartKind, Side

BuildFn = Callable[..., Assembly]


class TestLShapeCorner:
    """Tests for L-shaped corner cabinets."""

    @pytest.fixture
    def assembly(self, build: BuildFn) -> Assembly:
        return build(width=900, depth=900, kind=Corner(CornerType.L_SHAPE))

    def test_carcass_follows_both_arms(self, assembly: Assembly) -> None:
        for label in (
            "back wall back",
            "left wall back",
            "back arm end gable",
            "left arm end gable",
            "back arm bottom",
            "left arm bottom",
            "back arm shelf 1",
            "left arm shelf 1",
        ):
            assert assembly.part(label) is not None, label
        assert assembly.part("left gable") is None

    def test_one_door_per_arm(self, assembly: Assembly) -> None:
        """Each arm gets a door hinged away from the inner corner."""
        back = assembly.part("back arm door")
        left = assembly.part("left arm door")
        assert back is not None and left is not None
        assert back.metadata["arm"] == "back"
        assert back.metadata["hinge_side"] == "Right"
        assert left.metadata["arm"] == "left"
        assert left.metadata["hinge_side"] == "Left"
        assert back.size.width == left.size.width == 321
        assert back.position.x == pytest.approx(287.5)
        assert back.position.z == pytest.approx(135)
        assert left.position.x == pytest.approx(135)
        assert left.position.z == pytest.approx(287.5)

    def test_left_arm_door_faces_sideways(self, assembly: Assembly) -> None:
        left = assembly.part("left arm door")
        assert left is not None
        assert left.rotation.y == 90
        assert assembly.part("back arm door").rotation.y == 0

    def test_no_warning_when_arms_fit(self, assembly: Assembly) -> None:
        assert not assembly.has_warning(WarningCode.ARM_DEPTH_CLAMPED)

    def test_oversized_arm_is_clamped(self, build: BuildFn) -> None:
        """Arms deeper than the cabinet allows are reduced with a warning."""
        assembly = build(
            width=900,
            depth=900,
            kind=Corner(CornerType.L_SHAPE),
            overrides=RecipeOverrides(left_arm_depth=900),
        )
        assert assembly.has_warning(WarningCode.ARM_DEPTH_CLAMPED)
        left_bottom = assembly.part("left arm bottom")
        assert left_bottom is not None
        assert left_bottom.size.width == pytest.approx(800 - 16)

    def test_lazy_susan_fits_large_corner(self, build: BuildFn) -> None:
        assembly = build(
            width=1200,
            depth=1200,
            kind=Corner(CornerType.L_SHAPE, lazy_susan=True),
        )
        assert not assembly.has_warning(WarningCode.ARM_DEPTH_CLAMPED)
        assert assembly.part("back arm door").size.width == 1200 - 900 - 4


class TestBlindCorner:
    """Tests for blind corner cabinets."""

    def test_left_blind_side(self, build: BuildFn) -> None:
        """A left blind side puts the single door on the right."""
        assembly = build(width=900, kind=Corner(CornerType.BLIND))
        doors = assembly.parts_of(PartKind.DOOR)
        assert [door.label for door in doors] == ["right arm door"]
        door = doors[0]
        assert door.metadata["arm"] == "right"
        assert door.metadata["hinge_side"] == "Right"
        assert door.size.width == 447
        assert door.position.x == pytest.approx(224.5)

    def test_blind_parts(self, build: BuildFn) -> None:
        assembly = build(width=900, kind=Corner(CornerType.BLIND))
        panel = assembly.part("left blind panel")
        filler = assembly.part("corner filler")
        blind_return = assembly.part("blind return")
        assert panel is not None and filler is not None
        assert blind_return is not None
        assert panel.kind == PartKind.BLIND_PANEL
        assert panel.size.width == 372
        assert panel.position.x == pytest.approx(-262)
        assert filler.kind == PartKind.FILLER
        assert filler.position.x == pytest.approx(-38.5)
        assert blind_return.size.depth == 150
        assert assembly.part("return filler") is None

    def test_parts_stay_inside_footprint(self, build: BuildFn) -> None:
        assembly = build(width=900, kind=Corner(CornerType.BLIND))
        for label in ("left blind panel", "corner filler", "right arm door"):
            part = assembly.part(label)
            assert part is not None
            assert abs(part.position.x) + part.size.width / 2 <= 450

    def test_right_blind_side(self, build: BuildFn) -> None:
        assembly = build(
            width=900,
            kind=Corner(CornerType.BLIND),
            instance={"blind_side": Side.RIGHT},
            overrides=RecipeOverrides(blind_side=Side.RIGHT),
        )
        door = assembly.part("left arm door")
        panel = assembly.part("right blind panel")
        assert door is not None and panel is not None
        assert door.position.x == pytest.approx(-224.5)
        assert panel.position.x == pytest.approx(262)

    def test_return_filler(self, build: BuildFn) -> None:
        assembly = build(
            width=900,
            kind=Corner(CornerType.BLIND),
            overrides=RecipeOverrides(return_filler=True),
        )
        filler = assembly.part("return filler")
        assert filler is not None
        assert filler.kind == PartKind.RETURN_FILLER
        assert filler.position.z == pytest.approx(287.5 + 1 + 18 + 37.5)

    def test_blind_corner_uses_box_carcass(self, build: BuildFn) -> None:
        assembly = build(width=900, kind=Corner(CornerType.BLIND))
        assert assembly.part("left gable") is not None
        assert assembly.part("kickboard") is not None


class TestDiagonalCorner:
    """Tests for diagonal corner cabinets."""

    @pytest.fixture
    def assembly(self, build: BuildFn) -> Assembly:
        return build(width=900, depth=900, kind=Corner(CornerType.DIAGONAL))

    def test_door_on_chamfer(self, assembly: Assembly) -> None:
        door = assembly.part("diagonal door")
        assert door is not None
        assert door.rotation.y == 45
        assert door.metadata["arm"] == "diagonal"
        assert door.size.width == pytest.approx(math.sqrt(2) * 900 * 0.35)
        assert door.position.x == pytest.approx(door.position.z)
        assert door.position.x == pytest.approx(225 + 10 / math.sqrt(2))

    def test_carcass_outline(self, assembly: Assembly) -> None:
        """Bottom and shelves carry the five-sided plan outline."""
        bottom = assembly.part("bottom")
        assert bottom is not None
        outline = bottom.metadata["outline"]
        assert len(outline) == 5
        assert (450, 0) in outline
        assert (0, 450) in outline
        assert assembly.part("right return gable") is not None
        assert assembly.part("front return gable") is not None

    def test_single_door(self, assembly: Assembly) -> None:
        assert assembly.count(PartKind.DOOR) == 1
