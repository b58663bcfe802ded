"""Unit tests for the project file schemas.

These tests verify:
- Defaults for optional sections
- Unknown fields are rejected (extra="forbid")
- Room cutout rules
- Discriminated product kinds and recipe key checks
- Instance range and rotation checks
- Schema version validation
"""

from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from kitchenplan.application.config import (
    SUPPORTED_VERSIONS,
    DimensionsSchema,
    InstanceSchema,
    ProductSchema,
    ProjectConfiguration,
    RoomSchema,
    SnapSchema,
)
from kitchenplan.application.config.schemas import (
    CornerKindSchema,
    SinkKindSchema,
    StandardKindSchema,
)
from kitchenplan.domain.kinds import Corner, SubKind
from kitchenplan.domain.value_objects import (
    CabinetCategory,
    CornerType,
    ItemType,
    RoomShape,
)


def _project(**fields: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "room": {"width": 4000, "depth": 3000},
    }
    data.update(fields)
    return data


class TestRoomSchema:
    """Tests for RoomSchema."""

    def test_defaults(self) -> None:
        room = RoomSchema(width=4000, depth=3000)
        assert room.height == 2400
        assert room.shape == RoomShape.RECTANGLE
        assert room.cutout_width == 0

    def test_l_shape(self) -> None:
        room = RoomSchema(
            width=4000,
            depth=3000,
            shape=RoomShape.L_SHAPE,
            cutout_width=1000,
            cutout_depth=800,
        )
        assert room.shape == RoomShape.L_SHAPE

    def test_l_shape_requires_cutout(self) -> None:
        with pytest.raises(PydanticValidationError, match="positive cutout_width"):
            RoomSchema(width=4000, depth=3000, shape=RoomShape.L_SHAPE)

    def test_cutout_requires_l_shape(self) -> None:
        with pytest.raises(PydanticValidationError, match="require shape 'LShape'"):
            RoomSchema(width=4000, depth=3000, cutout_width=500)

    def test_cutout_smaller_than_room(self) -> None:
        with pytest.raises(PydanticValidationError, match="smaller than the room"):
            RoomSchema(
                width=4000,
                depth=3000,
                shape="LShape",
                cutout_width=4000,
                cutout_depth=500,
            )

    @pytest.mark.parametrize("width", [0, -100, 60000])
    def test_width_range(self, width: float) -> None:
        with pytest.raises(PydanticValidationError):
            RoomSchema(width=width, depth=3000)


class TestDimensionsAndSnapSchema:
    """Tests for DimensionsSchema and SnapSchema defaults."""

    def test_dimension_defaults(self) -> None:
        dimensions = DimensionsSchema()
        assert dimensions.base_height == 870
        assert dimensions.toe_kick_height == 135
        assert dimensions.handle_drill_spacing == 32
        assert dimensions.door_gap is None

    def test_snap_defaults(self) -> None:
        snap = SnapSchema()
        assert snap.grid_size == 50
        assert snap.cabinet_threshold == 250
        assert snap.wall_release_threshold == 350
        assert snap.align_threshold is None

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Extra inputs"):
            SnapSchema(magnet_strength=3)


class TestProductSchema:
    """Tests for ProductSchema."""

    def test_default_kind_is_standard(self) -> None:
        product = ProductSchema(product_id="b", name="Base", category="Base")
        assert isinstance(product.kind, StandardKindSchema)
        assert product.sub_kind == SubKind.DOOR
        assert product.item_type == ItemType.CABINET

    def test_kind_discriminated_by_type(self) -> None:
        product = ProductSchema.model_validate(
            {
                "product_id": "c",
                "name": "Corner",
                "category": "Base",
                "kind": {"type": "corner", "corner_type": "diagonal"},
            }
        )
        assert isinstance(product.kind, CornerKindSchema)
        assert product.kind.to_domain() == Corner(CornerType.DIAGONAL)
        assert product.sub_kind == SubKind.CORNER_DIAGONAL

    def test_unknown_kind_type(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProductSchema.model_validate(
                {
                    "product_id": "x",
                    "name": "X",
                    "category": "Base",
                    "kind": {"type": "hovercraft"},
                }
            )

    @pytest.mark.parametrize(
        "drawers,doors,expected",
        [(3, None, SubKind.DRAWER), (1, 2, SubKind.COMBO), (None, 2, SubKind.DOOR)],
    )
    def test_sub_kind_from_counts(
        self, drawers: int | None, doors: int | None, expected: SubKind
    ) -> None:
        product = ProductSchema(
            product_id="b",
            name="Base",
            category=CabinetCategory.BASE,
            drawer_count=drawers,
            door_count=doors,
        )
        assert product.sub_kind == expected

    def test_wall_sink_rejected(self) -> None:
        """Kinds that cannot exist in a category fail at load time."""
        with pytest.raises(
            PydanticValidationError, match="not available for Wall cabinets"
        ):
            ProductSchema(
                product_id="s",
                name="Upper sink",
                category="Wall",
                kind=SinkKindSchema(),
            )

    def test_sink_false_front(self) -> None:
        product = ProductSchema(
            product_id="s",
            name="Sink",
            category="Base",
            kind={"type": "sink", "has_false_front": True},
        )
        assert product.sub_kind == SubKind.SINK_FALSE_FRONT

    def test_default_size_must_be_positive(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProductSchema(
                product_id="b",
                name="Base",
                category="Base",
                default_size={"width": 0, "height": 870, "depth": 575},
            )


class TestInstanceSchema:
    """Tests for InstanceSchema."""

    def test_defaults(self) -> None:
        instance = InstanceSchema(instance_id="a", product_id="b")
        assert (instance.x, instance.z, instance.rotation) == (0, 0, 0)
        assert instance.width is None
        assert instance.overrides is None

    @pytest.mark.parametrize("rotation", [0, 90, 180, 270])
    def test_right_angles_accepted(self, rotation: int) -> None:
        instance = InstanceSchema(instance_id="a", product_id="b", rotation=rotation)
        assert instance.rotation == rotation

    @pytest.mark.parametrize("rotation", [45, 360, -90])
    def test_other_rotations_rejected(self, rotation: int) -> None:
        with pytest.raises(PydanticValidationError, match="rotation must be one of"):
            InstanceSchema(instance_id="a", product_id="b", rotation=rotation)

    def test_negative_filler_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            InstanceSchema(instance_id="a", product_id="b", filler_left=-5)

    def test_overrides(self) -> None:
        instance = InstanceSchema.model_validate(
            {
                "instance_id": "a",
                "product_id": "b",
                "overrides": {"shelf_count": 3, "return_filler": False},
            }
        )
        assert instance.overrides is not None
        assert instance.overrides.shelf_count == 3
        assert instance.overrides.door_count is None


class TestProjectConfiguration:
    """Tests for the root ProjectConfiguration model."""

    def test_minimal(self) -> None:
        config = ProjectConfiguration.model_validate(_project())
        assert config.catalog == []
        assert config.instances == []
        assert config.materials == {}
        assert config.snap.grid_size == 50

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        config = ProjectConfiguration.model_validate(_project(schema_version="1.5"))
        assert config.schema_version == "1.5"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema"):
            ProjectConfiguration.model_validate(_project(schema_version="2.0"))

    @pytest.mark.parametrize("version", ["1", "v1.0", "1.0.0"])
    def test_version_pattern(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(_project(schema_version=version))

    def test_unknown_top_level_field(self) -> None:
        with pytest.raises(PydanticValidationError, match="Extra inputs"):
            ProjectConfiguration.model_validate(_project(walls=[]))

    def test_product_lookup(self) -> None:
        config = ProjectConfiguration.model_validate(
            _project(
                catalog=[{"product_id": "b", "name": "Base", "category": "Base"}]
            )
        )
        product = config.product("b")
        assert product is not None
        assert product.name == "Base"
        assert config.product("missing") is None
