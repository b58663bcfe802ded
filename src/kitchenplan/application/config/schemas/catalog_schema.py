"""Catalog product and cabinet instance schemas.

A product's ``kind`` is a tagged object discriminated by ``type``. The
product validator resolves the recipe key ``(category, sub_kind)`` while
the file is loaded and rejects kinds that cannot exist in a category,
such as a wall-hung sink.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kitchenplan.application.config.schemas.base import (
    ApplianceKind,
    CabinetCategory,
    CornerType,
    ItemType,
    Side,
)
from kitchenplan.domain.kinds import (
    ApplianceHousing,
    CabinetKind,
    Corner,
    OpenShelf,
    Pantry,
    Sink,
    Standard,
    SubKind,
    sub_kind_for,
)
from kitchenplan.domain.recipes import is_allowed
from kitchenplan.domain.value_objects import RIGHT_ANGLES


class StandardKindSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["standard"] = "standard"

    def to_domain(self) -> CabinetKind:
        return Standard()


class SinkKindSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["sink"] = "sink"
    has_false_front: bool = False

    def to_domain(self) -> CabinetKind:
        return Sink(has_false_front=self.has_false_front)


class ApplianceKindSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["appliance"] = "appliance"
    appliance: ApplianceKind

    def to_domain(self) -> CabinetKind:
        return ApplianceHousing(appliance=self.appliance)


class CornerKindSchema(BaseModel):
    """Corner cabinet kind.

    Attributes:
        corner_type: l-shape, blind or diagonal.
        lazy_susan: Deep-arm corner with a carousel or pie-cut shelves.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["corner"] = "corner"
    corner_type: CornerType
    lazy_susan: bool = False

    def to_domain(self) -> CabinetKind:
        return Corner(corner_type=self.corner_type, lazy_susan=self.lazy_susan)


class PantryKindSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["pantry"] = "pantry"

    def to_domain(self) -> CabinetKind:
        return Pantry()


class OpenKindSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["open"] = "open"

    def to_domain(self) -> CabinetKind:
        return OpenShelf()


KindSchema = Annotated[
    Union[
        StandardKindSchema,
        SinkKindSchema,
        ApplianceKindSchema,
        CornerKindSchema,
        PantryKindSchema,
        OpenKindSchema,
    ],
    Field(discriminator="type"),
]


class SizeSchema(BaseModel):
    """Width, height and depth in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=5000)
    height: float = Field(..., gt=0, le=3500)
    depth: float = Field(..., gt=0, le=2000)


class ProductSchema(BaseModel):
    """Catalog product.

    Attributes:
        product_id: Identifier instances refer to.
        name: Display name.
        category: Base, Wall, Tall or Accessory.
        kind: Tagged cabinet kind, ``{"type": "standard"}`` by default.
        door_count: Default door count (recipe default when omitted).
        drawer_count: Default drawer count (recipe default when omitted).
        shelf_count: Default shelf count (recipe default when omitted).
        default_size: Size given to new instances of this product.
        item_type: Cabinet, Appliance or Structure.
    """

    model_config = ConfigDict(extra="forbid")

    product_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: CabinetCategory
    kind: KindSchema = Field(default_factory=StandardKindSchema)
    door_count: int | None = Field(default=None, ge=0, le=6)
    drawer_count: int | None = Field(default=None, ge=0, le=8)
    shelf_count: int | None = Field(default=None, ge=0, le=20)
    default_size: SizeSchema | None = None
    item_type: ItemType = ItemType.CABINET

    @property
    def sub_kind(self) -> SubKind:
        """Recipe sub-kind this product resolves to."""
        drawers = self.drawer_count or 0
        doors = self.door_count
        if doors is None:
            doors = 0 if drawers > 0 else 1
        return sub_kind_for(self.kind.to_domain(), doors, drawers)

    @model_validator(mode="after")
    def validate_recipe_key(self) -> "ProductSchema":
        """Reject kinds that are not built in this category."""
        sub_kind = self.sub_kind
        if not is_allowed(self.category, sub_kind):
            raise ValueError(
                f"Kind '{self.kind.type}' ({sub_kind.value}) is not available "
                f"for {self.category.value} cabinets"
            )
        return self


class RecipeOverridesSchema(BaseModel):
    """Per-instance recipe overrides. Omitted fields keep the recipe value."""

    model_config = ConfigDict(extra="forbid")

    door_count: int | None = Field(default=None, ge=0, le=6)
    drawer_count: int | None = Field(default=None, ge=0, le=8)
    shelf_count: int | None = Field(default=None, ge=0, le=20)
    has_false_front: bool | None = None
    blind_depth: float | None = Field(default=None, gt=0, le=1000)
    filler_width: float | None = Field(default=None, ge=0, le=300)
    return_filler: bool | None = None


class InstanceSchema(BaseModel):
    """A cabinet, appliance or structure placed in the room.

    Position is the footprint centre in room millimetres. Omitted sizes
    come from the product's ``default_size`` and then from the global
    category dimensions.
    """

    model_config = ConfigDict(extra="forbid")

    instance_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
    x: float = 0.0
    z: float = 0.0
    y: float = Field(default=0.0, ge=0)
    rotation: int = 0
    width: float | None = Field(default=None, gt=0, le=5000)
    height: float | None = Field(default=None, gt=0, le=3500)
    depth: float | None = Field(default=None, gt=0, le=2000)
    hinge_side: Side | None = None
    end_panel_left: bool = False
    end_panel_right: bool = False
    filler_left: float = Field(default=0.0, ge=0, le=300)
    filler_right: float = Field(default=0.0, ge=0, le=300)
    blind_side: Side | None = None
    corner_type: CornerType | None = None
    left_arm_depth: float | None = Field(default=None, gt=0, le=2000)
    right_arm_depth: float | None = Field(default=None, gt=0, le=2000)
    tap_id: str | None = None
    appliance_id: str | None = None
    overrides: RecipeOverridesSchema | None = None

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        """Only the four right angles are valid rotations."""
        if v not in RIGHT_ANGLES:
            raise ValueError(f"rotation must be one of {sorted(RIGHT_ANGLES)}")
        return v
