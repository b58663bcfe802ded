"""Domain entities for kitchen planning."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .kinds import CabinetKind, Corner, Standard
from .value_objects import (
    BoundingBox,
    CabinetCategory,
    CornerType,
    ItemType,
    PartKind,
    Side,
    Size3,
    Vector3,
    is_quarter_turn,
    normalize_rotation,
)


@dataclass(frozen=True)
class Part:
    """A single dimensioned, positioned part of an assembled cabinet.

    Positions are measured from the centre of the cabinet's bounding box
    with +y up and +z toward the front. Rotation holds Euler angles in
    degrees about the part's own centre.

    Attributes:
        kind: Role of this part in the cabinet.
        size: Box size of the part before rotation.
        position: Centre of the part in cabinet coordinates.
        rotation: Euler angles in degrees (x, y, z).
        material_ref: Identifier of the material to render with.
        label: Human-readable name, unique within one assembly.
        metadata: Read-only extra data for renderers. Common keys include:
            - "hinge_side": "Left" or "Right" for doors
            - "adjustable": bool for shelves
            - "sink_cutout": bool for benchtops
            - "hole_spacing": float for handles
            - "appliance": appliance kind for cavities
    """

    kind: PartKind
    size: Size3
    position: Vector3
    material_ref: str
    label: str
    rotation: Vector3 = field(default_factory=Vector3)
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CatalogProduct:
    """Read-only catalog entry a cabinet instance refers to.

    Attributes:
        product_id: Stable catalog identifier.
        name: Display name.
        category: Catalog category.
        kind: Cabinet kind variant.
        door_count: Default number of doors, or None to use the recipe's.
        drawer_count: Default number of drawers, or None to use the recipe's.
        shelf_count: Default shelf count, or None to use the recipe's.
        default_size: Default width, height and depth.
        item_type: Whether the product is a cabinet or an appliance.
    """

    product_id: str
    name: str
    category: CabinetCategory
    kind: CabinetKind = field(default_factory=Standard)
    door_count: int | None = None
    drawer_count: int | None = None
    shelf_count: int | None = None
    default_size: Size3 | None = None
    item_type: ItemType = ItemType.CABINET

    def __post_init__(self) -> None:
        for name in ("door_count", "drawer_count", "shelf_count"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def corner_type(self) -> CornerType | None:
        if isinstance(self.kind, Corner):
            return self.kind.corner_type
        return None


@dataclass(frozen=True)
class CabinetInstance:
    """A cabinet or appliance placed in a room.

    Instances are owned by the session. The core only reads them and
    returns transformed copies, so this class is frozen.

    Position is the footprint centre in room coordinates, with y being
    the height of the item's base above the floor. Dimensions are passed
    through unchecked: the assembler substitutes defaults for missing or
    non-positive values instead of rejecting the instance.

    Attributes:
        instance_id: Unique identifier within the session.
        product_id: Catalog product this instance was created from.
        x: Footprint centre along the room width.
        z: Footprint centre along the room depth.
        y: Base height above the floor.
        rotation: Rotation about the vertical axis in degrees.
        width: Overall width before rotation.
        height: Overall height.
        depth: Overall depth before rotation.
        item_type: Cabinet, appliance or structure.
        hinge_side: Hinge side for single-door fronts.
        end_panel_left: Add a finished end panel on the left.
        end_panel_right: Add a finished end panel on the right.
        filler_left: Width of a filler strip on the left.
        filler_right: Width of a filler strip on the right.
        blind_side: Blind side for blind corner cabinets.
        corner_type: Corner style override for corner cabinets.
        left_arm_depth: Left arm depth override for corner cabinets.
        right_arm_depth: Right arm depth override for corner cabinets.
        tap_id: Selected tap for sink cabinets.
        appliance_id: Selected appliance model for housings.
    """

    instance_id: str
    product_id: str
    x: float = 0.0
    z: float = 0.0
    y: float = 0.0
    rotation: int = 0
    width: float = 600.0
    height: float = 870.0
    depth: float = 575.0
    item_type: ItemType = ItemType.CABINET
    hinge_side: Side | None = None
    end_panel_left: bool = False
    end_panel_right: bool = False
    filler_left: float = 0.0
    filler_right: float = 0.0
    blind_side: Side | None = None
    corner_type: CornerType | None = None
    left_arm_depth: float | None = None
    right_arm_depth: float | None = None
    tap_id: str | None = None
    appliance_id: str | None = None

    @property
    def quarter_rotation(self) -> int:
        """Rotation snapped to the nearest right angle."""
        return normalize_rotation(self.rotation)

    @property
    def effective_width(self) -> float:
        """Footprint extent along x, swapping at 90 and 270 degrees."""
        if is_quarter_turn(self.quarter_rotation):
            return self.depth
        return self.width

    @property
    def effective_depth(self) -> float:
        """Footprint extent along z, swapping at 90 and 270 degrees."""
        if is_quarter_turn(self.quarter_rotation):
            return self.width
        return self.depth

    def footprint(self) -> BoundingBox:
        """Rotation-aware floor footprint at the current position."""
        return BoundingBox.around(
            self.x, self.z, self.effective_width, self.effective_depth
        )

    def has_valid_dimensions(self) -> bool:
        return all(
            math.isfinite(value) and value > 0
            for value in (self.width, self.height, self.depth)
        )

    def with_transform(self, x: float, z: float, rotation: int) -> CabinetInstance:
        """Return a copy moved to a new position and rotation."""
        return replace(self, x=x, z=z, rotation=normalize_rotation(rotation))
