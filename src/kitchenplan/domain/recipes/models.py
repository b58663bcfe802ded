"""Construction recipe value objects.

A ConstructionRecipe is the fully-populated set of construction standards
the assembler builds from. Recipe templates in the catalog are partial:
any field left as None is filled in by the resolver from category
defaults and global dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..kinds import CabinetKind, Sink, Standard, SubKind
from ..value_objects import CabinetCategory, CornerType, FrontType, Side

# Hardcoded reveal defaults, the last resort after global and recipe values.
DEFAULT_DOOR_GAP = 2.0
DEFAULT_DRAWER_GAP = 2.0
DEFAULT_TOP_REVEAL = 3.0
DEFAULT_BOTTOM_REVEAL = 2.0
DEFAULT_SIDE_REVEAL = 2.0

STANDARD_ARM_DEPTH = 575.0
LAZY_SUSAN_ARM_DEPTH = 900.0
DEFAULT_BLIND_DEPTH = 150.0
DEFAULT_CORNER_FILLER = 75.0
FALSE_FRONT_HEIGHT = 80.0


@dataclass(frozen=True)
class CarcassRecipe:
    """Board thicknesses and back-panel placement of the carcass box."""

    gable_thickness: float = 18.0
    bottom_thickness: float = 18.0
    top_thickness: float = 18.0
    back_thickness: float = 3.0
    back_setback: float = 16.0
    has_bottom: bool = True
    has_top: bool = False

    def __post_init__(self) -> None:
        if min(
            self.gable_thickness,
            self.bottom_thickness,
            self.top_thickness,
            self.back_thickness,
        ) <= 0:
            raise ValueError("Board thicknesses must be positive")
        if self.back_setback < 0:
            raise ValueError("back_setback must be non-negative")


@dataclass(frozen=True)
class ShelvesRecipe:
    """Interior shelf standards."""

    count: int = 1
    adjustable: bool = True
    thickness: float = 18.0
    setback: float = 20.0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Shelf count must be non-negative")
        if self.thickness <= 0:
            raise ValueError("Shelf thickness must be positive")


@dataclass(frozen=True)
class ToeKickRecipe:
    """Plinth standards for floor-standing cabinets."""

    enabled: bool = True
    height: float = 135.0
    setback: float = 50.0
    kickboard_thickness: float = 16.0

    def __post_init__(self) -> None:
        if self.height < 0 or self.setback < 0:
            raise ValueError("Toe kick height and setback must be non-negative")


@dataclass(frozen=True)
class BenchtopRecipe:
    """Benchtop standards, only used by base cabinets."""

    enabled: bool = False
    thickness: float = 33.0
    front_overhang: float = 25.0
    side_overhang: float = 0.0


@dataclass(frozen=True)
class CornerRecipe:
    """Corner sub-configuration.

    Attributes:
        corner_type: Construction style of the corner.
        left_arm_depth: Depth of the arm running along the left wall.
        right_arm_depth: Depth of the arm running along the back wall.
        blind_depth: Depth of the inaccessible blind section.
        blind_side: Side of the cabinet hidden behind the adjoining run.
        filler_width: Width of the corner filler strip.
        return_filler: Add a return filler on the blind side.
    """

    corner_type: CornerType
    left_arm_depth: float = STANDARD_ARM_DEPTH
    right_arm_depth: float = STANDARD_ARM_DEPTH
    blind_depth: float = DEFAULT_BLIND_DEPTH
    blind_side: Side = Side.LEFT
    filler_width: float = DEFAULT_CORNER_FILLER
    return_filler: bool = False

    def __post_init__(self) -> None:
        if self.left_arm_depth <= 0 or self.right_arm_depth <= 0:
            raise ValueError("Arm depths must be positive")
        if self.blind_depth < 0 or self.filler_width < 0:
            raise ValueError("Blind depth and filler width must be non-negative")


@dataclass(frozen=True)
class FrontsRecipe:
    """Door and drawer front configuration."""

    front_type: FrontType = FrontType.DOOR
    door_count: int = 1
    drawer_count: int = 0
    has_false_front: bool = False
    false_front_height: float = FALSE_FRONT_HEIGHT
    front_thickness: float = 18.0
    divider_thickness: float = 18.0
    corner: CornerRecipe | None = None

    def __post_init__(self) -> None:
        if self.door_count < 0 or self.drawer_count < 0:
            raise ValueError("Front counts must be non-negative")
        if self.front_type == FrontType.CORNER and self.corner is None:
            raise ValueError("Corner fronts require a corner configuration")

    @property
    def is_combination(self) -> bool:
        """Doors and drawers both present on a non-corner cabinet."""
        return (
            self.front_type != FrontType.CORNER
            and self.door_count > 0
            and self.drawer_count > 0
        )


@dataclass(frozen=True)
class RevealSet:
    """Resolved gaps around fronts."""

    door_gap: float = DEFAULT_DOOR_GAP
    drawer_gap: float = DEFAULT_DRAWER_GAP
    top: float = DEFAULT_TOP_REVEAL
    side: float = DEFAULT_SIDE_REVEAL
    bottom: float = DEFAULT_BOTTOM_REVEAL


@dataclass(frozen=True)
class RevealOverrides:
    """Recipe-specific reveals; None leaves the value to the next source."""

    door_gap: float | None = None
    drawer_gap: float | None = None
    top: float | None = None
    side: float | None = None
    bottom: float | None = None


@dataclass(frozen=True)
class ConstructionRecipe:
    """Fully-populated construction standards for one cabinet.

    Attributes:
        name: Name of the recipe the values were taken from.
        category: Catalog category.
        sub_kind: Recipe sub-kind used for the lookup.
        kind: Cabinet kind variant.
        carcass: Carcass box standards.
        shelves: Interior shelf standards.
        toe_kick: Plinth standards.
        benchtop: Benchtop standards.
        fronts: Front configuration.
        reveals: Resolved reveal set.
        synthesized: True when no catalog recipe matched and the values
            were synthesized from category defaults.
    """

    name: str
    category: CabinetCategory
    sub_kind: SubKind
    kind: CabinetKind = field(default_factory=Standard)
    carcass: CarcassRecipe = field(default_factory=CarcassRecipe)
    shelves: ShelvesRecipe = field(default_factory=ShelvesRecipe)
    toe_kick: ToeKickRecipe = field(default_factory=ToeKickRecipe)
    benchtop: BenchtopRecipe = field(default_factory=BenchtopRecipe)
    fronts: FrontsRecipe = field(default_factory=FrontsRecipe)
    reveals: RevealSet = field(default_factory=RevealSet)
    synthesized: bool = False

    @property
    def corner(self) -> CornerRecipe | None:
        return self.fronts.corner

    @property
    def is_sink(self) -> bool:
        return isinstance(self.kind, Sink)


@dataclass(frozen=True)
class RecipeTemplate:
    """Partial recipe stored in the recipe table.

    Every optional field left as None is filled in during resolution.

    Attributes:
        name: Display name of the recipe.
        category: Category half of the lookup key.
        sub_kind: Sub-kind half of the lookup key.
        door_count: Default door count.
        drawer_count: Default drawer count.
        shelf_count: Default shelf count.
        adjustable_shelves: Whether shelves sit on pins.
        shelf_setback: Shelf inset from the front edge.
        has_top: Whether the carcass has a top panel.
        toe_kick: Whether the cabinet stands on a plinth.
        toe_kick_height: Plinth height.
        benchtop: Whether a benchtop is laid on the cabinet.
        benchtop_thickness: Benchtop thickness.
        benchtop_overhang: Benchtop front overhang.
        back_setback: Back panel inset from the rear edge.
        has_false_front: Whether sink cabinets carry a false front.
        reveals: Recipe-specific reveals.
    """

    name: str
    category: CabinetCategory
    sub_kind: SubKind
    door_count: int | None = None
    drawer_count: int | None = None
    shelf_count: int | None = None
    adjustable_shelves: bool | None = None
    shelf_setback: float | None = None
    has_top: bool | None = None
    toe_kick: bool | None = None
    toe_kick_height: float | None = None
    benchtop: bool | None = None
    benchtop_thickness: float | None = None
    benchtop_overhang: float | None = None
    back_setback: float | None = None
    has_false_front: bool | None = None
    reveals: RevealOverrides = field(default_factory=RevealOverrides)


@dataclass(frozen=True)
class RecipeOverrides:
    """Per-instance overrides merged over the resolved recipe.

    Any field left as None keeps the recipe's value.
    """

    door_count: int | None = None
    drawer_count: int | None = None
    shelf_count: int | None = None
    corner_type: CornerType | None = None
    left_arm_depth: float | None = None
    right_arm_depth: float | None = None
    blind_depth: float | None = None
    blind_side: Side | None = None
    filler_width: float | None = None
    return_filler: bool | None = None
    has_false_front: bool | None = None
