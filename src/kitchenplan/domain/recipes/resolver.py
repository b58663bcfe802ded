"""Construction recipe resolution.

Resolution layers several sources, earliest wins per field:

1. Per-instance overrides.
2. Catalog product defaults (front counts, shelf count).
3. The recipe template found by (category, sub-kind).
4. Category defaults synthesized from the category and front counts.

Reveals use their own priority: an explicitly configured global value,
then the recipe's reveal, then the hardcoded default.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ..entities import CatalogProduct
from ..kinds import (
    ApplianceHousing,
    CabinetKind,
    Corner,
    Sink,
    SubKind,
    sub_kind_for,
    with_corner_type,
)
from ..value_objects import CabinetCategory, FrontType, GlobalDimensions, Side
from .catalog import RecipeTable, default_recipe_table
from .models import (
    DEFAULT_BOTTOM_REVEAL,
    DEFAULT_DOOR_GAP,
    DEFAULT_DRAWER_GAP,
    DEFAULT_SIDE_REVEAL,
    DEFAULT_TOP_REVEAL,
    LAZY_SUSAN_ARM_DEPTH,
    BenchtopRecipe,
    CarcassRecipe,
    ConstructionRecipe,
    CornerRecipe,
    FrontsRecipe,
    RecipeOverrides,
    RecipeTemplate,
    RevealOverrides,
    RevealSet,
    ShelvesRecipe,
    ToeKickRecipe,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

WALL_SHELF_SETBACK = 10.0
STANDARD_SHELF_SETBACK = 20.0

_NO_DOOR_SUB_KINDS = frozenset(
    {SubKind.DRAWER, SubKind.APPLIANCE, SubKind.FRIDGE, SubKind.OPEN}
)
_SINK_SUB_KINDS = frozenset({SubKind.SINK, SubKind.SINK_FALSE_FRONT})


def _first(*values: T | None, default: T) -> T:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return default


class RecipeResolver:
    """Resolves a product and its overrides into a ConstructionRecipe.

    Resolution never fails. A product whose (category, sub-kind) has no
    recipe gets one synthesized from category defaults.
    """

    def __init__(
        self,
        table: RecipeTable | None = None,
        dimensions: GlobalDimensions | None = None,
    ) -> None:
        self.table = table if table is not None else default_recipe_table()
        self.dimensions = dimensions or GlobalDimensions()

    def resolve(
        self,
        product: CatalogProduct,
        overrides: RecipeOverrides | None = None,
    ) -> ConstructionRecipe:
        """Resolve the effective recipe for a product.

        Args:
            product: Catalog product being built.
            overrides: Optional per-instance overrides.

        Returns:
            A fully-populated ConstructionRecipe.
        """
        overrides = overrides or RecipeOverrides()
        kind = with_corner_type(product.kind, overrides.corner_type)
        category = product.category

        requested_drawers = _first(
            overrides.drawer_count, product.drawer_count, default=0
        )
        requested_doors = _first(
            overrides.door_count,
            product.door_count,
            default=0 if requested_drawers > 0 else 1,
        )
        sub_kind = sub_kind_for(kind, requested_doors, requested_drawers)

        template = self.table.get(category, sub_kind)
        if template is None:
            logger.info(
                f"No recipe for {category.value}/{sub_kind.value}; "
                f"synthesizing defaults for '{product.name}'"
            )
            template = RecipeTemplate(
                name=f"{category.value} {sub_kind.value} (default)",
                category=category,
                sub_kind=sub_kind,
            )
            synthesized = True
        else:
            synthesized = False

        door_count = _first(
            overrides.door_count,
            product.door_count,
            template.door_count,
            default=self._default_door_count(sub_kind),
        )
        drawer_count = _first(
            overrides.drawer_count,
            product.drawer_count,
            template.drawer_count,
            default=self._default_drawer_count(sub_kind),
        )

        has_false_front = _first(
            overrides.has_false_front,
            template.has_false_front,
            default=sub_kind == SubKind.SINK_FALSE_FRONT,
        )
        if isinstance(kind, Sink):
            kind = Sink(has_false_front=has_false_front)

        return ConstructionRecipe(
            name=template.name,
            category=category,
            sub_kind=sub_kind,
            kind=kind,
            carcass=CarcassRecipe(
                gable_thickness=self.dimensions.board_thickness,
                bottom_thickness=self.dimensions.board_thickness,
                top_thickness=self.dimensions.board_thickness,
                back_setback=_first(template.back_setback, default=16.0),
                has_top=_first(
                    template.has_top,
                    default=category in (CabinetCategory.WALL, CabinetCategory.TALL),
                ),
            ),
            shelves=self._shelves(
                category,
                sub_kind,
                template,
                product,
                overrides,
                drawer_count,
            ),
            toe_kick=ToeKickRecipe(
                enabled=_first(
                    template.toe_kick,
                    default=category != CabinetCategory.WALL
                    and sub_kind != SubKind.FRIDGE,
                ),
                height=_first(
                    template.toe_kick_height, default=self.dimensions.toe_kick_height
                ),
            ),
            benchtop=BenchtopRecipe(
                enabled=_first(
                    template.benchtop, default=category == CabinetCategory.BASE
                ),
                thickness=_first(
                    template.benchtop_thickness,
                    default=self.dimensions.benchtop_thickness,
                ),
                front_overhang=_first(
                    template.benchtop_overhang,
                    default=self.dimensions.benchtop_overhang,
                ),
            ),
            fronts=FrontsRecipe(
                front_type=self._front_type(kind, door_count, drawer_count),
                door_count=door_count,
                drawer_count=drawer_count,
                has_false_front=has_false_front,
                front_thickness=self.dimensions.board_thickness,
                divider_thickness=self.dimensions.board_thickness,
                corner=self._corner(kind, category, overrides),
            ),
            reveals=self._reveals(template.reveals),
            synthesized=synthesized,
        )

    def _shelves(
        self,
        category: CabinetCategory,
        sub_kind: SubKind,
        template: RecipeTemplate,
        product: CatalogProduct,
        overrides: RecipeOverrides,
        drawer_count: int,
    ) -> ShelvesRecipe:
        # Every cabinet gets at least one shelf unless a recipe says otherwise
        if category == CabinetCategory.TALL:
            default_count = 5
        elif category == CabinetCategory.WALL:
            default_count = 2
        else:
            default_count = 1

        adjustable_default = not (
            drawer_count > 0
            or sub_kind in _SINK_SUB_KINDS
            or sub_kind in (SubKind.APPLIANCE, SubKind.FRIDGE)
        )
        setback_default = (
            WALL_SHELF_SETBACK
            if category == CabinetCategory.WALL
            else STANDARD_SHELF_SETBACK
        )
        return ShelvesRecipe(
            count=_first(
                overrides.shelf_count,
                product.shelf_count,
                template.shelf_count,
                default=default_count,
            ),
            adjustable=_first(template.adjustable_shelves, default=adjustable_default),
            thickness=self.dimensions.board_thickness,
            setback=_first(template.shelf_setback, default=setback_default),
        )

    def _corner(
        self,
        kind: CabinetKind,
        category: CabinetCategory,
        overrides: RecipeOverrides,
    ) -> CornerRecipe | None:
        if not isinstance(kind, Corner):
            return None
        arm_default = self.dimensions.depth_for(category)
        if kind.lazy_susan:
            arm_default = LAZY_SUSAN_ARM_DEPTH
        return CornerRecipe(
            corner_type=kind.corner_type,
            left_arm_depth=_first(overrides.left_arm_depth, default=arm_default),
            right_arm_depth=_first(overrides.right_arm_depth, default=arm_default),
            blind_depth=_first(overrides.blind_depth, default=150.0),
            blind_side=_first(overrides.blind_side, default=Side.LEFT),
            filler_width=_first(overrides.filler_width, default=75.0),
            return_filler=_first(overrides.return_filler, default=False),
        )

    def _reveals(self, recipe: RevealOverrides) -> RevealSet:
        dims = self.dimensions
        return RevealSet(
            door_gap=_first(dims.door_gap, recipe.door_gap, default=DEFAULT_DOOR_GAP),
            drawer_gap=_first(
                dims.drawer_gap, recipe.drawer_gap, default=DEFAULT_DRAWER_GAP
            ),
            top=_first(dims.top_reveal, recipe.top, default=DEFAULT_TOP_REVEAL),
            side=_first(dims.side_reveal, recipe.side, default=DEFAULT_SIDE_REVEAL),
            bottom=_first(
                dims.bottom_reveal, recipe.bottom, default=DEFAULT_BOTTOM_REVEAL
            ),
        )

    @staticmethod
    def _default_door_count(sub_kind: SubKind) -> int:
        if sub_kind in _SINK_SUB_KINDS or sub_kind == SubKind.CORNER_L:
            return 2
        if sub_kind in _NO_DOOR_SUB_KINDS:
            return 0
        return 1

    @staticmethod
    def _default_drawer_count(sub_kind: SubKind) -> int:
        if sub_kind == SubKind.DRAWER:
            return 3
        if sub_kind == SubKind.COMBO:
            return 1
        return 0

    @staticmethod
    def _front_type(kind: CabinetKind, door_count: int, drawer_count: int) -> FrontType:
        match kind:
            case Corner():
                return FrontType.CORNER
            case ApplianceHousing() if drawer_count == 0:
                return FrontType.NONE
            case _ if door_count == 0 and drawer_count == 0:
                return FrontType.NONE
            case _ if door_count == 0:
                return FrontType.DRAWER
            case _:
                return FrontType.DOOR
