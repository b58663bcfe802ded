"""Interior shelf generator."""

from __future__ import annotations

from ..value_objects import PartKind
from .carcass import uses_box_carcass
from .context import AssemblyContext
from .drawers import combination_drawer_section
from .registry import generator_registry
from .results import GenerationResult


def shelf_heights(bottom: float, top: float, count: int) -> list[float]:
    """Centre heights of ``count`` shelves dividing a span evenly.

    The usable span is split into ``count + 1`` equal spaces and a shelf
    sits at every interior division point, listed bottom to top.

    Args:
        bottom: Lower end of the usable span.
        top: Upper end of the usable span.
        count: Number of shelves.

    Returns:
        Shelf centre heights, empty when count is zero or the span is empty.
    """
    if count <= 0 or top <= bottom:
        return []
    spacing = (top - bottom) / (count + 1)
    return [bottom + spacing * index for index in range(1, count + 1)]


def shelf_region_top(context: AssemblyContext) -> float:
    """Upper end of the shelf span.

    Combination cabinets keep their shelves below the drawer divider.
    """
    recipe = context.recipe
    if recipe.fronts.is_combination:
        section = combination_drawer_section(
            recipe.fronts.drawer_count, context.carcass_height
        )
        return context.carcass_top - section - recipe.fronts.divider_thickness
    return context.interior_top


@generator_registry.register("shelf.interior")
class InteriorShelfGenerator:
    """Evenly spaced shelves inside a box carcass.

    Each shelf spans the interior width and is held back from the front
    edge by the recipe's shelf setback.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return uses_box_carcass(context) and context.recipe.shelves.count > 0

    def generate(self, context: AssemblyContext) -> GenerationResult:
        recipe = context.recipe
        shelves = recipe.shelves
        back_setback = recipe.carcass.back_setback
        shelf_depth = context.depth - back_setback - shelves.setback
        shelf_z = (back_setback - shelves.setback) / 2

        heights = shelf_heights(
            context.interior_bottom, shelf_region_top(context), shelves.count
        )
        parts = [
            context.part(
                PartKind.SHELF,
                f"shelf {index}",
                (context.interior_width, shelves.thickness, shelf_depth),
                (0.0, y, shelf_z),
                adjustable=shelves.adjustable,
            )
            for index, y in enumerate(heights, start=1)
        ]
        return GenerationResult.from_parts(parts)
