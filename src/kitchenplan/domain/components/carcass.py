"""Box carcass generator."""

from __future__ import annotations

from ..value_objects import CornerType, PartKind
from .context import AssemblyContext
from .registry import generator_registry
from .results import GenerationResult


def uses_box_carcass(context: AssemblyContext) -> bool:
    """Standard and blind-corner cabinets are built on a rectangular box."""
    corner = context.recipe.corner
    return corner is None or corner.corner_type == CornerType.BLIND


@generator_registry.register("carcass.standard")
class StandardCarcassGenerator:
    """Two gables, a bottom, an optional top and an inset back panel.

    The gables run the full carcass height. The bottom and top sit between
    the gables and stop at the back panel. The back panel is held forward
    of the rear edge by the recipe's back setback to leave room for the
    hanging rail.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return uses_box_carcass(context)

    def generate(self, context: AssemblyContext) -> GenerationResult:
        carcass = context.recipe.carcass
        w = context.width
        d = context.depth
        t = carcass.gable_thickness
        height = context.carcass_height
        center_y = context.carcass_center_y
        setback = carcass.back_setback
        panel_depth = d - setback
        panel_z = setback / 2

        parts = [
            context.part(
                PartKind.GABLE,
                "left gable",
                (t, height, d),
                (-w / 2 + t / 2, center_y, 0.0),
            ),
            context.part(
                PartKind.GABLE,
                "right gable",
                (t, height, d),
                (w / 2 - t / 2, center_y, 0.0),
            ),
        ]

        if carcass.has_bottom:
            parts.append(
                context.part(
                    PartKind.BOTTOM,
                    "bottom",
                    (context.interior_width, carcass.bottom_thickness, panel_depth),
                    (
                        0.0,
                        context.carcass_bottom + carcass.bottom_thickness / 2,
                        panel_z,
                    ),
                )
            )
        if carcass.has_top:
            parts.append(
                context.part(
                    PartKind.TOP,
                    "top",
                    (context.interior_width, carcass.top_thickness, panel_depth),
                    (0.0, context.carcass_top - carcass.top_thickness / 2, panel_z),
                )
            )

        # The back covers the rear edge of the bottom and stops under the top
        back_height = context.interior_top - context.carcass_bottom
        parts.append(
            context.part(
                PartKind.BACK,
                "back",
                (context.interior_width, back_height, carcass.back_thickness),
                (
                    0.0,
                    context.carcass_bottom + back_height / 2,
                    -d / 2 + setback - carcass.back_thickness / 2,
                ),
            )
        )
        return GenerationResult.from_parts(parts)
