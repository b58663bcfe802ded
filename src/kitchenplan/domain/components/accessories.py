"""End panel and filler generators.

These parts come from instance flags rather than the recipe, so they can
be added to any cabinet.
"""

from __future__ import annotations

from ..entities import Part
from ..value_objects import PartKind
from .context import AssemblyContext
from .registry import generator_registry
from .results import GenerationResult


@generator_registry.register("accessory.end_panel")
class EndPanelGenerator:
    """Full-height finished panels outside the gables."""

    def applies(self, context: AssemblyContext) -> bool:
        options = context.options
        return options.end_panel_left or options.end_panel_right

    def generate(self, context: AssemblyContext) -> GenerationResult:
        options = context.options
        t = context.gable_thickness
        x = context.width / 2 + t / 2
        parts: list[Part | None] = []
        if options.end_panel_left:
            parts.append(
                context.part(
                    PartKind.END_PANEL,
                    "left end panel",
                    (t, context.height, context.depth),
                    (-x, 0.0, 0.0),
                )
            )
        if options.end_panel_right:
            parts.append(
                context.part(
                    PartKind.END_PANEL,
                    "right end panel",
                    (t, context.height, context.depth),
                    (x, 0.0, 0.0),
                )
            )
        return GenerationResult.from_parts(parts)


@generator_registry.register("accessory.filler")
class FillerGenerator:
    """Filler strips in the plane of the fronts, outside any end panel."""

    def applies(self, context: AssemblyContext) -> bool:
        options = context.options
        return options.filler_left > 0 or options.filler_right > 0

    def generate(self, context: AssemblyContext) -> GenerationResult:
        options = context.options
        t = context.gable_thickness
        size_args = (context.carcass_height, context.front_thickness)
        y = context.carcass_center_y
        parts: list[Part | None] = []
        if options.filler_left > 0:
            edge = context.width / 2 + (t if options.end_panel_left else 0.0)
            parts.append(
                context.part(
                    PartKind.FILLER,
                    "left filler",
                    (options.filler_left, *size_args),
                    (-(edge + options.filler_left / 2), y, context.front_z),
                )
            )
        if options.filler_right > 0:
            edge = context.width / 2 + (t if options.end_panel_right else 0.0)
            parts.append(
                context.part(
                    PartKind.FILLER,
                    "right filler",
                    (options.filler_right, *size_args),
                    (edge + options.filler_right / 2, y, context.front_z),
                )
            )
        return GenerationResult.from_parts(parts)
