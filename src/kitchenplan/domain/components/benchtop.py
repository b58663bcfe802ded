"""Benchtop generator."""

from __future__ import annotations

from ..value_objects import CabinetCategory, PartKind
from .context import AssemblyContext
from .registry import generator_registry
from .results import GenerationResult


@generator_registry.register("benchtop.slab")
class BenchtopGenerator:
    """Benchtop slab laid on top of a base cabinet.

    The slab spans the cabinet plus any fillers and overhangs the front.
    Sink cabinets flag the slab for a cutout; the hole itself is left to
    the fabricator.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return (
            context.category == CabinetCategory.BASE
            and context.recipe.benchtop.enabled
        )

    def generate(self, context: AssemblyContext) -> GenerationResult:
        benchtop = context.recipe.benchtop
        options = context.options
        left = options.filler_left + benchtop.side_overhang
        right = options.filler_right + benchtop.side_overhang
        metadata: dict[str, object] = {"sink_cutout": context.recipe.is_sink}
        if options.tap_id is not None:
            metadata["tap_id"] = options.tap_id

        slab = context.part(
            PartKind.BENCHTOP,
            "benchtop",
            (
                context.width + left + right,
                benchtop.thickness,
                context.depth + benchtop.front_overhang,
            ),
            (
                (right - left) / 2,
                context.height / 2 + benchtop.thickness / 2,
                benchtop.front_overhang / 2,
            ),
            **metadata,
        )
        return GenerationResult.from_parts([slab])
