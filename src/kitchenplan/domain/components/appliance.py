"""Appliance cavity generator."""

from __future__ import annotations

from ..kinds import ApplianceHousing
from ..value_objects import PartKind
from .context import AssemblyContext
from .fronts import APPLIANCE_DRAWER_HEIGHT
from .registry import generator_registry
from .results import GenerationResult


@generator_registry.register("appliance.cavity")
class ApplianceCavityGenerator:
    """Placeholder volume for the appliance inside a housing.

    The cavity fills the carcass interior below the optional top drawer
    and is tagged with the appliance kind so a renderer can substitute
    the appliance model.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return isinstance(context.recipe.kind, ApplianceHousing)

    def generate(self, context: AssemblyContext) -> GenerationResult:
        kind = context.recipe.kind
        assert isinstance(kind, ApplianceHousing)
        recipe = context.recipe
        setback = recipe.carcass.back_setback
        top = context.interior_top
        if recipe.fronts.drawer_count > 0:
            top = context.carcass_top - min(
                APPLIANCE_DRAWER_HEIGHT, context.carcass_height
            )
        bottom = context.interior_bottom
        height = top - bottom

        cavity = context.part(
            PartKind.APPLIANCE_CAVITY,
            f"{kind.appliance.value} cavity",
            (context.interior_width, height, context.depth - setback),
            (0.0, bottom + height / 2, setback / 2),
            appliance=kind.appliance.value,
            appliance_id=context.options.appliance_id,
        )
        return GenerationResult.from_parts([cavity])
