"""Cabinet geometry assembly.

Turns a resolved recipe and instance dimensions into an ordered part
list. Every recoverable problem (bad dimensions, missing materials, a
synthesized recipe) is recorded as a warning on the result instead of
raised.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from ..components import (
    Assembly,
    AssemblyContext,
    AssemblyWarning,
    GeneratorRegistry,
    InstanceOptions,
    PartGenerator,
    WarningCode,
    generator_registry,
)
from ..entities import CabinetInstance, Part
from ..handles import DEFAULT_HANDLE_LENGTH
from ..recipes import ConstructionRecipe
from ..value_objects import GlobalDimensions

logger = logging.getLogger(__name__)

# Substitutes for missing, zero or NaN dimensions
DEFAULT_WIDTH = 600.0
DEFAULT_HEIGHT = 720.0
DEFAULT_DEPTH = 560.0

ASSEMBLY_ORDER: tuple[str, ...] = (
    "carcass.standard",
    "carcass.corner",
    "carcass.blind",
    "kick.plinth",
    "shelf.interior",
    "appliance.cavity",
    "front.standard",
    "front.corner",
    "benchtop.slab",
    "accessory.end_panel",
    "accessory.filler",
)


def _sanitize_dimension(
    name: str,
    value: float | None,
    default: float,
    warnings: list[AssemblyWarning],
) -> float:
    """Return a usable dimension, substituting the default for bad input."""
    if value is not None and math.isfinite(value) and value > 0:
        return float(value)
    message = f"{name} {value!r} replaced by {default:g}mm"
    logger.warning(f"Invalid cabinet dimension: {message}")
    warnings.append(AssemblyWarning(WarningCode.INVALID_DIMENSION, message))
    return default


class CabinetAssembler:
    """Builds the part list of a cabinet from its recipe.

    Generators run in a fixed order so the same inputs always produce the
    same part list.

    Example:
        assembler = CabinetAssembler()
        assembly = assembler.assemble(recipe, 600, 870, 575, {"carcass": "white"})
        for part in assembly.parts:
            print(part.label, part.size)
    """

    def __init__(
        self,
        dimensions: GlobalDimensions | None = None,
        handle_length: float = DEFAULT_HANDLE_LENGTH,
        registry: GeneratorRegistry | None = None,
        order: Sequence[str] = ASSEMBLY_ORDER,
    ) -> None:
        self.dimensions = dimensions or GlobalDimensions()
        self.handle_length = handle_length
        registry = registry or generator_registry
        self._generators: list[PartGenerator] = [
            registry.get(generator_id)() for generator_id in order
        ]

    def assemble(
        self,
        recipe: ConstructionRecipe,
        width: float | None,
        height: float | None,
        depth: float | None,
        materials: Mapping[str, str] | None = None,
        options: InstanceOptions | None = None,
    ) -> Assembly:
        """Assemble a cabinet.

        Args:
            recipe: Resolved construction recipe.
            width: Overall width in millimetres.
            height: Overall height in millimetres.
            depth: Overall depth in millimetres.
            materials: Material reference by part kind ("door") or group
                ("carcass", "front", "plinth").
            options: Instance flags for hinges, end panels and fillers.

        Returns:
            Assembly with the ordered part list and any warnings.
        """
        warnings: list[AssemblyWarning] = []
        if recipe.synthesized:
            warnings.append(
                AssemblyWarning(
                    WarningCode.MISSING_RECIPE,
                    f"No catalog recipe for {recipe.category.value}/"
                    f"{recipe.sub_kind.value}; built from defaults",
                )
            )

        context = AssemblyContext(
            recipe=recipe,
            width=_sanitize_dimension("width", width, DEFAULT_WIDTH, warnings),
            height=_sanitize_dimension("height", height, DEFAULT_HEIGHT, warnings),
            depth=_sanitize_dimension("depth", depth, DEFAULT_DEPTH, warnings),
            materials=dict(materials or {}),
            options=options or InstanceOptions(),
            handle_length=self.handle_length,
            drill_spacing=self.dimensions.handle_drill_spacing,
            shadow_gap=self.dimensions.shadow_gap,
        )

        parts: list[Part] = []
        for generator in self._generators:
            if not generator.applies(context):
                continue
            result = generator.generate(context)
            parts.extend(result.parts)
            warnings.extend(result.warnings)

        missing = sorted(
            {part.kind.value for part in parts if not context.has_material(part.kind)}
        )
        if missing:
            logger.warning(
                f"No material for {', '.join(missing)}; using default material"
            )
            warnings.append(
                AssemblyWarning(
                    WarningCode.MISSING_MATERIAL,
                    f"Default material used for: {', '.join(missing)}",
                )
            )

        return Assembly(
            recipe_name=recipe.name,
            width=context.width,
            height=context.height,
            depth=context.depth,
            parts=tuple(parts),
            warnings=tuple(warnings),
        )

    def assemble_instance(
        self,
        recipe: ConstructionRecipe,
        instance: CabinetInstance,
        materials: Mapping[str, str] | None = None,
    ) -> Assembly:
        """Assemble a placed instance using its dimensions and flags."""
        return self.assemble(
            recipe,
            instance.width,
            instance.height,
            instance.depth,
            materials,
            InstanceOptions.from_instance(instance),
        )
