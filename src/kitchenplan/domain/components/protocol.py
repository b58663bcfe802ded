"""Protocol definition for part generators."""

from __future__ import annotations

from typing import Protocol

from .context import AssemblyContext
from .results import GenerationResult


class PartGenerator(Protocol):
    """Protocol for cabinet part generators.

    Each generator owns one concern of the cabinet (carcass, fronts,
    benchtop, ...). The assembler asks every registered generator whether
    it applies to the cabinet being built and concatenates the parts of
    those that do.

    Generators are registered with the GeneratorRegistry using an ID in
    the format 'category.type'.

    Example:
        @generator_registry.register("benchtop.slab")
        class BenchtopGenerator:
            def applies(self, context: AssemblyContext) -> bool:
                return context.recipe.benchtop.enabled

            def generate(self, context: AssemblyContext) -> GenerationResult:
                ...
    """

    def applies(self, context: AssemblyContext) -> bool:
        """Check whether this generator contributes to the cabinet.

        Args:
            context: Resolved recipe and sanitized dimensions.

        Returns:
            True if generate() should be called.
        """
        ...

    def generate(self, context: AssemblyContext) -> GenerationResult:
        """Generate this generator's parts.

        Must not raise for any context the assembler builds. Degenerate
        geometry is dropped rather than reported as an error.

        Args:
            context: Resolved recipe and sanitized dimensions.

        Returns:
            GenerationResult with the generated parts and any warnings.
        """
        ...
