"""Text formatters for assemblies, placements and the recipe table."""

from __future__ import annotations

from typing import Iterable

from kitchenplan.application.dtos import AssemblyOutput, PlacementOutput
from kitchenplan.domain.entities import Part
from kitchenplan.domain.recipes import RecipeTemplate


class PartListFormatter:
    """Formats the part list of assembled instances as a table."""

    def __init__(self, show_positions: bool = True) -> None:
        """Initialize formatter.

        Args:
            show_positions: Whether to include the part centre column.
        """
        self._show_positions = show_positions

    def format(self, output: AssemblyOutput) -> str:
        instance = output.instance
        assembly = output.assembly
        lines = [
            f"{instance.instance_id} - {output.product_name} ({output.recipe.name})",
            f"  {assembly.width:g} x {assembly.height:g} x {assembly.depth:g} mm, "
            f"{len(assembly.parts)} parts",
            "=" * 90,
            self._header(),
            "-" * 90,
        ]
        for part in assembly.parts:
            lines.append(self._row(part))
        lines.append("-" * 90)

        for warning in assembly.warnings:
            lines.append(f"WARNING [{warning.code.value}] {warning.message}")

        return "\n".join(lines)

    def format_all(self, outputs: Iterable[AssemblyOutput]) -> str:
        """Format several assemblies separated by blank lines."""
        blocks = [self.format(output) for output in outputs]
        if not blocks:
            return "No cabinets to assemble."
        return "\n\n".join(blocks)

    def _header(self) -> str:
        header = f"{'Part':<22} {'Kind':<16} {'W':>8} {'H':>8} {'D':>8}"
        if self._show_positions:
            header += f"  {'Position (x, y, z)'}"
        return header

    def _row(self, part: Part) -> str:
        size = part.size
        row = (
            f"{part.label:<22} {part.kind.value:<16} "
            f"{size.width:>8.1f} {size.height:>8.1f} {size.depth:>8.1f}"
        )
        if self._show_positions:
            x, y, z = part.position.as_tuple()
            row += f"  ({x:.1f}, {y:.1f}, {z:.1f})"
        return row


class SnapResultFormatter:
    """Formats a placement result."""

    def format(self, output: PlacementOutput) -> str:
        result = output.result
        lines = [
            f"{output.instance.instance_id}: x={result.x:g} z={result.z:g} "
            f"rotation={result.rotation}",
            f"  snapped to: {result.snapped_to.value}",
        ]
        if result.wall is not None:
            lines.append(f"  wall: {result.wall.value}")
        if result.snap_edge is not None:
            lines.append(f"  edge: {result.snap_edge.value}")
        if result.snapped_item_id is not None:
            lines.append(f"  neighbour: {result.snapped_item_id}")
        if result.unresolved_collision:
            lines.append(
                f"  COLLISION with {', '.join(result.colliding_item_ids)}"
            )
        for warning in result.warnings:
            lines.append(f"  warning: {warning.value}")
        return "\n".join(lines)


class RecipeTableFormatter:
    """Formats recipe templates grouped by category."""

    def format(self, templates: Iterable[RecipeTemplate]) -> str:
        lines = [
            "RECIPES",
            "=" * 60,
            f"{'Category':<10} {'Sub-kind':<18} {'Name'}",
            "-" * 60,
        ]
        for template in templates:
            lines.append(
                f"{template.category.value:<10} {template.sub_kind.value:<18} "
                f"{template.name}"
            )
        return "\n".join(lines)
