"""JSON exporters for assemblies and placements."""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, Iterable, Mapping

from kitchenplan.application.dtos import AssemblyOutput, PlacementOutput
from kitchenplan.domain.entities import Part


def _plain(value: Any) -> Any:
    """Convert enums inside asdict() output to their values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _part_data(part: Part) -> dict[str, Any]:
    """Plain data for a part; the metadata mapping is read-only."""
    return {
        "kind": part.kind.value,
        "size": asdict(part.size),
        "position": asdict(part.position),
        "material_ref": part.material_ref,
        "label": part.label,
        "rotation": asdict(part.rotation),
        "metadata": _plain(part.metadata),
    }


class JsonExporter:
    """Exports assemblies and placements as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def assembly_data(self, output: AssemblyOutput) -> dict[str, Any]:
        assembly = output.assembly
        return {
            "instance_id": output.instance.instance_id,
            "product_id": output.instance.product_id,
            "product_name": output.product_name,
            "recipe": output.recipe.name,
            "synthesized_recipe": output.recipe.synthesized,
            "size": {
                "width": assembly.width,
                "height": assembly.height,
                "depth": assembly.depth,
            },
            "parts": [_part_data(part) for part in assembly.parts],
            "warnings": [_plain(asdict(warning)) for warning in assembly.warnings],
        }

    def export_assemblies(self, outputs: Iterable[AssemblyOutput]) -> str:
        """Export assembled instances as a JSON document."""
        data = {"assemblies": [self.assembly_data(output) for output in outputs]}
        return json.dumps(data, indent=self.indent)

    def export_placement(self, output: PlacementOutput) -> str:
        """Export a placement result as a JSON document."""
        data = {
            "instance_id": output.instance.instance_id,
            "result": _plain(asdict(output.result)),
        }
        return json.dumps(data, indent=self.indent)
