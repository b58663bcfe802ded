"""Result types for part generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..entities import Part
from ..value_objects import PartKind


class WarningCode(str, Enum):
    """Recoverable conditions recorded during assembly."""

    INVALID_DIMENSION = "invalid_dimension"
    MISSING_MATERIAL = "missing_material"
    MISSING_RECIPE = "missing_recipe"
    ARM_DEPTH_CLAMPED = "arm_depth_clamped"


@dataclass(frozen=True)
class AssemblyWarning:
    """A non-fatal issue found while assembling a cabinet.

    Attributes:
        code: Machine-readable warning category.
        message: Human-readable description.
    """

    code: WarningCode
    message: str


@dataclass(frozen=True)
class GenerationResult:
    """Parts and warnings produced by one part generator.

    Attributes:
        parts: Tuple of generated parts, in build order.
        warnings: Tuple of warnings raised while generating.
    """

    parts: tuple[Part, ...] = field(default_factory=tuple)
    warnings: tuple[AssemblyWarning, ...] = field(default_factory=tuple)

    @classmethod
    def from_parts(
        cls,
        parts: list[Part | None],
        warnings: list[AssemblyWarning] | None = None,
    ) -> GenerationResult:
        """Create a result from a list of parts, dropping empty entries.

        Part builders return None for degenerate geometry, so generators
        can pass their lists straight through.
        """
        return cls(
            parts=tuple(part for part in parts if part is not None),
            warnings=tuple(warnings or []),
        )


@dataclass(frozen=True)
class Assembly:
    """Complete part list for one cabinet.

    Attributes:
        recipe_name: Name of the recipe the cabinet was built from.
        width: Width actually used, after dimension substitution.
        height: Height actually used.
        depth: Depth actually used.
        parts: Ordered parts.
        warnings: Recoverable issues found during assembly.
    """

    recipe_name: str
    width: float
    height: float
    depth: float
    parts: tuple[Part, ...] = field(default_factory=tuple)
    warnings: tuple[AssemblyWarning, ...] = field(default_factory=tuple)

    def parts_of(self, kind: PartKind) -> list[Part]:
        """All parts of one kind, in build order."""
        return [part for part in self.parts if part.kind == kind]

    def count(self, kind: PartKind) -> int:
        return len(self.parts_of(kind))

    def part(self, label: str) -> Part | None:
        """Part with the given label, or None."""
        for part in self.parts:
            if part.label == label:
                return part
        return None

    @property
    def labels(self) -> list[str]:
        return [part.label for part in self.parts]

    def has_warning(self, code: WarningCode) -> bool:
        return any(warning.code == code for warning in self.warnings)
