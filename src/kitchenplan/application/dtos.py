"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from kitchenplan.domain.components import Assembly
from kitchenplan.domain.entities import CabinetInstance
from kitchenplan.domain.recipes import ConstructionRecipe
from kitchenplan.domain.services import SnapResult


@dataclass(frozen=True)
class AssemblyOutput:
    """Output of assembling one placed instance.

    Attributes:
        instance: The instance that was assembled.
        product_name: Display name of the instance's product.
        recipe: Effective recipe after overrides.
        assembly: Ordered part list and warnings.
    """

    instance: CabinetInstance
    product_name: str
    recipe: ConstructionRecipe
    assembly: Assembly


@dataclass(frozen=True)
class PlacementOutput:
    """Output of resolving a drop position.

    Attributes:
        result: Snap result for the drop.
        instance: Copy of the instance moved to the resolved position. The
            instance passed in is left unchanged.
    """

    result: SnapResult
    instance: CabinetInstance

    @property
    def has_collision(self) -> bool:
        return self.result.unresolved_collision
