"""Application commands (use cases) for cabinet assembly and placement."""

from __future__ import annotations

import logging
from typing import Sequence

from kitchenplan.domain.entities import CabinetInstance
from kitchenplan.domain.recipes import RecipeResolver
from kitchenplan.domain.services import CabinetAssembler, SnapEngine
from kitchenplan.domain.value_objects import ItemType

from .dtos import AssemblyOutput, PlacementOutput
from .session import SessionConfig

logger = logging.getLogger(__name__)


class AssembleCabinetCommand:
    """Command to build the part list of a placed instance.

    Resolves the instance's product recipe with its overrides, then runs
    the assembler with the session's materials.
    """

    def __init__(
        self,
        session: SessionConfig,
        resolver: RecipeResolver | None = None,
        assembler: CabinetAssembler | None = None,
    ) -> None:
        self.session = session
        self.resolver = resolver or RecipeResolver(
            session.recipes, session.dimensions
        )
        self.assembler = assembler or CabinetAssembler(session.dimensions)

    def execute(self, instance: CabinetInstance) -> AssemblyOutput:
        """Assemble one instance.

        Args:
            instance: Placed instance to assemble.

        Returns:
            AssemblyOutput with the effective recipe and the part list.
        """
        product = self.session.product(instance.product_id)
        recipe = self.resolver.resolve(
            product, self.session.overrides_for(instance)
        )
        assembly = self.assembler.assemble_instance(
            recipe, instance, self.session.materials
        )
        logger.debug(
            f"Assembled {instance.instance_id} from '{recipe.name}': "
            f"{len(assembly.parts)} parts, {len(assembly.warnings)} warnings"
        )
        return AssemblyOutput(
            instance=instance,
            product_name=product.name,
            recipe=recipe,
            assembly=assembly,
        )

    def execute_all(self) -> list[AssemblyOutput]:
        """Assemble every cabinet and appliance in the session.

        Structure items (columns, bulkheads) have no recipe and are skipped.
        """
        return [
            self.execute(instance)
            for instance in self.session.instances
            if instance.item_type != ItemType.STRUCTURE
        ]


class PlaceCabinetCommand:
    """Command to resolve a drop position for an instance."""

    def __init__(
        self,
        session: SessionConfig,
        engine: SnapEngine | None = None,
    ) -> None:
        self.session = session
        self.engine = engine or SnapEngine(session.snap)

    def execute(
        self,
        instance: CabinetInstance,
        raw_x: float,
        raw_z: float,
        others: Sequence[CabinetInstance] | None = None,
    ) -> PlacementOutput:
        """Snap ``instance`` dropped at (raw_x, raw_z).

        Args:
            instance: Instance being placed.
            raw_x: Drop point along x in room millimetres.
            raw_z: Drop point along z in room millimetres.
            others: Placed items to snap against. Defaults to the
                session's instances.

        Returns:
            PlacementOutput with the snap result and a moved copy of the
            instance.
        """
        if others is None:
            others = self.session.instances
        result = self.engine.resolve(
            instance, raw_x, raw_z, others, self.session.room
        )
        placed = instance.with_transform(result.x, result.z, result.rotation)
        return PlacementOutput(result=result, instance=placed)
