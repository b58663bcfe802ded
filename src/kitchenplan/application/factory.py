"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .session import SessionConfig

if TYPE_CHECKING:
    from kitchenplan.application.commands import (
        AssembleCabinetCommand,
        PlaceCabinetCommand,
    )
    from kitchenplan.domain.recipes import RecipeResolver
    from kitchenplan.domain.services import CabinetAssembler, SnapEngine
    from kitchenplan.infrastructure import (
        JsonExporter,
        PartListFormatter,
        RecipeTableFormatter,
        SnapResultFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for the services and commands of one session.

    Domain services are created lazily and cached, so every command made
    by one factory shares the same resolver, assembler and engine.

    Example:
        ```python
        factory = ServiceFactory(session)
        output = factory.create_assemble_command().execute(instance)
        print(factory.get_part_list_formatter().format(output))
        ```
    """

    session: SessionConfig

    _recipe_resolver: "RecipeResolver | None" = field(
        default=None, init=False, repr=False
    )
    _assembler: "CabinetAssembler | None" = field(
        default=None, init=False, repr=False
    )
    _snap_engine: "SnapEngine | None" = field(default=None, init=False, repr=False)

    def get_recipe_resolver(self) -> "RecipeResolver":
        """Get or create the recipe resolver."""
        if self._recipe_resolver is None:
            from kitchenplan.domain.recipes import RecipeResolver

            self._recipe_resolver = RecipeResolver(
                self.session.recipes, self.session.dimensions
            )
        return self._recipe_resolver

    def get_assembler(self) -> "CabinetAssembler":
        """Get or create the cabinet assembler."""
        if self._assembler is None:
            from kitchenplan.domain.services import CabinetAssembler

            self._assembler = CabinetAssembler(self.session.dimensions)
        return self._assembler

    def get_snap_engine(self) -> "SnapEngine":
        """Get or create the snap engine."""
        if self._snap_engine is None:
            from kitchenplan.domain.services import SnapEngine

            self._snap_engine = SnapEngine(self.session.snap)
        return self._snap_engine

    def get_part_list_formatter(self) -> "PartListFormatter":
        from kitchenplan.infrastructure import PartListFormatter

        return PartListFormatter()

    def get_snap_result_formatter(self) -> "SnapResultFormatter":
        from kitchenplan.infrastructure import SnapResultFormatter

        return SnapResultFormatter()

    def get_recipe_table_formatter(self) -> "RecipeTableFormatter":
        from kitchenplan.infrastructure import RecipeTableFormatter

        return RecipeTableFormatter()

    def get_json_exporter(self) -> "JsonExporter":
        from kitchenplan.infrastructure import JsonExporter

        return JsonExporter()

    def create_assemble_command(self) -> "AssembleCabinetCommand":
        """Create AssembleCabinetCommand with the shared services."""
        from kitchenplan.application.commands import AssembleCabinetCommand

        return AssembleCabinetCommand(
            self.session,
            resolver=self.get_recipe_resolver(),
            assembler=self.get_assembler(),
        )

    def create_place_command(self) -> "PlaceCabinetCommand":
        """Create PlaceCabinetCommand with the shared snap engine."""
        from kitchenplan.application.commands import PlaceCabinetCommand

        return PlaceCabinetCommand(self.session, engine=self.get_snap_engine())
