"""Generator registry for cabinet part generators."""

from __future__ import annotations

from typing import Callable, TypeVar

from .protocol import PartGenerator

G = TypeVar("G", bound=PartGenerator)


class GeneratorRegistry:
    """Singleton registry for part generator types.

    Generator IDs must follow the format 'category.type':
    - 'carcass.standard' - Gables, bottom, top and back of a box carcass
    - 'front.corner' - Doors of corner cabinets

    Example:
        @generator_registry.register("benchtop.slab")
        class BenchtopGenerator:
            def applies(self, context):
                ...

            def generate(self, context):
                ...

        # Later, retrieve the generator class
        benchtop_cls = generator_registry.get("benchtop.slab")
        benchtop = benchtop_cls()
    """

    _instance: GeneratorRegistry | None = None
    _generators: dict[str, type[PartGenerator]]

    def __new__(cls) -> GeneratorRegistry:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._generators = {}
        return cls._instance

    def register(self, generator_id: str) -> Callable[[type[G]], type[G]]:
        """Decorator to register a generator class.

        Args:
            generator_id: Unique identifier for the generator type.

        Returns:
            A decorator function that registers the class and returns it unchanged.

        Raises:
            ValueError: If generator_id is already registered or has invalid format.
        """

        def decorator(cls: type[G]) -> type[G]:
            if generator_id in self._generators:
                raise ValueError(f"Generator '{generator_id}' already registered")
            self._validate_id(generator_id)
            self._generators[generator_id] = cls
            return cls

        return decorator

    def get(self, generator_id: str) -> type[PartGenerator]:
        """Get a generator class by ID.

        Raises:
            KeyError: If no generator is registered with the given ID.
        """
        if generator_id not in self._generators:
            raise KeyError(f"Unknown generator: {generator_id}")
        return self._generators[generator_id]

    def list(self) -> list[str]:
        """List all registered generator IDs, sorted."""
        return sorted(self._generators.keys())

    def unregister(self, generator_id: str) -> None:
        """Remove a generator. Mainly for tests that register temporary ones."""
        self._generators.pop(generator_id, None)

    def _validate_id(self, generator_id: str) -> None:
        parts = generator_id.split(".")
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Invalid generator ID '{generator_id}': must be 'category.type'"
            )


# Singleton instance for convenient access
generator_registry = GeneratorRegistry()
