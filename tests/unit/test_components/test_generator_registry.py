"""Unit tests for the part generator registry."""

import pytest

from kitchenplan.domain.components import (
    AssemblyContext,
    GenerationResult,
    GeneratorRegistry,
    generator_registry,
)
from kitchenplan.domain.services import ASSEMBLY_ORDER


class TestGeneratorRegistry:
    """Tests for GeneratorRegistry."""

    def test_singleton(self) -> None:
        assert GeneratorRegistry() is generator_registry

    def test_builtin_generators_registered(self) -> None:
        """Every generator in the assembly order is registered."""
        registered = generator_registry.list()
        assert registered == sorted(registered)
        for generator_id in ASSEMBLY_ORDER:
            assert generator_id in registered

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match="Unknown generator: missing.one"):
            generator_registry.get("missing.one")

    def test_duplicate_registration(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @generator_registry.register("benchtop.slab")
            class Duplicate:
                pass

    @pytest.mark.parametrize("bad_id", ["nodot", "too.many.dots", ".empty"])
    def test_invalid_id(self, bad_id: str) -> None:
        with pytest.raises(ValueError, match="must be 'category.type'"):
            generator_registry.register(bad_id)(type("Bad", (), {}))

    def test_register_and_unregister(self) -> None:
        """Temporary generators can be registered and removed again."""

        @generator_registry.register("test.temporary")
        class TemporaryGenerator:
            def applies(self, context: AssemblyContext) -> bool:
                return False

            def generate(self, context: AssemblyContext) -> GenerationResult:
                return GenerationResult()

        try:
            assert generator_registry.get("test.temporary") is TemporaryGenerator
        finally:
            generator_registry.unregister("test.temporary")
        assert "test.temporary" not in generator_registry.list()
