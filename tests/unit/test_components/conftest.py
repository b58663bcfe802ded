"""Fixtures for part generator tests."""

from __future__ import annotations

from typing import Callable

import pytest

from kitchenplan.domain.components import Assembly
from kitchenplan.domain.entities import CabinetInstance, CatalogProduct
from kitchenplan.domain.recipes import RecipeOverrides, RecipeResolver
from kitchenplan.domain.services import CabinetAssembler
from kitchenplan.domain.value_objects import CabinetCategory

Build = Callable[..., Assembly]


@pytest.fixture
def build(
    resolver: RecipeResolver,
    assembler: CabinetAssembler,
    materials: dict[str, str],
) -> Build:
    """Resolve and assemble a product in one call.

    Keyword arguments not consumed here are passed to CatalogProduct, so
    ``build(kind=Sink(), width=900)`` builds a 900mm sink base.
    """

    def _build(
        category: CabinetCategory = CabinetCategory.BASE,
        width: float = 600.0,
        height: float | None = None,
        depth: float | None = None,
        overrides: RecipeOverrides | None = None,
        instance: dict[str, object] | None = None,
        **product_fields: object,
    ) -> Assembly:
        product = CatalogProduct("p", "Test product", category, **product_fields)
        recipe = resolver.resolve(product, overrides)
        dims = resolver.dimensions
        cabinet = CabinetInstance(
            "cab",
            "p",
            width=width,
            height=height or dims.height_for(category),
            depth=depth or dims.depth_for(category),
            **(instance or {}),
        )
        return assembler.assemble_instance(recipe, cabinet, materials)

    return _build
