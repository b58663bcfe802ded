"""Pytest configuration and shared fixtures for kitchen planning tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from kitchenplan.application.session import SessionConfig
from kitchenplan.domain.entities import CabinetInstance, CatalogProduct
from kitchenplan.domain.kinds import Corner, Sink
from kitchenplan.domain.recipes import RecipeResolver
from kitchenplan.domain.services import CabinetAssembler, SnapEngine
from kitchenplan.domain.value_objects import (
    CabinetCategory,
    CornerType,
    RoomConfig,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "projects"

# Materials covering every part kind the generators produce
FULL_MATERIALS: dict[str, str] = {
    "carcass": "white melamine",
    "front": "oak veneer",
    "plinth": "black",
    "handle": "brushed steel",
    "benchtop": "stone",
    "appliance_cavity": "appliance",
}


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that drive the CLI or a full session"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def room() -> RoomConfig:
    """A 4000 x 3000 rectangular room."""
    return RoomConfig(width=4000, depth=3000)


@pytest.fixture
def base_product() -> CatalogProduct:
    return CatalogProduct("base-600", "Base 600", CabinetCategory.BASE)


@pytest.fixture
def sink_product() -> CatalogProduct:
    return CatalogProduct(
        "sink-900", "Sink 900", CabinetCategory.BASE, kind=Sink(has_false_front=True)
    )


@pytest.fixture
def corner_product() -> CatalogProduct:
    return CatalogProduct(
        "corner-900",
        "Corner 900",
        CabinetCategory.BASE,
        kind=Corner(CornerType.L_SHAPE),
    )


@pytest.fixture
def base_instance() -> CabinetInstance:
    """A 600 x 870 x 575 base cabinet at the origin."""
    return CabinetInstance("cab-1", "base-600")


@pytest.fixture
def resolver() -> RecipeResolver:
    return RecipeResolver()


@pytest.fixture
def assembler() -> CabinetAssembler:
    return CabinetAssembler()


@pytest.fixture
def engine() -> SnapEngine:
    return SnapEngine()


@pytest.fixture
def materials() -> dict[str, str]:
    return dict(FULL_MATERIALS)


@pytest.fixture
def session(
    room: RoomConfig,
    base_product: CatalogProduct,
    sink_product: CatalogProduct,
    corner_product: CatalogProduct,
) -> SessionConfig:
    """Session with three products and two placed base cabinets."""
    return SessionConfig(
        room=room,
        catalog={
            product.product_id: product
            for product in (base_product, sink_product, corner_product)
        },
        materials=dict(FULL_MATERIALS),
        instances=(
            CabinetInstance("cab-1", "base-600", x=1000, z=287.5),
            CabinetInstance("sink-1", "sink-900", x=1750, z=287.5, width=900),
        ),
    )


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
