"""Immutable session configuration.

A SessionConfig is built once from a project file and never modified.
Changing the room, the dimensions or the catalog produces a new
SessionConfig through the ``with_*`` methods, so commands holding the old
one keep a consistent view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from kitchenplan.domain.entities import CabinetInstance, CatalogProduct
from kitchenplan.domain.recipes import (
    RecipeOverrides,
    RecipeTable,
    default_recipe_table,
)
from kitchenplan.domain.services import SnapSettings
from kitchenplan.domain.value_objects import (
    CabinetCategory,
    GlobalDimensions,
    RoomConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Everything the core reads during a planning session.

    Attributes:
        room: Room outline.
        dimensions: Category defaults and construction constants.
        snap: Snap engine tuning.
        catalog: Products by product id.
        recipes: Recipe table used for resolution.
        materials: Material reference by part kind or group.
        instances: Placed items, in placement order.
        overrides: Recipe overrides by instance id.
    """

    room: RoomConfig
    dimensions: GlobalDimensions = field(default_factory=GlobalDimensions)
    snap: SnapSettings = field(default_factory=SnapSettings)
    catalog: Mapping[str, CatalogProduct] = field(default_factory=dict)
    recipes: RecipeTable = field(default_factory=default_recipe_table)
    materials: Mapping[str, str] = field(default_factory=dict)
    instances: tuple[CabinetInstance, ...] = ()
    overrides: Mapping[str, RecipeOverrides] = field(default_factory=dict)

    def with_room(self, room: RoomConfig) -> SessionConfig:
        return replace(self, room=room)

    def with_dimensions(self, dimensions: GlobalDimensions) -> SessionConfig:
        return replace(self, dimensions=dimensions)

    def with_catalog(self, products: Iterable[CatalogProduct]) -> SessionConfig:
        """Replace the whole catalog."""
        return replace(
            self, catalog={product.product_id: product for product in products}
        )

    def with_instances(self, instances: Iterable[CabinetInstance]) -> SessionConfig:
        return replace(self, instances=tuple(instances))

    def product(self, product_id: str) -> CatalogProduct:
        """Look up a product.

        Unknown ids yield a plain one-door base cabinet so an instance
        whose product was removed from the catalog can still be drawn.
        """
        product = self.catalog.get(product_id)
        if product is not None:
            return product
        logger.warning(
            f"Product '{product_id}' not in catalog; using a standard base cabinet"
        )
        return CatalogProduct(
            product_id=product_id, name=product_id, category=CabinetCategory.BASE
        )

    def instance(self, instance_id: str) -> CabinetInstance | None:
        for instance in self.instances:
            if instance.instance_id == instance_id:
                return instance
        return None

    def overrides_for(self, instance: CabinetInstance) -> RecipeOverrides:
        """Stored recipe overrides merged with the instance's own corner fields."""
        stored = self.overrides.get(instance.instance_id, RecipeOverrides())
        return replace(
            stored,
            corner_type=instance.corner_type or stored.corner_type,
            left_arm_depth=_first_set(instance.left_arm_depth, stored.left_arm_depth),
            right_arm_depth=_first_set(
                instance.right_arm_depth, stored.right_arm_depth
            ),
            blind_side=instance.blind_side or stored.blind_side,
        )


def _first_set(*values: float | None) -> float | None:
    for value in values:
        if value is not None:
            return value
    return None
