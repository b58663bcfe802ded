"""Adapters from a validated ProjectConfiguration to domain objects.

Each ``config_to_*`` function converts one section of the project file.
``config_to_session`` bundles them into the immutable SessionConfig the
application commands work from.
"""

from kitchenplan.application.config.schemas import (
    InstanceSchema,
    ProductSchema,
    ProjectConfiguration,
    RecipeOverridesSchema,
)
from kitchenplan.application.session import SessionConfig
from kitchenplan.domain.entities import CabinetInstance, CatalogProduct
from kitchenplan.domain.recipes import RecipeOverrides
from kitchenplan.domain.services import DEFAULT_WIDTH, SnapSettings
from kitchenplan.domain.value_objects import (
    CabinetCategory,
    GlobalDimensions,
    ItemType,
    RoomConfig,
    Size3,
)


def config_to_room(config: ProjectConfiguration) -> RoomConfig:
    """Convert the room section to a RoomConfig."""
    room = config.room
    return RoomConfig(
        width=room.width,
        depth=room.depth,
        height=room.height,
        shape=room.shape,
        cutout_width=room.cutout_width,
        cutout_depth=room.cutout_depth,
    )


def config_to_dimensions(config: ProjectConfiguration) -> GlobalDimensions:
    """Convert the dimensions section to GlobalDimensions."""
    return GlobalDimensions(**config.dimensions.model_dump())


def config_to_snap_settings(config: ProjectConfiguration) -> SnapSettings:
    """Convert the snap section to SnapSettings."""
    return SnapSettings(**config.snap.model_dump())


def product_to_domain(product: ProductSchema) -> CatalogProduct:
    """Convert one catalog entry to a CatalogProduct."""
    size = product.default_size
    return CatalogProduct(
        product_id=product.product_id,
        name=product.name,
        category=product.category,
        kind=product.kind.to_domain(),
        door_count=product.door_count,
        drawer_count=product.drawer_count,
        shelf_count=product.shelf_count,
        default_size=(
            Size3(size.width, size.height, size.depth) if size is not None else None
        ),
        item_type=product.item_type,
    )


def config_to_catalog(config: ProjectConfiguration) -> dict[str, CatalogProduct]:
    """Convert the catalog to a mapping keyed by product id, in file order."""
    return {
        product.product_id: product_to_domain(product) for product in config.catalog
    }


def _instance_size(
    instance: InstanceSchema,
    product: CatalogProduct | None,
    dimensions: GlobalDimensions,
) -> tuple[float, float, float]:
    """Explicit size, then the product default, then the category default."""
    default = product.default_size if product is not None else None
    category = product.category if product is not None else CabinetCategory.BASE
    width = instance.width or (default.width if default else DEFAULT_WIDTH)
    height = instance.height or (
        default.height if default else dimensions.height_for(category)
    )
    depth = instance.depth or (
        default.depth if default else dimensions.depth_for(category)
    )
    return width, height, depth


def instance_to_domain(
    instance: InstanceSchema,
    product: CatalogProduct | None,
    dimensions: GlobalDimensions,
) -> CabinetInstance:
    """Convert one instance entry to a CabinetInstance."""
    width, height, depth = _instance_size(instance, product, dimensions)
    return CabinetInstance(
        instance_id=instance.instance_id,
        product_id=instance.product_id,
        x=instance.x,
        z=instance.z,
        y=instance.y,
        rotation=instance.rotation,
        width=width,
        height=height,
        depth=depth,
        item_type=product.item_type if product is not None else ItemType.CABINET,
        hinge_side=instance.hinge_side,
        end_panel_left=instance.end_panel_left,
        end_panel_right=instance.end_panel_right,
        filler_left=instance.filler_left,
        filler_right=instance.filler_right,
        blind_side=instance.blind_side,
        corner_type=instance.corner_type,
        left_arm_depth=instance.left_arm_depth,
        right_arm_depth=instance.right_arm_depth,
        tap_id=instance.tap_id,
        appliance_id=instance.appliance_id,
    )


def config_to_instances(
    config: ProjectConfiguration,
    catalog: dict[str, CatalogProduct] | None = None,
    dimensions: GlobalDimensions | None = None,
) -> list[CabinetInstance]:
    """Convert every placed instance, in file order."""
    catalog = catalog if catalog is not None else config_to_catalog(config)
    dimensions = dimensions or config_to_dimensions(config)
    return [
        instance_to_domain(instance, catalog.get(instance.product_id), dimensions)
        for instance in config.instances
    ]


def overrides_to_domain(overrides: RecipeOverridesSchema) -> RecipeOverrides:
    return RecipeOverrides(**overrides.model_dump())


def config_to_overrides(config: ProjectConfiguration) -> dict[str, RecipeOverrides]:
    """Recipe overrides keyed by instance id, for instances that have them."""
    return {
        instance.instance_id: overrides_to_domain(instance.overrides)
        for instance in config.instances
        if instance.overrides is not None
    }


def config_to_session(config: ProjectConfiguration) -> SessionConfig:
    """Build the immutable session configuration for a project.

    Args:
        config: A validated ProjectConfiguration

    Returns:
        SessionConfig with room, dimensions, snap settings, catalog,
        materials, instances and per-instance recipe overrides.
    """
    dimensions = config_to_dimensions(config)
    catalog = config_to_catalog(config)
    return SessionConfig(
        room=config_to_room(config),
        dimensions=dimensions,
        snap=config_to_snap_settings(config),
        catalog=catalog,
        materials=dict(config.materials),
        instances=tuple(config_to_instances(config, catalog, dimensions)),
        overrides=config_to_overrides(config),
    )
