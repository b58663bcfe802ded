"""Pydantic schemas for kitchen project files."""

from kitchenplan.application.config.schemas.base import SUPPORTED_VERSIONS
from kitchenplan.application.config.schemas.catalog_schema import (
    ApplianceKindSchema,
    CornerKindSchema,
    InstanceSchema,
    KindSchema,
    OpenKindSchema,
    PantryKindSchema,
    ProductSchema,
    RecipeOverridesSchema,
    SinkKindSchema,
    SizeSchema,
    StandardKindSchema,
)
from kitchenplan.application.config.schemas.room_schema import (
    DimensionsSchema,
    RoomSchema,
    SnapSchema,
)
from kitchenplan.application.config.schemas.root import ProjectConfiguration

__all__ = [
    "SUPPORTED_VERSIONS",
    "ApplianceKindSchema",
    "CornerKindSchema",
    "DimensionsSchema",
    "InstanceSchema",
    "KindSchema",
    "OpenKindSchema",
    "PantryKindSchema",
    "ProductSchema",
    "ProjectConfiguration",
    "RecipeOverridesSchema",
    "RoomSchema",
    "SinkKindSchema",
    "SizeSchema",
    "SnapSchema",
    "StandardKindSchema",
]
