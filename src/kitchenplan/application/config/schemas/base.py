"""Shared constants and enums for project configuration schemas.

Enums come straight from the domain layer. They are ``(str, Enum)`` types,
so JSON strings validate against them directly.
"""

from kitchenplan.domain.value_objects import (
    ApplianceKind,
    CabinetCategory,
    CornerType,
    ItemType,
    RoomShape,
    Side,
)

# Supported schema versions for project files
# Version 1.0: Room, dimensions, snap settings, catalog and instances
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

__all__ = [
    "SUPPORTED_VERSIONS",
    "ApplianceKind",
    "CabinetCategory",
    "CornerType",
    "ItemType",
    "RoomShape",
    "Side",
]
