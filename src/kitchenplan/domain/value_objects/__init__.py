"""Value objects for the kitchen planning domain.

This module provides immutable data types used throughout the system.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    RIGHT_ANGLES,
    BoundingBox,
    Size3,
    Vector3,
    is_quarter_turn,
    normalize_rotation,
)

# Enumerations
from ._enums import (
    ApplianceKind,
    CabinetCategory,
    CornerType,
    FrontType,
    ItemType,
    PartKind,
    RoomShape,
    Side,
    SnapEdge,
    SnapTarget,
    SnapWarning,
    WallId,
)

# Room and global defaults
from ._room import GlobalDimensions, RoomConfig

__all__ = [
    "RIGHT_ANGLES",
    "ApplianceKind",
    "BoundingBox",
    "CabinetCategory",
    "CornerType",
    "FrontType",
    "GlobalDimensions",
    "ItemType",
    "PartKind",
    "RoomConfig",
    "RoomShape",
    "Side",
    "Size3",
    "SnapEdge",
    "SnapTarget",
    "SnapWarning",
    "Vector3",
    "WallId",
    "is_quarter_turn",
    "normalize_rotation",
]
