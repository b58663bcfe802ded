"""Domain layer - recipes, part geometry and placement."""

from .components import Assembly, AssemblyWarning, WarningCode
from .entities import CabinetInstance, CatalogProduct, Part
from .handles import HandlePosition, calculate_handle_position
from .kinds import (
    ApplianceHousing,
    CabinetKind,
    Corner,
    OpenShelf,
    Pantry,
    Sink,
    Standard,
    SubKind,
    sub_kind_for,
)
from .recipes import ConstructionRecipe, RecipeOverrides, RecipeResolver
from .services import (
    CabinetAssembler,
    DragSession,
    SnapEngine,
    SnapResult,
    SnapSettings,
)
from .value_objects import (
    BoundingBox,
    CabinetCategory,
    CornerType,
    GlobalDimensions,
    ItemType,
    PartKind,
    RoomConfig,
    RoomShape,
    Side,
    Size3,
    SnapEdge,
    SnapTarget,
    SnapWarning,
    Vector3,
    WallId,
)

__all__ = [
    "ApplianceHousing",
    "Assembly",
    "AssemblyWarning",
    "BoundingBox",
    "CabinetAssembler",
    "CabinetCategory",
    "CabinetInstance",
    "CabinetKind",
    "CatalogProduct",
    "ConstructionRecipe",
    "Corner",
    "CornerType",
    "DragSession",
    "GlobalDimensions",
    "HandlePosition",
    "ItemType",
    "OpenShelf",
    "Pantry",
    "Part",
    "PartKind",
    "RecipeOverrides",
    "RecipeResolver",
    "RoomConfig",
    "RoomShape",
    "Side",
    "Sink",
    "Size3",
    "SnapEdge",
    "SnapEngine",
    "SnapResult",
    "SnapSettings",
    "SnapTarget",
    "SnapWarning",
    "Standard",
    "SubKind",
    "Vector3",
    "WallId",
    "WarningCode",
    "calculate_handle_position",
    "sub_kind_for",
]
