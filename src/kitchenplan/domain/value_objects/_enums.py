"""Enumerations shared across the kitchen planning domain."""

from __future__ import annotations

from enum import Enum


class CabinetCategory(str, Enum):
    """Catalog category a cabinet belongs to."""

    BASE = "Base"
    WALL = "Wall"
    TALL = "Tall"
    ACCESSORY = "Accessory"


class ItemType(str, Enum):
    """Kind of item placed in a room.

    Only cabinets and appliances act as snap targets. Structures
    (columns, bulkheads, islands drawn as blocks) only block placement.
    """

    CABINET = "Cabinet"
    APPLIANCE = "Appliance"
    STRUCTURE = "Structure"


class Side(str, Enum):
    """Left or right, as seen when facing the cabinet front."""

    LEFT = "Left"
    RIGHT = "Right"

    @property
    def opposite(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class FrontType(str, Enum):
    """Primary front style of a cabinet."""

    DOOR = "door"
    DRAWER = "drawer"
    CORNER = "corner"
    NONE = "none"


class CornerType(str, Enum):
    """Corner cabinet construction style."""

    L_SHAPE = "l-shape"
    BLIND = "blind"
    DIAGONAL = "diagonal"


class ApplianceKind(str, Enum):
    """Appliance a housing cabinet is built around."""

    OVEN = "oven"
    MICROWAVE = "microwave"
    DISHWASHER = "dishwasher"
    FRIDGE = "fridge"
    RANGEHOOD = "rangehood"
    COOKTOP = "cooktop"


class RoomShape(str, Enum):
    """Floor plan outline of a room."""

    RECTANGLE = "Rectangle"
    L_SHAPE = "LShape"


class PartKind(str, Enum):
    """Kind of part produced by cabinet assembly."""

    GABLE = "gable"
    BOTTOM = "bottom"
    TOP = "top"
    BACK = "back"
    SHELF = "shelf"
    DIVIDER = "divider"
    DOOR = "door"
    DRAWER_FRONT = "drawer_front"
    FALSE_FRONT = "false_front"
    HANDLE = "handle"
    KICKBOARD = "kickboard"
    LEG = "leg"
    BENCHTOP = "benchtop"
    END_PANEL = "end_panel"
    FILLER = "filler"
    BLIND_PANEL = "blind_panel"
    BLIND_RETURN = "blind_return"
    RETURN_FILLER = "return_filler"
    APPLIANCE_CAVITY = "appliance_cavity"


class SnapTarget(str, Enum):
    """What a resolved placement snapped to."""

    WALL = "wall"
    CABINET = "cabinet"
    GRID = "grid"
    NONE = "none"


class SnapEdge(str, Enum):
    """Edge of the dragged item that ended up flush.

    Wall snaps report the wall's side, so a left-wall snap has edge LEFT.
    """

    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    BACK = "back"


class WallId(str, Enum):
    """Walls of the room's bounding rectangle, in snap tie-break order."""

    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"

    @property
    def facing_rotation(self) -> int:
        """Rotation that turns a cabinet's back toward this wall."""
        return _WALL_ROTATIONS[self]


_WALL_ROTATIONS: dict[WallId, int] = {
    WallId.BACK: 0,
    WallId.LEFT: 270,
    WallId.RIGHT: 90,
    WallId.FRONT: 180,
}


class SnapWarning(str, Enum):
    """Non-fatal conditions reported with a snap result."""

    UNRESOLVED_COLLISION = "unresolved_collision"
    EXCEEDS_ROOM = "exceeds_room"
    OVERLAPS_CUTOUT = "overlaps_cutout"
    INVALID_POSITION = "invalid_position"
