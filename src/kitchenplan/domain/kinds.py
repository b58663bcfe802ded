"""Cabinet kind variants.

A cabinet is exactly one kind. Each kind carries only the data that is
meaningful for it, so impossible combinations such as a sink that is also
a corner cannot be expressed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .value_objects import ApplianceKind, CornerType


@dataclass(frozen=True)
class Standard:
    """Plain door, drawer or door-and-drawer cabinet."""


@dataclass(frozen=True)
class Sink:
    """Sink base, optionally with an 80mm false front above the doors."""

    has_false_front: bool = False


@dataclass(frozen=True)
class ApplianceHousing:
    """Cabinet built around an appliance."""

    appliance: ApplianceKind


@dataclass(frozen=True)
class Corner:
    """Corner cabinet.

    Attributes:
        corner_type: Construction style of the corner.
        lazy_susan: Deep-arm corner fitted with a carousel or pie-cut
            shelves, which uses 900mm arms instead of the standard depth.
    """

    corner_type: CornerType
    lazy_susan: bool = False


@dataclass(frozen=True)
class Pantry:
    """Full-height storage cabinet."""


@dataclass(frozen=True)
class OpenShelf:
    """Cabinet without fronts."""


CabinetKind = Union[Standard, Sink, ApplianceHousing, Corner, Pantry, OpenShelf]


class SubKind(str, Enum):
    """Recipe sub-kind, the second half of a recipe lookup key."""

    DOOR = "door"
    DRAWER = "drawer"
    COMBO = "combo"
    SINK = "sink"
    SINK_FALSE_FRONT = "sink_false_front"
    APPLIANCE = "appliance"
    FRIDGE = "fridge"
    PANTRY = "pantry"
    OPEN = "open"
    CORNER_L = "corner_l"
    CORNER_BLIND = "corner_blind"
    CORNER_DIAGONAL = "corner_diagonal"


_CORNER_SUB_KINDS: dict[CornerType, SubKind] = {
    CornerType.L_SHAPE: SubKind.CORNER_L,
    CornerType.BLIND: SubKind.CORNER_BLIND,
    CornerType.DIAGONAL: SubKind.CORNER_DIAGONAL,
}


def sub_kind_for(kind: CabinetKind, door_count: int, drawer_count: int) -> SubKind:
    """Map a cabinet kind and its front counts to a recipe sub-kind."""
    match kind:
        case Sink(has_false_front=True):
            return SubKind.SINK_FALSE_FRONT
        case Sink():
            return SubKind.SINK
        case ApplianceHousing(appliance=ApplianceKind.FRIDGE):
            return SubKind.FRIDGE
        case ApplianceHousing():
            return SubKind.APPLIANCE
        case Corner(corner_type=corner_type):
            return _CORNER_SUB_KINDS[corner_type]
        case Pantry():
            return SubKind.PANTRY
        case OpenShelf():
            return SubKind.OPEN
        case _:
            if drawer_count > 0 and door_count > 0:
                return SubKind.COMBO
            if drawer_count > 0:
                return SubKind.DRAWER
            return SubKind.DOOR


def with_corner_type(kind: CabinetKind, corner_type: CornerType | None) -> CabinetKind:
    """Return a corner kind with a different style.

    Non-corner kinds are returned unchanged, a corner type only makes
    sense on a corner cabinet.
    """
    if corner_type is None or not isinstance(kind, Corner):
        return kind
    return Corner(corner_type=corner_type, lazy_susan=kind.lazy_susan)
