"""Room geometry and global dimension defaults."""

from __future__ import annotations

from dataclasses import dataclass

from ._core_geometry import BoundingBox
from ._enums import CabinetCategory, RoomShape


@dataclass(frozen=True)
class RoomConfig:
    """Room outline in millimetres.

    An L-shaped room is its bounding rectangle with the front-right corner
    removed: the cutout spans ``cutout_width`` from the right wall and
    ``cutout_depth`` from the front wall.

    Attributes:
        width: Extent along x (left wall to right wall).
        depth: Extent along z (back wall to front wall).
        height: Floor to ceiling.
        shape: Floor plan outline.
        cutout_width: Width of the removed corner for L-shaped rooms.
        cutout_depth: Depth of the removed corner for L-shaped rooms.
    """

    width: float
    depth: float
    height: float = 2400.0
    shape: RoomShape = RoomShape.RECTANGLE
    cutout_width: float = 0.0
    cutout_depth: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height <= 0:
            raise ValueError("Room dimensions must be positive")
        if self.cutout_width < 0 or self.cutout_depth < 0:
            raise ValueError("Cutout dimensions must be non-negative")
        if self.shape == RoomShape.L_SHAPE:
            if self.cutout_width >= self.width or self.cutout_depth >= self.depth:
                raise ValueError("Cutout must be smaller than the room")

    @property
    def cutout(self) -> BoundingBox | None:
        """Footprint of the removed corner, or None for rectangular rooms."""
        if self.shape != RoomShape.L_SHAPE:
            return None
        if self.cutout_width <= 0 or self.cutout_depth <= 0:
            return None
        return BoundingBox(
            left=self.width - self.cutout_width,
            right=self.width,
            back=self.depth - self.cutout_depth,
            front=self.depth,
        )


@dataclass(frozen=True)
class GlobalDimensions:
    """Fallback defaults used when a recipe leaves a value unspecified.

    Reveal and gap fields default to None, meaning "not overridden".
    When set they take priority over any recipe reveal.
    """

    base_height: float = 870.0
    base_depth: float = 575.0
    wall_height: float = 720.0
    wall_depth: float = 350.0
    tall_height: float = 2100.0
    tall_depth: float = 580.0
    toe_kick_height: float = 135.0
    benchtop_thickness: float = 33.0
    benchtop_overhang: float = 25.0
    board_thickness: float = 18.0
    handle_drill_spacing: float = 32.0
    shadow_gap: float = 1.0
    door_gap: float | None = None
    drawer_gap: float | None = None
    top_reveal: float | None = None
    bottom_reveal: float | None = None
    side_reveal: float | None = None

    def __post_init__(self) -> None:
        for name in (
            "base_height",
            "base_depth",
            "wall_height",
            "wall_depth",
            "tall_height",
            "tall_depth",
            "board_thickness",
            "handle_drill_spacing",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in (
            "toe_kick_height",
            "benchtop_thickness",
            "benchtop_overhang",
            "shadow_gap",
            "door_gap",
            "drawer_gap",
            "top_reveal",
            "bottom_reveal",
            "side_reveal",
        ):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative")

    def height_for(self, category: CabinetCategory) -> float:
        """Standard overall height for a category."""
        match category:
            case CabinetCategory.WALL:
                return self.wall_height
            case CabinetCategory.TALL:
                return self.tall_height
            case _:
                return self.base_height

    def depth_for(self, category: CabinetCategory) -> float:
        """Standard overall depth for a category."""
        match category:
            case CabinetCategory.WALL:
                return self.wall_depth
            case CabinetCategory.TALL:
                return self.tall_depth
            case _:
                return self.base_depth
