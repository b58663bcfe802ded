"""Snap settings and results."""

from __future__ import annotations

from dataclasses import dataclass

from ...value_objects import SnapEdge, SnapTarget, SnapWarning, WallId


@dataclass(frozen=True)
class SnapSettings:
    """Tuning of the placement engine, all distances in millimetres.

    Attributes:
        grid_size: Increment for the grid fallback.
        wall_threshold: Maximum distance from a wall for a wall snap.
        wall_release_threshold: Distance a drag already snapped to a wall
            must move away from it before the snap lets go.
        cabinet_threshold: Maximum edge separation for a cabinet snap.
        align_threshold: Maximum edge offset for aligning the perpendicular
            axis after a cabinet snap. None uses the cabinet threshold.
        collision_padding: Overlap tolerated before two items collide.
        push_margin: Extra distance added when pushing out of a collision.
        wall_gap: Gap left between a wall and a wall-snapped item.
        drag_threshold: Movement needed before a press turns into a drag.
    """

    grid_size: float = 50.0
    wall_threshold: float = 150.0
    wall_release_threshold: float = 350.0
    cabinet_threshold: float = 250.0
    align_threshold: float | None = None
    collision_padding: float = 5.0
    push_margin: float = 10.0
    wall_gap: float = 0.0
    drag_threshold: float = 20.0

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive")
        for name in (
            "wall_threshold",
            "wall_release_threshold",
            "cabinet_threshold",
            "collision_padding",
            "push_margin",
            "wall_gap",
            "drag_threshold",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.align_threshold is not None and self.align_threshold < 0:
            raise ValueError("align_threshold must be non-negative")

    @property
    def effective_align_threshold(self) -> float:
        if self.align_threshold is None:
            return self.cabinet_threshold
        return self.align_threshold


@dataclass(frozen=True)
class SnapResult:
    """Resolved placement of a dragged item.

    Results are plain values: two resolutions of the same input compare
    equal.

    Attributes:
        x: Resolved footprint centre along x.
        z: Resolved footprint centre along z.
        rotation: Resolved rotation in degrees.
        snapped_to: What the placement snapped to.
        snap_edge: Edge of the item that ended up flush, if any. Wall snaps
            report the side of the wall.
        snapped_item_id: Neighbour snapped to, for cabinet snaps.
        wall: Wall snapped to, for wall snaps.
        unresolved_collision: True when the item still overlaps another
            item after the collision push.
        colliding_item_ids: Items still overlapping, in item list order.
        warnings: Non-fatal conditions for the caller to display.
    """

    x: float
    z: float
    rotation: int
    snapped_to: SnapTarget
    snap_edge: SnapEdge | None = None
    snapped_item_id: str | None = None
    wall: WallId | None = None
    unresolved_collision: bool = False
    colliding_item_ids: tuple[str, ...] = ()
    warnings: tuple[SnapWarning, ...] = ()
