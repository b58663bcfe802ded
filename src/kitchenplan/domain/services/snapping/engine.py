"""Placement resolution for a dragged item."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...entities import CabinetInstance
from ...value_objects import (
    RoomConfig,
    SnapEdge,
    SnapTarget,
    SnapWarning,
    WallId,
)
from ..assembler import DEFAULT_DEPTH, DEFAULT_WIDTH
from .bounds import effective_size, footprint_at, snap_to_grid
from .collision import clamp_to_room, colliding_ids, push_out
from .models import SnapResult, SnapSettings
from .neighbors import snap_to_neighbors
from .walls import snap_to_wall

logger = logging.getLogger(__name__)


def _plan_size(item: CabinetInstance) -> tuple[float, float]:
    """Width and depth used for snapping, with unusable values replaced."""
    width = item.width if math.isfinite(item.width) and item.width > 0 else None
    depth = item.depth if math.isfinite(item.depth) and item.depth > 0 else None
    if width is None or depth is None:
        logger.warning(
            f"Snapping {item.instance_id} with default size for invalid "
            f"dimensions {item.width}x{item.depth}"
        )
    return width or DEFAULT_WIDTH, depth or DEFAULT_DEPTH


def _drag_point(
    dragged: CabinetInstance, raw_x: float, raw_z: float, room: RoomConfig
) -> tuple[float, float]:
    """Drag point with non-finite coordinates replaced.

    A bad coordinate falls back to the item's current position, then to the
    centre of the room.
    """
    x, z = raw_x, raw_z
    if not math.isfinite(x):
        x = dragged.x if math.isfinite(dragged.x) else room.width / 2
    if not math.isfinite(z):
        z = dragged.z if math.isfinite(dragged.z) else room.depth / 2
    return x, z


class SnapEngine:
    """Resolves raw drag positions into snapped, collision-checked placements.

    The engine holds only its settings. Every call to :meth:`resolve` is a
    pure function of its arguments, so it can be queried repeatedly while a
    drag is in progress without changing anything.

    Example:
        engine = SnapEngine()
        result = engine.resolve(cabinet, 1800, 80, placed, room)
        if result.unresolved_collision:
            ...
    """

    def __init__(self, settings: SnapSettings | None = None) -> None:
        self.settings = settings or SnapSettings()

    def resolve(
        self,
        dragged: CabinetInstance,
        raw_x: float,
        raw_z: float,
        items: Sequence[CabinetInstance],
        room: RoomConfig,
        held_wall: WallId | None = None,
    ) -> SnapResult:
        """Resolve one drag sample.

        Wall snaps win over cabinet snaps, which win over the grid. The
        snapped position is clamped into the room and pushed out of any
        overlapping item once. A NaN or infinite drag coordinate is
        replaced by the item's current position and reported as
        ``invalid_position``.

        Args:
            dragged: Item being placed. Its position is only used when the
                drag point is not finite.
            raw_x: Drag point along x in room millimetres.
            raw_z: Drag point along z in room millimetres.
            items: Placed items. An entry with the dragged item's id is
                skipped.
            room: Room outline.
            held_wall: Wall the previous sample of the same drag snapped
                to. It stays snapped out to the wall release threshold.

        Returns:
            The resolved placement.
        """
        settings = self.settings
        warnings: list[SnapWarning] = []
        if not (math.isfinite(raw_x) and math.isfinite(raw_z)):
            logger.warning(
                f"Invalid drag position ({raw_x}, {raw_z}) for "
                f"{dragged.instance_id}, using its current position"
            )
            raw_x, raw_z = _drag_point(dragged, raw_x, raw_z, room)
            warnings.append(SnapWarning.INVALID_POSITION)
        rotation = dragged.quarter_rotation
        plan_width, plan_depth = _plan_size(dragged)
        others = [
            (item, item.footprint())
            for item in items
            if item.instance_id != dragged.instance_id
        ]

        snapped_to = SnapTarget.GRID
        snap_edge: SnapEdge | None = None
        snapped_item_id: str | None = None
        wall = None

        wall_snap = snap_to_wall(
            raw_x,
            raw_z,
            plan_width,
            plan_depth,
            rotation,
            room,
            settings,
            held_wall=held_wall,
        )
        if wall_snap is not None:
            x, z, rotation = wall_snap.x, wall_snap.z, wall_snap.rotation
            snapped_to = SnapTarget.WALL
            snap_edge = SnapEdge(wall_snap.wall.value)
            wall = wall_snap.wall
        else:
            raw_box = footprint_at(
                raw_x, raw_z, plan_width, plan_depth, rotation
            )
            neighbor = snap_to_neighbors(raw_box, others, settings)
            if neighbor is not None:
                x, z = neighbor.x, neighbor.z
                snapped_to = SnapTarget.CABINET
                snap_edge = neighbor.edge
                snapped_item_id = neighbor.item_id
            else:
                x = snap_to_grid(raw_x, settings.grid_size)
                z = snap_to_grid(raw_z, settings.grid_size)

        width, depth = effective_size(plan_width, plan_depth, rotation)

        x, z, exceeds = clamp_to_room(x, z, width, depth, room)
        x, z = push_out(
            x,
            z,
            width,
            depth,
            others,
            padding=settings.collision_padding,
            margin=settings.push_margin,
        )
        x, z, exceeds_after_push = clamp_to_room(x, z, width, depth, room)
        if exceeds or exceeds_after_push:
            warnings.append(SnapWarning.EXCEEDS_ROOM)

        box = footprint_at(x, z, plan_width, plan_depth, rotation)
        colliding = colliding_ids(box, others, settings.collision_padding)
        if colliding:
            warnings.append(SnapWarning.UNRESOLVED_COLLISION)
            logger.warning(
                f"Placement of {dragged.instance_id} still overlaps "
                f"{', '.join(colliding)}"
            )

        cutout = room.cutout
        if cutout is not None and box.overlaps(cutout):
            warnings.append(SnapWarning.OVERLAPS_CUTOUT)

        return SnapResult(
            x=x,
            z=z,
            rotation=rotation,
            snapped_to=snapped_to,
            snap_edge=snap_edge,
            snapped_item_id=snapped_item_id,
            wall=wall,
            unresolved_collision=bool(colliding),
            colliding_item_ids=colliding,
            warnings=tuple(warnings),
        )
