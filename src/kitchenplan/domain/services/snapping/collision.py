"""Room clamping and the collision guard."""

from __future__ import annotations

from typing import Sequence

from ...entities import CabinetInstance
from ...value_objects import BoundingBox, RoomConfig


def clamp_axis(center: float, extent: float, limit: float) -> tuple[float, bool]:
    """Keep a span of ``extent`` centred on ``center`` inside [0, limit].

    Returns:
        The clamped centre and whether the span is larger than the limit,
        in which case it is centred.
    """
    if extent > limit:
        return limit / 2, True
    half = extent / 2
    return min(max(center, half), limit - half), False


def clamp_to_room(
    x: float, z: float, width: float, depth: float, room: RoomConfig
) -> tuple[float, float, bool]:
    """Clamp a footprint centre so the footprint stays inside the room.

    Args:
        x: Footprint centre along x.
        z: Footprint centre along z.
        width: Effective footprint width.
        depth: Effective footprint depth.
        room: Room outline.

    Returns:
        Clamped x, clamped z and whether the footprint exceeds the room on
        either axis.
    """
    x, too_wide = clamp_axis(x, width, room.width)
    z, too_deep = clamp_axis(z, depth, room.depth)
    return x, z, too_wide or too_deep


def push_direction(test: BoundingBox, other: BoundingBox) -> tuple[float, float]:
    """Smallest push that separates ``test`` from ``other``, without margin.

    Penetrations are compared in the order left, right, front, back; the
    first of equal depths wins.

    Returns:
        Signed (dx, dz) with exactly one non-zero component.
    """
    penetrations = (
        (test.right - other.left, -1.0, 0.0),
        (other.right - test.left, 1.0, 0.0),
        (test.front - other.back, 0.0, -1.0),
        (other.front - test.back, 0.0, 1.0),
    )
    depth, sx, sz = min(penetrations, key=lambda p: p[0])
    return sx * depth, sz * depth


def push_out(
    x: float,
    z: float,
    width: float,
    depth: float,
    others: Sequence[tuple[CabinetInstance, BoundingBox]],
    padding: float,
    margin: float,
) -> tuple[float, float]:
    """Push a footprint out of every item it overlaps, in a single pass.

    Each overlapping item moves the footprint along its axis of least
    penetration by that penetration plus ``margin``. Items already visited
    are not checked again after a later push.
    """
    for _item, box in others:
        test = BoundingBox.around(x, z, width, depth)
        if not test.overlaps(box, padding):
            continue
        dx, dz = push_direction(test, box)
        if dx:
            x += dx + (margin if dx > 0 else -margin)
        else:
            z += dz + (margin if dz > 0 else -margin)
    return x, z


def colliding_ids(
    box: BoundingBox,
    others: Sequence[tuple[CabinetInstance, BoundingBox]],
    padding: float,
) -> tuple[str, ...]:
    """Ids of items overlapping ``box`` beyond the padding, in list order."""
    return tuple(
        item.instance_id for item, other in others if box.overlaps(other, padding)
    )
