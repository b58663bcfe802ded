"""Wall snapping.

A wall snap turns the item so its back faces the wall and slides it flush
against the wall's inner face. Only the walls of the room's bounding
rectangle are snap targets. In an L-shaped room the front and right walls
stop where the cutout begins, and the cutout's own walls are not
snapped to.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...value_objects import RoomConfig, WallId
from .bounds import snap_to_grid
from .models import SnapSettings


@dataclass(frozen=True)
class WallSnap:
    """A qualifying wall snap.

    Attributes:
        wall: Wall snapped to.
        x: Resolved centre along x.
        z: Resolved centre along z.
        rotation: Rotation that turns the item's back to the wall.
        distance: Distance from the drag point to the wall.
    """

    wall: WallId
    x: float
    z: float
    rotation: int
    distance: float


def wall_distances(x: float, z: float, room: RoomConfig) -> list[tuple[WallId, float]]:
    """Distance from a point to each wall that exists at that point.

    Listed in tie-break order: back, left, right, front.
    """
    distances = [
        (WallId.BACK, z),
        (WallId.LEFT, x),
        (WallId.RIGHT, room.width - x),
        (WallId.FRONT, room.depth - z),
    ]
    cutout = room.cutout
    if cutout is None:
        return distances
    return [
        (wall, distance)
        for wall, distance in distances
        if not (wall == WallId.FRONT and x > cutout.left)
        and not (wall == WallId.RIGHT and z > cutout.back)
    ]


def snap_to_wall(
    raw_x: float,
    raw_z: float,
    width: float,
    depth: float,
    rotation: int,
    room: RoomConfig,
    settings: SnapSettings,
    held_wall: WallId | None = None,
) -> WallSnap | None:
    """Find the wall snap for a drag point, if any wall is close enough.

    Among the walls within the threshold, a wall the item already faces
    away from wins. Otherwise the nearest wall wins. The coordinate along
    the wall is grid-rounded. The wall a drag is already snapped to keeps
    the snap out to the larger release threshold.

    Args:
        raw_x: Drag point along x.
        raw_z: Drag point along z.
        width: Item width before rotation.
        depth: Item depth before rotation.
        rotation: Current rotation of the item.
        room: Room outline.
        settings: Snap tuning.
        held_wall: Wall the previous drag sample snapped to, if any.

    Returns:
        The wall snap, or None when no wall is within the threshold.
    """
    candidates = [
        (wall, distance)
        for wall, distance in wall_distances(raw_x, raw_z, room)
        if distance < settings.wall_threshold
        or (wall == held_wall and distance < settings.wall_release_threshold)
    ]
    if not candidates:
        return None

    compatible = [c for c in candidates if c[0].facing_rotation == rotation]
    # min() keeps the first of equal distances, so ties follow wall order
    wall, distance = min(compatible or candidates, key=lambda c: c[1])

    offset = depth / 2 + settings.wall_gap
    grid = settings.grid_size
    match wall:
        case WallId.BACK:
            x, z = snap_to_grid(raw_x, grid), offset
        case WallId.FRONT:
            x, z = snap_to_grid(raw_x, grid), room.depth - offset
        case WallId.LEFT:
            x, z = offset, snap_to_grid(raw_z, grid)
        case WallId.RIGHT:
            x, z = room.width - offset, snap_to_grid(raw_z, grid)
    return WallSnap(
        wall=wall, x=x, z=z, rotation=wall.facing_rotation, distance=distance
    )
