"""Cabinet-to-cabinet snapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ...entities import CabinetInstance
from ...value_objects import BoundingBox, ItemType, SnapEdge
from .bounds import snap_to_grid
from .models import SnapSettings

SNAP_TARGET_TYPES = frozenset({ItemType.CABINET, ItemType.APPLIANCE})


@dataclass(frozen=True)
class NeighborSnap:
    """A qualifying cabinet snap.

    Attributes:
        item_id: Neighbour snapped to.
        edge: Edge of the dragged item placed flush against the neighbour.
        x: Resolved centre along x.
        z: Resolved centre along z.
        distance: Edge separation before snapping.
    """

    item_id: str
    edge: SnapEdge
    x: float
    z: float
    distance: float


def _edge_separations(
    dragged: BoundingBox, other: BoundingBox
) -> tuple[tuple[SnapEdge, float], ...]:
    return (
        (SnapEdge.RIGHT, abs(dragged.right - other.left)),
        (SnapEdge.LEFT, abs(dragged.left - other.right)),
        (SnapEdge.FRONT, abs(dragged.front - other.back)),
        (SnapEdge.BACK, abs(dragged.back - other.front)),
    )


def snap_to_neighbors(
    dragged: BoundingBox,
    others: Sequence[tuple[CabinetInstance, BoundingBox]],
    settings: SnapSettings,
) -> NeighborSnap | None:
    """Snap a footprint flush against the nearest neighbouring edge.

    Every cabinet or appliance contributes four edge pairings. The pairing
    with the smallest separation below the threshold wins; on equal
    separations the earlier item in the list wins. The paired axis is
    closed to zero gap. The other axis aligns to the neighbour's matching
    edge (backs, then fronts, or lefts, then rights) when already within
    the align threshold, and is grid-rounded otherwise.

    Args:
        dragged: Footprint of the dragged item at the raw drag point.
        others: Other items with their precomputed footprints.
        settings: Snap tuning.

    Returns:
        The winning snap, or None when no pairing qualifies.
    """
    threshold = settings.cabinet_threshold
    best: tuple[float, CabinetInstance, BoundingBox, SnapEdge] | None = None
    for item, box in others:
        if item.item_type not in SNAP_TARGET_TYPES:
            continue
        for edge, separation in _edge_separations(dragged, box):
            if not math.isfinite(separation) or separation >= threshold:
                continue
            if best is None or separation < best[0]:
                best = (separation, item, box, edge)
    if best is None:
        return None

    separation, item, box, edge = best
    half_w = dragged.width / 2
    half_d = dragged.depth / 2
    align = settings.effective_align_threshold
    grid = settings.grid_size

    match edge:
        case SnapEdge.RIGHT | SnapEdge.LEFT:
            if edge == SnapEdge.RIGHT:
                x = box.left - half_w
            else:
                x = box.right + half_w
            if abs(dragged.back - box.back) < align:
                z = box.back + half_d
            elif abs(dragged.front - box.front) < align:
                z = box.front - half_d
            else:
                z = snap_to_grid(dragged.center_z, grid)
        case _:
            if edge == SnapEdge.FRONT:
                z = box.back - half_d
            else:
                z = box.front + half_d
            if abs(dragged.left - box.left) < align:
                x = box.left + half_w
            elif abs(dragged.right - box.right) < align:
                x = box.right - half_w
            else:
                x = snap_to_grid(dragged.center_x, grid)

    return NeighborSnap(
        item_id=item.instance_id, edge=edge, x=x, z=z, distance=separation
    )
