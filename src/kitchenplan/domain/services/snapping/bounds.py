"""Rotation-aware footprints and grid rounding."""

from __future__ import annotations

import math

from ...value_objects import BoundingBox, is_quarter_turn


def effective_size(width: float, depth: float, rotation: int) -> tuple[float, float]:
    """Footprint extents along x and z; width and depth swap at 90 and 270."""
    if is_quarter_turn(rotation):
        return depth, width
    return width, depth


def footprint_at(
    x: float, z: float, width: float, depth: float, rotation: int
) -> BoundingBox:
    """Footprint of an item centred at (x, z) with the given rotation."""
    effective_w, effective_d = effective_size(width, depth, rotation)
    return BoundingBox.around(x, z, effective_w, effective_d)


def snap_to_grid(value: float, grid_size: float) -> float:
    """Round to the nearest grid increment, halves rounding up."""
    return math.floor(value / grid_size + 0.5) * grid_size
