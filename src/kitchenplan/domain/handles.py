"""Handle placement on the 32mm system.

Offsets are measured from the centre of the front panel, +x to the right
and +y up, as seen facing the front.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .value_objects import CabinetCategory

HANDLE_EDGE_INSET = 40.0
HANDLE_VERTICAL_INSET = 80.0
DRILL_SPACING = 32.0
DEFAULT_HANDLE_LENGTH = 128.0


@dataclass(frozen=True)
class HandlePosition:
    """Handle offset from the centre of a front.

    Attributes:
        x: Horizontal offset in millimetres.
        y: Vertical offset in millimetres.
        rotation: Rotation about the front's normal in degrees. Door
            handles stand vertical (0), drawer handles lie flat (90).
        hole_spacing: Centre-to-centre distance of the mounting holes.
    """

    x: float
    y: float
    rotation: float = 0.0
    hole_spacing: float = DRILL_SPACING


def hole_spacing_for(
    handle_length: float, drill_spacing: float = DRILL_SPACING
) -> float:
    """Round a handle length to the nearest whole number of drill spacings.

    Never returns less than one spacing.
    """
    if not math.isfinite(handle_length) or handle_length <= 0:
        return drill_spacing
    units = max(1, math.floor(handle_length / drill_spacing + 0.5))
    return units * drill_spacing


def snap_to_drill_pattern(offset: float, drill_spacing: float = DRILL_SPACING) -> float:
    """Round an offset to the nearest multiple of the drill spacing, halves up."""
    if not math.isfinite(drill_spacing) or drill_spacing <= 0:
        return offset
    return math.floor(offset / drill_spacing + 0.5) * drill_spacing


def calculate_handle_position(
    opening_height: float,
    opening_width: float,
    category: CabinetCategory,
    hinge_left: bool,
    handle_length: float = DEFAULT_HANDLE_LENGTH,
    *,
    is_drawer: bool = False,
    drill_spacing: float = DRILL_SPACING,
) -> HandlePosition:
    """Calculate where a handle sits on a front.

    Base and tall fronts anchor the handle 80mm up from the bottom edge;
    wall fronts anchor it 80mm down from the top edge. The vertical offset
    is then rounded to the nearest drill spacing. Door handles sit
    40mm in from the edge opposite the hinge. Drawer handles ignore the
    hinge, sit centred and are rotated 90 degrees.

    Fronts too small for an inset centre the handle on that axis.

    Args:
        opening_height: Height of the front in millimetres.
        opening_width: Width of the front in millimetres.
        category: Category of the cabinet the front belongs to.
        hinge_left: True when the door is hinged on its left edge.
        handle_length: Nominal handle length in millimetres.
        is_drawer: True for drawer fronts.
        drill_spacing: Hole spacing unit of the hardware system.

    Returns:
        HandlePosition relative to the front's centre.
    """
    spacing = hole_spacing_for(handle_length, drill_spacing)

    if is_drawer:
        return HandlePosition(x=0.0, y=0.0, rotation=90.0, hole_spacing=spacing)

    half_width = opening_width / 2
    x = 0.0
    if half_width > HANDLE_EDGE_INSET:
        # Handle goes on the edge opposite the hinge
        x = half_width - HANDLE_EDGE_INSET
        if not hinge_left:
            x = -x

    half_height = opening_height / 2
    if half_height > HANDLE_VERTICAL_INSET:
        if category == CabinetCategory.WALL:
            y = half_height - HANDLE_VERTICAL_INSET
        else:
            y = -half_height + HANDLE_VERTICAL_INSET
        y = snap_to_drill_pattern(y, drill_spacing)
    else:
        y = 0.0

    return HandlePosition(x=x, y=y, rotation=0.0, hole_spacing=spacing)
