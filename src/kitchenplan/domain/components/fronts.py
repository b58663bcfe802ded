"""Door, drawer and false front generators."""

from __future__ import annotations

import logging
import math

from ..entities import Part
from ..kinds import ApplianceHousing
from ..handles import calculate_handle_position
from ..value_objects import FrontType, PartKind, Side
from .context import AssemblyContext
from .drawers import combination_drawer_section, distribute_drawer_heights
from .registry import generator_registry
from .results import GenerationResult

logger = logging.getLogger(__name__)

HANDLE_BAR_WIDTH = 12.0
HANDLE_PROJECTION = 30.0
APPLIANCE_DRAWER_HEIGHT = 180.0


def rotate_about_y(x: float, z: float, degrees: float) -> tuple[float, float]:
    """Rotate a horizontal offset about the vertical axis.

    Uses the right-handed convention where +90 degrees turns +z into +x.
    """
    radians = math.radians(degrees)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return (x * cos_a + z * sin_a, -x * sin_a + z * cos_a)


def front_with_handle(
    context: AssemblyContext,
    kind: PartKind,
    label: str,
    width: float,
    height: float,
    center: tuple[float, float, float],
    hinge: Side | None,
    rotation_y: float = 0.0,
    **metadata: object,
) -> list[Part | None]:
    """Build a front and the handle mounted on it.

    The handle offset is computed in the front's own plane and rotated
    with the front, so angled corner doors get correctly placed handles.

    Args:
        context: Assembly context.
        kind: DOOR, DRAWER_FRONT or FALSE_FRONT.
        label: Label of the front; the handle is labelled after it.
        width: Rendered front width.
        height: Rendered front height.
        center: Centre of the front in cabinet coordinates.
        hinge: Hinge side for doors, None for drawers.
        rotation_y: Rotation of the front about the vertical axis.
        **metadata: Extra metadata stored on the front.

    Returns:
        The front followed by its handle, or an empty list when the front
        is degenerate.
    """
    # Drawer and false front handles lie flat
    is_drawer = kind in (PartKind.DRAWER_FRONT, PartKind.FALSE_FRONT)
    if hinge is not None:
        metadata["hinge_side"] = hinge.value
    front = context.part(
        kind,
        label,
        (width, height, context.front_thickness),
        center,
        (0.0, rotation_y, 0.0),
        **metadata,
    )
    if front is None:
        return []

    handle = calculate_handle_position(
        height,
        width,
        context.category,
        hinge_left=hinge == Side.LEFT,
        handle_length=context.handle_length,
        is_drawer=is_drawer,
        drill_spacing=context.drill_spacing,
    )
    standoff = context.front_thickness / 2 + HANDLE_PROJECTION / 2
    dx, dz = rotate_about_y(handle.x, standoff, rotation_y)
    bar_length = context.handle_length
    if not math.isfinite(bar_length) or bar_length <= 0:
        bar_length = handle.hole_spacing
    handle_part = context.part(
        PartKind.HANDLE,
        f"{label} handle",
        (HANDLE_BAR_WIDTH, bar_length, HANDLE_PROJECTION),
        (center[0] + dx, center[1] + handle.y, center[2] + dz),
        (0.0, rotation_y, handle.rotation),
        hole_spacing=handle.hole_spacing,
    )
    return [front, handle_part]


def door_pair(
    context: AssemblyContext,
    region_bottom: float,
    region_top: float,
    count: int,
    top_gap: float,
    bottom_gap: float,
) -> list[Part | None]:
    """One full-width door, or two doors split at the centre.

    A single door hinges on the instance's hinge side (left by default).
    A pair hinges on the outer edges so the handles meet in the middle.
    Counts above two are built as a pair.
    """
    reveals = context.recipe.reveals
    height = region_top - region_bottom - top_gap - bottom_gap
    y = region_bottom + bottom_gap + height / 2
    z = context.front_z
    available = context.width - 2 * reveals.side

    if count == 1:
        hinge = context.options.hinge_side or Side.LEFT
        return front_with_handle(
            context, PartKind.DOOR, "door", available, height, (0.0, y, z), hinge
        )

    if count > 2:
        logger.debug(f"Building {count} requested doors as a pair")
    width = (available - reveals.door_gap) / 2
    offset = reveals.door_gap / 2 + width / 2
    return [
        *front_with_handle(
            context,
            PartKind.DOOR,
            "left door",
            width,
            height,
            (-offset, y, z),
            Side.LEFT,
        ),
        *front_with_handle(
            context,
            PartKind.DOOR,
            "right door",
            width,
            height,
            (offset, y, z),
            Side.RIGHT,
        ),
    ]


def drawer_stack(
    context: AssemblyContext,
    region_bottom: float,
    region_top: float,
    count: int,
    first_index: int = 1,
) -> list[Part | None]:
    """Drawer fronts filling a section from the top down.

    Each slot gets its share of the section; the front is the slot height
    less the drawer gap, centred in the slot.
    """
    reveals = context.recipe.reveals
    width = context.width - 2 * reveals.side
    z = context.front_z
    parts: list[Part | None] = []
    slot_top = region_top
    heights = distribute_drawer_heights(count, region_top - region_bottom)
    for index, slot in enumerate(heights, start=first_index):
        parts.extend(
            front_with_handle(
                context,
                PartKind.DRAWER_FRONT,
                f"drawer {index}",
                width,
                slot - reveals.drawer_gap,
                (0.0, slot_top - slot / 2, z),
                None,
            )
        )
        slot_top -= slot
    return parts


@generator_registry.register("front.standard")
class StandardFrontGenerator:
    """Fronts of non-corner cabinets.

    Handles single-category door or drawer cabinets, combination cabinets
    with a drawer section above a door section, sink false fronts and the
    top drawer of appliance housings.
    """

    def applies(self, context: AssemblyContext) -> bool:
        recipe = context.recipe
        if recipe.corner is not None:
            return False
        if recipe.is_sink and recipe.fronts.has_false_front:
            return True
        return recipe.fronts.front_type != FrontType.NONE

    def generate(self, context: AssemblyContext) -> GenerationResult:
        recipe = context.recipe
        fronts = recipe.fronts

        if isinstance(recipe.kind, ApplianceHousing):
            return GenerationResult.from_parts(self._appliance_drawer(context))
        if fronts.is_combination:
            return GenerationResult.from_parts(self._combination(context))
        if fronts.front_type == FrontType.DRAWER:
            reveals = recipe.reveals
            return GenerationResult.from_parts(
                drawer_stack(
                    context,
                    context.carcass_bottom + reveals.bottom,
                    context.carcass_top - reveals.top,
                    fronts.drawer_count,
                )
            )
        return GenerationResult.from_parts(self._doors(context))

    def _doors(self, context: AssemblyContext) -> list[Part | None]:
        recipe = context.recipe
        fronts = recipe.fronts
        reveals = recipe.reveals
        region_top = context.carcass_top
        top_gap = reveals.top
        parts: list[Part | None] = []

        if recipe.is_sink and fronts.has_false_front:
            height = fronts.false_front_height
            width = context.width - 2 * reveals.side
            parts.extend(
                front_with_handle(
                    context,
                    PartKind.FALSE_FRONT,
                    "false front",
                    width,
                    height,
                    (0.0, region_top - reveals.top - height / 2, context.front_z),
                    hinge=None,
                )
            )
            region_top -= reveals.top + height
            top_gap = reveals.door_gap

        if fronts.door_count > 0:
            parts.extend(
                door_pair(
                    context,
                    context.carcass_bottom,
                    region_top,
                    fronts.door_count,
                    top_gap,
                    reveals.bottom,
                )
            )
        return parts

    def _combination(self, context: AssemblyContext) -> list[Part | None]:
        recipe = context.recipe
        fronts = recipe.fronts
        reveals = recipe.reveals
        section = combination_drawer_section(
            fronts.drawer_count, context.carcass_height
        )
        divider_top = context.carcass_top - section
        divider_bottom = divider_top - fronts.divider_thickness
        setback = recipe.carcass.back_setback

        parts = drawer_stack(
            context, divider_top, context.carcass_top, fronts.drawer_count
        )
        parts.append(
            context.part(
                PartKind.DIVIDER,
                "divider",
                (
                    context.interior_width,
                    fronts.divider_thickness,
                    context.depth - setback,
                ),
                (0.0, divider_top - fronts.divider_thickness / 2, setback / 2),
            )
        )
        parts.extend(
            door_pair(
                context,
                context.carcass_bottom,
                divider_bottom,
                fronts.door_count,
                reveals.door_gap / 2,
                reveals.bottom,
            )
        )
        return parts

    def _appliance_drawer(self, context: AssemblyContext) -> list[Part | None]:
        if context.recipe.fronts.drawer_count <= 0:
            return []
        top = context.carcass_top
        height = min(APPLIANCE_DRAWER_HEIGHT, context.carcass_height)
        return drawer_stack(context, top - height, top, 1)
