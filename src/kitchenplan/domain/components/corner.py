"""Corner cabinet generators.

Corner cabinets are laid out in cabinet coordinates with the corner in
the back-left: one arm runs along the back wall and one along the left
wall.

L-shape: the left arm is ``left_arm_depth`` wide (along x) and the back
arm is ``right_arm_depth`` deep (along z). The inner corner is where the
two open faces meet.

Diagonal: the front-right corner is cut off at 45 degrees by a chamfer
of half the smaller plan dimension, and the door sits on the chamfer.

Blind: a box carcass with a door on one half and a fixed blind panel on
the half hidden behind the adjoining run.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..entities import Part
from ..recipes import CornerRecipe
from ..value_objects import CornerType, PartKind, Side
from .context import AssemblyContext
from .fronts import front_with_handle
from .registry import generator_registry
from .results import AssemblyWarning, GenerationResult, WarningCode
from .shelves import shelf_heights

MIN_ARM_OPENING = 100.0
DIAGONAL_DOOR_RATIO = 0.35
DIAGONAL_ANGLE = 45.0


@dataclass(frozen=True)
class CornerArms:
    """Effective arm depths of an L-shaped corner.

    Attributes:
        left: Width of the left arm along x.
        back: Depth of the back arm along z.
        clamped: True when a requested depth did not fit the cabinet.
    """

    left: float
    back: float
    clamped: bool = False


def corner_arms(context: AssemblyContext, corner: CornerRecipe) -> CornerArms:
    """Clamp the requested arm depths so both arms keep an opening."""
    max_left = max(context.width - MIN_ARM_OPENING, context.width / 2)
    max_back = max(context.depth - MIN_ARM_OPENING, context.depth / 2)
    left = min(corner.left_arm_depth, max_left)
    back = min(corner.right_arm_depth, max_back)
    clamped = left != corner.left_arm_depth or back != corner.right_arm_depth
    return CornerArms(left=left, back=back, clamped=clamped)


def chamfer_size(context: AssemblyContext) -> float:
    """Leg length of the 45 degree chamfer of a diagonal corner."""
    return min(context.width, context.depth) / 2


def chamfer_center(context: AssemblyContext) -> tuple[float, float]:
    """Midpoint of the diagonal face in plan."""
    c = chamfer_size(context)
    return (context.width / 2 - c / 2, context.depth / 2 - c / 2)


def diagonal_outline(context: AssemblyContext) -> list[tuple[float, float]]:
    """Plan outline (x, z) of a diagonal corner, clockwise from back-left."""
    w = context.width / 2
    d = context.depth / 2
    c = chamfer_size(context)
    return [(-w, -d), (w, -d), (w, d - c), (w - c, d), (-w, d)]


def door_band(context: AssemblyContext) -> tuple[float, float]:
    """Height and centre y of a full-height corner door."""
    reveals = context.recipe.reveals
    height = context.carcass_height - reveals.top - reveals.bottom
    return height, context.carcass_bottom + reveals.bottom + height / 2


def _wall_backs(context: AssemblyContext) -> list[Part | None]:
    """Back panels along both walls, stopping short of the end gables."""
    carcass = context.recipe.carcass
    w = context.width
    d = context.depth
    t = carcass.gable_thickness
    setback = carcass.back_setback
    bt = carcass.back_thickness
    height = context.interior_top - context.carcass_bottom
    y = context.carcass_bottom + height / 2
    return [
        context.part(
            PartKind.BACK,
            "back wall back",
            (w - setback - t, height, bt),
            ((setback - t) / 2, y, -d / 2 + setback - bt / 2),
        ),
        context.part(
            PartKind.BACK,
            "left wall back",
            (bt, height, d - setback - t),
            (-w / 2 + setback - bt / 2, y, (setback - t) / 2),
        ),
    ]


@generator_registry.register("carcass.corner")
class CornerCarcassGenerator:
    """Carcass panels of L-shaped and diagonal corner cabinets."""

    def applies(self, context: AssemblyContext) -> bool:
        corner = context.recipe.corner
        return corner is not None and corner.corner_type in (
            CornerType.L_SHAPE,
            CornerType.DIAGONAL,
        )

    def generate(self, context: AssemblyContext) -> GenerationResult:
        corner = context.recipe.corner
        assert corner is not None
        if corner.corner_type == CornerType.L_SHAPE:
            return self._l_shape(context, corner)
        return self._diagonal(context)

    def _l_shape(
        self, context: AssemblyContext, corner: CornerRecipe
    ) -> GenerationResult:
        recipe = context.recipe
        carcass = recipe.carcass
        w = context.width
        d = context.depth
        t = carcass.gable_thickness
        setback = carcass.back_setback
        arms = corner_arms(context, corner)
        center_y = context.carcass_center_y

        warnings: list[AssemblyWarning] = []
        if arms.clamped:
            warnings.append(
                AssemblyWarning(
                    WarningCode.ARM_DEPTH_CLAMPED,
                    f"Arm depths {corner.left_arm_depth:g}/{corner.right_arm_depth:g}"
                    f" reduced to {arms.left:g}/{arms.back:g} to fit {w:g}x{d:g}",
                )
            )

        parts = _wall_backs(context)
        parts.extend(
            [
                context.part(
                    PartKind.GABLE,
                    "back arm end gable",
                    (t, context.carcass_height, arms.back),
                    (w / 2 - t / 2, center_y, -d / 2 + arms.back / 2),
                ),
                context.part(
                    PartKind.GABLE,
                    "left arm end gable",
                    (arms.left, context.carcass_height, t),
                    (-w / 2 + arms.left / 2, center_y, d / 2 - t / 2),
                ),
            ]
        )

        panels = []
        if carcass.has_bottom:
            panels.append(
                (
                    PartKind.BOTTOM,
                    "bottom",
                    carcass.bottom_thickness,
                    context.carcass_bottom + carcass.bottom_thickness / 2,
                )
            )
        if carcass.has_top:
            panels.append(
                (
                    PartKind.TOP,
                    "top",
                    carcass.top_thickness,
                    context.carcass_top - carcass.top_thickness / 2,
                )
            )
        shelves = recipe.shelves
        for index, y in enumerate(
            shelf_heights(context.interior_bottom, context.interior_top, shelves.count),
            start=1,
        ):
            panels.append((PartKind.SHELF, f"shelf {index}", shelves.thickness, y))

        for kind, label, thickness, y in panels:
            front_inset = 0.0
            metadata = {}
            if kind == PartKind.SHELF:
                front_inset = shelves.setback
                metadata = {"adjustable": shelves.adjustable}
            back_arm_depth = arms.back - setback - front_inset
            left_arm_width = arms.left - setback - front_inset
            parts.append(
                context.part(
                    kind,
                    f"back arm {label}",
                    (w - setback - t, thickness, back_arm_depth),
                    (
                        (setback - t) / 2,
                        y,
                        -d / 2 + setback + back_arm_depth / 2,
                    ),
                    **metadata,
                )
            )
            parts.append(
                context.part(
                    kind,
                    f"left arm {label}",
                    (left_arm_width, thickness, d - t - arms.back),
                    (
                        -w / 2 + setback + left_arm_width / 2,
                        y,
                        (arms.back - t) / 2,
                    ),
                    **metadata,
                )
            )
        return GenerationResult.from_parts(parts, warnings)

    def _diagonal(self, context: AssemblyContext) -> GenerationResult:
        recipe = context.recipe
        carcass = recipe.carcass
        w = context.width
        d = context.depth
        t = carcass.gable_thickness
        setback = carcass.back_setback
        c = chamfer_size(context)
        center_y = context.carcass_center_y
        outline = diagonal_outline(context)
        plan_size = (w - setback - t, d - setback - t)
        plan_center = ((setback - t) / 2, (setback - t) / 2)

        parts = _wall_backs(context)
        parts.extend(
            [
                context.part(
                    PartKind.GABLE,
                    "right return gable",
                    (t, context.carcass_height, d - c),
                    (w / 2 - t / 2, center_y, -c / 2),
                ),
                context.part(
                    PartKind.GABLE,
                    "front return gable",
                    (w - c, context.carcass_height, t),
                    (-c / 2, center_y, d / 2 - t / 2),
                ),
            ]
        )
        if carcass.has_bottom:
            parts.append(
                context.part(
                    PartKind.BOTTOM,
                    "bottom",
                    (plan_size[0], carcass.bottom_thickness, plan_size[1]),
                    (
                        plan_center[0],
                        context.carcass_bottom + carcass.bottom_thickness / 2,
                        plan_center[1],
                    ),
                    outline=outline,
                )
            )
        if carcass.has_top:
            parts.append(
                context.part(
                    PartKind.TOP,
                    "top",
                    (plan_size[0], carcass.top_thickness, plan_size[1]),
                    (
                        plan_center[0],
                        context.carcass_top - carcass.top_thickness / 2,
                        plan_center[1],
                    ),
                    outline=outline,
                )
            )
        shelves = recipe.shelves
        for index, y in enumerate(
            shelf_heights(context.interior_bottom, context.interior_top, shelves.count),
            start=1,
        ):
            parts.append(
                context.part(
                    PartKind.SHELF,
                    f"shelf {index}",
                    (plan_size[0], shelves.thickness, plan_size[1]),
                    (plan_center[0], y, plan_center[1]),
                    adjustable=shelves.adjustable,
                    outline=outline,
                    front_setback=shelves.setback,
                )
            )
        return GenerationResult.from_parts(parts)


@generator_registry.register("carcass.blind")
class BlindCornerGenerator:
    """Fixed parts of a blind corner.

    Adds the blind panel covering the hidden half, the internal return
    behind it, the corner filler strip next to the door and, when the
    recipe asks for it, a return filler projecting forward from the filler.
    """

    def applies(self, context: AssemblyContext) -> bool:
        corner = context.recipe.corner
        return corner is not None and corner.corner_type == CornerType.BLIND

    def generate(self, context: AssemblyContext) -> GenerationResult:
        corner = context.recipe.corner
        assert corner is not None
        reveals = context.recipe.reveals
        t = context.gable_thickness
        w = context.width
        d = context.depth
        # Blind half lies on negative x for a left blind side
        sign = -1.0 if corner.blind_side == Side.LEFT else 1.0
        height, y = door_band(context)
        filler = corner.filler_width
        half_gap = reveals.door_gap / 2
        blind_width = w / 2 - reveals.side - half_gap - filler
        blind_side = corner.blind_side.value.lower()

        parts = [
            context.part(
                PartKind.BLIND_PANEL,
                f"{blind_side} blind panel",
                (blind_width, height, context.front_thickness),
                (sign * (half_gap + filler + blind_width / 2), y, context.front_z),
            ),
            context.part(
                PartKind.BLIND_RETURN,
                "blind return",
                (t, context.carcass_height, corner.blind_depth),
                (
                    sign * t / 2,
                    context.carcass_center_y,
                    d / 2 - corner.blind_depth / 2,
                ),
            ),
            context.part(
                PartKind.FILLER,
                "corner filler",
                (filler, height, context.front_thickness),
                (sign * (half_gap + filler / 2), y, context.front_z),
            ),
        ]
        if corner.return_filler:
            front_face = d / 2 + context.shadow_gap + context.front_thickness
            parts.append(
                context.part(
                    PartKind.RETURN_FILLER,
                    "return filler",
                    (t, height, filler),
                    (sign * (half_gap + filler + t / 2), y, front_face + filler / 2),
                )
            )
        return GenerationResult.from_parts(parts)


@generator_registry.register("front.corner")
class CornerFrontGenerator:
    """Doors of corner cabinets.

    L-shape corners get one door per arm, hinged away from the inner
    corner. Blind corners get one door on the open half. Diagonal corners
    get one door on the chamfer.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return context.recipe.corner is not None

    def generate(self, context: AssemblyContext) -> GenerationResult:
        corner = context.recipe.corner
        assert corner is not None
        match corner.corner_type:
            case CornerType.L_SHAPE:
                parts = self._l_shape(context, corner)
            case CornerType.BLIND:
                parts = self._blind(context, corner)
            case CornerType.DIAGONAL:
                parts = self._diagonal(context)
        return GenerationResult.from_parts(parts)

    def _l_shape(
        self, context: AssemblyContext, corner: CornerRecipe
    ) -> list[Part | None]:
        reveals = context.recipe.reveals
        w = context.width
        d = context.depth
        arms = corner_arms(context, corner)
        height, y = door_band(context)
        offset = context.shadow_gap + context.front_thickness / 2
        inner_x = -w / 2 + arms.left
        inner_z = -d / 2 + arms.back

        # Back arm door faces +z; its inner corner edge is on the left
        back_door = front_with_handle(
            context,
            PartKind.DOOR,
            "back arm door",
            w - arms.left - 2 * reveals.side,
            height,
            ((inner_x + w / 2) / 2, y, inner_z + offset),
            Side.RIGHT,
            arm="back",
        )
        # Left arm door faces +x; turned 90 degrees its left edge is the front end
        left_door = front_with_handle(
            context,
            PartKind.DOOR,
            "left arm door",
            d - arms.back - 2 * reveals.side,
            height,
            (inner_x + offset, y, (inner_z + d / 2) / 2),
            Side.LEFT,
            rotation_y=90.0,
            arm="left",
        )
        return [*back_door, *left_door]

    def _blind(
        self, context: AssemblyContext, corner: CornerRecipe
    ) -> list[Part | None]:
        reveals = context.recipe.reveals
        # Door half lies on positive x for a left blind side
        door_side = corner.blind_side.opposite
        sign = 1.0 if door_side == Side.RIGHT else -1.0
        half_gap = reveals.door_gap / 2
        width = context.width / 2 - reveals.side - half_gap
        height, y = door_band(context)
        return front_with_handle(
            context,
            PartKind.DOOR,
            f"{door_side.value.lower()} arm door",
            width,
            height,
            (sign * (half_gap + width / 2), y, context.front_z),
            door_side,
            arm=door_side.value.lower(),
        )

    def _diagonal(self, context: AssemblyContext) -> list[Part | None]:
        reveals = context.recipe.reveals
        face_length = chamfer_size(context) * math.sqrt(2)
        width = min(
            math.sqrt(2) * context.width * DIAGONAL_DOOR_RATIO,
            face_length - 2 * reveals.side,
        )
        height, y = door_band(context)
        mid_x, mid_z = chamfer_center(context)
        standoff = (context.shadow_gap + context.front_thickness / 2) / math.sqrt(2)
        return front_with_handle(
            context,
            PartKind.DOOR,
            "diagonal door",
            width,
            height,
            (mid_x + standoff, y, mid_z + standoff),
            context.options.hinge_side or Side.LEFT,
            rotation_y=DIAGONAL_ANGLE,
            arm="diagonal",
        )
