"""Plinth generator: kickboards and adjustable legs."""

from __future__ import annotations

import math

from ..entities import Part
from ..value_objects import CornerType, PartKind
from .context import AssemblyContext
from .corner import chamfer_center, chamfer_size, corner_arms
from .registry import generator_registry
from .results import GenerationResult

LEG_SIZE = 40.0
LEG_INSET = 50.0
KICKBOARD_CLEARANCE = 1.0
MID_LEG_MIN_WIDTH = 800.0


@generator_registry.register("kick.plinth")
class PlinthGenerator:
    """Kickboards and legs under floor-standing cabinets.

    Rectangular cabinets stand on four corner legs, plus a front and back
    mid-span leg when wider than 800mm. L-shaped corners stand on seven
    posts following both arms and the inner corner. Diagonal corners stand
    on six posts in a triangle: three corners and three edge midpoints.

    Front legs sit behind the kickboard.
    """

    def applies(self, context: AssemblyContext) -> bool:
        return context.kick_height > 0

    def generate(self, context: AssemblyContext) -> GenerationResult:
        corner = context.recipe.corner
        corner_type = corner.corner_type if corner is not None else None
        match corner_type:
            case CornerType.L_SHAPE:
                kickboards, legs = self._l_shape(context)
            case CornerType.DIAGONAL:
                kickboards, legs = self._diagonal(context)
            case _:
                kickboards, legs = self._rectangular(context)

        kick = context.kick_height
        leg_y = -context.height / 2 + kick / 2
        parts = list(kickboards)
        parts.extend(
            context.part(
                PartKind.LEG,
                f"leg {index}",
                (LEG_SIZE, kick, LEG_SIZE),
                (x, leg_y, z),
            )
            for index, (x, z) in enumerate(legs, start=1)
        )
        return GenerationResult.from_parts(parts)

    def _kick_y(self, context: AssemblyContext) -> float:
        return -context.height / 2 + context.kick_height / 2

    def _front_inset(self, context: AssemblyContext) -> float:
        """Distance from an open face to the centre of the legs behind it."""
        toe_kick = context.recipe.toe_kick
        return toe_kick.setback + toe_kick.kickboard_thickness + LEG_SIZE / 2

    def _rectangular(
        self, context: AssemblyContext
    ) -> tuple[list[Part | None], list[tuple[float, float]]]:
        toe_kick = context.recipe.toe_kick
        w = context.width
        d = context.depth
        kickboard = context.part(
            PartKind.KICKBOARD,
            "kickboard",
            (
                w - 2 * KICKBOARD_CLEARANCE,
                context.kick_height,
                toe_kick.kickboard_thickness,
            ),
            (
                0.0,
                self._kick_y(context),
                d / 2 - toe_kick.setback - toe_kick.kickboard_thickness / 2,
            ),
        )
        x = w / 2 - LEG_INSET
        front_z = d / 2 - self._front_inset(context)
        back_z = -d / 2 + LEG_INSET
        legs = [(-x, front_z), (x, front_z), (-x, back_z), (x, back_z)]
        if w > MID_LEG_MIN_WIDTH:
            legs.extend([(0.0, front_z), (0.0, back_z)])
        return [kickboard], legs

    def _l_shape(
        self, context: AssemblyContext
    ) -> tuple[list[Part | None], list[tuple[float, float]]]:
        corner = context.recipe.corner
        assert corner is not None
        toe_kick = context.recipe.toe_kick
        kt = toe_kick.kickboard_thickness
        w = context.width
        d = context.depth
        arms = corner_arms(context, corner)
        inner_x = -w / 2 + arms.left
        inner_z = -d / 2 + arms.back
        kick_y = self._kick_y(context)

        kickboards = [
            context.part(
                PartKind.KICKBOARD,
                "back arm kickboard",
                (w - arms.left - KICKBOARD_CLEARANCE, context.kick_height, kt),
                ((inner_x + w / 2) / 2, kick_y, inner_z - toe_kick.setback - kt / 2),
            ),
            context.part(
                PartKind.KICKBOARD,
                "left arm kickboard",
                (kt, context.kick_height, d - arms.back - KICKBOARD_CLEARANCE),
                (inner_x - toe_kick.setback - kt / 2, kick_y, (inner_z + d / 2) / 2),
            ),
        ]
        inset = self._front_inset(context)
        legs = [
            (-w / 2 + LEG_INSET, -d / 2 + LEG_INSET),
            (w / 2 - LEG_INSET, -d / 2 + LEG_INSET),
            (w / 2 - LEG_INSET, inner_z - inset),
            (inner_x - inset, inner_z - inset),
            (-w / 2 + LEG_INSET, d / 2 - LEG_INSET),
            (inner_x - inset, d / 2 - LEG_INSET),
            # Centre of the square where the two arms meet
            (-w / 2 + arms.left / 2, -d / 2 + arms.back / 2),
        ]
        return kickboards, legs

    def _diagonal(
        self, context: AssemblyContext
    ) -> tuple[list[Part | None], list[tuple[float, float]]]:
        toe_kick = context.recipe.toe_kick
        kt = toe_kick.kickboard_thickness
        w = context.width
        d = context.depth
        mid_x, mid_z = chamfer_center(context)
        # Unit normal of the chamfer is (1, 1) / sqrt(2)
        kick_offset = (toe_kick.setback + kt / 2) / math.sqrt(2)
        leg_offset = self._front_inset(context) / math.sqrt(2)

        kickboard = context.part(
            PartKind.KICKBOARD,
            "diagonal kickboard",
            (chamfer_size(context) * math.sqrt(2), context.kick_height, kt),
            (mid_x - kick_offset, self._kick_y(context), mid_z - kick_offset),
            (0.0, 45.0, 0.0),
        )
        legs = [
            (-w / 2 + LEG_INSET, -d / 2 + LEG_INSET),
            (w / 2 - LEG_INSET, -d / 2 + LEG_INSET),
            (-w / 2 + LEG_INSET, d / 2 - LEG_INSET),
            (0.0, -d / 2 + LEG_INSET),
            (-w / 2 + LEG_INSET, 0.0),
            (mid_x - leg_offset, mid_z - leg_offset),
        ]
        return [kickboard], legs
