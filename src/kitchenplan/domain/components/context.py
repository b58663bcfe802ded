"""Assembly context shared by part generators."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ..entities import CabinetInstance, Part
from ..recipes import ConstructionRecipe
from ..value_objects import CabinetCategory, PartKind, Side, Size3, Vector3

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = "default"
MIN_CARCASS_HEIGHT = 100.0

# Material lookup falls back from the part kind to its group.
MATERIAL_GROUPS: dict[PartKind, str] = {
    PartKind.GABLE: "carcass",
    PartKind.BOTTOM: "carcass",
    PartKind.TOP: "carcass",
    PartKind.BACK: "carcass",
    PartKind.SHELF: "carcass",
    PartKind.DIVIDER: "carcass",
    PartKind.BLIND_RETURN: "carcass",
    PartKind.DOOR: "front",
    PartKind.DRAWER_FRONT: "front",
    PartKind.FALSE_FRONT: "front",
    PartKind.BLIND_PANEL: "front",
    PartKind.FILLER: "front",
    PartKind.RETURN_FILLER: "front",
    PartKind.END_PANEL: "front",
    PartKind.KICKBOARD: "plinth",
    PartKind.LEG: "plinth",
}


@dataclass(frozen=True)
class InstanceOptions:
    """Instance-level flags that add parts outside the recipe.

    Attributes:
        hinge_side: Hinge side for single doors, None for the default (left).
        end_panel_left: Add a finished end panel on the left.
        end_panel_right: Add a finished end panel on the right.
        filler_left: Width of a filler strip on the left.
        filler_right: Width of a filler strip on the right.
        tap_id: Selected tap, passed through to the benchtop.
        appliance_id: Selected appliance, passed through to the cavity.
    """

    hinge_side: Side | None = None
    end_panel_left: bool = False
    end_panel_right: bool = False
    filler_left: float = 0.0
    filler_right: float = 0.0
    tap_id: str | None = None
    appliance_id: str | None = None

    @classmethod
    def from_instance(cls, instance: CabinetInstance) -> InstanceOptions:
        """Extract assembly options from a placed instance.

        Filler widths that are negative or not finite are treated as zero.
        """
        return cls(
            hinge_side=instance.hinge_side,
            end_panel_left=instance.end_panel_left,
            end_panel_right=instance.end_panel_right,
            filler_left=_non_negative(instance.filler_left),
            filler_right=_non_negative(instance.filler_right),
            tap_id=instance.tap_id,
            appliance_id=instance.appliance_id,
        )


def _non_negative(value: float) -> float:
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class AssemblyContext:
    """Immutable context for part generation.

    Carries the resolved recipe, the sanitized overall dimensions and the
    derived carcass geometry. All positions are cabinet-local: origin at
    the centre of the bounding box, +y up, +z toward the front.

    Attributes:
        recipe: Resolved construction recipe.
        width: Overall width in millimetres.
        height: Overall height in millimetres.
        depth: Overall depth in millimetres.
        materials: Material reference by part kind or group name.
        options: Instance flags for end panels, fillers and hinges.
        handle_length: Nominal handle length for every front.
        drill_spacing: Hole spacing of the handle hardware system.
        shadow_gap: Distance between the carcass face and the back of the fronts.
    """

    recipe: ConstructionRecipe
    width: float
    height: float
    depth: float
    materials: Mapping[str, str] = field(default_factory=dict)
    options: InstanceOptions = field(default_factory=InstanceOptions)
    handle_length: float = 128.0
    drill_spacing: float = 32.0
    shadow_gap: float = 1.0

    @property
    def category(self) -> CabinetCategory:
        return self.recipe.category

    @property
    def kick_height(self) -> float:
        """Plinth height, zero when the cabinet has no toe kick.

        A kick that would leave less than a minimal carcass is dropped.
        """
        toe_kick = self.recipe.toe_kick
        if not toe_kick.enabled or toe_kick.height <= 0:
            return 0.0
        if self.height - toe_kick.height < MIN_CARCASS_HEIGHT:
            return 0.0
        return toe_kick.height

    @property
    def carcass_height(self) -> float:
        return self.height - self.kick_height

    @property
    def carcass_center_y(self) -> float:
        """Vertical centre of the carcass, raised by half the kick height."""
        return self.kick_height / 2

    @property
    def carcass_bottom(self) -> float:
        return -self.height / 2 + self.kick_height

    @property
    def carcass_top(self) -> float:
        return self.height / 2

    @property
    def gable_thickness(self) -> float:
        return self.recipe.carcass.gable_thickness

    @property
    def interior_width(self) -> float:
        return self.width - 2 * self.gable_thickness

    @property
    def interior_bottom(self) -> float:
        """Top face of the bottom panel."""
        carcass = self.recipe.carcass
        if carcass.has_bottom:
            return self.carcass_bottom + carcass.bottom_thickness
        return self.carcass_bottom

    @property
    def interior_top(self) -> float:
        """Underside of the top panel, or the carcass top if open."""
        carcass = self.recipe.carcass
        if carcass.has_top:
            return self.carcass_top - carcass.top_thickness
        return self.carcass_top

    @property
    def front_thickness(self) -> float:
        return self.recipe.fronts.front_thickness

    @property
    def front_z(self) -> float:
        """Centre plane of fronts mounted on the carcass face."""
        return self.depth / 2 + self.shadow_gap + self.front_thickness / 2

    def material(self, kind: PartKind) -> str:
        """Material for a part kind, falling back to its group, then the default."""
        if kind.value in self.materials:
            return self.materials[kind.value]
        group = MATERIAL_GROUPS.get(kind)
        if group is not None and group in self.materials:
            return self.materials[group]
        return DEFAULT_MATERIAL

    def has_material(self, kind: PartKind) -> bool:
        group = MATERIAL_GROUPS.get(kind)
        return kind.value in self.materials or (
            group is not None and group in self.materials
        )

    def part(
        self,
        kind: PartKind,
        label: str,
        size: tuple[float, float, float],
        position: tuple[float, float, float],
        rotation: tuple[float, float, float] = (0.0, 0.0, 0.0),
        **metadata: Any,
    ) -> Part | None:
        """Build a part, or None when its size is degenerate.

        Very small cabinets can make derived sizes collapse to zero; those
        parts are dropped so assembly still yields a displayable result.
        """
        if not all(math.isfinite(value) and value > 0 for value in size):
            logger.debug(f"Dropping degenerate {kind.value} '{label}': size {size}")
            return None
        return Part(
            kind=kind,
            size=Size3(*size),
            position=Vector3(*position),
            material_ref=self.material(kind),
            label=label,
            rotation=Vector3(*rotation),
            metadata=MappingProxyType(dict(metadata)),
        )
