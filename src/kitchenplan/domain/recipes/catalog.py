"""Keyed recipe table.

Recipes are looked up by (category, sub-kind). The table is validated
when it is built, so a lookup never has to guess from product names.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..kinds import SubKind
from ..value_objects import CabinetCategory
from .models import RecipeTemplate

RecipeKey = tuple[CabinetCategory, SubKind]

_CORNERS = frozenset(
    {SubKind.CORNER_L, SubKind.CORNER_BLIND, SubKind.CORNER_DIAGONAL}
)

# Sub-kinds a product of each category may declare.
ALLOWED_SUB_KINDS: dict[CabinetCategory, frozenset[SubKind]] = {
    CabinetCategory.BASE: frozenset(
        {
            SubKind.DOOR,
            SubKind.DRAWER,
            SubKind.COMBO,
            SubKind.SINK,
            SubKind.SINK_FALSE_FRONT,
            SubKind.APPLIANCE,
            SubKind.OPEN,
        }
    )
    | _CORNERS,
    CabinetCategory.WALL: frozenset(
        {SubKind.DOOR, SubKind.DRAWER, SubKind.COMBO, SubKind.APPLIANCE, SubKind.OPEN}
    )
    | _CORNERS,
    CabinetCategory.TALL: frozenset(
        {
            SubKind.DOOR,
            SubKind.DRAWER,
            SubKind.COMBO,
            SubKind.APPLIANCE,
            SubKind.FRIDGE,
            SubKind.PANTRY,
            SubKind.OPEN,
        }
    )
    | _CORNERS,
    CabinetCategory.ACCESSORY: frozenset({SubKind.DOOR, SubKind.OPEN}),
}


def is_allowed(category: CabinetCategory, sub_kind: SubKind) -> bool:
    """Check whether a category may carry a sub-kind."""
    return sub_kind in ALLOWED_SUB_KINDS[category]


class RecipeTable:
    """Immutable mapping of recipe keys to recipe templates.

    Example:
        table = RecipeTable(DEFAULT_RECIPE_TEMPLATES)
        template = table.get(CabinetCategory.BASE, SubKind.SINK)
    """

    def __init__(self, templates: Iterable[RecipeTemplate]) -> None:
        entries: dict[RecipeKey, RecipeTemplate] = {}
        for template in templates:
            key = (template.category, template.sub_kind)
            if key in entries:
                raise ValueError(
                    f"Duplicate recipe for {template.category.value}/"
                    f"{template.sub_kind.value}: '{template.name}'"
                )
            if not is_allowed(template.category, template.sub_kind):
                raise ValueError(
                    f"Recipe '{template.name}': sub-kind "
                    f"'{template.sub_kind.value}' is not allowed for "
                    f"{template.category.value} cabinets"
                )
            entries[key] = template
        self._entries = entries

    def get(
        self, category: CabinetCategory, sub_kind: SubKind
    ) -> RecipeTemplate | None:
        """Look up a template, returning None when the table has no entry."""
        return self._entries.get((category, sub_kind))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[RecipeTemplate]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def merged_with(self, templates: Iterable[RecipeTemplate]) -> RecipeTable:
        """Return a new table where the given templates replace matching keys."""
        replacements = {(t.category, t.sub_kind): t for t in templates}
        merged = [
            replacements.pop(key, template) for key, template in self._entries.items()
        ]
        return RecipeTable([*merged, *replacements.values()])


_BASE = CabinetCategory.BASE
_WALL = CabinetCategory.WALL
_TALL = CabinetCategory.TALL

DEFAULT_RECIPE_TEMPLATES: tuple[RecipeTemplate, ...] = (
    # Base cabinets
    RecipeTemplate("Base 1 Door", _BASE, SubKind.DOOR, door_count=1, shelf_count=1),
    RecipeTemplate(
        "Base 3 Drawer",
        _BASE,
        SubKind.DRAWER,
        door_count=0,
        drawer_count=3,
        shelf_count=0,
    ),
    RecipeTemplate(
        "Base 1 Door 1 Drawer",
        _BASE,
        SubKind.COMBO,
        door_count=1,
        drawer_count=1,
        shelf_count=1,
    ),
    RecipeTemplate("Base Sink", _BASE, SubKind.SINK, door_count=2, shelf_count=0),
    RecipeTemplate(
        "Base Sink With False Front",
        _BASE,
        SubKind.SINK_FALSE_FRONT,
        door_count=2,
        shelf_count=0,
        has_false_front=True,
    ),
    RecipeTemplate(
        "Base Appliance Housing",
        _BASE,
        SubKind.APPLIANCE,
        door_count=0,
        shelf_count=0,
    ),
    RecipeTemplate(
        "Base Open Shelf", _BASE, SubKind.OPEN, door_count=0, shelf_count=2
    ),
    RecipeTemplate("Base L Corner", _BASE, SubKind.CORNER_L, door_count=2),
    RecipeTemplate("Base Blind Corner", _BASE, SubKind.CORNER_BLIND, door_count=1),
    RecipeTemplate(
        "Base Diagonal Corner", _BASE, SubKind.CORNER_DIAGONAL, door_count=1
    ),
    # Wall cabinets
    RecipeTemplate(
        "Upper 1 Door",
        _WALL,
        SubKind.DOOR,
        door_count=1,
        shelf_count=2,
        shelf_setback=10.0,
    ),
    RecipeTemplate(
        "Upper Rangehood",
        _WALL,
        SubKind.APPLIANCE,
        door_count=0,
        shelf_count=0,
        has_top=False,
    ),
    RecipeTemplate(
        "Upper Open Shelf", _WALL, SubKind.OPEN, door_count=0, shelf_count=2
    ),
    RecipeTemplate("Upper L Corner", _WALL, SubKind.CORNER_L, door_count=2),
    RecipeTemplate("Upper Blind Corner", _WALL, SubKind.CORNER_BLIND, door_count=1),
    RecipeTemplate(
        "Upper Diagonal Corner", _WALL, SubKind.CORNER_DIAGONAL, door_count=1
    ),
    # Tall cabinets
    RecipeTemplate("Tall 2 Door", _TALL, SubKind.DOOR, door_count=2, shelf_count=5),
    RecipeTemplate(
        "Tall Pantry 2 Door", _TALL, SubKind.PANTRY, door_count=2, shelf_count=5
    ),
    RecipeTemplate(
        "Tall Oven Tower",
        _TALL,
        SubKind.APPLIANCE,
        door_count=0,
        drawer_count=0,
        shelf_count=0,
    ),
    RecipeTemplate(
        "Tall Fridge",
        _TALL,
        SubKind.FRIDGE,
        door_count=0,
        shelf_count=0,
        toe_kick=False,
    ),
    RecipeTemplate("Tall L Corner", _TALL, SubKind.CORNER_L, door_count=2),
    # Accessories
    RecipeTemplate(
        "Accessory Open Shelf",
        CabinetCategory.ACCESSORY,
        SubKind.OPEN,
        door_count=0,
        shelf_count=1,
        benchtop=False,
    ),
)


def default_recipe_table() -> RecipeTable:
    """Build the built-in recipe table."""
    return RecipeTable(DEFAULT_RECIPE_TEMPLATES)
