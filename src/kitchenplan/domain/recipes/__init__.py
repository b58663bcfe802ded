"""Construction recipes and their resolution."""

from .catalog import (
    ALLOWED_SUB_KINDS,
    DEFAULT_RECIPE_TEMPLATES,
    RecipeKey,
    RecipeTable,
    default_recipe_table,
    is_allowed,
)
from .models import (
    BenchtopRecipe,
    CarcassRecipe,
    ConstructionRecipe,
    CornerRecipe,
    FrontsRecipe,
    RecipeOverrides,
    RecipeTemplate,
    RevealOverrides,
    RevealSet,
    ShelvesRecipe,
    ToeKickRecipe,
)
from .resolver import RecipeResolver

__all__ = [
    "ALLOWED_SUB_KINDS",
    "DEFAULT_RECIPE_TEMPLATES",
    "BenchtopRecipe",
    "CarcassRecipe",
    "ConstructionRecipe",
    "CornerRecipe",
    "FrontsRecipe",
    "RecipeKey",
    "RecipeOverrides",
    "RecipeResolver",
    "RecipeTable",
    "RecipeTemplate",
    "RevealOverrides",
    "RevealSet",
    "ShelvesRecipe",
    "ToeKickRecipe",
    "default_recipe_table",
    "is_allowed",
]
