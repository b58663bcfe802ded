"""Infrastructure layer - output formatting and export."""

from .exporters import JsonExporter
from .formatters import PartListFormatter, RecipeTableFormatter, SnapResultFormatter

__all__ = [
    "JsonExporter",
    "PartListFormatter",
    "RecipeTableFormatter",
    "SnapResultFormatter",
]
