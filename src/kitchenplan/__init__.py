"""Kitchen cabinet planning: recipes, part geometry and snapped placement."""
