"""Drawer section sizing.

Drawer stacks are sized from fixed proportion tables so that deeper
drawers sit at the bottom of the stack.
"""

from __future__ import annotations

# Share of the section height per drawer, listed top to bottom.
DRAWER_PROPORTIONS: dict[int, tuple[float, ...]] = {
    1: (1.0,),
    2: (0.40, 0.60),
    3: (0.25, 0.33, 0.42),
    4: (0.18, 0.24, 0.28, 0.30),
    5: (0.14, 0.18, 0.22, 0.22, 0.24),
}

# Height of the drawer section of a door-and-drawer cabinet by drawer count.
COMBINATION_DRAWER_SECTIONS: dict[int, float] = {
    1: 180.0,
    2: 320.0,
    3: 450.0,
    4: 550.0,
}
COMBINATION_DRAWER_UNIT = 150.0
COMBINATION_DRAWER_MAX_SHARE = 0.6


def distribute_drawer_heights(count: int, section_height: float) -> list[float]:
    """Split a section height between drawers, top to bottom.

    Counts without a proportion table are split evenly. The returned
    heights always sum to ``section_height``; subtract the drawer gap to
    get the rendered front heights.

    Args:
        count: Number of drawers.
        section_height: Total height of the drawer section.

    Returns:
        Drawer slot heights from the top drawer down, empty for no drawers.

    Example:
        >>> distribute_drawer_heights(3, 900.0)
        [225.0, 297.0, 378.0]
    """
    if count <= 0 or section_height <= 0:
        return []
    proportions = DRAWER_PROPORTIONS.get(count)
    if proportions is None:
        return [section_height / count] * count
    return [section_height * share for share in proportions]


def combination_drawer_section(drawer_count: int, carcass_height: float) -> float:
    """Height of the drawer section above the doors of a combination cabinet.

    Known counts use a lookup table, others take 150mm per drawer. The
    section never exceeds 60% of the carcass height.
    """
    if drawer_count <= 0:
        return 0.0
    section = COMBINATION_DRAWER_SECTIONS.get(
        drawer_count, drawer_count * COMBINATION_DRAWER_UNIT
    )
    return min(section, carcass_height * COMBINATION_DRAWER_MAX_SHARE)
