"""Domain services: cabinet assembly and spatial placement."""

from .assembler import (
    ASSEMBLY_ORDER,
    DEFAULT_DEPTH,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    CabinetAssembler,
)
from .snapping import (
    DragSession,
    Dragging,
    DragState,
    Idle,
    PendingDrag,
    SnapEngine,
    SnapResult,
    SnapSettings,
    effective_size,
    footprint_at,
    snap_to_grid,
)

__all__ = [
    "ASSEMBLY_ORDER",
    "DEFAULT_DEPTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "CabinetAssembler",
    "DragSession",
    "DragState",
    "Dragging",
    "Idle",
    "PendingDrag",
    "SnapEngine",
    "SnapResult",
    "SnapSettings",
    "effective_size",
    "footprint_at",
    "snap_to_grid",
]
