"""Spatial placement: wall, cabinet and grid snapping with a collision guard."""

from .bounds import effective_size, footprint_at, snap_to_grid
from .drag import DragSession, DragState, Dragging, Idle, PendingDrag
from .engine import SnapEngine
from .models import SnapResult, SnapSettings

__all__ = [
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
