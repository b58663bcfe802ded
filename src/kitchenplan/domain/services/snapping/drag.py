"""Press, drag and release handling around the snap engine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Union

from ...entities import CabinetInstance
from ...value_objects import RoomConfig
from .engine import SnapEngine
from .models import SnapResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """Nothing pressed."""


@dataclass(frozen=True)
class PendingDrag:
    """Item pressed but not yet moved past the drag threshold."""

    item: CabinetInstance
    start_x: float
    start_z: float


@dataclass(frozen=True)
class Dragging:
    """Item being dragged; ``last_result`` is the latest resolved sample."""

    item: CabinetInstance
    start_x: float
    start_z: float
    last_result: SnapResult | None = None


DragState = Union[Idle, PendingDrag, Dragging]


class DragSession:
    """State machine for a single placement drag.

    Idle -> PendingDrag on press, PendingDrag -> Dragging once the pointer
    has moved at least the drag threshold, and back to Idle on release or
    cancel. Nothing is resolved while pending, so a press and release
    without movement is a click.

    The session never modifies the item or the item list. The caller
    applies the result returned by :meth:`release`.
    """

    def __init__(self, engine: SnapEngine | None = None) -> None:
        self.engine = engine or SnapEngine()
        self.state: DragState = Idle()

    @property
    def is_dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    def press(self, item: CabinetInstance, x: float, z: float) -> None:
        """Start a potential drag of ``item`` at pointer position (x, z)."""
        self.state = PendingDrag(item=item, start_x=x, start_z=z)
        logger.debug(f"Drag pending for {item.instance_id} at ({x}, {z})")

    def move(
        self,
        x: float,
        z: float,
        items: Sequence[CabinetInstance],
        room: RoomConfig,
    ) -> SnapResult | None:
        """Feed a pointer sample.

        Once a sample has snapped to a wall, later samples stay on that wall
        until the pointer moves past the wall release threshold.

        Returns:
            The resolved placement while dragging, or None when idle or
            still below the drag threshold.
        """
        state = self.state
        match state:
            case Idle():
                return None
            case PendingDrag(item=item, start_x=start_x, start_z=start_z):
                moved = math.hypot(x - start_x, z - start_z)
                if moved < self.engine.settings.drag_threshold:
                    return None
                logger.debug(
                    f"Drag started for {item.instance_id} after {moved:.1f}mm"
                )
            case Dragging(item=item, start_x=start_x, start_z=start_z):
                pass

        held_wall = None
        if isinstance(state, Dragging) and state.last_result is not None:
            held_wall = state.last_result.wall
        result = self.engine.resolve(item, x, z, items, room, held_wall=held_wall)
        self.state = Dragging(
            item=item, start_x=start_x, start_z=start_z, last_result=result
        )
        return result

    def release(self) -> SnapResult | None:
        """Finish the interaction.

        Returns:
            The last resolved placement if a drag took place, None for a
            click or when nothing was pressed.
        """
        state = self.state
        self.state = Idle()
        if isinstance(state, Dragging):
            logger.debug(f"Drag released for {state.item.instance_id}")
            return state.last_result
        return None

    def cancel(self) -> None:
        """Abandon the interaction without producing a result."""
        if not isinstance(self.state, Idle):
            logger.debug("Drag cancelled")
        self.state = Idle()
