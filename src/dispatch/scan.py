from __future__ import annotations

from typing import Optional, Tuple

from .interface import Direction
from .queues import FloorQueue
from .utils import nearest_distance


class ScanDispatcher:
    """Implements the SCAN (elevator algorithm) decisions for a single car.

    The dispatcher holds no state of its own: it looks at the car's position,
    committed direction and the two sweep queues, and answers where a new
    stop belongs, which way to go from rest, and which floor is next.
    """

    def classify_origin(
        self,
        origin: int,
        position: float,
        direction: Direction,
        destination: Optional[int] = None,
    ) -> Optional[Direction]:
        """Return the sweep whose queue should hold ``origin``.

        While moving, a floor at or ahead of the car stays on this sweep and a
        floor behind it waits for the return sweep. At rest, the floor's side
        of the car decides; a call at the car's own floor is served as an
        immediate stop on the side of its destination.
        """
        if direction is Direction.UP:
            return Direction.UP if origin >= position else Direction.DOWN
        if direction is Direction.DOWN:
            return Direction.DOWN if origin <= position else Direction.UP

        if origin > position:
            return Direction.UP
        if origin < position:
            return Direction.DOWN
        if destination is None:
            return None
        return Direction.UP if destination >= origin else Direction.DOWN

    def select_direction(self, position: float, up: FloorQueue, down: FloorQueue) -> Direction:
        """Pick a direction for an idle car; ties go up."""
        if up and not down:
            return Direction.UP
        if down and not up:
            return Direction.DOWN
        if not up and not down:
            return Direction.IDLE
        up_distance = nearest_distance(up, position)
        down_distance = nearest_distance(down, position)
        return Direction.UP if up_distance <= down_distance else Direction.DOWN

    def resolve_target(
        self, direction: Direction, up: FloorQueue, down: FloorQueue
    ) -> Tuple[Direction, Optional[int]]:
        """Return ``(direction, target)`` for a committed car.

        A drained sweep reverses onto the other queue; when both are empty
        the car goes idle and there is no target.
        """
        active, other = (up, down) if direction is Direction.UP else (down, up)
        if active:
            return direction, active.peek()
        if other:
            return direction.opposite, other.peek()
        return Direction.IDLE, None
