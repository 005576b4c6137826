from __future__ import annotations

from typing import Optional

from .queues import FloorQueue


def clamp_floor(floor: int, num_floors: int) -> int:
    """Clamp a floor index into ``[0, num_floors - 1]``."""

    return max(0, min(num_floors - 1, floor))


def nearest_distance(queue: FloorQueue, position: float) -> Optional[float]:
    """Distance from ``position`` to the front of ``queue``, or None when empty."""

    nearest = queue.peek()
    if nearest is None:
        return None
    return abs(nearest - position)
