from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class Direction(Enum):
    IDLE = 0
    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> "Direction":
        if self is Direction.UP:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.UP
        return Direction.IDLE


class DoorState(Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class CarSnapshot:
    """Read-only view of a car, used for observation and tests."""

    floor: int
    position: float
    direction: Direction
    door: DoorState
    up: List[int]
    down: List[int]
    dwell: int
    pending: Dict[int, List[int]] = field(default_factory=dict)

    def describe(self) -> str:
        return (
            f"floor={self.floor} dir={self.direction.name} door={self.door.name} "
            f"up={self.up} down={self.down} dwell={self.dwell}"
        )

    def to_dict(self) -> dict:
        return {
            "floor": self.floor,
            "position": self.position,
            "direction": self.direction.name,
            "door": self.door.name,
            "up": list(self.up),
            "down": list(self.down),
            "dwell": self.dwell,
            "pending": {str(k): list(v) for k, v in self.pending.items()},
        }
