"""SCAN dispatch primitives for a single elevator car."""

from .interface import CarSnapshot, Direction, DoorState
from .queues import FloorQueue
from .scan import ScanDispatcher
from .utils import clamp_floor, nearest_distance

__all__ = [
    "CarSnapshot",
    "Direction",
    "DoorState",
    "FloorQueue",
    "ScanDispatcher",
    "clamp_floor",
    "nearest_distance",
]
