"""Single-car elevator simulation advanced in discrete ticks."""

from .car import ElevatorCar
from .config import CarConfig
from .errors import InvalidFloorError
from .system import ElevatorSystem

__all__ = [
    "CarConfig",
    "ElevatorCar",
    "ElevatorSystem",
    "InvalidFloorError",
]
