from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from dispatch import CarSnapshot

from .car import ElevatorCar
from .config import CarConfig

logger = logging.getLogger(__name__)


class ElevatorSystem:
    """Single-car façade stepped by an external driver.

    Observers can subscribe to ``"call"``, ``"arrival"`` and ``"direction"``
    events; each callback receives a payload dict stamped with the tick.
    """

    def __init__(
        self,
        num_floors: Optional[int] = None,
        start_floor: int = 0,
        config: Optional[CarConfig] = None,
    ) -> None:
        if config is None:
            if num_floors is None:
                raise ValueError("Either num_floors or config is required")
            config = CarConfig(num_floors=num_floors, start_floor=start_floor)
        self.car = ElevatorCar(config)
        self.current_time: int = 0
        self.event_hooks: Dict[str, List[Callable[[dict], None]]] = {}

    @classmethod
    def from_config(cls, config: CarConfig) -> "ElevatorSystem":
        return cls(config=config)

    def request_ride(self, origin: int, destination: int) -> None:
        self.car.add_hall_call(origin, destination)
        self._emit("call", {"time": self.current_time, "origin": origin, "destination": destination})

    def step(self) -> None:
        previous_direction = self.car.direction
        arrived_at = self.car.step()

        if self.car.direction is not previous_direction:
            self._emit(
                "direction",
                {
                    "time": self.current_time,
                    "from": previous_direction.name,
                    "to": self.car.direction.name,
                    "floor": self.car.current_floor,
                },
            )
        if arrived_at is not None:
            logger.debug("t=%s arrival at floor %s", self.current_time, arrived_at)
            self._emit("arrival", {"time": self.current_time, "floor": arrived_at})

        self.current_time += 1

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.step()

    def state(self) -> str:
        return self.car.state()

    def car_snapshot(self) -> CarSnapshot:
        return self.car.snapshot()

    def snapshot(self) -> dict:
        payload = {"time": self.current_time}
        payload.update(self.car.snapshot().to_dict())
        return payload

    def on_event(self, event: str, callback: Callable[[dict], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _emit(self, event: str, payload: dict) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
