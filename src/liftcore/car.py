from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dispatch import CarSnapshot, Direction, DoorState, FloorQueue, ScanDispatcher, clamp_floor

from .config import CarConfig
from .errors import InvalidFloorError

logger = logging.getLogger(__name__)

AT_FLOOR_TOLERANCE = 1e-9


@dataclass
class ElevatorCar:
    """A single car driven tick by tick with SCAN scheduling.

    Stops live in two sweep queues, one ascending and one descending. A hall
    call only queues its origin; the destination waits under that origin in
    ``pending`` and is filed into a queue once the car opens its door there.
    """

    config: CarConfig
    dispatcher: ScanDispatcher = field(default_factory=ScanDispatcher)
    current_floor: int = field(init=False)
    position: float = field(init=False)
    direction: Direction = field(init=False, default=Direction.IDLE)
    door_state: DoorState = field(init=False, default=DoorState.CLOSED)
    dwell_remaining: int = field(init=False, default=0)
    up_queue: FloorQueue = field(init=False)
    down_queue: FloorQueue = field(init=False)
    pending: Dict[int, List[int]] = field(init=False)

    def __post_init__(self) -> None:
        self.current_floor = clamp_floor(self.config.start_floor, self.config.num_floors)
        self.position = float(self.current_floor)
        self.up_queue = FloorQueue()
        self.down_queue = FloorQueue(descending=True)
        self.pending = {}

    @property
    def num_floors(self) -> int:
        return self.config.num_floors

    def add_hall_call(self, origin: int, destination: int) -> None:
        origin = self._normalize_floor(origin)
        destination = self._normalize_floor(destination)
        if origin == destination:
            logger.debug("Ignoring hall call %s -> %s: nothing to serve", origin, destination)
            return

        self.pending.setdefault(origin, []).append(destination)
        sweep = self.dispatcher.classify_origin(origin, self.position, self.direction, destination)
        if sweep is not None:
            self._schedule(origin, sweep)
        logger.debug(
            "Hall call %s -> %s filed (dir=%s up=%s down=%s)",
            origin,
            destination,
            self.direction.name,
            self.up_queue.to_list(),
            self.down_queue.to_list(),
        )

    def step(self) -> Optional[int]:
        """Advance one tick. Returns the floor arrived at this tick, if any."""
        if self.dwell_remaining > 0:
            self.dwell_remaining -= 1
            if self.dwell_remaining == 0:
                self.door_state = DoorState.CLOSED
            return None

        if self.direction is Direction.IDLE:
            self.direction = self.dispatcher.select_direction(
                self.position, self.up_queue, self.down_queue
            )
            if self.direction is Direction.IDLE:
                return None
            logger.debug("Committed %s from floor %s", self.direction.name, self.current_floor)

        direction, target = self.dispatcher.resolve_target(
            self.direction, self.up_queue, self.down_queue
        )
        if direction is not self.direction:
            logger.debug("Direction %s -> %s at floor %s", self.direction.name, direction.name, self.current_floor)
            self.direction = direction
        if target is None:
            return None

        if self._is_at_floor(target):
            self._arrive_at(target)
            return target

        self.door_state = DoorState.CLOSED
        step = self.config.floors_per_tick
        if target > self.position:
            self.position = min(self.position + step, float(target))
        else:
            self.position = max(self.position - step, float(target))
        self.current_floor = int(math.floor(self.position + 0.5))
        return None

    def snapshot(self) -> CarSnapshot:
        return CarSnapshot(
            floor=self.current_floor,
            position=self.position,
            direction=self.direction,
            door=self.door_state,
            up=self.up_queue.to_list(),
            down=self.down_queue.to_list(),
            dwell=self.dwell_remaining,
            pending={origin: list(dests) for origin, dests in self.pending.items()},
        )

    def state(self) -> str:
        return self.snapshot().describe()

    def _arrive_at(self, floor: int) -> None:
        self.position = float(floor)
        self.current_floor = floor
        queue = self.up_queue if self.direction is Direction.UP else self.down_queue
        queue.pop()

        self.door_state = DoorState.OPEN
        self.dwell_remaining = self.config.dwell_ticks

        destinations = self.pending.pop(floor, [])
        for destination in destinations:
            if destination == floor:
                continue
            self._schedule(destination, Direction.UP if destination > floor else Direction.DOWN)
        logger.debug("Arrived at floor %s, filed destinations %s", floor, destinations)

    def _schedule(self, floor: int, sweep: Direction) -> None:
        # A floor already queued on either sweep will be visited; keep it in one queue only.
        if floor in self.up_queue or floor in self.down_queue:
            return
        queue = self.up_queue if sweep is Direction.UP else self.down_queue
        queue.add(floor)

    def _normalize_floor(self, floor: int) -> int:
        clamped = clamp_floor(floor, self.num_floors)
        if clamped != floor:
            if self.config.strict_floors:
                raise InvalidFloorError(floor, self.num_floors)
            logger.debug("Clamped floor %s to %s", floor, clamped)
        return clamped

    def _is_at_floor(self, floor: int) -> bool:
        return abs(self.position - floor) < AT_FLOOR_TOLERANCE
