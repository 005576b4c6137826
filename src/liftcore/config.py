from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CarConfig:
    """Per-car constants used by the motion and door logic."""

    num_floors: int
    start_floor: int = 0
    dwell_ticks: int = 2
    floors_per_tick: float = 1.0
    strict_floors: bool = False

    def __post_init__(self) -> None:
        if self.num_floors < 1:
            raise ValueError(f"num_floors must be at least 1, got {self.num_floors}")
        if self.dwell_ticks < 1:
            raise ValueError(f"dwell_ticks must be at least 1, got {self.dwell_ticks}")
        if self.floors_per_tick <= 0:
            raise ValueError(f"floors_per_tick must be positive, got {self.floors_per_tick}")
