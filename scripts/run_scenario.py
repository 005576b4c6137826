"""CLI for replaying single-car elevator scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from liftcore import CarConfig, ElevatorSystem


class RideRequest(BaseModel):
    origin: int
    destination: int
    at: int = Field(default=0, ge=0)


class ScenarioConfig(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    num_floors: int = Field(default=21, ge=1)
    start_floor: int = 0
    dwell_ticks: int = Field(default=2, ge=1)
    floors_per_tick: float = Field(default=1.0, gt=0)
    strict_floors: bool = False
    duration: int = Field(default=30, ge=0)
    rides: List[RideRequest] = []


DEMO_SCENARIO = ScenarioConfig(
    name="demo",
    description="21-floor building, car at the lobby, two rides requested up front.",
    num_floors=21,
    start_floor=0,
    duration=30,
    rides=[RideRequest(origin=0, destination=7), RideRequest(origin=3, destination=1)],
)


def build_system(config: ScenarioConfig) -> ElevatorSystem:
    car_config = CarConfig(
        num_floors=config.num_floors,
        start_floor=config.start_floor,
        dwell_ticks=config.dwell_ticks,
        floors_per_tick=config.floors_per_tick,
        strict_floors=config.strict_floors,
    )
    return ElevatorSystem.from_config(car_config)


def _apply_scheduled_rides(system: ElevatorSystem, rides: List[RideRequest], current_time: int) -> None:
    for ride in rides:
        if ride.at == current_time:
            system.request_ride(ride.origin, ride.destination)


def run_scenario(system: ElevatorSystem, config: ScenarioConfig) -> List[Dict]:
    """Run the scenario and return one trace row per tick, taken before stepping."""
    trace: List[Dict] = []
    for _ in range(config.duration):
        _apply_scheduled_rides(system, config.rides, system.current_time)
        row = system.snapshot()
        row["state"] = system.state()
        trace.append(row)
        system.step()
    return trace


def format_trace(trace: List[Dict]) -> List[str]:
    return [f"t={row['time']:02d}  {row['state']}" for row in trace]


def load_scenario(path: Path) -> ScenarioConfig:
    return ScenarioConfig.model_validate(json.loads(path.read_text()))


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, nargs="?", help="Path to a JSON scenario configuration file")
    parser.add_argument("--demo", action="store_true", help="Run the built-in two-ride demo scenario")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the tick trace as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.demo:
        config = DEMO_SCENARIO
    elif args.config is None:
        parser.error("a scenario config file is required unless --demo is given")
    else:
        try:
            config = load_scenario(args.config)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            parser.error(f"invalid scenario {args.config}: {exc}")

    try:
        system = build_system(config)
    except ValueError as exc:
        parser.error(str(exc))
    trace = run_scenario(system, config)

    results = {
        "scenario": config.name or (args.config.stem if args.config else "demo"),
        "description": config.description,
        "duration": config.duration,
        "final_state": system.snapshot(),
        "trace": trace,
    }
    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    for line in format_trace(trace):
        print(line)
    if args.output:
        print(f"Saved trace to {args.output}")


if __name__ == "__main__":
    main()
