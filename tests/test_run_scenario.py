import json

import pytest
from pydantic import ValidationError

import run_scenario
from run_scenario import DEMO_SCENARIO, RideRequest, ScenarioConfig, build_system, format_trace


def test_demo_scenario_trace(demo_trace):
    system = build_system(DEMO_SCENARIO)
    trace = run_scenario.run_scenario(system, DEMO_SCENARIO)
    assert [row["state"] for row in trace] == demo_trace
    assert format_trace(trace)[0] == "t=00  " + demo_trace[0]
    assert format_trace(trace)[29].startswith("t=29  ")


def test_rides_are_requested_at_their_tick():
    config = ScenarioConfig(num_floors=10, duration=8, rides=[RideRequest(origin=6, destination=2, at=4)])
    trace = run_scenario.run_scenario(build_system(config), config)
    assert trace[3]["up"] == []
    assert trace[4]["up"] == [6]
    assert trace[5]["direction"] == "UP"
    assert trace[5]["floor"] == 1


def test_scenario_validation():
    with pytest.raises(ValidationError):
        ScenarioConfig(num_floors=0)
    with pytest.raises(ValidationError):
        ScenarioConfig.model_validate({"rides": [{"origin": 1, "destination": 2, "at": -1}]})


def test_build_system_passes_car_options():
    config = ScenarioConfig(num_floors=5, start_floor=9, dwell_ticks=3, floors_per_tick=0.5, strict_floors=True)
    car = build_system(config).car
    assert car.current_floor == 4
    assert car.config.dwell_ticks == 3
    assert car.config.floors_per_tick == 0.5
    assert car.config.strict_floors is True


def test_main_writes_output(tmp_path, capsys):
    config_path = tmp_path / "scenario.json"
    config_path.write_text(
        json.dumps(
            {
                "name": "short",
                "num_floors": 6,
                "duration": 4,
                "rides": [{"origin": 2, "destination": 4}],
            }
        )
    )
    output_path = tmp_path / "out" / "trace.json"

    run_scenario.main([str(config_path), "--output", str(output_path)])

    out = capsys.readouterr().out
    assert "Scenario: short" in out
    assert "t=00  floor=0 dir=IDLE door=CLOSED up=[2] down=[] dwell=0" in out
    results = json.loads(output_path.read_text())
    assert results["scenario"] == "short"
    assert len(results["trace"]) == 4
    assert results["final_state"]["time"] == 4
    assert results["final_state"]["door"] == "OPEN"


def test_main_demo(capsys, demo_trace):
    run_scenario.main(["--demo"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Scenario: demo"
    assert lines[-1] == "t=29  " + demo_trace[29]


def test_main_rejects_bad_config(tmp_path):
    config_path = tmp_path / "bad.json"
    config_path.write_text(json.dumps({"num_floors": -1}))
    with pytest.raises(SystemExit) as excinfo:
        run_scenario.main([str(config_path)])
    assert excinfo.value.code == 2


def test_main_requires_config():
    with pytest.raises(SystemExit):
        run_scenario.main([])


def test_bundled_scenario_loads():
    from pathlib import Path

    path = Path(run_scenario.__file__).parent / "scenarios" / "lobby_rush.json"
    config = run_scenario.load_scenario(path)
    assert config.num_floors == 12
    assert len(config.rides) == 5
