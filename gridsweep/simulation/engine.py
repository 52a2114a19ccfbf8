"""Scenario runner: builds a grid/robot pair per layout and persists run artifacts."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from gridsweep.config.constants import FLUSH_THRESHOLD
from gridsweep.config.types import SuiteConfig, SweepConfig, SweepResult
from gridsweep.domain.grid import GridMap
from gridsweep.domain.robot import Robot
from gridsweep.io.paths import logs_dir, scenarios_dir, suite_results_path, trace_log_path
from gridsweep.io.schemas import SCENARIO_PAYLOAD_SCHEMA_VERSION, SUITE_RESULTS_SCHEMA
from gridsweep.scenarios import SCENARIOS, Scenario
from gridsweep.simulation.persistence import empty_trace_columns, flush_trace_columns

ResultCallback = Callable[[int, SweepResult, Robot], None]
"""Invoked after each scenario with its index, result, and finished robot."""


def simulate(layout: Sequence[str], config: SweepConfig | None = None) -> Robot:
    """Run a fresh robot over *layout* to completion and return it."""
    robot = Robot(GridMap(layout), config)
    robot.run()
    return robot


def evaluate_scenario(
    scenario: Scenario, config: SweepConfig | None = None
) -> tuple[SweepResult, Robot]:
    """Run one scenario and compare the visited count against its expectation."""
    robot = simulate(scenario.layout, config)
    visited_count = robot.grid.visited_count()
    result = SweepResult(
        scenario_id=scenario.scenario_id,
        expected=scenario.expected,
        visited_count=visited_count,
        passed=scenario.expected is None or visited_count == scenario.expected,
        iterations=robot.iterations,
        stop_reason=robot.stop_reason.value if robot.stop_reason is not None else None,
    )
    return result, robot


def _scenario_payload(
    scenario: Scenario, result: SweepResult, robot: Robot, sweep: SweepConfig
) -> dict[str, object]:
    grid = robot.grid
    return {
        "scenario_id": scenario.scenario_id,
        "layout": list(scenario.layout),
        "expected": result.expected,
        "visited_count": result.visited_count,
        "passed": result.passed,
        "visited": [[cell.x, cell.y] for cell in grid.visited],
        "metadata": {
            "grid_width": grid.width,
            "grid_height": grid.height,
            "iterations": result.iterations,
            "max_iterations": sweep.resolved_max_iterations(grid.width, grid.height),
            "stop_reason": result.stop_reason,
            "final_x": robot.position.x,
            "final_y": robot.position.y,
            "final_heading": robot.heading.name.lower(),
            "schema_version": SCENARIO_PAYLOAD_SCHEMA_VERSION,
        },
    }


def run_suite(
    scenarios: Iterable[Scenario] = SCENARIOS,
    config: SuiteConfig | None = None,
    on_result: ResultCallback | None = None,
) -> list[SweepResult]:
    """Run every scenario in order and optionally persist traces and results.

    With ``config.out_dir`` set, writes ``logs/trace_log.parquet``,
    ``logs/suite_results.parquet`` and one ``scenarios/<id>.json`` per run.
    """
    suite_config = config or SuiteConfig()
    sweep = suite_config.sweep
    if suite_config.needs_trace and not sweep.record_trace:
        sweep = SweepConfig(max_iterations=sweep.max_iterations, record_trace=True)

    out_dir = Path(suite_config.out_dir) if suite_config.out_dir is not None else None
    if out_dir is not None:
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
        scenarios_dir(out_dir).mkdir(parents=True, exist_ok=True)

    trace_writer: pq.ParquetWriter | None = None
    trace_columns = empty_trace_columns()
    result_rows: list[dict[str, object]] = []
    results: list[SweepResult] = []

    try:
        for index, scenario in enumerate(scenarios):
            result, robot = evaluate_scenario(scenario, sweep)
            results.append(result)
            if on_result is not None:
                on_result(index, result, robot)
            if out_dir is None:
                continue

            for record in robot.trace:
                trace_columns["scenario_id"].append(scenario.scenario_id)
                trace_columns["iteration"].append(record.iteration)
                trace_columns["x"].append(record.x)
                trace_columns["y"].append(record.y)
                trace_columns["heading"].append(record.heading)
                trace_columns["status"].append(record.status)
                trace_columns["moved"].append(record.moved)
                trace_columns["visited_count"].append(record.visited_count)
                if len(trace_columns["scenario_id"]) >= FLUSH_THRESHOLD:
                    trace_writer = flush_trace_columns(
                        trace_columns=trace_columns,
                        trace_log_path=trace_log_path(out_dir),
                        trace_writer=trace_writer,
                    )

            result_rows.append(
                {
                    "scenario_id": result.scenario_id,
                    "grid_width": robot.grid.width,
                    "grid_height": robot.grid.height,
                    "expected": result.expected,
                    "visited_count": result.visited_count,
                    "passed": result.passed,
                    "iterations": result.iterations,
                    "stop_reason": result.stop_reason,
                }
            )
            (scenarios_dir(out_dir) / f"{scenario.scenario_id}.json").write_text(
                json.dumps(
                    _scenario_payload(scenario, result, robot, sweep),
                    ensure_ascii=False,
                    indent=2,
                )
            )

        if out_dir is not None:
            trace_writer = flush_trace_columns(
                trace_columns=trace_columns,
                trace_log_path=trace_log_path(out_dir),
                trace_writer=trace_writer,
            )
            pq.write_table(
                pa.Table.from_pylist(result_rows, schema=SUITE_RESULTS_SCHEMA),
                suite_results_path(out_dir),
            )
    finally:
        if trace_writer is not None:
            trace_writer.close()

    return results
