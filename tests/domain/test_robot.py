"""Tests for gridsweep.domain.robot module."""

from __future__ import annotations

from random import Random

import pytest

from gridsweep.config.types import SweepConfig, default_iteration_cap
from gridsweep.domain.filters import StopReason
from gridsweep.domain.grid import ORIGIN, CellStatus, Coordinate, GridMap, Heading
from gridsweep.domain.robot import Robot
from gridsweep.scenarios import SCENARIOS, Scenario


def _random_layout(rng: Random, width: int, height: int, density: float) -> list[str]:
    rows = [
        "".join("x" if rng.random() < density else "." for _ in range(width))
        for _ in range(height)
    ]
    rows[0] = "." + rows[0][1:]
    return rows


class TestRobotInitialState:
    def test_starts_at_origin_heading_right(self) -> None:
        robot = Robot(GridMap(["..", ".."]))
        assert robot.position == ORIGIN
        assert robot.heading is Heading.RIGHT
        assert robot.iterations == 0
        assert robot.stop_reason is None
        assert robot.stopped is False

    def test_trace_empty_without_recording(self) -> None:
        robot = Robot(GridMap(["..", ".."]))
        robot.run()
        assert robot.trace == ()

    def test_peek_does_not_move(self) -> None:
        robot = Robot(GridMap([".."]))
        assert robot.peek() == (Coordinate(1, 0), CellStatus.FRESH)
        assert robot.position == ORIGIN
        assert robot.grid.visited_count() == 1


class TestRobotScenarios:
    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.scenario_id)
    def test_expected_cleaned_count(self, scenario: Scenario) -> None:
        robot = Robot(GridMap(scenario.layout))
        assert robot.run() == scenario.expected

    def test_open_field(self) -> None:
        grid = GridMap(["....x..", "x......", ".....x.", "......."])
        assert Robot(grid).run() == 15

    def test_pocketed(self) -> None:
        assert Robot(GridMap(["...x..", "....xx", "..x..."])).run() == 6

    def test_scattered(self) -> None:
        assert Robot(GridMap(["...x.", ".x..x", "x...x", "..x.."])).run() == 9

    def test_single_column(self) -> None:
        assert Robot(GridMap([".", "."])).run() == 2

    def test_wall_to_the_right(self) -> None:
        assert Robot(GridMap([".x"])).run() == 1

    def test_wall_below(self) -> None:
        assert Robot(GridMap([".", "x"])).run() == 1


class TestRobotTransitions:
    def test_fresh_step_moves_and_marks(self) -> None:
        robot = Robot(GridMap(["..."]))
        assert robot.step() is False
        assert robot.position == Coordinate(1, 0)
        assert robot.grid.visited_count() == 2
        assert robot.heading is Heading.RIGHT

    def test_blocked_probe_turns_without_moving(self) -> None:
        robot = Robot(GridMap([".", "."]))
        assert robot.step() is False
        assert robot.position == ORIGIN
        assert robot.heading is Heading.DOWN

    def test_boxed_in_stops_after_four_turns(self) -> None:
        robot = Robot(GridMap([".x"]))
        assert robot.run() == 1
        assert robot.stop_reason is StopReason.BOXED_IN
        assert robot.iterations == 4
        assert robot.position == ORIGIN
        assert robot.heading is Heading.RIGHT

    def test_single_revisit_step_is_allowed(self) -> None:
        robot = Robot(GridMap([".", "."]))
        # blocked, fresh (0,1), blocked, blocked, then back onto the origin
        for _ in range(5):
            robot.step()
        assert robot.position == ORIGIN
        assert robot.heading is Heading.UP
        assert robot.grid.visited_count() == 2
        assert robot.stopped is False

    def test_second_revisit_stops_in_place(self) -> None:
        robot = Robot(GridMap([".", "."]))
        assert robot.run() == 2
        assert robot.stop_reason is StopReason.EXPLORED
        assert robot.iterations == 8
        assert robot.position == ORIGIN
        assert robot.heading is Heading.DOWN

    def test_step_after_stop_is_noop(self) -> None:
        robot = Robot(GridMap([".x"]))
        robot.run()
        iterations = robot.iterations
        assert robot.step() is True
        assert robot.iterations == iterations

    def test_run_twice_returns_same_count(self) -> None:
        robot = Robot(GridMap(["...x..", "....xx", "..x..."]))
        first = robot.run()
        assert robot.run() == first

    def test_iteration_cap_stops_run(self) -> None:
        grid = GridMap(["....x..", "x......", ".....x.", "......."])
        robot = Robot(grid, SweepConfig(max_iterations=3))
        assert robot.run() == 4
        assert robot.iterations == 3
        assert robot.stop_reason is StopReason.ITERATION_CAP


class TestRobotTrace:
    def test_trace_records_every_iteration(self) -> None:
        robot = Robot(GridMap([".", "."]), SweepConfig(record_trace=True))
        robot.run()
        trace = robot.trace
        assert len(trace) == robot.iterations
        assert [r.iteration for r in trace] == list(range(robot.iterations))
        assert [r.status for r in trace] == [
            "blocked",
            "fresh",
            "blocked",
            "blocked",
            "revisited",
            "blocked",
            "blocked",
            "revisited",
        ]
        assert [r.moved for r in trace] == [False, True, False, False, True, False, False, False]

    def test_trace_heading_is_post_step(self) -> None:
        robot = Robot(GridMap([".", "."]), SweepConfig(record_trace=True))
        robot.run()
        assert robot.trace[0].heading == "down"
        assert (robot.trace[1].x, robot.trace[1].y) == (0, 1)

    def test_visited_count_grows_by_at_most_one(self) -> None:
        grid = GridMap(["....x..", "x......", ".....x.", "......."])
        robot = Robot(grid, SweepConfig(record_trace=True))
        robot.run()
        counts = [1] + [r.visited_count for r in robot.trace]
        for before, after, record in zip(counts, counts[1:], robot.trace, strict=False):
            assert after - before == (1 if record.status == "fresh" else 0)


class TestRobotProperties:
    @pytest.mark.parametrize("seed", range(40))
    def test_random_layouts_terminate_within_bound(self, seed: int) -> None:
        rng = Random(seed)
        width, height = rng.randint(1, 9), rng.randint(1, 9)
        grid = GridMap(_random_layout(rng, width, height, density=rng.choice([0.0, 0.2, 0.4])))
        robot = Robot(grid)
        count = robot.run()

        assert 1 <= count <= width * height
        assert robot.stop_reason in (StopReason.BOXED_IN, StopReason.EXPLORED)
        assert robot.iterations <= default_iteration_cap(width, height)
        assert len(set(grid.visited)) == len(grid.visited)
        assert all(grid.is_traversable(cell) for cell in grid.visited)

    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.scenario_id)
    def test_scenarios_stop_naturally(self, scenario: Scenario) -> None:
        robot = Robot(GridMap(scenario.layout))
        robot.run()
        width, height = robot.grid.dimensions()
        assert robot.stop_reason is not StopReason.ITERATION_CAP
        assert robot.iterations <= default_iteration_cap(width, height)
