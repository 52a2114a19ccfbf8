"""Wall-following cleaning robot.

The robot walks straight until the next cell is blocked, then turns to the
next heading (RIGHT -> DOWN -> LEFT -> UP). It may take a single step onto an
already visited cell; a second such step without reaching a fresh cell in
between, or four consecutive blocked probes, stops the run.
"""

from __future__ import annotations

from gridsweep.config.types import SweepConfig
from gridsweep.domain.filters import StallDetector, StopReason
from gridsweep.domain.grid import ORIGIN, CellStatus, Coordinate, GridMap, Heading
from gridsweep.domain.snapshot import StepRecord, Trace


class Robot:
    """Exploration engine bound to one :class:`GridMap` for a single run."""

    def __init__(self, grid: GridMap, config: SweepConfig | None = None) -> None:
        config = config or SweepConfig()
        self._grid = grid
        self._position = ORIGIN
        self._heading = Heading.RIGHT
        self._stall = StallDetector()
        self._max_iterations = config.resolved_max_iterations(grid.width, grid.height)
        self._iterations = 0
        self._stop_reason: StopReason | None = None
        self._trace: list[StepRecord] | None = [] if config.record_trace else None

    @property
    def grid(self) -> GridMap:
        return self._grid

    @property
    def position(self) -> Coordinate:
        return self._position

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def stop_reason(self) -> StopReason | None:
        return self._stop_reason

    @property
    def stopped(self) -> bool:
        return self._stop_reason is not None

    @property
    def trace(self) -> Trace:
        """Recorded steps; empty unless the robot was configured with ``record_trace``."""
        return tuple(self._trace) if self._trace is not None else ()

    def peek(self) -> tuple[Coordinate, CellStatus]:
        """Return the cell ahead and its classification without moving."""
        candidate = self._position.advanced(self._heading)
        return candidate, self._grid.classify(candidate)

    def step(self) -> bool:
        """Run one iteration of the control loop; return True once stopped."""
        if self._stop_reason is not None:
            return True
        if self._iterations >= self._max_iterations:
            self._stop_reason = StopReason.ITERATION_CAP
            return True

        candidate, status = self.peek()
        reason = self._stall.observe(status)
        moved = False
        if status is CellStatus.FRESH:
            self._position = candidate
            self._grid.mark_visited(candidate)
            moved = True
        elif status is CellStatus.REVISITED:
            # Second revisit in a row halts in place.
            if reason is None:
                self._position = candidate
                moved = True
        elif status is CellStatus.BLOCKED:
            self._heading = self._heading.turned()
        else:
            raise ValueError(f"unhandled cell status: {status!r}")

        self._iterations += 1
        self._stop_reason = reason
        if self._trace is not None:
            self._trace.append(
                StepRecord(
                    iteration=self._iterations - 1,
                    x=self._position.x,
                    y=self._position.y,
                    heading=self._heading.name.lower(),
                    status=status.value,
                    moved=moved,
                    visited_count=self._grid.visited_count(),
                )
            )
        return reason is not None

    def run(self) -> int:
        """Drive the robot until it stalls; return the number of cleaned cells."""
        while not self.step():
            pass
        return self._grid.visited_count()
