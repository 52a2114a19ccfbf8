"""Typed trace rows for exploration runs.

``StepRecord`` captures the robot after one loop iteration. Field order
matches the trace-log Parquet columns (minus the scenario id).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StepRecord:
    """Immutable record of one engine iteration."""

    iteration: int
    x: int
    y: int
    heading: str
    status: str
    moved: bool
    visited_count: int


Trace = tuple[StepRecord, ...]
"""Ordered tuple of step records covering a full run."""
