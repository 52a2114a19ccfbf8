"""Configuration dataclasses and result containers for sweep runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridsweep.config.constants import ITERATION_CAP_FACTOR

__all__ = [
    "SuiteConfig",
    "SweepConfig",
    "SweepResult",
    "default_iteration_cap",
]


def default_iteration_cap(width: int, height: int) -> int:
    """Return an iteration allowance no correct run on a width x height grid can exceed."""
    return ITERATION_CAP_FACTOR * width * height + ITERATION_CAP_FACTOR


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SweepResult:
    """Outcome of one scenario run."""

    scenario_id: str
    expected: int | None
    visited_count: int
    passed: bool
    iterations: int
    stop_reason: str | None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SweepConfig:
    """Per-run knobs for the exploration engine.

    ``max_iterations=None`` derives the cap from the grid size via
    :func:`default_iteration_cap`.
    """

    max_iterations: int | None = None
    record_trace: bool = False

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")

    def resolved_max_iterations(self, width: int, height: int) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        return default_iteration_cap(width, height)


@dataclass(frozen=True)
class SuiteConfig:
    """Suite-level settings: where artifacts go and how each run is configured."""

    out_dir: Path | None = None
    sweep: SweepConfig = SweepConfig()
    show_path: bool = False

    @property
    def needs_trace(self) -> bool:
        """Traces are required for persistence and path rendering."""
        return self.sweep.record_trace or self.out_dir is not None or self.show_path
