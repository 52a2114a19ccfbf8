"""Configuration layer: constants and typed config dataclasses."""

from gridsweep.config.constants import (
    BLOCKED_CELL,
    BLOCKED_STREAK_LIMIT,
    FLUSH_THRESHOLD,
    ITERATION_CAP_FACTOR,
    NUM_HEADINGS,
    OPEN_CELL,
)
from gridsweep.config.types import (
    SuiteConfig,
    SweepConfig,
    SweepResult,
    default_iteration_cap,
)

__all__ = [
    "BLOCKED_CELL",
    "BLOCKED_STREAK_LIMIT",
    "FLUSH_THRESHOLD",
    "ITERATION_CAP_FACTOR",
    "NUM_HEADINGS",
    "OPEN_CELL",
    "SuiteConfig",
    "SweepConfig",
    "SweepResult",
    "default_iteration_cap",
]
