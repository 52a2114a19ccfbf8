"""I/O layer: layout files, Arrow schemas, and output path conventions."""

from gridsweep.io.layouts import load_grid, load_layout, parse_layout
from gridsweep.io.paths import (
    logs_dir,
    resolve_within_base,
    scenarios_dir,
    suite_results_path,
    trace_log_path,
)
from gridsweep.io.schemas import (
    SCENARIO_PAYLOAD_SCHEMA_VERSION,
    SUITE_RESULTS_SCHEMA,
    TRACE_SCHEMA,
)

__all__ = [
    "SCENARIO_PAYLOAD_SCHEMA_VERSION",
    "SUITE_RESULTS_SCHEMA",
    "TRACE_SCHEMA",
    "load_grid",
    "load_layout",
    "logs_dir",
    "parse_layout",
    "resolve_within_base",
    "scenarios_dir",
    "suite_results_path",
    "trace_log_path",
]
