"""Simulation layer: scenario runner and Parquet persistence."""

from gridsweep.simulation.engine import evaluate_scenario, run_suite, simulate
from gridsweep.simulation.persistence import empty_trace_columns, flush_trace_columns

__all__ = [
    "empty_trace_columns",
    "evaluate_scenario",
    "flush_trace_columns",
    "run_suite",
    "simulate",
]
