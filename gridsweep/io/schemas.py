"""Parquet schema definitions for sweep artifacts.

The trace log and suite results schemas are centralised here so that the
runner, the renderers, and the tests work against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

SCENARIO_PAYLOAD_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Run artifacts
# ---------------------------------------------------------------------------

TRACE_SCHEMA = pa.schema(
    [
        ("scenario_id", pa.string()),
        ("iteration", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("heading", pa.string()),
        ("status", pa.string()),
        ("moved", pa.bool_()),
        ("visited_count", pa.int64()),
    ]
)

SUITE_RESULTS_SCHEMA = pa.schema(
    [
        ("scenario_id", pa.string()),
        ("grid_width", pa.int64()),
        ("grid_height", pa.int64()),
        ("expected", pa.int64()),
        ("visited_count", pa.int64()),
        ("passed", pa.bool_()),
        ("iterations", pa.int64()),
        ("stop_reason", pa.string()),
    ]
)
