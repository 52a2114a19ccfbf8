"""Parquet persistence helpers for the trace log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from gridsweep.io.schemas import TRACE_SCHEMA


def flush_trace_columns(
    trace_columns: dict[str, list[int | str | bool]],
    trace_log_path: Path,
    trace_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["scenario_id"]:
        return trace_writer
    trace_table = pa.Table.from_pydict(trace_columns, schema=TRACE_SCHEMA)
    if trace_writer is None:
        trace_writer = pq.ParquetWriter(trace_log_path, TRACE_SCHEMA)
    trace_writer.write_table(trace_table)
    for values in trace_columns.values():
        values.clear()
    return trace_writer


def empty_trace_columns() -> dict[str, list[int | str | bool]]:
    return {field.name: [] for field in TRACE_SCHEMA}
