"""Path construction helpers for sweep output directories.

Centralises the directory/file naming conventions used by the suite runner
and the renderers.
"""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def scenarios_dir(out_dir: Path) -> Path:
    """Return path to the per-scenario JSON payload directory."""
    return out_dir / "scenarios"


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trace_log_path(out_dir: Path) -> Path:
    """Return path to the trace log Parquet file."""
    return logs_dir(out_dir) / "trace_log.parquet"


def suite_results_path(out_dir: Path) -> Path:
    """Return path to the suite results Parquet file."""
    return logs_dir(out_dir) / "suite_results.parquet"
