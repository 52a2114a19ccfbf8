from __future__ import annotations

from pathlib import Path

import pytest

from gridsweep.io.layouts import load_grid, load_layout, parse_layout
from gridsweep.io.paths import resolve_within_base, suite_results_path, trace_log_path


def test_parse_layout_strips_whitespace_and_comments() -> None:
    text = "# pocketed\n  ...x..\n....xx\n\n..x...\n"
    assert parse_layout(text) == ("...x..", "....xx", "..x...")


def test_parse_layout_rejects_empty_text() -> None:
    with pytest.raises(ValueError, match="no rows"):
        parse_layout("# nothing here\n\n")


def test_load_layout_reads_file(tmp_path: Path) -> None:
    layout_path = tmp_path / "room.txt"
    layout_path.write_text(".x\n..\n")
    assert load_layout(layout_path) == (".x", "..")


def test_load_grid_builds_map(tmp_path: Path) -> None:
    layout_path = tmp_path / "room.txt"
    layout_path.write_text("...\n.x.\n")
    grid = load_grid(layout_path)
    assert grid.dimensions() == (3, 2)


def test_output_paths_live_under_logs(tmp_path: Path) -> None:
    assert trace_log_path(tmp_path) == tmp_path / "logs" / "trace_log.parquet"
    assert suite_results_path(tmp_path) == tmp_path / "logs" / "suite_results.parquet"


def test_resolve_within_base_rejects_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes base_dir"):
        resolve_within_base(Path("../outside.png"), tmp_path)


def test_resolve_within_base_accepts_relative(tmp_path: Path) -> None:
    assert resolve_within_base(Path("out/map.png"), tmp_path) == (
        tmp_path.resolve() / "out" / "map.png"
    )
