"""Layout file loading."""

from __future__ import annotations

from pathlib import Path

from gridsweep.domain.grid import GridMap, split_rows


def parse_layout(text: str) -> tuple[str, ...]:
    """Parse layout text into rows, rejecting text with no grid rows."""
    layout = split_rows(text)
    if not layout:
        raise ValueError("layout text contains no rows")
    return layout


def load_layout(path: Path) -> tuple[str, ...]:
    """Read a layout file with one grid row per line."""
    return parse_layout(Path(path).read_text())


def load_grid(path: Path) -> GridMap:
    return GridMap(load_layout(path))
