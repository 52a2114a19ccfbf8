"""Visualization theme presets for visit-map renderers.

Themes are frozen dataclasses that group all styling constants together so a
palette can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Visited cells, indexed by heading (right, down, left, up)
    heading_colors: tuple[str, ...] = ("#2196F3", "#FF5722", "#4CAF50", "#FFC107")
    open_cell_color: str = "#F0F0F0"
    blocked_cell_color: str = "#424242"
    grid_line_color: str = "#CCCCCC"
    label_color: str = "#000000"
    robot_marker_color: str = "#D50000"


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    heading_colors=("#1f77b4", "#d62728", "#2ca02c", "#ff7f0e"),
    open_cell_color="#FFFFFF",
    blocked_cell_color="#7f7f7f",
    grid_line_color="#E0E0E0",
    label_color="#000000",
    robot_marker_color="#000000",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
