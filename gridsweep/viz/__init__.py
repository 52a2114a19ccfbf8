"""Visualization layer: themes, path renderers, and CLI."""

from gridsweep.viz.cli import main
from gridsweep.viz.render import (
    build_visit_array,
    render_path_text,
    render_visit_map,
    set_active_theme,
    visit_headings,
)
from gridsweep.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_visit_array",
    "get_theme",
    "main",
    "render_path_text",
    "render_visit_map",
    "set_active_theme",
    "visit_headings",
]
