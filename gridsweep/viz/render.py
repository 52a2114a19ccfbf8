"""Path diagnostics: character and matplotlib renderings of a robot's visits."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from gridsweep.config.constants import NUM_HEADINGS
from gridsweep.domain.grid import ORIGIN, Coordinate, GridMap, Heading
from gridsweep.domain.snapshot import Trace
from gridsweep.io.paths import resolve_within_base as _resolve_within_base
from gridsweep.viz.theme import DEFAULT_THEME, Theme, get_theme

# Cell codes in the visit array: 0-3 heading index, then open and blocked.
OPEN_CODE = NUM_HEADINGS
BLOCKED_CODE = NUM_HEADINGS + 1

_active_theme: Theme = DEFAULT_THEME


def set_active_theme(name: str) -> Theme:
    """Select the theme used when renderers are called without an explicit one."""
    global _active_theme
    _active_theme = get_theme(name)
    return _active_theme


def get_active_theme() -> Theme:
    return _active_theme


def visit_headings(trace: Trace) -> dict[Coordinate, Heading]:
    """Map each visited cell to the heading active when it was last entered.

    The origin is entered with the starting heading before any step is taken.
    """
    headings: dict[Coordinate, Heading] = {ORIGIN: Heading.RIGHT}
    for record in trace:
        if record.moved:
            headings[Coordinate(record.x, record.y)] = Heading[record.heading.upper()]
    return headings


def render_path_text(grid: GridMap, trace: Trace) -> list[str]:
    """Return layout rows with visited cells replaced by ``r``/``d``/``l``/``u``."""
    headings = visit_headings(trace)
    rows: list[str] = []
    for y, row in enumerate(grid.layout):
        cells = []
        for x, char in enumerate(row):
            heading = headings.get(Coordinate(x, y))
            cells.append(heading.symbol if heading is not None else char)
        rows.append("".join(cells))
    return rows


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def build_visit_array(grid: GridMap, trace: Trace) -> np.ndarray:
    """Return (H, W) int array: heading index for visited cells, else open/blocked code."""
    visit_grid = np.full((grid.height, grid.width), BLOCKED_CODE, dtype=int)
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_traversable(Coordinate(x, y)):
                visit_grid[y, x] = OPEN_CODE
    for cell, heading in visit_headings(trace).items():
        if grid.in_bounds(cell):
            visit_grid[cell.y, cell.x] = heading.value
    return visit_grid


def _visit_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap: one color per heading, then open and blocked cells."""
    colors = list(theme.heading_colors) + [theme.open_cell_color, theme.blocked_cell_color]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([code - 0.5 for code in range(len(colors) + 1)], cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme) -> list[Patch]:
    handles = [
        Patch(facecolor=color, edgecolor="gray", label=heading.name.capitalize())
        for heading, color in zip(Heading, theme.heading_colors, strict=True)
    ]
    handles.append(Patch(facecolor=theme.open_cell_color, edgecolor="gray", label="Unvisited"))
    handles.append(Patch(facecolor=theme.blocked_cell_color, edgecolor="gray", label="Blocked"))
    return handles


def _draw_cell_grid(
    ax: plt.Axes,
    visit_grid: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    theme: Theme,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    img = ax.imshow(visit_grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = visit_grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_visit_map(
    grid: GridMap,
    trace: Trace,
    output_path: Path,
    base_dir: Path | None = None,
    title: str | None = None,
    final_position: Coordinate | None = None,
    theme: Theme | None = None,
) -> Path:
    """Render visited cells colored by entry heading and save the figure."""
    if base_dir is None:
        output_path = Path(output_path).resolve()
    else:
        output_path = _resolve_within_base(Path(output_path), Path(base_dir).resolve())
    theme = theme or _active_theme

    visit_grid = build_visit_array(grid, trace)
    cmap, norm = _visit_cmap(theme)
    fig, ax = plt.subplots(figsize=(max(3.0, grid.width * 0.6), max(3.0, grid.height * 0.6)))
    try:
        _draw_cell_grid(ax, visit_grid, cmap, norm, theme)
        for cell, heading in visit_headings(trace).items():
            ax.text(
                cell.x,
                cell.y,
                heading.symbol,
                ha="center",
                va="center",
                fontsize=9,
                color=theme.label_color,
            )
        if final_position is not None:
            ax.plot(
                final_position.x,
                final_position.y,
                marker="o",
                markersize=10,
                markerfacecolor="none",
                markeredgecolor=theme.robot_marker_color,
            )
        if title is not None:
            ax.set_title(title)
        ax.legend(
            handles=_build_legend_handles(theme),
            loc="upper left",
            bbox_to_anchor=(1.02, 1.0),
            fontsize=8,
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
