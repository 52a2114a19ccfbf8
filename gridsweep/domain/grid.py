"""Rectangular cell grid with visitation history.

Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row; row 0 is
the top of the layout, so DOWN increases ``y``. The visited list only ever
holds in-bounds traversable cells and never shrinks.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from gridsweep.config.constants import NUM_HEADINGS, OPEN_CELL


@dataclass(frozen=True)
class Coordinate:
    """Immutable integer grid position."""

    x: int
    y: int

    def advanced(self, heading: Heading) -> Coordinate:
        """Return the neighbouring coordinate one unit along *heading*."""
        dx, dy = heading.delta
        return Coordinate(self.x + dx, self.y + dy)


ORIGIN = Coordinate(0, 0)


class Heading(Enum):
    """Forward direction of travel, in turning order."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> tuple[int, int]:
        return _HEADING_DELTAS[self.value]

    @property
    def symbol(self) -> str:
        """One-letter label used by path renderings."""
        return _HEADING_SYMBOLS[self.value]

    def turned(self) -> Heading:
        """Return the next heading in the cycle RIGHT -> DOWN -> LEFT -> UP -> RIGHT."""
        return _HEADING_ORDER[(self.value + 1) % NUM_HEADINGS]


_HEADING_ORDER: tuple[Heading, ...] = (Heading.RIGHT, Heading.DOWN, Heading.LEFT, Heading.UP)
_HEADING_DELTAS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
_HEADING_SYMBOLS: tuple[str, ...] = ("r", "d", "l", "u")


class CellStatus(str, Enum):
    """Classification of a probed coordinate."""

    BLOCKED = "blocked"
    FRESH = "fresh"
    REVISITED = "revisited"


def split_rows(text: str) -> tuple[str, ...]:
    """Split layout text into rows, dropping blank lines and ``#`` comments."""
    rows = [line.strip() for line in text.splitlines()]
    return tuple(row for row in rows if row and not row.startswith("#"))


class GridMap:
    """Static traversability layout plus the growing list of visited cells.

    Width is taken from the first row. Rows of unequal length are accepted
    unchecked; callers are expected to supply a rectangular layout.
    """

    def __init__(self, rows: Sequence[str]) -> None:
        layout = tuple(rows)
        if not layout:
            raise ValueError("layout must contain at least one row")
        if not layout[0]:
            raise ValueError("layout rows must not be empty")
        self._layout = layout
        self._width = len(layout[0])
        self._height = len(layout)
        if not self.is_traversable(ORIGIN):
            raise ValueError("origin cell (0, 0) must be traversable")
        self._visited: list[Coordinate] = [ORIGIN]
        self._visited_index: set[Coordinate] = {ORIGIN}

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GridMap:
        return cls(tuple(rows))

    @classmethod
    def from_text(cls, text: str) -> GridMap:
        """Build from newline-separated rows, ignoring blank and ``#`` comment lines."""
        return cls(split_rows(text))

    @property
    def layout(self) -> tuple[str, ...]:
        return self._layout

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        return self._width * self._height

    @property
    def visited(self) -> tuple[Coordinate, ...]:
        """Visited coordinates in insertion order."""
        return tuple(self._visited)

    def dimensions(self) -> tuple[int, int]:
        return self._width, self._height

    def in_bounds(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.x < self._width and 0 <= coordinate.y < self._height

    def is_traversable(self, coordinate: Coordinate) -> bool:
        """Return True when *coordinate* is inside the grid and holds an open cell."""
        if not self.in_bounds(coordinate):
            return False
        return self._layout[coordinate.y][coordinate.x] == OPEN_CELL

    def classify(self, coordinate: Coordinate) -> CellStatus:
        """Classify *coordinate*: bounds, then layout, then visitation history."""
        if not self.is_traversable(coordinate):
            return CellStatus.BLOCKED
        if coordinate in self._visited_index:
            return CellStatus.REVISITED
        return CellStatus.FRESH

    def mark_visited(self, coordinate: Coordinate) -> None:
        """Append *coordinate* to the visited list.

        The caller guarantees the coordinate is in bounds and traversable.
        No de-duplication is performed.
        """
        self._visited.append(coordinate)
        self._visited_index.add(coordinate)

    def visited_count(self) -> int:
        return len(self._visited)
