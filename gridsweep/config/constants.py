"""Centralized domain constants for grid sweeps.

All magic numbers and marker characters that appear across multiple modules
are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

OPEN_CELL = "."
"""Layout character marking a traversable cell."""

BLOCKED_CELL = "x"
"""Conventional layout character marking an occupied cell (any non-open char blocks)."""

NUM_HEADINGS = 4
"""Number of headings in the turning cycle."""

BLOCKED_STREAK_LIMIT = NUM_HEADINGS
"""Consecutive blocked probes after which the robot is boxed in."""

ITERATION_CAP_FACTOR = 8
"""Per-cell iteration allowance used to derive the default iteration cap."""

FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""
