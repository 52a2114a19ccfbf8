from __future__ import annotations

from enum import Enum

from gridsweep.config.constants import BLOCKED_STREAK_LIMIT
from gridsweep.domain.grid import CellStatus


class StopReason(str, Enum):
    """Stop reason labels persisted in run metadata."""

    BOXED_IN = "boxed_in"
    EXPLORED = "explored"
    ITERATION_CAP = "iteration_cap"


class StallDetector:
    """Detect when the robot can no longer reach new cells.

    Tracks the consecutive blocked-probe streak and whether the previous
    move landed on an already visited cell. Any successful move clears the
    blocked streak; only a fresh cell clears the revisited flag.
    """

    def __init__(self, limit: int = BLOCKED_STREAK_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self.blocked_streak = 0
        self.just_revisited = False

    def observe(self, status: CellStatus) -> StopReason | None:
        """Record one probe outcome; return a stop reason once the robot has stalled."""
        if status is CellStatus.FRESH:
            self.just_revisited = False
            self.blocked_streak = 0
            return None
        if status is CellStatus.REVISITED:
            if self.just_revisited:
                return StopReason.EXPLORED
            self.just_revisited = True
            self.blocked_streak = 0
            return None
        self.blocked_streak += 1
        if self.blocked_streak >= self.limit:
            return StopReason.BOXED_IN
        return None
