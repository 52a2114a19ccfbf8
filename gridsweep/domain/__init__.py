"""Domain layer: grid model, stall detection, robot engine, and trace records."""

from gridsweep.domain.filters import StallDetector, StopReason
from gridsweep.domain.grid import ORIGIN, CellStatus, Coordinate, GridMap, Heading
from gridsweep.domain.robot import Robot
from gridsweep.domain.snapshot import StepRecord, Trace

__all__ = [
    "CellStatus",
    "Coordinate",
    "GridMap",
    "Heading",
    "ORIGIN",
    "Robot",
    "StallDetector",
    "StepRecord",
    "StopReason",
    "Trace",
]
