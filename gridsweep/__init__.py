"""Wall-following cleaning robot on a rectangular grid."""

from gridsweep.domain import CellStatus, Coordinate, GridMap, Heading, Robot, StopReason
from gridsweep.scenarios import SCENARIOS, Scenario, get_scenario

__all__ = [
    "CellStatus",
    "Coordinate",
    "GridMap",
    "Heading",
    "Robot",
    "SCENARIOS",
    "Scenario",
    "StopReason",
    "get_scenario",
]
