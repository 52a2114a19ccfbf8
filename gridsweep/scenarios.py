"""Embedded reference layouts with their expected cleaned-cell counts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Scenario:
    """A named layout and the visited count a correct robot reports for it."""

    scenario_id: str
    layout: tuple[str, ...]
    expected: int | None = None


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        scenario_id="open_field_4x7",
        layout=("....x..", "x......", ".....x.", "......."),
        expected=15,
    ),
    Scenario(
        scenario_id="pocketed_3x6",
        layout=("...x..", "....xx", "..x..."),
        expected=6,
    ),
    Scenario(
        scenario_id="scattered_4x5",
        layout=("...x.", ".x..x", "x...x", "..x.."),
        expected=9,
    ),
    Scenario(scenario_id="column_2x1", layout=(".", "."), expected=2),
    Scenario(scenario_id="walled_row_1x2", layout=(".x",), expected=1),
    Scenario(scenario_id="walled_column_2x1", layout=(".", "x"), expected=1),
)


def get_scenario(scenario_id: str) -> Scenario:
    """Look up an embedded scenario by id."""
    for scenario in SCENARIOS:
        if scenario.scenario_id == scenario_id:
            return scenario
    valid = ", ".join(s.scenario_id for s in SCENARIOS)
    raise ValueError(f"Unknown scenario {scenario_id!r}; available: {valid}")
