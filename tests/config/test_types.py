"""Tests for gridsweep.config.types validation and derived values."""

from __future__ import annotations

from pathlib import Path

import pytest

from gridsweep.config.constants import ITERATION_CAP_FACTOR
from gridsweep.config.types import SuiteConfig, SweepConfig, default_iteration_cap


class TestSweepConfig:
    def test_defaults(self) -> None:
        config = SweepConfig()
        assert config.max_iterations is None
        assert config.record_trace is False

    @pytest.mark.parametrize("value", [0, -5])
    def test_rejects_non_positive_max_iterations(self, value: int) -> None:
        with pytest.raises(ValueError, match="max_iterations"):
            SweepConfig(max_iterations=value)

    def test_resolved_max_iterations_prefers_explicit(self) -> None:
        assert SweepConfig(max_iterations=12).resolved_max_iterations(7, 4) == 12

    def test_resolved_max_iterations_derives_from_grid(self) -> None:
        assert SweepConfig().resolved_max_iterations(7, 4) == default_iteration_cap(7, 4)


def test_default_iteration_cap_scales_with_area() -> None:
    assert default_iteration_cap(1, 1) == 2 * ITERATION_CAP_FACTOR
    assert default_iteration_cap(7, 4) == ITERATION_CAP_FACTOR * 28 + ITERATION_CAP_FACTOR


class TestSuiteConfig:
    def test_no_trace_needed_by_default(self) -> None:
        assert SuiteConfig().needs_trace is False

    def test_out_dir_needs_trace(self, tmp_path: Path) -> None:
        assert SuiteConfig(out_dir=tmp_path).needs_trace is True

    def test_show_path_needs_trace(self) -> None:
        assert SuiteConfig(show_path=True).needs_trace is True

    def test_record_trace_needs_trace(self) -> None:
        assert SuiteConfig(sweep=SweepConfig(record_trace=True)).needs_trace is True
