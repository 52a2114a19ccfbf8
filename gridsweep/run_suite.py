"""CLI entrypoint for the embedded scenario suite.

This thin module owns only argument parsing, config-file merging, and console
reporting. The robot lives in ``gridsweep.domain`` and the runner in
``gridsweep.simulation``.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from gridsweep.config.types import SuiteConfig, SweepConfig, SweepResult
from gridsweep.domain.robot import Robot
from gridsweep.io.layouts import load_layout
from gridsweep.scenarios import SCENARIOS, Scenario
from gridsweep.simulation.engine import ResultCallback, run_suite
from gridsweep.viz.render import render_path_text

# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------


def format_result_line(index: int, result: SweepResult) -> str:
    """Format one harness line: ``OK``, ``FAIL`` with both counts, or the bare count."""
    if result.expected is None:
        return f"test [{index}]: cleaned {result.visited_count}"
    if result.passed:
        return f"test [{index}]: OK"
    return f"test [{index}]: FAIL. exp: {result.expected}, got: {result.visited_count}"


def _print_result(show_path: bool) -> ResultCallback:
    def _callback(index: int, result: SweepResult, robot: Robot) -> None:
        print(format_result_line(index, result))
        if show_path:
            for row in render_path_text(robot.grid, robot.trace):
                print(f"    {row}")

    return _callback


def _select_scenarios(layout_file: Path | None, expected: int | None) -> tuple[Scenario, ...]:
    if layout_file is None:
        if expected is not None:
            raise ValueError("--expected requires --layout-file")
        return SCENARIOS
    if expected is not None and expected < 1:
        raise ValueError("--expected must be >= 1")
    return (
        Scenario(
            scenario_id=Path(layout_file).stem,
            layout=load_layout(Path(layout_file)),
            expected=expected,
        ),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for suite execution.

    Supports ``--config path/to/config.json`` for reproducible runs.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = argparse.ArgumentParser(description="Run the wall-following robot scenario suite")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--layout-file", type=Path, default=None)
    parser.add_argument("--expected", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--show-path", action=argparse.BooleanOptionalAction, default=None)
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())

    def _get(cli_val: object, key: str) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key)

    def _get_bool(cli_val: bool | None, key: str, default: bool) -> bool:
        """CLI > file > default for boolean flags."""
        if cli_val is not None:
            return cli_val
        return bool(file_cfg.get(key, default))

    layout_file_raw = _get(args.layout_file, "layout_file")
    expected_raw = _get(args.expected, "expected")
    out_dir_raw = _get(args.out_dir, "out_dir")
    max_iterations_raw = _get(args.max_iterations, "max_iterations")
    show_path = _get_bool(args.show_path, "show_path", False)

    scenarios = _select_scenarios(
        Path(str(layout_file_raw)) if layout_file_raw is not None else None,
        int(expected_raw) if expected_raw is not None else None,  # type: ignore[call-overload]
    )
    suite_config = SuiteConfig(
        out_dir=Path(str(out_dir_raw)) if out_dir_raw is not None else None,
        sweep=SweepConfig(
            max_iterations=(
                int(max_iterations_raw)  # type: ignore[call-overload]
                if max_iterations_raw is not None
                else None
            ),
        ),
        show_path=show_path,
    )

    results = run_suite(
        scenarios,
        config=suite_config,
        on_result=_print_result(suite_config.show_path),
    )
    summary = {
        "total": len(results),
        "passed": sum(1 for r in results if r.passed),
        "failed": sum(1 for r in results if not r.passed),
        "out_dir": str(suite_config.out_dir) if suite_config.out_dir is not None else None,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
