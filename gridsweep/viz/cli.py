from __future__ import annotations

import argparse
from pathlib import Path

import gridsweep.viz.render as viz_render
from gridsweep.config.types import SweepConfig
from gridsweep.domain.robot import Robot
from gridsweep.io.layouts import load_layout
from gridsweep.scenarios import get_scenario
from gridsweep.simulation.engine import simulate
from gridsweep.viz.render import render_path_text, render_visit_map


def _add_layout_source(p: argparse.ArgumentParser) -> None:
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--scenario", type=str, default=None, help="Embedded scenario id")
    source.add_argument("--layout-file", type=Path, default=None)
    p.add_argument("--max-iterations", type=int, default=None)


def _build_text_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("text", help="Print the visited path as r/d/l/u characters")
    p.set_defaults(func=_handle_text)
    _add_layout_source(p)


def _build_image_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("image", help="Render the visit map to an image file")
    p.set_defaults(func=_handle_image)
    _add_layout_source(p)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _run_robot(args: argparse.Namespace) -> tuple[str, Robot]:
    if args.scenario is not None:
        scenario = get_scenario(args.scenario)
        label, layout = scenario.scenario_id, scenario.layout
    else:
        label, layout = args.layout_file.stem, load_layout(args.layout_file)
    config = SweepConfig(max_iterations=args.max_iterations, record_trace=True)
    return label, simulate(layout, config)


def _handle_text(args: argparse.Namespace) -> None:
    _, robot = _run_robot(args)
    for row in render_path_text(robot.grid, robot.trace):
        print(row)
    print(f"cleaned: {robot.grid.visited_count()}")


def _handle_image(args: argparse.Namespace) -> None:
    label, robot = _run_robot(args)
    render_visit_map(
        grid=robot.grid,
        trace=robot.trace,
        output_path=args.output,
        base_dir=args.base_dir,
        title=f"{label}: {robot.grid.visited_count()} cells",
        final_position=robot.position,
    )


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Path diagnostics for grid sweeps")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_text_parser(sub)
    _build_image_parser(sub)
    args = parser.parse_args()

    viz_render.set_active_theme(args.theme)

    args.func(args)


if __name__ == "__main__":
    main()
