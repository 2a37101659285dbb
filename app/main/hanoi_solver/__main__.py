"""
Console driver for the Hanoi solver.

Solves the puzzle for the requested disc count and prints every step of the
solution path, optionally pausing between steps and writing step images.

Usage:
    python -m app.main.hanoi_solver --discs 3 --delay 2
    python -m app.main.hanoi_solver --discs 4 --render app/static/output
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from app.main.hanoi_solver.config import SolverConfig, RenderConfig
from app.main.hanoi_solver.astar.solver import solve_hanoi
from app.main.hanoi_solver.performance import print_performance_report
from app.main.hanoi_solver.solver_visualizer import SolutionVisualizer


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m app.main.hanoi_solver",
        description="Solve the 3-peg Tower of Hanoi with A* and print the moves.",
    )
    parser.add_argument("--discs", type=_positive_int, default=3,
                        help="Number of discs (default: 3)")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds to pause between printed steps (default: 0)")
    parser.add_argument("--max-expansions", type=_positive_int, default=None,
                        help="Stop the search after this many expansions")
    parser.add_argument("--render", metavar="DIR", default=None,
                        help="Also write the solution filmstrip to DIR")
    parser.add_argument("--perf", action="store_true",
                        help="Print a performance timing report")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    SolverConfig.enable_performance_logging = args.perf

    render_config = RenderConfig()
    if args.delay is not None:
        render_config.step_delay_s = max(args.delay, 0.0)

    solution = solve_hanoi(args.discs, SolverConfig(max_expansions=args.max_expansions))
    visualizer = SolutionVisualizer(output_dir=args.render or ".", config=render_config)

    print(visualizer.format_summary(solution))
    if not solution.is_solved:
        print_performance_report()
        return 1

    for index, state in enumerate(solution.path):
        print(visualizer.format_state(state, index))
        if render_config.step_delay_s > 0 and index < len(solution.path) - 1:
            time.sleep(render_config.step_delay_s)

    if args.render:
        files = visualizer.visualize_solution(solution, prefix=f"{args.discs}discs")
        for filename in files:
            print(f"Wrote {filename} to {args.render}")

    print_performance_report()
    return 0


if __name__ == "__main__":
    sys.exit(main())
