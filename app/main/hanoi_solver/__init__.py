"""
Hanoi Solver: A* search for the 3-peg Tower of Hanoi.

Main API:
    solve_hanoi(n_discs, config) -> HanoiSolution
    a_star_search(n_discs, config) -> list[SearchState]  (empty = no solution)

Rendering of a solution (text / OpenCV images) lives in solver_visualizer.py,
the console driver in __main__.py.
"""

from .config import SolverConfig, RenderConfig
from .models import (
    NUM_PEGS,
    START_PEG,
    GOAL_PEG,
    Move,
    SearchStatus,
    SearchStatistics,
    HanoiSolution,
    peg_stacks,
    moves_from_path,
)
from .astar import SearchState, solve_hanoi, a_star_search


__all__ = [
    # Main API
    "solve_hanoi",
    "a_star_search",
    # Config
    "SolverConfig",
    "RenderConfig",
    # Models
    "NUM_PEGS",
    "START_PEG",
    "GOAL_PEG",
    "Move",
    "SearchStatus",
    "SearchStatistics",
    "HanoiSolution",
    "SearchState",
    "peg_stacks",
    "moves_from_path",
]
