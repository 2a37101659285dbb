"""
A* Search Module.

State-space search for the 3-peg Tower of Hanoi.

Public exports:
- SearchState: Core state representation
- solve_hanoi / a_star_search: Main solver algorithm
- expand_state / generate_successors: State expansion logic
- calculate_heuristic / is_goal: Heuristic and goal test
"""

from app.main.hanoi_solver.astar.state import SearchState
from app.main.hanoi_solver.astar.heuristic import calculate_heuristic, is_goal
from app.main.hanoi_solver.astar.expansion import (
    topmost_discs, generate_successors, expand_state
)
from app.main.hanoi_solver.astar.solver import (
    solve_hanoi, a_star_search, reconstruct_path
)

__all__ = [
    'SearchState',
    'calculate_heuristic',
    'is_goal',
    'topmost_discs',
    'generate_successors',
    'expand_state',
    'solve_hanoi',
    'a_star_search',
    'reconstruct_path',
]
