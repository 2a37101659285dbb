"""
A* Main Loop (Hanoi).

This module implements solve_hanoi() / a_star_search() - the A* search from
all discs on peg 0 to all discs on peg 2.

Key Concepts:
- Open set: binary heap of (priority, sequence, state); sequence keeps heap
  entries comparable without ordering states (tie order is unspecified)
- Visited-cost table: best cost at which each PegAssignment was inserted
- Re-insertion only for a strictly lower cost. The check is defensive, not
  dead code: the heuristic is inconsistent (h(0,2,2) = 2 while one move
  remains), so a state may in principle be reached again more cheaply
- Path reconstruction via parent links
- NO_SOLUTION = empty path with status EXHAUSTED (not an exception)
"""

from __future__ import annotations
import heapq
import itertools
import logging
import time
from typing import Optional

from app.main.hanoi_solver.config import SolverConfig
from app.main.hanoi_solver.models import (
    HanoiSolution, SearchStatistics, SearchStatus, validate_disc_count
)
from app.main.hanoi_solver.astar.state import SearchState
from app.main.hanoi_solver.astar.expansion import expand_state
from app.main.hanoi_solver.performance import timed

logger = logging.getLogger(__name__)


@timed
def solve_hanoi(n_discs: int, config: Optional[SolverConfig] = None) -> HanoiSolution:
    """
    A* search for the n_discs Tower of Hanoi.

    Args:
        n_discs: Number of discs (>= 1)
        config: SolverConfig (defaults: no expansion limit, no invariant checks)

    Returns:
        HanoiSolution with
        - path: states from initial to goal (empty if no solution)
        - status: SUCCEEDED, EXHAUSTED or LIMIT_REACHED
        - stats: SearchStatistics of the run

    Raises:
        ValueError: If n_discs is not a positive integer

    Algorithm:
        1. Seed open set and visited-cost table with the initial state (g=0)
        2. Pop the state with minimum f = g + h
        3. Goal → reconstruct path, SUCCEEDED
        4. Else expand; insert each child whose pegs are unseen or seen at a
           strictly higher cost
        5. Open set empty → EXHAUSTED

    Example:
        >>> solution = solve_hanoi(3)
        >>> solution.move_count
        7
    """
    validate_disc_count(n_discs)
    if config is None:
        config = SolverConfig()

    stats = SearchStatistics()
    start_time = time.perf_counter()

    initial = SearchState.initial(n_discs)
    counter = itertools.count()
    open_set = [(initial.priority, next(counter), initial)]
    visited = {initial: initial.cost_so_far}
    stats.nodes_inserted = 1
    stats.max_open_size = 1

    status = SearchStatus.RUNNING
    path: list[SearchState] = []

    while open_set:
        _, _, current = heapq.heappop(open_set)

        if current.is_goal():
            status = SearchStatus.SUCCEEDED
            path = reconstruct_path(current)
            break

        if config.max_expansions is not None and stats.nodes_expanded >= config.max_expansions:
            status = SearchStatus.LIMIT_REACHED
            logger.warning(
                "Expansion limit %d reached for %d discs, stopping search",
                config.max_expansions, n_discs
            )
            break

        stats.nodes_expanded += 1
        children = expand_state(current, config)
        stats.nodes_generated += len(children)

        for child in children:
            best_cost = visited.get(child)
            if best_cost is None or child.cost_so_far < best_cost:
                visited[child] = child.cost_so_far
                heapq.heappush(open_set, (child.priority, next(counter), child))
                stats.nodes_inserted += 1
            else:
                stats.duplicate_states += 1

        stats.max_open_size = max(stats.max_open_size, len(open_set))

    if status is SearchStatus.RUNNING:
        status = SearchStatus.EXHAUSTED
        logger.info("Open set exhausted for %d discs, no solution", n_discs)

    stats.computation_time = time.perf_counter() - start_time

    if status is SearchStatus.SUCCEEDED:
        logger.info(
            "Solved %d discs in %d moves (%d expanded, %d generated, %.3fs)",
            n_discs, len(path) - 1, stats.nodes_expanded,
            stats.nodes_generated, stats.computation_time
        )
    logger.debug("Search statistics: %s", stats.to_dict())

    return HanoiSolution(n_discs=n_discs, path=path, status=status, stats=stats)


def a_star_search(n_discs: int, config: Optional[SolverConfig] = None) -> list[SearchState]:
    """
    Core entry point: solution path for n_discs, or [] if none was found.

    Raises:
        ValueError: If n_discs is not a positive integer
    """
    return solve_hanoi(n_discs, config).path


def reconstruct_path(state: SearchState) -> list[SearchState]:
    """
    Follow parent links from state back to the initial state.

    Returns:
        States in forward order (initial first, state last)
    """
    path = []
    current: Optional[SearchState] = state
    while current is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return path
