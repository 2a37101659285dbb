"""
A* Expansion (Hanoi).

This module implements successor generation and expand_state(), which turns
a parent SearchState into its child states.

Key Concepts:
- Topmost disc of a peg = smallest disc index on it (smaller index = smaller disc)
- Legal move: topmost disc of origin onto an empty destination or onto a
  destination whose topmost disc has a strictly larger index
- No deduplication here: the search engine owns the visited-cost table
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence

from app.main.hanoi_solver.models import NUM_PEGS, PegAssignment
from app.main.hanoi_solver.config import SolverConfig
from app.main.hanoi_solver.astar.state import SearchState
from app.main.hanoi_solver.astar.heuristic import calculate_heuristic

logger = logging.getLogger(__name__)


def topmost_discs(pegs: Sequence[int]) -> list[Optional[int]]:
    """
    Find the topmost (movable) disc of each peg.

    Returns:
        List of length NUM_PEGS; entry = smallest disc index on that peg,
        None for an empty peg

    Example:
        >>> topmost_discs((1, 0, 0))
        [1, 0, None]
    """
    top: list[Optional[int]] = [None] * NUM_PEGS
    for disc, peg in enumerate(pegs):
        if top[peg] is None:
            top[peg] = disc
    return top


def generate_successors(pegs: Sequence[int]) -> list[PegAssignment]:
    """
    Generate every assignment reachable by exactly one legal move.

    Args:
        pegs: Current PegAssignment

    Returns:
        List of successor PegAssignments (empty if no disc can move)

    Algorithm:
        For each ordered (origin, destination) pair with origin != destination
        and a disc on origin: legal if destination is empty or its topmost
        disc is larger. The successor is pegs with the moved disc reassigned.

    Example:
        >>> generate_successors((0, 0))
        [(1, 0), (2, 0)]
    """
    top = topmost_discs(pegs)
    successors = []

    for origin in range(NUM_PEGS):
        disc = top[origin]
        if disc is None:
            continue  # Nothing to move from an empty peg

        for destination in range(NUM_PEGS):
            if destination == origin:
                continue

            blocker = top[destination]
            if blocker is not None and blocker < disc:
                continue  # Would place a larger disc on a smaller one

            successor = list(pegs)
            successor[disc] = destination
            successors.append(tuple(successor))

    return successors


def expand_state(
    state: SearchState,
    config: Optional[SolverConfig] = None
) -> list[SearchState]:
    """
    Expand state to generate child states.

    Args:
        state: Parent state to expand
        config: SolverConfig (validate_states enables invariant checks)

    Returns:
        One SearchState per legal move, with
        - cost_so_far = state.cost_so_far + 1
        - estimate = calculate_heuristic(child pegs)
        - parent = state

    Example:
        >>> children = expand_state(SearchState.initial(2))
        >>> [c.pegs for c in children]
        [(1, 0), (2, 0)]
    """
    validate = config is not None and config.validate_states

    children = []
    for pegs in generate_successors(state.pegs):
        child = SearchState(
            pegs=pegs,
            cost_so_far=state.cost_so_far + 1,
            estimate=calculate_heuristic(pegs),
            parent=state,
        )
        if validate:
            child.validate_invariants()
        children.append(child)

    if not children:
        logger.debug("No legal move from %s", state.pegs)

    return children
