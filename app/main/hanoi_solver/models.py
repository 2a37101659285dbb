"""
Hanoi Solver Data Models.

This module defines the data structures shared by the solver and its callers:
- PegAssignment: disc -> peg tuple (identity of a puzzle configuration)
- Move: single disc move between two adjacent configurations
- SearchStatus: outcome of one A* run
- SearchStatistics: counters collected during one A* run
- HanoiSolution: final result (path + status + statistics)

Discs are numbered 0..N-1, smallest to largest. Pegs are numbered 0..2.

NOTE: SearchState is NOT defined here. It is defined in astar/state.py
      (it depends on the heuristic, which depends on these constants).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Sequence, Tuple

if TYPE_CHECKING:
    from app.main.hanoi_solver.astar.state import SearchState


NUM_PEGS = 3
START_PEG = 0
GOAL_PEG = 2

# PegAssignment[disc] = peg. Tuples keep assignments immutable and hashable.
PegAssignment = Tuple[int, ...]


def validate_disc_count(n_discs: Any) -> int:
    """
    Validate a disc count before any search state is built.

    Args:
        n_discs: Requested number of discs

    Returns:
        n_discs unchanged (int)

    Raises:
        ValueError: If n_discs is not an integer (bool rejected) or < 1
    """
    if isinstance(n_discs, bool) or not isinstance(n_discs, int):
        raise ValueError(
            f"Number of discs must be an integer, got {type(n_discs).__name__}"
        )
    if n_discs < 1:
        raise ValueError(f"Number of discs must be >= 1, got {n_discs}")
    return n_discs


def initial_assignment(n_discs: int) -> PegAssignment:
    """All discs on the start peg."""
    return (START_PEG,) * n_discs


def goal_assignment(n_discs: int) -> PegAssignment:
    """All discs on the goal peg."""
    return (GOAL_PEG,) * n_discs


def peg_stacks(pegs: Sequence[int]) -> list[list[int]]:
    """
    Group discs by peg.

    Args:
        pegs: PegAssignment

    Returns:
        One list per peg, discs ordered bottom to top (largest index first)

    Example:
        >>> peg_stacks((0, 1, 0))
        [[2, 0], [1], []]
    """
    stacks: list[list[int]] = [[] for _ in range(NUM_PEGS)]
    for disc in range(len(pegs) - 1, -1, -1):
        stacks[pegs[disc]].append(disc)
    return stacks


@dataclass(frozen=True)
class Move:
    """Single disc move."""
    disc: int
    from_peg: int
    to_peg: int

    def __str__(self):
        return f"disc {self.disc}: peg {self.from_peg} -> peg {self.to_peg}"

    def to_dict(self) -> dict[str, int]:
        return {'disc': self.disc, 'from_peg': self.from_peg, 'to_peg': self.to_peg}


def move_between(before: Sequence[int], after: Sequence[int]) -> Move:
    """
    Derive the move that turns one assignment into the next.

    Raises:
        ValueError: If the assignments differ in length or in other than
                    exactly one disc
    """
    if len(before) != len(after):
        raise ValueError(
            f"Assignments differ in length ({len(before)} != {len(after)})"
        )
    changed = [disc for disc in range(len(before)) if before[disc] != after[disc]]
    if len(changed) != 1:
        raise ValueError(
            f"Expected exactly one moved disc between {tuple(before)} and "
            f"{tuple(after)}, found {len(changed)}"
        )
    disc = changed[0]
    return Move(disc=disc, from_peg=before[disc], to_peg=after[disc])


def moves_from_path(path: Sequence[SearchState]) -> list[Move]:
    """Moves between consecutive states of a path (len(path) - 1 entries)."""
    return [move_between(a.pegs, b.pegs) for a, b in zip(path, path[1:])]


class SearchStatus(Enum):
    """A* run state. RUNNING is only observable while the loop executes."""
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"  # Open set emptied without reaching the goal
    LIMIT_REACHED = "limit_reached"  # SolverConfig.max_expansions hit


@dataclass
class SearchStatistics:
    """Counters for one A* run."""
    nodes_expanded: int = 0  # States popped and expanded (goal pop excluded)
    nodes_generated: int = 0  # Successor states built by expansion
    nodes_inserted: int = 0  # States pushed into the open set (seed included)
    duplicate_states: int = 0  # Successors rejected by the visited-cost table
    max_open_size: int = 0
    computation_time: float = 0.0  # Seconds

    def to_dict(self) -> dict[str, Any]:
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'nodes_inserted': self.nodes_inserted,
            'duplicate_states': self.duplicate_states,
            'max_open_size': self.max_open_size,
            'computation_time': self.computation_time,
        }


@dataclass
class HanoiSolution:
    """
    Result of one solver run.

    Attributes:
        n_discs: Number of discs searched
        path: SearchStates from initial to goal (empty if no solution)
        status: SearchStatus of the run
        stats: SearchStatistics of the run

    Notes:
        - No solution is a valid outcome (status EXHAUSTED or LIMIT_REACHED,
          empty path), not an exception
    """
    n_discs: int
    path: list[SearchState] = field(default_factory=list)
    status: SearchStatus = SearchStatus.RUNNING
    stats: SearchStatistics = field(default_factory=SearchStatistics)

    @property
    def is_solved(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED and len(self.path) > 0

    @property
    def move_count(self) -> int:
        return max(len(self.path) - 1, 0)

    @property
    def moves(self) -> list[Move]:
        return moves_from_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (used by the HTTP routes)."""
        steps = []
        for index, state in enumerate(self.path):
            steps.append({
                'index': index,
                'pegs': list(state.pegs),
                'stacks': peg_stacks(state.pegs),
                'g': state.cost_so_far,
                'h': state.estimate,
                'f': state.priority,
            })
        return {
            'n_discs': self.n_discs,
            'status': self.status.value,
            'solved': self.is_solved,
            'move_count': self.move_count,
            'moves': [move.to_dict() for move in self.moves],
            'steps': steps,
            'stats': self.stats.to_dict(),
        }
