"""
Search State for A* (Hanoi).

This module defines SearchState - the core data structure of the A* search.

IMPORTANT: SearchState is defined ONLY here (Single Source of Truth).
           DO NOT re-define in models.py.

Design Decisions:
- Identity = PegAssignment only (cost, estimate, parent excluded from
  __eq__/__hash__), so the visited-cost table unifies states reached by
  different move sequences
- Frozen: states are never mutated after construction; parent links form a
  backward chain rooted at the initial state
- priority (f = g + h) is derived, never stored
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from app.main.hanoi_solver.models import (
    NUM_PEGS, PegAssignment, initial_assignment
)
from app.main.hanoi_solver.astar.heuristic import calculate_heuristic, is_goal


@dataclass(frozen=True, eq=False)
class SearchState:
    """
    A* search state for the Hanoi solver.

    Attributes:
        pegs: PegAssignment, pegs[disc] = peg of that disc
        cost_so_far: g, number of moves from the initial state
        estimate: h, heuristic estimate of remaining moves
        parent: State this one was expanded from (None for the initial state)

    Invariants (validated by validate_invariants()):
        - every peg index in range(NUM_PEGS)
        - cost_so_far >= 0 and estimate >= 0
        - parent is None or parent.cost_so_far == cost_so_far - 1

    Example:
        >>> a = SearchState((0, 1), cost_so_far=1, estimate=3)
        >>> b = SearchState((0, 1), cost_so_far=5, estimate=3)
        >>> a == b and hash(a) == hash(b)
        True
    """
    pegs: PegAssignment
    cost_so_far: int = 0
    estimate: int = 0
    parent: Optional[SearchState] = field(default=None, repr=False)

    def __post_init__(self):
        # Accept any sequence, store a tuple (hashable, immutable)
        if not isinstance(self.pegs, tuple):
            object.__setattr__(self, 'pegs', tuple(self.pegs))

    def __eq__(self, other):
        if not isinstance(other, SearchState):
            return NotImplemented
        return self.pegs == other.pegs

    def __hash__(self):
        return hash(self.pegs)

    @property
    def priority(self) -> int:
        """f = g + h (A* selection criterion)."""
        return self.cost_so_far + self.estimate

    @property
    def n_discs(self) -> int:
        return len(self.pegs)

    def is_goal(self) -> bool:
        return is_goal(self.pegs)

    def validate_invariants(self):
        """
        Validate state invariants.

        Raises:
            AssertionError: If any invariant is violated. Violations mean a
                            defect in the successor generator and are not
                            recoverable.
        """
        for disc, peg in enumerate(self.pegs):
            if not 0 <= peg < NUM_PEGS:
                raise AssertionError(
                    f"Disc {disc} on invalid peg {peg} in {self.pegs}"
                )

        if self.cost_so_far < 0:
            raise AssertionError(
                f"cost_so_far ({self.cost_so_far}) must be >= 0"
            )

        if self.estimate < 0:
            raise AssertionError(f"estimate ({self.estimate}) must be >= 0")

        if self.parent is not None:
            if self.parent.cost_so_far != self.cost_so_far - 1:
                raise AssertionError(
                    f"cost_so_far ({self.cost_so_far}) must be parent cost "
                    f"({self.parent.cost_so_far}) + 1"
                )
            if len(self.parent.pegs) != len(self.pegs):
                raise AssertionError(
                    f"Disc count changed between parent ({len(self.parent.pegs)}) "
                    f"and child ({len(self.pegs)})"
                )

    @classmethod
    def initial(cls, n_discs: int) -> SearchState:
        """
        Create the seed state: all discs on the start peg, g = 0, no parent.

        Example:
            >>> SearchState.initial(3).priority
            6
        """
        pegs = initial_assignment(n_discs)
        return cls(pegs=pegs, cost_so_far=0, estimate=calculate_heuristic(pegs))
