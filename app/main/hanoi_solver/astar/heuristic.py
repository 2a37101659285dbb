"""
A* Heuristic and Goal Test.

Per-disc distance proxy: a disc on peg p contributes (GOAL_PEG - p), so a
disc on the goal peg costs 0 and a disc on the start peg costs 2.
"""

from __future__ import annotations
from typing import Sequence

from app.main.hanoi_solver.models import GOAL_PEG


def calculate_heuristic(pegs: Sequence[int]) -> int:
    """
    Estimate remaining moves for a PegAssignment.

    Returns:
        sum over discs of (GOAL_PEG - peg), 0 iff every disc is on GOAL_PEG

    Example:
        >>> calculate_heuristic((0, 0, 0))
        6
        >>> calculate_heuristic((2, 1, 0))
        3
    """
    return sum(GOAL_PEG - peg for peg in pegs)


def is_goal(pegs: Sequence[int]) -> bool:
    """True iff every disc is on GOAL_PEG."""
    return all(peg == GOAL_PEG for peg in pegs)
