"""
Hanoi Solver Configuration Models.

This module defines the configuration structures for the Hanoi solver:
- SolverConfig: A* search parameters (safety limit, invariant checks)
- RenderConfig: Geometry and colours for step images and console pacing

All image measurements in pixels. Colours are BGR tuples (OpenCV order).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class SolverConfig:
    """
    A* search configuration.

    Attributes:
        max_expansions: Maximum number of expanded states (safety limit).
            None disables the limit. The search space has 3^N states, so
            any limit >= 3^N never changes the result.
        validate_states: Run SearchState.validate_invariants() on every
            child produced by expansion (development aid, slower).

    Notes:
        - Performance logging is a global switch, see
          SolverConfig.enable_performance_logging below
    """
    max_expansions: Optional[int] = None
    validate_states: bool = False

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError(
                f"max_expansions must be >= 1 or None, got {self.max_expansions}"
            )


@dataclass
class RenderConfig:
    """Configuration for step rendering (images + console pacing)."""
    # Layout
    margin_px: int = 20  # Margin around the peg area
    peg_spacing_px: int = 160  # Distance between peg centres
    peg_width_px: int = 6
    peg_extra_height_px: int = 20  # Peg height above the tallest possible stack
    header_height_px: int = 30  # Space for the step label

    # Discs
    disc_height_px: int = 14
    min_disc_width_px: int = 30  # Width of disc 0
    disc_width_step_px: int = 12  # Added width per disc index

    # Colours (BGR)
    background_color: Tuple[int, int, int] = (255, 255, 255)
    peg_color: Tuple[int, int, int] = (60, 60, 60)
    base_color: Tuple[int, int, int] = (90, 90, 90)
    text_color: Tuple[int, int, int] = (0, 0, 0)
    disc_colors: Tuple[Tuple[int, int, int], ...] = (
        (60, 76, 231), (34, 126, 230), (15, 196, 241), (113, 204, 46),
        (219, 152, 52), (182, 89, 155), (156, 188, 26), (80, 127, 255),
    )

    # Output
    label_steps: bool = True  # Draw "#i g= h= f=" header on each step image
    max_columns: int = 4  # Steps per row in the filmstrip

    # Console pacing (seconds between printed steps, 0 = no pause)
    step_delay_s: float = 0.0

    def disc_width(self, disc: int) -> int:
        """Width in pixels of the given disc."""
        return self.min_disc_width_px + disc * self.disc_width_step_px


# Performance monitoring global flag (outside dataclass to make it a true class variable)
SolverConfig.enable_performance_logging = False
