import math
import os
from typing import List, Optional

import cv2
import numpy as np

from app.main.hanoi_solver.config import RenderConfig
from app.main.hanoi_solver.models import NUM_PEGS, HanoiSolution, peg_stacks
from app.main.hanoi_solver.astar.state import SearchState
from app.main.hanoi_solver.performance import time_block

SEPARATOR = "-" * 34
BASE_THICKNESS_PX = 6


class SolutionVisualizer:
    """Renders Hanoi solution paths as text and as peg images."""

    def __init__(self, output_dir: str = 'app/static/output', config: RenderConfig = None):
        self.output_dir = output_dir
        self.config = config or RenderConfig()

    # ---------- Text ----------

    def format_state(self, state: SearchState, index: Optional[int] = None) -> str:
        """Peg contents of one step, discs listed bottom to top."""
        lines = []
        if index is not None:
            lines.append(
                f"Move #{index} (g={state.cost_so_far}, h={state.estimate}, f={state.priority})"
            )
        for peg, discs in enumerate(peg_stacks(state.pegs)):
            lines.append(f"Peg {peg}: {discs}")
        lines.append(SEPARATOR)
        return "\n".join(lines)

    def format_summary(self, solution: HanoiSolution) -> str:
        if not solution.is_solved:
            return "No solution found"
        return f"Solution found in {solution.move_count} moves."

    def format_solution(self, solution: HanoiSolution) -> str:
        """Summary line followed by every step."""
        parts = [self.format_summary(solution)]
        for index, state in enumerate(solution.path):
            parts.append(self.format_state(state, index))
        return "\n".join(parts)

    # ---------- Images ----------

    def visualize_solution(self, solution: HanoiSolution, prefix: str,
                           save_steps: bool = False) -> List[str]:
        """Write solution images to output_dir and return their file names."""
        output_files = []
        if not solution.path:
            return output_files

        os.makedirs(self.output_dir, exist_ok=True)

        with time_block("Render filmstrip"):
            filmstrip = self.render_filmstrip(solution)
        filename = f"hanoi_{prefix}_filmstrip.png"
        cv2.imwrite(os.path.join(self.output_dir, filename), filmstrip)
        output_files.append(filename)

        if save_steps:
            for index, state in enumerate(solution.path):
                img = self.render_state(state, index)
                filename = f"hanoi_{prefix}_step{index:03d}.png"
                cv2.imwrite(os.path.join(self.output_dir, filename), img)
                output_files.append(filename)

        return output_files

    def render_state(self, state: SearchState, index: Optional[int] = None) -> np.ndarray:
        """Draw the three pegs of one state (BGR image)."""
        cfg = self.config
        n = state.n_discs
        spacing = self._peg_spacing(n)

        peg_height = n * cfg.disc_height_px + cfg.peg_extra_height_px
        img_width = 2 * cfg.margin_px + NUM_PEGS * spacing
        img_height = cfg.header_height_px + peg_height + BASE_THICKNESS_PX + 2 * cfg.margin_px

        img = np.full((img_height, img_width, 3), cfg.background_color, dtype=np.uint8)

        base_y = img_height - cfg.margin_px - BASE_THICKNESS_PX
        cv2.rectangle(img, (cfg.margin_px, base_y),
                      (img_width - cfg.margin_px, base_y + BASE_THICKNESS_PX),
                      cfg.base_color, -1)

        for peg, discs in enumerate(peg_stacks(state.pegs)):
            cx = cfg.margin_px + peg * spacing + spacing // 2

            cv2.rectangle(img, (cx - cfg.peg_width_px // 2, base_y - peg_height),
                          (cx + cfg.peg_width_px // 2, base_y), cfg.peg_color, -1)

            # discs are bottom to top
            for level, disc in enumerate(discs):
                half_width = cfg.disc_width(disc) // 2
                y_bottom = base_y - level * cfg.disc_height_px
                y_top = y_bottom - cfg.disc_height_px + 1
                color = cfg.disc_colors[disc % len(cfg.disc_colors)]
                cv2.rectangle(img, (cx - half_width, y_top), (cx + half_width, y_bottom - 1),
                              color, -1)
                cv2.rectangle(img, (cx - half_width, y_top), (cx + half_width, y_bottom - 1),
                              (40, 40, 40), 1)

            cv2.putText(img, str(peg), (cx - 4, img_height - 4),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, cfg.text_color, 1, cv2.LINE_AA)

        if cfg.label_steps:
            label = f"g={state.cost_so_far} h={state.estimate} f={state.priority}"
            if index is not None:
                label = f"#{index} " + label
            cv2.putText(img, label, (cfg.margin_px, cfg.header_height_px - 8),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, cfg.text_color, 1, cv2.LINE_AA)

        return img

    def render_filmstrip(self, solution: HanoiSolution) -> Optional[np.ndarray]:
        """All steps of the path in a grid, max_columns per row."""
        if not solution.path:
            return None

        steps = [self.render_state(state, index) for index, state in enumerate(solution.path)]

        cols = min(self.config.max_columns, len(steps))
        rows = math.ceil(len(steps) / cols)

        blank = np.full_like(steps[0], self.config.background_color)
        steps.extend([blank] * (rows * cols - len(steps)))

        grid_rows = [np.hstack(steps[r * cols:(r + 1) * cols]) for r in range(rows)]
        return np.vstack(grid_rows)

    def _peg_spacing(self, n_discs: int) -> int:
        """Peg distance, widened so the largest disc never overlaps a neighbour."""
        widest = self.config.disc_width(n_discs - 1)
        return max(self.config.peg_spacing_px, widest + 10)
