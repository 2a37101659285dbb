"""
Performance timing for solver runs.

`timed` wraps solve_hanoi and records wall time together with the run's
search counters (states expanded / generated), `time_block` times rendering.
The report lists every run with its counters and a throughput figure.
Everything is a no-op unless SolverConfig.enable_performance_logging is set.
"""

import time
import functools
from typing import Optional, List, Dict, Any
from contextlib import contextmanager
import threading

from app.main.hanoi_solver.config import SolverConfig


class PerformanceTimer:
    """Per-thread timer for solver runs and the blocks nested inside them."""

    def __init__(self):
        self._local = threading.local()

    def _get_stack(self) -> List[Dict[str, Any]]:
        if not hasattr(self._local, 'stack'):
            self._local.stack = []
        return self._local.stack

    def get_results(self) -> List[Dict[str, Any]]:
        """Top-level timing entries recorded on the current thread."""
        if not hasattr(self._local, 'results'):
            self._local.results = []
        return self._local.results

    def clear_results(self):
        self._local.results = []

    @contextmanager
    def time_block(self, name: str):
        """Time a code block.

        Yields the timing entry (None when timing is off) so the caller can
        attach search counters to it via record_search().
        """
        if not SolverConfig.enable_performance_logging:
            yield None
            return

        stack = self._get_stack()
        entry = {
            'name': name,
            'start': time.perf_counter(),
            'depth': len(stack),
            'search': None,
            'children': []
        }
        stack.append(entry)

        try:
            yield entry
        finally:
            stack.pop()
            entry['elapsed'] = time.perf_counter() - entry['start']

            if stack:
                stack[-1]['children'].append(entry)
            else:
                self.get_results().append(entry)

    @staticmethod
    def record_search(entry: Optional[Dict[str, Any]], result: Any):
        """Copy expansion counters from a HanoiSolution onto a timing entry."""
        stats = getattr(result, 'stats', None)
        if entry is None or stats is None:
            return
        entry['search'] = {
            'n_discs': result.n_discs,
            'status': result.status.value,
            'expanded': stats.nodes_expanded,
            'generated': stats.nodes_generated,
            'moves': result.move_count,
        }

    def format_results(self) -> str:
        """Indented report; solver runs carry their search counters."""
        results = self.get_results()
        if not results:
            return ""

        lines = ["=" * 80, "PERFORMANCE TIMING REPORT", "=" * 80]
        total_time = sum(r['elapsed'] for r in results)
        total_expanded = 0
        runs = 0

        def add_entry(entry: Dict[str, Any]):
            nonlocal total_expanded, runs
            indent = "  " * entry['depth']
            elapsed = entry['elapsed']
            line = f"{indent}{entry['name']}: {elapsed:.3f}s"

            search = entry['search']
            if search is not None:
                runs += 1
                total_expanded += search['expanded']
                rate = search['expanded'] / elapsed if elapsed > 0 else 0.0
                line += (f" [discs={search['n_discs']} {search['status']}"
                         f" moves={search['moves']}"
                         f" expanded={search['expanded']}"
                         f" generated={search['generated']}"
                         f" {rate:.0f} exp/s]")
            lines.append(line)

            for child in entry['children']:
                add_entry(child)

        for result in results:
            add_entry(result)

        lines.append("-" * 80)
        lines.append(f"TOTAL: {total_time:.3f}s, {runs} solver run(s), "
                     f"{total_expanded} states expanded")
        lines.append("=" * 80)
        return "\n".join(lines)

    def print_results(self):
        """Print the report and clear it."""
        if not SolverConfig.enable_performance_logging:
            return

        report = self.format_results()
        if report:
            print("\n" + report + "\n")
        self.clear_results()


_timer = PerformanceTimer()


def timed(func):
    """Decorator timing a solver entry point and recording its search counters."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not SolverConfig.enable_performance_logging:
            return func(*args, **kwargs)

        with _timer.time_block(func.__name__) as entry:
            result = func(*args, **kwargs)
            _timer.record_search(entry, result)
            return result

    return wrapper


def print_performance_report():
    _timer.print_results()


@contextmanager
def time_block(name: str):
    """Time an arbitrary block, e.g. rendering the filmstrip."""
    with _timer.time_block(name) as entry:
        yield entry
