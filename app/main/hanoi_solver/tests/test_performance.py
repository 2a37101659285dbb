"""
Tests for performance.py (timing is a no-op unless enabled).
"""

import pytest

from app.main.hanoi_solver import performance
from app.main.hanoi_solver.config import SolverConfig
from app.main.hanoi_solver.astar.solver import solve_hanoi
from app.main.hanoi_solver.performance import PerformanceTimer, timed, time_block


@pytest.fixture
def perf_enabled():
    SolverConfig.enable_performance_logging = True
    yield
    SolverConfig.enable_performance_logging = False


def test_disabled_records_nothing():
    timer = PerformanceTimer()
    with timer.time_block("outer"):
        pass
    assert timer.get_results() == []


def test_nested_blocks(perf_enabled):
    timer = PerformanceTimer()
    with timer.time_block("outer"):
        with timer.time_block("inner"):
            pass

    results = timer.get_results()
    assert [r['name'] for r in results] == ["outer"]
    assert [c['name'] for c in results[0]['children']] == ["inner"]
    assert results[0]['elapsed'] >= results[0]['children'][0]['elapsed']

    report = timer.format_results()
    assert "outer:" in report
    assert "  inner:" in report
    assert "TOTAL:" in report


def test_print_results_clears(perf_enabled, capsys):
    timer = PerformanceTimer()
    with timer.time_block("step"):
        pass

    timer.print_results()

    assert "step:" in capsys.readouterr().out
    assert timer.get_results() == []


def test_timed_preserves_result():
    @timed
    def add(a, b):
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"


def test_timed_records_search_counters(perf_enabled):
    """Solver runs carry expansion counters into the report"""
    timer = performance._timer
    timer.clear_results()

    solve_hanoi(1)

    results = timer.get_results()
    assert [r['name'] for r in results] == ["solve_hanoi"]
    assert results[0]['search'] == {
        'n_discs': 1,
        'status': 'succeeded',
        'expanded': 1,
        'generated': 2,
        'moves': 1,
    }

    report = timer.format_results()
    assert "solve_hanoi:" in report
    assert "[discs=1 succeeded moves=1 expanded=1 generated=2" in report
    assert "TOTAL:" in report and "1 solver run(s), 1 states expanded" in report
    timer.clear_results()


def test_plain_blocks_have_no_counters(perf_enabled):
    timer = performance._timer
    timer.clear_results()

    with time_block("Render filmstrip") as entry:
        assert entry['name'] == "Render filmstrip"

    report = timer.format_results()
    assert "Render filmstrip:" in report
    assert "expanded=" not in report
    assert "0 solver run(s)" in report
    timer.clear_results()


def test_time_block_yields_none_when_disabled():
    with time_block("off") as entry:
        assert entry is None
