"""
Test the bisection and Newton-Raphson root finders.
"""
import logging
import math

import pytest

from fin_calc.config import SolverConfig
from fin_calc.solvers import bisect, newton


def _config(**overrides):
    settings = dict(lower=0.0, upper=10.0, tolerance=1e-9, width_tolerance=1e-9)
    settings.update(overrides)
    return SolverConfig(**settings)


# ============================================================================
# TESTS: bisect
# ============================================================================

def test_bisect_increasing_function():
    assert bisect(lambda x: x - 3, _config()) == pytest.approx(3, abs=1e-6)


def test_bisect_decreasing_function():
    assert bisect(lambda x: 3 - x, _config()) == pytest.approx(3, abs=1e-6)


def test_bisect_without_root_stays_in_interval():
    """No root in [0, 10]: the search collapses onto the closest end."""
    x = bisect(lambda x: x + 100, _config(width_tolerance=1e-3))

    assert x == pytest.approx(0, abs=0.01)


def test_bisect_returns_midpoint_when_budget_runs_out(caplog):
    """Three halvings of [0, 10] around 3 leave [2.5, 3.75]."""
    with caplog.at_level(logging.DEBUG, logger="fin_calc.solvers"):
        x = bisect(lambda x: x - 3, _config(max_iterations=3))

    assert x == 3.125
    assert "did not converge" in caplog.text


# ============================================================================
# TESTS: newton
# ============================================================================

def test_newton_square_root():
    x = newton(lambda x: x * x - 2, _config(initial_guess=1.0, step=1e-7))

    assert x == pytest.approx(math.sqrt(2), abs=1e-6)


def test_newton_clamps_to_upper_bound():
    assert newton(lambda x: x - 20, _config()) == 10


def test_newton_falls_back_on_flat_function(caplog):
    with caplog.at_level(logging.DEBUG, logger="fin_calc.solvers"):
        x = newton(lambda x: 5.0, _config(width_tolerance=1e-3))

    assert 0 <= x <= 10
    assert "falling back to bisection" in caplog.text


def test_newton_returns_initial_guess_when_already_a_root():
    assert newton(lambda x: x - 4, _config(initial_guess=4.0)) == 4.0
