"""Configuration constants for the finance calculators.

Numeric solver settings are grouped in an immutable ``SolverConfig`` so that
callers can pass an alternative configuration explicitly instead of mutating
module state. Input limits used by the validators live here as well.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SolverConfig:
    """Settings for one of the iterative TVM solvers.

    Attributes
    ----------
    lower, upper: float
        Search interval for bisection. Newton candidates are clamped to it.
    tolerance: float
        Convergence threshold on the absolute future-value residual.
    width_tolerance: float
        Bisection stops once the interval is narrower than this.
    max_iterations: int
        Hard iteration budget; the best approximation is returned after it.
    initial_guess: float
        Newton-Raphson starting point.
    step: float
        Forward-difference step used for the numerical derivative.
    """

    lower: float
    upper: float
    tolerance: float
    width_tolerance: float
    max_iterations: int = 100
    initial_guess: float = 0.0
    step: float = 1e-5


# Number of periods: bisection over [0.01, 1000].
N_SOLVER = SolverConfig(lower=0.01, upper=1000.0, tolerance=0.01, width_tolerance=0.001)

# Rate per period: Newton-Raphson from 10 %, bisection fallback over [-99 %, 1000 %].
RATE_SOLVER = SolverConfig(
    lower=-0.99,
    upper=10.0,
    tolerance=1e-5,
    width_tolerance=1e-5,
    initial_guess=0.10,
    step=1e-5,
)

# Below this derivative magnitude Newton-Raphson gives way to bisection.
MIN_DERIVATIVE = 1e-5

# EMI input limits
MAX_LOAN_AMOUNT = 1_000_000_000
MAX_INTEREST_RATE = 100
MAX_TENURE_MONTHS = 600

# FD input limits
FD_MAX_RATE = 15
FD_TENURE_MONTHS: Tuple[int, int] = (1, 120)

# RD input limits
RD_MAX_RATE = 15
RD_TENURE_MONTHS: Tuple[int, int] = (3, 120)

# SIP input limits
SIP_MAX_RETURN = 30
SIP_TENURE_YEARS: Tuple[int, int] = (1, 40)

# PPF scheme rules
PPF_DEPOSIT: Tuple[int, int] = (500, 150_000)
PPF_MAX_RATE = 50
PPF_DURATION_YEARS: Tuple[int, int] = (15, 30)

# Standard Indian GST slabs in percent
GST_SLABS: Tuple[int, ...] = (5, 12, 18, 28)

LOG_LEVEL_ENV = "FIN_CALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level_from_env() -> str:
    """Return the log level named by ``FIN_CALC_LOG_LEVEL`` (default WARNING)."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
