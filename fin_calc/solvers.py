"""Root finders shared by the TVM solvers.

Both functions look for ``x`` such that ``func(x)`` is (close to) zero and
never raise on non-convergence: once the iteration budget in the supplied
``SolverConfig`` is exhausted they return their best approximation. They
are deterministic, with fixed bounds and starting points taken from the
configuration.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from .config import MIN_DERIVATIVE, SolverConfig

logger = logging.getLogger(__name__)

Residual = Callable[[float], float]


def bisect(func: Residual, config: SolverConfig) -> float:
    """Bisection search for a root of a monotonic ``func``.

    The search runs over ``[config.lower, config.upper]`` and stops when the
    absolute residual drops below ``config.tolerance`` or the interval is
    narrower than ``config.width_tolerance``. The direction of monotonicity
    is read from the end points, so both increasing and decreasing
    functions are handled.
    """
    lower, upper = config.lower, config.upper
    # NaN at either end compares false, which keeps the increasing default
    increasing = not func(upper) < func(lower)
    for _ in range(config.max_iterations):
        mid = (lower + upper) / 2
        residual = func(mid)
        if abs(residual) < config.tolerance:
            return mid
        if (residual < 0) == increasing:
            lower = mid
        else:
            upper = mid
        if upper - lower < config.width_tolerance:
            return mid
    logger.debug(
        "Bisection did not converge in %d iterations; returning midpoint of [%g, %g]",
        config.max_iterations,
        lower,
        upper,
    )
    return (lower + upper) / 2


def newton(func: Residual, config: SolverConfig, min_derivative: float = MIN_DERIVATIVE) -> float:
    """Newton-Raphson search for a root of ``func``.

    Starts at ``config.initial_guess`` and estimates the derivative with a
    forward difference of width ``config.step``. Every candidate is clamped
    to ``[config.lower, config.upper]``. When the derivative is flat (below
    ``min_derivative``) or not finite, the search falls back to ``bisect``
    over the same interval.
    """
    x = config.initial_guess
    for _ in range(config.max_iterations):
        fx = func(x)
        if abs(fx) < config.tolerance:
            return x
        derivative = (func(x + config.step) - fx) / config.step
        if not math.isfinite(derivative) or abs(derivative) < min_derivative:
            logger.debug("Derivative %g at %g is unusable; falling back to bisection", derivative, x)
            return bisect(func, config)
        candidate = min(max(x - fx / derivative, config.lower), config.upper)
        if abs(candidate - x) < config.tolerance:
            return candidate
        x = candidate
    logger.debug("Newton-Raphson did not converge in %d iterations; returning %g", config.max_iterations, x)
    return x
