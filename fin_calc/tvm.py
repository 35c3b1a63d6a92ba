"""Time value of money engine.

All five functions work on the identity

    PV * (1 + r)^n + PMT * [((1 + r)^n - 1) / r] * t = FV

where ``r`` is the rate per period, ``n`` the number of periods and ``t``
the timing factor: ``1 + r`` when payments fall at the beginning of each
period (annuity due) and ``1`` when they fall at the end. Signs encode the
direction of cash flows, so a deposit of 1000 growing to 2000 is written as
``pv=-1000, fv=2000``.

``calculate_pv``, ``calculate_fv`` and ``calculate_pmt`` are closed forms.
``calculate_n`` and ``calculate_rate`` fall back to the numeric root finders
in ``solvers`` and return ``None`` when the inputs admit no solution.
``calculate_tvm`` works in years and annual percentages and converts to and
from per-period values using the compounding frequency.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional, Union

from .config import N_SOLVER, RATE_SOLVER, SolverConfig
from .data_models import CompoundingFrequency, PaymentTiming, TVMInputs, TVMResult, TVMVariable
from .solvers import bisect, newton
from .utils import round_money

logger = logging.getLogger(__name__)

Timing = Union[PaymentTiming, int, str]
Frequency = Union[CompoundingFrequency, int, str]


class PeriodicTerms(NamedTuple):
    rate_per_period: float
    total_periods: float
    periods_per_year: int


def adjust_for_compounding(annual_rate: float, years: float, frequency: Frequency) -> PeriodicTerms:
    """Convert an annual percentage rate and a number of years to per-period terms."""
    periods_per_year = int(CompoundingFrequency.parse(frequency))
    return PeriodicTerms(
        rate_per_period=annual_rate / 100 / periods_per_year,
        total_periods=years * periods_per_year,
        periods_per_year=periods_per_year,
    )


def _growth(rate: float, periods: float) -> float:
    """Return ``(1 + rate) ** periods``, saturating to infinity on overflow."""
    try:
        return math.pow(1 + rate, periods)
    except OverflowError:
        return math.inf


def _timing_factor(rate: float, timing: Timing) -> float:
    return 1 + rate if PaymentTiming.parse(timing) is PaymentTiming.BEGINNING else 1.0


def calculate_pv(fv: float, pmt: float, rate: float, n: float, timing: Timing = PaymentTiming.END) -> float:
    """Return the present value of ``fv`` and a stream of ``n`` payments ``pmt``."""
    if rate == 0:
        return fv - pmt * n
    pv_from_fv = fv / _growth(rate, n)
    pv_from_pmt = pmt * ((1 - _growth(rate, -n)) / rate) * _timing_factor(rate, timing)
    return pv_from_fv - pv_from_pmt


def calculate_fv(pv: float, pmt: float, rate: float, n: float, timing: Timing = PaymentTiming.END) -> float:
    """Return the future value of ``pv`` and a stream of ``n`` payments ``pmt``."""
    if rate == 0:
        return pv + pmt * n
    fv_from_pv = pv * _growth(rate, n)
    fv_from_pmt = pmt * ((_growth(rate, n) - 1) / rate) * _timing_factor(rate, timing)
    return fv_from_pv + fv_from_pmt


def calculate_pmt(pv: float, fv: float, rate: float, n: float, timing: Timing = PaymentTiming.END) -> float:
    """Return the payment per period that takes ``pv`` to ``fv`` in ``n`` periods."""
    if rate == 0:
        return (fv - pv) / n
    factor = _growth(rate, n)
    numerator = (fv - pv * factor) * rate
    denominator = (factor - 1) * _timing_factor(rate, timing)
    return numerator / denominator


def _compound_ratio(pv: float, fv: float) -> Optional[float]:
    """Growth ratio ``|fv / pv|`` for a payment-free TVM problem, or ``None``."""
    if pv == 0:
        return None
    ratio = abs(fv / pv)
    if ratio <= 0:
        return None
    return ratio


def calculate_n(
    pv: float,
    fv: float,
    pmt: float,
    rate: float,
    timing: Timing = PaymentTiming.END,
    config: SolverConfig = N_SOLVER,
) -> Optional[float]:
    """Return the number of periods, or ``None`` if there is no solution.

    With a zero rate and a zero payment nothing ever changes, so no period
    count can reach ``fv``. Without payments the answer is a logarithm of
    the growth ratio. Otherwise the future value is searched by bisection
    over ``[config.lower, config.upper]`` periods.
    """
    if rate == 0:
        if pmt == 0:
            logger.debug("calculate_n: zero rate and zero payment have no solution")
            return None
        return (fv - pv) / pmt

    if rate <= -1:
        logger.debug("calculate_n: rate %g wipes out the balance; no solution", rate)
        return None

    if pmt == 0:
        ratio = _compound_ratio(pv, fv)
        if ratio is None:
            logger.debug("calculate_n: no solution for pv=%g, fv=%g, rate=%g", pv, fv, rate)
            return None
        return math.log(ratio) / math.log(1 + rate)

    return bisect(lambda periods: calculate_fv(pv, pmt, rate, periods, timing) - fv, config)


def calculate_rate(
    pv: float,
    fv: float,
    pmt: float,
    n: float,
    timing: Timing = PaymentTiming.END,
    config: SolverConfig = RATE_SOLVER,
) -> Optional[float]:
    """Return the rate per period as a decimal, or ``None`` if there is no solution.

    Without payments the rate follows directly from the growth ratio.
    Otherwise Newton-Raphson is run from ``config.initial_guess``, falling
    back to bisection where the future value is flat in the rate.
    """
    if pmt == 0:
        ratio = _compound_ratio(pv, fv)
        if ratio is None or n == 0:
            logger.debug("calculate_rate: no solution for pv=%g, fv=%g, n=%g", pv, fv, n)
            return None
        return math.pow(ratio, 1 / n) - 1

    return newton(lambda rate: calculate_fv(pv, pmt, rate, n, timing) - fv, config)


def calculate_tvm(
    variable: Union[TVMVariable, str],
    present_value: float = 0.0,
    future_value: float = 0.0,
    payment_per_period: float = 0.0,
    number_of_periods: float = 0.0,
    interest_rate: float = 0.0,
    compounding_frequency: Frequency = CompoundingFrequency.ANNUALLY,
    payment_timing: Timing = PaymentTiming.END,
) -> TVMResult:
    """Solve the TVM identity for ``variable`` given the other four values.

    Parameters
    ----------
    variable: TVMVariable or str
        One of ``PV``, ``FV``, ``PMT``, ``N`` or ``Rate``.
    present_value, future_value, payment_per_period: float
        Cash flows; the one being solved for is ignored.
    number_of_periods: float
        Duration in years.
    interest_rate: float
        Annual nominal rate in percent.
    compounding_frequency: CompoundingFrequency, int or str
        Periods per year, e.g. ``"Monthly"`` or ``12``.
    payment_timing: PaymentTiming, int or str
        ``"End"`` (ordinary annuity) or ``"Beginning"`` (annuity due).

    Returns
    -------
    TVMResult
        The solved value rounded to 2 decimal places; ``N`` is expressed in
        years and ``Rate`` as an annual percentage. The value is ``None``
        when the inputs admit no solution, including a rate of -100 % or
        less per period.

    Raises
    ------
    UnsupportedVariableError
        If ``variable`` is not one of the five TVM variables.
    """
    target = TVMVariable.parse(variable)
    frequency = CompoundingFrequency.parse(compounding_frequency)
    timing = PaymentTiming.parse(payment_timing)
    terms = adjust_for_compounding(interest_rate, number_of_periods, frequency)
    rate, periods = terms.rate_per_period, terms.total_periods

    result: Optional[float]
    if target is not TVMVariable.RATE and rate <= -1:
        logger.debug("calculate_tvm: rate per period %g wipes out the balance; no solution", rate)
        result = None
    elif target is TVMVariable.PV:
        result = calculate_pv(future_value, payment_per_period, rate, periods, timing)
    elif target is TVMVariable.FV:
        result = calculate_fv(present_value, payment_per_period, rate, periods, timing)
    elif target is TVMVariable.PMT:
        if periods == 0:
            logger.debug("calculate_tvm: no payment spreads over zero periods")
            result = None
        else:
            result = calculate_pmt(present_value, future_value, rate, periods, timing)
    elif target is TVMVariable.N:
        result = calculate_n(present_value, future_value, payment_per_period, rate, timing)
        if result is not None:
            result = result / terms.periods_per_year
    else:
        result = calculate_rate(present_value, future_value, payment_per_period, periods, timing)
        if result is not None:
            result = result * terms.periods_per_year * 100

    return TVMResult(
        calculated_variable=target,
        calculated_value=None if result is None else round_money(result),
        inputs=TVMInputs(
            present_value=present_value,
            future_value=future_value,
            payment_per_period=payment_per_period,
            number_of_periods=number_of_periods,
            interest_rate=interest_rate,
            compounding_frequency=frequency,
            payment_timing=timing,
        ),
    )
