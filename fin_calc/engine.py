"""Core calculation engine for the finance calculators.

This module implements the closed-form calculators: EMI for amortizing
loans (and a comparison of two loans), the savings products PPF, FD, RD and
SIP, and GST. Each function is pure and returns a frozen result record.

Rounding differs by product and is part of each function's contract: EMI
and GST amounts are rounded to 2 decimal places, while the savings products
report whole rupees.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

from .data_models import (
    EMIResult,
    FDResult,
    GSTResult,
    LoanComparison,
    LoanTerms,
    PPFResult,
    RDResult,
    SIPResult,
)
from .utils import round_money, round_rupee

# FD interest compounds quarterly.
FD_COMPOUNDING_PER_YEAR = 4


def _calculate_annuity_payment(principal: float, rate_per_month: float, term: int) -> float:
    """Return the annuity (equal installment) monthly payment for a loan.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. When the interest rate is zero, the
    payment simplifies to ``P / n``.
    """
    if term <= 0:
        raise ValueError("Term must be positive")
    if rate_per_month == 0:
        return principal / term
    factor = math.pow(1 + rate_per_month, term)
    return principal * (rate_per_month * factor) / (factor - 1)


def _annuity_due_factor(rate_per_period: float, periods: int) -> float:
    """Future value of 1 paid at the start of each of ``periods`` periods."""
    if rate_per_period == 0:
        return float(periods)
    growth = math.pow(1 + rate_per_period, periods)
    return (growth - 1) / rate_per_period * (1 + rate_per_period)


def calculate_emi(principal: float, annual_rate: float, tenure_months: int) -> EMIResult:
    """Compute the EMI, total interest and total amount payable for a loan.

    Parameters
    ----------
    principal: float
        Loan amount.
    annual_rate: float
        Annual interest rate in percent, e.g. ``8.5``.
    tenure_months: int
        Number of monthly installments.

    Returns
    -------
    EMIResult
        All three amounts rounded to 2 decimal places after the full
        calculation. At a 0 % rate the EMI is ``principal / tenure_months``
        and no interest is charged.
    """
    rate_per_month = annual_rate / 12 / 100
    emi = _calculate_annuity_payment(principal, rate_per_month, tenure_months)

    if rate_per_month == 0:
        return EMIResult(emi=round_money(emi), total_interest=0.0, total_amount=round_money(principal))

    total_amount = emi * tenure_months
    total_interest = total_amount - principal
    return EMIResult(
        emi=round_money(emi),
        total_interest=round_money(total_interest),
        total_amount=round_money(total_amount),
    )


def compare_loans(
    first: Union[LoanTerms, Tuple[float, float, int]],
    second: Union[LoanTerms, Tuple[float, float, int]],
) -> LoanComparison:
    """Compare two loans given as ``(principal, annual_rate, tenure_months)``.

    The differences are absolute and computed from the rounded EMI results,
    so they match what a user sees side by side.
    """
    a = calculate_emi(*LoanTerms(*first))
    b = calculate_emi(*LoanTerms(*second))
    return LoanComparison(
        first=a,
        second=b,
        emi_difference=round_money(abs(a.emi - b.emi)),
        interest_difference=round_money(abs(a.total_interest - b.total_interest)),
        total_savings=round_money(abs(a.total_amount - b.total_amount)),
        better_option=1 if a.total_amount < b.total_amount else 2,
    )


def calculate_ppf(annual_deposit: float, annual_rate: float, years: int) -> PPFResult:
    """Compute the maturity of a Public Provident Fund account.

    A fixed deposit made every year compounds annually:

        A = P * [((1 + r)^n - 1) / r]

    All amounts are rounded to the nearest rupee, and the interest is the
    difference of the rounded maturity and investment so the three always
    add up.
    """
    rate = annual_rate / 100
    total_investment = annual_deposit * years

    if rate == 0:
        return PPFResult(
            total_investment=round_rupee(total_investment),
            interest_earned=0,
            maturity_amount=round_rupee(total_investment),
        )

    maturity_amount = round_rupee(annual_deposit * ((math.pow(1 + rate, years) - 1) / rate))
    invested = round_rupee(total_investment)
    return PPFResult(
        total_investment=invested,
        interest_earned=maturity_amount - invested,
        maturity_amount=maturity_amount,
    )


def calculate_fd(principal: float, annual_rate: float, tenure_months: int) -> FDResult:
    """Compute the maturity of a Fixed Deposit with quarterly compounding.

        A = P * (1 + r / 4)^(4 * years)
    """
    rate = annual_rate / 100
    years = tenure_months / 12
    n = FD_COMPOUNDING_PER_YEAR
    maturity_amount = principal * math.pow(1 + rate / n, n * years)
    interest_earned = maturity_amount - principal
    return FDResult(
        principal=principal,
        maturity_amount=round_rupee(maturity_amount),
        interest_earned=round_rupee(interest_earned),
        tenure_months=tenure_months,
        annual_rate=annual_rate,
    )


def calculate_rd(monthly_deposit: float, annual_rate: float, tenure_months: int) -> RDResult:
    """Compute the maturity of a Recurring Deposit.

    Deposits are made at the start of every month and compound monthly.
    """
    monthly_rate = annual_rate / 100 / 12
    maturity_amount = round_rupee(monthly_deposit * _annuity_due_factor(monthly_rate, tenure_months))
    total_deposit = round_rupee(monthly_deposit * tenure_months)
    return RDResult(
        monthly_deposit=monthly_deposit,
        maturity_amount=maturity_amount,
        total_deposit=total_deposit,
        interest_earned=maturity_amount - total_deposit,
        tenure_months=tenure_months,
        annual_rate=annual_rate,
    )


def calculate_sip(monthly_investment: float, expected_return: float, tenure_years: int) -> SIPResult:
    """Estimate the future value of a Systematic Investment Plan.

    Uses the same annuity-due formula as the recurring deposit, with the
    tenure given in years.
    """
    monthly_rate = expected_return / 100 / 12
    tenure_months = tenure_years * 12
    future_value = round_rupee(monthly_investment * _annuity_due_factor(monthly_rate, tenure_months))
    total_investment = round_rupee(monthly_investment * tenure_months)
    return SIPResult(
        monthly_investment=monthly_investment,
        future_value=future_value,
        total_investment=total_investment,
        estimated_returns=future_value - total_investment,
        tenure_years=tenure_years,
        expected_return=expected_return,
    )


def calculate_gst(amount: float, gst_rate: float, is_add_gst: bool) -> GSTResult:
    """Add GST to, or remove it from, ``amount``.

    With ``is_add_gst`` the amount is GST-exclusive and the tax is added on
    top. Otherwise the amount already includes GST and is split into its
    net and tax components.
    """
    rate = gst_rate / 100
    if is_add_gst:
        net_amount = amount
        gst_amount = amount * rate
        total_amount = amount + gst_amount
    else:
        total_amount = amount
        net_amount = amount / (1 + rate)
        gst_amount = amount - net_amount
    return GSTResult(
        net_amount=round_money(net_amount),
        gst_amount=round_money(gst_amount),
        total_amount=round_money(total_amount),
        gst_rate=gst_rate,
        is_add_gst=is_add_gst,
    )
