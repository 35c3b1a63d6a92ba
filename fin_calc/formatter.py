"""Output helpers for the finance calculators.

``format_indian_currency`` renders an amount in rupees using the Indian
digit grouping (lakhs and crores). The ``print_*`` functions render result
records as simple aligned text blocks for the command-line interface; they
rely only on built-in printing.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP
from typing import Iterable, List, Tuple

from .data_models import (
    EMIResult,
    FDResult,
    GSTResult,
    LoanComparison,
    PPFResult,
    RDResult,
    SIPResult,
    TVMResult,
    TVMVariable,
)
from .utils import TWO_PLACES, Number, to_decimal

RUPEE = "₹"


def group_indian(digits: str) -> str:
    """Insert Indian-style separators into a string of digits.

    The last three digits form the first group and every group to the left
    has two digits: ``"10000000"`` becomes ``"1,00,00,000"``.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_indian_currency(amount: Number) -> str:
    """Format ``amount`` as Indian Rupees, e.g. ``"₹1,00,000.00"``.

    Negative amounts get a leading ``-`` before the rupee symbol. The
    absolute value is rounded to 2 decimal places, halves away from zero.
    """
    value = to_decimal(amount)
    rounded = abs(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    integer_part, decimal_part = format(rounded, "f").split(".")
    formatted = f"{RUPEE}{group_indian(integer_part)}.{decimal_part}"
    return f"-{formatted}" if value < 0 else formatted


def _print_block(title: str, rows: Iterable[Tuple[str, str]]) -> None:
    print(title)
    print("-" * 72)
    for label, value in rows:
        print(f"{label:<19s}: {value}")
    print("-" * 72)


def print_emi(result: EMIResult) -> None:
    """Print an EMI result."""
    _print_block(
        "EMI",
        [
            ("Monthly EMI", format_indian_currency(result.emi)),
            ("Total interest", format_indian_currency(result.total_interest)),
            ("Total amount", format_indian_currency(result.total_amount)),
        ],
    )


def print_comparison(comparison: LoanComparison) -> None:
    """Print two loans side by side followed by their differences."""
    print("Comparison")
    print("=" * 72)
    print(f"{'Metric':20s} {'Loan 1':>16s} {'Loan 2':>16s} {'Difference':>16s}")
    rows = [
        ("EMI", comparison.first.emi, comparison.second.emi, comparison.emi_difference),
        (
            "Total interest",
            comparison.first.total_interest,
            comparison.second.total_interest,
            comparison.interest_difference,
        ),
        (
            "Total amount",
            comparison.first.total_amount,
            comparison.second.total_amount,
            comparison.total_savings,
        ),
    ]
    for label, v1, v2, diff in rows:
        print(
            f"{label:20s} {format_indian_currency(v1):>16s} "
            f"{format_indian_currency(v2):>16s} {format_indian_currency(diff):>16s}"
        )
    print("=" * 72)
    print(f"Loan {comparison.better_option} is cheaper overall.")


def format_tvm_value(result: TVMResult) -> str:
    """Render the solved TVM value with the unit matching its variable."""
    if not result.is_defined:
        return "No solution"
    if not math.isfinite(result.calculated_value):
        return "Too large to display"
    if result.calculated_variable is TVMVariable.N:
        return f"{result.calculated_value:.2f} years"
    if result.calculated_variable is TVMVariable.RATE:
        return f"{result.calculated_value:.2f}% per annum"
    return format_indian_currency(result.calculated_value)


def print_tvm(result: TVMResult) -> None:
    inputs = result.inputs
    _print_block(
        "Time value of money",
        [
            ("Solved for", result.calculated_variable.value),
            ("Result", format_tvm_value(result)),
            ("Compounding", inputs.compounding_frequency.label),
            ("Payment timing", inputs.payment_timing.name.title()),
        ],
    )


def print_ppf(result: PPFResult) -> None:
    _print_block(
        "Public Provident Fund",
        [
            ("Total investment", format_indian_currency(result.total_investment)),
            ("Interest earned", format_indian_currency(result.interest_earned)),
            ("Maturity amount", format_indian_currency(result.maturity_amount)),
        ],
    )


def print_fd(result: FDResult) -> None:
    _print_block(
        "Fixed Deposit",
        [
            ("Principal", format_indian_currency(result.principal)),
            ("Interest earned", format_indian_currency(result.interest_earned)),
            ("Maturity amount", format_indian_currency(result.maturity_amount)),
            ("Tenure", f"{result.tenure_months} months"),
        ],
    )


def print_rd(result: RDResult) -> None:
    _print_block(
        "Recurring Deposit",
        [
            ("Total deposit", format_indian_currency(result.total_deposit)),
            ("Interest earned", format_indian_currency(result.interest_earned)),
            ("Maturity amount", format_indian_currency(result.maturity_amount)),
            ("Tenure", f"{result.tenure_months} months"),
        ],
    )


def print_sip(result: SIPResult) -> None:
    _print_block(
        "Systematic Investment Plan",
        [
            ("Total investment", format_indian_currency(result.total_investment)),
            ("Estimated returns", format_indian_currency(result.estimated_returns)),
            ("Future value", format_indian_currency(result.future_value)),
            ("Tenure", f"{result.tenure_years} years"),
        ],
    )


def print_gst(result: GSTResult) -> None:
    mode = "added" if result.is_add_gst else "removed"
    _print_block(
        f"GST @ {result.gst_rate:g}% ({mode})",
        [
            ("Net amount", format_indian_currency(result.net_amount)),
            ("GST amount", format_indian_currency(result.gst_amount)),
            ("Total amount", format_indian_currency(result.total_amount)),
        ],
    )
