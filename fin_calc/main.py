"""Command-line interface for the finance calculators.

This module uses the ``click`` library to expose every calculator as a
sub-command. Results are printed as a short summary with amounts in Indian
Rupee notation, or as JSON with ``--json``. Amount options understand the
usual Indian shorthand, so ``-p 25l`` is twenty-five lakh.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any, Callable, Tuple

import click

from .config import GST_SLABS, log_level_from_env
from .data_models import CompoundingFrequency, LoanTerms, PaymentTiming, TVMVariable, ValidationResult
from .engine import calculate_emi, calculate_fd, calculate_gst, calculate_ppf, calculate_rd, calculate_sip, compare_loans
from .formatter import print_comparison, print_emi, print_fd, print_gst, print_ppf, print_rd, print_sip, print_tvm
from .tvm import calculate_tvm
from .utils import parse_number
from .validators import (
    convert_tenure,
    validate_emi_inputs,
    validate_fd_inputs,
    validate_ppf_inputs,
    validate_rd_inputs,
    validate_sip_inputs,
    validate_tvm_inputs,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(asctime)s %(module)s %(message)s"

# Longest suffixes first so that "cr" is not read as a bare number.
AMOUNT_SUFFIXES: Tuple[Tuple[str, float], ...] = (
    ("crore", 10_000_000.0),
    ("lakh", 100_000.0),
    ("lac", 100_000.0),
    ("cr", 10_000_000.0),
    ("l", 100_000.0),
    ("k", 1_000.0),
)


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional Indian shorthand suffixes.

    Accepts plain numbers ("500000", "5,00,000") and ``k`` (thousand),
    ``l``/``lakh`` and ``cr``/``crore`` suffixes, e.g. "25l" meaning
    25,00,000. Returns a float.
    """
    cleaned = value.strip().lower().replace(",", "")
    factor = 1.0
    for suffix, multiplier in AMOUNT_SUFFIXES:
        if cleaned.endswith(suffix):
            factor = multiplier
            cleaned = cleaned[: -len(suffix)].strip()
            break
    try:
        return parse_number(cleaned) * factor
    except ValueError:
        raise click.BadParameter(f"Invalid amount: {value}")


def parse_loan_string(value: str) -> LoanTerms:
    """Parse a loan given as ``AMOUNT:RATE:MONTHS``."""
    parts = value.split(":")
    if len(parts) != 3:
        raise click.BadParameter(f"Loan must be in AMOUNT:RATE:MONTHS format; got {value}")
    amt_str, rate_str, months_str = parts
    amount = parse_amount(amt_str)
    check_inputs(validate_emi_inputs(amount, rate_str, months_str))
    return LoanTerms(amount, parse_number(rate_str), int(parse_number(months_str)))


def check_inputs(validation: ValidationResult) -> None:
    """Raise a usage error listing every message of a failed validation."""
    if not validation.is_valid:
        raise click.UsageError("\n".join(validation.errors.values()))


def emit(result: Any, as_json: bool, printer: Callable[[Any], None]) -> None:
    if as_json:
        click.echo(json.dumps(asdict(result), indent=2, ensure_ascii=False))
    else:
        printer(result)


json_option = click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Personal-finance calculators: EMI, TVM, PPF, FD, RD, SIP and GST."""
    level = "DEBUG" if verbose else log_level_from_env()
    logging.basicConfig(level=level, format=LOG_FORMAT)


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Loan amount, e.g. 25l")
@click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)")
@click.option("--tenure", "-t", "tenure", required=True, type=float, help="Loan tenure")
@click.option(
    "--unit",
    "unit",
    type=click.Choice(["months", "years"]),
    default="months",
    show_default=True,
    help="Unit of --tenure",
)
@json_option
def emi(principal: str, rate: str, tenure: float, unit: str, as_json: bool) -> None:
    """Compute the monthly EMI of a loan."""
    amount = parse_amount(principal)
    months = convert_tenure(tenure, unit, "months")
    check_inputs(validate_emi_inputs(amount, rate, months))
    result = calculate_emi(amount, parse_number(rate), int(months))
    emit(result, as_json, print_emi)


@cli.command()
@click.option("--loan1", "loan1", required=True, help="First loan in AMOUNT:RATE:MONTHS format")
@click.option("--loan2", "loan2", required=True, help="Second loan in AMOUNT:RATE:MONTHS format")
@json_option
def compare(loan1: str, loan2: str, as_json: bool) -> None:
    """Compare the cost of two loans.

    For example:

        fin-calc compare --loan1 5l:8.5:12 --loan2 5l:9.5:12
    """
    result = compare_loans(parse_loan_string(loan1), parse_loan_string(loan2))
    emit(result, as_json, print_comparison)


@cli.command()
@click.option(
    "--solve",
    "variable",
    required=True,
    type=click.Choice([v.value for v in TVMVariable], case_sensitive=False),
    help="Variable to calculate",
)
@click.option("--pv", "present_value", default="0", help="Present value")
@click.option("--fv", "future_value", default="0", help="Future value")
@click.option("--pmt", "payment_per_period", default="0", help="Payment per period")
@click.option("--years", "-n", "number_of_periods", type=float, default=0.0, help="Number of years")
@click.option("--rate", "-r", "interest_rate", type=float, default=0.0, help="Annual interest rate (percent)")
@click.option(
    "--frequency",
    "frequency",
    type=click.Choice([f.label for f in CompoundingFrequency], case_sensitive=False),
    default=CompoundingFrequency.ANNUALLY.label,
    show_default=True,
    help="Compounding frequency",
)
@click.option(
    "--timing",
    "timing",
    type=click.Choice(["End", "Beginning"], case_sensitive=False),
    default="End",
    show_default=True,
    help="Payment timing",
)
@json_option
def tvm(
    variable: str,
    present_value: str,
    future_value: str,
    payment_per_period: str,
    number_of_periods: float,
    interest_rate: float,
    frequency: str,
    timing: str,
    as_json: bool,
) -> None:
    """Solve for one time-value-of-money variable given the other four.

    Cash flows are signed: money paid out is negative, money received is
    positive.
    """
    pv = parse_amount(present_value)
    fv = parse_amount(future_value)
    pmt = parse_amount(payment_per_period)
    check_inputs(validate_tvm_inputs(variable, pv, fv, pmt, number_of_periods, interest_rate))
    result = calculate_tvm(
        variable,
        present_value=pv,
        future_value=fv,
        payment_per_period=pmt,
        number_of_periods=number_of_periods,
        interest_rate=interest_rate,
        compounding_frequency=CompoundingFrequency.parse(frequency),
        payment_timing=PaymentTiming.parse(timing),
    )
    if not result.is_defined:
        logger.info("No solution for %s with the given inputs", result.calculated_variable.value)
    emit(result, as_json, print_tvm)


@cli.command()
@click.option("--deposit", "-d", "deposit", required=True, help="Annual deposit")
@click.option("--rate", "-r", "rate", type=float, default=7.1, show_default=True, help="Annual interest rate (percent)")
@click.option("--years", "-y", "years", type=int, default=15, show_default=True, help="Duration in years")
@json_option
def ppf(deposit: str, rate: float, years: int, as_json: bool) -> None:
    """Compute the maturity of a Public Provident Fund account."""
    amount = parse_amount(deposit)
    check_inputs(validate_ppf_inputs(amount, rate, years))
    emit(calculate_ppf(amount, rate, years), as_json, print_ppf)


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Deposit amount")
@click.option("--rate", "-r", "rate", type=float, required=True, help="Annual interest rate (percent)")
@click.option("--months", "-m", "months", type=int, required=True, help="Tenure in months")
@json_option
def fd(principal: str, rate: float, months: int, as_json: bool) -> None:
    """Compute the maturity of a Fixed Deposit (quarterly compounding)."""
    amount = parse_amount(principal)
    check_inputs(validate_fd_inputs(amount, rate, months))
    emit(calculate_fd(amount, rate, months), as_json, print_fd)


@cli.command()
@click.option("--deposit", "-d", "deposit", required=True, help="Monthly deposit")
@click.option("--rate", "-r", "rate", type=float, required=True, help="Annual interest rate (percent)")
@click.option("--months", "-m", "months", type=int, required=True, help="Tenure in months")
@json_option
def rd(deposit: str, rate: float, months: int, as_json: bool) -> None:
    """Compute the maturity of a Recurring Deposit."""
    amount = parse_amount(deposit)
    check_inputs(validate_rd_inputs(amount, rate, months))
    emit(calculate_rd(amount, rate, months), as_json, print_rd)


@cli.command()
@click.option("--investment", "-i", "investment", required=True, help="Monthly investment")
@click.option("--return", "-r", "expected_return", type=float, default=12.0, show_default=True, help="Expected annual return (percent)")
@click.option("--years", "-y", "years", type=int, required=True, help="Investment period in years")
@json_option
def sip(investment: str, expected_return: float, years: int, as_json: bool) -> None:
    """Estimate the future value of a Systematic Investment Plan."""
    amount = parse_amount(investment)
    check_inputs(validate_sip_inputs(amount, expected_return, years))
    emit(calculate_sip(amount, expected_return, years), as_json, print_sip)


@cli.command()
@click.option("--amount", "-a", "amount", required=True, help="Amount")
@click.option(
    "--rate",
    "-r",
    "rate",
    type=click.FloatRange(min=0),
    default=18.0,
    show_default=True,
    help=f"GST rate (percent); standard slabs are {', '.join(str(s) for s in GST_SLABS)}",
)
@click.option("--add/--remove", "is_add_gst", default=True, help="Add GST to a net amount or remove it from a gross one")
@json_option
def gst(amount: str, rate: float, is_add_gst: bool, as_json: bool) -> None:
    """Add GST to an amount or extract it from one."""
    emit(calculate_gst(parse_amount(amount), rate, is_add_gst), as_json, print_gst)


if __name__ == "__main__":
    cli()
