"""Input validation for the finance calculators.

Validators take the raw values a user typed (strings, or numbers that were
already parsed) and report every problem at once in a ``ValidationResult``.
They never raise for bad input, so a caller can show all field messages in
one go before running a calculator.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from .config import (
    FD_MAX_RATE,
    FD_TENURE_MONTHS,
    MAX_INTEREST_RATE,
    MAX_LOAN_AMOUNT,
    MAX_TENURE_MONTHS,
    PPF_DEPOSIT,
    PPF_DURATION_YEARS,
    PPF_MAX_RATE,
    RD_MAX_RATE,
    RD_TENURE_MONTHS,
    SIP_MAX_RETURN,
    SIP_TENURE_YEARS,
)
from .data_models import TenureUnit, TVMVariable, ValidationResult
from .utils import parse_number

RawValue = Union[str, int, float, None]


def _read_number(raw: RawValue, label: str, field: str, errors: Dict[str, str]) -> Optional[float]:
    """Parse one raw input, recording a message under ``field`` on failure."""
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        errors[field] = f"{label} is required"
        return None
    if isinstance(raw, str):
        try:
            return parse_number(raw)
        except ValueError:
            errors[field] = f"{label} must be a valid number"
            return None
    return float(raw)


def validate_emi_inputs(loan_amount: RawValue, interest_rate: RawValue, tenure: RawValue) -> ValidationResult:
    """Validate the inputs of an EMI calculation.

    Parameters
    ----------
    loan_amount: str
        Must be greater than zero and at most 1,00,00,00,000.
    interest_rate: str
        Annual rate in percent, between 0 and 100 inclusive.
    tenure: str
        Whole number of months, between 1 and 600.

    Returns
    -------
    ValidationResult
        ``errors`` is keyed by ``loan_amount``, ``interest_rate`` and
        ``tenure``; all three fields are checked even if one fails.
    """
    errors: Dict[str, str] = {}

    amount = _read_number(loan_amount, "Loan amount", "loan_amount", errors)
    if amount is not None:
        if amount <= 0:
            errors["loan_amount"] = "Loan amount must be greater than zero"
        elif amount > MAX_LOAN_AMOUNT:
            errors["loan_amount"] = "Loan amount is too large"

    rate = _read_number(interest_rate, "Interest rate", "interest_rate", errors)
    if rate is not None:
        if rate < 0:
            errors["interest_rate"] = "Interest rate cannot be negative"
        elif rate > MAX_INTEREST_RATE:
            errors["interest_rate"] = f"Interest rate cannot exceed {MAX_INTEREST_RATE}%"

    months = _read_number(tenure, "Tenure", "tenure", errors)
    if months is not None:
        if months <= 0:
            errors["tenure"] = "Tenure must be greater than zero"
        elif not months.is_integer():
            errors["tenure"] = "Tenure must be a whole number"
        elif months > MAX_TENURE_MONTHS:
            errors["tenure"] = f"Tenure is too long (maximum {MAX_TENURE_MONTHS} months)"

    return ValidationResult.from_errors(errors)


def validate_fd_inputs(principal: RawValue, interest_rate: RawValue, tenure_months: RawValue) -> ValidationResult:
    errors: Dict[str, str] = {}

    amount = _read_number(principal, "Principal", "principal", errors)
    if amount is not None and amount <= 0:
        errors["principal"] = "Please enter a valid principal amount"

    rate = _read_number(interest_rate, "Interest rate", "interest_rate", errors)
    if rate is not None and not 0 <= rate <= FD_MAX_RATE:
        errors["interest_rate"] = f"Interest rate must be between 0% and {FD_MAX_RATE}%"

    low, high = FD_TENURE_MONTHS
    months = _read_number(tenure_months, "Tenure", "tenure_months", errors)
    if months is not None:
        if not months.is_integer():
            errors["tenure_months"] = "Tenure must be a whole number"
        elif not low <= months <= high:
            errors["tenure_months"] = f"Tenure must be between {low} and {high} months"

    return ValidationResult.from_errors(errors)


def validate_rd_inputs(monthly_deposit: RawValue, interest_rate: RawValue, tenure_months: RawValue) -> ValidationResult:
    errors: Dict[str, str] = {}

    amount = _read_number(monthly_deposit, "Monthly deposit", "monthly_deposit", errors)
    if amount is not None and amount <= 0:
        errors["monthly_deposit"] = "Monthly deposit must be greater than zero"

    rate = _read_number(interest_rate, "Interest rate", "interest_rate", errors)
    if rate is not None and not 0 <= rate <= RD_MAX_RATE:
        errors["interest_rate"] = f"Interest rate must be between 0% and {RD_MAX_RATE}%"

    low, high = RD_TENURE_MONTHS
    months = _read_number(tenure_months, "Tenure", "tenure_months", errors)
    if months is not None:
        if not months.is_integer():
            errors["tenure_months"] = "Tenure must be a whole number"
        elif not low <= months <= high:
            errors["tenure_months"] = f"Tenure must be between {low} and {high} months"

    return ValidationResult.from_errors(errors)


def validate_sip_inputs(
    monthly_investment: RawValue, expected_return: RawValue, tenure_years: RawValue
) -> ValidationResult:
    errors: Dict[str, str] = {}

    amount = _read_number(monthly_investment, "Monthly investment", "monthly_investment", errors)
    if amount is not None and amount <= 0:
        errors["monthly_investment"] = "Please enter a valid monthly investment amount"

    rate = _read_number(expected_return, "Expected return", "expected_return", errors)
    if rate is not None and not 0 <= rate <= SIP_MAX_RETURN:
        errors["expected_return"] = f"Expected return must be between 0% and {SIP_MAX_RETURN}%"

    low, high = SIP_TENURE_YEARS
    years = _read_number(tenure_years, "Investment period", "tenure_years", errors)
    if years is not None:
        if not years.is_integer():
            errors["tenure_years"] = "Investment period must be a whole number of years"
        elif not low <= years <= high:
            errors["tenure_years"] = f"Investment period must be between {low} and {high} years"

    return ValidationResult.from_errors(errors)


def validate_ppf_inputs(annual_deposit: RawValue, interest_rate: RawValue, duration_years: RawValue) -> ValidationResult:
    """Validate PPF inputs against the scheme rules.

    Deposits range from ₹500 to ₹1,50,000 a year and the account runs for
    15 to 30 years (the 15-year lock-in plus optional extensions).
    """
    errors: Dict[str, str] = {}

    min_deposit, max_deposit = PPF_DEPOSIT
    deposit = _read_number(annual_deposit, "Deposit amount", "annual_deposit", errors)
    if deposit is not None:
        if deposit < min_deposit:
            errors["annual_deposit"] = "Minimum deposit is ₹500"
        elif deposit > max_deposit:
            errors["annual_deposit"] = "Maximum deposit is ₹1,50,000"

    rate = _read_number(interest_rate, "Interest rate", "interest_rate", errors)
    if rate is not None:
        if rate <= 0:
            errors["interest_rate"] = "Interest rate must be greater than 0"
        elif rate > PPF_MAX_RATE:
            errors["interest_rate"] = f"Maximum interest rate is {PPF_MAX_RATE}%"

    min_years, max_years = PPF_DURATION_YEARS
    years = _read_number(duration_years, "Duration", "duration_years", errors)
    if years is not None:
        if years < min_years:
            errors["duration_years"] = f"Minimum duration is {min_years} years"
        elif years > max_years:
            errors["duration_years"] = f"Maximum duration is {max_years} years"

    return ValidationResult.from_errors(errors)


def validate_tvm_inputs(
    variable: Union[TVMVariable, str],
    present_value: RawValue = 0,
    future_value: RawValue = 0,
    payment_per_period: RawValue = 0,
    number_of_periods: RawValue = 0,
    interest_rate: RawValue = 0,
) -> ValidationResult:
    """Validate the inputs of a TVM calculation.

    Blank inputs count as zero. At least one of the values not being solved
    for must be non-zero, the number of periods must be positive unless it
    is the unknown, and the rate cannot be negative unless it is the unknown.
    Raises ``UnsupportedVariableError`` if ``variable`` is not a TVM variable.
    """
    target = TVMVariable.parse(variable)
    errors: Dict[str, str] = {}

    raw = {
        TVMVariable.PV: ("Present value", "present_value", present_value),
        TVMVariable.FV: ("Future value", "future_value", future_value),
        TVMVariable.PMT: ("Payment per period", "payment_per_period", payment_per_period),
        TVMVariable.N: ("Number of periods", "number_of_periods", number_of_periods),
        TVMVariable.RATE: ("Interest rate", "interest_rate", interest_rate),
    }
    values: Dict[TVMVariable, float] = {}
    for key, (label, field, value) in raw.items():
        if value is None or (isinstance(value, str) and value.strip() == ""):
            values[key] = 0.0
            continue
        number = _read_number(value, label, field, errors)
        if number is not None:
            values[key] = number
    if errors:
        return ValidationResult.from_errors(errors)

    if all(value == 0 for key, value in values.items() if key is not target):
        errors["inputs"] = "Please enter at least one non-zero value"
    if target is not TVMVariable.N and values[TVMVariable.N] <= 0:
        errors["number_of_periods"] = "Number of periods must be greater than 0"
    if target is not TVMVariable.RATE and values[TVMVariable.RATE] < 0:
        errors["interest_rate"] = "Interest rate cannot be negative"

    return ValidationResult.from_errors(errors)


def _parse_unit(unit: Union[TenureUnit, str]) -> Optional[TenureUnit]:
    try:
        return TenureUnit(unit.strip().lower() if isinstance(unit, str) else unit)
    except ValueError:
        return None


def convert_tenure(value: float, from_unit: Union[TenureUnit, str], to_unit: Union[TenureUnit, str]) -> float:
    """Convert a tenure between ``"months"`` and ``"years"``.

    Returns ``value`` unchanged when the units match or are not recognised.
    """
    source, target = _parse_unit(from_unit), _parse_unit(to_unit)
    if source is None or source is target:
        return value
    if source is TenureUnit.YEARS and target is TenureUnit.MONTHS:
        return value * 12
    if source is TenureUnit.MONTHS and target is TenureUnit.YEARS:
        return value / 12
    return value
