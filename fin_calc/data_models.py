"""Data models for the finance calculators.

This module defines the enumerations and dataclasses exchanged by the
calculators: payment timing and compounding frequency for the TVM engine,
and one result record per calculator. Results are plain values with no
behaviour beyond a few convenience properties, which makes them easy to
inspect, compare in tests and serialize with ``dataclasses.asdict``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, NamedTuple, Optional, Union

from .exceptions import UnsupportedVariableError


def _normalize_label(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


class PaymentTiming(IntEnum):
    """When each payment falls within its period.

    ``END`` is an ordinary annuity, ``BEGINNING`` an annuity due (every
    payment earns one extra period of interest).
    """

    END = 0
    BEGINNING = 1

    @classmethod
    def parse(cls, value: Union["PaymentTiming", int, str]) -> "PaymentTiming":
        if isinstance(value, str):
            label = _normalize_label(value)
            if label in ("end", "beginning"):
                return cls[label.upper()]
            raise ValueError(f"Invalid payment timing: {value}")
        return cls(value)


class CompoundingFrequency(IntEnum):
    """Compounding periods per year."""

    MONTHLY = 12
    QUARTERLY = 4
    SEMI_ANNUALLY = 2
    ANNUALLY = 1

    @property
    def label(self) -> str:
        return self.name.replace("_", "-").title()

    @classmethod
    def parse(cls, value: Union["CompoundingFrequency", int, str]) -> "CompoundingFrequency":
        if isinstance(value, str):
            try:
                return cls[_normalize_label(value).upper()]
            except KeyError:
                raise ValueError(f"Invalid compounding frequency: {value}") from None
        return cls(value)


class TVMVariable(str, Enum):
    """The variable solved for by ``calculate_tvm``."""

    PV = "PV"
    FV = "FV"
    PMT = "PMT"
    N = "N"
    RATE = "Rate"

    @classmethod
    def parse(cls, value: Union["TVMVariable", str]) -> "TVMVariable":
        """Look up a variable by name, case-insensitively.

        Raises ``UnsupportedVariableError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.upper() == value.strip().upper():
                    return member
        raise UnsupportedVariableError(value)


class TenureUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class LoanTerms(NamedTuple):
    """Inputs of an EMI calculation."""

    principal: float
    annual_rate: float  # percent
    tenure_months: int


@dataclass(frozen=True)
class EMIResult:
    """Outcome of an EMI calculation.

    Attributes
    ----------
    emi: float
        The equated monthly installment.
    total_interest: float
        Interest paid over the whole tenure.
    total_amount: float
        Sum of all installments (principal plus interest).
    """

    emi: float
    total_interest: float
    total_amount: float


@dataclass(frozen=True)
class LoanComparison:
    """Side-by-side comparison of two loans.

    Differences are absolute values. ``better_option`` is ``1`` when the
    first loan costs strictly less in total, otherwise ``2``.
    """

    first: EMIResult
    second: EMIResult
    emi_difference: float
    interest_difference: float
    total_savings: float
    better_option: int


@dataclass(frozen=True)
class TVMInputs:
    """The caller's inputs to ``calculate_tvm``, echoed in the result."""

    present_value: float
    future_value: float
    payment_per_period: float
    number_of_periods: float  # in years
    interest_rate: float  # annual nominal rate in percent
    compounding_frequency: CompoundingFrequency
    payment_timing: PaymentTiming


@dataclass(frozen=True)
class TVMResult:
    """Outcome of a TVM calculation.

    ``calculated_value`` is ``None`` when the inputs admit no solution
    (for example zero payment together with zero present value). Values
    for ``N`` are expressed in years and values for ``Rate`` as an annual
    percentage.
    """

    calculated_variable: TVMVariable
    calculated_value: Optional[float]
    inputs: TVMInputs

    @property
    def is_defined(self) -> bool:
        return self.calculated_value is not None


@dataclass(frozen=True)
class PPFResult:
    total_investment: int
    interest_earned: int
    maturity_amount: int


@dataclass(frozen=True)
class FDResult:
    principal: float
    maturity_amount: int
    interest_earned: int
    tenure_months: int
    annual_rate: float


@dataclass(frozen=True)
class RDResult:
    monthly_deposit: float
    maturity_amount: int
    total_deposit: int
    interest_earned: int
    tenure_months: int
    annual_rate: float


@dataclass(frozen=True)
class SIPResult:
    monthly_investment: float
    future_value: int
    total_investment: int
    estimated_returns: int
    tenure_years: int
    expected_return: float


@dataclass(frozen=True)
class GSTResult:
    """Outcome of a GST calculation.

    Attributes
    ----------
    net_amount: float
        Amount exclusive of GST.
    gst_amount: float
        The tax component.
    total_amount: float
        Amount inclusive of GST.
    gst_rate: float
        The GST rate in percent.
    is_add_gst: bool
        ``True`` when GST was added to a GST-exclusive amount, ``False`` when
        it was removed from a GST-inclusive one.
    """

    net_amount: float
    gst_amount: float
    total_amount: float
    gst_rate: float
    is_add_gst: bool


@dataclass
class ValidationResult:
    """Result of validating raw user input.

    Callers must check ``is_valid`` before trusting the inputs; ``errors``
    maps each offending field name to a human-readable message.
    """

    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)
