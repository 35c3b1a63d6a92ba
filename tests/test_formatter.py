"""
Test Indian currency formatting and the terminal renderers.
"""
from decimal import Decimal

import pytest

from fin_calc.data_models import EMIResult, TVMInputs, TVMResult, TVMVariable, CompoundingFrequency, PaymentTiming
from fin_calc.formatter import format_indian_currency, format_tvm_value, group_indian, print_emi, print_gst
from fin_calc.engine import calculate_gst


# ============================================================================
# TESTS: format_indian_currency
# ============================================================================

@pytest.mark.parametrize(
    "amount, expected",
    [
        (100, "₹100.00"),
        (999, "₹999.00"),
        (1000, "₹1,000.00"),
        (10000, "₹10,000.00"),
        (99999, "₹99,999.00"),
        (100000, "₹1,00,000.00"),
        (1000000, "₹10,00,000.00"),
        (9999999, "₹99,99,999.00"),
        (10000000, "₹1,00,00,000.00"),
        (100000000, "₹10,00,00,000.00"),
    ],
)
def test_format_groups_lakhs_and_crores(amount, expected):
    assert format_indian_currency(amount) == expected


def test_format_rounds_to_two_places():
    assert format_indian_currency(1234.567) == "₹1,234.57"
    assert format_indian_currency(1234.564) == "₹1,234.56"
    assert format_indian_currency(1234.5) == "₹1,234.50"


def test_format_rounds_half_away_from_zero():
    """1234.565 reads as an exact half and rounds up."""
    assert format_indian_currency(1234.565) == "₹1,234.57"
    assert format_indian_currency(-1234.565) == "-₹1,234.57"
    assert format_indian_currency(0.005) == "₹0.01"


def test_format_zero():
    assert format_indian_currency(0) == "₹0.00"
    assert format_indian_currency(0.0) == "₹0.00"


def test_format_negative_amounts():
    assert format_indian_currency(-1000) == "-₹1,000.00"
    assert format_indian_currency(-100000) == "-₹1,00,000.00"


def test_format_accepts_decimal():
    assert format_indian_currency(Decimal("2500000.5")) == "₹25,00,000.50"


def test_format_large_integer_keeps_every_digit():
    assert format_indian_currency(10 ** 12) == "₹10,00,00,00,00,000.00"


def test_group_indian():
    assert group_indian("1") == "1"
    assert group_indian("123") == "123"
    assert group_indian("1234") == "1,234"
    assert group_indian("1234567") == "12,34,567"
    assert group_indian("123456789") == "12,34,56,789"


# ============================================================================
# TESTS: renderers
# ============================================================================

def _tvm_result(variable, value):
    inputs = TVMInputs(0, 0, 0, 10, 5, CompoundingFrequency.ANNUALLY, PaymentTiming.END)
    return TVMResult(calculated_variable=variable, calculated_value=value, inputs=inputs)


def test_format_tvm_value_units():
    assert format_tvm_value(_tvm_result(TVMVariable.N, 10.24)) == "10.24 years"
    assert format_tvm_value(_tvm_result(TVMVariable.RATE, 8.45)) == "8.45% per annum"
    assert format_tvm_value(_tvm_result(TVMVariable.PV, 6139.13)) == "₹6,139.13"


def test_format_tvm_value_no_solution():
    assert format_tvm_value(_tvm_result(TVMVariable.N, None)) == "No solution"


def test_print_emi(capsys):
    print_emi(EMIResult(emi=8678.23, total_interest=1082775.2, total_amount=2082775.2))
    out = capsys.readouterr().out
    assert "₹8,678.23" in out
    assert "₹10,82,775.20" in out
    assert "₹20,82,775.20" in out


def test_print_gst(capsys):
    print_gst(calculate_gst(1000, 18, True))
    out = capsys.readouterr().out
    assert "GST @ 18% (added)" in out
    assert "₹1,180.00" in out


def test_format_tvm_value_overflow():
    assert format_tvm_value(_tvm_result(TVMVariable.FV, float("inf"))) == "Too large to display"
