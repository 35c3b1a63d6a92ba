"""
Test the command-line interface through click's test runner.
"""
import json

import click
import pytest
from click.testing import CliRunner

from fin_calc.main import cli, parse_amount, parse_loan_string


@pytest.fixture
def runner():
    return CliRunner()


# ============================================================================
# TESTS: amount parsing
# ============================================================================

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("500000", 500_000),
        ("5,00,000", 500_000),
        ("25l", 2_500_000),
        ("25 lakh", 2_500_000),
        ("1.5cr", 15_000_000),
        ("2 Crore", 20_000_000),
        ("2k", 2_000),
        ("-1000", -1_000),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


def test_parse_amount_rejects_garbage():
    with pytest.raises(click.BadParameter):
        parse_amount("ten lakh")


def test_parse_loan_string():
    terms = parse_loan_string("5l:8.5:12")

    assert terms.principal == 500_000
    assert terms.annual_rate == 8.5
    assert terms.tenure_months == 12


def test_parse_loan_string_needs_three_parts():
    with pytest.raises(click.BadParameter):
        parse_loan_string("5l:8.5")


# ============================================================================
# TESTS: emi / compare
# ============================================================================

def test_emi_command(runner):
    result = runner.invoke(cli, ["emi", "-p", "10l", "-r", "8.5", "-t", "240"])

    assert result.exit_code == 0, result.output
    assert "₹8,678.23" in result.output


def test_emi_command_in_years(runner):
    months = runner.invoke(cli, ["emi", "-p", "10l", "-r", "8.5", "-t", "240"])
    years = runner.invoke(cli, ["emi", "-p", "10l", "-r", "8.5", "-t", "20", "--unit", "years"])

    assert years.exit_code == 0, years.output
    assert years.output == months.output


def test_emi_command_json(runner):
    result = runner.invoke(cli, ["emi", "-p", "10l", "-r", "8.5", "-t", "240", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["emi"] == pytest.approx(8678.23, abs=0.1)
    assert set(payload) == {"emi", "total_interest", "total_amount"}


def test_emi_command_reports_all_errors(runner):
    result = runner.invoke(cli, ["emi", "-p", "0", "-r", "150", "-t", "0"])

    assert result.exit_code == 2
    assert "Loan amount must be greater than zero" in result.output
    assert "Interest rate cannot exceed 100%" in result.output
    assert "Tenure must be greater than zero" in result.output


def test_compare_command(runner):
    result = runner.invoke(cli, ["compare", "--loan1", "5l:8.5:12", "--loan2", "5l:9.5:12"])

    assert result.exit_code == 0, result.output
    assert "Loan 1 is cheaper overall." in result.output


# ============================================================================
# TESTS: tvm
# ============================================================================

def test_tvm_solves_for_years(runner):
    result = runner.invoke(cli, ["tvm", "--solve", "N", "--pv=-1000", "--fv", "2000", "-r", "7"])

    assert result.exit_code == 0, result.output
    assert "10.24 years" in result.output


def test_tvm_solve_is_case_insensitive(runner):
    result = runner.invoke(cli, ["tvm", "--solve", "rate", "--pv=-1000", "--fv", "1500", "-n", "5"])

    assert result.exit_code == 0, result.output
    assert "8.45% per annum" in result.output


def test_tvm_without_solution(runner):
    result = runner.invoke(cli, ["tvm", "--solve", "N", "--fv", "1000", "-r", "5"])

    assert result.exit_code == 0, result.output
    assert "No solution" in result.output


def test_tvm_json_keeps_missing_value_as_null(runner):
    result = runner.invoke(cli, ["tvm", "--solve", "N", "--fv", "1000", "-r", "5", "--json"])

    payload = json.loads(result.output)
    assert payload["calculated_value"] is None
    assert payload["calculated_variable"] == "N"


def test_tvm_rejects_all_zero_inputs(runner):
    result = runner.invoke(cli, ["tvm", "--solve", "N"])

    assert result.exit_code == 2
    assert "Please enter at least one non-zero value" in result.output


# ============================================================================
# TESTS: savings and tax commands
# ============================================================================

def test_ppf_command(runner):
    result = runner.invoke(cli, ["ppf", "-d", "50000"])

    assert result.exit_code == 0, result.output
    assert "₹7,50,000.00" in result.output


def test_ppf_command_rejects_small_deposit(runner):
    result = runner.invoke(cli, ["ppf", "-d", "100"])

    assert result.exit_code == 2
    assert "Minimum deposit is ₹500" in result.output


def test_fd_command(runner):
    result = runner.invoke(cli, ["fd", "-p", "1l", "-r", "8", "-m", "12"])

    assert result.exit_code == 0, result.output
    assert "₹1,08,243.00" in result.output


def test_rd_command(runner):
    result = runner.invoke(cli, ["rd", "-d", "1k", "-r", "12", "-m", "12"])

    assert result.exit_code == 0, result.output
    assert "₹12,809.00" in result.output


def test_rd_command_rejects_zero_deposit(runner):
    result = runner.invoke(cli, ["rd", "-d", "0", "-r", "12", "-m", "12"])

    assert result.exit_code == 2
    assert "Monthly deposit must be greater than zero" in result.output


def test_rd_command_rejects_out_of_range_terms(runner):
    result = runner.invoke(cli, ["rd", "-d", "1000", "-r", "500", "-m", "5000"])

    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Interest rate must be between 0% and 15%" in result.output
    assert "Tenure must be between 3 and 120 months" in result.output


def test_sip_command_json(runner):
    result = runner.invoke(cli, ["sip", "-i", "1000", "-y", "1", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["future_value"] == 12_809


def test_gst_add_and_remove(runner):
    added = runner.invoke(cli, ["gst", "-a", "1000"])
    removed = runner.invoke(cli, ["gst", "-a", "1180", "--remove"])

    assert "₹1,180.00" in added.output
    assert "GST @ 18% (removed)" in removed.output
    assert "₹1,000.00" in removed.output
