"""Utility functions for the finance calculators.

This module provides the rounding helpers that every calculator applies to
its outputs and a strict parser for numeric strings typed by a user.
Rounding goes through ``Decimal`` built from the shortest ``repr`` of the
float, so that values such as ``1234.565`` round the way they read rather
than the way their binary approximation happens to fall.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]

TWO_PLACES = Decimal("0.01")
WHOLE = Decimal("1")


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def round_money(value: Number) -> float:
    """Round ``value`` to 2 decimal places, halves away from zero.

    Non-finite floats are returned unchanged.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return float(to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def round_rupee(value: Number) -> int:
    """Round ``value`` to the nearest whole rupee, halves away from zero."""
    return int(to_decimal(value).quantize(WHOLE, rounding=ROUND_HALF_UP))


def parse_number(value: str) -> float:
    """Convert a numeric string into a ``float``.

    Surrounding whitespace and thousands separators (in either Western or
    Indian grouping) are ignored. Raises ``ValueError`` if the string is not
    a number (NaN included).
    """
    cleaned = value.strip().replace(",", "")
    try:
        number = float(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    if math.isnan(number):
        raise ValueError(f"Invalid numeric value: {value}")
    return number
