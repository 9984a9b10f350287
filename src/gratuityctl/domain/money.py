"""Decimal helpers for monetary values."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

MONEY_PLACES = Decimal("0.01")


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a numeric value to Decimal (floats go through ``str``)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def money(value: int | float | str | Decimal) -> Decimal:
    """Round to two decimal places using ROUND_HALF_UP."""
    return to_decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def format_amount(value: int | float | str | Decimal) -> str:
    """Format as ``1,234.56`` — two places with thousands separators."""
    return f"{money(value):,.2f}"


def format_money(value: int | float | str | Decimal, currency: str = "AED") -> str:
    """Format with a currency label, e.g. ``AED 1,234.56``."""
    return f"{currency} {format_amount(value)}"
