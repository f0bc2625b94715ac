"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
import re
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP, InvalidOperation
from typing import Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Strips currency symbols, thousands separators and whitespace from "$3,899.99"
_DISPLAY_PRICE_NOISE = re.compile(r"[^\d.\-]")

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_display_price(value: Number) -> Decimal:
    """
    Parse a price that may be a formatted display string.

    "$3,899.99" -> Decimal("3899.99"). Unlike to_decimal, nothing is
    coerced to zero: None, bools and other types are rejected.

    Raises:
        ValueError: if the value holds no finite amount
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValueError(f"Unparsable price: {value!r}")

    if isinstance(value, str):
        cleaned = _DISPLAY_PRICE_NOISE.sub("", value)
        if not cleaned:
            raise ValueError(f"Unparsable price: {value!r}")
        try:
            price = Decimal(cleaned)
        except InvalidOperation:
            raise ValueError(f"Unparsable price: {value!r}")
    else:
        price = to_decimal(value)

    if not price.is_finite():
        raise ValueError(f"Unparsable price: {value!r}")
    return price


def round_money(value: Number) -> Decimal:
    """Round monetary value half-up to the cent."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def floor_money(value: Number) -> Decimal:
    """
    Truncate monetary value down to the cent.

    Cart totals are floored, never rounded up: 1599.989 -> 1599.98.
    """
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_FLOOR)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number, currency: str = "$") -> str:
    """
    Format monetary value with the configured currency.

    Symbols (one character, e.g. "$", "€") are prefixed; codes ("USD") are
    suffixed after a space.
    """
    formatted = f"{round_money(value):,.2f}"
    if len(currency) == 1:
        return f"{currency}{formatted}"
    return f"{formatted} {currency}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
