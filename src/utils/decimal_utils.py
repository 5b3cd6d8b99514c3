"""Helpers for Decimal normalization of monetary amounts."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Args:
        value: Raw numeric value from SQL rows or JSON payloads.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value) -> Decimal | None:
    """Parse a raw amount, returning None when it is not a finite number.

    Args:
        value: Raw amount (number or numeric string).

    Returns:
        Decimal | None: Parsed amount, or None for missing/unparseable input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


__all__ = ["coerce_decimal", "parse_amount"]
