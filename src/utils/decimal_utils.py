"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_amount(value) -> Decimal:
    """Normalize an amount-bearing field to a non-negative finite Decimal.

    Booleans, blanks, non-numeric text, NaN and infinities all become zero.

    Args:
        value: Raw amount from a record source.

    Returns:
        Decimal: Absolute, finite amount.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return Decimal("0")
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return abs(amount)


def is_nonzero(value) -> bool:
    """Return True when a raw amount coerces to a non-zero value."""
    return coerce_amount(value) != 0


__all__ = ["coerce_decimal", "coerce_amount", "is_nonzero"]
