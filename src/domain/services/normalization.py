"""Domain normalization helpers."""

from datetime import date

from src.domain.constants import UNKNOWN_DATE


def normalize_text(value: str | None, fallback: str = "") -> str:
    """Strip a raw label, returning ``fallback`` when it is blank.

    Args:
        value: Raw text value from a record.
        fallback: Value used for missing or blank text.

    Returns:
        str: Cleaned text.
    """
    if value is None:
        return fallback
    cleaned = str(value).strip()
    return cleaned if cleaned else fallback


def zero_pad(value: str | int | None, width: int = 2) -> str | None:
    """Zero-pad a numeric date component.

    Args:
        value: Raw component such as ``"1"`` or ``7``.
        width: Target width.

    Returns:
        str | None: Padded digits, or None when the value is not numeric.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    if not cleaned.isdigit():
        return None
    return cleaned.zfill(width)


def parse_date_key(
    year: str | int | None,
    month: str | int | None,
    day: str | int | None,
) -> str | None:
    """Build a ``YYYY-MM-DD`` key, or None when it is not a real date."""
    padded_year = zero_pad(year, 4)
    padded_month = zero_pad(month)
    padded_day = zero_pad(day)
    if padded_year is None or padded_month is None or padded_day is None:
        return None
    key = f"{padded_year}-{padded_month}-{padded_day}"
    try:
        date.fromisoformat(key)
    except ValueError:
        return None
    return key


def build_date_key(
    year: str | int | None,
    month: str | int | None,
    day: str | int | None,
) -> str:
    """Build a ``YYYY-MM-DD`` key, falling back to ``UNKNOWN_DATE``."""
    return parse_date_key(year, month, day) or UNKNOWN_DATE


__all__ = ["normalize_text", "zero_pad", "parse_date_key", "build_date_key"]
