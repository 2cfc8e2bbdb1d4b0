"""Domain validation helpers for new finance records."""

from collections.abc import Mapping
from datetime import date
import math
from typing import Any

from src.domain.models.records import RECORD_TYPES
from src.domain.services.normalization import normalize_text, parse_date_key


class RecordValidationError(ValueError):
    """Raised when a record draft is missing required fields.

    Attributes:
        kind: Logical record type of the draft.
        fields: Names of the missing or invalid fields.
    """

    def __init__(self, kind: str, fields: list[str]) -> None:
        self.kind = kind
        self.fields = fields
        super().__init__(
            f"Invalid {kind} record: please fill in {', '.join(fields)}"
        )


# kind -> (required text, required numbers, optional text, optional numbers)
_FIELD_RULES: dict[str, tuple[tuple[str, ...], ...]] = {
    "income": ((), ("amount",), ("name", "type"), ()),
    "expense": (("category",), ("cost",), ("type",), ()),
    "investment": (
        ("name",),
        ("cost",),
        ("type", "folio_number", "type_of_order"),
        ("units", "nav"),
    ),
    "loan": (
        ("name",),
        ("loan_amount",),
        ("type",),
        ("interest", "loan_repayment", "cost"),
    ),
    "interest": (("name",), (), ("type",), ("cost_in", "cost_out")),
    "tax": (("name",), (), ("type",), ("amount", "refund")),
}

# kind -> numeric fields of which at least one must be non-zero
_ONE_OF: dict[str, tuple[str, str]] = {
    "interest": ("cost_in", "cost_out"),
    "tax": ("amount", "refund"),
}


def _parse_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _date_fields(
    draft: Mapping[str, Any],
    today: date,
) -> tuple[dict[str, str], bool]:
    year = normalize_text(draft.get("year"), str(today.year))
    month = normalize_text(draft.get("month"), f"{today.month:02d}")
    day = normalize_text(draft.get("day"), f"{today.day:02d}")
    key = parse_date_key(year, month, day)
    if key is None:
        return {}, False
    padded_year, padded_month, padded_day = key.split("-")
    return {
        "financial_year": normalize_text(
            draft.get("financial_year"),
            padded_year,
        ),
        "year": padded_year,
        "month": padded_month,
        "day": padded_day,
    }, True


def validate_record_draft(
    kind: str,
    draft: Mapping[str, Any],
    *,
    today: date,
) -> dict[str, Any]:
    """Validate and clean a record draft entered through a form.

    Date fields default to ``today``; month and day are zero-padded.
    Optional numeric fields parse leniently to 0.

    Args:
        kind: Logical record type (income, expense, ...).
        draft: Raw form values.
        today: Date used for missing date fields.

    Returns:
        dict[str, Any]: Row ready to be persisted.

    Raises:
        RecordValidationError: If the kind is unknown or required fields
            are missing or not numeric.
    """
    if kind not in RECORD_TYPES:
        raise RecordValidationError(kind, ["type"])
    required_text, required_numbers, optional_text, optional_numbers = (
        _FIELD_RULES[kind]
    )

    row, date_ok = _date_fields(draft, today)
    missing: list[str] = [] if date_ok else ["date"]

    for name in required_text:
        value = normalize_text(draft.get(name))
        if not value:
            missing.append(name)
        row[name] = value
    for name in required_numbers:
        number = _parse_number(draft.get(name))
        if number is None:
            missing.append(name)
        row[name] = number
    for name in optional_text:
        row[name] = normalize_text(draft.get(name)) or None
    for name in optional_numbers:
        row[name] = _parse_number(draft.get(name)) or 0.0

    one_of = _ONE_OF.get(kind)
    if one_of and not any(row[name] for name in one_of):
        missing.append(" or ".join(one_of))
    if kind == "interest":
        row["credit_in"] = 1 if row["cost_in"] else 0

    if missing:
        raise RecordValidationError(kind, missing)
    return row


__all__ = ["RecordValidationError", "validate_record_draft"]
