"""Cash-flow direction rules per record type."""

from typing import Any

from src.domain.models.transactions import Direction
from src.utils.decimal_utils import is_nonzero


def _income_direction(record: Any) -> Direction:
    return Direction.UP


def _expense_direction(record: Any) -> Direction:
    return Direction.DOWN


def _investment_direction(record: Any) -> Direction:
    order = (getattr(record, "type_of_order", None) or "").strip().lower()
    return Direction.DOWN if order == "buy" else Direction.UP


def _loan_direction(record: Any) -> Direction:
    if is_nonzero(getattr(record, "loan_amount", None)):
        return Direction.DOWN
    return Direction.UP


def _interest_direction(record: Any) -> Direction:
    if is_nonzero(getattr(record, "cost_in", None)):
        return Direction.UP
    return Direction.DOWN


def _tax_direction(record: Any) -> Direction:
    # A zero amount marks a refund row.
    if is_nonzero(getattr(record, "amount", None)):
        return Direction.DOWN
    return Direction.UP


_RULES = {
    "income": _income_direction,
    "expense": _expense_direction,
    "investment": _investment_direction,
    "loan": _loan_direction,
    "interest": _interest_direction,
    "tax": _tax_direction,
}

DEFAULT_DIRECTION = Direction.DOWN


def resolve_direction(kind: str, record: Any) -> Direction:
    """Return the cash-flow direction for a raw record.

    Args:
        kind: Logical record type (income, expense, ...).
        record: Raw record carrying the type-specific fields.

    Returns:
        Direction: ``up`` for inflows, ``down`` for outflows. Unknown kinds
        resolve to ``DEFAULT_DIRECTION``.
    """
    rule = _RULES.get(str(kind).strip().lower())
    if rule is None:
        return DEFAULT_DIRECTION
    return rule(record)


def is_known_kind(kind: str) -> bool:
    """Return True when a direction rule exists for the kind."""
    return str(kind).strip().lower() in _RULES


__all__ = ["DEFAULT_DIRECTION", "resolve_direction", "is_known_kind"]
