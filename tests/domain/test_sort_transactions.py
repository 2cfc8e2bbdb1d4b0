"""Tests for the ledger date sorter."""

from decimal import Decimal

from src.domain.models import (
    Direction,
    SortDirection,
    Transaction,
    TransactionType,
)
from src.domain.services.sorting import next_sort_direction, sort_transactions


def _tx(tx_id: int, date: str, tx_type=TransactionType.EXPENSE) -> Transaction:
    return Transaction(
        id=tx_id,
        date=date,
        description="d",
        category="c",
        amount=Decimal("1"),
        type=tx_type,
        direction=Direction.DOWN,
    )


LEDGER = [
    _tx(1, "2024-01-15"),
    _tx(2, "2023-05-01"),
    _tx(3, "2024-03-02"),
]


def test_default_sort_is_newest_first() -> None:
    assert [item.id for item in sort_transactions(LEDGER)] == [3, 1, 2]


def test_explicit_directions() -> None:
    ascending = sort_transactions(LEDGER, SortDirection.ASC)
    descending = sort_transactions(LEDGER, SortDirection.DESC)

    assert [item.id for item in ascending] == [2, 1, 3]
    assert [item.id for item in descending] == [3, 1, 2]


def test_toggle_cycles_through_three_states() -> None:
    state = None
    seen = []
    for _ in range(3):
        state = next_sort_direction(state)
        seen.append(state)

    assert seen == [SortDirection.ASC, SortDirection.DESC, None]
    assert sort_transactions(LEDGER, state) == sort_transactions(LEDGER)


def test_equal_dates_are_ordered_by_type_then_id() -> None:
    """Ties break deterministically in every direction."""
    ledger = [
        _tx(9, "2024-01-01", TransactionType.INCOME),
        _tx(4, "2024-01-01", TransactionType.EXPENSE),
        _tx(2, "2024-01-01", TransactionType.INCOME),
    ]

    for direction in (None, SortDirection.ASC, SortDirection.DESC):
        result = sort_transactions(ledger, direction)
        assert [item.id for item in result] == [4, 2, 9]


def test_sort_returns_new_list() -> None:
    result = sort_transactions(LEDGER)

    assert result is not LEDGER
    assert [item.id for item in LEDGER] == [1, 2, 3]
