"""Date ordering for the transaction ledger."""

from collections.abc import Iterable

from src.domain.models.ledger import SortDirection
from src.domain.models.transactions import Transaction


_NEXT_DIRECTION: dict[SortDirection | None, SortDirection | None] = {
    None: SortDirection.ASC,
    SortDirection.ASC: SortDirection.DESC,
    SortDirection.DESC: None,
}


def next_sort_direction(
    direction: SortDirection | None,
) -> SortDirection | None:
    """Advance the date-sort toggle: None -> asc -> desc -> None."""
    return _NEXT_DIRECTION[direction]


def sort_transactions(
    transactions: Iterable[Transaction],
    direction: SortDirection | None = None,
) -> list[Transaction]:
    """Order transactions by date.

    ``None`` and ``desc`` put the most recent first, ``asc`` the oldest.
    Equal dates are always ordered by type then id, ascending.

    Args:
        transactions: Transactions to order.
        direction: Explicit sort direction, or None for the default.

    Returns:
        list[Transaction]: New ordered list.
    """
    ordered = sorted(transactions, key=lambda item: (item.type.value, item.id))
    ordered.sort(
        key=lambda item: item.date,
        reverse=direction is not SortDirection.ASC,
    )
    return ordered


__all__ = ["next_sort_direction", "sort_transactions"]
