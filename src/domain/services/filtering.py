"""Compound facet filtering for the transaction ledger."""

from collections.abc import Iterable

from src.domain.constants import ALL_TYPES
from src.domain.models.ledger import FilterState
from src.domain.models.transactions import Transaction


def _contains_any(value: str, needles: frozenset[str]) -> bool:
    lowered = value.lower()
    return any(needle.lower() in lowered for needle in needles)


def matches_filters(transaction: Transaction, state: FilterState) -> bool:
    """Return True when the transaction satisfies every active facet.

    Args:
        transaction: Normalized transaction.
        state: Active filter state.

    Returns:
        bool: Whether the transaction is kept.
    """
    if state.search:
        needle = state.search.lower()
        if (
            needle not in transaction.description.lower()
            and needle not in transaction.category.lower()
        ):
            return False
    if (
        state.transaction_type != ALL_TYPES
        and transaction.type.value != state.transaction_type
    ):
        return False
    if state.years and transaction.year not in state.years:
        return False
    if state.months and transaction.month not in state.months:
        return False
    if state.categories and not _contains_any(
        transaction.category,
        state.categories,
    ):
        return False
    if state.descriptions and not _contains_any(
        transaction.description,
        state.descriptions,
    ):
        return False
    if state.directions and transaction.direction not in state.directions:
        return False
    return True


def filter_transactions(
    transactions: Iterable[Transaction],
    state: FilterState,
) -> list[Transaction]:
    """Return the transactions matching ``state``, in input order."""
    if state.is_empty:
        return list(transactions)
    return [
        transaction
        for transaction in transactions
        if matches_filters(transaction, state)
    ]


__all__ = ["matches_filters", "filter_transactions"]
