"""Filter option enumeration for the transaction ledger."""

from collections.abc import Iterable

from src.domain.models.ledger import TransactionFacets
from src.domain.models.transactions import Transaction


def enumerate_facets(
    transactions: Iterable[Transaction],
) -> TransactionFacets:
    """Collect distinct categories, descriptions and years.

    Pass the unfiltered ledger so that option lists do not shrink as
    facets are selected.

    Args:
        transactions: Full normalized transaction list.

    Returns:
        TransactionFacets: Categories and descriptions ascending, years
        most recent first.
    """
    categories: set[str] = set()
    descriptions: set[str] = set()
    years: set[str] = set()
    for item in transactions:
        if item.category:
            categories.add(item.category)
        if item.description:
            descriptions.add(item.description)
        years.add(item.year)
    return TransactionFacets(
        categories=tuple(sorted(categories)),
        descriptions=tuple(sorted(descriptions)),
        years=tuple(sorted(years, reverse=True)),
    )


__all__ = ["enumerate_facets"]
