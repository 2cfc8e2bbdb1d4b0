"""Running statistics over ledger slices."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.models.ledger import (
    DirectionTotals,
    MonthlyFlow,
    TransactionStatistics,
)
from src.domain.models.transactions import Direction, Transaction


def compute_transaction_statistics(
    transactions: Sequence[Transaction],
) -> TransactionStatistics:
    """Compute count, total and averages for a ledger slice.

    Args:
        transactions: Filtered and sorted transactions.

    Returns:
        TransactionStatistics: Aggregates; averages are 0 for empty input.
    """
    count = len(transactions)
    total = sum((item.amount for item in transactions), start=Decimal("0"))
    month_count = len({(item.year, item.month) for item in transactions})
    average = total / count if count else Decimal("0")
    monthly_average = total / month_count if month_count else Decimal("0")
    return TransactionStatistics(
        count=count,
        total=total,
        average=average,
        monthly_average=monthly_average,
        month_count=month_count,
    )


def split_by_direction(
    transactions: Iterable[Transaction],
) -> DirectionTotals:
    """Return inflow and outflow totals."""
    inflow = Decimal("0")
    outflow = Decimal("0")
    for item in transactions:
        if item.direction is Direction.UP:
            inflow += item.amount
        else:
            outflow += item.amount
    return DirectionTotals(inflow=inflow, outflow=outflow)


def summarize_by_month(
    transactions: Iterable[Transaction],
) -> list[MonthlyFlow]:
    """Return per-month inflow/outflow totals, oldest month first."""
    totals: dict[str, list[Decimal]] = {}
    for item in transactions:
        bucket = totals.setdefault(
            f"{item.year}-{item.month}",
            [Decimal("0"), Decimal("0")],
        )
        if item.direction is Direction.UP:
            bucket[0] += item.amount
        else:
            bucket[1] += item.amount
    return [
        MonthlyFlow(month=month, inflow=inflow, outflow=outflow)
        for month, (inflow, outflow) in sorted(totals.items())
    ]


__all__ = [
    "compute_transaction_statistics",
    "split_by_direction",
    "summarize_by_month",
]
