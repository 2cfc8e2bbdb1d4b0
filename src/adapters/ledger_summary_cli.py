"""CLI adapter printing ledger statistics.

Filters are read from ``LEDGER_TYPE``, ``LEDGER_YEAR`` and
``LEDGER_SEARCH`` environment variables.
"""

import os

from src.application.use_cases.get_transaction_ledger import (
    GetTransactionLedgerUseCase,
)
from src.domain.constants import TYPE_OPTIONS
from src.domain.models.ledger import FilterState
from src.infrastructure.container import build_finance_records_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def _read_filter_state(logger) -> FilterState:
    """Build a filter state from environment variables.

    Args:
        logger: Logger used for warnings.

    Returns:
        FilterState: Filters for the summary.
    """
    transaction_type = os.getenv("LEDGER_TYPE", "all").strip().lower()
    if transaction_type not in TYPE_OPTIONS:
        logger.warning(
            f"Unknown LEDGER_TYPE '{transaction_type}'. "
            f"Expected one of {', '.join(TYPE_OPTIONS)}."
        )
        transaction_type = "all"
    year = os.getenv("LEDGER_YEAR", "").strip()
    return FilterState.create(
        search=os.getenv("LEDGER_SEARCH", ""),
        transaction_type=transaction_type,
        years=[year] if year else [],
    )


def main() -> None:
    """Print count, total and averages for the ledger."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    repository = build_finance_records_repository(settings=settings)
    use_case = GetTransactionLedgerUseCase(
        records_repository=repository,
        logger=logger,
    )

    view = use_case.execute(filter_state=_read_filter_state(logger))
    stats = view.statistics
    symbol = settings.currency_symbol

    print(f"Transactions:    {stats.count}")
    print(f"Total:           {symbol}{stats.total:,.2f}")
    print(f"Average:         {symbol}{stats.average:,.2f}")
    print(
        f"Monthly average: {symbol}{stats.monthly_average:,.2f} "
        f"over {stats.month_count} months"
    )
    print(f"Inflow:          {symbol}{view.totals.inflow:,.2f}")
    print(f"Outflow:         {symbol}{view.totals.outflow:,.2f}")
    for kind in view.unavailable_sources:
        print(f"Warning: {kind} records could not be loaded.")


if __name__ == "__main__":  # pragma: no cover
    main()
