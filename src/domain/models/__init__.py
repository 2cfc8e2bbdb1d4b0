"""Domain models package."""

from .ledger import (
    DirectionTotals,
    FilterState,
    MonthlyFlow,
    SortDirection,
    TransactionFacets,
    TransactionLedgerView,
    TransactionStatistics,
)
from .records import (
    RECORD_TYPES,
    ExpenseRecord,
    IncomeRecord,
    InterestRecord,
    InvestmentRecord,
    LoanRecord,
    RecordCollections,
    TaxRecord,
)
from .transactions import Direction, Transaction, TransactionType

__all__ = [
    "Direction",
    "DirectionTotals",
    "ExpenseRecord",
    "FilterState",
    "IncomeRecord",
    "InterestRecord",
    "InvestmentRecord",
    "LoanRecord",
    "MonthlyFlow",
    "RECORD_TYPES",
    "RecordCollections",
    "SortDirection",
    "TaxRecord",
    "Transaction",
    "TransactionFacets",
    "TransactionLedgerView",
    "TransactionStatistics",
    "TransactionType",
]
