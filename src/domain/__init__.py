"""Domain package for business rules and core models."""

from .constants import (
    ALL_TYPES,
    MONTH_OPTIONS,
    TRANSACTION_TYPES,
    TYPE_OPTIONS,
    UNKNOWN_DATE,
)
from .models import (
    Direction,
    FilterState,
    RecordCollections,
    SortDirection,
    Transaction,
    TransactionFacets,
    TransactionLedgerView,
    TransactionStatistics,
    TransactionType,
)
from .policies import resolve_direction
from .services import (
    RecordValidationError,
    compute_transaction_statistics,
    enumerate_facets,
    filter_transactions,
    next_sort_direction,
    normalize_records,
    sort_transactions,
    validate_record_draft,
)

__all__ = [
    "ALL_TYPES",
    "MONTH_OPTIONS",
    "TRANSACTION_TYPES",
    "TYPE_OPTIONS",
    "UNKNOWN_DATE",
    "Direction",
    "FilterState",
    "RecordCollections",
    "SortDirection",
    "Transaction",
    "TransactionFacets",
    "TransactionLedgerView",
    "TransactionStatistics",
    "TransactionType",
    "resolve_direction",
    "RecordValidationError",
    "compute_transaction_statistics",
    "enumerate_facets",
    "filter_transactions",
    "next_sort_direction",
    "normalize_records",
    "sort_transactions",
    "validate_record_draft",
]
