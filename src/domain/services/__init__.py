"""Domain services package."""

from .facets import enumerate_facets
from .filtering import filter_transactions, matches_filters
from .normalization import (
    build_date_key,
    normalize_text,
    parse_date_key,
    zero_pad,
)
from .sorting import next_sort_direction, sort_transactions
from .statistics import (
    compute_transaction_statistics,
    split_by_direction,
    summarize_by_month,
)
from .transactions import (
    normalize_expense,
    normalize_income,
    normalize_interest,
    normalize_investment,
    normalize_loan,
    normalize_records,
    normalize_tax,
)
from .validation import RecordValidationError, validate_record_draft

__all__ = [
    "RecordValidationError",
    "build_date_key",
    "compute_transaction_statistics",
    "enumerate_facets",
    "filter_transactions",
    "matches_filters",
    "next_sort_direction",
    "normalize_expense",
    "normalize_income",
    "normalize_interest",
    "normalize_investment",
    "normalize_loan",
    "normalize_records",
    "normalize_tax",
    "normalize_text",
    "parse_date_key",
    "sort_transactions",
    "split_by_direction",
    "summarize_by_month",
    "validate_record_draft",
    "zero_pad",
]
