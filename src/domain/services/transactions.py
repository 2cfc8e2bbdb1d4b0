"""Normalize raw finance records into unified ledger transactions."""

from collections.abc import Callable, Iterable, Mapping
from logging import Logger
from typing import Any

from src.domain.constants import UNKNOWN_DATE
from src.domain.models.records import (
    RECORD_TYPES,
    ExpenseRecord,
    IncomeRecord,
    InterestRecord,
    InvestmentRecord,
    LoanRecord,
    RecordCollections,
    TaxRecord,
)
from src.domain.models.transactions import Transaction, TransactionType
from src.domain.policies.direction import resolve_direction
from src.domain.services.normalization import (
    normalize_text,
    parse_date_key,
)
from src.utils.decimal_utils import coerce_amount, is_nonzero


def _date_key(kind: str, record: Any, logger: Logger | None) -> str:
    key = parse_date_key(record.year, record.month, record.day)
    if key is not None:
        return key
    if logger is not None:
        logger.warning(
            f"Invalid date on {kind} record id={record.id}: "
            f"year={record.year!r} month={record.month!r} "
            f"day={record.day!r}; using {UNKNOWN_DATE}"
        )
    return UNKNOWN_DATE


def _record_id(record: Any) -> int:
    try:
        return int(record.id) if record.id is not None else 0
    except (TypeError, ValueError):
        return 0


def normalize_income(
    record: IncomeRecord,
    logger: Logger | None = None,
) -> Transaction:
    """Map an income row; legacy rows are labelled ``Salary``."""
    amount = record.salary if record.is_legacy else record.amount
    return Transaction(
        id=_record_id(record),
        date=_date_key("income", record, logger),
        description=normalize_text(record.name, "Salary"),
        category=normalize_text(record.type, "Income"),
        amount=coerce_amount(amount),
        type=TransactionType.INCOME,
        direction=resolve_direction("income", record),
    )


def normalize_expense(
    record: ExpenseRecord,
    logger: Logger | None = None,
) -> Transaction:
    """Map an expense row; its category both describes and groups it."""
    return Transaction(
        id=_record_id(record),
        date=_date_key("expense", record, logger),
        description=normalize_text(record.category, "Expense"),
        category=normalize_text(record.category, "Other"),
        amount=coerce_amount(record.cost),
        type=TransactionType.EXPENSE,
        direction=resolve_direction("expense", record),
    )


def normalize_investment(
    record: InvestmentRecord,
    logger: Logger | None = None,
) -> Transaction:
    return Transaction(
        id=_record_id(record),
        date=_date_key("investment", record, logger),
        description=normalize_text(record.name, "Investment"),
        category=normalize_text(record.type, "Investment"),
        amount=coerce_amount(record.cost),
        type=TransactionType.INVESTMENT,
        direction=resolve_direction("investment", record),
    )


def normalize_loan(
    record: LoanRecord,
    logger: Logger | None = None,
) -> Transaction:
    """Map a loan row as either a borrowing or a repayment."""
    name = normalize_text(record.name, "Loan")
    if is_nonzero(record.loan_amount):
        description = f"Borrowed By {name}"
        amount = record.loan_amount
    else:
        description = f"Repayment To {name}"
        amount = record.loan_repayment
    return Transaction(
        id=_record_id(record),
        date=_date_key("loan", record, logger),
        description=description,
        category=normalize_text(record.type, "Loan"),
        amount=coerce_amount(amount),
        type=TransactionType.LOAN,
        direction=resolve_direction("loan", record),
    )


def normalize_interest(
    record: InterestRecord,
    logger: Logger | None = None,
) -> Transaction:
    """Map an interest row as earned (cost_in) or paid (cost_out)."""
    amount = record.cost_in if is_nonzero(record.cost_in) else record.cost_out
    return Transaction(
        id=_record_id(record),
        date=_date_key("interest", record, logger),
        description=normalize_text(record.name, "Interest"),
        category=normalize_text(record.type, "Interest"),
        amount=coerce_amount(amount),
        type=TransactionType.INTEREST,
        direction=resolve_direction("interest", record),
    )


def normalize_tax(
    record: TaxRecord,
    logger: Logger | None = None,
) -> Transaction:
    return Transaction(
        id=_record_id(record),
        date=_date_key("tax", record, logger),
        description=normalize_text(record.name, "Tax"),
        category=normalize_text(record.type, "Tax"),
        amount=coerce_amount(record.amount),
        type=TransactionType.TAX,
        direction=resolve_direction("tax", record),
    )


_NORMALIZERS: dict[str, Callable[[Any, Logger | None], Transaction]] = {
    "income": normalize_income,
    "expense": normalize_expense,
    "investment": normalize_investment,
    "loan": normalize_loan,
    "interest": normalize_interest,
    "tax": normalize_tax,
}


def normalize_records(
    collections: RecordCollections
    | Mapping[str, Iterable[Any] | None]
    | None,
    *,
    logger: Logger | None = None,
) -> list[Transaction]:
    """Flatten the six record collections into one transaction list.

    Output order is income, expense, investment, loan, interest, tax, each
    in source order. Absent collections contribute nothing.

    Args:
        collections: Typed collections, or raw rows keyed by logical name.
        logger: Optional logger for skipped sources and invalid dates.

    Returns:
        list[Transaction]: Normalized transactions.
    """
    if collections is None:
        return []
    if not isinstance(collections, RecordCollections):
        unknown = sorted(set(collections) - set(RECORD_TYPES))
        if unknown and logger is not None:
            logger.warning(
                f"Ignoring unknown record sources: {', '.join(unknown)}"
            )
        collections = RecordCollections.from_mapping(collections)

    transactions: list[Transaction] = []
    for kind, records in collections.items():
        if not records:
            continue
        normalize = _NORMALIZERS[kind]
        transactions.extend(normalize(record, logger) for record in records)
    return transactions


__all__ = [
    "normalize_income",
    "normalize_expense",
    "normalize_investment",
    "normalize_loan",
    "normalize_interest",
    "normalize_tax",
    "normalize_records",
]
