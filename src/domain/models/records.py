"""Domain models for raw finance records.

Each record mirrors one source table as delivered by the fetch layer.
Amount-bearing fields are kept raw; the normalizer coerces them.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


_TRUE_FLAGS = {"1", "true", "yes", "y", "t"}


def _coerce_flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_FLAGS
    try:
        return int(value) != 0
    except (TypeError, ValueError):
        return False


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class IncomeRecord:
    """Income row.

    The legacy schema carries ``salary``/``tax`` and no name; the current
    schema carries ``name``, ``type`` (income source) and ``amount``.
    """

    year: str | None = None
    month: str | None = None
    day: str | None = None
    financial_year: str | None = None
    type: str | None = None
    name: str | None = None
    amount: Any = None
    salary: Any = None
    tax: Any = None
    id: int | None = None

    @property
    def is_legacy(self) -> bool:
        """Return True when the row only carries the legacy salary field."""
        return self.amount is None and self.salary is not None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "IncomeRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            name=_text(row.get("name")),
            amount=row.get("amount"),
            salary=row.get("salary"),
            tax=row.get("tax"),
        )


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense row."""

    year: str | None = None
    month: str | None = None
    day: str | None = None
    type: str | None = None
    category: str | None = None
    cost: Any = None
    financial_year: str | None = None
    id: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "ExpenseRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            category=_text(row.get("category")),
            cost=row.get("cost"),
        )


@dataclass(frozen=True)
class InvestmentRecord:
    """Investment order row (mutual funds, stocks, ...)."""

    year: str | None = None
    month: str | None = None
    day: str | None = None
    type: str | None = None
    folio_number: str | None = None
    name: str | None = None
    type_of_order: str | None = None
    units: Any = None
    nav: Any = None
    cost: Any = None
    financial_year: str | None = None
    id: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "InvestmentRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            folio_number=_text(row.get("folio_number")),
            name=_text(row.get("name")),
            type_of_order=_text(row.get("type_of_order")),
            units=row.get("units"),
            nav=row.get("nav"),
            cost=row.get("cost"),
        )


@dataclass(frozen=True)
class LoanRecord:
    """Loan row; either a borrowing or a repayment."""

    year: str | None = None
    month: str | None = None
    day: str | None = None
    type: str | None = None
    name: str | None = None
    interest: Any = None
    loan_amount: Any = None
    loan_repayment: Any = None
    cost: Any = None
    financial_year: str | None = None
    id: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "LoanRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            name=_text(row.get("name")),
            interest=row.get("interest"),
            loan_amount=row.get("loan_amount"),
            loan_repayment=row.get("loan_repayment"),
            cost=row.get("cost"),
        )


@dataclass(frozen=True)
class InterestRecord:
    """Interest row; ``cost_in`` is earned, ``cost_out`` is paid.

    Attributes:
        credit: Credit flag, decoded from the integer ``credit_in`` column.
    """

    year: str | None = None
    month: str | None = None
    day: str | None = None
    type: str | None = None
    name: str | None = None
    cost_in: Any = None
    cost_out: Any = None
    credit: bool = False
    financial_year: str | None = None
    id: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "InterestRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            name=_text(row.get("name")),
            cost_in=row.get("cost_in"),
            cost_out=row.get("cost_out"),
            credit=_coerce_flag(row.get("credit_in")),
        )


@dataclass(frozen=True)
class TaxRecord:
    """Tax row."""

    year: str | None = None
    month: str | None = None
    day: str | None = None
    type: str | None = None
    name: str | None = None
    amount: Any = None
    refund: Any = None
    financial_year: str | None = None
    id: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "TaxRecord":
        return cls(
            id=row.get("id"),
            year=_text(row.get("year")),
            month=_text(row.get("month")),
            day=_text(row.get("day")),
            financial_year=_text(row.get("financial_year")),
            type=_text(row.get("type")),
            name=_text(row.get("name")),
            amount=row.get("amount"),
            refund=row.get("refund"),
        )


RECORD_TYPES = {
    "income": IncomeRecord,
    "expense": ExpenseRecord,
    "investment": InvestmentRecord,
    "loan": LoanRecord,
    "interest": InterestRecord,
    "tax": TaxRecord,
}


@dataclass(frozen=True)
class RecordCollections:
    """The six raw collections; ``None`` marks an absent collection."""

    income: tuple[IncomeRecord, ...] | None = None
    expense: tuple[ExpenseRecord, ...] | None = None
    investment: tuple[InvestmentRecord, ...] | None = None
    loan: tuple[LoanRecord, ...] | None = None
    interest: tuple[InterestRecord, ...] | None = None
    tax: tuple[TaxRecord, ...] | None = None

    @classmethod
    def from_mapping(
        cls,
        sources: Mapping[str, Iterable[Mapping[str, Any]] | None] | None,
    ) -> "RecordCollections":
        """Build collections from raw rows keyed by logical name.

        Args:
            sources: Mapping of logical name to raw rows; missing keys and
                ``None`` values are treated as absent collections.

        Returns:
            RecordCollections: Typed record collections.
        """
        if not sources:
            return cls()
        collections: dict[str, tuple | None] = {}
        for kind, record_type in RECORD_TYPES.items():
            rows = sources.get(kind)
            if rows is None:
                collections[kind] = None
                continue
            collections[kind] = tuple(
                row if isinstance(row, record_type)
                else record_type.from_mapping(row)
                for row in rows
            )
        return cls(**collections)

    def items(self) -> list[tuple[str, tuple | None]]:
        """Return ``(kind, records)`` pairs in canonical order."""
        return [(kind, getattr(self, kind)) for kind in RECORD_TYPES]


__all__ = [
    "IncomeRecord",
    "ExpenseRecord",
    "InvestmentRecord",
    "LoanRecord",
    "InterestRecord",
    "TaxRecord",
    "RECORD_TYPES",
    "RecordCollections",
]
