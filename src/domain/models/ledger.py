"""Domain models for ledger filtering, sorting and statistics."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from src.domain.constants import ALL_TYPES, MONTH_OPTIONS, TYPE_OPTIONS
from src.domain.models.transactions import Direction, Transaction


class SortDirection(str, Enum):
    """Explicit date sort; ``None`` stands for the default ordering."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FilterState:
    """Active ledger facets, combined with logical AND.

    Empty sets, an empty search and the ``all`` type impose no constraint.
    """

    search: str = ""
    transaction_type: str = ALL_TYPES
    years: frozenset[str] = field(default_factory=frozenset)
    months: frozenset[str] = field(default_factory=frozenset)
    categories: frozenset[str] = field(default_factory=frozenset)
    descriptions: frozenset[str] = field(default_factory=frozenset)
    directions: frozenset[Direction] = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        search: str | None = "",
        transaction_type: str | None = ALL_TYPES,
        years: Iterable[str] = (),
        months: Iterable[str] = (),
        categories: Iterable[str] = (),
        descriptions: Iterable[str] = (),
        directions: Iterable[str | Direction] = (),
    ) -> "FilterState":
        """Build a state from loose UI selections.

        Args:
            search: Free text; surrounding whitespace is ignored.
            transaction_type: One of the type options; blank means all.
            years: Selected year strings.
            months: Selected month strings; padded to two digits.
            categories: Selected category substrings.
            descriptions: Selected description substrings.
            directions: Selected directions (``up``/``down``).

        Returns:
            FilterState: Immutable filter state.
        """
        return cls(
            search=(search or "").strip(),
            transaction_type=(transaction_type or ALL_TYPES).strip().lower(),
            years=frozenset(str(year) for year in years),
            months=frozenset(str(month).zfill(2) for month in months),
            categories=frozenset(categories),
            descriptions=frozenset(descriptions),
            directions=frozenset(Direction(value) for value in directions),
        )

    @property
    def is_empty(self) -> bool:
        """Return True when no facet constrains the ledger."""
        return (
            not self.search
            and self.transaction_type == ALL_TYPES
            and not self.years
            and not self.months
            and not self.categories
            and not self.descriptions
            and not self.directions
        )

    def with_search(self, search: str | None) -> "FilterState":
        return replace(self, search=(search or "").strip())

    def with_type(self, transaction_type: str | None) -> "FilterState":
        return replace(
            self,
            transaction_type=(transaction_type or ALL_TYPES).strip().lower(),
        )

    def with_years(self, years: Iterable[str]) -> "FilterState":
        return replace(self, years=frozenset(str(year) for year in years))

    def with_months(self, months: Iterable[str]) -> "FilterState":
        return replace(
            self,
            months=frozenset(str(month).zfill(2) for month in months),
        )

    def with_categories(self, categories: Iterable[str]) -> "FilterState":
        return replace(self, categories=frozenset(categories))

    def with_descriptions(self, descriptions: Iterable[str]) -> "FilterState":
        return replace(self, descriptions=frozenset(descriptions))

    def with_directions(
        self,
        directions: Iterable[str | Direction],
    ) -> "FilterState":
        return replace(
            self,
            directions=frozenset(Direction(value) for value in directions),
        )

    def cleared(self) -> "FilterState":
        """Return a state with every facet reset."""
        return FilterState()


@dataclass(frozen=True)
class TransactionStatistics:
    """Running statistics over a ledger slice.

    Attributes:
        count: Number of transactions.
        total: Sum of amounts.
        average: ``total / count`` or 0.
        monthly_average: ``total / month_count`` or 0.
        month_count: Distinct (year, month) pairs.
    """

    count: int
    total: Decimal
    average: Decimal
    monthly_average: Decimal
    month_count: int


@dataclass(frozen=True)
class DirectionTotals:
    """Inflow and outflow totals."""

    inflow: Decimal
    outflow: Decimal

    @property
    def net(self) -> Decimal:
        """Return inflow minus outflow."""
        return self.inflow - self.outflow


@dataclass(frozen=True)
class MonthlyFlow:
    """Inflow and outflow totals for one ``YYYY-MM`` month."""

    month: str
    inflow: Decimal
    outflow: Decimal


@dataclass(frozen=True)
class TransactionFacets:
    """Option lists for the ledger filter selectors."""

    categories: tuple[str, ...] = ()
    descriptions: tuple[str, ...] = ()
    years: tuple[str, ...] = ()


@dataclass(frozen=True)
class TransactionLedgerView:
    """Everything the ledger page renders."""

    transactions: list[Transaction]
    statistics: TransactionStatistics
    facets: TransactionFacets
    totals: DirectionTotals
    monthly_flows: list[MonthlyFlow]
    months: tuple[tuple[str, str], ...] = MONTH_OPTIONS
    types: tuple[str, ...] = TYPE_OPTIONS
    unavailable_sources: tuple[str, ...] = ()


__all__ = [
    "SortDirection",
    "FilterState",
    "TransactionStatistics",
    "DirectionTotals",
    "MonthlyFlow",
    "TransactionFacets",
    "TransactionLedgerView",
]
