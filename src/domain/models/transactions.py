"""Domain models for the unified transaction ledger."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Source kind a transaction was normalized from."""

    INCOME = "income"
    EXPENSE = "expense"
    INVESTMENT = "investment"
    LOAN = "loan"
    INTEREST = "interest"
    TAX = "tax"


class Direction(str, Enum):
    """Cash-flow direction relative to the user."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Transaction:
    """One financial event, whatever record type it came from.

    Attributes:
        id: Source record id (0 when the source had none).
        date: ISO date key ``YYYY-MM-DD``.
        description: Human readable label.
        category: Category or sub-type label.
        amount: Non-negative amount.
        type: Source kind.
        direction: Inflow (up) or outflow (down).
    """

    id: int
    date: str
    description: str
    category: str
    amount: Decimal
    type: TransactionType
    direction: Direction

    @property
    def year(self) -> str:
        return self.date[:4]

    @property
    def month(self) -> str:
        return self.date[5:7]


__all__ = ["TransactionType", "Direction", "Transaction"]
