"""Database port for the finance ledger dashboard.

Repositories reach the six record tables through this protocol, so the
engine configuration stays in the infrastructure layer.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the finance records database engine."""

    def get_finance_engine(self) -> Engine:
        """Return the engine holding the record tables.

        Returns:
            Engine: SQLAlchemy engine for the finance records database.
        """


__all__ = ["DatabaseEnginePort"]
