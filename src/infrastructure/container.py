"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_records import FinanceRecordsPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_records_repository import (
    SqlAlchemyFinanceRecordsRepository,
)
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_records_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
    create_tables: bool = False,
) -> FinanceRecordsPort:
    """Return the finance records repository.

    Args:
        db_port: Database adapter; the default adapter when omitted.
        settings: Ledger settings; read from the environment when omitted.
        create_tables: Create missing record tables before returning.

    Returns:
        FinanceRecordsPort: Repository bound to the finance database.
    """
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    repository = SqlAlchemyFinanceRecordsRepository(
        resolved_db,
        fetch_limit=resolved_settings.fetch_limit,
    )
    if create_tables:
        repository.ensure_schema()
    return repository


__all__ = [
    "build_database_adapter",
    "build_finance_records_repository",
]
