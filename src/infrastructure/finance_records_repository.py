"""SQLAlchemy-backed repository for raw finance records."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_records import (
    FinanceRecordsPort,
    RecordsUnavailableError,
    RecordsWriteError,
)


TABLE_NAMES = {
    "income": "income",
    "expense": "expense",
    "investment": "invest",
    "loan": "loan",
    "interest": "interest",
    "tax": "tax",
}

_DATE_COLUMNS = (
    ("financial_year", "TEXT"),
    ("year", "TEXT"),
    ("month", "TEXT"),
    ("day", "TEXT"),
)

TABLE_COLUMNS: dict[str, tuple[tuple[str, str], ...]] = {
    "income": (
        ("type", "TEXT"),
        ("name", "TEXT"),
        ("amount", "REAL"),
        ("salary", "REAL"),
        ("tax", "REAL"),
    ),
    "expense": (
        ("type", "TEXT"),
        ("category", "TEXT"),
        ("cost", "REAL"),
    ),
    "investment": (
        ("type", "TEXT"),
        ("folio_number", "TEXT"),
        ("name", "TEXT"),
        ("type_of_order", "TEXT"),
        ("units", "REAL"),
        ("nav", "REAL"),
        ("cost", "REAL"),
    ),
    "loan": (
        ("type", "TEXT"),
        ("name", "TEXT"),
        ("interest", "REAL"),
        ("loan_amount", "REAL"),
        ("loan_repayment", "REAL"),
        ("cost", "REAL"),
    ),
    "interest": (
        ("type", "TEXT"),
        ("name", "TEXT"),
        ("cost_in", "REAL"),
        ("cost_out", "REAL"),
        ("credit_in", "INTEGER"),
    ),
    "tax": (
        ("type", "TEXT"),
        ("name", "TEXT"),
        ("amount", "REAL"),
        ("refund", "REAL"),
    ),
}


def _sortable(column: str) -> str:
    """Return a SQL expression zero-padding a text date component."""
    value = f"TRIM(CAST({column} AS TEXT))"
    return (
        f"CASE WHEN LENGTH({value}) = 1 THEN '0' || {value} "
        f"ELSE {value} END"
    )


_ORDER_BY = ", ".join(
    f"{_sortable(column)} DESC" for column in ("year", "month", "day")
)


class SqlAlchemyFinanceRecordsRepository(FinanceRecordsPort):
    """Repository reading the six record tables of the finance database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        fetch_limit: int = 100,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            fetch_limit: Maximum rows read per table (0 = no limit).
        """
        self._db_port = db_port
        self._fetch_limit = fetch_limit

    def fetch_records(self, kind: str) -> list[dict[str, Any]]:
        query = self._build_select_query(kind)
        params = {"limit": self._fetch_limit} if self._fetch_limit else {}
        try:
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise RecordsUnavailableError(kind, str(exc)) from exc
        return [dict(row._mapping) for row in rows]

    def add_record(self, kind: str, row: Mapping[str, Any]) -> None:
        if kind not in TABLE_NAMES:
            raise RecordsWriteError(kind, "unknown record type")
        allowed = {name for name, _ in _DATE_COLUMNS}
        allowed.update(name for name, _ in TABLE_COLUMNS[kind])
        values = {key: value for key, value in row.items() if key in allowed}
        columns = ", ".join(values)
        placeholders = ", ".join(f":{key}" for key in values)
        query = text(
            f"INSERT INTO {TABLE_NAMES[kind]} ({columns}) "
            f"VALUES ({placeholders})"
        )
        try:
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                conn.execute(query, values)
        except SQLAlchemyError as exc:
            raise RecordsWriteError(kind, str(exc)) from exc

    def ensure_schema(self) -> None:
        """Create the record tables when they do not exist.

        Raises:
            RecordsWriteError: If a table cannot be created.
        """
        kind = "finance"
        try:
            engine = self._db_port.get_finance_engine()
            id_column = (
                "id INTEGER PRIMARY KEY AUTOINCREMENT"
                if engine.dialect.name == "sqlite"
                else "id SERIAL PRIMARY KEY"
            )
            with engine.begin() as conn:
                for kind, table in TABLE_NAMES.items():
                    conn.execute(_create_table_query(table, kind, id_column))
        except SQLAlchemyError as exc:
            raise RecordsWriteError(kind, str(exc)) from exc

    def _build_select_query(self, kind: str):
        if kind not in TABLE_NAMES:
            raise RecordsUnavailableError(kind, "unknown record type")
        limit = " LIMIT :limit" if self._fetch_limit else ""
        return text(
            f"""
            SELECT *
            FROM {TABLE_NAMES[kind]}
            ORDER BY {_ORDER_BY}{limit}
            """
        )


def _create_table_query(table: str, kind: str, id_column: str):
    columns = ",\n    ".join(
        [id_column]
        + [
            f"{name} {sql_type}"
            for name, sql_type in (*_DATE_COLUMNS, *TABLE_COLUMNS[kind])
        ]
    )
    return text(f"CREATE TABLE IF NOT EXISTS {table} (\n    {columns}\n)")


__all__ = [
    "SqlAlchemyFinanceRecordsRepository",
    "TABLE_NAMES",
    "TABLE_COLUMNS",
]
