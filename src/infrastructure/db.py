"""Database infrastructure for the finance ledger dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the finance records database. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Variables from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance. Server databases get a small
        connection pool with health checks; SQLite uses its default pool.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance records database.

    Returns:
        Engine: Lazily initialized engine connected to ``FINANCE_DB_URL``.
    """
    global _finance_engine
    if _finance_engine is None:
        db_url = _get_env_var("FINANCE_DB_URL")
        _finance_engine = _create_engine(db_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance records database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance records.
        """
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
