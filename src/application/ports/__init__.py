"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_records import (
    FinanceRecordsPort,
    RecordsUnavailableError,
    RecordsWriteError,
)

__all__ = [
    "DatabaseEnginePort",
    "FinanceRecordsPort",
    "RecordsUnavailableError",
    "RecordsWriteError",
]
