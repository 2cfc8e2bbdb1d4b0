"""Port for reading and writing raw finance records."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class RecordsUnavailableError(RuntimeError):
    """Raised when a record source cannot be read."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        super().__init__(f"Unable to load {kind} records: {reason}")


class RecordsWriteError(RuntimeError):
    """Raised when a record cannot be stored."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        super().__init__(f"Unable to save {kind} record: {reason}")


class FinanceRecordsPort(Protocol):
    """Port exposing the six raw record collections."""

    def fetch_records(self, kind: str) -> Sequence[Mapping[str, Any]]:
        """Return raw rows for a logical record type.

        Raises:
            RecordsUnavailableError: If the source cannot be read.
        """

    def add_record(self, kind: str, row: Mapping[str, Any]) -> None:
        """Persist a validated row for a logical record type.

        Raises:
            RecordsWriteError: If the row cannot be stored.
        """


__all__ = [
    "FinanceRecordsPort",
    "RecordsUnavailableError",
    "RecordsWriteError",
]
