"""Use case to validate and store a new finance record."""

from collections.abc import Mapping
from datetime import date
from typing import Any

from src.application.ports.finance_records import (
    FinanceRecordsPort,
    RecordsWriteError,
)
from src.domain.services.validation import validate_record_draft
from src.infrastructure.logging.logger import get_app_logger


class AddRecordUseCase:
    """Validate a record draft and persist it through the records port."""

    def __init__(
        self,
        records_repository: FinanceRecordsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port used to store the record.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: str,
        draft: Mapping[str, Any],
        today: date | None = None,
    ) -> dict[str, Any]:
        """Validate and store a draft.

        Args:
            kind: Logical record type (income, expense, ...).
            draft: Raw form values.
            today: Date used for missing date fields; defaults to today.

        Returns:
            dict[str, Any]: The stored row.

        Raises:
            RecordValidationError: If the draft is incomplete.
            RecordsWriteError: If the repository cannot store the row.
        """
        row = validate_record_draft(kind, draft, today=today or date.today())
        try:
            self._records_repository.add_record(kind, row)
        except RecordsWriteError as exc:
            self._logger.error(str(exc))
            raise
        self._logger.info(
            f"Added {kind} record dated "
            f"{row['year']}-{row['month']}-{row['day']}"
        )
        return row


__all__ = ["AddRecordUseCase"]
