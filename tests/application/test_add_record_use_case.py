"""Tests for the AddRecordUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.ports.finance_records import RecordsWriteError
from src.application.use_cases.add_record import AddRecordUseCase
from src.domain.services.validation import RecordValidationError


def test_execute_validates_and_persists() -> None:
    repository = MagicMock()
    use_case = AddRecordUseCase(
        records_repository=repository,
        logger=MagicMock(),
    )

    row = use_case.execute(
        "expense",
        {"category": "Rent", "cost": "15000", "type": "Fixed"},
        today=date(2024, 1, 20),
    )

    repository.add_record.assert_called_once_with("expense", row)
    assert row["year"] == "2024"
    assert row["month"] == "01"
    assert row["day"] == "20"
    assert row["cost"] == 15000.0


def test_execute_does_not_persist_invalid_drafts() -> None:
    repository = MagicMock()
    use_case = AddRecordUseCase(
        records_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(RecordValidationError):
        use_case.execute("investment", {"name": "Index Fund"})

    repository.add_record.assert_not_called()


def test_execute_logs_and_reraises_write_errors() -> None:
    repository = MagicMock()
    repository.add_record.side_effect = RecordsWriteError(
        "tax", "no such table: tax"
    )
    logger = MagicMock()
    use_case = AddRecordUseCase(records_repository=repository, logger=logger)

    with pytest.raises(RecordsWriteError):
        use_case.execute(
            "tax",
            {"name": "Advance Tax", "amount": "1200"},
            today=date(2024, 3, 15),
        )

    logger.error.assert_called_once_with(
        "Unable to save tax record: no such table: tax"
    )
    logger.info.assert_not_called()
