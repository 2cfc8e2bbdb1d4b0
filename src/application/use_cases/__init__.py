"""Application use cases package."""

from .add_record import AddRecordUseCase
from .get_transaction_ledger import (
    GetTransactionLedgerUseCase,
    TransactionLedgerView,
)

__all__ = [
    "AddRecordUseCase",
    "GetTransactionLedgerUseCase",
    "TransactionLedgerView",
]
