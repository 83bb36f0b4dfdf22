"""Domain layer for cashtrack application."""

from cashtrack.domain.entities import Transaction
from cashtrack.domain.enums import TransactionStatus, TransactionType
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId
from cashtrack.domain.transaction import TransactionService

__all__ = [
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "Amount",
    "Description",
    "TransactionDate",
    "TransactionId",
    "TransactionService",
]
