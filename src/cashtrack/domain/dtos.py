"""Request and response data classes for the transaction use cases.

These are plain data carriers. Validation happens when the service turns a
request into value objects and a Transaction entity.
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from cashtrack.domain.entities import Transaction


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Input for creating a transaction."""

    user_id: Optional[str]
    type: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    description: Optional[str]
    transaction_date: Optional[date] = None
    source_account_id: Optional[str] = None
    destination_account_id: Optional[str] = None
    expense_id: Optional[str] = None
    income_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateTransactionRequest:
    """Input for changing status and/or description. Blank fields are ignored."""

    status: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class TransactionResponse:
    """Flat view of a transaction handed back to callers."""

    id: str
    user_id: str
    type: str
    status: str
    amount: Decimal
    currency: str
    description: str
    transaction_date: date
    source_account_id: Optional[str]
    destination_account_id: Optional[str]
    expense_id: Optional[str]
    income_id: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=str(transaction.id),
            user_id=transaction.user_id,
            type=transaction.type.name,
            status=transaction.status.name,
            amount=transaction.amount.value,
            currency=transaction.currency,
            description=transaction.description.value,
            transaction_date=transaction.transaction_date.value,
            source_account_id=transaction.source_account_id,
            destination_account_id=transaction.destination_account_id,
            expense_id=transaction.expense_id,
            income_id=transaction.income_id,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict (decimals and dates as strings)."""
        data = asdict(self)
        data["amount"] = str(self.amount)
        data["transaction_date"] = self.transaction_date.isoformat()
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        return data
