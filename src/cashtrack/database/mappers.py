"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the aggregate never learns about
the table layout. Loading always goes back through the Transaction
constructor, so a stored row that breaks an invariant fails loudly instead of
producing an inconsistent entity.
"""

from datetime import datetime, UTC
from uuid import UUID

from cashtrack.domain.entities import Transaction
from cashtrack.domain.enums import TransactionStatus, TransactionType
from cashtrack.domain.errors import InvalidStateError
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId
from cashtrack.database.models import Transaction as ORMTransaction

# Columns written once on insert
_FIXED_COLUMNS = (
    "user_id",
    "transaction_type",
    "amount",
    "currency",
    "transaction_date",
    "source_account_id",
    "destination_account_id",
    "expense_id",
    "income_id",
    "created_at",
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return Transaction(
        id=TransactionId(UUID(orm_transaction.id)),
        user_id=orm_transaction.user_id,
        type=TransactionType.from_string(orm_transaction.transaction_type),
        status=TransactionStatus.from_string(orm_transaction.transaction_status),
        amount=Amount(orm_transaction.amount),
        currency=orm_transaction.currency,
        description=Description(orm_transaction.description),
        transaction_date=TransactionDate(orm_transaction.transaction_date),
        source_account_id=orm_transaction.source_account_id,
        destination_account_id=orm_transaction.destination_account_id,
        expense_id=orm_transaction.expense_id,
        income_id=orm_transaction.income_id,
        created_at=_from_storage(orm_transaction.created_at),
        updated_at=_from_storage(orm_transaction.updated_at),
    )


def transaction_to_orm(transaction: Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=str(transaction.id),
        user_id=transaction.user_id,
        transaction_type=transaction.type.name,
        transaction_status=transaction.status.name,
        amount=transaction.amount.value,
        currency=transaction.currency,
        description=transaction.description.value,
        transaction_date=transaction.transaction_date.value,
        source_account_id=transaction.source_account_id,
        destination_account_id=transaction.destination_account_id,
        expense_id=transaction.expense_id,
        income_id=transaction.income_id,
        created_at=_to_storage(transaction.created_at),
        updated_at=_to_storage(transaction.updated_at),
    )


def update_orm_from_domain(orm_transaction: ORMTransaction, transaction: Transaction) -> None:
    """Copy the mutable fields (status, description, updated_at) onto an existing row.

    Raises:
        InvalidStateError: If the transaction disagrees with the row on any
            field that is fixed at creation
    """
    stored = transaction_to_orm(transaction)
    for column in _FIXED_COLUMNS:
        if getattr(orm_transaction, column) != getattr(stored, column):
            raise InvalidStateError(
                f"Transaction {transaction.id} cannot change {column} once stored"
            )
    orm_transaction.transaction_status = transaction.status.name
    orm_transaction.description = transaction.description.value
    orm_transaction.updated_at = _to_storage(transaction.updated_at)


def _to_storage(value: datetime) -> datetime:
    # Columns hold naive UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _from_storage(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
