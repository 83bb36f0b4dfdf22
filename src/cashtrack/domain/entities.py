"""Transaction aggregate root.

The constructor is the only way to obtain a Transaction, and it refuses to
build one that breaks any cross-field rule. After construction the status and
description change only through the lifecycle methods, which consult the
status state machine first.
"""

from datetime import datetime, UTC
from typing import Any, Optional

from cashtrack.domain.enums import TransactionStatus, TransactionType
from cashtrack.domain.errors import (
    InvalidStateError,
    ValidationError,
    cannot_be_blank,
    cannot_be_null,
    cannot_link,
    invalid_transition,
    requires_account,
)
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId


class Transaction:
    """A money movement owned by a user.

    Accounts, expenses and incomes are referenced by opaque string ids only.
    Equality and hashing use the transaction id alone.
    """

    def __init__(
        self,
        id: TransactionId,
        user_id: str,
        type: TransactionType,
        status: TransactionStatus,
        amount: Amount,
        currency: str,
        description: Description,
        transaction_date: TransactionDate,
        source_account_id: Optional[str] = None,
        destination_account_id: Optional[str] = None,
        expense_id: Optional[str] = None,
        income_id: Optional[str] = None,
        *,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """Create a transaction, validating every invariant.

        Args:
            id: Transaction identifier
            user_id: Owning user; stored trimmed
            type: Transaction type, decides which accounts are required
            status: Initial status (any status is accepted)
            amount: Positive amount
            currency: Currency code; stored trimmed and upper-cased
            description: Description value object
            transaction_date: Date the movement happened
            source_account_id: Account money leaves, if any
            destination_account_id: Account money arrives in, if any
            expense_id: Linked expense record (PAYMENT only)
            income_id: Linked income record (REFUND only)
            created_at: Creation timestamp when reloading a stored transaction
            updated_at: Last update timestamp when reloading a stored transaction

        Raises:
            ValidationError: If any field or cross-field rule is violated
        """
        _require(id, TransactionId, "Transaction ID")
        if user_id is None or not user_id.strip():
            raise ValidationError(cannot_be_blank("User ID"))
        _require(type, TransactionType, "Transaction type")
        _require(status, TransactionStatus, "Transaction status")
        _require(amount, Amount, "Amount")
        if currency is None or not currency.strip():
            raise ValidationError(cannot_be_blank("Currency"))
        _require(description, Description, "Description")
        _require(transaction_date, TransactionDate, "Transaction date")

        source_account_id = _clean_reference(source_account_id)
        destination_account_id = _clean_reference(destination_account_id)

        if type.requires_source_account() and source_account_id is None:
            raise ValidationError(requires_account(type.name, "source"))
        if type.requires_destination_account() and destination_account_id is None:
            raise ValidationError(requires_account(type.name, "destination"))
        if source_account_id is not None and source_account_id == destination_account_id:
            raise ValidationError("Source and destination accounts cannot be the same")
        # Any supplied link counts, even a blank one
        if expense_id is not None and not type.can_link_to_expense():
            raise ValidationError(cannot_link(type.name, "expense"))
        if income_id is not None and not type.can_link_to_income():
            raise ValidationError(cannot_link(type.name, "income"))
        expense_id = _clean_reference(expense_id)
        income_id = _clean_reference(income_id)

        self._id = id
        self._user_id = user_id.strip()
        self._type = type
        self._status = status
        self._amount = amount
        self._currency = currency.strip().upper()
        self._description = description
        self._transaction_date = transaction_date
        self._source_account_id = source_account_id
        self._destination_account_id = destination_account_id
        self._expense_id = expense_id
        self._income_id = income_id
        self._created_at = created_at if created_at is not None else datetime.now(UTC)
        self._updated_at = updated_at if updated_at is not None else self._created_at

    # Lifecycle
    def update_status(self, new_status: TransactionStatus) -> None:
        """Move to new_status if the state machine allows it.

        Raises:
            ValidationError: If new_status is None
            InvalidStateError: If the transition is not allowed
        """
        if new_status is None:
            raise ValidationError(cannot_be_null("Transaction status"))
        if not self._status.can_transition_to(new_status):
            raise InvalidStateError(invalid_transition(self._status.name, new_status.name))
        self._status = new_status
        self._touch()

    def complete(self) -> None:
        self.update_status(TransactionStatus.COMPLETED)

    def cancel(self) -> None:
        self.update_status(TransactionStatus.CANCELLED)

    def mark_as_failed(self) -> None:
        self.update_status(TransactionStatus.FAILED)

    def update_description(self, new_description: Description) -> None:
        """Replace the description while the transaction is still pending.

        Raises:
            ValidationError: If new_description is None
            InvalidStateError: If the status is terminal
        """
        if new_description is None:
            raise ValidationError(cannot_be_null("Description"))
        if self._status.is_final():
            raise InvalidStateError("Cannot update description of a completed transaction")
        self._description = new_description
        self._touch()

    def _touch(self) -> None:
        self._updated_at = datetime.now(UTC)

    # Queries
    def belongs_to_user(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self._user_id == user_id

    def involves_account(self, account_id: Optional[str]) -> bool:
        if account_id is None:
            return False
        return account_id in (self._source_account_id, self._destination_account_id)

    def is_pending(self) -> bool:
        return self._status is TransactionStatus.PENDING

    def is_completed(self) -> bool:
        return self._status is TransactionStatus.COMPLETED

    def is_failed(self) -> bool:
        return self._status is TransactionStatus.FAILED

    def is_cancelled(self) -> bool:
        return self._status is TransactionStatus.CANCELLED

    @property
    def id(self) -> TransactionId:
        return self._id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def type(self) -> TransactionType:
        return self._type

    @property
    def status(self) -> TransactionStatus:
        return self._status

    @property
    def amount(self) -> Amount:
        return self._amount

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def description(self) -> Description:
        return self._description

    @property
    def transaction_date(self) -> TransactionDate:
        return self._transaction_date

    @property
    def source_account_id(self) -> Optional[str]:
        return self._source_account_id

    @property
    def destination_account_id(self) -> Optional[str]:
        return self._destination_account_id

    @property
    def expense_id(self) -> Optional[str]:
        return self._expense_id

    @property
    def income_id(self) -> Optional[str]:
        return self._income_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, user_id={self._user_id!r}, type={self._type.name}, "
            f"status={self._status.name}, amount={self._amount}, currency={self._currency!r}, "
            f"description={self._description.value!r}, transaction_date={self._transaction_date}, "
            f"source_account_id={self._source_account_id!r}, "
            f"destination_account_id={self._destination_account_id!r}, "
            f"expense_id={self._expense_id!r}, income_id={self._income_id!r}, "
            f"created_at={self._created_at.isoformat()}, updated_at={self._updated_at.isoformat()})"
        )


def _require(value: Any, expected: type, field: str) -> None:
    if value is None:
        raise ValidationError(cannot_be_null(field))
    if not isinstance(value, expected):
        raise ValidationError(f"{field} must be a {expected.__name__}, got {type(value).__name__}")


def _clean_reference(value: Optional[str]) -> Optional[str]:
    """Trim an optional reference id; blank references count as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None
