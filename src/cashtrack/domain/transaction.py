"""Transaction domain service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cashtrack.domain.dtos import (
    CreateTransactionRequest,
    TransactionResponse,
    UpdateTransactionRequest,
)
from cashtrack.domain.entities import Transaction
from cashtrack.domain.enums import TransactionStatus, TransactionType
from cashtrack.domain.errors import (
    InvalidStateError,
    NotFoundError,
    ValidationError,
    cannot_be_blank,
    cannot_be_null,
    must_not_have_account,
    requires_account,
    transaction_not_found,
)
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId

if TYPE_CHECKING:
    from cashtrack.database.base import TransactionRepository

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for creating, querying and changing transactions."""

    def __init__(self, db: TransactionRepository):
        """Initialize transaction service.

        Args:
            db: Transaction repository instance
        """
        self.db = db

    def create_transaction(self, request: CreateTransactionRequest) -> TransactionResponse:
        """Create a pending transaction.

        Args:
            request: Creation request; transaction_date defaults to today

        Returns:
            Response describing the stored transaction

        Raises:
            ValidationError: If the request or the resulting transaction is invalid
        """
        _validate_create_request(request)

        transaction_date = (
            TransactionDate(request.transaction_date)
            if request.transaction_date is not None
            else TransactionDate.now()
        )
        transaction = Transaction(
            id=TransactionId.generate(),
            user_id=request.user_id,
            type=TransactionType.from_string(request.type),
            status=TransactionStatus.PENDING,
            amount=Amount(request.amount),
            currency=request.currency,
            description=Description(request.description),
            transaction_date=transaction_date,
            source_account_id=request.source_account_id,
            destination_account_id=request.destination_account_id,
            expense_id=request.expense_id,
            income_id=request.income_id,
        )
        self.validate_transaction_integrity(transaction)

        saved = self.db.save(transaction)
        logger.info(
            "Created %s transaction %s for user %s", saved.type.name, saved.id, saved.user_id
        )
        return TransactionResponse.from_transaction(saved)

    def get_transaction(self, transaction_id: str) -> TransactionResponse:
        """Get transaction by ID.

        Raises:
            ValidationError: If the ID is blank or malformed
            NotFoundError: If no transaction has this ID
        """
        return TransactionResponse.from_transaction(self._load(transaction_id))

    def list_by_user(self, user_id: str) -> list[TransactionResponse]:
        """List a user's transactions."""
        if user_id is None or not user_id.strip():
            raise ValidationError(cannot_be_blank("User ID"))
        return [TransactionResponse.from_transaction(t) for t in self.db.find_by_user_id(user_id)]

    def list_by_account(self, account_id: str) -> list[TransactionResponse]:
        """List transactions that involve an account as source or destination."""
        if account_id is None or not account_id.strip():
            raise ValidationError(cannot_be_blank("Account ID"))
        return [
            TransactionResponse.from_transaction(t)
            for t in self.db.find_by_account_id(account_id)
        ]

    def update_transaction(
        self, transaction_id: str, request: UpdateTransactionRequest
    ) -> TransactionResponse:
        """Apply a status change and/or a new description.

        The status is applied first, so a request that completes a transaction
        and also changes its description is rejected by the description rule.

        Raises:
            ValidationError: If the ID, status name or description is invalid
            NotFoundError: If no transaction has this ID
            InvalidStateError: If the transaction's status forbids the change
        """
        if request is None:
            raise ValidationError(cannot_be_null("Update transaction request"))
        transaction = self._load(transaction_id)

        if request.status is not None and request.status.strip():
            new_status = TransactionStatus.from_string(request.status)
            previous = transaction.status
            transaction.update_status(new_status)
            logger.info(
                "Transaction %s moved from %s to %s", transaction.id, previous.name, new_status.name
            )

        if request.description is not None and request.description.strip():
            transaction.update_description(Description(request.description))

        return TransactionResponse.from_transaction(self.db.save(transaction))

    def cancel_transaction(self, transaction_id: str) -> TransactionResponse:
        """Cancel a pending transaction.

        Raises:
            NotFoundError: If no transaction has this ID
            InvalidStateError: If the transaction is not pending
        """
        transaction = self._load(transaction_id)
        if not self.can_transaction_be_cancelled(transaction):
            raise InvalidStateError("Transaction cannot be cancelled in its current state")

        transaction.cancel()
        logger.info("Cancelled transaction %s", transaction.id)
        return TransactionResponse.from_transaction(self.db.save(transaction))

    def validate_transaction_integrity(self, transaction: Transaction) -> None:
        """Check the stricter per-type account rules applied to new transactions.

        The entity only requires the accounts a type needs. New transactions
        must additionally leave out the account a type does not use: deposits
        and refunds have no source, withdrawals and payments no destination.

        Raises:
            ValidationError: If the transaction breaks one of the rules
        """
        if transaction is None:
            raise ValidationError(cannot_be_null("Transaction"))

        type_name = transaction.type.name
        has_source = transaction.source_account_id is not None
        has_destination = transaction.destination_account_id is not None

        if transaction.type is TransactionType.TRANSFER:
            if not (has_source and has_destination):
                raise ValidationError("TRANSFER requires both source and destination accounts")
        else:
            if has_source and not transaction.type.requires_source_account():
                raise ValidationError(must_not_have_account(type_name, "source"))
            if has_destination and not transaction.type.requires_destination_account():
                raise ValidationError(must_not_have_account(type_name, "destination"))
            if transaction.type.requires_source_account() and not has_source:
                raise ValidationError(requires_account(type_name, "source"))
            if transaction.type.requires_destination_account() and not has_destination:
                raise ValidationError(requires_account(type_name, "destination"))

        if not transaction.currency:
            raise ValidationError(cannot_be_blank("Currency"))

    def can_transaction_be_modified(self, transaction: Optional[Transaction]) -> bool:
        return transaction is not None and transaction.is_pending()

    def can_transaction_be_cancelled(self, transaction: Optional[Transaction]) -> bool:
        return transaction is not None and transaction.is_pending()

    def _load(self, transaction_id: str) -> Transaction:
        if transaction_id is None or not transaction_id.strip():
            raise ValidationError(cannot_be_blank("Transaction ID"))
        transaction = self.db.find_by_id(TransactionId.from_string(transaction_id))
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction


def _validate_create_request(request: Optional[CreateTransactionRequest]) -> None:
    if request is None:
        raise ValidationError(cannot_be_null("Create transaction request"))
    if request.user_id is None or not request.user_id.strip():
        raise ValidationError(cannot_be_blank("User ID"))
    if request.type is None:
        raise ValidationError(cannot_be_null("Transaction type"))
    if request.amount is None:
        raise ValidationError(cannot_be_null("Amount"))
    if request.currency is None or not request.currency.strip():
        raise ValidationError(cannot_be_blank("Currency"))
    if request.description is None:
        raise ValidationError(cannot_be_null("Description"))
