"""Abstract transaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from cashtrack.domain.entities import Transaction
from cashtrack.domain.values import TransactionId


class TransactionRepository(ABC):
    """Abstract storage for Transaction aggregates."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """Insert or update a transaction. Returns the stored transaction.

        Updates only write status, description and updated_at; a transaction
        that changes any other stored field is rejected with InvalidStateError.
        """
        pass

    @abstractmethod
    def find_by_id(self, transaction_id: TransactionId) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> list[Transaction]:
        """List transactions owned by a user."""
        pass

    @abstractmethod
    def find_by_account_id(self, account_id: str) -> list[Transaction]:
        """List transactions where the account is the source or the destination."""
        pass

    @abstractmethod
    def delete_by_id(self, transaction_id: TransactionId) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def exists_by_id(self, transaction_id: TransactionId) -> bool:
        """Check if a transaction with the given ID exists."""
        pass
