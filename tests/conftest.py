"""Shared pytest fixtures for cashtrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from cashtrack.database.factories import create_sqlite_database
from cashtrack.domain.entities import Transaction
from cashtrack.domain.enums import TransactionStatus, TransactionType
from cashtrack.domain.transaction import TransactionService
from cashtrack.domain.values import Amount, Description, TransactionDate, TransactionId

# Accounts each type needs to construct successfully
DEFAULT_ACCOUNTS = {
    TransactionType.TRANSFER: ("acc-source", "acc-destination"),
    TransactionType.DEPOSIT: (None, "acc-destination"),
    TransactionType.WITHDRAWAL: ("acc-source", None),
    TransactionType.PAYMENT: ("acc-source", None),
    TransactionType.REFUND: (None, "acc-destination"),
}

_UNSET = object()


def build_transaction(
    type: TransactionType = TransactionType.TRANSFER,
    status: TransactionStatus = TransactionStatus.PENDING,
    source_account_id=_UNSET,
    destination_account_id=_UNSET,
    **overrides,
) -> Transaction:
    """Build a valid transaction of the given type, overriding any field."""
    default_source, default_destination = DEFAULT_ACCOUNTS[type]
    fields = dict(
        id=TransactionId.generate(),
        user_id="user123",
        type=type,
        status=status,
        amount=Amount(Decimal("100.00")),
        currency="USD",
        description=Description("Test transaction"),
        transaction_date=TransactionDate(date(2024, 1, 15)),
        source_account_id=default_source if source_account_id is _UNSET else source_account_id,
        destination_account_id=(
            default_destination if destination_account_id is _UNSET else destination_account_id
        ),
    )
    fields.update(overrides)
    return Transaction(**fields)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_transaction(temp_db):
    """Store a pending transfer and return it."""
    return temp_db.save(build_transaction())


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
