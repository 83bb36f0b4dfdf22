"""SQLAlchemy models for cashtrack database."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Decimal stored as its exact text form.

    Amounts load back digit for digit: "0.001" stays Decimal("0.001").
    """

    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return None

    def process_result_value(self, value, dialect):
        if value is not None:
            return Decimal(value)
        return None


class Transaction(Base):
    """Transaction model.

    Account, expense and income references are opaque ids, not foreign keys.
    """

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False)
    transaction_type = Column(String(20), nullable=False)
    transaction_status = Column(String(20), nullable=False)
    amount = Column(DecimalString(), nullable=False)
    currency = Column(String(3), nullable=False)
    description = Column(String(255), nullable=False)
    transaction_date = Column(Date, nullable=False)
    source_account_id = Column(String(36), nullable=True)
    destination_account_id = Column(String(36), nullable=True)
    expense_id = Column(String(36), nullable=True)
    income_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("idx_user_id", "user_id"),
        Index("idx_source_account_id", "source_account_id"),
        Index("idx_destination_account_id", "destination_account_id"),
        Index("idx_transaction_status", "transaction_status"),
        Index("idx_transaction_date", "transaction_date"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
