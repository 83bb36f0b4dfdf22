"""Database layer for cashtrack application."""

from cashtrack.database.base import TransactionRepository
from cashtrack.database.factories import create_sqlite_database

__all__ = ["TransactionRepository", "create_sqlite_database"]
