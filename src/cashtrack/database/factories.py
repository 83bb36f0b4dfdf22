"""Building the repository the CLI and tests talk to."""

import os
from pathlib import Path
from typing import Optional

from cashtrack.database.sqlalchemy_db import SQLAlchemyTransactionRepository

DB_PATH_ENV_VAR = "CASHTRACK_DB_PATH"
DEFAULT_DB_PATH = Path.home() / ".cashtrack" / "cashtrack.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then $CASHTRACK_DB_PATH, then the home default.

    The parent directory of the home default is created on demand.
    """
    if database_path is not None:
        return Path(database_path)
    from_env = os.environ.get(DB_PATH_ENV_VAR)
    if from_env:
        return Path(from_env)
    DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    return DEFAULT_DB_PATH


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyTransactionRepository:
    """Create a transaction repository backed by a SQLite file."""
    return SQLAlchemyTransactionRepository(f"sqlite:///{resolve_database_path(database_path)}")
