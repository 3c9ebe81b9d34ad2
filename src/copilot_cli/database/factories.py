"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from copilot_cli.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "COPILOT_DB_PATH"
DATA_DIR_NAME = ".copilot-cli"
DB_FILE_NAME = "copilot.db"


def get_default_database_path() -> Path:
    """Return the per-user default database location (~/.copilot-cli/copilot.db)."""
    return Path.home() / DATA_DIR_NAME / DB_FILE_NAME


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the database file path.

    Args:
        database_path: Explicit path. If None, checks COPILOT_DB_PATH
            environment variable, then falls back to the per-user default.

    Returns:
        Path to the SQLite database file
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        default_path = get_default_database_path()
        default_path.parent.mkdir(parents=True, exist_ok=True)
        database_path = str(default_path)

    return database_path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks COPILOT_DB_PATH
            environment variable, then defaults to ~/.copilot-cli/copilot.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    database_path = resolve_database_path(database_path)
    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Using database at %s", database_path)
    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
