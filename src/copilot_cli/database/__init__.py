"""Database layer for copilot_cli application."""

from copilot_cli.database.base import Database
from copilot_cli.database.factories import create_sqlite_database, get_default_database_path

__all__ = ["Database", "create_sqlite_database", "get_default_database_path"]
