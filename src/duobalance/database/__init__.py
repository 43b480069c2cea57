"""Database layer for duobalance application."""

from duobalance.database.base import Database
from duobalance.database.factories import (
    create_database,
    create_json_database,
    create_sqlite_database,
)

__all__ = ["Database", "create_database", "create_json_database", "create_sqlite_database"]
