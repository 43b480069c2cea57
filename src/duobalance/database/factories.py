"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from duobalance.database.base import Database
from duobalance.database.json_db import JSONDatabase
from duobalance.database.sqlalchemy_db import SQLAlchemyDatabase

BACKENDS = ("json", "sqlite")
DEFAULT_BACKEND = "json"

_DEFAULT_FILENAMES = {"json": "duobalance.json", "sqlite": "duobalance.db"}


def default_store_path(backend: str) -> str:
    """Default store location under ~/.duobalance for the given backend."""
    store_dir = Path.home() / ".duobalance"
    store_dir.mkdir(exist_ok=True)
    return str(store_dir / _DEFAULT_FILENAMES[backend])


def create_json_database(store_path: Optional[str] = None) -> JSONDatabase:
    """Create a JSON document database instance.

    Args:
        store_path: Path to the JSON file. If None, checks DUOBALANCE_STORE_PATH
            environment variable, then defaults to ~/.duobalance/duobalance.json

    Returns:
        JSONDatabase instance
    """
    if store_path is None:
        store_path = os.environ.get("DUOBALANCE_STORE_PATH")

    if store_path is None:
        store_path = default_store_path("json")

    return JSONDatabase(store_path)


def create_sqlite_database(store_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        store_path: Path to SQLite database file. If None, checks DUOBALANCE_STORE_PATH
            environment variable, then defaults to ~/.duobalance/duobalance.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if store_path is None:
        store_path = os.environ.get("DUOBALANCE_STORE_PATH")

    if store_path is None:
        store_path = default_store_path("sqlite")

    database_url = f"sqlite:///{store_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(backend: Optional[str] = None, store_path: Optional[str] = None) -> Database:
    """Create a database for the named backend.

    Args:
        backend: "json" or "sqlite". If None, checks DUOBALANCE_BACKEND
            environment variable, then defaults to "json"
        store_path: Path to the store file (see the backend factories)

    Raises:
        ValueError: If the backend is unknown
    """
    if backend is None:
        backend = os.environ.get("DUOBALANCE_BACKEND", DEFAULT_BACKEND)

    backend = backend.lower()
    if backend == "json":
        return create_json_database(store_path)
    if backend == "sqlite":
        return create_sqlite_database(store_path)
    raise ValueError(f"Unknown backend '{backend}' (expected one of: {', '.join(BACKENDS)})")
