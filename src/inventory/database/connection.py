"""SQLite database connection and schema management."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..common.config import settings
from .errors import SchemaError

logger = logging.getLogger(__name__)

TABLE_NAME = "products"

MEMORY_DB = ":memory:"

_SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    price REAL NOT NULL,
    quantity INT NOT NULL,
    category TEXT NOT NULL
);
"""


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Get a SQLite connection with row factory enabled.

    Args:
        db_path: Database file, or ":memory:". Uses the configured
            path if not provided.

    Returns:
        sqlite3.Connection with Row factory.
    """
    path = str(db_path) if db_path is not None else str(settings.database_abs_path)
    if path != MEMORY_DB:
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    if path != MEMORY_DB:
        conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def init_db(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open the database and create the products table (idempotent).

    Args:
        db_path: Database file, or ":memory:". Uses the configured
            path if not provided.

    Returns:
        The open connection, ready to hand to ProductStore.

    Raises:
        SchemaError: the database could not be opened or migrated.
    """
    try:
        conn = get_connection(db_path)
    except sqlite3.Error as exc:
        raise SchemaError("open database", str(exc)) from exc

    try:
        conn.executescript(_SCHEMA_SQL)
        conn.commit()
    except sqlite3.Error as exc:
        conn.close()
        raise SchemaError(f"create {TABLE_NAME} table", str(exc)) from exc

    logger.info("Database schema initialized at %s", db_path or settings.database_abs_path)
    return conn
