"""
SQLite database integration and simple migration system.

This module provides functions for opening a database connection
(``get_connection``) and applying migrations (``init_db``).  It uses
SQLite as a lightweight embedded database; to switch to another DBMS
you would replace connection logic and adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Append new migrations with an incremented version number.
MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- AUTOINCREMENT keeps ids strictly increasing: SQLite never hands
        -- out an id that was used by a deleted row.
        CREATE TABLE IF NOT EXISTS commands (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            how_to TEXT NOT NULL,
            platform TEXT NOT NULL,
            command_line TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    db_url = database_url if database_url is not None else settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name and may
    be shared between threads; callers are responsible for serialising
    access to it.
    """
    db_path = get_database_path(database_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    logger.debug("Opened SQLite database %s", db_path)
    return conn


def init_db(conn: sqlite3.Connection) -> int:
    """Apply pending migrations on ``conn`` and return the schema version.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.
    """
    cursor = conn.cursor()
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    cursor.execute("SELECT MAX(version) AS version FROM migrations")
    row = cursor.fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in MIGRATIONS:
        if version > current_version:
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            current_version = version
            logger.info("Applied database migration %s", version)
    conn.commit()
    return current_version
