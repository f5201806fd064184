"""
SQLite backed store for Command records.

``CommandStore`` owns the canonical set of commands and assigns their
ids.  Each instance holds a single connection guarded by a re-entrant
lock; every public method takes the lock, and ``transaction`` lets a
caller hold it across several calls so that a check followed by a
mutation cannot interleave with another thread.

Rows are converted to frozen ``CommandRead`` instances, so callers
never receive a reference into the store's state.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from command_api.app.core.db import get_connection, init_db
from command_api.app.schemas.command import CommandBase, CommandRead

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; no row can carry an id outside it.
SQLITE_MIN_ID = -(2**63)
SQLITE_MAX_ID = 2**63 - 1


def _storable_id(command_id: int) -> bool:
    return SQLITE_MIN_ID <= command_id <= SQLITE_MAX_ID


class CommandStore:
    """Persistent collection of commands keyed by integer id."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self._lock = threading.RLock()
        self._conn = get_connection(database_url)
        init_db(self._conn)

    @contextmanager
    def transaction(self) -> Iterator["CommandStore"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self

    def save_changes(self) -> None:
        """Commit pending writes so that later reads observe them."""
        with self._lock:
            self._conn.commit()

    def add(self, record: CommandBase) -> int:
        """Insert ``record`` and return its newly assigned id."""
        with self._lock:
            cursor = self._conn.execute(
                "INSERT INTO commands (how_to, platform, command_line) VALUES (?, ?, ?)",
                (record.how_to, record.platform, record.command_line),
            )
            self.save_changes()
            return cursor.lastrowid

    def find(self, command_id: int) -> Optional[CommandRead]:
        if not _storable_id(command_id):
            return None
        with self._lock:
            row = self._conn.execute(
                "SELECT * FROM commands WHERE id = ?", (command_id,)
            ).fetchone()
        if not row:
            return None
        return self._row_to_command(row)

    def replace(self, command_id: int, record: CommandBase) -> bool:
        """Overwrite every mutable field of the command with ``command_id``.

        Returns ``False`` if no such command exists.
        """
        if not _storable_id(command_id):
            return False
        with self._lock:
            cursor = self._conn.execute(
                "UPDATE commands SET how_to = ?, platform = ?, command_line = ? WHERE id = ?",
                (record.how_to, record.platform, record.command_line, command_id),
            )
            self.save_changes()
            return cursor.rowcount > 0

    def remove(self, command_id: int) -> bool:
        """Delete the command with ``command_id``.

        Returns ``False`` if no such command exists.
        """
        if not _storable_id(command_id):
            return False
        with self._lock:
            cursor = self._conn.execute("DELETE FROM commands WHERE id = ?", (command_id,))
            self.save_changes()
            return cursor.rowcount > 0

    def list(self) -> List[CommandRead]:
        """Return all commands in insertion order."""
        with self._lock:
            rows = self._conn.execute("SELECT * FROM commands ORDER BY id ASC").fetchall()
        return [self._row_to_command(row) for row in rows]

    def count(self) -> int:
        with self._lock:
            row = self._conn.execute("SELECT COUNT(*) AS total FROM commands").fetchone()
        return row["total"]

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        logger.debug("Closed command store")

    @staticmethod
    def _row_to_command(row: sqlite3.Row) -> CommandRead:
        """Convert a database row to a CommandRead schema instance."""
        return CommandRead(
            id=row["id"],
            how_to=row["how_to"],
            platform=row["platform"],
            command_line=row["command_line"],
        )
