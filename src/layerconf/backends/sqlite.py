"""SQLite-backed key-value store."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

__all__ = ["SqliteStore"]

logger = logging.getLogger(__name__)


class SqliteStore:
    """Persist raw option values in a single ``options`` table.

    Each call opens its own connection, so an instance holds no open handle
    between calls.

    Args:
        db_path: Database file; parent directories are created. ``":memory:"``
            is not supported because every call uses a fresh connection.
        table: Table name, created on first use.
    """

    def __init__(self, db_path: str | Path, table: str = "options") -> None:
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._table = table
        self._init_db()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _init_db(self) -> None:
        conn = self._get_connection()
        try:
            with conn:
                conn.execute(
                    f"CREATE TABLE IF NOT EXISTS {self._table} ("
                    "name TEXT PRIMARY KEY, "
                    "value TEXT NOT NULL)"
                )
        finally:
            conn.close()
        logger.debug("Initialized option table '%s' in %s", self._table, self._db_path)

    def read(self, key: str) -> str | None:
        conn = self._get_connection()
        try:
            row = conn.execute(f"SELECT value FROM {self._table} WHERE name = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def write(self, key: str, raw: str) -> None:
        conn = self._get_connection()
        try:
            with conn:
                conn.execute(
                    f"INSERT INTO {self._table} (name, value) VALUES (?, ?) "
                    "ON CONFLICT(name) DO UPDATE SET value = excluded.value",
                    (key, raw),
                )
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        conn = self._get_connection()
        try:
            with conn:
                conn.execute(f"DELETE FROM {self._table} WHERE name = ?", (key,))
        finally:
            conn.close()
