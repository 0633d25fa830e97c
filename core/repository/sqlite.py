"""SQLite-backed key-value store.

Updates:
  v0.2.0 - 2026-10-18 - Close connections after every schema, save and load call.
  v0.1.0 - 2026-10-08 - Store library blobs in a single kv_store table.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from datetime import UTC, datetime
from pathlib import Path

from .base import RepositoryError, connect as _connect, ensure_directory as _ensure_directory

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value BLOB NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class SQLiteStore:
    """Persist blobs as rows keyed by name."""

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path).expanduser()
        try:
            _ensure_directory(self._db_path)
            with closing(_connect(self._db_path)) as conn, conn:
                conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise RepositoryError("Failed to initialise SQLite key-value schema") from exc

    @property
    def db_path(self) -> Path:
        return self._db_path

    def save(self, key: str, blob: bytes) -> None:
        query = (
            "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
            "updated_at = excluded.updated_at;"
        )
        try:
            with closing(_connect(self._db_path)) as conn, conn:
                conn.execute(
                    query,
                    (key, sqlite3.Binary(blob), datetime.now(UTC).isoformat()),
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to save key {key!r}") from exc

    def load(self, key: str) -> bytes | None:
        try:
            with closing(_connect(self._db_path)) as conn, conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?;",
                    (key,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to load key {key!r}") from exc
        if row is None:
            return None
        return bytes(row["value"])


__all__ = ["SQLiteStore"]
