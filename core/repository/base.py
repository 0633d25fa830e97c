"""Shared key-value store protocol, helpers, and error hierarchy.

Updates:
  v0.2.0 - 2026-10-08 - Add key quoting helper for file-backed stores.
  v0.1.0 - 2026-10-07 - Define the KeyValueStore protocol and SQLite connection helper.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from urllib.parse import quote

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("prompt_library.repository")


class RepositoryError(Exception):
    """Base exception for store failures."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable blob storage addressed by string keys.

    ``load`` returns ``None`` when nothing was ever saved under *key*.
    Implementations raise :class:`RepositoryError` on backend failures.
    """

    def save(self, key: str, blob: bytes) -> None: ...

    def load(self, key: str) -> bytes | None: ...


def ensure_directory(path: Path) -> None:
    """Ensure the parent directory for *path* exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path), detect_types=sqlite3.PARSE_DECLTYPES)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def quote_key(key: str) -> str:
    """Return a filesystem-safe representation of *key*."""
    if not key:
        raise RepositoryError("Store keys cannot be empty")
    return quote(key, safe="")


__all__ = [
    "KeyValueStore",
    "RepositoryError",
    "connect",
    "ensure_directory",
    "logger",
    "quote_key",
]
