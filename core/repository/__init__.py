"""Key-value stores used to persist the prompt library.

Updates:
  v0.2.0 - 2026-10-09 - Add SQLite and Redis stores alongside the directory store.
  v0.1.0 - 2026-10-07 - Introduce store protocol, in-memory and directory stores.
"""

from __future__ import annotations

from .base import KeyValueStore, RepositoryError
from .files import DirectoryStore
from .memory import InMemoryStore
from .redis_store import RedisStore
from .sqlite import SQLiteStore

__all__ = [
    "DirectoryStore",
    "InMemoryStore",
    "KeyValueStore",
    "RedisStore",
    "RepositoryError",
    "SQLiteStore",
]
