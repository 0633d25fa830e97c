"""In-process key-value store.

Updates:
  v0.1.0 - 2026-10-07 - Dict-backed store for tests and ephemeral sessions.
"""

from __future__ import annotations

import threading


class InMemoryStore:
    """Keep blobs in a dictionary for the lifetime of the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._lock = threading.RLock()
        self._blobs: dict[str, bytes] = dict(initial or {})

    def save(self, key: str, blob: bytes) -> None:
        with self._lock:
            self._blobs[key] = bytes(blob)

    def load(self, key: str) -> bytes | None:
        with self._lock:
            return self._blobs.get(key)

    def keys(self) -> list[str]:
        """Return the keys written so far."""
        with self._lock:
            return list(self._blobs)


__all__ = ["InMemoryStore"]
