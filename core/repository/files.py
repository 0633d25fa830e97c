"""Directory-backed key-value store.

Each key maps to one file under the store root. Writes go to a temporary
sibling first and are moved into place with :func:`os.replace`, so a crash
mid-write leaves the previous blob intact.

Updates:
  v0.1.1 - 2026-10-10 - Clean up temporary files when the write itself fails.
  v0.1.0 - 2026-10-08 - Introduce atomic per-key file store.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .base import RepositoryError, logger, quote_key

_SUFFIX = ".blob"


class DirectoryStore:
    """Persist blobs as files inside *root*."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).expanduser()
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryError(f"Unable to create store directory {self._root}") from exc

    @property
    def root(self) -> Path:
        """Return the directory holding the blobs."""
        return self._root

    def path_for(self, key: str) -> Path:
        """Return the file used to store *key*."""
        return self._root / f"{quote_key(key)}{_SUFFIX}"

    def save(self, key: str, blob: bytes) -> None:
        target = self.path_for(key)
        try:
            fd, temp_name = tempfile.mkstemp(dir=self._root, prefix=".tmp-", suffix=_SUFFIX)
        except OSError as exc:
            raise RepositoryError(f"Unable to stage write for key {key!r}") from exc
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(blob)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_name, target)
        except OSError as exc:
            try:
                os.unlink(temp_name)
            except OSError:
                logger.debug("Temporary store file already removed", extra={"path": temp_name})
            raise RepositoryError(f"Unable to write key {key!r} to {target}") from exc

    def load(self, key: str) -> bytes | None:
        target = self.path_for(key)
        try:
            return target.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise RepositoryError(f"Unable to read key {key!r} from {target}") from exc


__all__ = ["DirectoryStore"]
