"""Factories for constructing PromptLibrary instances from validated settings.

Updates:
  v0.2.0 - 2026-10-09 - Wire SQLite and Redis stores into the builder.
  v0.1.0 - 2026-10-08 - Introduce store and library builders.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .prompt_library import PromptLibrary
from .repository import DirectoryStore, InMemoryStore, RedisStore, SQLiteStore

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import PromptLibrarySettings

    from .notifications import LibraryEventHub
    from .repository import KeyValueStore
else:  # pragma: no cover - typing only
    PromptLibrarySettings = Any

factory_logger = logging.getLogger("prompt_library.factory")


def build_store(settings: PromptLibrarySettings) -> KeyValueStore:
    """Return the key-value store selected by *settings*.

    Raises :class:`~core.repository.RepositoryError` when the backend cannot
    be opened.
    """
    backend = settings.storage_backend
    if backend == "memory":
        factory_logger.info("Using in-memory storage; changes will not survive restarts.")
        return InMemoryStore()
    if backend == "sqlite":
        return SQLiteStore(settings.db_path)
    if backend == "redis":
        return RedisStore(dsn=settings.redis_dsn, namespace=settings.redis_namespace)
    return DirectoryStore(settings.data_dir)


def build_prompt_library(
    settings: PromptLibrarySettings,
    *,
    store: KeyValueStore | None = None,
    events: LibraryEventHub | None = None,
) -> PromptLibrary:
    """Create a :class:`PromptLibrary` using configuration values."""
    resolved_store = store if store is not None else build_store(settings)
    library = PromptLibrary(
        resolved_store,
        prompts_key=settings.prompts_key,
        categories_key=settings.categories_key,
        sort_order=settings.default_sort_order,
        most_used_limit=settings.most_used_limit,
        copy_suffix=settings.copy_suffix,
        decode_policy=settings.decode_failure_policy,
        events=events,
    )
    factory_logger.debug(
        "Prompt library ready",
        extra={
            "backend": settings.storage_backend,
            "prompt_count": len(library),
        },
    )
    return library


__all__ = ["build_prompt_library", "build_store"]
