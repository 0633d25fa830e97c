"""Core service layer for Prompt Library.

Updates:
  v0.3.0 - 2026-10-11 - Export decode policy, load report, and event types.
  v0.2.0 - 2026-10-08 - Export build_prompt_library factory for shared bootstrap.
  v0.1.0 - 2026-10-07 - Surface PromptLibrary and the key-value stores.
"""

from models.prompt_model import Prompt

from .exceptions import (
    CategoryError,
    PromptDecodeError,
    PromptLibraryError,
    PromptNotFoundError,
    PromptStorageError,
)
from .factory import build_prompt_library, build_store
from .notifications import ChangeKind, EventSubscription, LibraryEvent, LibraryEventHub
from .prompt_library import (
    DecodePolicy,
    LoadReport,
    LoadStatus,
    OperationResult,
    PromptLibrary,
    SortOrder,
    sort_prompts,
)
from .repository import (
    DirectoryStore,
    InMemoryStore,
    KeyValueStore,
    RedisStore,
    RepositoryError,
    SQLiteStore,
)

__all__ = [
    "CategoryError",
    "ChangeKind",
    "DecodePolicy",
    "DirectoryStore",
    "EventSubscription",
    "InMemoryStore",
    "KeyValueStore",
    "LibraryEvent",
    "LibraryEventHub",
    "LoadReport",
    "LoadStatus",
    "OperationResult",
    "Prompt",
    "PromptDecodeError",
    "PromptLibrary",
    "PromptLibraryError",
    "PromptNotFoundError",
    "PromptStorageError",
    "RedisStore",
    "RepositoryError",
    "SQLiteStore",
    "SortOrder",
    "build_prompt_library",
    "build_store",
    "sort_prompts",
]
