"""Value types describing library state and operation outcomes.

Updates:
  v0.2.0 - 2026-10-11 - Add load report so callers can see decode fallbacks.
  v0.1.0 - 2026-10-07 - Introduce sort order selector and operation result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.prompt_model import Prompt

    from ..exceptions import PromptLibraryError, PromptStorageError

__all__ = [
    "DecodePolicy",
    "LoadReport",
    "LoadStatus",
    "OperationResult",
    "SortOrder",
]


class SortOrder(str, Enum):
    """Orderings available for the filtered prompt view."""

    NAME = "name"
    DATE_CREATED = "date_created"
    DATE_UPDATED = "date_updated"


class DecodePolicy(str, Enum):
    """How the library reacts to persisted data it cannot decode."""

    EMPTY = "empty"
    RAISE = "raise"


class LoadStatus(str, Enum):
    """Outcome of reading one key from the store at start-up."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class LoadReport:
    """Start-up load outcome for the prompt and category keys."""

    prompts: LoadStatus
    categories: LoadStatus
    categories_derived: bool = False
    errors: tuple[PromptLibraryError, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when nothing had to be discarded."""
        return not self.errors


@dataclass(slots=True)
class OperationResult:
    """Outcome of a library mutation.

    ``changed`` is False when the operation found nothing to act on, such as
    an update for an unknown prompt id. ``errors`` lists persistence failures;
    the in-memory change still applies when it is non-empty.
    """

    changed: bool
    errors: list[PromptStorageError] = field(default_factory=list)
    prompt: Prompt | None = None

    @property
    def ok(self) -> bool:
        """Return True when every write reached the store."""
        return not self.errors

    @property
    def persisted(self) -> bool:
        return self.changed and self.ok
