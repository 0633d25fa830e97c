"""Category management helpers for the prompt library.

Updates:
  v0.2.0 - 2026-10-10 - Name the auto-register step taken when prompts introduce labels.
  v0.1.0 - 2026-10-07 - Extract category APIs into mixin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from models.category_model import clean_category_label

from ..notifications import ChangeKind
from .state import OperationResult

if TYPE_CHECKING:
    import threading

    from models.prompt_model import Prompt

    from ..exceptions import PromptStorageError

logger = logging.getLogger(__name__)

__all__ = ["CategorySupport"]


class CategorySupport:
    """Mixin exposing category CRUD on top of the persistence helpers."""

    _lock: threading.RLock
    _prompts: list[Prompt]
    _categories: list[str]

    def add_category(self, name: str) -> OperationResult:
        """Register a trimmed category label.

        Empty labels and labels already present (exact match) are ignored and
        reported with ``changed=False``.
        """
        label = clean_category_label(name)
        with self._lock:
            if not label or label in self._categories:
                return OperationResult(changed=False)
            self._categories.append(label)
            self._categories.sort()
            errors = self._save_categories()
            self._emit(ChangeKind.CATEGORY_ADDED, errors, category=label)
        logger.debug("Category added", extra={"category": label})
        return OperationResult(changed=True, errors=errors)

    def delete_category_and_prompts(self, category: str) -> OperationResult:
        """Remove *category* and every prompt filed under it."""
        with self._lock:
            removed_ids = tuple(
                prompt.id for prompt in self._prompts if prompt.category == category
            )
            was_listed = category in self._categories
            self._categories = [label for label in self._categories if label != category]
            self._prompts = [prompt for prompt in self._prompts if prompt.category != category]
            errors = self._save_prompts()
            errors.extend(self._save_categories())
            self._emit(
                ChangeKind.CATEGORY_DELETED,
                errors,
                prompt_ids=removed_ids,
                category=category,
            )
        logger.debug(
            "Category deleted",
            extra={"category": category, "removed_prompts": len(removed_ids)},
        )
        return OperationResult(changed=was_listed or bool(removed_ids), errors=errors)

    def _auto_register_category(self, category: str) -> list[PromptStorageError]:
        """Add *category* to the category list when a prompt introduces it."""
        if category in self._categories:
            return []
        return self.add_category(category).errors
