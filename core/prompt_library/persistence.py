"""Store read/write helpers for the prompt library.

Every mutation writes the full list it touched back to the store. Failures
are logged and returned, never raised; the in-memory lists stay authoritative
for the rest of the session.

Updates:
  v0.2.0 - 2026-10-11 - Report load fallbacks and honour the strict decode policy.
  v0.1.0 - 2026-10-07 - Extract write-through persistence into mixin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from models.category_model import derive_categories, sorted_categories

from ..exceptions import PromptDecodeError, PromptStorageError
from .codec import decode_categories, decode_prompts, encode_categories, encode_prompts
from .state import DecodePolicy, LoadReport, LoadStatus

if TYPE_CHECKING:
    from collections.abc import Callable

    from models.prompt_model import Prompt

    from ..exceptions import PromptLibraryError
    from ..repository import KeyValueStore

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

__all__ = ["LibraryPersistenceMixin"]


class LibraryPersistenceMixin:
    """Load library state at start-up and write it back after mutations."""

    _store: KeyValueStore
    _prompts: list[Prompt]
    _categories: list[str]
    _prompts_key: str
    _categories_key: str
    _decode_policy: DecodePolicy

    def _load_state(self) -> LoadReport:
        """Populate prompts and categories from the store."""
        errors: list[PromptLibraryError] = []
        prompts, prompts_status = self._load_key(self._prompts_key, decode_prompts, errors)
        self._prompts = prompts or []

        categories, categories_status = self._load_key(
            self._categories_key, decode_categories, errors
        )
        derived = categories is None
        if categories is None:
            self._categories = derive_categories(prompt.category for prompt in self._prompts)
        else:
            self._categories = sorted_categories(categories)

        report = LoadReport(
            prompts=prompts_status,
            categories=categories_status,
            categories_derived=derived,
            errors=tuple(errors),
        )
        logger.debug(
            "Prompt library loaded",
            extra={
                "prompt_count": len(self._prompts),
                "category_count": len(self._categories),
                "prompts_status": prompts_status.value,
                "categories_status": categories_status.value,
            },
        )
        return report

    def _load_key(
        self,
        key: str,
        decoder: Callable[[bytes], _T],
        errors: list[PromptLibraryError],
    ) -> tuple[_T | None, LoadStatus]:
        try:
            blob = self._store.load(key)
        except Exception as exc:  # noqa: BLE001 - unreadable store degrades to empty state
            logger.warning("Unable to read %s from store; starting empty", key, exc_info=True)
            error = PromptStorageError(f"Failed to read {key}", key=key)
            error.__cause__ = exc
            errors.append(error)
            return None, LoadStatus.FAILED
        if blob is None:
            return None, LoadStatus.MISSING
        try:
            return decoder(blob), LoadStatus.LOADED
        except PromptDecodeError as exc:
            if self._decode_policy is DecodePolicy.RAISE:
                raise
            logger.warning("Discarding undecodable %s: %s", key, exc)
            errors.append(exc)
            return None, LoadStatus.CORRUPT

    def _save_prompts(self) -> list[PromptStorageError]:
        """Write the full prompt list to the store."""
        try:
            blob = encode_prompts(self._prompts)
        except (TypeError, ValueError) as exc:
            return [self._storage_failure(self._prompts_key, "encode", exc)]
        return self._write(self._prompts_key, blob)

    def _save_categories(self) -> list[PromptStorageError]:
        """Write the category list to the store."""
        try:
            blob = encode_categories(self._categories)
        except (TypeError, ValueError) as exc:
            return [self._storage_failure(self._categories_key, "encode", exc)]
        return self._write(self._categories_key, blob)

    def _write(self, key: str, blob: bytes) -> list[PromptStorageError]:
        try:
            self._store.save(key, blob)
        except Exception as exc:  # noqa: BLE001 - failures are returned to the caller
            return [self._storage_failure(key, "write", exc)]
        return []

    @staticmethod
    def _storage_failure(key: str, action: str, exc: Exception) -> PromptStorageError:
        logger.warning("Failed to %s %s; keeping in-memory state", action, key, exc_info=exc)
        error = PromptStorageError(f"Failed to {action} {key}: {exc}", key=key)
        error.__cause__ = exc
        return error
