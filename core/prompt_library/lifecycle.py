"""Prompt lifecycle helpers for the prompt library.

Updates:
  v0.4.0 - 2026-10-18 - Publish prompt events after category auto-registration.
  v0.3.0 - 2026-10-12 - Add favourite toggling through update semantics.
  v0.2.0 - 2026-10-09 - Add duplication and usage counters.
  v0.1.0 - 2026-10-07 - Extract prompt CRUD into mixin.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import TYPE_CHECKING

from models.prompt_model import Prompt

from ..notifications import ChangeKind
from .state import OperationResult

if TYPE_CHECKING:
    import threading

logger = logging.getLogger(__name__)

PromptRef = Prompt | uuid.UUID

__all__ = ["PromptLifecycleMixin", "PromptRef"]


def _prompt_id(ref: PromptRef) -> uuid.UUID:
    if isinstance(ref, Prompt):
        return ref.id
    if isinstance(ref, uuid.UUID):
        return ref
    raise TypeError("prompt reference must be a Prompt or uuid.UUID instance.")


class PromptLifecycleMixin:
    """Prompt CRUD orchestration with write-through persistence."""

    _lock: threading.RLock
    _prompts: list[Prompt]
    _copy_suffix: str

    def add_prompt(self, prompt: Prompt) -> OperationResult:
        """Append *prompt*, persist, and auto-register its category."""
        with self._lock:
            if self._index_of(prompt.id) is not None:
                logger.warning(
                    "Ignoring prompt with duplicate id",
                    extra={"prompt_id": str(prompt.id)},
                )
                return OperationResult(changed=False)
            stored = prompt.copy()
            self._prompts.append(stored)
            errors = self._save_prompts()
            errors.extend(self._auto_register_category(stored.category))
            self._emit(ChangeKind.PROMPT_ADDED, errors, prompt_ids=(stored.id,))
        logger.debug("Prompt added", extra={"prompt_id": str(stored.id)})
        return OperationResult(changed=True, errors=errors, prompt=stored.copy())

    def create_prompt(
        self,
        name: str,
        content: str,
        category: str,
        *,
        is_favorite: bool = False,
    ) -> OperationResult:
        """Build a new prompt and add it to the library."""
        return self.add_prompt(
            Prompt.create(name=name, content=content, category=category, is_favorite=is_favorite)
        )

    def update_prompt(self, prompt: Prompt) -> OperationResult:
        """Replace the stored prompt sharing *prompt*'s id, keeping its position.

        Unknown ids are ignored; the result reports ``changed=False``.
        """
        with self._lock:
            index = self._index_of(prompt.id)
            if index is None:
                logger.debug(
                    "Update skipped for unknown prompt",
                    extra={"prompt_id": str(prompt.id)},
                )
                return OperationResult(changed=False)
            current = self._prompts[index]
            stored = replace(prompt, created_at=current.created_at)
            self._prompts[index] = stored
            errors = self._save_prompts()
            errors.extend(self._auto_register_category(stored.category))
            self._emit(ChangeKind.PROMPT_UPDATED, errors, prompt_ids=(stored.id,))
        logger.debug("Prompt updated", extra={"prompt_id": str(stored.id)})
        return OperationResult(changed=True, errors=errors, prompt=stored.copy())

    def delete_prompt(self, prompt: PromptRef) -> OperationResult:
        """Remove every stored prompt with the referenced id."""
        prompt_id = _prompt_id(prompt)
        with self._lock:
            remaining = [entry for entry in self._prompts if entry.id != prompt_id]
            removed = len(self._prompts) - len(remaining)
            self._prompts = remaining
            errors = self._save_prompts()
            if removed:
                self._emit(ChangeKind.PROMPT_DELETED, errors, prompt_ids=(prompt_id,))
        logger.debug(
            "Prompt delete processed",
            extra={"prompt_id": str(prompt_id), "removed": removed},
        )
        return OperationResult(changed=removed > 0, errors=errors)

    def duplicate_prompt(self, prompt: Prompt) -> OperationResult:
        """Add a copy of *prompt* under a fresh id and a suffixed name."""
        clone = replace(
            prompt,
            id=uuid.uuid4(),
            name=f"{prompt.name}{self._copy_suffix}",
        )
        return self.add_prompt(clone)

    def toggle_favorite(self, prompt: PromptRef) -> OperationResult:
        """Flip the stored prompt's favourite flag."""
        prompt_id = _prompt_id(prompt)
        with self._lock:
            index = self._index_of(prompt_id)
            if index is None:
                return OperationResult(changed=False)
            updated = self._prompts[index].copy()
            updated.update(is_favorite=not updated.is_favorite)
            return self.update_prompt(updated)

    def increment_usage(self, prompt: PromptRef) -> OperationResult:
        """Count one use of the referenced prompt.

        ``updated_at`` is left alone so usage does not reorder the
        recently-updated view.
        """
        prompt_id = _prompt_id(prompt)
        with self._lock:
            index = self._index_of(prompt_id)
            if index is None:
                logger.debug(
                    "Usage skipped for unknown prompt",
                    extra={"prompt_id": str(prompt_id)},
                )
                return OperationResult(changed=False)
            stored = self._prompts[index]
            stored.usage_count += 1
            errors = self._save_prompts()
            self._emit(ChangeKind.USAGE_INCREMENTED, errors, prompt_ids=(prompt_id,))
        return OperationResult(changed=True, errors=errors, prompt=stored.copy())

    def reset_all_usage(self) -> OperationResult:
        """Zero every usage counter and persist once."""
        with self._lock:
            changed = any(prompt.usage_count for prompt in self._prompts)
            for prompt in self._prompts:
                prompt.usage_count = 0
            errors = self._save_prompts()
            self._emit(
                ChangeKind.USAGE_RESET,
                errors,
                prompt_ids=tuple(prompt.id for prompt in self._prompts),
            )
        logger.debug("Usage counters reset", extra={"prompt_count": len(self._prompts)})
        return OperationResult(changed=changed, errors=errors)

    def _index_of(self, prompt_id: uuid.UUID) -> int | None:
        for index, prompt in enumerate(self._prompts):
            if prompt.id == prompt_id:
                return index
        return None

