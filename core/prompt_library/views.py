"""Derived, read-only projections of the prompt list.

Views are recomputed on every access and return detached copies; none of
them reorder the stored list.

Updates:
  v0.2.0 - 2026-10-10 - Add content-aware quick search and per-category listing.
  v0.1.0 - 2026-10-07 - Extract filtered, favourite, and most-used views into mixin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import SortOrder

if TYPE_CHECKING:
    import threading
    import uuid
    from collections.abc import Iterable

    from models.prompt_model import Prompt

__all__ = ["PromptViewsMixin", "matches_search", "sort_prompts"]


def matches_search(text: str, query: str) -> bool:
    """Return True when *query* occurs in *text*, ignoring case."""
    return query.casefold() in text.casefold()


def sort_prompts(prompts: Iterable[Prompt], order: SortOrder) -> list[Prompt]:
    """Return *prompts* ordered for display.

    Names sort case-sensitively ascending; both date orders put the newest
    first. Ties keep their incoming order.
    """
    if order is SortOrder.DATE_CREATED:
        return sorted(prompts, key=lambda prompt: prompt.created_at, reverse=True)
    if order is SortOrder.DATE_UPDATED:
        return sorted(prompts, key=lambda prompt: prompt.updated_at, reverse=True)
    return sorted(prompts, key=lambda prompt: prompt.name)


class PromptViewsMixin:
    """Filtering, sorting, favourites, and most-used projections."""

    _lock: threading.RLock
    _prompts: list[Prompt]
    _search_text: str
    _selected_category: str | None
    _sort_order: SortOrder
    _most_used_limit: int

    @property
    def filtered_prompts(self) -> list[Prompt]:
        """Prompts matching the search text and category filter, sorted."""
        search = self._search_text
        category = self._selected_category
        matches = [
            prompt
            for prompt in self._snapshot()
            if (not search or matches_search(prompt.name, search))
            and (category is None or prompt.category == category)
        ]
        return sort_prompts(matches, self._sort_order)

    @property
    def favorite_prompts(self) -> list[Prompt]:
        """Favourite prompts in stored order."""
        return [prompt for prompt in self._snapshot() if prompt.is_favorite]

    @property
    def most_used_prompts(self) -> list[Prompt]:
        """Prompts ranked by usage, capped at the configured limit.

        When nothing has been used yet the ranking falls back to name order so
        a fresh library still shows a stable list.
        """
        prompts = self._snapshot()
        if all(prompt.usage_count == 0 for prompt in prompts):
            ranked = sort_prompts(prompts, SortOrder.NAME)
        else:
            ranked = sorted(prompts, key=lambda prompt: prompt.usage_count, reverse=True)
        return ranked[: self._most_used_limit]

    def get_prompt(self, prompt_id: uuid.UUID) -> Prompt | None:
        """Return the stored prompt with *prompt_id*, or None."""
        with self._lock:
            for prompt in self._prompts:
                if prompt.id == prompt_id:
                    return prompt.copy()
        return None

    def prompts_in_category(self, category: str) -> list[Prompt]:
        """Prompts filed under *category*, in stored order."""
        return [prompt for prompt in self._snapshot() if prompt.category == category]

    def search_prompts(self, query: str) -> list[Prompt]:
        """Quick search over names and bodies, in stored order."""
        needle = query.strip()
        prompts = self._snapshot()
        if not needle:
            return prompts
        return [
            prompt
            for prompt in prompts
            if matches_search(prompt.name, needle) or matches_search(prompt.content, needle)
        ]

    def _snapshot(self) -> list[Prompt]:
        with self._lock:
            return [prompt.copy() for prompt in self._prompts]
