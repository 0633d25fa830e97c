"""Prompt library façade composing lifecycle, category, and view mixins.

The library owns the prompt and category lists, writes them through to an
injected key-value store after every mutation, and publishes a
:class:`~core.notifications.LibraryEvent` once each change has been persisted
(or has failed to persist). No operation raises to its caller; results carry
persistence errors instead.

Usage:
    >>> from core.repository import InMemoryStore
    >>> library = PromptLibrary(InMemoryStore())
    >>> result = library.create_prompt("Summary", "Summarise this text", "Writing")
    >>> library.categories
    ['Writing']

Updates:
  v0.3.0 - 2026-10-12 - Expose transient search/filter/sort state with change events.
  v0.2.0 - 2026-10-11 - Accept decode policy and surface the start-up load report.
  v0.1.0 - 2026-10-07 - Compose the PromptLibrary from mixins.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ..notifications import ChangeKind, LibraryEvent, LibraryEventHub
from .categories import CategorySupport
from .lifecycle import PromptLifecycleMixin, PromptRef
from .persistence import LibraryPersistenceMixin
from .state import DecodePolicy, LoadReport, LoadStatus, OperationResult, SortOrder
from .views import PromptViewsMixin, matches_search, sort_prompts

if TYPE_CHECKING:  # pragma: no cover - typing only
    import uuid
    from collections.abc import Callable

    from models.prompt_model import Prompt

    from ..exceptions import PromptStorageError
    from ..notifications import EventSubscription
    from ..repository import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_PROMPTS_KEY = "savedPrompts"
DEFAULT_CATEGORIES_KEY = "savedCategories"
DEFAULT_MOST_USED_LIMIT = 20
DEFAULT_COPY_SUFFIX = " (Copy)"

__all__ = [
    "DEFAULT_CATEGORIES_KEY",
    "DEFAULT_COPY_SUFFIX",
    "DEFAULT_MOST_USED_LIMIT",
    "DEFAULT_PROMPTS_KEY",
    "DecodePolicy",
    "LoadReport",
    "LoadStatus",
    "OperationResult",
    "PromptLibrary",
    "PromptRef",
    "SortOrder",
    "matches_search",
    "sort_prompts",
]


class PromptLibrary(
    PromptLifecycleMixin,
    CategorySupport,
    PromptViewsMixin,
    LibraryPersistenceMixin,
):
    """Manage the prompt collection, its categories, and derived views."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        prompts_key: str = DEFAULT_PROMPTS_KEY,
        categories_key: str = DEFAULT_CATEGORIES_KEY,
        sort_order: SortOrder | str = SortOrder.NAME,
        most_used_limit: int = DEFAULT_MOST_USED_LIMIT,
        copy_suffix: str = DEFAULT_COPY_SUFFIX,
        decode_policy: DecodePolicy | str = DecodePolicy.EMPTY,
        events: LibraryEventHub | None = None,
    ) -> None:
        if most_used_limit < 1:
            raise ValueError("most_used_limit must be at least 1")
        if prompts_key == categories_key:
            raise ValueError("prompts_key and categories_key must differ")
        self._lock = threading.RLock()
        self._store = store
        self._prompts_key = prompts_key
        self._categories_key = categories_key
        self._most_used_limit = most_used_limit
        self._copy_suffix = copy_suffix
        self._decode_policy = DecodePolicy(decode_policy)
        self._events = events if events is not None else LibraryEventHub()
        self._search_text = ""
        self._selected_category: str | None = None
        self._sort_order = SortOrder(sort_order)
        self._prompts: list[Prompt] = []
        self._categories: list[str] = []
        self._load_report = self._load_state()
        if not self._load_report.ok:
            logger.warning(
                "Prompt library started with discarded data",
                extra={
                    "prompts_status": self._load_report.prompts.value,
                    "categories_status": self._load_report.categories.value,
                },
            )

    # Observable state --------------------------------------------------- #

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def events(self) -> LibraryEventHub:
        return self._events

    @property
    def load_report(self) -> LoadReport:
        """Outcome of reading the store when the library was created."""
        return self._load_report

    @property
    def prompts(self) -> list[Prompt]:
        """All prompts in stored (insertion) order."""
        return self._snapshot()

    @property
    def categories(self) -> list[str]:
        """Known category labels in ascending order."""
        with self._lock:
            return list(self._categories)

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        if value == self._search_text:
            return
        self._search_text = value
        self._emit(ChangeKind.SEARCH_CHANGED, [])

    @property
    def selected_category(self) -> str | None:
        return self._selected_category

    @selected_category.setter
    def selected_category(self, value: str | None) -> None:
        if value == self._selected_category:
            return
        self._selected_category = value
        self._emit(ChangeKind.FILTER_CHANGED, [], category=value)

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @sort_order.setter
    def sort_order(self, value: SortOrder | str) -> None:
        order = SortOrder(value)
        if order is self._sort_order:
            return
        self._sort_order = order
        self._emit(ChangeKind.SORT_CHANGED, [])

    def subscribe(self, callback: Callable[[LibraryEvent], None]) -> EventSubscription:
        """Register *callback* for change events; close the handle to stop."""
        return self._events.subscribe(callback)

    def __len__(self) -> int:
        with self._lock:
            return len(self._prompts)

    def __contains__(self, prompt_id: object) -> bool:
        with self._lock:
            return any(prompt.id == prompt_id for prompt in self._prompts)

    # Internal utilities ------------------------------------------------- #

    def _emit(
        self,
        kind: ChangeKind,
        errors: list[PromptStorageError],
        *,
        prompt_ids: tuple[uuid.UUID, ...] = (),
        category: str | None = None,
    ) -> None:
        self._events.publish(
            LibraryEvent(
                kind=kind,
                prompt_ids=prompt_ids,
                category=category,
                errors=tuple(errors),
            )
        )
