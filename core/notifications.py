"""Change notifications published by the prompt library.

Updates:
  v0.3.0 - 2026-10-18 - Freeze LibraryEvent so delivered payloads cannot be altered.
  v0.2.0 - 2026-10-11 - Carry persistence errors on events so listeners can surface failures.
  v0.1.0 - 2026-10-07 - Introduce event hub with subscription handles and bounded history.
"""
from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from .exceptions import PromptStorageError

logger = logging.getLogger("prompt_library.notifications")


class ChangeKind(str, Enum):
    """Library state transitions communicated to listeners."""
    PROMPT_ADDED = "prompt_added"
    PROMPT_UPDATED = "prompt_updated"
    PROMPT_DELETED = "prompt_deleted"
    USAGE_INCREMENTED = "usage_incremented"
    USAGE_RESET = "usage_reset"
    CATEGORY_ADDED = "category_added"
    CATEGORY_DELETED = "category_deleted"
    SEARCH_CHANGED = "search_changed"
    FILTER_CHANGED = "filter_changed"
    SORT_CHANGED = "sort_changed"


@dataclass(slots=True, frozen=True)
class LibraryEvent:
    """Immutable payload describing one state change."""
    kind: ChangeKind
    prompt_ids: tuple[uuid.UUID, ...] = ()
    category: str | None = None
    errors: tuple[PromptStorageError, ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def persisted(self) -> bool:
        """Return True when the change reached the store without errors."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Return a serialisable representation of the event."""
        return {
            "id": str(self.id),
            "kind": self.kind.value,
            "prompt_ids": [str(prompt_id) for prompt_id in self.prompt_ids],
            "category": self.category,
            "errors": [str(error) for error in self.errors],
            "timestamp": self.timestamp.isoformat(),
        }


class EventSubscription:
    """Disposable handle that removes its callback when closed."""
    def __init__(
        self,
        hub: LibraryEventHub,
        callback: Callable[[LibraryEvent], None],
    ) -> None:
        self._hub = hub
        self._callback = callback
        self._closed = False

    def close(self) -> None:
        """Detach the stored callback if it is still active."""
        if self._closed:
            return
        self._closed = True
        self._hub.unsubscribe(self._callback)

    def __enter__(self) -> EventSubscription:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class LibraryEventHub:
    """Thread-safe publish/subscribe hub for library change events."""
    def __init__(self, history_limit: int = 200) -> None:
        self._subscribers: list[Callable[[LibraryEvent], None]] = []
        self._lock = threading.RLock()
        self._history: deque[LibraryEvent] = deque(maxlen=history_limit)

    def subscribe(self, callback: Callable[[LibraryEvent], None]) -> EventSubscription:
        """Register *callback* to receive future events."""
        with self._lock:
            self._subscribers.append(callback)
        return EventSubscription(self, callback)

    def unsubscribe(self, callback: Callable[[LibraryEvent], None]) -> None:
        """Remove a previously subscribed callback if present."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def publish(self, event: LibraryEvent) -> None:
        """Deliver *event* to all registered subscribers."""
        with self._lock:
            self._history.append(event)
            subscribers = list(self._subscribers)

        logger.debug(
            "Library event",
            extra={
                "kind": event.kind.value,
                "prompt_ids": [str(prompt_id) for prompt_id in event.prompt_ids],
                "category": event.category,
                "persisted": event.persisted,
            },
        )

        for callback in subscribers:
            try:
                callback(event)
            except Exception:  # noqa: BLE001 - listeners must not break mutations
                logger.exception("Library event subscriber raised an exception")

    def history(self) -> tuple[LibraryEvent, ...]:
        """Return a snapshot of recently published events."""
        with self._lock:
            return tuple(self._history)


__all__ = [
    "ChangeKind",
    "EventSubscription",
    "LibraryEvent",
    "LibraryEventHub",
]
