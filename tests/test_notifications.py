"""Tests for the library change event hub."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from core.exceptions import PromptStorageError
from core.notifications import ChangeKind, LibraryEvent, LibraryEventHub


def test_publish_delivers_to_subscribers() -> None:
    hub = LibraryEventHub()
    events: list[LibraryEvent] = []
    hub.subscribe(events.append)

    hub.publish(LibraryEvent(kind=ChangeKind.CATEGORY_ADDED, category="Writing"))

    assert len(events) == 1
    assert events[0].category == "Writing"
    assert events[0].persisted is True


def test_delivered_events_cannot_be_modified() -> None:
    hub = LibraryEventHub()
    events: list[LibraryEvent] = []
    hub.subscribe(events.append)
    hub.publish(LibraryEvent(kind=ChangeKind.CATEGORY_ADDED, category="Writing"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        events[0].category = "Other"  # type: ignore[misc]

    assert hub.history()[0].category == "Writing"


def test_subscription_can_be_closed() -> None:
    hub = LibraryEventHub()
    events: list[LibraryEvent] = []
    subscription = hub.subscribe(events.append)
    subscription.close()
    subscription.close()

    hub.publish(LibraryEvent(kind=ChangeKind.USAGE_RESET))

    assert events == []


def test_subscription_context_manager_detaches() -> None:
    hub = LibraryEventHub()
    events: list[LibraryEvent] = []

    with hub.subscribe(events.append):
        hub.publish(LibraryEvent(kind=ChangeKind.PROMPT_ADDED))
    hub.publish(LibraryEvent(kind=ChangeKind.PROMPT_DELETED))

    assert [event.kind for event in events] == [ChangeKind.PROMPT_ADDED]


def test_subscriber_errors_are_logged_and_isolated(caplog: pytest.LogCaptureFixture) -> None:
    hub = LibraryEventHub()
    received: list[LibraryEvent] = []

    def _boom(event: LibraryEvent) -> None:
        raise RuntimeError("listener failed")

    hub.subscribe(_boom)
    hub.subscribe(received.append)

    with caplog.at_level(logging.ERROR, logger="prompt_library.notifications"):
        hub.publish(LibraryEvent(kind=ChangeKind.PROMPT_UPDATED))

    assert len(received) == 1
    assert "subscriber raised" in caplog.text


def test_history_is_bounded() -> None:
    hub = LibraryEventHub(history_limit=2)
    for kind in (ChangeKind.PROMPT_ADDED, ChangeKind.PROMPT_UPDATED, ChangeKind.PROMPT_DELETED):
        hub.publish(LibraryEvent(kind=kind))

    assert [event.kind for event in hub.history()] == [
        ChangeKind.PROMPT_UPDATED,
        ChangeKind.PROMPT_DELETED,
    ]


def test_event_to_dict_reports_errors() -> None:
    event = LibraryEvent(
        kind=ChangeKind.USAGE_INCREMENTED,
        errors=(PromptStorageError("write failed", key="savedPrompts"),),
    )

    payload = event.to_dict()

    assert payload["kind"] == "usage_incremented"
    assert payload["errors"] == ["write failed"]
    assert event.persisted is False
