"""Tests for the Prompt dataclass and its record helpers.

Updates:
  v0.2.0 - 2026-10-12 - Cover favourite defaults for records written before the flag existed.
  v0.1.0 - 2026-10-06 - Cover creation, update, and record parsing.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from models import clean_category_label, derive_categories, sorted_categories
from models.prompt_model import Prompt


def test_create_assigns_identity_and_matching_timestamps() -> None:
    prompt = Prompt.create("Summary", "Summarise this.", "Writing")

    assert isinstance(prompt.id, uuid.UUID)
    assert prompt.created_at == prompt.updated_at
    assert prompt.created_at.tzinfo is not None
    assert prompt.usage_count == 0
    assert prompt.is_favorite is False


def test_create_accepts_empty_fields() -> None:
    prompt = Prompt.create("", "", "")

    assert prompt.name == ""
    assert prompt.category == ""


def test_update_overwrites_supplied_fields_and_refreshes_timestamp() -> None:
    created = datetime(2020, 5, 1, tzinfo=UTC)
    prompt = Prompt(
        id=uuid.uuid4(),
        name="Old",
        content="Body",
        category="General",
        created_at=created,
        updated_at=created,
    )

    prompt.update(name="New", is_favorite=True)

    assert prompt.name == "New"
    assert prompt.content == "Body"
    assert prompt.category == "General"
    assert prompt.is_favorite is True
    assert prompt.updated_at > created
    assert prompt.created_at == created


def test_update_never_moves_updated_at_before_created_at() -> None:
    future = datetime.now(UTC) + timedelta(days=1)
    prompt = Prompt(id=uuid.uuid4(), name="a", content="b", category="c", created_at=future)

    prompt.update(content="changed")

    assert prompt.updated_at >= prompt.created_at


def test_copy_is_detached() -> None:
    prompt = Prompt.create("Summary", "Body", "Writing")
    clone = prompt.copy()

    clone.name = "Changed"

    assert prompt.name == "Summary"
    assert clone == Prompt(
        id=prompt.id,
        name="Changed",
        content=prompt.content,
        category=prompt.category,
        created_at=prompt.created_at,
        updated_at=prompt.updated_at,
    )


def test_record_roundtrip_preserves_every_field() -> None:
    prompt = Prompt.create("Changelog Generator", "Draft notes", "Dev", usage_count=4)
    prompt.update(is_favorite=True)

    restored = Prompt.from_record(prompt.to_record())

    assert restored == prompt


def test_from_record_defaults_missing_optional_fields() -> None:
    record = {
        "id": str(uuid.uuid4()),
        "name": "Legacy",
        "content": "Older record",
        "category": "Archive",
        "created_at": "2024-03-01T10:00:00",
    }

    prompt = Prompt.from_record(record)

    assert prompt.is_favorite is False
    assert prompt.usage_count == 0
    assert prompt.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=UTC)
    assert prompt.updated_at == prompt.created_at


@pytest.mark.parametrize(
    "record",
    [
        {"name": "No id", "content": "x"},
        {"id": "not-a-uuid", "name": "Bad id", "content": "x"},
        {"id": str(uuid.uuid4()), "name": "Bad count", "content": "x", "usage_count": -1},
        {"id": str(uuid.uuid4()), "name": "Bad date", "content": "x", "created_at": "soon"},
        {"id": str(uuid.uuid4()), "name": None, "content": "x"},
        {"id": str(uuid.uuid4()), "name": "Numeric body", "content": 123},
        {"id": str(uuid.uuid4()), "name": "Bad category", "content": "x", "category": 7},
        {"id": str(uuid.uuid4()), "name": "Bad flag", "content": "x", "is_favorite": "false"},
        {"id": str(uuid.uuid4()), "name": "Int flag", "content": "x", "is_favorite": 1},
    ],
)
def test_from_record_rejects_invalid_records(record: dict[str, object]) -> None:
    with pytest.raises((KeyError, ValueError, TypeError)):
        Prompt.from_record(record)


def test_category_helpers_trim_sort_and_deduplicate() -> None:
    assert clean_category_label("  Work  ") == "Work"
    assert clean_category_label(None) == ""
    assert sorted_categories(["b", "a", "b", "B"]) == ["B", "a", "b"]
    assert derive_categories(["Dev", "", "Art", "Dev"]) == ["Art", "Dev"]
