"""Pytest configuration for shared test fixtures.

Updates:
  v0.2.0 - 2026-10-12 - Provide dated prompt factory for ordering tests.
  v0.1.0 - 2026-10-08 - Share in-memory store and library fixtures.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from core import InMemoryStore, PromptLibrary
from models.prompt_model import Prompt

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

PromptFactory = Callable[..., Prompt]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def library(store: InMemoryStore) -> PromptLibrary:
    return PromptLibrary(store)


@pytest.fixture
def make_prompt() -> PromptFactory:
    """Return a factory building prompts with deterministic timestamps."""

    def _factory(
        name: str = "Summary",
        content: str = "Summarise the following text.",
        category: str = "Writing",
        *,
        usage_count: int = 0,
        is_favorite: bool = False,
        created_offset: int = 0,
        updated_offset: int | None = None,
    ) -> Prompt:
        created_at = BASE_TIME + timedelta(minutes=created_offset)
        updated_at = (
            created_at
            if updated_offset is None
            else BASE_TIME + timedelta(minutes=updated_offset)
        )
        return Prompt(
            id=uuid.uuid4(),
            name=name,
            content=content,
            category=category,
            created_at=created_at,
            updated_at=updated_at,
            usage_count=usage_count,
            is_favorite=is_favorite,
        )

    return _factory
