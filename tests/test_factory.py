"""Tests for store selection and library construction from settings.

Updates:
  v0.1.0 - 2026-10-09 - Cover each storage backend branch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from config import PromptLibrarySettings
from core import (
    DirectoryStore,
    InMemoryStore,
    LibraryEventHub,
    PromptDecodeError,
    RedisStore,
    SQLiteStore,
    SortOrder,
    build_prompt_library,
    build_store,
)
from core.repository import redis_store


def _settings(**overrides: Any) -> PromptLibrarySettings:
    return PromptLibrarySettings(**overrides)


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


def test_build_store_memory() -> None:
    assert isinstance(build_store(_settings(storage_backend="memory")), InMemoryStore)


def test_build_store_directory(tmp_path: Path) -> None:
    store = build_store(_settings(storage_backend="directory", data_dir=tmp_path / "lib"))

    assert isinstance(store, DirectoryStore)
    assert store.root == tmp_path / "lib"
    assert store.root.is_dir()


def test_build_store_sqlite(tmp_path: Path) -> None:
    store = build_store(_settings(storage_backend="sqlite", db_path=tmp_path / "lib.db"))

    assert isinstance(store, SQLiteStore)
    assert (tmp_path / "lib.db").exists()


def test_build_store_redis_uses_from_url(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    class _RedisModule:
        @staticmethod
        def from_url(dsn: str) -> object:
            calls.append(dsn)
            return object()

    monkeypatch.setattr(redis_store, "redis", _RedisModule)

    store = build_store(
        _settings(storage_backend="redis", redis_dsn="redis://localhost:6379/3")
    )

    assert isinstance(store, RedisStore)
    assert calls == ["redis://localhost:6379/3"]


def test_build_prompt_library_applies_settings() -> None:
    events = LibraryEventHub()
    settings = _settings(
        storage_backend="memory",
        default_sort_order="date_created",
        most_used_limit=1,
        copy_suffix=" v2",
    )

    library = build_prompt_library(settings, events=events)
    created = library.create_prompt("Outline", "Body", "Writing").prompt
    assert created is not None
    library.create_prompt("Review", "Body", "Writing")
    clone = library.duplicate_prompt(created).prompt

    assert library.events is events
    assert library.sort_order is SortOrder.DATE_CREATED
    assert len(library.most_used_prompts) == 1
    assert clone is not None and clone.name == "Outline v2"


def test_build_prompt_library_honours_strict_decode_policy() -> None:
    store = InMemoryStore({"savedPrompts": b"garbage"})

    with pytest.raises(PromptDecodeError):
        build_prompt_library(_settings(decode_failure_policy="raise"), store=store)
