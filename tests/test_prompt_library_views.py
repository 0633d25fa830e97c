"""Tests for filtered, favourite, most-used, and search views.

Updates:
  v0.2.0 - 2026-10-12 - Cover transient state change events.
  v0.1.0 - 2026-10-07 - Cover filtering, sorting, and most-used ranking.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from core import ChangeKind, InMemoryStore, LibraryEvent, PromptLibrary, SortOrder, sort_prompts
from models.prompt_model import Prompt


@pytest.fixture
def populated(
    library: PromptLibrary,
    make_prompt: Callable[..., Prompt],
) -> PromptLibrary:
    library.add_prompt(
        make_prompt("Summary", "Summarise the changelog.", "Writing", created_offset=0)
    )
    library.add_prompt(
        make_prompt(
            "Changelog Generator",
            "Draft release notes.",
            "Dev",
            created_offset=10,
            updated_offset=11,
        )
    )
    library.add_prompt(
        make_prompt(
            "Bug Report",
            "Describe the bug.",
            "Dev",
            created_offset=5,
            updated_offset=30,
            is_favorite=True,
        )
    )
    return library


def test_filter_matches_name_case_insensitively(populated: PromptLibrary) -> None:
    populated.search_text = "LOG"

    names = [prompt.name for prompt in populated.filtered_prompts]

    assert names == ["Changelog Generator"]
    assert "Summary" not in names


def test_filter_by_category(populated: PromptLibrary) -> None:
    populated.selected_category = "Dev"

    assert [prompt.name for prompt in populated.filtered_prompts] == [
        "Bug Report",
        "Changelog Generator",
    ]


def test_filter_combines_search_and_category(populated: PromptLibrary) -> None:
    populated.selected_category = "Writing"
    populated.search_text = "log"

    assert populated.filtered_prompts == []


def test_filtered_prompts_default_to_name_order(populated: PromptLibrary) -> None:
    assert [prompt.name for prompt in populated.filtered_prompts] == [
        "Bug Report",
        "Changelog Generator",
        "Summary",
    ]


def test_sort_by_creation_is_newest_first(populated: PromptLibrary) -> None:
    populated.sort_order = SortOrder.DATE_CREATED

    assert [prompt.name for prompt in populated.filtered_prompts] == [
        "Changelog Generator",
        "Bug Report",
        "Summary",
    ]


def test_sort_by_update_is_most_recent_first(populated: PromptLibrary) -> None:
    populated.sort_order = "date_updated"

    assert [prompt.name for prompt in populated.filtered_prompts] == [
        "Bug Report",
        "Changelog Generator",
        "Summary",
    ]


def test_sorting_never_reorders_stored_list(populated: PromptLibrary) -> None:
    populated.sort_order = SortOrder.DATE_UPDATED
    _ = populated.filtered_prompts

    assert [prompt.name for prompt in populated.prompts] == [
        "Summary",
        "Changelog Generator",
        "Bug Report",
    ]


def test_sort_by_name_is_case_sensitive(make_prompt: Callable[..., Prompt]) -> None:
    prompts = [make_prompt("beta"), make_prompt("Alpha"), make_prompt("alpha")]

    assert [prompt.name for prompt in sort_prompts(prompts, SortOrder.NAME)] == [
        "Alpha",
        "alpha",
        "beta",
    ]


def test_favorite_prompts(populated: PromptLibrary) -> None:
    assert [prompt.name for prompt in populated.favorite_prompts] == ["Bug Report"]


def test_most_used_orders_by_usage_descending(
    library: PromptLibrary,
    make_prompt: Callable[..., Prompt],
) -> None:
    for index, count in enumerate([5, 0, 3, 0, 8]):
        library.add_prompt(make_prompt(f"Prompt {index}", usage_count=count))

    counts = [prompt.usage_count for prompt in library.most_used_prompts]

    assert counts == [8, 5, 3, 0, 0]


def test_most_used_falls_back_to_name_order_when_unused(
    library: PromptLibrary,
    make_prompt: Callable[..., Prompt],
) -> None:
    for name in ("Charlie", "Alice", "Bob"):
        library.add_prompt(make_prompt(name))

    assert [prompt.name for prompt in library.most_used_prompts] == [
        "Alice",
        "Bob",
        "Charlie",
    ]


def test_most_used_is_capped(store: InMemoryStore, make_prompt: Callable[..., Prompt]) -> None:
    library = PromptLibrary(store, most_used_limit=2)
    for count in (1, 2, 3):
        library.add_prompt(make_prompt(f"Prompt {count}", usage_count=count))

    assert [prompt.usage_count for prompt in library.most_used_prompts] == [3, 2]


def test_default_limit_returns_twenty(
    library: PromptLibrary,
    make_prompt: Callable[..., Prompt],
) -> None:
    for index in range(25):
        library.add_prompt(make_prompt(f"Prompt {index:02d}", usage_count=index))

    assert len(library.most_used_prompts) == 20


def test_search_prompts_matches_name_or_content(populated: PromptLibrary) -> None:
    names = [prompt.name for prompt in populated.search_prompts("changelog")]

    assert names == ["Summary", "Changelog Generator"]
    assert len(populated.search_prompts("  ")) == 3


def test_prompts_in_category(populated: PromptLibrary) -> None:
    assert [prompt.name for prompt in populated.prompts_in_category("Dev")] == [
        "Changelog Generator",
        "Bug Report",
    ]


def test_view_state_changes_emit_events_once(library: PromptLibrary) -> None:
    events: list[LibraryEvent] = []
    library.subscribe(events.append)

    library.search_text = "log"
    library.search_text = "log"
    library.selected_category = "Dev"
    library.sort_order = SortOrder.NAME
    library.sort_order = SortOrder.DATE_CREATED

    assert [event.kind for event in events] == [
        ChangeKind.SEARCH_CHANGED,
        ChangeKind.FILTER_CHANGED,
        ChangeKind.SORT_CHANGED,
    ]


def test_invalid_sort_order_is_rejected(library: PromptLibrary) -> None:
    with pytest.raises(ValueError):
        library.sort_order = "popularity"
