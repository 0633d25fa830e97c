"""Category label helpers.

Categories are plain string labels; prompts reference them by value. These
helpers keep the category list deduplicated and ordered.

Updates: v0.1.0 - 2026-10-06 - Introduce label normalisation and ordering helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def clean_category_label(value: str | None) -> str:
    """Return *value* with surrounding whitespace removed."""
    return (value or "").strip()


def sorted_categories(labels: Iterable[str]) -> list[str]:
    """Return the distinct labels in ascending order.

    Matching is exact and case-sensitive; ``"Work"`` and ``"work"`` are two
    categories.
    """
    return sorted(set(labels))


def derive_categories(prompt_categories: Iterable[str]) -> list[str]:
    """Infer a category list from the labels used by existing prompts."""
    return sorted_categories(label for label in prompt_categories if label)


__all__ = ["clean_category_label", "derive_categories", "sorted_categories"]
