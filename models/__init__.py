"""Data models for Prompt Library.

Updates: v0.2.0 - 2026-10-06 - Export category label helpers.
Updates: v0.1.0 - 2026-10-06 - Export Prompt dataclass.
"""

from .category_model import clean_category_label, derive_categories, sorted_categories
from .prompt_model import Prompt

__all__ = [
    "Prompt",
    "clean_category_label",
    "derive_categories",
    "sorted_categories",
]
