"""Printable summaries for Prompt Library configuration.

Updates:
  v0.1.1 - 2026-10-11 - Show decode failure policy and Redis namespace.
  v0.1.0 - 2026-10-08 - Render storage and view settings for --print-settings.
"""

from __future__ import annotations

from config import PromptLibrarySettings

from .utils import describe_path, mask_secret


def render_settings_summary(settings: PromptLibrarySettings) -> str:
    """Return a readable summary of storage and view configuration."""
    backend = settings.storage_backend
    lines = [
        "Prompt Library configuration summary",
        "------------------------------------",
        f"Storage backend: {backend}",
    ]
    if backend == "directory":
        lines.append(f"Data directory: {describe_path(settings.data_dir, expect_directory=True)}")
    elif backend == "sqlite":
        db_path_desc = describe_path(
            settings.db_path,
            expect_directory=False,
            allow_missing_file=True,
        )
        lines.append(f"Database path: {db_path_desc}")
    elif backend == "redis":
        lines.append(f"Redis DSN: {mask_secret(settings.redis_dsn)}")
        lines.append(f"Redis namespace: {settings.redis_namespace}")
    else:
        lines.append("Data is kept in memory and discarded on exit.")

    lines.extend(
        [
            f"Prompts key: {settings.prompts_key}",
            f"Categories key: {settings.categories_key}",
            f"Decode failure policy: {settings.decode_failure_policy}",
            "",
            "Views",
            "-----",
            f"Default sort order: {settings.default_sort_order}",
            f"Most-used limit: {settings.most_used_limit}",
            f"Copy suffix: {settings.copy_suffix!r}",
        ]
    )
    return "\n".join(lines)


def print_settings_summary(settings: PromptLibrarySettings) -> None:
    """Emit a readable summary of core configuration and health checks."""
    print(render_settings_summary(settings))
