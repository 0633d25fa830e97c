"""Shared CLI utility functions for Prompt Library commands.

Updates:
  v0.2.0 - 2026-10-10 - Add prompt listing and detail formatters.
  v0.1.0 - 2026-10-08 - Extract stdout logging, masking, and path helpers.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from collections.abc import Iterable
    from datetime import datetime
    from logging import Logger

    from models.prompt_model import Prompt
else:  # pragma: no cover - runtime placeholders for type-only imports
    Iterable = Logger = Prompt = Any

SHORT_ID_LENGTH = 8


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def mask_secret(value: str | None) -> str:
    """Return an obfuscated representation of secret configuration values."""
    if not value:
        return "not set"
    secret = value.strip()
    if len(secret) <= 6:
        return "set (****)"
    prefix = secret[:4]
    suffix = secret[-4:]
    return f"set ({prefix}...{suffix})"


def describe_path(
    path_value: object,
    *,
    expect_directory: bool,
    allow_missing_file: bool = False,
) -> str:
    """Return a human-friendly description of *path_value* suitability."""
    try:
        path = Path(path_value) if path_value is not None else None
    except TypeError:
        path = None
    if path is None:
        return "not set"

    resolved = path.expanduser()
    if resolved.exists():
        if expect_directory and not resolved.is_dir():
            return f"{resolved} (exists but is not a directory)"
        if not expect_directory and resolved.is_dir():
            return f"{resolved} (exists but is a directory)"
        return f"{resolved} (exists)"

    message = f"{resolved} (missing)"
    if expect_directory or allow_missing_file:
        message = f"{resolved} (missing - created on demand)"
    parent = resolved.parent
    if not parent.exists():
        message += f", parent missing: {parent}"
    return message


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC")


def format_prompt_line(prompt: Prompt) -> str:
    """Return a one-line listing entry for *prompt*."""
    marker = "*" if prompt.is_favorite else " "
    short_id = str(prompt.id)[:SHORT_ID_LENGTH]
    return (
        f"{short_id} {marker} {prompt.name} [{prompt.category}] "
        f"(used {prompt.usage_count}x)"
    )


def format_prompt_lines(prompts: Iterable[Prompt]) -> list[str]:
    return [format_prompt_line(prompt) for prompt in prompts]


def format_prompt_details(prompt: Prompt) -> str:
    """Return a multi-line description of *prompt* including its body."""
    lines = [
        f"ID: {prompt.id}",
        f"Name: {prompt.name}",
        f"Category: {prompt.category}",
        f"Favourite: {'yes' if prompt.is_favorite else 'no'}",
        f"Usage count: {prompt.usage_count}",
        f"Created: {format_timestamp(prompt.created_at)}",
        f"Updated: {format_timestamp(prompt.updated_at)}",
        "",
        textwrap.indent(prompt.content, "  "),
    ]
    return "\n".join(lines)
