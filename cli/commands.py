"""CLI command handlers for Prompt Library.

Updates:
  v0.3.0 - 2026-10-12 - Resolve prompts by unique id prefix; confirm cascading deletes.
  v0.2.0 - 2026-10-10 - Map persistence failures to a dedicated exit code.
  v0.1.0 - 2026-10-08 - Introduce CommandSpec dispatch for library commands.
"""

from __future__ import annotations

import argparse
import logging
import sys
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core import CategoryError, PromptNotFoundError

from .utils import format_prompt_details, format_prompt_lines, print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core import OperationResult, PromptLibrary
    from models.prompt_model import Prompt

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_SETTINGS = 2
EXIT_INIT = 3
EXIT_PERSISTENCE = 4

CommandHandler = Callable[["PromptLibrary", argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def resolve_prompt(library: PromptLibrary, ref: str) -> Prompt:
    """Return the prompt whose id equals or uniquely starts with *ref*."""
    needle = ref.strip().lower()
    if not needle:
        raise PromptNotFoundError("Prompt reference must not be empty.")
    try:
        prompt_id = uuid.UUID(needle)
    except ValueError:
        matches = [prompt for prompt in library.prompts if str(prompt.id).startswith(needle)]
        if not matches:
            raise PromptNotFoundError(f"No prompt matches '{ref}'.") from None
        if len(matches) > 1:
            raise PromptNotFoundError(
                f"Prompt reference '{ref}' is ambiguous ({len(matches)} matches)."
            ) from None
        return matches[0]
    prompt = library.get_prompt(prompt_id)
    if prompt is None:
        raise PromptNotFoundError(f"Prompt {prompt_id} not found.")
    return prompt


def _require_text(value: str, label: str) -> str:
    if not value.strip():
        raise ValueError(f"{label} must not be empty.")
    return value


def _require_category(value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise CategoryError("Category must not be empty.")
    return cleaned


def _report(
    result: OperationResult,
    logger: logging.Logger,
    message: str,
) -> int:
    """Print *message* or the persistence failures carried by *result*."""
    if result.errors:
        for error in result.errors:
            print_and_log(logger, logging.ERROR, f"Failed to save changes: {error}")
        return EXIT_PERSISTENCE
    print_and_log(logger, logging.INFO, message)
    return EXIT_OK


def _print_prompts(prompts: list[Prompt], empty_message: str) -> int:
    if not prompts:
        print(empty_message)
        return EXIT_OK
    print("\n".join(format_prompt_lines(prompts)))
    return EXIT_OK


def _confirm(question: str) -> bool:
    if not sys.stdin.isatty():
        return False
    response = input(f"{question} [y/N]: ").strip().lower()
    return response in {"y", "yes"}


def run_list(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    library.search_text = getattr(args, "search", "") or ""
    library.selected_category = getattr(args, "category", None)
    sort = getattr(args, "sort", None)
    if sort:
        library.sort_order = sort
    logger.debug(
        "Listing prompts",
        extra={"search": library.search_text, "sort": library.sort_order.value},
    )
    return _print_prompts(library.filtered_prompts, "No prompts found.")


def run_show(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    del logger
    print(format_prompt_details(resolve_prompt(library, args.ref)))
    return EXIT_OK


def run_add(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    result = library.create_prompt(
        _require_text(args.name, "Name"),
        _require_text(args.content, "Content"),
        _require_category(args.category),
        is_favorite=bool(args.favorite),
    )
    created = result.prompt
    label = f"{created.name} ({created.id})" if created is not None else args.name
    return _report(result, logger, f"Added prompt {label}")


def run_edit(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    if args.name is None and args.content is None and args.category is None:
        raise ValueError("Nothing to update; pass --name, --content or --category.")
    prompt = resolve_prompt(library, args.ref)
    prompt.update(
        name=None if args.name is None else _require_text(args.name, "Name"),
        content=None if args.content is None else _require_text(args.content, "Content"),
        category=None if args.category is None else _require_category(args.category),
    )
    result = library.update_prompt(prompt)
    if not result.changed:
        raise PromptNotFoundError(f"Prompt {prompt.id} not found.")
    return _report(result, logger, f"Updated prompt {prompt.name} ({prompt.id})")


def run_delete(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    prompt = resolve_prompt(library, args.ref)
    result = library.delete_prompt(prompt)
    return _report(result, logger, f"Deleted prompt {prompt.name} ({prompt.id})")


def run_duplicate(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    prompt = resolve_prompt(library, args.ref)
    result = library.duplicate_prompt(prompt)
    clone = result.prompt
    label = f"{clone.name} ({clone.id})" if clone is not None else prompt.name
    return _report(result, logger, f"Created duplicate {label}")


def run_favorite(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    prompt = resolve_prompt(library, args.ref)
    result = library.toggle_favorite(prompt)
    state = "favourite" if result.prompt is not None and result.prompt.is_favorite else "regular"
    return _report(result, logger, f"Prompt {prompt.name} is now {state}")


def run_use(library: PromptLibrary, args: argparse.Namespace, logger: logging.Logger) -> int:
    prompt = resolve_prompt(library, args.ref)
    print(prompt.content)
    result = library.increment_usage(prompt)
    if result.errors:
        return _report(result, logger, "")
    logger.debug("Prompt used", extra={"prompt_id": str(prompt.id)})
    return EXIT_OK


def run_favorites(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    del args, logger
    return _print_prompts(library.favorite_prompts, "No favourite prompts.")


def run_most_used(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    del args, logger
    return _print_prompts(library.most_used_prompts, "No prompts found.")


def run_reset_usage(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    del args
    result = library.reset_all_usage()
    return _report(result, logger, f"Reset usage counters for {len(library)} prompt(s)")


def run_categories(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    del args, logger
    categories = library.categories
    if not categories:
        print("No categories defined.")
        return EXIT_OK
    for category in categories:
        count = len(library.prompts_in_category(category))
        print(f"{category} ({count})")
    return EXIT_OK


def run_add_category(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    name = _require_category(args.name)
    result = library.add_category(name)
    if not result.changed:
        print_and_log(logger, logging.INFO, f"Category '{name}' already exists")
        return EXIT_OK
    return _report(result, logger, f"Added category '{name}'")


def run_delete_category(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    name = args.name
    affected = library.prompts_in_category(name)
    if name not in library.categories and not affected:
        raise CategoryError(f"Unknown category '{name}'.")
    if not args.yes:
        question = f"Delete category '{name}' and {len(affected)} prompt(s)?"
        if not _confirm(question):
            print_and_log(
                logger,
                logging.WARNING,
                "Category not deleted; confirm interactively or pass --yes.",
            )
            return EXIT_INVALID
    result = library.delete_category_and_prompts(name)
    return _report(
        result,
        logger,
        f"Deleted category '{name}' and {len(affected)} prompt(s)",
    )


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    None: CommandSpec(run_list),
    "list": CommandSpec(run_list),
    "show": CommandSpec(run_show),
    "add": CommandSpec(run_add),
    "edit": CommandSpec(run_edit),
    "delete": CommandSpec(run_delete),
    "duplicate": CommandSpec(run_duplicate),
    "favorite": CommandSpec(run_favorite),
    "use": CommandSpec(run_use),
    "favorites": CommandSpec(run_favorites),
    "most-used": CommandSpec(run_most_used),
    "reset-usage": CommandSpec(run_reset_usage),
    "categories": CommandSpec(run_categories),
    "add-category": CommandSpec(run_add_category),
    "delete-category": CommandSpec(run_delete_category),
}


def run_command(
    library: PromptLibrary,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    """Dispatch *args* to its handler, mapping user errors to exit code 1."""
    command = getattr(args, "command", None)
    spec = COMMAND_SPECS.get(command)
    if spec is None:
        print_and_log(logger, logging.ERROR, f"Unknown command: {command}")
        return EXIT_INVALID
    try:
        return spec.handler(library, args, logger)
    except (PromptNotFoundError, CategoryError, ValueError) as exc:
        print_and_log(logger, logging.ERROR, str(exc))
        return EXIT_INVALID


__all__ = [
    "COMMAND_SPECS",
    "CommandSpec",
    "EXIT_INIT",
    "EXIT_INVALID",
    "EXIT_OK",
    "EXIT_PERSISTENCE",
    "EXIT_SETTINGS",
    "resolve_prompt",
    "run_command",
]
