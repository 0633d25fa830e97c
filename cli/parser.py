"""Argument parser for Prompt Library CLI.

Updates:
  v0.2.0 - 2026-10-12 - Add category management and usage subcommands.
  v0.1.0 - 2026-10-08 - Introduce list/show/add/edit/delete subcommands.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

SORT_CHOICES = ("name", "date_created", "date_updated")


def _add_ref_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "ref",
        type=str,
        help="Prompt id or a unique prefix of it (as shown by 'list').",
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the Prompt Library launcher."""
    parser = argparse.ArgumentParser(
        prog="prompt-library",
        description="Manage a categorised library of reusable prompts.",
    )
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser(
        "list",
        help="List prompts, optionally filtered by name and category (default command).",
    )
    list_parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Case-insensitive text the prompt name must contain.",
    )
    list_parser.add_argument(
        "--category",
        type=str,
        default=None,
        help="Only list prompts in this category.",
    )
    list_parser.add_argument(
        "--sort",
        choices=SORT_CHOICES,
        default=None,
        help="Sort order (defaults to the configured default_sort_order).",
    )

    show_parser = subparsers.add_parser("show", help="Show a prompt with its full content.")
    _add_ref_argument(show_parser)

    add_parser = subparsers.add_parser("add", help="Create a new prompt.")
    add_parser.add_argument("--name", required=True, help="Display name of the prompt.")
    add_parser.add_argument("--content", required=True, help="Prompt body text.")
    add_parser.add_argument("--category", required=True, help="Category label.")
    add_parser.add_argument(
        "--favorite",
        action="store_true",
        help="Mark the new prompt as a favourite.",
    )

    edit_parser = subparsers.add_parser("edit", help="Change fields of an existing prompt.")
    _add_ref_argument(edit_parser)
    edit_parser.add_argument("--name", default=None, help="New display name.")
    edit_parser.add_argument("--content", default=None, help="New prompt body text.")
    edit_parser.add_argument("--category", default=None, help="New category label.")

    delete_parser = subparsers.add_parser("delete", help="Delete a prompt.")
    _add_ref_argument(delete_parser)

    duplicate_parser = subparsers.add_parser(
        "duplicate",
        help="Copy a prompt under a new id with a '(Copy)' name suffix.",
    )
    _add_ref_argument(duplicate_parser)

    favorite_parser = subparsers.add_parser("favorite", help="Toggle a prompt's favourite flag.")
    _add_ref_argument(favorite_parser)

    use_parser = subparsers.add_parser(
        "use",
        help="Print a prompt's content and count one use.",
    )
    _add_ref_argument(use_parser)

    subparsers.add_parser("favorites", help="List favourite prompts.")
    subparsers.add_parser("most-used", help="List the most frequently used prompts.")
    subparsers.add_parser("reset-usage", help="Reset every prompt's usage counter to zero.")
    subparsers.add_parser("categories", help="List known categories.")

    add_category_parser = subparsers.add_parser("add-category", help="Register a category.")
    add_category_parser.add_argument("name", type=str, help="Category label.")

    delete_category_parser = subparsers.add_parser(
        "delete-category",
        help="Delete a category together with every prompt filed under it.",
    )
    delete_category_parser.add_argument("name", type=str, help="Category label.")
    delete_category_parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Prompt Library launcher."""
    return build_parser().parse_args(argv)
