"""Application entry point for Prompt Library.

Updates:
  v0.2.0 - 2026-10-12 - Dispatch every library command through COMMAND_SPECS.
  v0.1.1 - 2026-10-09 - Report storage initialisation failures with exit code 3.
  v0.1.0 - 2026-10-08 - Wire settings, logging, and the CLI parser.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from cli.commands import EXIT_INIT, EXIT_OK, EXIT_SETTINGS, run_command
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings
from core import PromptDecodeError, RepositoryError, build_prompt_library

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from config import PromptLibrarySettings
    from core import PromptLibrary


def _initialise_library(
    settings: PromptLibrarySettings,
    logger: logging.Logger,
) -> PromptLibrary | None:
    try:
        return build_prompt_library(settings)
    except (RepositoryError, PromptDecodeError) as exc:
        logger.error("Failed to initialise prompt library: %s", exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, the library, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("prompt_library.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        cause = exc.__cause__
        logger.error("Failed to load settings: %s", cause or exc)
        return EXIT_SETTINGS

    if args.print_settings:
        print_settings_summary(settings)
        return EXIT_OK

    library = _initialise_library(settings, logger)
    if library is None:
        return EXIT_INIT
    return run_command(library, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
