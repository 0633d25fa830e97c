"""Runtime boot helpers for Prompt Library CLI.

Updates:
  v0.1.1 - 2026-10-12 - Fall back to console logging when the INI file is invalid.
  v0.1.0 - 2026-10-08 - Configure logging from INI files with a console fallback.
"""

from __future__ import annotations

import configparser
import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config/logging.conf")
_FALLBACK_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(logging_conf_path: Path | None) -> bool:
    """Configure logging using *logging_conf_path* when available.

    Returns True when the INI file was applied and False when the
    ``basicConfig`` fallback was used.
    """
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return True
        except (configparser.Error, KeyError, ValueError, RuntimeError, OSError) as exc:
            logging.basicConfig(level=logging.INFO, format=_FALLBACK_FORMAT)
            logging.getLogger("prompt_library.runtime").warning(
                "Ignoring invalid logging configuration %s: %s", path, exc
            )
            return False
    logging.basicConfig(level=logging.INFO, format=_FALLBACK_FORMAT)
    return False
