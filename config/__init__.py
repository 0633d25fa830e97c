"""Configuration helpers for Prompt Library.

Updates: v0.2.0 - 2026-10-11 - Expose storage and decode policy defaults.
Updates: v0.1.0 - 2026-10-08 - Expose settings loader and configuration error types.
"""

from .settings import (
    CONFIG_JSON_ENV,
    DEFAULT_DATA_DIR,
    DEFAULT_DB_PATH,
    DEFAULT_STORAGE_BACKEND,
    ENV_PREFIX,
    PromptLibrarySettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "CONFIG_JSON_ENV",
    "DEFAULT_DATA_DIR",
    "DEFAULT_DB_PATH",
    "DEFAULT_STORAGE_BACKEND",
    "ENV_PREFIX",
    "PromptLibrarySettings",
    "SettingsError",
    "load_settings",
]
