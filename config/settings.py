"""Settings management utilities for Prompt Library configuration.

Updates:
  v0.3.0 - 2026-10-11 - Add decode failure policy and Redis namespace settings.
  v0.2.0 - 2026-10-09 - Select storage backend (memory, directory, sqlite, redis).
  v0.1.0 - 2026-10-08 - Load settings from JSON config, environment, and .env files.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

logger = logging.getLogger("prompt_library.settings")

ENV_PREFIX = "PROMPT_LIBRARY_"
CONFIG_JSON_ENV = f"{ENV_PREFIX}CONFIG_JSON"
DEFAULT_CONFIG_PATH = Path("config") / "config.json"

DEFAULT_STORAGE_BACKEND = "directory"
DEFAULT_DATA_DIR = Path("data") / "library"
DEFAULT_DB_PATH = Path("data") / "prompt_library.db"
DEFAULT_REDIS_NAMESPACE = "prompt_library:"

StorageBackend = Literal["memory", "directory", "sqlite", "redis"]
SortOrderName = Literal["name", "date_created", "date_updated"]
DecodePolicyName = Literal["empty", "raise"]

_JSON_KEYS: tuple[str, ...] = (
    "storage_backend",
    "data_dir",
    "db_path",
    "redis_dsn",
    "redis_namespace",
    "prompts_key",
    "categories_key",
    "most_used_limit",
    "copy_suffix",
    "default_sort_order",
    "decode_failure_policy",
)


class SettingsError(Exception):
    """Raised when Prompt Library configuration cannot be loaded or validated."""


class PromptLibrarySettings(BaseSettings):
    """Application configuration sourced from JSON files, environment, or ``.env``."""

    storage_backend: StorageBackend = Field(
        default=DEFAULT_STORAGE_BACKEND,
        description="Key-value store used for persistence.",
    )
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory holding one file per key for the directory backend.",
    )
    db_path: Path = Field(
        default=DEFAULT_DB_PATH,
        description="SQLite database file for the sqlite backend.",
    )
    redis_dsn: str | None = Field(
        default=None,
        description="Redis connection URL; required for the redis backend.",
        repr=False,
    )
    redis_namespace: str = Field(default=DEFAULT_REDIS_NAMESPACE)
    prompts_key: str = Field(default="savedPrompts", min_length=1)
    categories_key: str = Field(default="savedCategories", min_length=1)
    most_used_limit: int = Field(
        default=20,
        ge=1,
        description="Maximum number of prompts returned by the most-used view.",
    )
    copy_suffix: str = Field(
        default=" (Copy)",
        min_length=1,
        description="Suffix appended to the name of duplicated prompts.",
    )
    default_sort_order: SortOrderName = Field(default="name")
    decode_failure_policy: DecodePolicyName = Field(
        default="empty",
        description=(
            "Reaction to undecodable stored data: 'empty' starts with an empty "
            "collection, 'raise' aborts start-up."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator(
        "storage_backend",
        "default_sort_order",
        "decode_failure_policy",
        mode="before",
    )
    def _normalise_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("redis_dsn", mode="before")
    def _blank_dsn_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _require_backend_settings(self) -> PromptLibrarySettings:
        if self.storage_backend == "redis" and not self.redis_dsn:
            raise ValueError("redis_dsn is required when storage_backend is 'redis'")
        if self.prompts_key == self.categories_key:
            raise ValueError("prompts_key and categories_key must differ")
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(storage_backend="memory")).
            2. JSON configuration file.
            3. Environment variables.
            4. ``.env`` entries.
            5. File secrets.
        """
        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv(CONFIG_JSON_ENV)
            if explicit_path:
                path = Path(explicit_path).expanduser()
                if not path.exists():
                    raise SettingsError(f"Configuration file not found: {path}")
            else:
                path = DEFAULT_CONFIG_PATH
                if not path.exists():
                    return {}
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, Mapping):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict = {str(key): value for key, value in mapping_data.items()}
            unknown = sorted(set(data_dict) - set(_JSON_KEYS))
            if unknown:
                logger.warning(
                    "Ignoring unknown key(s) %s in configuration file %s",
                    ", ".join(unknown),
                    path,
                )
            return {key: data_dict[key] for key in _JSON_KEYS if key in data_dict}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> PromptLibrarySettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return PromptLibrarySettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Prompt Library configuration") from exc
