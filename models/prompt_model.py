"""Prompt data model definitions.

Updates: v0.4.0 - 2026-10-18 - Reject mistyped text and favourite fields instead of coercing them.
Updates: v0.3.0 - 2026-10-12 - Add favourite flag with backwards-compatible decoding.
Updates: v0.2.0 - 2026-10-09 - Add value-copy helper so the library never shares live records.
Updates: v0.1.0 - 2026-10-06 - Initial Prompt schema with serialization helpers.
"""
from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any


def _utc_now() -> datetime:
    """Return an aware UTC timestamp."""
    return datetime.now(UTC)


def _ensure_uuid(value: Any) -> uuid.UUID:
    """Parse arbitrary UUID representations into a uuid.UUID instance."""
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def _ensure_datetime(value: Any, default: datetime | None = None) -> datetime:
    """Parse incoming datetime values (isoformat strings or datetime)."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if value in (None, ""):
        return default if default is not None else _utc_now()
    parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _ensure_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, not {type(value).__name__}")
    return value


def _ensure_flag(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"is_favorite must be a boolean, not {type(value).__name__}")
    return value


def _ensure_usage_count(value: Any) -> int:
    """Coerce stored usage counters into non-negative integers."""
    if value in (None, ""):
        return 0
    if isinstance(value, bool):
        raise ValueError("usage_count must be an integer")
    count = int(value)
    if count < 0:
        raise ValueError("usage_count cannot be negative")
    return count


@dataclass(slots=True)
class Prompt:
    """Dataclass representation of a prompt entry.

    ``id`` and ``created_at`` are fixed at construction; every other field is
    mutable through :meth:`update` (or the usage counters, which only the
    library touches).
    """
    id: uuid.UUID
    name: str
    content: str
    category: str
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)
    usage_count: int = 0
    is_favorite: bool = False

    def __post_init__(self) -> None:
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @classmethod
    def create(
        cls,
        name: str,
        content: str,
        category: str,
        usage_count: int = 0,
        is_favorite: bool = False,
    ) -> Prompt:
        """Return a new prompt with a fresh identifier and matching timestamps.

        Empty names, bodies, or categories are accepted; rejecting them is the
        caller's responsibility.
        """
        now = _utc_now()
        return cls(
            id=uuid.uuid4(),
            name=name,
            content=content,
            category=category,
            created_at=now,
            updated_at=now,
            usage_count=usage_count,
            is_favorite=is_favorite,
        )

    def update(
        self,
        *,
        name: str | None = None,
        content: str | None = None,
        category: str | None = None,
        is_favorite: bool | None = None,
    ) -> None:
        """Overwrite the supplied fields and refresh ``updated_at``."""
        if name is not None:
            self.name = name
        if content is not None:
            self.content = content
        if category is not None:
            self.category = category
        if is_favorite is not None:
            self.is_favorite = is_favorite
        self.updated_at = max(_utc_now(), self.created_at)

    def copy(self) -> Prompt:
        """Return a detached value copy of the prompt."""
        return replace(self)

    def to_record(self) -> dict[str, Any]:
        """Return a plain dictionary representation for persistence."""
        return {
            "id": str(self.id),
            "name": self.name,
            "content": self.content,
            "category": self.category,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "usage_count": self.usage_count,
            "is_favorite": self.is_favorite,
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> Prompt:
        """Create a Prompt from a dictionary record.

        Raises ``KeyError``/``ValueError``/``TypeError`` for records that
        cannot describe a prompt; callers decide how to degrade.
        """
        category = data.get("category")
        if category is None:
            category = ""
        created_at = _ensure_datetime(data.get("created_at"))
        return cls(
            id=_ensure_uuid(data["id"]),
            name=_ensure_text(data["name"], "name"),
            content=_ensure_text(data["content"], "content"),
            category=_ensure_text(category, "category"),
            created_at=created_at,
            updated_at=_ensure_datetime(data.get("updated_at"), default=created_at),
            usage_count=_ensure_usage_count(data.get("usage_count")),
            is_favorite=_ensure_flag(data.get("is_favorite")),
        )


__all__ = ["Prompt"]
