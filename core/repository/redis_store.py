"""Redis-backed key-value store.

Updates:
  v0.1.0 - 2026-10-09 - Namespace library blobs under a configurable Redis prefix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, cast

from .base import RepositoryError

try:  # pragma: no cover - redis optional dependency
    import redis
except ImportError:  # pragma: no cover - redis optional dependency
    redis = None  # type: ignore

if TYPE_CHECKING:
    from collections.abc import Callable

RedisValue = str | bytes | memoryview

DEFAULT_NAMESPACE = "prompt_library:"


class RedisClientProtocol(Protocol):
    """Minimal Redis client surface consumed by the store."""

    def get(self, name: str) -> RedisValue | None: ...

    def set(self, name: str, value: bytes) -> Any: ...


class RedisStore:
    """Persist blobs as plain Redis string values."""

    def __init__(
        self,
        client: RedisClientProtocol | None = None,
        *,
        dsn: str | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        if client is None:
            client = self._client_from_dsn(dsn)
        self._client = client
        self._namespace = namespace

    @staticmethod
    def _client_from_dsn(dsn: str | None) -> RedisClientProtocol:
        if not dsn:
            raise RepositoryError("A Redis client or DSN is required")
        redis_module = cast("Any", redis)
        if redis_module is None:
            raise RepositoryError(
                "Redis storage requires the redis package; install the 'redis' extra."
            )
        from_url = cast("Callable[[str], RedisClientProtocol]", redis_module.from_url)
        try:
            return from_url(dsn)
        except Exception as exc:  # noqa: BLE001 - external dependency failure
            raise RepositoryError(f"Unable to configure Redis client for {dsn}") from exc

    def _key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def save(self, key: str, blob: bytes) -> None:
        try:
            self._client.set(self._key(key), bytes(blob))
        except Exception as exc:  # noqa: BLE001 - redis optional
            raise RepositoryError(f"Failed to write key {key!r} to Redis") from exc

    def load(self, key: str) -> bytes | None:
        try:
            value = self._client.get(self._key(key))
        except Exception as exc:  # noqa: BLE001 - redis optional
            raise RepositoryError(f"Failed to read key {key!r} from Redis") from exc
        if value is None:
            return None
        if isinstance(value, memoryview):
            return value.tobytes()
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)


__all__ = ["DEFAULT_NAMESPACE", "RedisStore"]
