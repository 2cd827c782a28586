"""Persistence boundary for session snapshots.

A store holds the serialized snapshot of exactly one session as JSON text.
Encoding and decoding belong to :mod:`accesscore.session`; stores only move
strings.

- ``InMemorySnapshotStore`` — process-local, used by default and in tests.
- ``RedisSnapshotStore`` — shared store keyed ``"{prefix}:{session_id}"``
  with an optional TTL.

Redis is an optional dependency. Without the package or a configured URL
the Redis store loads nothing and its writes do nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from .config import AccessConfig, load_access_config_from_env

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "accesscore:session"


@runtime_checkable
class SnapshotStore(Protocol):
    """Storage for one session's serialized snapshot."""

    def load(self) -> Optional[str]:
        """Return the stored snapshot, or None when nothing is stored."""
        ...

    def save(self, payload: str) -> None:
        """Replace the stored snapshot."""
        ...

    def clear(self) -> None:
        """Remove the stored snapshot."""
        ...


class InMemorySnapshotStore:
    """Keeps the snapshot in an attribute."""

    def __init__(self, payload: Optional[str] = None) -> None:
        self.payload = payload

    def load(self) -> Optional[str]:
        return self.payload

    def save(self, payload: str) -> None:
        self.payload = payload

    def clear(self) -> None:
        self.payload = None


class RedisSnapshotStore:
    """Snapshot store backed by Redis (synchronous client).

    Args:
        session_id: Identifies the session; becomes the key suffix.
        redis_url: Redis URL (defaults to ``REDIS_URL`` via config).
        prefix: Key prefix (defaults to ``ACCESS_SNAPSHOT_PREFIX``).
        ttl_seconds: Expiry applied on every save; None keeps keys forever.
    """

    def __init__(
        self,
        session_id: str,
        redis_url: Optional[str] = None,
        prefix: Optional[str] = None,
        ttl_seconds: Optional[int] = None,
    ) -> None:
        self.session_id = session_id
        self.redis_url = redis_url
        self.prefix = prefix or DEFAULT_PREFIX
        self.ttl_seconds = ttl_seconds
        self._client: Any = None

    @classmethod
    def from_config(cls, session_id: str, config: Optional[AccessConfig] = None) -> RedisSnapshotStore:
        """Build a store from settings (``load_access_config_from_env()`` when omitted)."""
        config = config or load_access_config_from_env()
        return cls(
            session_id,
            redis_url=config.redis_url,
            prefix=config.snapshot_key_prefix,
            ttl_seconds=config.snapshot_ttl_seconds,
        )

    @property
    def key(self) -> str:
        return f"{self.prefix}:{self.session_id}"

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client

        try:
            import redis as redis_sync
        except ImportError:
            logger.debug("redis not installed; snapshot persistence skipped")
            return None

        if not self.redis_url:
            logger.debug("REDIS_URL not set; snapshot persistence skipped")
            return None

        self._client = redis_sync.from_url(self.redis_url, decode_responses=True)
        return self._client

    def load(self) -> Optional[str]:
        client = self._get_client()
        if client is None:
            return None
        try:
            return client.get(self.key)
        except Exception as e:
            logger.warning("Snapshot load failed for %s: %s", self.key, e)
            return None

    def save(self, payload: str) -> None:
        client = self._get_client()
        if client is None:
            return
        try:
            if self.ttl_seconds:
                client.setex(self.key, self.ttl_seconds, payload)
            else:
                client.set(self.key, payload)
            logger.debug("Saved snapshot %s (TTL=%s)", self.key, self.ttl_seconds)
        except Exception as e:
            logger.warning("Snapshot save failed for %s: %s", self.key, e)

    def clear(self) -> None:
        client = self._get_client()
        if client is None:
            return
        try:
            client.delete(self.key)
            logger.debug("Cleared snapshot %s", self.key)
        except Exception as e:
            logger.warning("Snapshot clear failed for %s: %s", self.key, e)

    def close(self) -> None:
        """Release the Redis connection, if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None


__all__ = [
    "DEFAULT_PREFIX",
    "InMemorySnapshotStore",
    "RedisSnapshotStore",
    "SnapshotStore",
]
