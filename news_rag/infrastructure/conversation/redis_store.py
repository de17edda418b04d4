"""Redis-backed conversation store.

Why: Cross-process history that survives restarts. Every operation is
     delegated verbatim to the Redis list/expiry commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from typing import Any

from news_rag.application.ports.conversation_store_port import ConversationStorePort
from news_rag.domain.errors import ConversationStoreError


@dataclass
class RedisConfig:
    """Configuration for Redis connection."""

    url: str = "redis://localhost:6379/0"
    socket_timeout_s: float = 5.0
    decode_responses: bool = True


class RedisConversationStore(ConversationStorePort):
    """Durable backend using redis-py's asyncio client.

    Redis exceptions are translated into ConversationStoreError so the
    application layer never sees redis types.
    """

    def __init__(self, cfg: RedisConfig | None = None, client: Any | None = None) -> None:
        """Initialize Redis conversation store.

        Args:
            cfg: RedisConfig with connection parameters
            client: Pre-built async client (tests inject fakes here)

        Raises:
            ConversationStoreError: If the client cannot be created
        """
        self._cfg = cfg or RedisConfig()
        self._client = client if client is not None else self._init_client(self._cfg)

    def _init_client(self, cfg: RedisConfig) -> Any:
        """Create the asyncio Redis client with lazy import.

        No connection is opened here; the first command (usually ping) connects.
        """
        try:
            redis_asyncio = import_module("redis.asyncio")
            return redis_asyncio.from_url(
                cfg.url,
                decode_responses=cfg.decode_responses,
                socket_timeout=cfg.socket_timeout_s,
                socket_connect_timeout=cfg.socket_timeout_s,
            )
        except Exception as ex:
            raise ConversationStoreError(f"Redis init failed: {ex}") from ex

    async def rpush(self, key: str, value: str) -> int:
        try:
            return int(await self._client.rpush(key, value))
        except Exception as ex:
            raise ConversationStoreError(f"rpush failed for {key}: {ex}") from ex

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        try:
            return list(await self._client.lrange(key, start, stop))
        except Exception as ex:
            raise ConversationStoreError(f"lrange failed for {key}: {ex}") from ex

    async def delete(self, key: str) -> int:
        try:
            return int(await self._client.delete(key))
        except Exception as ex:
            raise ConversationStoreError(f"delete failed for {key}: {ex}") from ex

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        try:
            return bool(await self._client.expire(key, ttl_seconds))
        except Exception as ex:
            raise ConversationStoreError(f"expire failed for {key}: {ex}") from ex

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except Exception as ex:
            raise ConversationStoreError(f"ping failed: {ex}") from ex

    async def close(self) -> None:
        await self._client.aclose()
