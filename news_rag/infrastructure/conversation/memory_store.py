"""In-process conversation store with timer-based expiry.

State lives for the lifetime of the process and is lost on restart. It is
mutated only from the event loop thread, so no locking is needed.
"""

from __future__ import annotations

import asyncio
import logging

from news_rag.application.ports.conversation_store_port import ConversationStorePort

logger = logging.getLogger(__name__)


def _slice_bounds(length: int, start: int, stop: int) -> tuple[int, int]:
    """Translate Redis-style inclusive (start, stop) into Python slice bounds."""
    if start < 0:
        start = max(length + start, 0)
    if stop < 0:
        stop = length + stop
    return start, stop + 1


class MemoryConversationStore(ConversationStorePort):
    """Ephemeral backend: key -> list, plus at most one pending expiry timer per key."""

    def __init__(self) -> None:
        self._lists: dict[str, list[str]] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}

    async def rpush(self, key: str, value: str) -> int:
        items = self._lists.setdefault(key, [])
        items.append(value)
        return len(items)

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        items = self._lists.get(key, [])
        lo, hi = _slice_bounds(len(items), start, stop)
        if lo >= hi:
            return []
        return list(items[lo:hi])

    async def delete(self, key: str) -> int:
        self._cancel_timer(key)
        return 1 if self._lists.pop(key, None) is not None else 0

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        self._cancel_timer(key)
        if ttl_seconds <= 0:
            self._evict(key)
            return True
        loop = asyncio.get_running_loop()
        self._timers[key] = loop.call_later(ttl_seconds, self._evict, key)
        return True

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

    def _cancel_timer(self, key: str) -> None:
        handle = self._timers.pop(key, None)
        if handle is not None:
            handle.cancel()

    def _evict(self, key: str) -> None:
        # data and timer handle go together
        self._lists.pop(key, None)
        self._timers.pop(key, None)
        logger.debug("Expired conversation key %s", key)
