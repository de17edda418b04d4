"""Conversation store port: a key to ordered-list store with per-key expiry."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConversationStorePort(Protocol):
    """Capability set shared by the ephemeral and durable backends.

    Semantics follow Redis lists: ``lrange`` stop is inclusive and negative
    indices count from the end (``-1`` is the last element); ``expire``
    always replaces the TTL window.
    """

    async def rpush(self, key: str, value: str) -> int:
        """Append value to the list at key. Returns the new length."""
        ...

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        """Return the inclusive range [start, stop] of the list at key."""
        ...

    async def delete(self, key: str) -> int:
        """Delete the list at key. Returns 1 if it existed, else 0."""
        ...

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        """Set or replace the time-to-live of key."""
        ...

    async def ping(self) -> bool:
        """Connectivity probe; used once when choosing the backend."""
        ...

    async def close(self) -> None:
        """Release connections and pending timers."""
        ...
