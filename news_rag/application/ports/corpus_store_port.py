from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from news_rag.domain.models import Chunk


@runtime_checkable
class CorpusStorePort(Protocol):
    async def load(self) -> list[Chunk]:
        """Read the current corpus. Absent or unreadable corpus -> []."""
        ...

    async def save(self, chunks: Sequence[Chunk]) -> None:
        """Replace the whole corpus atomically."""
        ...
