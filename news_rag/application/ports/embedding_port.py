from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbeddingPort(Protocol):
    async def embed_texts(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed texts in one batch; one vector per input, same order."""
        ...
