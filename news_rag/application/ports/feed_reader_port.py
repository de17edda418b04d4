from typing import Protocol

from news_rag.domain.models import Article


class FeedReaderPort(Protocol):
    async def fetch(self, url: str) -> list[Article]:
        """Fetch the items of one feed in feed order. Raises FeedError."""
        ...
