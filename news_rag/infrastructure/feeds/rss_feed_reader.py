"""RSS/Atom feed reader.

Feeds are downloaded with httpx (retried on transport errors) and parsed
with feedparser. Item summaries are often HTML, so they are flattened to
plain text with BeautifulSoup before becoming article text.
"""

from __future__ import annotations

import calendar
import logging
import time
from typing import Any

import feedparser
import httpx
from bs4 import BeautifulSoup
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from news_rag.application.ports.feed_reader_port import FeedReaderPort
from news_rag.domain.errors import FeedError
from news_rag.domain.models import Article

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "news-rag/0.1",
    "Accept": "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8",
}


def html_to_text(fragment: str) -> str:
    """Flatten an HTML fragment to whitespace-normalised text."""
    if not fragment:
        return ""
    if "<" not in fragment:
        return " ".join(fragment.split())
    text = BeautifulSoup(fragment, "html.parser").get_text(" ", strip=True)
    return " ".join(text.split())


def entry_timestamp_ms(entry: Any, now_ms: int) -> int:
    """Published time, else updated time, else ``now_ms``."""
    for attr in ("published_parsed", "updated_parsed"):
        parsed = entry.get(attr)
        if parsed:
            # feedparser normalises struct_time to UTC
            return calendar.timegm(parsed) * 1000
    return now_ms


def entry_to_article(entry: Any, source: str, now_ms: int) -> Article:
    title = html_to_text(entry.get("title", ""))
    body = entry.get("summary") or ""
    if not body and entry.get("content"):
        body = entry["content"][0].get("value", "")
    text = ". ".join(part for part in (title, html_to_text(body)) if part)
    return Article(
        title=title,
        link=entry.get("link", ""),
        text=text,
        ts=entry_timestamp_ms(entry, now_ms),
        source=source,
    )


class RSSFeedReader(FeedReaderPort):
    def __init__(self, timeout_s: float = 20.0, client: httpx.AsyncClient | None = None) -> None:
        self.timeout_s = timeout_s
        self._client = client

    async def fetch(self, url: str) -> list[Article]:
        try:
            payload = await self._download(url)
        except httpx.HTTPError as ex:
            raise FeedError(f"could not download feed {url}: {ex}") from ex

        parsed = feedparser.parse(payload)
        if parsed.bozo and not parsed.entries:
            raise FeedError(f"could not parse feed {url}: {parsed.get('bozo_exception')}")

        source = parsed.feed.get("title") or url
        now_ms = int(time.time() * 1000)
        articles = [entry_to_article(entry, source, now_ms) for entry in parsed.entries]
        logger.debug("Fetched %d items from %s", len(articles), url)
        return articles

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _download(self, url: str) -> bytes:
        if self._client is not None:
            response = await self._client.get(url, headers=DEFAULT_HEADERS)
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=DEFAULT_HEADERS)
        response.raise_for_status()
        return response.content
