# news_rag/application/use_cases/refresh_corpus.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from news_rag.application.dto.ingest_dto import RefreshReport, RefreshRequest
from news_rag.application.ports.corpus_store_port import CorpusStorePort
from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.application.ports.feed_reader_port import FeedReaderPort
from news_rag.domain.errors import EmbeddingError
from news_rag.domain.models import Article, Chunk
from news_rag.domain.services.chunking import chunk_sentences

logger = logging.getLogger(__name__)

MIN_ARTICLE_CHARS = 100


@dataclass
class RefreshCorpus:
    """Crawl feeds, chunk and embed articles, then swap in the new corpus."""

    feeds: FeedReaderPort
    embedding: EmbeddingPort
    corpus: CorpusStorePort

    async def execute(self, req: RefreshRequest) -> RefreshReport:
        # 1) Collect articles (bad feeds are skipped)
        articles = await self._collect(req)

        # 2) Chunk (pure domain)
        records: list[tuple[Article, str]] = [
            (art, text) for art in articles for text in chunk_sentences(art.text, req.max_chars)
        ]

        # 3) Embed in batches
        chunks: list[Chunk] = []
        for start in range(0, len(records), req.batch_size):
            batch = records[start : start + req.batch_size]
            vectors = await self.embedding.embed_texts([text for _, text in batch])
            if len(vectors) != len(batch):
                raise EmbeddingError(
                    f"embedding provider returned {len(vectors)} vectors for {len(batch)} texts"
                )
            for (art, text), vec in zip(batch, vectors, strict=True):
                chunks.append(
                    Chunk(
                        title=art.title,
                        source=art.link or art.source,
                        text=text,
                        ts=art.ts,
                        embedding=tuple(vec),
                    )
                )
            logger.info("Embedded %d / %d", len(chunks), len(records))

        # 4) Atomic swap
        await self.corpus.save(chunks)
        logger.info("Saved %d chunks from %d articles", len(chunks), len(articles))
        return RefreshReport(articles=len(articles), chunks=len(chunks))

    async def _collect(self, req: RefreshRequest) -> list[Article]:
        articles: list[Article] = []
        for url in req.feed_urls:
            if len(articles) >= req.target_count:
                break
            try:
                items = await self.feeds.fetch(url)
            except Exception as ex:
                logger.warning("Feed failed %s: %s", url, ex)
                continue
            added = 0
            for item in items:
                if len(articles) >= req.target_count or added >= req.per_feed_max:
                    break
                if len(item.text) < MIN_ARTICLE_CHARS:
                    continue
                articles.append(item)
                added += 1
        # newest first, then trim
        articles.sort(key=lambda a: a.ts or 0, reverse=True)
        return articles[: req.target_count]
