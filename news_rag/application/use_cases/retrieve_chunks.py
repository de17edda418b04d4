# news_rag/application/use_cases/retrieve_chunks.py
from __future__ import annotations

import logging
import time

from news_rag.application.ports.clock_port import ClockPort
from news_rag.application.ports.corpus_store_port import CorpusStorePort
from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.application.ports.telemetry_port import TelemetryPort
from news_rag.domain.errors import DomainError, EmbeddingError, RetrievalError, ValidationError
from news_rag.domain.models import ScoredChunk
from news_rag.domain.services.intent import classify_intent
from news_rag.domain.services.query_expansion import expand_query
from news_rag.domain.services.ranking import rank_chunks
from news_rag.domain.similarity import mean_vector

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


class RetrieveChunks:
    """
    Application use case turning a raw query into ranked supporting chunks.
    The sole retrieval entry point used by the chat flow. No retries:
    provider failures propagate to the caller.
    """

    def __init__(
        self,
        corpus: CorpusStorePort,
        embedding: EmbeddingPort,
        clock: ClockPort,
        telemetry: TelemetryPort | None = None,
    ) -> None:
        self.corpus = corpus
        self.embedding = embedding
        self.clock = clock
        self.telemetry = telemetry

    async def execute(self, query: str, top_k: int = DEFAULT_TOP_K) -> list[ScoredChunk]:
        # 1) Validate
        if not query or not query.strip():
            raise ValidationError("query must not be empty")
        if top_k <= 0:
            raise ValidationError("top_k must be > 0")

        started = time.perf_counter()

        # 2) Load corpus (soft failure -> empty)
        try:
            chunks = await self.corpus.load()
        except DomainError:
            self._record("error", started)
            raise
        except Exception as ex:
            self._record("error", started)
            raise RetrievalError(f"corpus could not be loaded: {ex}") from ex
        if not chunks:
            logger.info("Corpus is empty, skipping retrieval for %r", query)
            self._record("empty", started)
            return []

        # 3) Expand and embed all variants in one batch
        variants = expand_query(query)
        try:
            vectors = await self.embedding.embed_texts(variants)
        except DomainError:
            self._record("error", started)
            raise
        except Exception as ex:
            self._record("error", started)
            raise EmbeddingError(f"embedding failed: {ex}") from ex
        if len(vectors) != len(variants) or not vectors:
            self._record("error", started)
            raise EmbeddingError(
                f"embedding provider returned {len(vectors)} vectors for {len(variants)} texts"
            )
        dims = {len(vec) for vec in vectors}
        if len(dims) != 1 or 0 in dims:
            self._record("error", started)
            raise EmbeddingError(f"embedding provider returned inconsistent vector dimensions {sorted(dims)}")

        # 4) Average variants into one query vector
        query_vec = mean_vector(vectors)

        # 5) + 6) + 7) + 8) Classify once, score all, stable sort, slice
        intent = classify_intent(query)
        ranked = rank_chunks(query_vec, chunks, intent, self.clock.now_ms(), top_k)

        logger.debug(
            "Retrieved %d/%d chunks for %r (%d variants, intent=%s)",
            len(ranked), len(chunks), query, len(variants), intent,
        )
        self._record("success", started)
        return ranked

    def _record(self, status: str, started: float) -> None:
        if self.telemetry is None:
            return
        tags = {"status": status}
        self.telemetry.incr("retrieval.requests", tags)
        self.telemetry.observe("retrieval.latency_ms", (time.perf_counter() - started) * 1000, tags)
