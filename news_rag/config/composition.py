"""Composition root: wires adapters into use cases from AppSettings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from news_rag.application.dto.ingest_dto import RefreshRequest
from news_rag.application.ports.clock_port import ClockPort
from news_rag.application.ports.conversation_store_port import ConversationStorePort
from news_rag.application.ports.corpus_store_port import CorpusStorePort
from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.application.ports.feed_reader_port import FeedReaderPort
from news_rag.application.ports.llm_port import LLMPort
from news_rag.application.ports.telemetry_port import TelemetryPort
from news_rag.application.use_cases.chat_sessions import ChatSessions
from news_rag.application.use_cases.refresh_corpus import RefreshCorpus
from news_rag.application.use_cases.retrieve_chunks import RetrieveChunks
from news_rag.config.feeds import DEFAULT_FEEDS
from news_rag.config.settings import AppSettings
from news_rag.domain.errors import ConfigurationError, ConversationStoreError
from news_rag.infrastructure.conversation.memory_store import MemoryConversationStore
from news_rag.infrastructure.conversation.redis_store import (
    RedisConfig,
    RedisConversationStore,
)
from news_rag.infrastructure.corpus.json_corpus_store import JsonCorpusStore
from news_rag.infrastructure.embeddings.openai_embedding_adapter import OpenAIEmbeddingAdapter
from news_rag.infrastructure.embeddings.sentence_transformers_adapter import (
    SentenceTransformersEmbeddingAdapter,
)
from news_rag.infrastructure.feeds.rss_feed_reader import RSSFeedReader
from news_rag.infrastructure.llm.openai_chat_adapter import OpenAIChatAdapter
from news_rag.infrastructure.telemetry.otel_adapter import (
    NullTelemetry,
    OpenTelemetryAdapter,
    OtelConfig,
)
from news_rag.infrastructure.time.system_clock import SystemClock

logger = logging.getLogger(__name__)


def build_embedding(settings: AppSettings) -> EmbeddingPort:
    backend = settings.embedding_backend

    if backend == "sentence_transformers":
        return SentenceTransformersEmbeddingAdapter(
            model_name=settings.embedding_model,
            device=settings.embedding_device,
        )

    if backend == "openai":
        return OpenAIEmbeddingAdapter(
            api_key=settings.embedding_api_key,
            model=settings.embedding_model,
            base_url=settings.embedding_base_url or None,
        )

    raise ConfigurationError(f"Unknown EMBEDDING_BACKEND: {backend!r}")


def build_llm(settings: AppSettings) -> LLMPort:
    return OpenAIChatAdapter(
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        base_url=settings.llm_base_url or None,
    )


def build_clock() -> ClockPort:
    """Tests inject a fake clock instead."""
    return SystemClock()


def build_corpus_store(settings: AppSettings) -> CorpusStorePort:
    return JsonCorpusStore(settings.corpus_path)


def build_telemetry(settings: AppSettings) -> TelemetryPort:
    if not settings.telemetry_enabled:
        return NullTelemetry()
    return OpenTelemetryAdapter(
        OtelConfig(
            otlp_endpoint=settings.otlp_endpoint or None,
            environment=settings.telemetry_environment,
        )
    )


def build_feed_reader() -> FeedReaderPort:
    return RSSFeedReader()


async def build_conversation_store(settings: AppSettings) -> ConversationStorePort:
    """Redis when REDIS_URL is set and answers a ping, otherwise in-memory.

    The fallback is decided once; a Redis outage later surfaces as
    ConversationStoreError from the store operations.
    """
    if not settings.redis_url:
        logger.info("REDIS_URL not set, using in-memory session store")
        return MemoryConversationStore()

    try:
        store = RedisConversationStore(RedisConfig(url=settings.redis_url))
        await store.ping()
    except ConversationStoreError as ex:
        logger.warning("Redis unavailable, falling back to in-memory session store: %s", ex)
        return MemoryConversationStore()

    logger.info("Using Redis session store")
    return store


def build_retrieve_use_case(
    settings: AppSettings,
    embedding: EmbeddingPort | None = None,
    telemetry: TelemetryPort | None = None,
) -> RetrieveChunks:
    return RetrieveChunks(
        corpus=build_corpus_store(settings),
        embedding=embedding or build_embedding(settings),
        clock=build_clock(),
        telemetry=telemetry or build_telemetry(settings),
    )


def build_chat_use_case(
    settings: AppSettings,
    store: ConversationStorePort,
    retriever: RetrieveChunks | None = None,
) -> ChatSessions:
    return ChatSessions(
        store=store,
        retriever=retriever or build_retrieve_use_case(settings),
        llm=build_llm(settings),
        clock=build_clock(),
        ttl_seconds=settings.chat_ttl_seconds,
    )


def build_refresh_use_case(
    settings: AppSettings, embedding: EmbeddingPort | None = None
) -> RefreshCorpus:
    return RefreshCorpus(
        feeds=build_feed_reader(),
        embedding=embedding or build_embedding(settings),
        corpus=build_corpus_store(settings),
    )


def build_refresh_request(
    settings: AppSettings,
    feed_urls: tuple[str, ...] | None = None,
    target_count: int | None = None,
    per_feed_max: int | None = None,
) -> RefreshRequest:
    return RefreshRequest(
        feed_urls=feed_urls or settings.feed_urls or DEFAULT_FEEDS,
        target_count=target_count if target_count is not None else settings.ingest_target_count,
        per_feed_max=per_feed_max if per_feed_max is not None else settings.per_feed_max,
        max_chars=settings.chunk_max_chars,
        batch_size=settings.ingest_batch_size,
    )


@dataclass
class Services:
    """Everything the HTTP layer needs, built once per process."""

    settings: AppSettings
    store: ConversationStorePort
    retriever: RetrieveChunks
    chat: ChatSessions
    refresher: RefreshCorpus
    refresh_request: RefreshRequest


async def build_services(settings: AppSettings) -> Services:
    embedding = build_embedding(settings)
    store = await build_conversation_store(settings)
    retriever = build_retrieve_use_case(settings, embedding=embedding)
    return Services(
        settings=settings,
        store=store,
        retriever=retriever,
        chat=build_chat_use_case(settings, store, retriever=retriever),
        refresher=build_refresh_use_case(settings, embedding=embedding),
        refresh_request=build_refresh_request(settings),
    )
