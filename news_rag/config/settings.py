"""Application settings with environment-driven configuration.

This is the only module that reads environment variables; everything else
receives an AppSettings (or plain values) through the composition root.
"""

import os
from dataclasses import dataclass, field


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _csv(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class AppSettings:
    # ===== Conversation Store =====
    redis_url: str = field(default_factory=lambda: os.getenv("REDIS_URL", ""))
    # Empty -> in-process memory store

    chat_ttl_seconds: int = field(
        default_factory=lambda: int(os.getenv("CHAT_TTL_SECONDS", "86400"))
    )

    # ===== Retrieval =====
    default_top_k: int = field(default_factory=lambda: int(os.getenv("DEFAULT_TOP_K", "5")))
    chat_top_k: int = field(default_factory=lambda: int(os.getenv("CHAT_TOP_K", "8")))
    corpus_path: str = field(
        default_factory=lambda: os.getenv("CORPUS_PATH", "data/vectors.json")
    )

    # ===== Embedding Configuration =====
    embedding_backend: str = field(
        default_factory=lambda: os.getenv("EMBEDDING_BACKEND", "openai").lower()
    )
    # Supported: "openai" (any OpenAI-compatible endpoint) | "sentence_transformers"

    embedding_model: str = field(
        default_factory=lambda: os.getenv("EMBEDDING_MODEL", "text-embedding-004")
    )
    embedding_api_key: str = field(
        default_factory=lambda: os.getenv("EMBEDDING_API_KEY", os.getenv("GEMINI_API_KEY", ""))
    )
    embedding_base_url: str = field(
        default_factory=lambda: os.getenv(
            "EMBEDDING_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
        )
    )
    embedding_device: str = field(default_factory=lambda: os.getenv("EMBEDDING_DEVICE", "cpu"))

    # ===== LLM Configuration =====
    llm_base_url: str = field(
        default_factory=lambda: os.getenv(
            "LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
        )
    )
    llm_api_key: str = field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("GEMINI_API_KEY", ""))
    )
    llm_model: str = field(default_factory=lambda: os.getenv("LLM_MODEL", "gemini-1.5-flash"))

    # ===== Ingest / Refresh =====
    feed_urls: tuple[str, ...] = field(default_factory=lambda: _csv("FEED_URLS"))
    # Empty -> config.feeds.DEFAULT_FEEDS

    ingest_target_count: int = field(
        default_factory=lambda: int(os.getenv("INGEST_TARGET_COUNT", "120"))
    )
    per_feed_max: int = field(default_factory=lambda: int(os.getenv("PER_FEED_MAX", "12")))
    chunk_max_chars: int = field(
        default_factory=lambda: int(os.getenv("CHUNK_MAX_CHARS", "700"))
    )
    ingest_batch_size: int = field(
        default_factory=lambda: int(os.getenv("INGEST_BATCH_SIZE", "32"))
    )
    refresh_interval_s: int = field(
        default_factory=lambda: int(os.getenv("REFRESH_INTERVAL_S", "3600"))
    )
    # 0 disables the periodic refresh

    # ===== HTTP =====
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "4000")))

    # ===== Telemetry / Logging =====
    telemetry_enabled: bool = field(default_factory=lambda: _flag("TELEMETRY_ENABLED", "false"))
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
