from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RefreshRequest:
    feed_urls: tuple[str, ...]
    target_count: int = 120
    per_feed_max: int = 12
    max_chars: int = 700  # chunk size in characters
    batch_size: int = 32  # texts per embedding call


@dataclass(frozen=True)
class RefreshReport:
    articles: int
    chunks: int
