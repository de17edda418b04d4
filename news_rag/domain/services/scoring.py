# news_rag/domain/services/scoring.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from news_rag.domain.models import Chunk, Intent
from news_rag.domain.similarity import cosine_similarity

DAY_MS = 24 * 60 * 60 * 1000

BUSINESS_BOOST = 0.08
IT_BOOST = 0.08
AI_BOOST = 0.06
INDIA_BOOST = 0.04
LOCATION_BOOST = 0.05

# (max age in ms, boost); first matching band wins.
RECENCY_BANDS: tuple[tuple[int, float], ...] = (
    (DAY_MS, 0.08),
    (3 * DAY_MS, 0.05),
    (7 * DAY_MS, 0.02),
)

# Chunk-side vocabularies are plain substring matches (no word boundaries).
_BUSINESS_TEXT = re.compile(r"(business|market|markets|stocks|economy|startup|funding)")
_IT_TEXT = re.compile(r"(it|technology|tech|software|it services)")
_AI_TEXT = re.compile(r"(ai|artificial intelligence|machine learning|ml|genai)")
_INDIA_TEXT = re.compile(r"(india|indian)")


@dataclass(frozen=True)
class ScoreBreakdown:
    """Additive parts of a chunk score; only meaningful within one retrieval call."""

    similarity: float
    keyword: float
    recency: float

    @property
    def total(self) -> float:
        return self.similarity + self.keyword + self.recency


def keyword_boost(chunk: Chunk, intent: Intent) -> float:
    """Boost chunks whose title/text share the query's topical and geographic intent."""
    text_all = f"{chunk.title or ''} {chunk.text or ''}".lower()
    bonus = 0.0
    if intent.business and _BUSINESS_TEXT.search(text_all):
        bonus += BUSINESS_BOOST
    if intent.it and _IT_TEXT.search(text_all):
        bonus += IT_BOOST
    if intent.ai and _AI_TEXT.search(text_all):
        bonus += AI_BOOST
    if intent.india and _INDIA_TEXT.search(text_all):
        bonus += INDIA_BOOST
    # counted once, however many locations match
    if any(loc in text_all for loc in intent.locations):
        bonus += LOCATION_BOOST
    return bonus


def recency_boost(ts: int | None, now_ms: int) -> float:
    """Step boost for fresh articles; 0.0 when the publication time is unknown."""
    if not ts:
        return 0.0
    age_ms = now_ms - ts
    for max_age, boost in RECENCY_BANDS:
        if age_ms < max_age:
            return boost
    return 0.0


def score_chunk(
    query_vec: Sequence[float],
    chunk: Chunk,
    intent: Intent,
    now_ms: int,
) -> ScoreBreakdown:
    """Combine cosine similarity, keyword boost and recency boost for one chunk."""
    return ScoreBreakdown(
        similarity=cosine_similarity(query_vec, chunk.embedding),
        keyword=keyword_boost(chunk, intent),
        recency=recency_boost(chunk.ts, now_ms),
    )
