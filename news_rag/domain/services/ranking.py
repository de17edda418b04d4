# news_rag/domain/services/ranking.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence

from news_rag.domain.models import Chunk, Intent, ScoredChunk
from news_rag.domain.services.scoring import score_chunk


def rank_chunks(
    query_vec: Sequence[float],
    corpus: Sequence[Chunk],
    intent: Intent,
    now_ms: int,
    top_k: int,
) -> list[ScoredChunk]:
    """
    Score every chunk against one shared query vector and intent, then keep the best.

    - sorted() is stable, so equal scores keep corpus order.
    - top_k larger than the corpus returns everything.
    """
    if top_k <= 0:
        return []
    scored = [
        ScoredChunk(chunk=c, score=score_chunk(query_vec, c, intent, now_ms).total)
        for c in corpus
    ]
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return ranked[:top_k]
