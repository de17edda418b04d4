# news_rag/application/dto/chat_dto.py
from __future__ import annotations

from dataclasses import dataclass, field

from news_rag.domain.models import ScoredChunk


@dataclass(frozen=True)
class ChatRequest:
    """
    DTO for one chat turn.

    - session_id: id returned by session creation
    - message:    user message (non-empty)
    - top_k:      number of chunks to ground the answer on
    """

    session_id: str
    message: str
    top_k: int = 8


@dataclass(frozen=True)
class ChatAnswer:
    """Generated answer and the ranked chunks it was grounded on."""

    answer: str
    context: list[ScoredChunk] = field(default_factory=list)
