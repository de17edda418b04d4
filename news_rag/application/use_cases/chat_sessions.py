# news_rag/application/use_cases/chat_sessions.py
from __future__ import annotations

import logging
import uuid

from news_rag.application.dto.chat_dto import ChatAnswer, ChatRequest
from news_rag.application.ports.clock_port import ClockPort
from news_rag.application.ports.conversation_store_port import ConversationStorePort
from news_rag.application.ports.llm_port import LLMPort
from news_rag.application.prompts import build_answer_prompt
from news_rag.application.use_cases.retrieve_chunks import RetrieveChunks
from news_rag.domain.errors import ConversationStoreError, DomainError, LLMError, ValidationError
from news_rag.domain.models import Role, Turn

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 86400


def history_key(session_id: str) -> str:
    return f"chat:{session_id}:history"


class ChatSessions:
    """
    Session-backed chat flow: records turns, retrieves context, generates answers.

    Turn ordering per exchange: the user turn is appended before retrieval,
    the assistant turn only after generation succeeded. A failed exchange
    leaves the user turn in history without a reply. Callers must not issue
    concurrent chats on one session id; no per-session lock is taken.
    """

    def __init__(
        self,
        store: ConversationStorePort,
        retriever: RetrieveChunks,
        llm: LLMPort,
        clock: ClockPort,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self.store = store
        self.retriever = retriever
        self.llm = llm
        self.clock = clock
        self.ttl_seconds = ttl_seconds

    async def create_session(self) -> str:
        session_id = uuid.uuid4().hex
        key = history_key(session_id)
        try:
            await self.store.delete(key)
        except Exception as ex:
            logger.warning("Could not reset %s: %s", key, ex)
        await self._touch(key)
        return session_id

    async def history(self, session_id: str) -> list[Turn]:
        raw = await self.store.lrange(history_key(session_id), 0, -1)
        try:
            return [Turn.from_json(item) for item in raw]
        except (ValueError, KeyError, TypeError) as ex:
            raise ConversationStoreError(f"corrupt history for session {session_id}: {ex}") from ex

    async def clear(self, session_id: str) -> None:
        await self.store.delete(history_key(session_id))

    async def chat(self, req: ChatRequest) -> ChatAnswer:
        if not req.session_id or not req.message.strip():
            raise ValidationError("sessionId and message are required")
        if req.top_k <= 0:
            raise ValidationError("top_k must be > 0")

        await self._append(req.session_id, "user", req.message)

        context = await self.retriever.execute(req.message, top_k=req.top_k)
        try:
            answer = await self.llm.generate(build_answer_prompt(req.message, context))
        except DomainError:
            raise
        except Exception as ex:
            raise LLMError(f"llm generation failed: {ex}") from ex

        await self._append(req.session_id, "assistant", answer)
        return ChatAnswer(answer=answer, context=context)

    async def _append(self, session_id: str, role: Role, content: str) -> None:
        # Losing history is a correctness problem: append errors propagate.
        key = history_key(session_id)
        turn = Turn(role=role, content=content, ts=self.clock.now_ms())
        await self.store.rpush(key, turn.to_json())
        await self._touch(key)

    async def _touch(self, key: str) -> None:
        try:
            await self.store.expire(key, self.ttl_seconds)
        except Exception as ex:
            logger.warning("Could not refresh TTL for %s: %s", key, ex)
