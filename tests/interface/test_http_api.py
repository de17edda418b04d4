"""HTTP API tests with FastAPI's TestClient and fake use cases."""

from collections.abc import Sequence
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from news_rag.application.dto.ingest_dto import RefreshReport, RefreshRequest
from news_rag.application.ports.clock_port import ClockPort
from news_rag.application.ports.llm_port import ChatMessage, LLMPort, LLMResponse
from news_rag.application.use_cases.chat_sessions import ChatSessions
from news_rag.config.composition import Services
from news_rag.config.settings import AppSettings
from news_rag.domain.errors import ConfigurationError, EmbeddingError, FeedError
from news_rag.domain.models import Chunk, ScoredChunk
from news_rag.infrastructure.conversation.memory_store import MemoryConversationStore
from news_rag.interface.http.api import create_app

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class FakeClock(ClockPort):
    def now(self) -> datetime:
        return NOW


class FakeRetriever:
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.calls: list[tuple[str, int]] = []

    async def execute(self, query: str, top_k: int = 5) -> list[ScoredChunk]:
        self.calls.append((query, top_k))
        if self.error is not None:
            raise self.error
        chunk = Chunk(title="AI funding", source="https://x/ai", text="India AI funding surges", ts=1, embedding=(1.0,))
        return [ScoredChunk(chunk=chunk, score=1.26)]


class FakeLLM(LLMPort):
    def __init__(self) -> None:
        self.error: Exception | None = None

    async def chat(
        self, messages: Sequence[ChatMessage], temperature: float = 0.2, max_tokens: int = 1024
    ) -> LLMResponse:
        if self.error is not None:
            raise self.error
        return LLMResponse(text="AI funding is up.")


class FakeRefresher:
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.runs = 0

    async def execute(self, req: RefreshRequest) -> RefreshReport:
        self.runs += 1
        if self.error is not None:
            raise self.error
        return RefreshReport(articles=2, chunks=5)


class Harness:
    def __init__(self) -> None:
        self.settings = AppSettings(refresh_interval_s=0, chat_top_k=8, default_top_k=5)
        self.store = MemoryConversationStore()
        self.retriever = FakeRetriever()
        self.llm = FakeLLM()
        self.refresher = FakeRefresher()

    async def factory(self, settings: AppSettings) -> Services:
        chat = ChatSessions(self.store, self.retriever, self.llm, FakeClock(), ttl_seconds=60)  # type: ignore[arg-type]
        return Services(
            settings=settings,
            store=self.store,
            retriever=self.retriever,  # type: ignore[arg-type]
            chat=chat,
            refresher=self.refresher,  # type: ignore[arg-type]
            refresh_request=RefreshRequest(feed_urls=("https://a/rss",)),
        )


@pytest.fixture
def harness():
    return Harness()


@pytest.fixture
def client(harness):
    app = create_app(harness.settings, services_factory=harness.factory)
    with TestClient(app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_session_chat_history_and_clear(client, harness):
    sid = client.post("/api/session").json()["sessionId"]

    resp = client.post("/api/chat", json={"sessionId": sid, "message": "AI business?"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["answer"] == "AI funding is up."
    assert body["context"] == [
        {
            "title": "AI funding",
            "source": "https://x/ai",
            "text": "India AI funding surges",
            "ts": 1,
            "score": 1.26,
        }
    ]
    # default chat top_k
    assert harness.retriever.calls == [("AI business?", 8)]

    history = client.get(f"/api/session/{sid}/history").json()["history"]
    assert [(t["role"], t["content"]) for t in history] == [
        ("user", "AI business?"),
        ("assistant", "AI funding is up."),
    ]

    assert client.delete(f"/api/session/{sid}").json() == {"ok": True}
    assert client.get(f"/api/session/{sid}/history").json() == {"history": []}


def test_chat_passes_top_k(client, harness):
    client.post("/api/chat", json={"sessionId": "s", "message": "m", "topK": 3})
    assert harness.retriever.calls == [("m", 3)]


@pytest.mark.parametrize("body", [{}, {"sessionId": "s"}, {"message": "hi"}, {"sessionId": "", "message": "hi"}])
def test_chat_requires_fields(client, body):
    resp = client.post("/api/chat", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "sessionId and message are required"}


def test_chat_rejects_malformed_body(client):
    resp = client.post("/api/chat", json={"sessionId": "s", "message": "m", "topK": "many"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_chat_provider_failure_is_500_and_keeps_user_turn(client, harness):
    harness.llm.error = RuntimeError("provider down")

    resp = client.post("/api/chat", json={"sessionId": "s1", "message": "news?"})

    assert resp.status_code == 500
    assert "provider down" in resp.json()["error"]
    history = client.get("/api/session/s1/history").json()["history"]
    assert [t["role"] for t in history] == ["user"]


def test_missing_credentials_is_503(client, harness):
    harness.retriever.error = ConfigurationError("Missing embedding API key (EMBEDDING_API_KEY)")

    resp = client.post("/api/retrieve", json={"query": "x"})

    assert resp.status_code == 503
    assert resp.json() == {"error": "Missing embedding API key (EMBEDDING_API_KEY)"}


def test_retrieve_returns_ranked_results(client, harness):
    resp = client.post("/api/retrieve", json={"query": "AI", "topK": 2})
    assert resp.status_code == 200
    assert resp.json()["results"][0]["score"] == 1.26
    assert harness.retriever.calls == [("AI", 2)]


def test_retrieve_default_top_k_and_errors(client, harness):
    client.post("/api/retrieve", json={"query": "AI"})
    assert harness.retriever.calls == [("AI", 5)]

    harness.retriever.error = EmbeddingError("quota exceeded")
    resp = client.post("/api/retrieve", json={"query": "AI"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "quota exceeded"}


def test_refresh_endpoint(client, harness):
    resp = client.post("/api/refresh")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "articles": 2, "chunks": 5}

    harness.refresher.error = FeedError("all feeds failed")
    resp = client.post("/api/refresh")
    assert resp.status_code == 500
    assert resp.json() == {"error": "all feeds failed"}


def test_startup_refresh_runs_when_enabled(harness):
    settings = AppSettings(refresh_interval_s=3600)
    app = create_app(settings, services_factory=harness.factory)
    with TestClient(app) as c:
        # a request round-trip gives the startup task a chance to run
        for _ in range(20):
            c.get("/health")
            if harness.refresher.runs:
                break
    assert harness.refresher.runs == 1


def test_no_background_refresh_when_disabled(client, harness):
    client.get("/health")
    assert harness.refresher.runs == 0
