"""Tests for the ingest and query command-line entry points."""

import pytest

from news_rag.application.dto.ingest_dto import RefreshReport
from news_rag.domain.errors import EmbeddingError
from news_rag.domain.models import Chunk, ScoredChunk
from news_rag.interface.cli import ingest as ingest_cli
from news_rag.interface.cli import query as query_cli


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CORPUS_PATH", str(tmp_path / "vectors.json"))
    monkeypatch.delenv("FEED_URLS", raising=False)
    monkeypatch.delenv("DEFAULT_TOP_K", raising=False)


def test_ingest_cli_runs_refresh_with_overrides(monkeypatch, capsys, tmp_path):
    captured = {}

    class FakeRefresh:
        async def execute(self, req):
            captured["req"] = req
            return RefreshReport(articles=3, chunks=7)

    monkeypatch.setattr(ingest_cli, "build_refresh_use_case", lambda settings: FakeRefresh())

    ingest_cli.main(["--feeds", "https://a/rss,https://b/rss", "--target", "10", "--per-feed", "2"])

    out = capsys.readouterr().out
    assert f"Saved 7 chunks to {tmp_path / 'vectors.json'}" in out
    req = captured["req"]
    assert req.feed_urls == ("https://a/rss", "https://b/rss")
    assert req.target_count == 10
    assert req.per_feed_max == 2


def test_ingest_cli_defaults_to_settings(monkeypatch, capsys):
    captured = {}

    class FakeRefresh:
        async def execute(self, req):
            captured["req"] = req
            return RefreshReport(articles=0, chunks=0)

    monkeypatch.setattr(ingest_cli, "build_refresh_use_case", lambda settings: FakeRefresh())
    monkeypatch.setenv("PER_FEED_MAX", "4")

    ingest_cli.main([])

    assert captured["req"].per_feed_max == 4
    assert captured["req"].target_count == 120
    assert len(captured["req"].feed_urls) > 100


def _scored(title: str, score: float) -> ScoredChunk:
    chunk = Chunk(title=title, source=f"https://x/{title}", text="body text", ts=None, embedding=(1.0,))
    return ScoredChunk(chunk=chunk, score=score)


def test_query_cli_prints_ranked_chunks(monkeypatch, capsys):
    captured = {}

    class FakeRetrieve:
        async def execute(self, query, top_k=5):
            captured["args"] = (query, top_k)
            return [_scored("First", 1.234), _scored("Second", 0.5)]

    monkeypatch.setattr(query_cli, "build_retrieve_use_case", lambda settings: FakeRetrieve())

    code = query_cli.main(["--question", "AI news", "--k", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert captured["args"] == ("AI news", 2)
    assert "[1] score=1.234 First" in out
    assert "[2] score=0.500 Second" in out


def test_query_cli_uses_default_top_k(monkeypatch):
    captured = {}

    class FakeRetrieve:
        async def execute(self, query, top_k=5):
            captured["top_k"] = top_k
            return []

    monkeypatch.setattr(query_cli, "build_retrieve_use_case", lambda settings: FakeRetrieve())
    monkeypatch.setenv("DEFAULT_TOP_K", "9")

    assert query_cli.main(["--question", "x"]) == 0
    assert captured["top_k"] == 9


def test_query_cli_reports_domain_errors(monkeypatch, capsys):
    class FailingRetrieve:
        async def execute(self, query, top_k=5):
            raise EmbeddingError("quota exceeded")

    monkeypatch.setattr(query_cli, "build_retrieve_use_case", lambda settings: FailingRetrieve())

    assert query_cli.main(["--question", "x"]) == 1
    assert "[ERROR] EmbeddingError: quota exceeded" in capsys.readouterr().out


def test_query_cli_requires_question():
    with pytest.raises(SystemExit):
        query_cli.main([])
