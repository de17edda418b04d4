"""Tests for ranking a corpus against one query vector."""

from news_rag.domain.models import Chunk, Intent
from news_rag.domain.services.ranking import rank_chunks

NOW = 1_700_000_000_000


def chunk(name: str, embedding: tuple[float, ...]) -> Chunk:
    return Chunk(title=name, source=name, text=name, ts=None, embedding=embedding)


CORPUS = [
    chunk("far", (0.0, 1.0)),
    chunk("near", (1.0, 0.1)),
    chunk("exact", (1.0, 0.0)),
]


def test_orders_by_descending_score():
    ranked = rank_chunks((1.0, 0.0), CORPUS, Intent(), NOW, top_k=3)
    assert [r.title for r in ranked] == ["exact", "near", "far"]
    assert ranked[0].score >= ranked[1].score >= ranked[2].score


def test_top_k_truncates():
    ranked = rank_chunks((1.0, 0.0), CORPUS, Intent(), NOW, top_k=1)
    assert [r.title for r in ranked] == ["exact"]


def test_top_k_larger_than_corpus_returns_everything():
    assert len(rank_chunks((1.0, 0.0), CORPUS, Intent(), NOW, top_k=50)) == 3


def test_non_positive_top_k_returns_nothing():
    assert rank_chunks((1.0, 0.0), CORPUS, Intent(), NOW, top_k=0) == []


def test_ties_keep_corpus_order():
    corpus = [chunk(f"c{i}", (1.0, 0.0)) for i in range(5)]
    ranked = rank_chunks((1.0, 0.0), corpus, Intent(), NOW, top_k=5)
    assert [r.title for r in ranked] == ["c0", "c1", "c2", "c3", "c4"]


def test_keyword_boost_can_reorder_close_candidates():
    corpus = [
        Chunk(title="plain", source="", text="rain update", ts=None, embedding=(1.0, 0.0)),
        Chunk(title="biz", source="", text="market update", ts=None, embedding=(1.0, 0.05)),
    ]
    ranked = rank_chunks((1.0, 0.0), corpus, Intent(business=True), NOW, top_k=2)
    assert [r.title for r in ranked] == ["biz", "plain"]


def test_empty_corpus():
    assert rank_chunks((1.0, 0.0), [], Intent(), NOW, top_k=5) == []
