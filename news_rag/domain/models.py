# news_rag/domain/models.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

Vector = tuple[float, ...]  # dimension is set by the embedding provider
Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class Chunk:
    """
    Immutable unit of retrievable text.

    - title:      origin headline
    - source:     article URL or publisher label
    - text:       chunk body (sentence-packed, roughly <= 700 chars)
    - ts:         publication time in ms since epoch, None when unknown
    - embedding:  vector produced by the embedding provider
    """

    title: str
    source: str
    text: str
    ts: int | None
    embedding: Vector

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Chunk:
        ts = record.get("ts")
        return cls(
            title=str(record.get("title") or ""),
            source=str(record.get("source") or ""),
            text=str(record.get("text") or ""),
            ts=int(ts) if ts else None,
            embedding=tuple(float(x) for x in record["embedding"]),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "source": self.source,
            "text": self.text,
            "ts": self.ts,
            "embedding": list(self.embedding),
        }


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk with the score it received in one retrieval call."""

    chunk: Chunk
    score: float

    @property
    def title(self) -> str:
        return self.chunk.title

    @property
    def source(self) -> str:
        return self.chunk.source

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def ts(self) -> int | None:
        return self.chunk.ts

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "source": self.source,
            "text": self.text,
            "ts": self.ts,
            "score": self.score,
        }


@dataclass(frozen=True)
class Intent:
    """Topical and geographic signals detected in a query."""

    business: bool = False
    it: bool = False
    ai: bool = False
    india: bool = False
    locations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Turn:
    """One chat message in a session history."""

    role: Role
    content: str
    ts: int

    def to_json(self) -> str:
        return json.dumps({"role": self.role, "content": self.content, "ts": self.ts})

    @classmethod
    def from_json(cls, raw: str) -> Turn:
        data = json.loads(raw)
        return cls(role=data["role"], content=data["content"], ts=int(data["ts"]))

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content, "ts": self.ts}


@dataclass(frozen=True)
class Article:
    """A fetched news item before chunking."""

    title: str
    link: str
    text: str
    ts: int
    source: str
