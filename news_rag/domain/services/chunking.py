from __future__ import annotations

import re
from collections.abc import Sequence

_SENT_END = re.compile(r"(?<=[.!?])\s+")


def split_into_sentences(text: str) -> list[str]:
    """Very simple sentence split on whitespace after . ! or ?"""
    return [s.strip() for s in _SENT_END.split(text) if s.strip()]


def pack_sentences(sentences: Sequence[str], max_chars: int) -> list[str]:
    """Greedily join sentences while the chunk stays within ``max_chars``.

    A single sentence longer than ``max_chars`` becomes its own chunk;
    sentences are never cut.
    """
    chunks: list[str] = []
    current = ""
    for s in sentences:
        candidate = f"{current} {s}".strip()
        if len(candidate) > max_chars:
            if current:
                chunks.append(current)
            current = s
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def chunk_sentences(text: str, max_chars: int = 700) -> list[str]:
    """Pipeline: sentence split → pack. Article bodies are short, so no sections/overlap."""
    return pack_sentences(split_into_sentences(text), max_chars)
