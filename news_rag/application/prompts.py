"""Prompts for grounded news answers."""

from collections.abc import Sequence

from news_rag.domain.models import ScoredChunk

ANSWER_INSTRUCTIONS = """\
You are a helpful news assistant. Use only the provided context to answer. \
If the context does not contain relevant information, say so briefly.

Output style rules (must follow):
- Plain text only
- No markdown, no bullets, no bold, no headings
- Use short lines separated by line breaks

Task:
Return the latest on-topic headlines directly answering the user's question. \
Prefer items that are recent and match sector/location keywords.

Desired structure (plain text):
Intro line summarizing the answer in one sentence
Headline 1 - one-line summary
Headline 2 - one-line summary
Headline 3 - one-line summary
(Up to 6 headlines max)
Sources: Title A; Title B; Title C"""

NO_CONTEXT = "No context available."


def format_context(chunks: Sequence[ScoredChunk]) -> str:
    return "\n\n".join(
        f"[[Chunk {i} | score={c.score:.3f}]]\nTitle: {c.title}\nSource: {c.source}\nText: {c.text}"
        for i, c in enumerate(chunks, 1)
    )


def build_answer_prompt(question: str, chunks: Sequence[ScoredChunk]) -> str:
    context = format_context(chunks) or NO_CONTEXT
    return f"{ANSWER_INSTRUCTIONS}\n\nContext:\n{context}\n\nUser question: {question}"
