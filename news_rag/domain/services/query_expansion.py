# news_rag/domain/services/query_expansion.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

import re

_AI = re.compile(r"(\bai\b|artificial intelligence)")
_IT = re.compile(r"(\bit\b|information technology|tech|technology)")
_HEADLINES = re.compile(r"business|market|headline|news")
_INDIA = re.compile(r"india|indian")


def expand_query(query: str) -> list[str]:
    """
    Build denser phrasings of a short news query before embedding.

    - The literal query is always the first variant.
    - Rules are checked against the lower-cased query and are additive.
    - Variants are kept in insertion order without duplicates.
    """
    lower = query.lower()
    variants = [query]

    def add(variant: str) -> None:
        if variant not in variants:
            variants.append(variant)

    if _AI.search(lower):
        add(f"{query} artificial intelligence in India")
        add(f"{query} startups and funding")
    if _IT.search(lower):
        add(f"{query} information technology sector")
        add(f"{query} software services and IT stocks")
    if _HEADLINES.search(lower):
        add(f"{query} latest headlines today")
        add(f"{query} top stories")
    if not _INDIA.search(lower):
        add(f"{query} in India")
    return variants
