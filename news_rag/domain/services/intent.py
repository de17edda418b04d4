# news_rag/domain/services/intent.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

import re

from news_rag.domain.models import Intent

# Vocabularies are part of the ranking contract; keep them verbatim.
BUSINESS_QUERY = re.compile(r"(\bbusiness\b|market|markets|stocks|economy|startup|funding)")
IT_QUERY = re.compile(r"(\bit\b|information technology|tech|technology|software|it services)")
AI_QUERY = re.compile(r"(\bai\b|artificial intelligence|genai|machine learning|ml)")
INDIA_QUERY = re.compile(r"(india|indian)")

GAZETTEER: tuple[str, ...] = (
    "india",
    "pune",
    "bengaluru",
    "bangalore",
    "hyderabad",
    "mumbai",
    "delhi",
    "gurugram",
    "noida",
    "chennai",
    "kolkata",
)


def extract_locations(lower: str) -> tuple[str, ...]:
    """Gazetteer entries that occur as substrings of ``lower`` (gazetteer order)."""
    return tuple(place for place in GAZETTEER if place in lower)


def classify_intent(query: str) -> Intent:
    """
    Derive topical and geographic signals from a raw query.

    The query is lower-cased before matching. Word boundaries apply only to
    the short tokens "business", "it" and "ai"; the rest are substring matches.
    """
    lower = query.lower()
    return Intent(
        business=BUSINESS_QUERY.search(lower) is not None,
        it=IT_QUERY.search(lower) is not None,
        ai=AI_QUERY.search(lower) is not None,
        india=INDIA_QUERY.search(lower) is not None,
        locations=extract_locations(lower),
    )
