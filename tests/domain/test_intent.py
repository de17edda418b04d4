"""Tests for query intent classification."""

import pytest

from news_rag.domain.models import Intent
from news_rag.domain.services.intent import classify_intent, extract_locations


def test_startup_news_in_bengaluru():
    intent = classify_intent("Latest AI startup news in Bengaluru")
    assert intent == Intent(business=True, it=False, ai=True, india=False, locations=("bengaluru",))


@pytest.mark.parametrize(
    "query,field",
    [
        ("business outlook", "business"),
        ("stock markets today", "business"),
        ("IT layoffs", "it"),
        ("software exports", "it"),
        ("GenAI adoption", "ai"),
        ("machine learning research", "ai"),
        ("Indian elections", "india"),
    ],
)
def test_single_signal_queries(query, field):
    assert getattr(classify_intent(query), field) is True


def test_short_tokens_need_word_boundaries_on_the_query_side():
    intent = classify_intent("businesses with their own fair policies")
    assert intent.business is False
    assert intent.it is False
    assert intent.ai is False


def test_matching_is_case_insensitive():
    assert classify_intent("AI").ai is True
    assert classify_intent("INDIA").india is True


def test_locations_follow_gazetteer_order():
    assert extract_locations("delhi or mumbai or pune") == ("pune", "mumbai", "delhi")


def test_india_is_both_a_signal_and_a_location():
    intent = classify_intent("News from India")
    assert intent.india is True
    assert intent.locations == ("india",)


def test_no_signals():
    assert classify_intent("weather tomorrow") == Intent()
