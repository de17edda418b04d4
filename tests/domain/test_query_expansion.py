"""Tests for query expansion rules."""

from news_rag.domain.services.query_expansion import expand_query


def test_ai_business_query_gets_all_matching_rules_in_order():
    assert expand_query("AI business") == [
        "AI business",
        "AI business artificial intelligence in India",
        "AI business startups and funding",
        "AI business latest headlines today",
        "AI business top stories",
        "AI business in India",
    ]


def test_it_rule_and_no_india_suffix_when_india_is_mentioned():
    assert expand_query("Indian IT jobs") == [
        "Indian IT jobs",
        "Indian IT jobs information technology sector",
        "Indian IT jobs software services and IT stocks",
    ]


def test_plain_query_only_gets_india_suffix():
    assert expand_query("weather") == ["weather", "weather in India"]


def test_literal_query_is_always_first_and_unchanged():
    variants = expand_query("  Tech NEWS ")
    assert variants[0] == "  Tech NEWS "
    assert len(variants) == len(set(variants))


def test_ai_inside_a_word_does_not_trigger_ai_rule():
    variants = expand_query("rain in India")
    assert variants == ["rain in India"]
