"""Tests for the domain error family."""

import pytest

from news_rag.domain.errors import (
    ConfigurationError,
    ConversationStoreError,
    CorpusError,
    DomainError,
    EmbeddingError,
    FeedError,
    LLMError,
    RetrievalError,
    ValidationError,
)


@pytest.mark.parametrize(
    "cls",
    [
        ValidationError,
        ConfigurationError,
        RetrievalError,
        EmbeddingError,
        LLMError,
        ConversationStoreError,
        CorpusError,
        FeedError,
    ],
)
def test_every_error_is_a_domain_error(cls):
    err = cls("boom")
    assert isinstance(err, DomainError)
    assert str(err) == "boom"


def test_errors_chain_the_underlying_cause():
    try:
        try:
            raise ConnectionError("refused")
        except ConnectionError as ex:
            raise ConversationStoreError("rpush failed") from ex
    except ConversationStoreError as err:
        assert isinstance(err.__cause__, ConnectionError)
