"""Error family shared by all layers.

Adapters catch third-party exceptions and re-raise one of these with
``raise ... from ex``; the HTTP layer maps them to status codes.
"""


class DomainError(Exception):
    """Root of every error this package raises on purpose."""


class ValidationError(DomainError):
    """Caller input is missing or out of range (HTTP 400)."""


class ConfigurationError(DomainError):
    """A provider is missing credentials or is otherwise misconfigured (HTTP 503)."""


class RetrievalError(DomainError):
    """Retrieval failed for a reason other than embedding."""


class EmbeddingError(DomainError):
    """Embedding provider failed or returned an unusable result."""


class LLMError(DomainError):
    """Generation provider failed or returned no answer."""


class ConversationStoreError(DomainError):
    """Conversation store operation failed."""


class CorpusError(DomainError):
    """Corpus could not be written."""


class FeedError(DomainError):
    """Feed could not be fetched or parsed."""
