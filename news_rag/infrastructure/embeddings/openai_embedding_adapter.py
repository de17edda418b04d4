from collections.abc import Sequence
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.domain.errors import ConfigurationError, EmbeddingError


@dataclass
class OpenAIEmbeddingAdapter(EmbeddingPort):
    """Embeddings from any OpenAI-compatible endpoint (OpenAI, Gemini, vLLM)."""

    api_key: str = ""
    model: str = "text-embedding-004"
    base_url: str | None = None  # None -> the SDK default (api.openai.com)

    def __post_init__(self) -> None:
        # Defer import of OpenAI to first use to avoid hard dependency in tests
        self._client: Any | None = None

    def _get_client(self) -> Any:
        if not self.api_key:
            raise ConfigurationError("Missing embedding API key (EMBEDDING_API_KEY)")
        if self._client is None:
            module = import_module("openai")
            self._client = module.AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    async def embed_texts(self, texts: Sequence[str]) -> list[list[float]]:
        if not texts:
            return []
        client = self._get_client()
        try:
            resp: Any = await client.embeddings.create(model=self.model, input=list(texts))
        except Exception as ex:  # noqa: BLE001
            # Translate external errors to domain-specific errors
            raise EmbeddingError(f"Embedding request failed: {ex}") from ex
        data = sorted(resp.data, key=lambda item: item.index)
        return [list(item.embedding) for item in data]
