"""Local embeddings with sentence-transformers.

Encoding is CPU/GPU bound, so it runs in a worker thread to keep the event
loop responsive. The model loads on first use.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.domain.errors import EmbeddingError


@dataclass
class SentenceTransformersEmbeddingAdapter(EmbeddingPort):
    model_name: str = "sentence-transformers/all-MiniLM-L6-v2"
    device: str = "cpu"  # or "cuda" / "mps"
    local_files_only: bool = False

    def __post_init__(self) -> None:
        self._model: Any | None = None

    def _load(self) -> Any:
        if self._model is None:
            try:
                st = import_module("sentence_transformers")
                self._model = st.SentenceTransformer(
                    self.model_name, device=self.device, local_files_only=self.local_files_only
                )
            except Exception as ex:  # noqa: BLE001
                raise EmbeddingError(f"Could not load model {self.model_name!r}: {ex}") from ex
        return self._model

    def _encode_batch(self, texts: list[str]) -> list[list[float]]:
        model = self._load()
        try:
            matrix = model.encode(texts, normalize_embeddings=True, show_progress_bar=False)
        except Exception as ex:  # noqa: BLE001
            raise EmbeddingError(f"Local encoding failed: {ex}") from ex
        return [[float(x) for x in row] for row in matrix]

    async def embed_texts(self, texts: Sequence[str]) -> list[list[float]]:
        if not texts:
            return []
        return await asyncio.to_thread(self._encode_batch, list(texts))
