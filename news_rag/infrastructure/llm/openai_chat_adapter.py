"""Chat completions through any OpenAI-compatible endpoint.

The default base URL is Gemini's OpenAI-compatible API; a vLLM or OpenAI
endpoint works the same way.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from news_rag.application.ports.llm_port import ChatMessage, LLMPort, LLMResponse
from news_rag.domain.errors import ConfigurationError, LLMError


@dataclass
class OpenAIChatAdapter(LLMPort):
    api_key: str = ""
    model: str = "gemini-1.5-flash"
    base_url: str | None = None

    def __post_init__(self) -> None:
        self._client: Any | None = None

    def _get_client(self) -> Any:
        if not self.api_key:
            raise ConfigurationError("Missing LLM API key (LLM_API_KEY)")
        if self._client is None:
            # openai is imported on first use only
            openai = import_module("openai")
            self._client = openai.AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    async def chat(
        self, messages: Sequence[ChatMessage], temperature: float = 0.2, max_tokens: int = 1024
    ) -> LLMResponse:
        client = self._get_client()
        try:
            completion: Any = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as ex:  # noqa: BLE001
            raise LLMError(f"LLM request failed: {ex}") from ex

        if not completion.choices:
            raise LLMError("LLM returned no choices")
        choice = completion.choices[0]
        usage = getattr(completion, "usage", None)
        return LLMResponse(
            text=choice.message.content or "",
            finish_reason=choice.finish_reason or "stop",
            usage_tokens=getattr(usage, "total_tokens", None),
        )
