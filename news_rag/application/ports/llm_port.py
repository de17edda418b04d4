"""Generation port: an async chat-completion provider."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

MessageRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: MessageRole
    content: str


@dataclass(frozen=True)
class LLMResponse:
    text: str
    finish_reason: str = "stop"
    usage_tokens: int | None = None


@runtime_checkable
class LLMPort(Protocol):
    async def chat(
        self, messages: Sequence[ChatMessage], temperature: float = 0.2, max_tokens: int = 1024
    ) -> LLMResponse:
        """Complete a conversation. Raises LLMError, or ConfigurationError without credentials."""
        ...

    async def generate(self, prompt: str, temperature: float = 0.2, max_tokens: int = 1024) -> str:
        """Answer a single prompt sent as one user message; only the text is returned."""
        response = await self.chat(
            [ChatMessage(role="user", content=prompt)],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.text
