"""Application ports package.

Re-exports the ports from their individual modules.
"""

from news_rag.application.ports.clock_port import ClockPort
from news_rag.application.ports.conversation_store_port import ConversationStorePort
from news_rag.application.ports.corpus_store_port import CorpusStorePort
from news_rag.application.ports.embedding_port import EmbeddingPort
from news_rag.application.ports.feed_reader_port import FeedReaderPort
from news_rag.application.ports.llm_port import ChatMessage, LLMPort, LLMResponse
from news_rag.application.ports.telemetry_port import TelemetryPort

__all__ = [
    "ClockPort",
    "ConversationStorePort",
    "CorpusStorePort",
    "EmbeddingPort",
    "FeedReaderPort",
    "LLMPort",
    "ChatMessage",
    "LLMResponse",
    "TelemetryPort",
]
