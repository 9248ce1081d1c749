"""Abstract LLM provider interface.

All provider adapters implement this interface so the registry can route to
any backend without coupling. A provider owns three concerns: building the
request, parsing a single response and decoding a stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from cogbridge.core.stream_decoder import StreamHandler
from cogbridge.models.schemas import (
    ChatCompletionsOutput,
    ChatRequest,
    EmbeddingsOutput,
    EmbeddingsRequest,
)


@dataclass
class RequestData:
    """A fully prepared HTTP request: URL, headers and JSON body."""

    url: str
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)

    def bearer_auth(self, api_key: str) -> None:
        self.headers["Authorization"] = f"Bearer {api_key}"


class BaseProvider(ABC):
    """Abstract base class for LLM provider adapters."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider name (e.g. 'opencog')."""
        ...

    @abstractmethod
    def prepare_chat_completions(self, data: ChatRequest) -> RequestData:
        ...

    @abstractmethod
    def prepare_embeddings(self, data: EmbeddingsRequest) -> RequestData:
        ...

    @abstractmethod
    async def chat_completions(self, data: ChatRequest) -> ChatCompletionsOutput:
        """Non-streaming chat completion."""
        ...

    @abstractmethod
    async def chat_completions_streaming(
        self, data: ChatRequest, handler: StreamHandler
    ) -> bool:
        """Streaming chat completion.

        Text fragments and the final tool call go to ``handler``. Returns
        True when the stream reached its terminal sentinel.
        """
        ...

    @abstractmethod
    async def embeddings(self, data: EmbeddingsRequest) -> EmbeddingsOutput:
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the provider."""
        ...

    async def __aenter__(self) -> "BaseProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
