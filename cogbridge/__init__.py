"""cogbridge: OpenCog provider adapter for multi-provider LLM clients.

Translates canonical chat / embeddings requests into an OpenCog server's
OpenAI-compatible wire format and decodes one-shot and streamed replies.

Quick Start:
    from cogbridge import OpenCogSettings, StreamHandler, create_provider

    provider = create_provider("opencog", OpenCogSettings(), "opencog-chat")
    handler = StreamHandler(on_text=print)
    await provider.chat_completions_streaming(request, handler)
"""

from cogbridge.config import OpenCogSettings, get_settings
from cogbridge.core import StreamDecoder, StreamHandler
from cogbridge.errors import (
    ArgumentParseError,
    CogBridgeError,
    EmptyResponseError,
    HttpStatusError,
    MalformedPayloadError,
    TransportError,
)
from cogbridge.models import (
    ChatCompletionsOutput,
    ChatRequest,
    EmbeddingsRequest,
    Message,
    Model,
    ToolCall,
)
from cogbridge.providers import OpenCogProvider, create_provider

__version__ = "0.1.0"

__all__ = [
    "ArgumentParseError",
    "ChatCompletionsOutput",
    "ChatRequest",
    "CogBridgeError",
    "EmbeddingsRequest",
    "EmptyResponseError",
    "HttpStatusError",
    "MalformedPayloadError",
    "Message",
    "Model",
    "OpenCogProvider",
    "OpenCogSettings",
    "StreamDecoder",
    "StreamHandler",
    "ToolCall",
    "TransportError",
    "create_provider",
    "get_settings",
]
