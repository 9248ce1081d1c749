"""Models package."""

from cogbridge.models.schemas import (
    ChatCompletionsOutput,
    ChatRequest,
    EmbeddingsOutput,
    EmbeddingsRequest,
    Message,
    Model,
    Role,
    ToolCall,
)

__all__ = [
    "ChatCompletionsOutput",
    "ChatRequest",
    "EmbeddingsOutput",
    "EmbeddingsRequest",
    "Message",
    "Model",
    "Role",
    "ToolCall",
]
