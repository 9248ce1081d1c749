"""Pydantic V2 schemas for the canonical request / output model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class Role(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message.

    Fields other than ``role`` and ``content`` are accepted so callers can
    pass richer canonical messages; the wire codec drops them.
    """

    model_config = ConfigDict(extra="allow")

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Canonical chat completion request."""

    messages: list[Message] = Field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    functions: Optional[list[dict[str, Any]]] = Field(
        default=None, description="Function definitions, passed through opaquely"
    )
    stream: bool = False


class EmbeddingsRequest(BaseModel):
    """Canonical embeddings request."""

    texts: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Model metadata
# ---------------------------------------------------------------------------

class Model(BaseModel):
    """The subset of model metadata the adapter needs."""

    name: str = Field(..., min_length=1)
    real_name: Optional[str] = Field(
        default=None, description="Name sent on the wire when it differs from `name`"
    )
    max_output_tokens: Optional[int] = Field(default=None, ge=1)
    require_max_tokens: bool = False

    @property
    def api_name(self) -> str:
        return self.real_name or self.name

    def max_tokens_param(self) -> Optional[int]:
        """``max_tokens`` to send, or None when the model has no such policy."""
        if self.require_max_tokens:
            return self.max_output_tokens
        return None


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

class ToolCall(BaseModel):
    """A fully formed function invocation requested by the model."""

    name: str
    arguments: Any = Field(default_factory=dict)
    id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("tool call name must not be empty")
        return v


class ChatCompletionsOutput(BaseModel):
    """Canonical result of a non-streaming chat completion."""

    text: str = ""
    tool_calls: list[ToolCall] = Field(default_factory=list)
    id: Optional[str] = None
    input_tokens: Optional[int] = Field(default=None, ge=0)
    output_tokens: Optional[int] = Field(default=None, ge=0)


EmbeddingsOutput = list[list[float]]
