"""Typed views of the provider's JSON documents.

Chat and stream documents are read leniently: every path that may be absent
has a default, and a value of the wrong JSON type reads as absent instead of
failing. Embeddings documents are strict, down to each vector component being
a JSON number, since a partial result is never returned.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field, StrictFloat


def _as_str(v: Any) -> Optional[str]:
    return v if isinstance(v, str) else None


def _as_count(v: Any) -> Optional[int]:
    if isinstance(v, bool) or not isinstance(v, int) or v < 0:
        return None
    return v


def _as_list(v: Any) -> list[Any]:
    if not isinstance(v, list):
        return []
    return [item if isinstance(item, dict) else {} for item in v]


def _as_object(v: Any) -> Optional[dict[str, Any]]:
    return v if isinstance(v, dict) else None


OptStr = Annotated[Optional[str], BeforeValidator(_as_str)]
OptCount = Annotated[Optional[int], BeforeValidator(_as_count)]


# ---------------------------------------------------------------------------
# Non-streaming chat response
# ---------------------------------------------------------------------------

class RawFunction(BaseModel):
    name: OptStr = None
    arguments: OptStr = None


class RawToolCall(BaseModel):
    id: OptStr = None
    function: Annotated[Optional[RawFunction], BeforeValidator(_as_object)] = None


class ResponseMessage(BaseModel):
    content: OptStr = None
    tool_calls: Annotated[list[RawToolCall], BeforeValidator(_as_list)] = Field(
        default_factory=list
    )


class Choice(BaseModel):
    message: Annotated[Optional[ResponseMessage], BeforeValidator(_as_object)] = None


class Usage(BaseModel):
    prompt_tokens: OptCount = None
    completion_tokens: OptCount = None


class ChatResponseBody(BaseModel):
    """``{id?, choices: [{message: {...}}], usage?}``"""

    id: OptStr = None
    choices: Annotated[list[Choice], BeforeValidator(_as_list)] = Field(
        default_factory=list
    )
    usage: Annotated[Optional[Usage], BeforeValidator(_as_object)] = None

    def first_message(self) -> ResponseMessage:
        if self.choices and self.choices[0].message is not None:
            return self.choices[0].message
        return ResponseMessage()


# ---------------------------------------------------------------------------
# Streaming chunk
# ---------------------------------------------------------------------------

class DeltaFunction(BaseModel):
    name: OptStr = None
    arguments: OptStr = None


class DeltaToolCall(BaseModel):
    id: OptStr = None
    function: Annotated[Optional[DeltaFunction], BeforeValidator(_as_object)] = None


class Delta(BaseModel):
    content: OptStr = None
    tool_calls: Annotated[list[DeltaToolCall], BeforeValidator(_as_list)] = Field(
        default_factory=list
    )


class DeltaChoice(BaseModel):
    delta: Annotated[Optional[Delta], BeforeValidator(_as_object)] = None


class StreamChunk(BaseModel):
    """``{choices: [{delta: {content?, tool_calls?: [...]}}]}``"""

    choices: Annotated[list[DeltaChoice], BeforeValidator(_as_list)] = Field(
        default_factory=list
    )

    def first_delta(self) -> Delta:
        if self.choices and self.choices[0].delta is not None:
            return self.choices[0].delta
        return Delta()


# ---------------------------------------------------------------------------
# Embeddings response
# ---------------------------------------------------------------------------

class EmbeddingData(BaseModel):
    embedding: list[StrictFloat]


class EmbeddingsResponseBody(BaseModel):
    data: list[EmbeddingData]
