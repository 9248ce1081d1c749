"""Wire codec: canonical requests to OpenCog JSON bodies.

Pure functions: no I/O, no logging, same output for the same input.
"""

from __future__ import annotations

from typing import Any

from cogbridge.models.schemas import ChatRequest, EmbeddingsRequest, Model


def build_chat_request(req: ChatRequest, model: Model) -> dict[str, Any]:
    """Build a ``/chat/completions`` body.

    Optional fields are only present when set; ``stream`` is omitted rather
    than sent as ``false``.
    """
    body: dict[str, Any] = {
        "model": model.api_name,
        "messages": [
            {"role": m.role.value, "content": m.content} for m in req.messages
        ],
    }

    max_tokens = model.max_tokens_param()
    if max_tokens is not None:
        body["max_tokens"] = max_tokens
    if req.temperature is not None:
        body["temperature"] = req.temperature
    if req.top_p is not None:
        body["top_p"] = req.top_p
    if req.stream:
        body["stream"] = True
    if req.functions:
        body["tools"] = [
            {"type": "function", "function": fn} for fn in req.functions
        ]
    return body


def build_embeddings_request(req: EmbeddingsRequest, model: Model) -> dict[str, Any]:
    """Build an ``/embeddings`` body."""
    return {"input": list(req.texts), "model": model.api_name}
