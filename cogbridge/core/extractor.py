"""Response extractor: one complete JSON document to canonical output."""

from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import ValidationError

from cogbridge.core.error_classifier import is_success, raise_for_status_error
from cogbridge.errors import ArgumentParseError, EmptyResponseError, MalformedPayloadError
from cogbridge.models.schemas import ChatCompletionsOutput, EmbeddingsOutput, ToolCall
from cogbridge.models.wire import ChatResponseBody, EmbeddingsResponseBody

logger = structlog.get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_tool_arguments(function_name: str, raw_arguments: str) -> Any:
    """Parse a tool call's JSON-encoded ``arguments`` string.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not JSON and are refused.
    """
    try:
        return json.loads(raw_arguments, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ArgumentParseError(function_name, raw_arguments) from exc


def extract_chat_completions(document: Any, status: int = 200) -> ChatCompletionsOutput:
    """Extract text, tool calls, id and token usage from a chat response.

    A non-success ``status`` is handed to the error classifier without
    looking at the body any further.

    Raises:
        HttpStatusError: ``status`` is not a success.
        ArgumentParseError: A tool call's arguments are not valid JSON. The
            first bad call aborts extraction.
        EmptyResponseError: Neither text nor tool calls are present.
    """
    if not is_success(status):
        raise_for_status_error(status, document)

    if not isinstance(document, dict):
        raise EmptyResponseError(document)

    body = ChatResponseBody.model_validate(document)
    message = body.first_message()
    text = message.content or ""

    tool_calls: list[ToolCall] = []
    for raw in message.tool_calls:
        name = raw.function.name if raw.function else None
        arguments = raw.function.arguments if raw.function else None
        if not name or arguments is None or raw.id is None:
            logger.warning(
                "Skipping incomplete tool call",
                id=raw.id,
                name=name,
                has_arguments=arguments is not None,
            )
            continue
        tool_calls.append(
            ToolCall(
                name=name,
                arguments=parse_tool_arguments(name, arguments),
                id=raw.id,
            )
        )

    if not text and not tool_calls:
        raise EmptyResponseError(document)

    usage = body.usage
    return ChatCompletionsOutput(
        text=text,
        tool_calls=tool_calls,
        id=body.id,
        input_tokens=usage.prompt_tokens if usage else None,
        output_tokens=usage.completion_tokens if usage else None,
    )


def extract_embeddings(document: Any, status: int = 200) -> EmbeddingsOutput:
    """Extract one vector per ``data[]`` entry, in order.

    Any structural mismatch fails the whole call; partial results are never
    returned.
    """
    if not is_success(status):
        raise_for_status_error(status, document)

    try:
        body = EmbeddingsResponseBody.model_validate(document)
    except ValidationError as exc:
        raise MalformedPayloadError("Invalid embeddings data", document) from exc
    return [entry.embedding for entry in body.data]
