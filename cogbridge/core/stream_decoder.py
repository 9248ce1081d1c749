"""Stream decoder: rebuilds one completion from streamed chat deltas.

The decoder is a two-state machine (``OPEN`` until the ``[DONE]`` sentinel,
then ``CLOSED``). Each event is handled as it arrives:

* ``choices[0].delta.content`` is forwarded to the handler immediately.
* ``choices[0].delta.tool_calls[0]`` fragments go into a single pending
  tool call: ``name`` and ``id`` overwrite, ``arguments`` appends.

On the sentinel the pending tool call, if it has a name, is parsed and handed
to the handler. Any malformed event aborts the whole stream.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterable, Callable, Iterable, Optional

import structlog
from pydantic import ValidationError

from cogbridge.core.extractor import parse_tool_arguments
from cogbridge.errors import MalformedPayloadError, StreamClosedError
from cogbridge.models.schemas import ToolCall
from cogbridge.models.wire import StreamChunk

logger = structlog.get_logger(__name__)

DONE_SENTINEL = "[DONE]"


class StreamHandler:
    """Receives text fragments and the final tool call of one stream.

    Fragments are recorded and, when ``on_text`` is given, forwarded as soon
    as they arrive.
    """

    def __init__(self, on_text: Optional[Callable[[str], None]] = None) -> None:
        self._on_text = on_text
        self.fragments: list[str] = []
        self.tool_calls: list[ToolCall] = []

    def text(self, fragment: str) -> None:
        self.fragments.append(fragment)
        if self._on_text is not None:
            self._on_text(fragment)

    def tool_call(self, call: ToolCall) -> None:
        self.tool_calls.append(call)

    def take(self) -> tuple[str, list[ToolCall]]:
        """Everything received so far, as ``(text, tool_calls)``."""
        return "".join(self.fragments), list(self.tool_calls)


class StreamState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class StreamAccumulator:
    """Pending tool call of one stream. Empty strings mean unset."""

    function_name: str = ""
    function_arguments: str = ""
    function_id: str = ""

    def to_tool_call(self) -> Optional[ToolCall]:
        if not self.function_name:
            return None
        arguments = parse_tool_arguments(
            self.function_name, self.function_arguments or "{}"
        )
        return ToolCall(
            name=self.function_name,
            arguments=arguments,
            id=self.function_id or None,
        )


class StreamDecoder:
    """Decoder for a single streaming call. Never reuse across calls."""

    def __init__(self, handler: StreamHandler) -> None:
        self.handler = handler
        self.state = StreamState.OPEN
        self._acc = StreamAccumulator()

    @property
    def closed(self) -> bool:
        return self.state is StreamState.CLOSED

    def feed(self, payload: str) -> bool:
        """Handle one event payload. Returns True once the stream is done.

        Raises:
            StreamClosedError: The sentinel was already seen.
            MalformedPayloadError: The payload is not a JSON object of the
                expected shape.
            ArgumentParseError: The accumulated tool call arguments are not
                valid JSON.
        """
        if self.closed:
            raise StreamClosedError("Stream event after [DONE]", payload)

        if payload == DONE_SENTINEL:
            self.state = StreamState.CLOSED
            call = self._acc.to_tool_call()
            if call is not None:
                self.handler.tool_call(call)
            return True

        chunk = self._parse(payload)
        logger.debug("stream-data", data=payload)
        delta = chunk.first_delta()

        if delta.content:
            self.handler.text(delta.content)

        if delta.tool_calls and delta.tool_calls[0].function is not None:
            tool_call = delta.tool_calls[0]
            function = tool_call.function
            if function.name is not None:
                self._acc.function_name = function.name
            if function.arguments is not None:
                self._acc.function_arguments += function.arguments
            if tool_call.id is not None:
                self._acc.function_id = tool_call.id
        return False

    def finish(self) -> None:
        """Mark the end of the transport's events.

        Ending without the sentinel is a partial stream: the text already
        emitted stands and no tool call is produced.
        """
        if not self.closed:
            logger.debug(
                "Stream ended before [DONE]",
                pending_function=self._acc.function_name or None,
            )

    @staticmethod
    def _parse(payload: str) -> StreamChunk:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise MalformedPayloadError(
                f"Invalid stream event: {payload}", payload
            ) from exc
        if not isinstance(data, dict):
            raise MalformedPayloadError(f"Invalid stream event: {payload}", payload)
        try:
            return StreamChunk.model_validate(data)
        except ValidationError as exc:
            raise MalformedPayloadError(
                f"Invalid stream event: {payload}", payload
            ) from exc


def decode_stream(payloads: Iterable[str], handler: StreamHandler) -> bool:
    """Drive a fresh decoder over ``payloads``.

    Returns True when the sentinel was reached, False for a partial stream.
    Payloads after the sentinel are not read.
    """
    decoder = StreamDecoder(handler)
    for payload in payloads:
        if decoder.feed(payload):
            return True
    decoder.finish()
    return False


async def adecode_stream(payloads: AsyncIterable[str], handler: StreamHandler) -> bool:
    """Async counterpart of :func:`decode_stream`."""
    decoder = StreamDecoder(handler)
    async for payload in payloads:
        if decoder.feed(payload):
            return True
    decoder.finish()
    return False
