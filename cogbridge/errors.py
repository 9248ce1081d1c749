"""Error taxonomy shared by the codec, extractor and stream decoder.

Every failure is surfaced to the immediate caller. Nothing here retries or
converts an error into an empty result.
"""

from __future__ import annotations

from typing import Any, Optional


class CogBridgeError(Exception):
    """Base exception for all adapter errors."""

    def __init__(self, message: str, data: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


class TransportError(CogBridgeError):
    """The HTTP exchange itself failed (connection, TLS, timeout)."""


class HttpStatusError(CogBridgeError):
    """The provider answered with a non-success status."""

    def __init__(self, status: int, message: str, body: Any = None) -> None:
        super().__init__(f"{message} (status: {status})", body)
        self.status = status
        self.detail = message
        self.body = body


class MalformedPayloadError(CogBridgeError):
    """A JSON document or stream event has an unexpected structure."""


class StreamClosedError(MalformedPayloadError):
    """An event arrived after the terminal sentinel."""


class ArgumentParseError(CogBridgeError):
    """A tool call carries arguments that are not valid JSON."""

    def __init__(self, function_name: str, raw_arguments: str) -> None:
        super().__init__(
            f"Tool call '{function_name}' have non-JSON arguments '{raw_arguments}'",
            {"function": function_name, "arguments": raw_arguments},
        )
        self.function_name = function_name
        self.raw_arguments = raw_arguments


class EmptyResponseError(CogBridgeError):
    """The response holds neither text nor tool calls."""

    def __init__(self, document: Any) -> None:
        super().__init__(f"Invalid response data: {document}", document)
        self.document = document


class UnknownProviderError(CogBridgeError):
    """No provider is registered under the requested client type."""
