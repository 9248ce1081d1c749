"""Core wire components: codec, error classifier, extractor and stream decoder."""

from cogbridge.core.codec import build_chat_request, build_embeddings_request
from cogbridge.core.error_classifier import extract_error_message, raise_for_status_error
from cogbridge.core.extractor import extract_chat_completions, extract_embeddings
from cogbridge.core.sse import SseParser, aiter_sse_payloads, iter_sse_payloads
from cogbridge.core.stream_decoder import (
    DONE_SENTINEL,
    StreamDecoder,
    StreamHandler,
    adecode_stream,
    decode_stream,
)

__all__ = [
    "DONE_SENTINEL",
    "SseParser",
    "StreamDecoder",
    "StreamHandler",
    "adecode_stream",
    "aiter_sse_payloads",
    "build_chat_request",
    "build_embeddings_request",
    "decode_stream",
    "extract_chat_completions",
    "extract_embeddings",
    "extract_error_message",
    "iter_sse_payloads",
    "raise_for_status_error",
]
