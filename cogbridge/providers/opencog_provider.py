"""OpenCog provider adapter.

Speaks the OpenAI-compatible chat completions and embeddings API exposed by
an OpenCog server, over ``httpx``. The wire codec, extractor and stream
decoder do the translation; this module adds the URL, auth, patches and the
HTTP exchange.
"""

from __future__ import annotations

import time
from typing import Any, NoReturn, Optional

import httpx
import structlog

from cogbridge.config.settings import DEFAULT_API_BASE, OpenCogSettings
from cogbridge.core.codec import build_chat_request, build_embeddings_request
from cogbridge.core.error_classifier import (
    is_success,
    looks_like_error,
    raise_for_status_error,
)
from cogbridge.core.extractor import extract_chat_completions, extract_embeddings
from cogbridge.core.sse import aiter_sse_payloads
from cogbridge.core.stream_decoder import StreamHandler, adecode_stream
from cogbridge.errors import MalformedPayloadError, TransportError
from cogbridge.models.schemas import (
    ChatCompletionsOutput,
    ChatRequest,
    EmbeddingsOutput,
    EmbeddingsRequest,
    Model,
)
from cogbridge.providers.base import BaseProvider, RequestData
from cogbridge.providers.patch import apply_patch, select_patch

logger = structlog.get_logger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """JSON body of ``response``; raw text when an error body is not JSON."""
    try:
        return response.json()
    except ValueError as exc:
        if not is_success(response.status_code):
            return response.text
        raise MalformedPayloadError(
            f"Response is not valid JSON: {response.text}", response.text
        ) from exc


def _reject_non_stream(response: httpx.Response) -> NoReturn:
    """Fail a streaming reply that did not come back as an event stream.

    Some servers answer 200 with a JSON error document instead of events.
    That is classified like an error status; any other body is malformed.
    """
    content_type = response.headers.get("content-type", "")
    body = _decode_body(response)
    if looks_like_error(body):
        raise_for_status_error(response.status_code, body)
    raise MalformedPayloadError(
        f"Expected an event stream, got '{content_type}'", response.text
    )


class OpenCogProvider(BaseProvider):
    """Adapter for an OpenCog server's chat completions and embeddings API."""

    def __init__(
        self,
        config: OpenCogSettings,
        model: Model,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        default_api_base: str = DEFAULT_API_BASE,
    ) -> None:
        self.config = config
        self.model = model
        self.default_api_base = default_api_base
        self._owns_client = http_client is None
        self._http = http_client or self._make_client()

    @property
    def provider_name(self) -> str:
        return "opencog"

    @property
    def client_name(self) -> str:
        return self.config.name or self.provider_name

    @property
    def api_base(self) -> str:
        return (self.config.api_base or self.default_api_base).rstrip("/")

    def _make_client(self) -> httpx.AsyncClient:
        extra = self.config.extra
        connect_timeout = extra.connect_timeout if extra else None
        return httpx.AsyncClient(
            proxy=extra.proxy if extra else None,
            timeout=httpx.Timeout(None, connect=connect_timeout),
        )

    # ---- Request building --------------------------------------------------

    def _request(self, path: str, body: dict[str, Any]) -> RequestData:
        request = RequestData(url=f"{self.api_base}{path}", body=body)
        if self.config.api_key:
            request.bearer_auth(self.config.api_key)
        return request

    def prepare_chat_completions(self, data: ChatRequest) -> RequestData:
        request = self._request("/chat/completions", build_chat_request(data, self.model))
        patches = self.config.patch.chat_completions if self.config.patch else {}
        return apply_patch(request, select_patch(patches, self.model.name))

    def prepare_embeddings(self, data: EmbeddingsRequest) -> RequestData:
        request = self._request("/embeddings", build_embeddings_request(data, self.model))
        patches = self.config.patch.embeddings if self.config.patch else {}
        return apply_patch(request, select_patch(patches, self.model.name))

    # ---- Exchanges ---------------------------------------------------------

    async def _post(self, request: RequestData) -> httpx.Response:
        try:
            return await self._http.post(
                request.url, json=request.body, headers=request.headers
            )
        except httpx.RequestError as exc:
            raise TransportError(f"Connection error: {exc}", {"url": request.url}) from exc

    async def chat_completions(self, data: ChatRequest) -> ChatCompletionsOutput:
        """Call chat completions (non-streaming)."""
        request = self.prepare_chat_completions(data)
        start = time.perf_counter()
        response = await self._post(request)
        body = _decode_body(response)
        logger.debug("non-stream-data", client=self.client_name, data=body)

        output = extract_chat_completions(body, response.status_code)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "OpenCog call complete",
            client=self.client_name,
            model=self.model.api_name,
            elapsed_ms=elapsed_ms,
        )
        return output

    async def chat_completions_streaming(
        self, data: ChatRequest, handler: StreamHandler
    ) -> bool:
        """Streaming chat completion over server-sent events.

        A non-success status is classified from the body before any event is
        decoded, and so is a success reply that is not an event stream. If the
        server closes the stream without ``[DONE]`` the text already delivered
        stands and False is returned.
        """
        request = self.prepare_chat_completions(data.model_copy(update={"stream": True}))
        try:
            async with self._http.stream(
                "POST", request.url, json=request.body, headers=request.headers
            ) as response:
                if not is_success(response.status_code):
                    await response.aread()
                    raise_for_status_error(response.status_code, _decode_body(response))
                if not response.headers.get("content-type", "").startswith(
                    "text/event-stream"
                ):
                    await response.aread()
                    _reject_non_stream(response)
                return await adecode_stream(
                    aiter_sse_payloads(response.aiter_lines()), handler
                )
        except httpx.RequestError as exc:
            raise TransportError(f"Connection error: {exc}", {"url": request.url}) from exc

    async def embeddings(self, data: EmbeddingsRequest) -> EmbeddingsOutput:
        request = self.prepare_embeddings(data)
        response = await self._post(request)
        return extract_embeddings(_decode_body(response), response.status_code)

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._http.aclose()
