"""Unit tests for SSE framing."""

import pytest

from cogbridge.core.sse import SseParser, aiter_sse_payloads, iter_sse_payloads


class TestSseParser:
    """Test suite for SseParser."""

    def test_data_lines(self):
        lines = ['data: {"a":1}', "", "data: [DONE]", ""]
        assert list(iter_sse_payloads(lines)) == ['{"a":1}', "[DONE]"]

    def test_no_space_after_colon(self):
        assert list(iter_sse_payloads(["data:[DONE]", ""])) == ["[DONE]"]

    def test_multiline_data_joined(self):
        lines = ["data: first", "data: second", ""]
        assert list(iter_sse_payloads(lines)) == ["first\nsecond"]

    def test_comments_and_other_fields_ignored(self):
        lines = [": keep-alive", "event: message", "id: 3", "retry: 1000", "data: x", ""]
        assert list(iter_sse_payloads(lines)) == ["x"]

    def test_trailing_data_flushed(self):
        assert list(iter_sse_payloads(["data: [DONE]"])) == ["[DONE]"]

    def test_blank_lines_alone_yield_nothing(self):
        parser = SseParser()
        assert parser.feed_line("") is None
        assert parser.flush() is None

    def test_crlf_stripped(self):
        parser = SseParser()
        assert parser.feed_line("data: x\r\n") is None
        assert parser.feed_line("\r\n") == "x"


@pytest.mark.asyncio
class TestAsyncSse:
    """Test suite for aiter_sse_payloads."""

    async def test_async_lines(self):
        async def lines():
            for line in ("data: a", "", "data: b", ""):
                yield line

        assert [p async for p in aiter_sse_payloads(lines())] == ["a", "b"]
