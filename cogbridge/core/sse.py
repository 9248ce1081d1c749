"""Server-sent events framing.

Turns the transport's text lines into ``data`` payloads. Only the ``data``
field matters here; ``event``, ``id``, ``retry`` and comment lines are
ignored.
"""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional


class SseParser:
    """Incremental line-based SSE parser.

    Feed lines one at a time; a payload is returned when a blank line closes
    an event. Multi-line ``data`` fields are joined with ``\\n``.
    """

    def __init__(self) -> None:
        self._data: list[str] = []

    def feed_line(self, line: str) -> Optional[str]:
        line = line.rstrip("\r\n")
        if not line:
            return self.flush()
        if line.startswith(":"):
            return None

        field, sep, value = line.partition(":")
        if not sep:
            value = ""
        elif value.startswith(" "):
            value = value[1:]

        if field == "data":
            self._data.append(value)
        return None

    def flush(self) -> Optional[str]:
        """Dispatch pending data, if any."""
        if not self._data:
            return None
        payload = "\n".join(self._data)
        self._data = []
        return payload


def iter_sse_payloads(lines: Iterable[str]) -> Iterator[str]:
    parser = SseParser()
    for line in lines:
        payload = parser.feed_line(line)
        if payload is not None:
            yield payload
    payload = parser.flush()
    if payload is not None:
        yield payload


async def aiter_sse_payloads(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    parser = SseParser()
    async for line in lines:
        payload = parser.feed_line(line)
        if payload is not None:
            yield payload
    payload = parser.flush()
    if payload is not None:
        yield payload
