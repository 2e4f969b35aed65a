"""ServerLoop — drives framing, decoding, routing and response emission.

A reader task frames incoming chunks and queues complete lines while a single
worker drains the queue. Framing therefore continues while a tool call is in
flight, but lines are handled strictly one after another, so responses leave
in the order requests arrived.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mcp_gitlab.protocol import responses
from mcp_gitlab.protocol.decoder import DecodeError, decode
from mcp_gitlab.protocol.models import NO_RESPONSE, ErrorCode, NoResponse
from mcp_gitlab.server.framer import MessageFramer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mcp_gitlab.protocol.models import JsonRpcRequest, JsonRpcResponse, Outcome
    from mcp_gitlab.protocol.router import Router

logger = logging.getLogger(__name__)


@runtime_checkable
class LineWriter(Protocol):
    """Destination for serialized response lines."""

    async def write(self, line: str) -> None: ...


class ServerLoop:
    """Processes one input stream until end of input.

    Usage::

        loop = ServerLoop(router, writer)
        await loop.run(read_chunks())
    """

    def __init__(self, router: Router, writer: LineWriter) -> None:
        self._router = router
        self._writer = writer

    async def run(self, chunks: AsyncIterator[str]) -> None:
        """Consume *chunks* and answer every line they contain."""
        framer = MessageFramer()
        queue: asyncio.Queue[str | None] = asyncio.Queue()
        reader = asyncio.create_task(self._read(chunks, framer, queue))
        try:
            while True:
                line = await queue.get()
                if line is None:
                    break
                await self.process_line(line)
        finally:
            if not reader.done():
                reader.cancel()
        # Surfaces a failure of the input stream itself, after all queued lines.
        await reader

    async def process_line(self, line: str) -> None:
        """Handle one framed line and write its response, if any."""
        outcome = await self.handle_line(line)
        if isinstance(outcome, NoResponse):
            return
        await self._emit(outcome)

    async def handle_line(self, line: str) -> Outcome:
        """Run the full pipeline for *line*; never raises."""
        request: JsonRpcRequest | None = None
        try:
            decoded = decode(line)
            if isinstance(decoded, DecodeError):
                logger.error("Failed to decode request: %s", decoded.message)
                return responses.parse_error(decoded.message)
            request = decoded
            outcome = await self._router.route(request)
        except Exception as exc:
            logger.exception("Unhandled error while processing request")
            if request is None:
                return responses.parse_error(str(exc))
            outcome = responses.error(
                request.id, ErrorCode.INTERNAL_ERROR, f"Internal error: {exc}"
            )

        if request.is_notification and not isinstance(outcome, NoResponse):
            logger.debug("Dropping response to notification %s", request.method)
            return NO_RESPONSE
        return outcome

    async def _emit(self, response: JsonRpcResponse) -> None:
        try:
            line = responses.serialize(response)
        except (TypeError, ValueError) as exc:
            logger.exception("Failed to serialize response")
            line = responses.serialize(
                responses.error(response.id, ErrorCode.INTERNAL_ERROR, f"Internal error: {exc}")
            )
        try:
            await self._writer.write(line)
        except Exception:
            logger.exception("Failed to write response for request %s", response.id)

    @staticmethod
    async def _read(
        chunks: AsyncIterator[str],
        framer: MessageFramer,
        queue: asyncio.Queue[str | None],
    ) -> None:
        try:
            async for chunk in chunks:
                for line in framer.feed(chunk):
                    queue.put_nowait(line)
            tail = framer.flush()
            if tail is not None:
                queue.put_nowait(tail)
        finally:
            queue.put_nowait(None)
