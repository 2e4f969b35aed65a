"""Stdio transport — binds the server loop to the process's stdin/stdout."""

from __future__ import annotations

import asyncio
import codecs
import logging
import sys
import threading
from typing import TYPE_CHECKING, Any, BinaryIO

from mcp_gitlab.server.loop import ServerLoop

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mcp_gitlab.protocol.router import Router

logger = logging.getLogger(__name__)

READ_SIZE = 4096


async def read_chunks(stream: BinaryIO | None = None, size: int = READ_SIZE) -> AsyncIterator[str]:
    """Yield decoded text chunks from *stream* (default: stdin) until EOF.

    Blocking reads happen on a daemon thread, so the event loop stays free
    while a tool call is in flight and shutdown never waits on a read that
    may not return. UTF-8 is decoded incrementally, so a multi-byte
    character split across two reads is reassembled.
    """
    source = stream if stream is not None else sys.stdin.buffer
    read = getattr(source, "read1", source.read)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    loop = asyncio.get_running_loop()
    received: asyncio.Queue[bytes | Exception] = asyncio.Queue()

    def pump() -> None:
        while True:
            try:
                data: bytes | Exception = read(size)
            except Exception as exc:  # noqa: BLE001
                data = exc
            try:
                loop.call_soon_threadsafe(received.put_nowait, data)
            except RuntimeError:
                return  # event loop already closed
            if not isinstance(data, bytes) or not data:
                return

    threading.Thread(target=pump, name="mcp-stdin-reader", daemon=True).start()

    while True:
        data = await received.get()
        if isinstance(data, Exception):
            raise data
        if not data:
            tail = decoder.decode(b"", final=True)
            if tail:
                yield tail
            return
        text = decoder.decode(data)
        if text:
            yield text


class StdoutWriter:
    """Writes each response line as UTF-8 and flushes immediately.

    Lone surrogates, which ``json.loads`` accepts from ``\\ud800`` escapes,
    are written back as the same escape so the line stays valid JSON.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream

    async def write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout.buffer
        stream.write(line.encode("utf-8", errors="backslashreplace"))
        stream.flush()


def log_unhandled(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Event-loop exception handler: log faults raised outside the pipeline."""
    exc = context.get("exception")
    message = context.get("message", "Unhandled error")
    if exc is not None:
        logger.error("Uncaught exception: %s (%s)", exc, message, exc_info=exc)
    else:
        logger.error("Uncaught error: %s", message)


async def serve(
    router: Router,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> None:
    """Serve requests from *stdin* until end of input."""
    asyncio.get_running_loop().set_exception_handler(log_unhandled)
    logger.info("MCP server started, waiting for requests...")
    await ServerLoop(router, StdoutWriter(stdout)).run(read_chunks(stdin))
    logger.info("MCP server stopped")
