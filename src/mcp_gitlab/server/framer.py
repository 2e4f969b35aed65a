"""MessageFramer — splits a stream of text chunks into newline-delimited lines."""

from __future__ import annotations

from collections.abc import Iterator


class MessageFramer:
    """Accumulates chunks and yields complete lines.

    The buffer only ever holds the unterminated tail of the next message.
    Blank and whitespace-only lines are dropped. There is no upper bound on
    the buffer size.

    Usage::

        framer = MessageFramer()
        for line in framer.feed(chunk):
            handle(line)
    """

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """The buffered text not yet terminated by a newline."""
        return self._buffer

    def feed(self, chunk: str) -> Iterator[str]:
        """Append *chunk* and yield every complete line now available.

        The chunk is buffered immediately; lines are extracted lazily as the
        returned iterator is consumed.
        """
        self._buffer += chunk
        return self._drain()

    def _drain(self) -> Iterator[str]:
        while True:
            end = self._buffer.find("\n")
            if end < 0:
                return
            line = self._buffer[:end]
            self._buffer = self._buffer[end + 1 :]
            if line.endswith("\r"):
                line = line[:-1]
            if line.strip():
                yield line

    def flush(self) -> str | None:
        """Return and clear a trailing unterminated line at end of input."""
        line, self._buffer = self._buffer, ""
        if line.endswith("\r"):
            line = line[:-1]
        return line if line.strip() else None
