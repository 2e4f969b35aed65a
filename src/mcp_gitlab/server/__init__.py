"""Server — framing, the per-line loop, and the stdio transport."""

from mcp_gitlab.server.framer import MessageFramer
from mcp_gitlab.server.loop import LineWriter, ServerLoop

__all__ = ["LineWriter", "MessageFramer", "ServerLoop"]
