"""Response builders — pure functions producing wire envelopes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mcp_gitlab import __version__
from mcp_gitlab.protocol.models import (
    ErrorCode,
    JsonRpcError,
    JsonRpcResponse,
    RequestId,
)

if TYPE_CHECKING:
    from mcp_gitlab.protocol.models import ToolDescriptor

MCP_PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "mcp-server-gitlab"


def success(request_id: RequestId, result: Any) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, result=result)


def error(request_id: RequestId, code: ErrorCode | int, message: str) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=int(code), message=message))


def parse_error(message: str) -> JsonRpcResponse:
    """A parse error always carries a null id."""
    return error(None, ErrorCode.PARSE_ERROR, f"Parse error: {message}")


def initialize_result() -> dict[str, Any]:
    return {
        "protocolVersion": MCP_PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": __version__},
    }


def tools_list_result(descriptors: list[ToolDescriptor]) -> dict[str, Any]:
    return {"tools": [d.to_wire() for d in descriptors]}


def text_content(payload: Any) -> dict[str, Any]:
    """Embed *payload* as pretty-printed JSON text in an MCP tool result."""
    return {
        "content": [
            {"type": "text", "text": json.dumps(payload, indent=2, ensure_ascii=False)},
        ]
    }


def project(data: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Keep only *fields* of *data*, in order, with ``None`` for missing keys."""
    return {name: data.get(name) for name in fields}


def serialize(response: JsonRpcResponse) -> str:
    """Render *response* as a single newline-terminated line."""
    return json.dumps(response.to_wire(), ensure_ascii=False, separators=(",", ":")) + "\n"
