"""Wire models — JSON-RPC 2.0 envelopes and MCP tool descriptors.

Requests are decoded into :class:`JsonRpcRequest`; every answer leaves the
server as a :class:`JsonRpcResponse` carrying either ``result`` or ``error``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

JSONRPC_VERSION = "2.0"

# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------


class ErrorCode(IntEnum):
    """JSON-RPC error codes emitted by the server."""

    PARSE_ERROR = -32700
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------

# Booleans are rejected; JSON numbers keep their int or float type.
RequestId = StrictInt | StrictFloat | StrictStr | None


class JsonRpcRequest(BaseModel):
    """A decoded JSON-RPC request or notification."""

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    method: StrictStr = ""
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        """A request without an id expects no response."""
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is set.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: Any = None
    error: JsonRpcError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        """Return the envelope as a plain dict with only the relevant member."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump()
        else:
            payload["result"] = self.result
        return payload


class NoResponse:
    """Marker returned by handlers that must not answer (notifications)."""

    _instance: NoResponse | None = None

    def __new__(cls) -> NoResponse:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_RESPONSE"


NO_RESPONSE = NoResponse()

Outcome = JsonRpcResponse | NoResponse


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
