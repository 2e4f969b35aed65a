"""Protocol layer — JSON-RPC envelopes, decoding, routing and responses."""

from mcp_gitlab.protocol.decoder import DecodeError, decode
from mcp_gitlab.protocol.models import (
    NO_RESPONSE,
    ErrorCode,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    NoResponse,
    ToolDescriptor,
)

__all__ = [
    "NO_RESPONSE",
    "DecodeError",
    "ErrorCode",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "NoResponse",
    "ToolDescriptor",
    "decode",
]
