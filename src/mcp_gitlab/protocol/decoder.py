"""Line decoder — turns one framed line into a :class:`JsonRpcRequest`.

Decoding never raises. Anything that is not a well-formed request object is
returned as a :class:`DecodeError` so the server loop can answer with a
parse error instead of tearing down the stream.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from pydantic import ValidationError

from mcp_gitlab.protocol.models import JsonRpcRequest


@dataclass(frozen=True)
class DecodeError:
    """Why a line could not be decoded."""

    message: str


def decode(line: str) -> JsonRpcRequest | DecodeError:
    """Parse *line* as a JSON-RPC request object."""
    try:
        data = json.loads(line)
    except (json.JSONDecodeError, RecursionError) as exc:
        return DecodeError(f"Invalid JSON: {exc}")

    if not isinstance(data, dict):
        return DecodeError("Top-level JSON-RPC payload must be an object")

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as exc:
        return DecodeError(f"Malformed request: {_first_problem(exc)}")


def _first_problem(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = first.get("loc", ())
    field = str(loc[0]) if loc else "request"
    return f"{field}: {first.get('msg', 'invalid value')}"
