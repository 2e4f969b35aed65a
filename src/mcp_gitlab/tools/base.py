"""Tool protocol and the runner that validates and invokes tools.

Every tool exposed by the server satisfies :class:`Tool`. The
:class:`ToolRunner` owns the contract between the router and a tool:

1. **Validation** — the tool's ordered checks run first; the first failure
   becomes an ``invalid params`` response and the tool is never invoked.
2. **Invocation** — the tool performs its side effects. Any exception is
   converted into an ``internal error`` response.
3. **Presentation** — the raw result is shaped into the public payload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mcp_gitlab.errors import ToolExecutionError
from mcp_gitlab.protocol import responses
from mcp_gitlab.protocol.models import ErrorCode
from mcp_gitlab.telemetry import tool_span
from mcp_gitlab.tools.validation import ValidationFailure, validate

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mcp_gitlab.protocol.models import JsonRpcResponse, RequestId, ToolDescriptor
    from mcp_gitlab.tools.validation import FieldCheck

logger = logging.getLogger(__name__)


@runtime_checkable
class Tool(Protocol):
    """A named, schema-described unit of work."""

    @property
    def descriptor(self) -> ToolDescriptor:
        """Static metadata advertised by ``tools/list``."""
        ...

    @property
    def checks(self) -> Sequence[FieldCheck]:
        """Ordered validation checks run before :meth:`invoke`."""
        ...

    async def invoke(self, params: dict[str, Any]) -> dict[str, Any]:
        """Perform the work and return the raw result."""
        ...

    def present(self, result: dict[str, Any]) -> Any:
        """Shape a raw result into the ``result`` member of the response."""
        ...


class ToolRunner:
    """Runs a :class:`Tool` behind validation and a fault barrier."""

    async def run(
        self, tool: Tool, request_id: RequestId, params: Mapping[str, Any] | None
    ) -> JsonRpcResponse:
        name = tool.descriptor.name
        outcome = validate(tool.checks, params or {})
        if isinstance(outcome, ValidationFailure):
            logger.warning("Rejected %s call: %s", name, outcome.message)
            return responses.error(request_id, ErrorCode.INVALID_PARAMS, outcome.message)

        try:
            with tool_span(name):
                result = await tool.invoke(outcome)
        except Exception as exc:
            failure = ToolExecutionError(name, str(exc))
            logger.error("%s", failure)
            return responses.error(request_id, ErrorCode.INTERNAL_ERROR, str(failure))

        return responses.success(request_id, tool.present(result))
