"""Method handlers — one per JSON-RPC method the server answers.

Each handler satisfies :class:`MethodHandler` and returns either a
:class:`~mcp_gitlab.protocol.models.JsonRpcResponse` or ``NO_RESPONSE``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mcp_gitlab.protocol import responses
from mcp_gitlab.protocol.models import NO_RESPONSE, ErrorCode

if TYPE_CHECKING:
    from mcp_gitlab.protocol.models import JsonRpcRequest, Outcome
    from mcp_gitlab.tools.base import Tool, ToolRunner
    from mcp_gitlab.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Method(str, Enum):
    """Protocol methods with a fixed meaning."""

    INITIALIZE = "initialize"
    INITIALIZED = "notifications/initialized"
    PING = "ping"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


@runtime_checkable
class MethodHandler(Protocol):
    """Answers one kind of request."""

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        ...


class InitializeHandler:
    async def handle(self, request: JsonRpcRequest) -> Outcome:
        return responses.success(request.id, responses.initialize_result())


class IgnoreNotificationHandler:
    """Accepts a notification and answers nothing."""

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        logger.debug("Ignoring notification %s", request.method)
        return NO_RESPONSE


class PingHandler:
    async def handle(self, request: JsonRpcRequest) -> Outcome:
        return responses.success(request.id, {})


class ToolsListHandler:
    """Returns the static tool descriptors.

    The payload is built once so repeated calls are byte-identical.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._result = responses.tools_list_result(registry.descriptors())

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        return responses.success(request.id, self._result)


class ToolsCallHandler:
    """Generic ``tools/call`` — looks up ``params.name`` and runs it."""

    def __init__(self, registry: ToolRegistry, runner: ToolRunner) -> None:
        self._registry = registry
        self._runner = runner

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        params = request.params or {}
        name = params.get("name")
        if not isinstance(name, str) or name not in self._registry:
            logger.warning("tools/call for unknown tool: %s", name)
            return responses.error(request.id, ErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {name}")

        arguments: Any = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            return responses.error(
                request.id, ErrorCode.INVALID_PARAMS, "Tool arguments must be an object"
            )
        return await self._runner.run(self._registry.get(name), request.id, arguments)


class DirectToolHandler:
    """Invokes one tool with the request ``params`` as its arguments."""

    def __init__(self, tool: Tool, runner: ToolRunner) -> None:
        self._tool = tool
        self._runner = runner

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        return await self._runner.run(self._tool, request.id, request.params)


class MethodNotFoundHandler:
    """Default branch for every unregistered method name."""

    async def handle(self, request: JsonRpcRequest) -> Outcome:
        logger.warning("Unknown method: %s", request.method)
        return responses.error(
            request.id, ErrorCode.METHOD_NOT_FOUND, f"Method not found: {request.method}"
        )
