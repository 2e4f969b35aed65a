"""Router — static method-name to handler table with a default branch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mcp_gitlab.protocol.handlers import (
    DirectToolHandler,
    IgnoreNotificationHandler,
    InitializeHandler,
    Method,
    MethodNotFoundHandler,
    PingHandler,
    ToolsCallHandler,
    ToolsListHandler,
)
from mcp_gitlab.protocol.models import NoResponse
from mcp_gitlab.telemetry import ATTR_ERROR_CODE, request_span
from mcp_gitlab.tools.base import ToolRunner

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mcp_gitlab.protocol.handlers import MethodHandler
    from mcp_gitlab.protocol.models import JsonRpcRequest, Outcome
    from mcp_gitlab.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Router:
    """Dispatches a request to the handler registered for its method.

    The table is fixed at construction. Names absent from it go to the
    ``default`` handler, which answers ``method not found``.
    """

    def __init__(
        self,
        handlers: Mapping[str, MethodHandler],
        *,
        default: MethodHandler | None = None,
    ) -> None:
        self._handlers = dict(handlers)
        self._default = default or MethodNotFoundHandler()

    @property
    def methods(self) -> list[str]:
        return list(self._handlers)

    def resolve(self, method: str) -> MethodHandler:
        return self._handlers.get(method, self._default)

    async def route(self, request: JsonRpcRequest) -> Outcome:
        """Run the request's handler and return its outcome verbatim."""
        with request_span(request.method, request.id) as span:
            logger.debug("Received request: %s", request.method)
            outcome = await self.resolve(request.method).handle(request)
            if not isinstance(outcome, NoResponse) and outcome.error is not None:
                span.set_attribute(ATTR_ERROR_CODE, outcome.error.code)
            return outcome


def build_router(registry: ToolRegistry, runner: ToolRunner | None = None) -> Router:
    """Wire the standard protocol methods plus one direct method per tool."""
    runner = runner or ToolRunner()
    handlers: dict[str, MethodHandler] = {
        Method.INITIALIZE.value: InitializeHandler(),
        Method.INITIALIZED.value: IgnoreNotificationHandler(),
        Method.PING.value: PingHandler(),
        Method.TOOLS_LIST.value: ToolsListHandler(registry),
        Method.TOOLS_CALL.value: ToolsCallHandler(registry, runner),
    }
    for name in registry.names():
        if name in handlers:
            msg = f"Tool name collides with a protocol method: {name}"
            raise ValueError(msg)
        handlers[name] = DirectToolHandler(registry.get(name), runner)
    return Router(handlers)
