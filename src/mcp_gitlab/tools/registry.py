"""ToolRegistry — name-to-tool map, frozen once the server starts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp_gitlab.errors import ToolNotFoundError

if TYPE_CHECKING:
    from mcp_gitlab.protocol.models import ToolDescriptor
    from mcp_gitlab.tools.base import Tool


class ToolRegistry:
    """Maintains the registered tools in registration order.

    Usage::

        registry = ToolRegistry([CreateMergeRequestTool(client)])
        registry.descriptors()          # for tools/list
        tool = registry.get("create_merge_request")
    """

    def __init__(self, tools: list[Tool] | None = None) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        name = tool.descriptor.name
        if name in self._tools:
            msg = f"Tool already registered: {name}"
            raise ValueError(msg)
        self._tools[name] = tool

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return [tool.descriptor for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
