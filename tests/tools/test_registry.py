"""Tests for ToolRegistry."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from mcp_gitlab.errors import ToolNotFoundError
from mcp_gitlab.tools.base import Tool
from mcp_gitlab.tools.merge_request import CreateMergeRequestTool
from mcp_gitlab.tools.registry import ToolRegistry


class TestToolRegistry:
    def test_register_and_get(self, gitlab_client: AsyncMock) -> None:
        tool = CreateMergeRequestTool(gitlab_client)
        registry = ToolRegistry([tool])
        assert registry.get("create_merge_request") is tool
        assert "create_merge_request" in registry
        assert len(registry) == 1

    def test_unknown_raises(self) -> None:
        with pytest.raises(ToolNotFoundError, match="missing_tool"):
            ToolRegistry().get("missing_tool")

    def test_duplicate_rejected(self, gitlab_client: AsyncMock) -> None:
        registry = ToolRegistry([CreateMergeRequestTool(gitlab_client)])
        with pytest.raises(ValueError, match="already registered"):
            registry.register(CreateMergeRequestTool(gitlab_client))

    def test_descriptors_in_order(self, registry: ToolRegistry) -> None:
        assert [d.name for d in registry.descriptors()] == ["create_merge_request"]
        assert registry.names() == ["create_merge_request"]

    def test_tool_satisfies_protocol(self, gitlab_client: AsyncMock) -> None:
        assert isinstance(CreateMergeRequestTool(gitlab_client), Tool)
