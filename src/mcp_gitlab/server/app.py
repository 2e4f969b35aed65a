"""Application wiring — settings to tools to router."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp_gitlab.gitlab.client import GitLabClient
from mcp_gitlab.protocol.router import Router, build_router
from mcp_gitlab.tools.merge_request import DESCRIPTOR as MERGE_REQUEST_DESCRIPTOR
from mcp_gitlab.tools.merge_request import CreateMergeRequestTool
from mcp_gitlab.tools.registry import ToolRegistry

if TYPE_CHECKING:
    from mcp_gitlab.config import Settings
    from mcp_gitlab.protocol.models import ToolDescriptor

# Static descriptors of every bundled tool, available without configuration.
BUNDLED_DESCRIPTORS: list[ToolDescriptor] = [MERGE_REQUEST_DESCRIPTOR]


def create_registry(settings: Settings) -> ToolRegistry:
    """Register every bundled tool against the configured GitLab instance."""
    client = GitLabClient(
        settings.gitlab_base_url,
        settings.gitlab_token,
        timeout=settings.request_timeout,
    )
    return ToolRegistry([CreateMergeRequestTool(client)])


def create_router(settings: Settings) -> Router:
    return build_router(create_registry(settings))
