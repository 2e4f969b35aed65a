"""``create_merge_request`` — opens a GitLab merge request."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp_gitlab.protocol import responses
from mcp_gitlab.protocol.models import ToolDescriptor
from mcp_gitlab.tools.validation import (
    FieldCheck,
    is_non_blank_string,
    is_optional_string,
    is_valid_branch_name,
    is_valid_project_id,
    required,
)

if TYPE_CHECKING:
    from mcp_gitlab.gitlab.client import GitLabClient

logger = logging.getLogger(__name__)

TOOL_NAME = "create_merge_request"

# Fields of GitLab's merge request object exposed to the caller.
PUBLIC_FIELDS = ("id", "iid", "web_url", "source_branch", "target_branch", "state")

DESCRIPTOR = ToolDescriptor(
    name=TOOL_NAME,
    description="Create a GitLab merge request",
    input_schema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID (numeric, or namespace/project path)",
            },
            "source_branch": {"type": "string", "description": "Source branch"},
            "target_branch": {"type": "string", "description": "Target branch"},
            "title": {"type": "string", "description": "Merge request title"},
            "description": {"type": "string", "description": "Merge request description"},
        },
        "required": ["project_id", "source_branch", "target_branch", "title"],
    },
)

CHECKS: tuple[FieldCheck, ...] = (
    *required("project_id", "source_branch", "target_branch", "title"),
    FieldCheck(
        "project_id",
        is_valid_project_id,
        "Invalid project_id '{value}': expected a numeric ID or namespace/project",
    ),
    FieldCheck(
        "source_branch",
        is_valid_branch_name,
        "Invalid source branch name ({field}): '{value}'",
    ),
    FieldCheck(
        "target_branch",
        is_valid_branch_name,
        "Invalid target branch name ({field}): '{value}'",
    ),
    FieldCheck("title", is_non_blank_string, "Merge request title ({field}) must not be empty"),
    FieldCheck(
        "description",
        is_optional_string,
        "Merge request description ({field}) must be a string",
    ),
)


class CreateMergeRequestTool:
    """Satisfies the :class:`~mcp_gitlab.tools.base.Tool` protocol."""

    def __init__(self, client: GitLabClient) -> None:
        self._client = client

    @property
    def descriptor(self) -> ToolDescriptor:
        return DESCRIPTOR

    @property
    def checks(self) -> tuple[FieldCheck, ...]:
        return CHECKS

    async def invoke(self, params: dict[str, Any]) -> dict[str, Any]:
        logger.info("Handling create MR request: %s", params["title"])
        return await self._client.create_merge_request(
            project_id=params["project_id"],
            source_branch=params["source_branch"],
            target_branch=params["target_branch"],
            title=params["title"],
            description=params.get("description"),
        )

    def present(self, result: dict[str, Any]) -> dict[str, Any]:
        return responses.text_content(responses.project(result, PUBLIC_FIELDS))
