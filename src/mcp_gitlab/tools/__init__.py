"""Tools — validation, the tool protocol, and the bundled GitLab tools."""

from mcp_gitlab.tools.base import Tool, ToolRunner
from mcp_gitlab.tools.merge_request import CreateMergeRequestTool
from mcp_gitlab.tools.registry import ToolRegistry
from mcp_gitlab.tools.validation import FieldCheck, ValidationFailure, validate

__all__ = [
    "CreateMergeRequestTool",
    "FieldCheck",
    "Tool",
    "ToolRegistry",
    "ToolRunner",
    "ValidationFailure",
    "validate",
]
