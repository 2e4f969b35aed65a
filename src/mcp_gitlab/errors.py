"""Shared error types for the server."""

from __future__ import annotations


class ServerError(Exception):
    """Base error for all server failures."""


class ConfigurationError(ServerError):
    """Startup configuration is missing or malformed."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


class ToolNotFoundError(ServerError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolExecutionError(ServerError):
    """A tool invocation failed while doing its work."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))


class GitLabAPIError(ServerError):
    """The GitLab API rejected a request or could not be reached."""

    def __init__(self, detail: str, status: int | None = None) -> None:
        self.detail = detail
        self.status = status
        super().__init__(detail)
