"""Tests for the error hierarchy."""

from __future__ import annotations

from mcp_gitlab.errors import (
    ConfigurationError,
    GitLabAPIError,
    ServerError,
    ToolExecutionError,
    ToolNotFoundError,
)


class TestErrorHierarchy:
    def test_all_derive_from_server_error(self) -> None:
        for cls in (ConfigurationError, GitLabAPIError, ToolExecutionError, ToolNotFoundError):
            assert issubclass(cls, ServerError)


class TestConfigurationError:
    def test_lists_problems(self) -> None:
        err = ConfigurationError(["missing GITLAB_TOKEN", "missing GITLAB_BASE_URL"])
        assert err.problems == ["missing GITLAB_TOKEN", "missing GITLAB_BASE_URL"]
        assert "missing GITLAB_TOKEN; missing GITLAB_BASE_URL" in str(err)


class TestToolErrors:
    def test_not_found(self) -> None:
        err = ToolNotFoundError("delete_repo")
        assert err.name == "delete_repo"
        assert str(err) == "Unknown tool: delete_repo"

    def test_execution_with_detail(self) -> None:
        err = ToolExecutionError("create_merge_request", "[403] Forbidden")
        assert err.detail == "[403] Forbidden"
        assert str(err) == "Tool execution failed: create_merge_request: [403] Forbidden"

    def test_execution_without_detail(self) -> None:
        assert str(ToolExecutionError("x")) == "Tool execution failed: x"


class TestGitLabAPIError:
    def test_attributes(self) -> None:
        err = GitLabAPIError("[404] Not found", status=404)
        assert err.status == 404
        assert str(err) == "[404] Not found"
