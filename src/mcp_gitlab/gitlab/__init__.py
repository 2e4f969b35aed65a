"""GitLab REST API access."""

from mcp_gitlab.gitlab.client import GitLabClient

__all__ = ["GitLabClient"]
