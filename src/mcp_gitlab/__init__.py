"""mcp-server-gitlab — a Model Context Protocol server for GitLab merge requests."""

from __future__ import annotations

__version__ = "0.0.1"
