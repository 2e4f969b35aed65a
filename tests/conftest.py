"""Shared fixtures: a fake GitLab client, a recording writer, chunk sources."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any
from unittest.mock import AsyncMock

import pytest

from mcp_gitlab.gitlab.client import GitLabClient
from mcp_gitlab.protocol.router import Router, build_router
from mcp_gitlab.tools.merge_request import CreateMergeRequestTool
from mcp_gitlab.tools.registry import ToolRegistry

MR_RESPONSE: dict[str, Any] = {
    "id": 101,
    "iid": 7,
    "web_url": "https://gitlab.example.com/group/app/-/merge_requests/7",
    "source_branch": "feature/login",
    "target_branch": "main",
    "state": "opened",
    "author": {"username": "dev"},
    "sha": "abc123",
}


class RecordingWriter:
    """Collects every line written by the server loop."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    async def write(self, line: str) -> None:
        self.lines.append(line)


async def chunks_of(parts: Iterable[str]) -> AsyncIterator[str]:
    for part in parts:
        yield part


@pytest.fixture
def gitlab_client() -> AsyncMock:
    client = AsyncMock(spec=GitLabClient)
    client.create_merge_request = AsyncMock(return_value=dict(MR_RESPONSE))
    return client


@pytest.fixture
def registry(gitlab_client: AsyncMock) -> ToolRegistry:
    return ToolRegistry([CreateMergeRequestTool(gitlab_client)])


@pytest.fixture
def router(registry: ToolRegistry) -> Router:
    return build_router(registry)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """CLI tests call configure_logging(); undo it after each test."""
    logger = logging.getLogger("mcp_gitlab")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
