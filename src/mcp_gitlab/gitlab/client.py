"""GitLabClient — minimal async client for the GitLab REST API v4."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from mcp_gitlab.errors import GitLabAPIError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class GitLabClient:
    """Issues authenticated requests against a GitLab instance.

    A fresh :class:`httpx.AsyncClient` is opened per call; the server handles
    one request at a time so there is no connection pool to share.
    """

    def __init__(self, base_url: str, token: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def merge_requests_url(self, project_id: str) -> str:
        return f"{self._base_url}/api/v4/projects/{quote(project_id, safe='')}/merge_requests"

    async def create_merge_request(
        self,
        *,
        project_id: str,
        source_branch: str,
        target_branch: str,
        title: str,
        description: str | None = None,
    ) -> dict[str, Any]:
        """Create a merge request and return GitLab's JSON representation.

        Raises:
            GitLabAPIError: On a non-2xx response or a transport failure.
        """
        logger.debug("Creating MR: %s (%s -> %s)", title, source_branch, target_branch)
        body: dict[str, Any] = {
            "source_branch": source_branch,
            "target_branch": target_branch,
            "title": title,
        }
        if description is not None:
            body["description"] = description

        url = self.merge_requests_url(project_id)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    headers={"PRIVATE-TOKEN": self._token},
                    json=body,
                )
        except httpx.HTTPError as exc:
            logger.error("Network request failed: %s", exc)
            raise GitLabAPIError(f"Network request failed: {exc}") from exc

        data = self._read_body(response)

        if response.is_error:
            message = data.get("message") or data.get("error") or "Unknown error"
            description_text = data.get("error_description") or ""
            details = f": {description_text}" if description_text else ""
            logger.error("GitLab API error [%s]: %s%s", response.status_code, message, details)
            raise GitLabAPIError(
                f"[{response.status_code}] {message}{details}", status=response.status_code
            )

        logger.info("MR created: %s", data.get("web_url"))
        return data

    @staticmethod
    def _read_body(response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON body, falling back to ``{"message": <text>}``."""
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                data = response.json()
            except ValueError:
                return {"message": response.text}
            if isinstance(data, dict):
                return data
            return {"message": str(data)}
        return {"message": response.text}
