"""Server settings — loaded from the environment and an optional YAML file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mcp_gitlab.errors import ConfigurationError

LogLevel = Literal["debug", "info", "warn", "warning", "error"]

# Environment variable → settings field.
ENV_VARS = {
    "GITLAB_TOKEN": "gitlab_token",
    "GITLAB_BASE_URL": "gitlab_base_url",
    "LOG_LEVEL": "log_level",
    "GITLAB_TIMEOUT": "request_timeout",
}
REQUIRED_VARS = ("GITLAB_TOKEN", "GITLAB_BASE_URL")

EXAMPLE_CONFIG = {
    "env": {
        "GITLAB_TOKEN": "<your GitLab access token>",
        "GITLAB_BASE_URL": "https://gitlab.example.com",
    }
}


class Settings(BaseModel):
    """Validated server configuration."""

    gitlab_token: str = Field(..., min_length=1, description="GitLab personal access token.")
    gitlab_base_url: str = Field(..., description="Base URL of the GitLab instance.")
    log_level: LogLevel = "info"
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds.")

    @field_validator("gitlab_base_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            msg = "URL must use the http or https scheme (e.g. https://gitlab.com)"
            raise ValueError(msg)
        if not parsed.netloc:
            msg = "URL must include a host (e.g. https://gitlab.example.com)"
            raise ValueError(msg)
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


def load_settings(
    env: Mapping[str, str] | None = None,
    config_path: Path | None = None,
) -> Settings:
    """Build :class:`Settings` from *config_path* (if any) and *env*.

    Environment values take precedence over the file. Variables in the
    form ``${VAR}`` inside the file are expanded before parsing.

    Raises:
        ConfigurationError: Listing every missing or malformed value.
    """
    env = os.environ if env is None else env
    data: dict[str, Any] = {}

    if config_path is not None:
        data.update(_read_file(config_path))

    for var, field in ENV_VARS.items():
        value = env.get(var)
        if value:
            data[field] = value

    problems = [f"missing {var}" for var in REQUIRED_VARS if not data.get(ENV_VARS[var])]
    if problems:
        raise ConfigurationError(problems)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError([_describe(err) for err in exc.errors()]) from exc


def _read_file(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError([f"cannot read {path}: {exc}"]) from exc

    try:
        loaded: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigurationError([f"YAML parse error in {path}: {exc}"]) from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError([f"{path} must contain a mapping"])
    return {str(k): v for k, v in loaded.items() if v is not None}


def _describe(error: Any) -> str:
    loc = error.get("loc", ())
    field = str(loc[0]) if loc else "settings"
    env_name = next((var for var, name in ENV_VARS.items() if name == field), field)
    return f"{env_name}: {error.get('msg', 'invalid value')}"
