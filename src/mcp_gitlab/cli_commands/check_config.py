"""``mcp-server-gitlab check-config`` — validate settings without serving."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mcp_gitlab.cli_commands._output import console, print_config_error


@click.command("check-config")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file (environment variables take precedence).",
)
def check_config(config_path: Path | None) -> None:
    """Validate GITLAB_TOKEN, GITLAB_BASE_URL and friends, then exit."""
    from mcp_gitlab.config import load_settings
    from mcp_gitlab.errors import ConfigurationError

    try:
        settings = load_settings(config_path=config_path)
    except ConfigurationError as exc:
        print_config_error(exc)
        sys.exit(1)

    console.print("[green]Configuration is valid.[/green]")
    console.print(f"  GitLab: {settings.gitlab_base_url}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Timeout: {settings.request_timeout}s")
