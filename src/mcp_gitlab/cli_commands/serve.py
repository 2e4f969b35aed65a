"""``mcp-server-gitlab serve`` — run the stdio server."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from mcp_gitlab.cli_commands._output import err_console, print_config_error

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file (environment variables take precedence).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL.",
)
@click.option("--telemetry", is_flag=True, help="Export trace spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export trace spans via OTLP/gRPC.")
def serve(
    config_path: Path | None = None,
    log_level: str | None = None,
    telemetry: bool = False,
    otlp_endpoint: str | None = None,
) -> None:
    """Serve MCP requests on stdin/stdout until end of input."""
    from mcp_gitlab.config import load_settings
    from mcp_gitlab.errors import ConfigurationError
    from mcp_gitlab.logging_config import configure_logging
    from mcp_gitlab.server.app import create_router
    from mcp_gitlab.server.stdio import serve as serve_stdio

    try:
        settings = load_settings(config_path=config_path)
    except ConfigurationError as exc:
        configure_logging("error")
        print_config_error(exc)
        sys.exit(1)

    configure_logging(log_level or settings.log_level)
    logger.info("Configuration validated")
    logger.debug("GITLAB_BASE_URL: %s", settings.gitlab_base_url)

    if telemetry or otlp_endpoint:
        from mcp_gitlab.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    router = create_router(settings)
    try:
        asyncio.run(serve_stdio(router))
    except KeyboardInterrupt:
        logger.info("Interrupted")
