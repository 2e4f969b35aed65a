"""mcp-server-gitlab CLI entrypoint."""

from __future__ import annotations

import click

from mcp_gitlab import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mcp-server-gitlab")
@click.pass_context
def main(ctx: click.Context) -> None:
    """MCP server exposing GitLab merge request tools over stdio.

    Without a subcommand the server starts with settings from the environment.
    """
    if ctx.invoked_subcommand is None:
        from mcp_gitlab.cli_commands.serve import serve

        ctx.invoke(serve)


# Register subcommands
from mcp_gitlab.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
