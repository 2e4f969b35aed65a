"""``mcp-server-gitlab tools`` — show the advertised tool descriptors."""

from __future__ import annotations

import json

import click

from mcp_gitlab.cli_commands._output import print_tools_table


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the raw tools/list payload.")
def tools(as_json: bool) -> None:
    """List the tools this server exposes."""
    from mcp_gitlab.protocol import responses
    from mcp_gitlab.server.app import BUNDLED_DESCRIPTORS

    if as_json:
        click.echo(json.dumps(responses.tools_list_result(BUNDLED_DESCRIPTORS), indent=2))
        return

    print_tools_table(BUNDLED_DESCRIPTORS)
