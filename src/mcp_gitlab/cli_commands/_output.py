"""Shared CLI output formatters.

Diagnostics go to stderr; stdout is reserved for the protocol stream while
the server runs.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from mcp_gitlab.config import EXAMPLE_CONFIG

if TYPE_CHECKING:
    from mcp_gitlab.errors import ConfigurationError
    from mcp_gitlab.protocol.models import ToolDescriptor

console = Console()
err_console = Console(stderr=True)


def print_config_error(error: ConfigurationError) -> None:
    """Explain a configuration failure and show an example setup."""
    err_console.print("[red]Configuration error:[/red]")
    for problem in error.problems:
        err_console.print(f"  - {problem}")
    err_console.print("Set them in your MCP client configuration, for example:")
    err_console.print_json(json.dumps(EXAMPLE_CONFIG))


def print_tools_table(descriptors: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for descriptor in descriptors:
        required = descriptor.input_schema.get("required", [])
        table.add_row(
            descriptor.name,
            _truncate(descriptor.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
