"""
CLI: ``dimcontent config``: configuration inspection.
"""

from __future__ import annotations

import typer
from rich.table import Table

from dimcontent.cli.utils import console
from dimcontent.core.settings import get_settings

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in sorted(settings.model_dump().items()):
            typer.echo(f"DIMCONTENT_{key.upper()}={'' if value is None else value}")
        return

    table = Table(title="dimcontent settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)
