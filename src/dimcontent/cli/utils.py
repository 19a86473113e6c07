"""
CLI utility helpers: consoles, container creation and error output.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from dimcontent.container import ContentContainer
from dimcontent.core.errors import DimContentError, categorize_error
from dimcontent.core.settings import get_settings
from dimcontent.domain import ContentRichEntity

console = Console()
err_console = Console(stderr=True)


def make_container(
    database: str | None = None,
    templates_dir: Path | None = None,
    site: str | None = None,
) -> ContentContainer:
    """Create a container from the settings, with command line overrides applied."""
    overrides: dict[str, Any] = {}
    if database is not None:
        overrides["database_url"] = database
    if templates_dir is not None:
        overrides["templates_dir"] = templates_dir
    if site is not None:
        overrides["default_site"] = site

    settings = get_settings()
    if overrides:
        settings = settings.model_copy(update=overrides)

    container = ContentContainer(settings)
    container.create_schema()
    return container


def fail(error: Exception) -> NoReturn:
    """Print an error, categorized, with its context and exit with code 1."""
    message = error.message if isinstance(error, DimContentError) else str(error)
    err_console.print(
        f"[bold red]Error[/bold red] ({categorize_error(error).value}): {escape(message)}"
    )
    context = error.context.to_dict() if isinstance(error, DimContentError) else {}
    if context:
        err_console.print(f"[dim]{json.dumps(context, default=str)}[/dim]")
    raise typer.Exit(code=1)


def _json_default(value: Any) -> Any:
    # Entities reference their dimension contents and back, dump the identity only
    if isinstance(value, ContentRichEntity):
        return {"resource_key": value.resource_key, "id": value.id}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return str(value)


def to_json(data: Any) -> str:
    return json.dumps(data, default=_json_default)


__all__ = ["console", "err_console", "fail", "make_container", "to_json"]
