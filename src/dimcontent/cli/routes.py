"""
CLI: ``dimcontent routes``: route store inspection and slug generation.
"""

from __future__ import annotations

import json

import typer
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from dimcontent.cli.utils import console, fail, make_container
from dimcontent.core.errors import DimContentError
from dimcontent.domain import Page
from dimcontent.routing import ResourceLocatorRequest

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_routes(
    locale: str | None = typer.Option(None, "--locale", "-l"),
    site: str | None = typer.Option(None, "--site"),
    resource_key: str | None = typer.Option(None, "--resource-key", "-r"),
    include_history: bool = typer.Option(False, "--history", help="Include history routes"),
    database: str | None = typer.Option(None, "--database", "-d", help="Route store URL"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """List the routes of the route store."""
    filters: dict = {"sort_by": {"locale": "asc", "slug": "asc"}}
    if locale is not None:
        filters["locale"] = locale
    if site is not None:
        filters["site"] = site
    if resource_key is not None:
        filters["resource_key"] = resource_key

    try:
        with make_container(database) as container:
            routes = [
                route
                for route in container.route_repository.find_by(**filters)
                if include_history or not route.is_history
            ]
    except (DimContentError, OSError, SQLAlchemyError) as exc:
        fail(exc)

    rows = [
        {
            "id": route.id,
            "site": route.site,
            "locale": route.locale,
            "slug": route.slug,
            "resource_key": route.resource_key,
            "resource_id": route.resource_id,
        }
        for route in routes
    ]

    if json_out:
        console.print_json(json.dumps(rows))
        return

    table = Table(title=f"Routes ({len(rows)})")
    for column in ("id", "site", "locale", "slug", "resource_key", "resource_id"):
        table.add_column(column)
    for row in rows:
        table.add_row(*(str(value) if value is not None else "" for value in row.values()))
    console.print(table)


@app.command("locator")
def locator(
    text: str = typer.Argument(..., help="Text the last slug segment is built from"),
    locale: str = typer.Option("en", "--locale", "-l"),
    resource_key: str = typer.Option(Page.resource_key, "--resource-key", "-r"),
    resource_id: str | None = typer.Option(None, "--id", help="Resource the slug is for, excluded from the uniqueness check"),
    parent_id: str | None = typer.Option(None, "--parent-id", help="Parent resource the path starts from"),
    site: str | None = typer.Option(None, "--site"),
    database: str | None = typer.Option(None, "--database", "-d", help="Route store URL"),
) -> None:
    """Generate a unique resource locator (slug) for TEXT."""
    request = ResourceLocatorRequest(
        parts={"title": text},
        locale=locale,
        resource_key=resource_key,
        site=site,
        resource_id=resource_id,
        parent_resource_id=parent_id,
        parent_resource_key=resource_key if parent_id else None,
    )
    try:
        with make_container(database) as container:
            path = container.resource_locator_generator.generate(request)
    except (DimContentError, OSError, SQLAlchemyError) as exc:
        fail(exc)

    typer.echo(path)
