"""
Root Typer application for the dimcontent CLI.

Commands::

    dimcontent slug "Hallo & Welt" --locale de
    dimcontent resolve contents.yaml --id 1 --locale en --templates-dir config/templates
    dimcontent routes list --locale en
    dimcontent routes locator "Hello World" --locale en --resource-key pages
    dimcontent config show
"""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from sqlalchemy.exc import SQLAlchemyError
from typer import Typer

from dimcontent.cli.config import app as config_app
from dimcontent.cli.routes import app as routes_app
from dimcontent.cli.utils import console, err_console, fail, make_container, to_json
from dimcontent.core.errors import ContentNotFoundError, DimContentError
from dimcontent.core.logging import LogContext, configure_logging
from dimcontent.core.settings import get_settings
from dimcontent.domain import STAGE_DRAFT, Page
from dimcontent.routing import PathCleanup

app = Typer(
    name="dimcontent",
    help="dimcontent: dimension content resolution and routing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("dimcontent")
        except PackageNotFoundError:
            v = "unknown"
        typer.echo(f"dimcontent {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline events at debug level."),
) -> None:
    """dimcontent CLI: resolve dimension contents, clean up slugs, inspect routes."""
    if not structlog.is_configured():
        settings = get_settings()
        configure_logging(
            level="DEBUG" if verbose else settings.log_level,
            json_format=settings.log_format == "json",
            stream=err_console.file,
        )


@app.command()
def slug(
    text: str = typer.Argument(..., help="Text or path to clean up"),
    locale: str = typer.Option("en", "--locale", "-l", help="Locale of the replacers"),
) -> None:
    """Clean up a text into a url path."""
    typer.echo(PathCleanup().cleanup(text, locale))


@app.command()
def resolve(
    content_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML file with pages and snippets"),
    resource_id: str = typer.Option(..., "--id", help="Id of the entity to resolve"),
    resource_key: str = typer.Option(Page.resource_key, "--resource-key", "-r"),
    locale: str = typer.Option("en", "--locale", "-l"),
    stage: str = typer.Option(STAGE_DRAFT, "--stage", "-s"),
    templates_dir: Path | None = typer.Option(None, "--templates-dir", "-t", help="Form metadata directory"),
    database: str | None = typer.Option("sqlite://", "--database", "-d", help="Route store URL"),
    site: str | None = typer.Option(None, "--site", help="Site of the request"),
    properties: list[str] = typer.Option([], "--property", "-p", help="Only resolve KEY=PATH, repeatable"),
    tags: bool = typer.Option(False, "--tags", help="Print the http cache tags to stderr"),
) -> None:
    """Import CONTENT_FILE and print the resolved data of one entity as JSON."""
    property_map: dict[str, str] = {}
    for item in properties:
        key, separator, path = item.partition("=")
        if not separator or not key or not path:
            raise typer.BadParameter(f"expected KEY=PATH, got {item!r}", param_hint="--property")
        property_map[key] = path

    try:
        with (
            LogContext(resource_key=resource_key, resource_id=resource_id, locale=locale, stage=stage),
            make_container(database, templates_dir, site) as container,
        ):
            container.content_importer.import_file(content_file)

            repository = container.repositories.get(resource_key)
            if repository is None:
                raise ContentNotFoundError(f'Unknown resource key "{resource_key}"').with_context(
                    resource_key=resource_key
                )

            entity = repository.get(resource_id)
            dimension_content = container.content_aggregator.aggregate(
                entity, {"locale": locale, "stage": stage}
            )
            data = container.content_resolver.resolve(dimension_content, property_map or None)
    except (DimContentError, OSError, SQLAlchemyError) as exc:
        fail(exc)

    console.print_json(to_json(data))
    if tags:
        err_console.print(f"Cache tags: {', '.join(container.reference_store.get_all())}")


app.add_typer(routes_app, name="routes", help="Route store inspection.")
app.add_typer(config_app, name="config", help="Configuration inspection.")
