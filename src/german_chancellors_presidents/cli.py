"""Command-line interface for the German chancellors and presidents events.

Entry point: `gcp` command (defined in pyproject.toml).
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from german_chancellors_presidents.config import Config

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Historic events: Chancellors and Presidents of Germany (since 1949)."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", Config())


@main.command()
@click.option(
    "--language",
    "-l",
    type=str,
    default="de",
    help="Language tag of the viewer (default: de).",
)
@click.option(
    "--static/--no-static",
    default=None,
    help="Include the bundled CSV dataset (default: GCP_USE_STATIC).",
)
@click.option(
    "--live/--no-live",
    default=None,
    help="Query Wikidata for office holders (default: GCP_USE_LIVE).",
)
@click.pass_context
def events(ctx: click.Context, language: str, static: bool | None, live: bool | None) -> None:
    """Print all historic event records."""
    from german_chancellors_presidents.query.engine import HistoricEventsAggregator

    config = ctx.obj["config"]
    updates = {}
    if static is not None:
        updates["use_static_dataset"] = static
    if live is not None:
        updates["use_live_query"] = live
    config = config.model_copy(update=updates)

    if not (config.use_static_dataset or config.use_live_query):
        console.print("[yellow]Both event streams are disabled. Use --static and/or --live.[/yellow]")
        return

    aggregator = HistoricEventsAggregator(config)
    try:
        records = aggregator.historic_events_all(language)
    finally:
        aggregator.close()

    for record in records:
        click.echo(record)
        click.echo()

    console.print(f"[green]{len(records)} events[/green]")


@main.command()
@click.option("--language", "-l", type=str, default="en", help="Language of the labels.")
def offices(language: str) -> None:
    """List the tracked offices."""
    from german_chancellors_presidents.graph.records import OFFICES

    for office in OFFICES:
        console.print(
            f"  {office.entity_id:10s} {office.linking_property:6s} "
            f"{office.translated_label(language)}"
        )


@main.command()
@click.argument("entity_id")
@click.option("--language", "-l", type=str, default="de", help="Preferred article language.")
def query(entity_id: str, language: str) -> None:
    """Print the SPARQL query for one office (e.g. Q4970706)."""
    from german_chancellors_presidents.graph.records import OFFICES
    from german_chancellors_presidents.i18n import short_language
    from german_chancellors_presidents.query.sparql import build_query

    office = next((o for o in OFFICES if o.entity_id == entity_id), None)
    if office is None:
        console.print(f"[red]Unknown office: {entity_id}[/red]")
        raise SystemExit(1)

    click.echo(build_query(office, short_language(language)))


@main.command()
@click.option("--check", is_flag=True, help="Also look up the latest release on GitHub.")
@click.option("--language", "-l", type=str, default="en", help="Language of the description.")
@click.pass_context
def version(ctx: click.Context, check: bool, language: str) -> None:
    """Show the installed version and, optionally, the latest release."""
    from german_chancellors_presidents.metadata import (
        CUSTOM_AUTHOR,
        CUSTOM_LAST,
        CUSTOM_TITLE,
        CUSTOM_VERSION,
        CUSTOM_WEBSITE,
        DESCRIPTION,
        latest_version,
    )
    from german_chancellors_presidents.i18n import translate

    console.print(f"{CUSTOM_TITLE} {CUSTOM_VERSION}")
    console.print(translate(DESCRIPTION, language))
    console.print(f"Author: {CUSTOM_AUTHOR}")
    console.print(f"[dim]Support: {CUSTOM_WEBSITE}[/dim]")
    console.print(f"[dim]Latest version file: {CUSTOM_LAST}[/dim]")

    if check:
        latest = latest_version(ctx.obj["config"])
        if latest == CUSTOM_VERSION:
            console.print("[green]Up to date[/green]")
        else:
            console.print(f"[yellow]Latest release: {latest}[/yellow]")


if __name__ == "__main__":
    main()
