"""Typer CLI for managed-records."""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from managed_records.client import retrieve
from managed_records.common.config import RecordsSettings, get_settings
from managed_records.common.exceptions import RecordsError
from managed_records.common.logging import setup_logging
from managed_records.records.query import build_query
from managed_records.records.schemas import PageRequest
from managed_records.transport.urls import build_url

app = typer.Typer(name="records", help="managed-records: summarise pages of the /records endpoint")
console = Console()


def _settings(url: Optional[str]) -> RecordsSettings:
    if url:
        return RecordsSettings(base_url=url)
    return get_settings()


@app.command()
def query(
    page: int = typer.Option(1, min=1, help="Page number (1-based)"),
    color: Optional[list[str]] = typer.Option(None, "--color", "-c", help="Color filter (repeatable)"),
    url: Optional[str] = typer.Option(None, help="Records endpoint (defaults to RECORDS_BASE_URL)"),
):
    """Print the URL that would be fetched for a page (no network access)."""
    settings = _settings(url)
    request = PageRequest(page=page, colors=color or [])
    console.print(build_url(settings.base_url, build_query(request)), soft_wrap=True, markup=False, highlight=False)


@app.command()
def fetch(
    page: int = typer.Option(1, min=1, help="Page number (1-based)"),
    color: Optional[list[str]] = typer.Option(None, "--color", "-c", help="Color filter (repeatable)"),
    url: Optional[str] = typer.Option(None, help="Records endpoint (defaults to RECORDS_BASE_URL)"),
):
    """Fetch a page and print its summary as JSON."""
    settings = _settings(url)
    setup_logging(settings.log_level)
    request = PageRequest(page=page, colors=color or [])

    try:
        summary = asyncio.run(retrieve(request, settings=settings))
    except RecordsError as e:
        console.print(f"[bold red]{e.code}[/bold red]: {e.message}")
        raise typer.Exit(1)

    console.print_json(data=summary.to_payload())


if __name__ == "__main__":
    app()
