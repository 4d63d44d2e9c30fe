"""CLI interface for Product Picker."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .client.search_page import read_search_page
from .config import get_config
from .pipeline.orchestrator import run_picker


app = typer.Typer(
    name="product-picker",
    help="Pick the cheapest, fastest and best rated products from a saved search page.",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Product Picker."""


@app.command()
def pick(
    page: Path = typer.Argument(..., help="Saved search results HTML page"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
    full: bool = typer.Option(False, "--full", help="Print the whole run export"),
) -> None:
    """Print the optimal product urls for a saved search page as JSON."""
    config = get_config()
    level = (log_level or config.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        typer.echo(f"Error: Unknown log level: {level}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=level, format=config.logging.format)

    if not page.is_file():
        typer.echo(f"Error: File not found: {page}", err=True)
        raise typer.Exit(1)

    elements = read_search_page(page)
    export = run_picker(elements)

    if full:
        data = export.model_dump(mode="json", by_alias=True)
    else:
        data = export.urls.model_dump(by_alias=True)
    typer.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    app()
