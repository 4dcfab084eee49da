"""
wikiroute CLI - Command Line Interface

Entry point for classifying Wikimedia URLs from the command line.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wikiroute.core.config import load_router_config
from wikiroute.core.exceptions import ConfigError
from wikiroute.core.models import RouterConfig, destination_to_dict
from wikiroute.routing.router import Router

# Version
__version__ = "0.1.0"

# Create CLI app
app = typer.Typer(
    name="wikiroute",
    help="wikiroute - Classify Wikimedia URLs into in-app destinations",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(config: Optional[Path]) -> RouterConfig:
    try:
        return load_router_config(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


def _format_payload(payload: dict) -> str:
    return ", ".join(f"{key}={value}" for key, value in payload.items())


# ============================================================================
# Commands
# ============================================================================

@app.command()
def classify(
    urls: List[str] = typer.Argument(..., help="URLs to classify"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Router configuration file",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print one JSON object per URL",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
) -> None:
    """
    Classify URLs and print their destinations.
    """
    _configure_logging(verbose)
    router = Router(_load_config(config))
    destinations = router.destinations(urls)

    if as_json:
        for url, destination in zip(urls, destinations):
            typer.echo(json.dumps({"input": url, **destination_to_dict(destination)}))
        return

    table = Table(title="Destinations")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Destination", style="green")
    table.add_column("Details", overflow="fold")

    for url, destination in zip(urls, destinations):
        payload = destination_to_dict(destination)
        payload.pop("kind")
        table.add_row(url, destination.kind.value, _format_payload(payload))

    console.print(table)


@app.command("opens-in-browser")
def opens_in_browser(
    url: str = typer.Argument(..., help="URL to check"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Router configuration file",
    ),
) -> None:
    """
    Print whether a URL opens in a web view or browser.

    Exits with code 0 when it does and 1 otherwise.
    """
    _configure_logging(False)
    router = Router(_load_config(config))
    opens = router.does_open_in_browser(url)

    typer.echo("true" if opens else "false")
    if not opens:
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]wikiroute[/bold cyan] version [yellow]{__version__}[/yellow]")


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
