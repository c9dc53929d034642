"""
Main CLI application using Typer.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import GridConfig, load_config
from ..domain.renderer import format_time
from ..domain.slot_grid import build_slot_grid
from ..services.availability import AvailabilityService

app = typer.Typer(
    name="freeslots",
    help="Render free working-day slots from a calendar free/busy payload",
    add_completion=False
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load(config_file: Optional[Path], offset: Optional[float] = None) -> GridConfig:
    config = load_config(config_file)
    if offset is not None:
        config = GridConfig(**{**config.model_dump(), "utc_offset_hours": offset})
    return config


@app.command()
def check(
    payload: Annotated[Optional[Path], typer.Argument(help="JSON free/busy payload. Reads stdin when omitted.")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./freeslots.yaml")] = None,
    offset: Annotated[Optional[float], typer.Option("--offset", help="Canonical UTC offset in hours, e.g. -4")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log the raw busy slots.")] = False,
):
    """
    Print the availability sentence for a free/busy payload.

    Examples:

        freeslots check busy.json
        cat busy.json | freeslots check --offset -5
    """
    _configure_logging(verbose)

    try:
        config = _load(config_file, offset)

        if payload is not None:
            body = payload.read_text(encoding="utf-8")
        else:
            body = sys.stdin.read()

        message = AvailabilityService(config).compute(body)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    typer.echo(message)


@app.command()
def grid(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    Show the configured slot grid.
    """
    try:
        config = _load(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    slots = build_slot_grid(config)

    table = Table(
        title=f"Slot grid (UTC{config.utc_offset_hours:+g})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Start", style="bold yellow")
    table.add_column("End")

    for idx, slot in enumerate(slots, 1):
        table.add_row(str(idx), format_time(slot.start), format_time(slot.end))

    console.print()
    console.print(table)
    console.print(f"{len(slots)} slots of {config.slot_minutes} minutes\n")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]freeslots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
