"""Config command for LiveCharts CLI."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from livecharts.config import DEFAULT_CONFIG_PATH, load_config

console = Console()


@click.command("config")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file to read (default: {DEFAULT_CONFIG_PATH}).",
)
def show_config(config_path: Optional[Path]) -> None:
    """Show the effective charting configuration."""
    path = config_path or DEFAULT_CONFIG_PATH

    try:
        config = load_config(path)
    except ValueError as e:
        console.print(Panel(
            f"[red]{e}[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    table = Table(title="Charting Settings", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right")

    for name, value in config.model_dump().items():
        table.add_row(name, "-" if value is None else str(value))

    console.print(table)
    source = str(path) if path.exists() else "defaults (no config file)"
    console.print(f"[dim]Source: {source}[/dim]")
