"""Simulate command for LiveCharts CLI.

Runs a producer thread that plots a random-walk price for each series while
the consumer polls the registry for updates, the way a results dashboard
would poll a running backtest.
"""

import random
import threading
import time
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from livecharts.charting import Chart, ChartRegistry
from livecharts.config import load_config
from livecharts.encoding import updates_to_json

console = Console()

DEFAULT_CHART = "Strategy Equity"
DEFAULT_SERIES = ("Equity", "Benchmark")
START_TIME = 1_700_000_000


def _produce(
    registry: ChartRegistry,
    chart: str,
    series_names: tuple[str, ...],
    points: int,
    delay: float,
    seed: int,
    errors: list[Exception],
) -> None:
    """Plot `points` random-walk values for every series.

    An exception stops the producer and is appended to `errors`.
    """
    try:
        _random_walk(registry, chart, series_names, points, delay, seed)
    except Exception as e:
        errors.append(e)


def _random_walk(
    registry: ChartRegistry,
    chart: str,
    series_names: tuple[str, ...],
    points: int,
    delay: float,
    seed: int,
) -> None:
    rng = random.Random(seed)
    prices = {name: 100.0 for name in series_names}

    for i in range(points):
        for name in series_names:
            prices[name] *= 1 + rng.uniform(-0.01, 0.01)
            value = Decimal(str(round(prices[name], 2)))
            registry.plot(chart, name, START_TIME + i * 60, value)
        if delay:
            time.sleep(delay)


def run_simulation(
    registry: ChartRegistry,
    series_names: tuple[str, ...] = DEFAULT_SERIES,
    points: int = 100,
    pulls: int = 5,
    interval: float = 0.1,
    chart: str = DEFAULT_CHART,
    seed: int = 42,
) -> list[dict[str, Chart]]:
    """Run a producer thread against a polling consumer.

    The producer spreads its points over roughly `pulls * interval` seconds.
    After the last poll the producer is joined and one final poll drains
    whatever is still pending.

    Args:
        registry: Registry the producer plots into.
        series_names: Series to plot in the chart.
        points: Points plotted per series.
        pulls: Number of polls while the producer runs.
        interval: Seconds between polls.
        chart: Name of the chart.
        seed: Random seed of the price walk.

    Returns:
        The update of every poll, final drain included.

    Raises:
        Exception: Whatever stopped the producer thread, after the
            consumer has finished polling.
    """
    delay = (pulls * interval) / points if points else 0.0
    errors: list[Exception] = []
    producer = threading.Thread(
        target=_produce,
        args=(registry, chart, series_names, points, delay, seed, errors),
        name="livecharts-producer",
        daemon=True,
    )
    producer.start()

    updates = []
    for _ in range(pulls):
        time.sleep(interval)
        updates.append(registry.get_updates())

    producer.join()
    if errors:
        raise errors[0]

    updates.append(registry.get_updates())
    return updates


def _render_update(index: int, update: dict[str, Chart]) -> Table:
    table = Table(title=f"Update {index}", show_header=True, header_style="bold cyan")
    table.add_column("Chart", style="bold")
    table.add_column("Series")
    table.add_column("Points", justify="right")
    table.add_column("First", justify="right", style="dim")
    table.add_column("Last", justify="right", style="green")

    for chart in update.values():
        for name, series in chart.series.items():
            values = series.values
            first = f"{values[0].x}: {values[0].y}" if values else "-"
            last = f"{values[-1].x}: {values[-1].y}" if values else "-"
            table.add_row(chart.name, name, str(len(values)), first, last)

    return table


@click.command()
@click.option(
    "--series", "series_names",
    multiple=True,
    help="Series to plot (repeatable, default: Equity and Benchmark).",
)
@click.option("--points", default=100, show_default=True, type=click.IntRange(min=0),
              help="Points plotted per series.")
@click.option("--pulls", default=5, show_default=True, type=click.IntRange(min=0),
              help="Update polls while the producer runs.")
@click.option("--interval", default=None, type=click.FloatRange(min=0),
              help="Seconds between polls (default: poll_interval from config).")
@click.option("--live", is_flag=True, help="Bypass the series capacity.")
@click.option("--seed", default=42, show_default=True, help="Random seed.")
@click.option("--json", "as_json", is_flag=True, help="Print each update as a JSON line.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read.",
)
def simulate(
    series_names: tuple[str, ...],
    points: int,
    pulls: int,
    interval: Optional[float],
    live: bool,
    seed: int,
    as_json: bool,
    config_path: Optional[Path],
) -> None:
    """Stream a simulated chart through incremental updates.

    \b
    Examples:
      livecharts simulate
      livecharts simulate --series Equity --points 500 --pulls 10
      livecharts simulate --json --interval 0.5
    """
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(Panel(
            f"[red]{e}[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    registry = ChartRegistry.from_config(config)
    if live:
        registry.live_mode = True

    try:
        updates = run_simulation(
            registry,
            series_names=series_names or DEFAULT_SERIES,
            points=points,
            pulls=pulls,
            interval=config.poll_interval if interval is None else interval,
            seed=seed,
        )
    except Exception as e:
        console.print(Panel(
            f"[red]Producer failed: {e}[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    if as_json:
        for update in updates:
            click.echo(updates_to_json(update))
        return

    delivered = 0
    for i, update in enumerate(updates, 1):
        console.print(_render_update(i, update))
        delivered += sum(
            len(series) for chart in update.values() for series in chart.series.values()
        )

    console.print(f"Delivered {delivered} points in {len(updates)} updates")
