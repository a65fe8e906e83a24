"""Tests for the LiveCharts CLI.

**Feature: live-charting**
"""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner
from hypothesis import given, settings
from hypothesis import strategies as st

from livecharts.charting import ChartRegistry
from livecharts.cli.main import cli
from livecharts.cli.simulate import DEFAULT_CHART, run_simulation


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _delivered_times(updates, series_name: str) -> list[int]:
    """Collect the point times of one series across simulation updates."""
    times = []
    for update in updates:
        chart = update.get(DEFAULT_CHART)
        series = chart.get_series(series_name) if chart is not None else None
        if series is not None:
            times.extend(p.x for p in series.values)
    return times


class TestRunSimulation:
    """
    **Feature: live-charting, Property 17: Simulated Stream Completeness**

    *For any* simulation, the polled updates together deliver every plotted
    point exactly once, in time order.
    """

    @given(
        points=st.integers(min_value=0, max_value=60),
        pulls=st.integers(min_value=0, max_value=4),
    )
    @settings(max_examples=10, deadline=None)
    def test_updates_deliver_every_point(self, points: int, pulls: int):
        registry = ChartRegistry()

        updates = run_simulation(
            registry,
            series_names=("Equity", "Benchmark"),
            points=points,
            pulls=pulls,
            interval=0.001,
        )

        assert len(updates) == pulls + 1
        for name in ("Equity", "Benchmark"):
            times = _delivered_times(updates, name)
            assert len(times) == points
            assert times == sorted(times)
            assert len(set(times)) == points

    def test_capacity_limits_simulation(self):
        registry = ChartRegistry(capacity=10)

        updates = run_simulation(
            registry, series_names=("Equity",), points=25, pulls=1, interval=0.001
        )

        assert len(_delivered_times(updates, "Equity")) == 10

    def test_producer_error_raised_after_polling(self):
        registry = ChartRegistry()

        with pytest.raises(ValueError, match="Series name must not be empty"):
            run_simulation(registry, series_names=("",), points=5, pulls=1, interval=0.001)


class TestSimulateCommand:
    def test_table_output(self, runner: CliRunner, temp_dir: Path):
        result = runner.invoke(
            cli,
            [
                "simulate",
                "--points", "20",
                "--pulls", "2",
                "--interval", "0.001",
                "--config", str(temp_dir / "missing.toml"),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Delivered 40 points in 3 updates" in result.output

    def test_json_output(self, runner: CliRunner, temp_dir: Path):
        result = runner.invoke(
            cli,
            [
                "simulate",
                "--series", "Equity",
                "--points", "15",
                "--pulls", "1",
                "--interval", "0.001",
                "--json",
                "--config", str(temp_dir / "missing.toml"),
            ],
        )

        assert result.exit_code == 0, result.output
        documents = [json.loads(line) for line in result.output.splitlines() if line]
        assert len(documents) == 2

        values = [
            point
            for doc in documents
            if DEFAULT_CHART in doc
            for point in doc[DEFAULT_CHART]["Series"]["Equity"]["Values"]
        ]
        assert len(values) == 15
        assert all(set(point) == {"x", "y"} for point in values)

    def test_live_flag_bypasses_configured_capacity(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.toml"
        config_path.write_text("[charting]\ncapacity = 5\n")

        args = [
            "simulate",
            "--series", "Equity",
            "--points", "12",
            "--pulls", "0",
            "--config", str(config_path),
        ]

        capped = runner.invoke(cli, args)
        live = runner.invoke(cli, args + ["--live"])

        assert "Delivered 5 points in 1 updates" in capped.output
        assert "Delivered 12 points in 1 updates" in live.output

    def test_producer_error_exits_with_error(self, runner: CliRunner, temp_dir: Path):
        result = runner.invoke(
            cli,
            [
                "simulate",
                "--series", "",
                "--points", "5",
                "--pulls", "1",
                "--interval", "0.001",
                "--config", str(temp_dir / "missing.toml"),
            ],
        )

        assert result.exit_code == 1
        assert "Producer failed" in result.output
        assert "Delivered" not in result.output

    def test_invalid_config_exits_with_error(self, runner: CliRunner, temp_dir: Path):
        config_path = temp_dir / "config.toml"
        config_path.write_text("[charting]\npoll_interval = 0\n")

        result = runner.invoke(cli, ["simulate", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid charting settings" in result.output


class TestConfigCommand:
    def test_shows_defaults(self, runner: CliRunner, temp_dir: Path):
        result = runner.invoke(cli, ["config", "--config", str(temp_dir / "missing.toml")])

        assert result.exit_code == 0, result.output
        assert "capacity" in result.output
        assert "4000" in result.output
        assert "defaults" in result.output

    def test_lists_commands(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "simulate" in result.output
        assert "config" in result.output
