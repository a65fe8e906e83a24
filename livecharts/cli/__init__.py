"""CLI package for LiveCharts."""

from livecharts.cli.main import cli, main

__all__ = ["cli", "main"]
