"""Charting core: series, charts and the chart registry."""

from livecharts.charting.chart import Chart
from livecharts.charting.registry import ChartRegistry
from livecharts.charting.series import DEFAULT_CAPACITY, Series

__all__ = [
    "Chart",
    "ChartRegistry",
    "DEFAULT_CAPACITY",
    "Series",
]
