"""Data models for LiveCharts."""

from livecharts.models.point import ChartPoint
from livecharts.models.types import ChartType, SeriesType

__all__ = [
    "ChartPoint",
    "ChartType",
    "SeriesType",
]
