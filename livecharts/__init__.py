"""LiveCharts - incremental time-series charting for running computations."""

from livecharts.charting import Chart, ChartRegistry, Series
from livecharts.faults import (
    CollectingFaultSink,
    DuplicateSeriesNameError,
    FaultSink,
    LoggingFaultSink,
)
from livecharts.models import ChartPoint, ChartType, SeriesType

__version__ = "0.1.0"

__all__ = [
    "Chart",
    "ChartPoint",
    "ChartRegistry",
    "ChartType",
    "CollectingFaultSink",
    "DuplicateSeriesNameError",
    "FaultSink",
    "LoggingFaultSink",
    "Series",
    "SeriesType",
]
