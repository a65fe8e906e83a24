"""Wire payloads for chart updates.

Charts, series and points are turned into plain dictionaries that a
browser-side renderer can consume directly. Enum fields encode as their
names. Point values stay `Decimal` and are written as JSON numbers with
every digit the producer gave.
"""

from typing import Any, Mapping

import simplejson

from livecharts.charting import Chart, Series
from livecharts.models import ChartPoint


def point_to_dict(point: ChartPoint) -> dict[str, Any]:
    """Encode a point as {"x": seconds, "y": value}."""
    return {"x": point.x, "y": point.y}


def series_to_dict(series: Series) -> dict[str, Any]:
    return {
        "Name": series.name,
        "SeriesType": series.series_type.value,
        "Values": [point_to_dict(p) for p in series.values],
    }


def chart_to_dict(chart: Chart) -> dict[str, Any]:
    return {
        "Name": chart.name,
        "ChartType": chart.chart_type.value,
        "Series": {
            name: series_to_dict(series) for name, series in chart.series.items()
        },
    }


def updates_to_json(charts: Mapping[str, Chart], indent: int | None = None) -> str:
    """Encode a mapping of chart name to (delta) chart as a JSON document.

    Args:
        charts: Charts to encode, typically from `ChartRegistry.get_updates`.
        indent: Optional JSON indentation.

    Returns:
        JSON string keyed by chart name.
    """
    payload = {name: chart_to_dict(chart) for name, chart in charts.items()}
    return simplejson.dumps(payload, indent=indent, use_decimal=True)
