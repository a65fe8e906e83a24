"""Chart registry shared by a producer and a consumer."""

import threading
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from livecharts.charting.chart import Chart
from livecharts.charting.series import DEFAULT_CAPACITY, Series
from livecharts.faults import DEFAULT_FAULT_SINK, FaultSink
from livecharts.models import ChartType, SeriesType

if TYPE_CHECKING:
    from livecharts.config import ChartingConfig


class ChartRegistry:
    """Owns the charts of one run, keyed by chart name.

    The producer creates charts and plots points through the registry; the
    consumer polls `get_updates` for the delta of every chart.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        significant_digits: Optional[int] = None,
        live_mode: bool = False,
        fault_sink: Optional[FaultSink] = None,
    ):
        """Initialize the registry.

        Args:
            capacity: Capacity of series created by `plot`.
            significant_digits: Rounding of series created by `plot`.
            live_mode: Default live mode flag for `plot`.
            fault_sink: Receiver for faults raised while collecting updates.
        """
        self.capacity = capacity
        self.significant_digits = significant_digits
        self.live_mode = live_mode
        self._fault_sink = fault_sink if fault_sink is not None else DEFAULT_FAULT_SINK

        self._lock = threading.Lock()
        self._charts: dict[str, Chart] = {}

    @classmethod
    def from_config(
        cls, config: "ChartingConfig", fault_sink: Optional[FaultSink] = None
    ) -> "ChartRegistry":
        """Create a registry from loaded configuration."""
        return cls(
            capacity=config.capacity,
            significant_digits=config.significant_digits,
            live_mode=config.live_mode,
            fault_sink=fault_sink,
        )

    def create_chart(
        self, name: str, chart_type: ChartType = ChartType.OVERLAY
    ) -> Chart:
        """Get the chart with this name, creating it if needed.

        An existing chart is returned as is, whatever its type.
        """
        with self._lock:
            return self._get_or_create_chart(name, chart_type)

    def _get_or_create_chart(self, name: str, chart_type: ChartType) -> Chart:
        chart = self._charts.get(name)
        if chart is None:
            chart = Chart(name, chart_type, fault_sink=self._fault_sink)
            self._charts[name] = chart
        return chart

    def get_chart(self, name: str) -> Optional[Chart]:
        with self._lock:
            return self._charts.get(name)

    def plot(
        self,
        chart: str,
        series: str,
        time: Union[datetime, int],
        value: Union[Decimal, float, int, str],
        series_type: SeriesType = SeriesType.LINE,
        live_mode: Optional[bool] = None,
    ) -> None:
        """Add a point to a series, creating the chart and series if needed.

        Args:
            chart: Chart name.
            series: Series name within the chart.
            time: Time of the point.
            value: Value of the point.
            series_type: Type used if the series has to be created.
            live_mode: Bypass the series capacity. Defaults to the
                registry's `live_mode`.
        """
        with self._lock:
            target_chart = self._get_or_create_chart(chart, ChartType.OVERLAY)
            target = target_chart.get_series(series)
            if target is None:
                target = Series(
                    series,
                    series_type,
                    capacity=self.capacity,
                    significant_digits=self.significant_digits,
                    fault_sink=self._fault_sink,
                )
                target_chart.add_series(target)

        if live_mode is None:
            live_mode = self.live_mode
        target.add_point(time, value, live_mode=live_mode)

    def get_updates(self) -> dict[str, Chart]:
        """Collect the delta of every chart.

        Returns:
            Mapping of chart name to delta chart.
        """
        with self._lock:
            charts = list(self._charts.values())
        return {chart.name: chart.get_updates() for chart in charts}

    def chart_names(self) -> list[str]:
        with self._lock:
            return list(self._charts)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._charts

    def __len__(self) -> int:
        with self._lock:
            return len(self._charts)
