"""Chart: a named collection of series."""

import threading
from typing import Optional

from livecharts.charting.series import Series
from livecharts.faults import DEFAULT_FAULT_SINK, DuplicateSeriesNameError, FaultSink
from livecharts.models import ChartType


class Chart:
    """Single parent chart object holding series keyed by name.

    `get_updates` collects the delta of every series. Each series advances
    its own cursor, so the aggregate is best effort: a fault in one series
    is reported and the remaining series are still collected.
    """

    def __init__(
        self,
        name: str,
        chart_type: ChartType = ChartType.OVERLAY,
        fault_sink: Optional[FaultSink] = None,
    ):
        """Initialize a chart.

        Args:
            name: Name of the chart.
            chart_type: Whether series are overlayed or stacked.
            fault_sink: Receiver for faults raised while collecting updates.

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            raise ValueError("Chart name must not be empty")

        self.name = name
        self.chart_type = ChartType(chart_type)
        self._fault_sink = fault_sink if fault_sink is not None else DEFAULT_FAULT_SINK

        self._lock = threading.Lock()
        self._series: dict[str, Series] = {}

    def add_series(self, series: Series) -> None:
        """Add a series to this chart.

        Args:
            series: Series to add.

        Raises:
            DuplicateSeriesNameError: If a series with the same name exists.
        """
        with self._lock:
            if series.name in self._series:
                raise DuplicateSeriesNameError(self.name, series.name)
            self._series[series.name] = series

    def get_updates(self) -> "Chart":
        """Fetch the updates of every series since the last call.

        Returns:
            A new chart with the same name and type holding one delta series
            per series of this chart.
        """
        copy = Chart(self.name, self.chart_type, fault_sink=self._fault_sink)

        with self._lock:
            series_list = list(self._series.values())

        for series in series_list:
            try:
                copy.add_series(series.get_updates())
            except Exception as err:
                self._fault_sink.report("Chart.get_updates()", err)

        return copy

    def get_series(self, name: str) -> Optional[Series]:
        """Get a series by name, or None if the chart has no such series."""
        with self._lock:
            return self._series.get(name)

    @property
    def series(self) -> dict[str, Series]:
        """Snapshot of the series mapping."""
        with self._lock:
            return dict(self._series)

    def series_names(self) -> list[str]:
        with self._lock:
            return list(self._series)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._series

    def __len__(self) -> int:
        with self._lock:
            return len(self._series)

    def __repr__(self) -> str:
        return (
            f"Chart(name={self.name!r}, chart_type={self.chart_type.value}, "
            f"series={self.series_names()!r})"
        )
