"""Chart series: an append-only point buffer with a delivery cursor."""

import threading
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from livecharts.faults import DEFAULT_FAULT_SINK, FaultSink
from livecharts.models import ChartPoint, SeriesType
from livecharts.utils.rounding import round_to_significant_digits
from livecharts.utils.time import to_unix_timestamp

# Maximum number of points a series buffers outside of live mode
DEFAULT_CAPACITY = 4000


class Series:
    """Series data and properties for a chart.

    Points are assumed to arrive in ascending time order. The series keeps
    a cursor marking how many points have already been handed out by
    `get_updates`, so every call returns only what was added since the
    previous one.

    A single lock guards the point list and the cursor, which makes
    `add_point` and `get_updates` safe to call from different threads.
    """

    def __init__(
        self,
        name: str,
        series_type: SeriesType = SeriesType.LINE,
        capacity: int = DEFAULT_CAPACITY,
        significant_digits: Optional[int] = None,
        fault_sink: Optional[FaultSink] = None,
    ):
        """Initialize a series.

        Args:
            name: Name of the series, unique within its chart.
            series_type: How the series is drawn.
            capacity: Points kept before further non-live points are dropped.
            significant_digits: Round stored values to this many significant
                digits. None stores values exactly as given.
            fault_sink: Receiver for faults raised while collecting updates.

        Raises:
            ValueError: If name is empty or capacity is negative.
        """
        if not name:
            raise ValueError("Series name must not be empty")
        if capacity < 0:
            raise ValueError(f"Series capacity must be >= 0, got {capacity}")

        self.name = name
        self.series_type = SeriesType(series_type)
        self.capacity = capacity
        self.significant_digits = significant_digits
        self._fault_sink = fault_sink if fault_sink is not None else DEFAULT_FAULT_SINK

        self._lock = threading.Lock()
        self._values: list[ChartPoint] = []
        self._cursor = 0

    def add_point(
        self,
        time: Union[datetime, int],
        value: Union[Decimal, float, int, str],
        live_mode: bool = False,
    ) -> None:
        """Add a new point to this series.

        Once the series holds `capacity` points further points are silently
        dropped, unless `live_mode` is set. NaN and infinite values are
        dropped the same way.

        Args:
            time: Time of the point, as a datetime or epoch seconds.
            value: Value of the point.
            live_mode: Bypass the capacity limit for this point.

        Raises:
            decimal.InvalidOperation: If value is not a number.
        """
        x = to_unix_timestamp(time) if isinstance(time, datetime) else int(time)

        y = value if isinstance(value, Decimal) else Decimal(str(value))
        if not y.is_finite():
            return

        if self.significant_digits is not None:
            y = round_to_significant_digits(y, self.significant_digits)

        point = ChartPoint(x=x, y=y)

        with self._lock:
            if len(self._values) < self.capacity or live_mode:
                self._values.append(point)

    def get_updates(self) -> "Series":
        """Get the points added since the last call to this method.

        Returns:
            A new series with the same name and type holding only the
            undelivered points. If copying fails the fault is reported and
            whatever was copied so far is returned.
        """
        copy = self._empty_copy()
        fault: Optional[Exception] = None
        with self._lock:
            copied = 0
            try:
                for i in range(self._cursor, len(self._values)):
                    copy._append(self._values[i])
                    copied += 1
            except Exception as err:
                fault = err
            self._cursor += copied

        if fault is not None:
            self._fault_sink.report("Series.get_updates()", fault)
        return copy

    def _empty_copy(self) -> "Series":
        return Series(
            self.name,
            self.series_type,
            capacity=self.capacity,
            significant_digits=self.significant_digits,
            fault_sink=self._fault_sink,
        )

    def _append(self, point: ChartPoint) -> None:
        # Callers hold the lock of the series being read, not this one;
        # delta copies are private until returned.
        self._values.append(point)

    @property
    def values(self) -> list[ChartPoint]:
        """Snapshot of all buffered points."""
        with self._lock:
            return list(self._values)

    @property
    def pending_count(self) -> int:
        """Number of points not yet returned by `get_updates`."""
        with self._lock:
            return len(self._values) - self._cursor

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return (
            f"Series(name={self.name!r}, series_type={self.series_type.value}, "
            f"points={len(self)})"
        )
