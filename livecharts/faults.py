"""Error types and fault sinks for LiveCharts.

Delta retrieval must never break the producer, so faults raised while
collecting updates are handed to a `FaultSink` instead of propagating.
"""

import logging
import threading
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class DuplicateSeriesNameError(ValueError):
    """Raised when a chart already holds a series with the same name."""

    def __init__(self, chart_name: str, series_name: str):
        self.chart_name = chart_name
        self.series_name = series_name
        super().__init__(
            f"Chart '{chart_name}' already has a series named '{series_name}'"
        )


@runtime_checkable
class FaultSink(Protocol):
    """Receiver for non-fatal faults."""

    def report(self, context: str, fault: Exception) -> None:
        """Report a fault.

        Args:
            context: Where the fault happened, e.g. "Series.get_updates()".
            fault: The exception that was caught.
        """
        ...


class LoggingFaultSink:
    """Fault sink that writes each fault to a logger at ERROR level."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def report(self, context: str, fault: Exception) -> None:
        self._log.error(f"{context}: {fault}")


class CollectingFaultSink:
    """Fault sink that keeps reported faults in memory."""

    def __init__(self):
        self._lock = threading.Lock()
        self._faults: list[tuple[str, Exception]] = []

    def report(self, context: str, fault: Exception) -> None:
        with self._lock:
            self._faults.append((context, fault))

    @property
    def faults(self) -> list[tuple[str, Exception]]:
        """Reported faults as (context, exception) pairs, oldest first."""
        with self._lock:
            return list(self._faults)

    def clear(self) -> None:
        with self._lock:
            self._faults.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._faults)


DEFAULT_FAULT_SINK = LoggingFaultSink()
