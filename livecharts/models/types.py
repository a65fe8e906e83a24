"""Chart and series type tags."""

from enum import Enum


class SeriesType(str, Enum):
    """How a series is drawn."""

    LINE = "Line"
    SCATTER = "Scatter"
    CANDLE = "Candle"
    BAR = "Bar"


class ChartType(str, Enum):
    """Whether series are drawn overlayed or stacked on top of each other."""

    OVERLAY = "Overlay"
    STACKED = "Stacked"
