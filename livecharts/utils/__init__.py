"""Utility helpers for LiveCharts."""

from livecharts.utils.rounding import round_to_significant_digits
from livecharts.utils.time import to_unix_timestamp

__all__ = [
    "round_to_significant_digits",
    "to_unix_timestamp",
]
