"""Time conversion helpers."""

from datetime import datetime

import pytz

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)


def to_utc(time: datetime) -> datetime:
    """Return `time` as an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.
    """
    if time.tzinfo is None:
        return pytz.utc.localize(time)
    return time.astimezone(pytz.utc)


def to_unix_timestamp(time: datetime) -> int:
    """Convert a datetime to whole seconds since the Unix epoch.

    Args:
        time: Datetime to convert. Naive values are treated as UTC.

    Returns:
        Seconds since 1970-01-01T00:00:00Z, rounded to the nearest second.
    """
    return round((to_utc(time) - EPOCH).total_seconds())
