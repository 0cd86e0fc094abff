"""
Time helpers for the workout core.

Instants are naive UTC datetimes, the same convention the database
columns use.  Calendar days are derived from an instant through an
IANA timezone so that "midnight" means local midnight.
"""

import datetime
from typing import Callable

import pytz

Clock = Callable[[], datetime.datetime]


def utcnow() -> datetime.datetime:
    """Current instant as a naive UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


def _as_utc(instant: datetime.datetime) -> datetime.datetime:
    if instant.tzinfo is None:
        return pytz.utc.localize(instant)
    return instant.astimezone(pytz.utc)


def local_day(instant: datetime.datetime, tz_name: str = "UTC") -> datetime.date:
    """Calendar day of *instant* in the timezone *tz_name*."""
    return _as_utc(instant).astimezone(pytz.timezone(tz_name)).date()


def local_day_bounds(day: datetime.date, tz_name: str = "UTC",
                     days: int = 1) -> tuple[datetime.datetime, datetime.datetime]:
    """Return the naive-UTC window ``[start, end)`` covering *days* local days from *day*."""
    tz = pytz.timezone(tz_name)
    start = tz.localize(datetime.datetime.combine(day, datetime.time.min))
    end = tz.localize(datetime.datetime.combine(day + datetime.timedelta(days=days), datetime.time.min))
    return (start.astimezone(pytz.utc).replace(tzinfo=None),
            end.astimezone(pytz.utc).replace(tzinfo=None))


def week_start(day: datetime.date) -> datetime.date:
    """Monday of the week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def format_duration(seconds: int) -> str:
    """Render a duration as ``m:ss`` or ``h:mm:ss``."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
