"""Reference clock for time-dependent warehouse rules."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

Clock = Callable[[], datetime]

_SECONDS_PER_DAY = 86_400


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock frozen at *moment* (naive values are taken as UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return lambda: moment


def whole_days(delta: timedelta) -> int:
    """Whole days in *delta*, truncated toward zero (-1.5 days → -1)."""
    return int(delta.total_seconds() / _SECONDS_PER_DAY)


def total_hours(delta: timedelta) -> float:
    return delta.total_seconds() / 3600
