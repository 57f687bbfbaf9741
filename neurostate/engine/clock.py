"""Epoch-millisecond helpers for calendar bucketing."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional


def local_datetime(epoch_ms: float, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``epoch_ms`` as a datetime in ``tz`` (system local time when ``None``)."""

    return datetime.fromtimestamp(epoch_ms / 1000.0, tz=tz)


def local_date(epoch_ms: float, tz: Optional[tzinfo] = None) -> date:
    return local_datetime(epoch_ms, tz).date()


def hour_of_day(epoch_ms: float, tz: Optional[tzinfo] = None) -> float:
    """Return the fractional hour (0-24) of ``epoch_ms``, e.g. 13.5 for 13:30."""

    moment = local_datetime(epoch_ms, tz)
    return moment.hour + moment.minute / 60.0 + moment.second / 3600.0
