from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_calendar_day(value: Any) -> Optional[date]:
    """Normalize a wire date to a calendar day, or None when it cannot be read.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and ISO
    datetimes such as ``2024-01-10T00:00:00.000Z``. The day is taken from the
    calendar fields as written; no timezone conversion is applied.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < 10:
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def day_key(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day in [start, end] inclusive."""
    if end < start:
        return
    current = start
    while True:
        yield current
        if current == end:
            return
        current += timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a one-based (year, month) pair by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
