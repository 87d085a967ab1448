"""Staff attendance/leave calendar aggregation.

Everything here is pure: the same inputs always produce the same map and grid,
and nothing is cached between calls.
"""

from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import day_key, days_in_month, iter_days, to_calendar_day
from ..core.constants import CALENDAR_WEEKDAY_LABELS, DEFAULT_WEEKLY_HOLIDAYS
from ..core.enums import DayStatus
from .model import CalendarDay, LeaveApplication, MonthCalendar, StaffAttendanceRecord

logger = logging.getLogger(__name__)

_RECORDED_STATUSES = {
    "present": DayStatus.PRESENT,
    "absent": DayStatus.ABSENT,
    "halfday": DayStatus.HALF_DAY,
    "onleave": DayStatus.ON_LEAVE,
}


def normalize_status(value: Optional[str]) -> Optional[DayStatus]:
    """Read a recorded status; ``Half Day``, ``HalfDay`` and ``half day`` are the same."""
    if not isinstance(value, str):
        return None
    return _RECORDED_STATUSES.get("".join(value.split()).lower())


def month_window(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def build_status_map(
    leaves: Iterable[LeaveApplication],
    attendance: Iterable[StaffAttendanceRecord],
    *,
    window: Optional[tuple[date, date]] = None,
) -> dict[str, DayStatus]:
    """Merge leave ranges and attendance records into a ``YYYY-MM-DD`` -> status map.

    Leave ranges are applied first and cover every day of ``[start, end]``.
    An attendance record only fills a day that has no entry yet, so a day
    inside an approved leave stays ``OnLeave`` whatever was recorded for it.

    With ``window`` only days inside that inclusive range are mapped.
    """

    status_map: dict[str, DayStatus] = {}

    for leave in leaves:
        start = to_calendar_day(leave.start_date)
        end = to_calendar_day(leave.end_date)
        if start is None or end is None:
            logger.debug("skipping leave %s with unreadable range %r..%r", leave.id, leave.start_date, leave.end_date)
            continue
        if end < start:
            logger.debug("skipping leave %s with reversed range %s..%s", leave.id, start, end)
            continue
        if window is not None:
            start, end = max(start, window[0]), min(end, window[1])
        for day in iter_days(start, end):
            status_map[day_key(day)] = DayStatus.ON_LEAVE

    for record in attendance:
        day = to_calendar_day(record.date)
        if day is None:
            logger.debug("skipping attendance record with unreadable date %r", record.date)
            continue
        if window is not None and not window[0] <= day <= window[1]:
            continue
        status = normalize_status(record.status)
        if status is None:
            logger.debug("skipping attendance record on %s with unknown status %r", day, record.status)
            continue
        status_map.setdefault(day_key(day), status)

    return status_map


def resolve_day_status(
    day: date,
    status_map: dict[str, DayStatus],
    *,
    today: date,
    weekly_holidays: Sequence[int] = DEFAULT_WEEKLY_HOLIDAYS,
) -> DayStatus:
    recorded = status_map.get(day_key(day))
    if recorded is not None:
        return recorded
    if day.weekday() in weekly_holidays:
        return DayStatus.HOLIDAY
    if day > today:
        return DayStatus.UPCOMING
    return DayStatus.NOT_MARKED


def build_month_calendar(
    year: int,
    month: int,
    status_map: dict[str, DayStatus],
    *,
    today: date,
    weekly_holidays: Sequence[int] = DEFAULT_WEEKLY_HOLIDAYS,
) -> MonthCalendar:
    """Lay out ``month`` (one-based) as Monday-first weeks of seven cells."""

    first = date(year, month, 1)
    cells: list[Optional[CalendarDay]] = [None] * first.weekday()
    for number in range(1, days_in_month(year, month) + 1):
        current = date(year, month, number)
        status = resolve_day_status(current, status_map, today=today, weekly_holidays=weekly_holidays)
        cells.append(CalendarDay(day=number, date=current, status=status))

    if len(cells) % 7:
        cells.extend([None] * (7 - len(cells) % 7))

    weeks = tuple(tuple(cells[i : i + 7]) for i in range(0, len(cells), 7))
    return MonthCalendar(year=year, month=month, weeks=weeks)


def aggregate_month(
    year: int,
    month: int,
    *,
    leaves: Iterable[LeaveApplication],
    attendance: Iterable[StaffAttendanceRecord],
    today: date,
    weekly_holidays: Sequence[int] = DEFAULT_WEEKLY_HOLIDAYS,
) -> MonthCalendar:
    status_map = build_status_map(leaves, attendance, window=month_window(year, month))
    return build_month_calendar(year, month, status_map, today=today, weekly_holidays=weekly_holidays)


def calendar_to_csv(calendar: MonthCalendar) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=["date", "weekday", "status"])
    writer.writeheader()
    for cell in calendar.days():
        writer.writerow(
            {
                "date": cell.date.isoformat(),
                "weekday": CALENDAR_WEEKDAY_LABELS[cell.date.weekday()],
                "status": cell.status.value,
            }
        )
    return out.getvalue()
