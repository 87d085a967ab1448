from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..api.registrar import RegistrarApi
from ..api.shared import SharedApi
from ..common.datetime_utils import shift_month, today_local
from ..core.constants import DEFAULT_WEEKLY_HOLIDAYS
from ..core.enums import RefreshTopic
from ..core.exceptions import ValidationError
from ..events.bus import RefreshBus, RefreshEvent
from .calendar import aggregate_month
from .model import LeaveApplication, MonthCalendar, StaffAttendanceRecord

logger = logging.getLogger(__name__)


def _validate_month(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if int(year) < 1:
        raise ValidationError("Year is not valid")


class StaffCalendarService:
    """Fetch a staff member's month of attendance and leave and aggregate it."""

    def __init__(
        self,
        registrar: RegistrarApi,
        shared: SharedApi,
        *,
        weekly_holidays: Sequence[int] = DEFAULT_WEEKLY_HOLIDAYS,
        clock: Callable[[], date] = today_local,
    ):
        self._registrar = registrar
        self._shared = shared
        self._weekly_holidays = tuple(weekly_holidays)
        self._clock = clock

    def list_staff(self) -> list[dict]:
        staff = self._shared.get_staff_list_for_branch()
        return sorted(staff, key=lambda s: str(s.get("name") or "").lower())

    def month_for_staff(self, staff_id: str, year: int, month: int) -> MonthCalendar:
        if not staff_id:
            raise ValidationError("Please select a staff member")
        _validate_month(year, month)
        data = self._registrar.get_staff_attendance_and_leave_for_month(staff_id, year, month)
        return self._aggregate(year, month, data)

    def my_month(self, year: int, month: int) -> MonthCalendar:
        _validate_month(year, month)
        data = self._shared.get_staff_attendance_and_leave_for_month(year, month)
        return self._aggregate(year, month, data)

    def _aggregate(self, year: int, month: int, data: dict) -> MonthCalendar:
        leaves = [LeaveApplication.from_api(x) for x in (data.get("leaves") or [])]
        attendance = [StaffAttendanceRecord.from_api(x) for x in (data.get("attendance") or [])]
        logger.debug("aggregating %d leave(s) and %d record(s) for %04d-%02d", len(leaves), len(attendance), year, month)
        return aggregate_month(
            year,
            month,
            leaves=leaves,
            attendance=attendance,
            today=self._clock(),
            weekly_holidays=self._weekly_holidays,
        )


class StaffCalendarView:
    """Selected staff member and displayed month, kept in sync with refresh events.

    The calendar is rebuilt from scratch whenever the staff member or month
    changes and whenever an attendance or leave refresh is published.
    """

    TOPICS = (RefreshTopic.ATTENDANCE, RefreshTopic.LEAVE)

    def __init__(self, service: StaffCalendarService, bus: RefreshBus, *, year: int, month: int):
        _validate_month(year, month)
        self._service = service
        self.staff_id: Optional[str] = None
        self.year = int(year)
        self.month = int(month)
        self.calendar: Optional[MonthCalendar] = None
        self._unsubscribe = bus.subscribe(self._on_refresh, topics=self.TOPICS)

    def select_staff(self, staff_id: Optional[str]) -> Optional[MonthCalendar]:
        self.staff_id = staff_id or None
        return self.rebuild()

    def change_month(self, delta: int) -> Optional[MonthCalendar]:
        self.year, self.month = shift_month(self.year, self.month, delta)
        return self.rebuild()

    def set_month(self, year: int, month: int) -> Optional[MonthCalendar]:
        _validate_month(year, month)
        self.year, self.month = int(year), int(month)
        return self.rebuild()

    def rebuild(self) -> Optional[MonthCalendar]:
        if not self.staff_id:
            self.calendar = None
            return None
        self.calendar = self._service.month_for_staff(self.staff_id, self.year, self.month)
        return self.calendar

    def close(self) -> None:
        self._unsubscribe()

    def _on_refresh(self, event: RefreshEvent) -> None:
        staff_id = event.payload.get("staff_id")
        if staff_id and staff_id != self.staff_id:
            return
        self.rebuild()
