from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import DayStatus


@dataclass(frozen=True)
class StaffAttendanceRecord:
    date: Any
    status: str
    staff_id: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "StaffAttendanceRecord":
        return cls(
            date=data.get("date"),
            status=str(data.get("status") or ""),
            staff_id=data.get("staffId") or data.get("userId"),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class LeaveApplication:
    """Leave request spanning the inclusive range [start_date, end_date]."""

    id: Optional[str]
    applicant_id: Optional[str]
    leave_type: Optional[str]
    start_date: Any
    end_date: Any
    is_half_day: bool = False
    reason: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "LeaveApplication":
        # older records carry fromDate/toDate instead of startDate/endDate
        return cls(
            id=data.get("id"),
            applicant_id=data.get("applicantId"),
            leave_type=data.get("leaveType"),
            start_date=data.get("startDate") or data.get("fromDate"),
            end_date=data.get("endDate") or data.get("toDate"),
            is_half_day=bool(data.get("isHalfDay", False)),
            reason=data.get("reason"),
            status=data.get("status"),
        )


@dataclass(frozen=True)
class CalendarDay:
    day: int
    date: date
    status: DayStatus

    def to_dict(self) -> dict[str, Any]:
        return {"day": self.day, "date": self.date.isoformat(), "status": self.status.value}


@dataclass(frozen=True)
class MonthCalendar:
    """Monday-first month grid; ``None`` cells are padding outside the month."""

    year: int
    month: int
    weeks: tuple[tuple[Optional[CalendarDay], ...], ...]

    def days(self) -> list[CalendarDay]:
        return [cell for week in self.weeks for cell in week if cell is not None]

    def status_of(self, value: date) -> Optional[DayStatus]:
        for cell in self.days():
            if cell.date == value:
                return cell.status
        return None

    def counts(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for cell in self.days():
            out[cell.status.value] = out.get(cell.status.value, 0) + 1
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "weeks": [[cell.to_dict() if cell else None for cell in week] for week in self.weeks],
            "summary": self.counts(),
        }
