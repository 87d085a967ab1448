from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal roles as issued by the backend."""

    SUPER_ADMIN = "SuperAdmin"
    PRINCIPAL = "Principal"
    REGISTRAR = "Registrar"
    TEACHER = "Teacher"
    STUDENT = "Student"
    PARENT = "Parent"
    LIBRARIAN = "Librarian"
    SUPPORT_STAFF = "SupportStaff"


class DayStatus(str, Enum):
    """Status shown on a single calendar day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "HalfDay"
    ON_LEAVE = "OnLeave"
    HOLIDAY = "Holiday"
    UPCOMING = "Upcoming"
    NOT_MARKED = "Not Marked"


class Decision(str, Enum):
    """Outcome sent when processing an approval request."""

    APPROVED = "Approved"
    REJECTED = "Rejected"


class RefreshTopic(str, Enum):
    """Data areas a refresh event can invalidate."""

    ALL = "all"
    ATTENDANCE = "attendance"
    LEAVE = "leave"
    FEES = "fees"
    REQUESTS = "requests"
    DOCUMENTS = "documents"
    PROFILE = "profile"
