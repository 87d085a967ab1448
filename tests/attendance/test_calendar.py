from __future__ import annotations

from datetime import date

from school_portal.attendance.calendar import (
    aggregate_month,
    build_month_calendar,
    build_status_map,
    calendar_to_csv,
    month_window,
)
from school_portal.attendance.model import LeaveApplication, StaffAttendanceRecord
from school_portal.common.datetime_utils import iter_days
from school_portal.core.enums import DayStatus


def _leave(start, end, leave_id="lv-1") -> LeaveApplication:
    return LeaveApplication.from_api({"id": leave_id, "startDate": start, "endDate": end, "status": "Approved"})


def _att(day, status) -> StaffAttendanceRecord:
    return StaffAttendanceRecord.from_api({"date": day, "status": status})


def _january(leaves=(), attendance=(), today=date(2024, 1, 20), weekly_holidays=(5, 6)):
    # January 2024 starts on a Monday; 2024-01-20 is a Saturday
    return aggregate_month(
        2024,
        1,
        leaves=list(leaves),
        attendance=list(attendance),
        today=today,
        weekly_holidays=weekly_holidays,
    )


def test_leave_range_marks_exactly_its_days():
    status_map = build_status_map([_leave("2024-01-10", "2024-01-12")], [])

    assert status_map == {
        "2024-01-10": DayStatus.ON_LEAVE,
        "2024-01-11": DayStatus.ON_LEAVE,
        "2024-01-12": DayStatus.ON_LEAVE,
    }
    cal = _january(leaves=[_leave("2024-01-10", "2024-01-12")])
    assert cal.status_of(date(2024, 1, 9)) == DayStatus.NOT_MARKED
    assert cal.status_of(date(2024, 1, 13)) == DayStatus.HOLIDAY


def test_leave_wins_over_attendance_on_same_day():
    cal = _january(
        leaves=[_leave("2024-01-10", "2024-01-12")],
        attendance=[_att("2024-01-11", "Present")],
    )

    assert cal.status_of(date(2024, 1, 11)) == DayStatus.ON_LEAVE


def test_attendance_without_leave_is_kept():
    cal = _january(attendance=[_att("2024-01-15", "Absent"), _att("2024-01-16", "HalfDay")])

    assert cal.status_of(date(2024, 1, 15)) == DayStatus.ABSENT
    assert cal.status_of(date(2024, 1, 16)) == DayStatus.HALF_DAY


def test_first_attendance_record_for_a_day_wins():
    status_map = build_status_map([], [_att("2024-01-15", "Present"), _att("2024-01-15", "Absent")])

    assert status_map["2024-01-15"] == DayStatus.PRESENT


def test_empty_weekly_holiday_is_holiday_in_past_and_future():
    cal = _january()

    assert cal.status_of(date(2024, 1, 6)) == DayStatus.HOLIDAY
    assert cal.status_of(date(2024, 1, 28)) == DayStatus.HOLIDAY


def test_recorded_status_on_weekly_holiday_is_kept():
    cal = _january(attendance=[_att("2024-01-13", "Present")])

    assert cal.status_of(date(2024, 1, 13)) == DayStatus.PRESENT


def test_empty_future_working_day_is_upcoming():
    cal = _january()

    assert cal.status_of(date(2024, 1, 22)) == DayStatus.UPCOMING
    assert cal.status_of(date(2024, 1, 31)) == DayStatus.UPCOMING


def test_empty_past_or_today_working_day_is_not_marked():
    cal = _january(today=date(2024, 1, 17))

    assert cal.status_of(date(2024, 1, 16)) == DayStatus.NOT_MARKED
    assert cal.status_of(date(2024, 1, 17)) == DayStatus.NOT_MARKED
    assert cal.status_of(date(2024, 1, 18)) == DayStatus.UPCOMING


def test_weekly_holidays_are_configurable():
    cal = _january(weekly_holidays=(4,))

    assert cal.status_of(date(2024, 1, 5)) == DayStatus.HOLIDAY
    assert cal.status_of(date(2024, 1, 6)) == DayStatus.NOT_MARKED


def test_same_inputs_give_same_calendar():
    leaves = [_leave("2024-01-10", "2024-01-12")]
    attendance = [_att("2024-01-11", "Present"), _att("2024-01-15", "Absent")]

    assert _january(leaves, attendance) == _january(leaves, attendance)
    assert build_status_map(leaves, attendance) == build_status_map(leaves, attendance)


def test_iso_datetimes_use_the_written_calendar_day():
    status_map = build_status_map(
        [_leave("2024-01-10T00:00:00.000Z", "2024-01-10T00:00:00.000Z")],
        [_att("2024-01-15T23:30:00.000Z", "Absent")],
    )

    assert status_map == {"2024-01-10": DayStatus.ON_LEAVE, "2024-01-15": DayStatus.ABSENT}


def test_leave_crossing_month_boundary_only_shows_in_month():
    cal = _january(leaves=[_leave("2023-12-30", "2024-01-02")])

    assert cal.status_of(date(2024, 1, 1)) == DayStatus.ON_LEAVE
    assert cal.status_of(date(2024, 1, 2)) == DayStatus.ON_LEAVE
    assert cal.status_of(date(2024, 1, 3)) == DayStatus.NOT_MARKED


def test_malformed_and_reversed_entries_are_skipped():
    status_map = build_status_map(
        [_leave("2024-01-12", "2024-01-10"), _leave("not-a-date", "2024-01-10"), _leave(None, None)],
        [_att("garbage", "Present"), _att("2024-01-15", "Sleeping")],
    )

    assert status_map == {}


def test_legacy_from_to_leave_fields_are_read():
    leave = LeaveApplication.from_api({"id": "x", "fromDate": "2024-01-03", "toDate": "2024-01-04"})

    assert build_status_map([leave], []) == {
        "2024-01-03": DayStatus.ON_LEAVE,
        "2024-01-04": DayStatus.ON_LEAVE,
    }


def test_spaced_status_spellings_are_recorded():
    cal = _january(
        attendance=[_att("2024-01-15", "Half Day"), _att("2024-01-16", "On Leave"), _att("2024-01-17", " present ")]
    )

    assert cal.status_of(date(2024, 1, 15)) == DayStatus.HALF_DAY
    assert cal.status_of(date(2024, 1, 16)) == DayStatus.ON_LEAVE
    assert cal.status_of(date(2024, 1, 17)) == DayStatus.PRESENT


def test_leave_ending_on_last_representable_day():
    status_map = build_status_map([_leave("9999-12-30", "9999-12-31")], [])

    assert status_map == {"9999-12-30": DayStatus.ON_LEAVE, "9999-12-31": DayStatus.ON_LEAVE}
    assert list(iter_days(date.max, date.max)) == [date.max]


def test_open_ended_leave_only_maps_the_shown_month():
    leaves = [_leave("1900-01-01", "9999-12-31")]
    window = month_window(2024, 1)

    status_map = build_status_map(leaves, [_att("2023-12-29", "Present")], window=window)
    cal = _january(leaves=leaves)

    assert len(status_map) == 31
    assert min(status_map) == "2024-01-01"
    assert max(status_map) == "2024-01-31"
    assert all(cal.status_of(date(2024, 1, n)) == DayStatus.ON_LEAVE for n in range(1, 32))


def test_grid_starts_on_monday_with_padding():
    january = build_month_calendar(2024, 1, {}, today=date(2024, 1, 20))
    assert len(january.weeks) == 5
    assert january.weeks[0][0].day == 1
    assert [cell.day if cell else None for cell in january.weeks[-1]] == [29, 30, 31, None, None, None, None]

    # 2024-02-01 is a Thursday
    february = build_month_calendar(2024, 2, {}, today=date(2024, 1, 20))
    assert february.weeks[0][:3] == (None, None, None)
    assert february.weeks[0][3].day == 1
    assert all(len(week) == 7 for week in february.weeks)
    assert len(february.days()) == 29


def test_calendar_summary_counts_statuses():
    cal = _january(attendance=[_att("2024-01-15", "Absent")], today=date(2024, 1, 31))

    summary = cal.to_dict()["summary"]
    assert summary["Absent"] == 1
    assert summary["Holiday"] == 8
    assert sum(summary.values()) == 31


def test_csv_export_has_one_row_per_day():
    cal = _january(attendance=[_att("2024-01-15", "Absent")])

    lines = calendar_to_csv(cal).splitlines()
    assert lines[0] == "date,weekday,status"
    assert len(lines) == 32
    assert lines[1] == "2024-01-01,Mon,Not Marked"
    assert lines[15] == "2024-01-15,Mon,Absent"
