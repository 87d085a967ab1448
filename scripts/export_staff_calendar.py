"""Export one staff member's month calendar as CSV.

Usage: python scripts/export_staff_calendar.py <staff_id> <year> <month> [-o out.csv]
Credentials come from PORTAL_IDENTIFIER / PORTAL_PASSWORD (.env is honoured).
"""

from __future__ import annotations

import argparse
import importlib
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from school_portal.attendance.calendar import calendar_to_csv
from school_portal.attendance.service import StaffCalendarView
from school_portal.auth.store import MappingSessionStore
from school_portal.config import get_settings_module
from school_portal.container import build_container


def main() -> int:
    load_dotenv(override=False)
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("staff_id")
    parser.add_argument("year", type=int)
    parser.add_argument("month", type=int, help="1-12")
    parser.add_argument("-o", "--output", type=Path)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_base_url=settings.API_BASE_URL,
        api_timeout=float(settings.API_TIMEOUT),
        weekly_holidays=settings.WEEKLY_HOLIDAYS,
        store=MappingSessionStore(),
    )

    identifier = os.getenv("PORTAL_IDENTIFIER", "")
    password = os.getenv("PORTAL_PASSWORD", "")
    result = container.auth_service.login(identifier, password)
    if result.otp_required:
        print("ERROR: this account requires an OTP; use the web portal instead", file=sys.stderr)
        return 1

    view = StaffCalendarView(container.calendar_service, container.bus, year=args.year, month=args.month)
    calendar = view.select_staff(args.staff_id)
    view.close()

    text = calendar_to_csv(calendar)
    if args.output:
        args.output.write_text(text, encoding="utf-8-sig")
        print(f"OK: wrote {len(calendar.days())} days -> {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
