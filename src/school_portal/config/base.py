import os

from ..core.constants import (
    DEFAULT_API_TIMEOUT,
    DEFAULT_PAYMENT_CURRENCY,
    DEFAULT_UPLOAD_HANDLER_PATH,
    DEFAULT_WEEKLY_HOLIDAYS,
)


def parse_weekly_holidays(value):
    """Parse "5,6" into (5, 6). Weekday numbers use Monday=0."""
    if value is None:
        return DEFAULT_WEEKLY_HOLIDAYS
    days = []
    for part in str(value).split(","):
        part = part.strip()
        if not part:
            continue
        day = int(part)
        if not 0 <= day <= 6:
            raise ValueError(f"WEEKLY_HOLIDAYS entry out of range: {day}")
        days.append(day)
    return tuple(sorted(set(days)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "school-portal-dev-secret"

    # Backend REST API
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:5000/api")
    API_TIMEOUT = float(os.environ.get("API_TIMEOUT", str(DEFAULT_API_TIMEOUT)))

    WEEKLY_HOLIDAYS = parse_weekly_holidays(os.environ.get("WEEKLY_HOLIDAYS"))
    PAYMENT_CURRENCY = os.environ.get("PAYMENT_CURRENCY", DEFAULT_PAYMENT_CURRENCY)
    UPLOAD_HANDLER_PATH = os.environ.get("UPLOAD_HANDLER_PATH", DEFAULT_UPLOAD_HANDLER_PATH)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
