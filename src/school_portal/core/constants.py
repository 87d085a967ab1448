"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_TIMEOUT = 15
DEFAULT_WEEKLY_HOLIDAYS = (5, 6)
DEFAULT_PAYMENT_CURRENCY = "INR"
DEFAULT_UPLOAD_HANDLER_PATH = "/registrar/documents/upload"

CALENDAR_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

ROLES_REQUIRING_BRANCH = frozenset(
    {"Principal", "Registrar", "Teacher", "Student", "Parent", "Librarian"}
)
