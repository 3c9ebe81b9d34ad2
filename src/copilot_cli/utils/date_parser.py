"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser

# Fills the parts a partial date leaves out, so the result never depends on today
MISSING_PARTS_DEFAULT = datetime(2000, 1, 1)


def normalize_date(date_str: str) -> str:
    """Normalize a date string to ISO format (YYYY-MM-DD).

    Accepts anything dateutil can read ("2024-01-15", "01/15/2024",
    "January 15, 2024", ...). A missing day or month becomes 1 and a missing
    year becomes 2000. Unparseable input is returned unchanged
    instead of raising, so callers must tolerate non-canonical dates.

    Args:
        date_str: Raw date string from an export

    Returns:
        ISO date string, or the original string if it could not be parsed
    """
    if not date_str or not date_str.strip():
        return date_str

    try:
        return date_parser.parse(date_str.strip(), default=MISSING_PARTS_DEFAULT).date().isoformat()
    except (ValueError, OverflowError):
        return date_str


def days_ago(days: int, today: date | None = None) -> str:
    """Return the ISO date string for `days` days before today."""
    if today is None:
        today = date.today()
    return (today - timedelta(days=days)).isoformat()
