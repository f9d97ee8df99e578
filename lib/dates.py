"""
Calendar date parsing for planner records.

Dates arrive as strings ("2024-03-15" or a full ISO-8601 timestamp) and are
stored as timezone-aware instants in the configured local zone.
"""
import re
from datetime import date, datetime

from config import DATE_FORMAT_HINT
from env_loader import get_timezone
from lib.errors import ValidationError

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_local(moment: datetime) -> datetime:
    """Attach (naive) or convert (aware) to the configured local zone."""
    tz = get_timezone()
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz) if tz else moment.astimezone()
    return moment.astimezone(tz)


def parse_date(value: object, field: str) -> datetime:
    """
    Parse a caller-supplied date into a local, timezone-aware instant.

    Args:
        value: "YYYY-MM-DD", an ISO-8601 timestamp string, or a datetime
        field: Argument name used in error messages

    Returns:
        Aware datetime in the configured zone

    Raises:
        ValidationError: If the value is missing or not a date
    """
    if isinstance(value, datetime):
        return to_local(value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")

    s = value.strip()
    try:
        if _DATE_ONLY.match(s):
            d = date.fromisoformat(s)
            parsed = datetime(d.year, d.month, d.day)
        else:
            parsed = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"{field} must be a date ({DATE_FORMAT_HINT}): {value}")
    return to_local(parsed)


def day_bounds(moment: datetime) -> tuple[datetime, datetime]:
    """
    Inclusive bounds of the calendar day containing moment.

    Each bound is localized on its own, so the UTC offset at the end of a
    DST transition day can differ from the offset at its start.

    Returns:
        (00:00:00.000, 23:59:59.999) local wall-clock time of that day
    """
    wall = to_local(moment).replace(tzinfo=None)
    start = to_local(wall.replace(hour=0, minute=0, second=0, microsecond=0))
    end = to_local(wall.replace(hour=23, minute=59, second=59, microsecond=999000))
    return start, end
