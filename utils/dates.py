"""
utils/dates.py
--------------
ISO date helpers used by the snapshot provider.
Malformed strings raise InvalidDateError here, before any value reaches the engine.
"""

from datetime import date, datetime
from typing import Optional

from dateutil.parser import isoparse

from utils.errors import InvalidDateError


def parse_moment(value, field: str = "date") -> datetime:
    """
    Parse an ISO date or datetime into a naive local datetime.

    Date-only values ("2024-03-01") become midnight of that day.
    Timezone-aware values are converted to local time.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            moment = isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(value, field) from e
    else:
        raise InvalidDateError(value, field)

    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def parse_date(value, field: str = "date") -> date:
    """Parse an ISO date (a datetime string is truncated to its date)."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_moment(value, field).date()


def parse_optional_date(value, field: str = "date") -> Optional[date]:
    """Like parse_date, but None and "" mean "not set"."""
    if value is None or value == "":
        return None
    return parse_date(value, field)


def month_key(day: date) -> str:
    """Return the YYYY-MM key of the calendar month containing `day`."""
    return f"{day.year:04d}-{day.month:02d}"
