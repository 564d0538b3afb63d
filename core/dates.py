"""Date helpers for the DD-MM-YYYY wire format.

Clients and the stores exchange calendar dates as ``DD-MM-YYYY`` strings.
Parsing is strict: ISO strings and other layouts are rejected instead of
being guessed at.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union

from core.exceptions import InvalidDateError

DATE_FORMAT = "%d-%m-%Y"
_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_date(value: Union[str, date, datetime], field: Optional[str] = "date") -> date:
    """Parse a DD-MM-YYYY string into a `date`.

    `date` and `datetime` instances pass through (datetimes are truncated to
    their calendar day).

    Raises:
        InvalidDateError: If the value is not a valid DD-MM-YYYY date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value.strip()):
        raise InvalidDateError(value, field=field)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(value, field=field) from exc


def format_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """Render a date as DD-MM-YYYY, or None for a missing value."""
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def parse_month(value: str) -> Tuple[int, int]:
    """Parse a YYYY-MM month selector into ``(year, month)``."""
    match = _MONTH_RE.match(value.strip()) if isinstance(value, str) else None
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise InvalidDateError(value, field="month")
    return int(match.group(1)), int(match.group(2))


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()
