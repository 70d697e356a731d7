from __future__ import annotations

import re
from datetime import date, datetime

from .errors import InvalidDate

DATE_FORMAT = "%Y%m%d"
SEARCH_DATE_FORMAT = "%d.%m.%Y"

_DATE_RE = re.compile(r"[0-9]{8}")
_SEARCH_DATE_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def parse_date(value: str) -> date:
    """Parse a stored ``YYYYMMDD`` date, raising ``InvalidDate`` otherwise."""
    if not value or not _DATE_RE.fullmatch(value):
        raise InvalidDate(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDate(value) from exc


def format_date(value: date) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def parse_search_date(value: str) -> date | None:
    """Return the date of a ``DD.MM.YYYY`` search key, or None for plain text."""
    if not _SEARCH_DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, SEARCH_DATE_FORMAT).date()
    except ValueError:
        return None
