from __future__ import annotations

from collections.abc import Collection, Iterator
from datetime import date

from scheduler.domain.dates import days_in_month
from scheduler.domain.errors import InvalidRecurrenceRule
from scheduler.domain.recurrence import NEGATIVE_MONTH_DAYS, MonthlyRule

MONTH_LENGTHS = (28, 29, 30, 31)

# nine years of months covers the longest gap between two February 29ths
MAX_MONTHS_AHEAD = 12 * 9

# (days in month, offset) -> day of month
OFFSET_DAYS: dict[tuple[int, int], int] = {
    (length, offset): length + offset + 1
    for length in MONTH_LENGTHS
    for offset in NEGATIVE_MONTH_DAYS
}

# (days in month, day of month, offset) -> offset day already reached, roll to the next month
ROLLS_OVER: dict[tuple[int, int, int], bool] = {
    (length, day, offset): day >= OFFSET_DAYS[(length, offset)]
    for length in MONTH_LENGTHS
    for day in range(1, length + 1)
    for offset in NEGATIVE_MONTH_DAYS
}


def offset_day(year: int, month: int, offset: int) -> int:
    """Concrete day of month for ``-1`` (last day) or ``-2`` (second to last)."""
    return OFFSET_DAYS[(days_in_month(year, month), offset)]


def next_month_day(reference: date, months: Collection[int], day: int) -> date | None:
    """Earliest date after ``reference`` falling on ``day`` of a wanted month.

    ``day`` is either a plain day of month or a negative offset from the end
    of the month. An empty ``months`` collection means every month. Months
    too short for a positive day are skipped. Returns None when no such date
    exists within ``MAX_MONTHS_AHEAD`` months, e.g. day 30 in February only.
    """
    if not months or reference.month in months:
        length = days_in_month(reference.year, reference.month)
        if day < 0:
            if not ROLLS_OVER[(length, reference.day, day)]:
                return reference.replace(day=OFFSET_DAYS[(length, day)])
        elif reference.day < day <= length:
            return reference.replace(day=day)

    for year, month in _following_months(reference.year, reference.month, months):
        if day < 0:
            return date(year, month, offset_day(year, month, day))
        if day <= days_in_month(year, month):
            return date(year, month, day)
    return None


def next_offset_date(anchor: date, today: date, months: Collection[int], offset: int) -> date:
    """Date on which a negative ``offset`` next occurs.

    The reference point is the later of ``anchor`` and ``today``. When the
    offset day of the reference month has already been reached, or the month
    is not wanted, the answer comes from the next wanted month.
    """
    rule = _monthly_text(offset, months)
    if offset not in NEGATIVE_MONTH_DAYS:
        raise InvalidRecurrenceRule(rule, "unsupported month day offset")
    resolved = next_month_day(max(anchor, today), months, offset)
    if resolved is None:
        raise InvalidRecurrenceRule(rule, "no wanted month")
    return resolved


def resolve_offset_day(anchor: date, today: date, months: Collection[int], offset: int) -> int:
    """Day of month on which a negative ``offset`` next occurs."""
    return next_offset_date(anchor, today, months, offset).day


def _monthly_text(day: int, months: Collection[int]) -> str:
    return str(MonthlyRule(days=frozenset({day}), months=frozenset(months)))


def _following_months(year: int, month: int, months: Collection[int]) -> Iterator[tuple[int, int]]:
    for _ in range(MAX_MONTHS_AHEAD):
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
        if not months or month in months:
            yield year, month
