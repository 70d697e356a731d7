from __future__ import annotations

from datetime import date, timedelta

from scheduler.domain.dates import format_date
from scheduler.domain.errors import CalendarExhausted, InvalidRecurrenceRule, PastResultError
from scheduler.domain.recurrence import (
    DailyRule,
    MonthlyRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
)

from .month_days import next_month_day, next_offset_date


def next_occurrence(today: date, anchor: date, rule: RecurrenceRule) -> date:
    """Next date a recurring task is due.

    The result is the earliest occurrence of ``rule`` that is strictly after
    both ``today`` and ``anchor``. Callers handle tasks without a rule
    themselves. Raises ``CalendarExhausted`` when that occurrence would lie
    beyond the last representable date.
    """
    try:
        if isinstance(rule, DailyRule):
            result = _next_daily(today, anchor, rule.interval)
        elif isinstance(rule, WeeklyRule):
            result = _next_weekly(today, anchor, rule)
        elif isinstance(rule, MonthlyRule):
            result = _next_monthly(today, anchor, rule)
        elif isinstance(rule, YearlyRule):
            result = _next_yearly(today, anchor)
        else:
            raise TypeError(f"unsupported recurrence rule: {rule!r}")
    except (OverflowError, ValueError) as exc:
        # date arithmetic past year 9999
        raise CalendarExhausted(format_date(max(anchor, today)), str(rule)) from exc

    if result < today:
        raise PastResultError(format_date(result), format_date(today))
    return result


def _next_daily(today: date, anchor: date, interval: int) -> date:
    if anchor >= today:
        return anchor + timedelta(days=interval)
    steps = (today - anchor).days // interval + 1
    return anchor + timedelta(days=steps * interval)


def _next_weekly(today: date, anchor: date, rule: WeeklyRule) -> date:
    start = max(anchor, today)
    for offset in range(1, 8):
        candidate = start + timedelta(days=offset)
        if candidate.isoweekday() in rule.weekdays:
            return candidate
    raise InvalidRecurrenceRule(str(rule), "no weekday matches")


def _next_monthly(today: date, anchor: date, rule: MonthlyRule) -> date:
    start = max(anchor, today)
    candidates = []
    for day in rule.days:
        if day < 0:
            candidates.append(next_offset_date(anchor, today, rule.months, day))
        elif (found := next_month_day(start, rule.months, day)) is not None:
            candidates.append(found)
    if not candidates:
        raise InvalidRecurrenceRule(str(rule), "rule never occurs")
    return min(candidates)


def _next_yearly(today: date, anchor: date) -> date:
    years = max(today.year - anchor.year, 1)
    result = shift_years(anchor, years)
    while result <= today:
        years += 1
        result = shift_years(anchor, years)
    return result


def shift_years(anchor: date, years: int) -> date:
    """Same day and month ``years`` later; February 29 becomes March 1 outside leap years."""
    try:
        return anchor.replace(year=anchor.year + years)
    except ValueError:
        if (anchor.month, anchor.day) != (2, 29):
            raise
        return date(anchor.year + years, 3, 1)
