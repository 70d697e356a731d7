from __future__ import annotations

from datetime import date

from scheduler.domain.dates import format_date, parse_date
from scheduler.domain.errors import DateInPast
from scheduler.domain.recurrence import parse_rule

from .date_advancer import next_occurrence


def resolve_initial_date(requested: str | None, raw_rule: str | None, today: date) -> date:
    """Due date a created or edited task should carry.

    No date means today. A date from today on is kept. A past date becomes
    today for one-off tasks and the next occurrence for recurring ones.
    """
    if not requested:
        return today

    due = parse_date(requested)
    if due >= today:
        resolved = due
    else:
        rule = parse_rule(raw_rule)
        resolved = today if rule is None else next_occurrence(today, due, rule)
    return accept_date(resolved, today)


def accept_date(value: date, today: date) -> date:
    if value < today:
        raise DateInPast(format_date(value))
    return value
