from __future__ import annotations

from .dates import parse_date
from .errors import MissingTitle
from .recurrence import RecurrenceRule, parse_rule


def validate_task(title: str | None, date: str | None, repeat: str | None) -> RecurrenceRule | None:
    """Check the user-editable fields of a task and return its parsed rule."""
    if not title or not title.strip():
        raise MissingTitle()
    if date:
        parse_date(date)
    return parse_rule(repeat)
