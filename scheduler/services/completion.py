from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from scheduler.domain.dates import parse_date
from scheduler.domain.enums import CompletionAction
from scheduler.domain.recurrence import DailyRule, parse_rule

from .date_advancer import next_occurrence


@dataclass(frozen=True)
class CompletionOutcome:
    action: CompletionAction
    next_date: date | None = None

    @classmethod
    def delete(cls) -> CompletionOutcome:
        return cls(action=CompletionAction.DELETE)

    @classmethod
    def update_date(cls, value: date) -> CompletionOutcome:
        return cls(action=CompletionAction.UPDATE_DATE, next_date=value)


def resolve_completion(current: str, raw_rule: str | None, today: date) -> CompletionOutcome:
    """What marking a task done does: drop a one-off task, move a recurring one."""
    rule = parse_rule(raw_rule)
    if rule is None:
        return CompletionOutcome.delete()

    next_date = next_occurrence(today, parse_date(current), rule)
    if next_date == today and isinstance(rule, DailyRule):
        next_date += timedelta(days=rule.interval)
    return CompletionOutcome.update_date(next_date)
