from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Iterable, Union

from .enums import RuleKind
from .errors import InvalidRecurrenceRule

MAX_DAILY_INTERVAL = 400
NEGATIVE_MONTH_DAYS = (-1, -2)

DAILY_INTERVALS = range(1, MAX_DAILY_INTERVAL + 1)
WEEKDAYS = frozenset(range(1, 8))
MONTH_DAYS = frozenset((*NEGATIVE_MONTH_DAYS, *range(1, 32)))
MONTHS = frozenset(range(1, 13))

_INT_RE = re.compile(r"-?[0-9]+")


def _join(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in sorted(values))


@dataclass(frozen=True)
class DailyRule:
    interval: int

    kind: ClassVar[RuleKind] = RuleKind.DAILY

    def __str__(self) -> str:
        return f"{self.kind} {self.interval}"


@dataclass(frozen=True)
class WeeklyRule:
    """Weekdays use ISO numbering, 1 is Monday and 7 is Sunday."""

    weekdays: frozenset[int]

    kind: ClassVar[RuleKind] = RuleKind.WEEKLY

    def __str__(self) -> str:
        return f"{self.kind} {_join(self.weekdays)}"


@dataclass(frozen=True)
class MonthlyRule:
    """Days of month, -1 and -2 counting from the end; no months means every month."""

    days: frozenset[int]
    months: frozenset[int] = frozenset()

    kind: ClassVar[RuleKind] = RuleKind.MONTHLY

    def __str__(self) -> str:
        text = f"{self.kind} {_join(self.days)}"
        if self.months:
            text += f" {_join(self.months)}"
        return text


@dataclass(frozen=True)
class YearlyRule:
    kind: ClassVar[RuleKind] = RuleKind.YEARLY

    def __str__(self) -> str:
        return str(self.kind)


RecurrenceRule = Union[DailyRule, WeeklyRule, MonthlyRule, YearlyRule]


def parse_rule(raw: str | None) -> RecurrenceRule | None:
    """Turn a stored repeat string into a rule.

    Empty input means the task does not repeat and yields ``None``. The
    accepted forms are ``d <interval>``, ``w <weekdays>``,
    ``m <days> [<months>]`` and ``y``, where lists are comma separated.
    Anything else raises ``InvalidRecurrenceRule``.
    """
    text = (raw or "").strip()
    if not text:
        return None

    token, *args = text.split(" ")
    try:
        kind = RuleKind(token)
    except ValueError:
        raise InvalidRecurrenceRule(text, "unknown repeat kind") from None

    if kind is RuleKind.YEARLY:
        if args:
            raise InvalidRecurrenceRule(text, "yearly rule takes no arguments")
        return YearlyRule()

    if kind is RuleKind.DAILY:
        if len(args) != 1:
            raise InvalidRecurrenceRule(text, "daily rule takes exactly one interval")
        (interval,) = _parse_values(text, args[0], DAILY_INTERVALS, single=True)
        return DailyRule(interval=interval)

    if kind is RuleKind.WEEKLY:
        if len(args) != 1:
            raise InvalidRecurrenceRule(text, "weekly rule takes exactly one list of weekdays")
        return WeeklyRule(weekdays=frozenset(_parse_values(text, args[0], WEEKDAYS)))

    if not 1 <= len(args) <= 2:
        raise InvalidRecurrenceRule(text, "monthly rule takes a list of days and an optional list of months")
    days = frozenset(_parse_values(text, args[0], MONTH_DAYS))
    months = frozenset(_parse_values(text, args[1], MONTHS)) if len(args) == 2 else frozenset()
    return MonthlyRule(days=days, months=months)


def _parse_values(text: str, token: str, allowed, single: bool = False) -> list[int]:
    items = [token] if single else token.split(",")
    values = []
    for item in items:
        if not _INT_RE.fullmatch(item):
            raise InvalidRecurrenceRule(text, f"malformed number {item!r}")
        value = int(item)
        if value not in allowed:
            raise InvalidRecurrenceRule(text, f"value {value} out of range")
        values.append(value)
    return values
