from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error the scheduler reports to its callers."""


class RecurrenceError(SchedulerError):
    pass


class InvalidRecurrenceRule(RecurrenceError):
    def __init__(self, rule: str, reason: str = "invalid repeat rule") -> None:
        self.rule = rule
        super().__init__(f"{reason}: {rule!r}")


class PastResultError(RecurrenceError):
    """A forward search produced a date before today."""

    def __init__(self, result: str, today: str) -> None:
        self.result = result
        self.today = today
        super().__init__(f"next date {result} is before today {today}")


class CalendarExhausted(RecurrenceError):
    """The next occurrence would fall after 9999-12-31."""

    def __init__(self, anchor: str, rule: str) -> None:
        self.anchor = anchor
        self.rule = rule
        super().__init__(f"no date after {anchor} fits {rule!r}")


class DateError(SchedulerError):
    pass


class InvalidDate(DateError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid date format: {value!r}")


class DateInPast(DateError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"date {value} is before today")


class MissingTitle(SchedulerError):
    def __init__(self) -> None:
        super().__init__("task title is required")


class TaskNotFound(SchedulerError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task {task_id} not found")
