from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from scheduler.domain.dates import format_date, parse_date, parse_search_date
from scheduler.domain.entities import TaskEntity
from scheduler.domain.enums import CompletionAction
from scheduler.domain.errors import InvalidRecurrenceRule, TaskNotFound
from scheduler.domain.filters import DEFAULT_LIMIT, TaskFilters
from scheduler.domain.recurrence import parse_rule
from scheduler.domain.validation import validate_task
from scheduler.infra.repository import TaskRepository

from .completion import resolve_completion
from .date_advancer import next_occurrence
from .date_resolver import resolve_initial_date

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(
        self,
        repo: TaskRepository,
        clock: Callable[[], date] = date.today,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._limit = limit

    def list_tasks(self, search: str | None = None) -> list[TaskEntity]:
        """Nearest tasks by date; a ``DD.MM.YYYY`` search picks one day, other text matches title or comment."""
        key = (search or "").strip()
        if not key:
            filters = TaskFilters(limit=self._limit)
        elif (due_on := parse_search_date(key)) is not None:
            filters = TaskFilters(due_on=due_on, limit=self._limit)
        else:
            filters = TaskFilters(search=key, limit=self._limit)
        return self._repo.list_tasks(filters)

    def get_task(self, task_id: int) -> TaskEntity:
        task = self._repo.get_task(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def create_task(self, data: dict) -> TaskEntity:
        task = self._repo.create_task(self._normalize_data(data, self._clock()))
        logger.info("Task %s `%s` added for %s", task.id, task.title, task.date)
        return task

    def update_task(self, task_id: int, data: dict) -> TaskEntity:
        normalized = self._normalize_data(data, self._clock())
        task = self._repo.update_task(task_id, normalized)
        if task is None:
            raise TaskNotFound(task_id)
        logger.info("Task %s `%s` updated", task.id, task.title)
        return task

    def delete_task(self, task_id: int) -> None:
        if not self._repo.delete_task(task_id):
            raise TaskNotFound(task_id)
        logger.info("Task %s deleted", task_id)

    def mark_done(self, task_id: int) -> TaskEntity | None:
        """Complete a task: recurring tasks move to their next date, others are deleted.

        Returns the rescheduled task, or None when the task was removed.
        """
        today = self._clock()
        task = self.get_task(task_id)
        outcome = resolve_completion(task.date, task.repeat, today)

        if outcome.action is CompletionAction.DELETE:
            self._repo.delete_task(task_id)
            logger.info("Task `%s` done and deleted", task.title)
            return None

        updated = self._repo.update_task(task_id, {"date": format_date(outcome.next_date)})
        if updated is None:
            raise TaskNotFound(task_id)
        logger.info("Task `%s` done, next on %s", updated.title, updated.date)
        return updated

    def next_date(self, now: str, date_value: str, repeat: str) -> str:
        today = parse_date(now)
        anchor = parse_date(date_value)
        rule = parse_rule(repeat)
        if rule is None:
            raise InvalidRecurrenceRule(repeat or "", "repeat rule is required")
        return format_date(next_occurrence(today, anchor, rule))

    def _normalize_data(self, data: dict, today: date) -> dict:
        title = data.get("title") or ""
        repeat = (data.get("repeat") or "").strip()
        validate_task(title, data.get("date"), repeat)
        resolved = resolve_initial_date(data.get("date"), repeat, today)
        return {
            "title": title.strip(),
            "date": format_date(resolved),
            "repeat": repeat,
            "comment": data.get("comment") or "",
        }
