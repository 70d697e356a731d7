from __future__ import annotations

from typing import Optional

from sqlalchemy import or_, select

from scheduler.domain.dates import format_date
from scheduler.domain.entities import TaskEntity
from scheduler.domain.filters import TaskFilters

from .db import SessionLocal
from .models import TaskModel

TASK_FIELDS = ("date", "title", "comment", "repeat")


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        date=model.date,
        repeat=model.repeat or "",
        comment=model.comment or "",
    )


def _apply_filters(stmt, filters: TaskFilters) -> object:
    if filters.due_on:
        stmt = stmt.where(TaskModel.date == format_date(filters.due_on))

    if filters.search:
        pattern = f"%{filters.search}%"
        stmt = stmt.where(
            or_(
                TaskModel.title.ilike(pattern),
                TaskModel.comment.ilike(pattern),
            )
        )

    return stmt


class TaskRepository:
    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory

    def list_tasks(self, filters: TaskFilters) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel)
            stmt = _apply_filters(stmt, filters)
            stmt = stmt.order_by(TaskModel.date.asc(), TaskModel.id.asc()).limit(filters.limit)
            return [_to_entity(task) for task in session.scalars(stmt)]

    def get_task(self, task_id: int) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            return _to_entity(task) if task else None

    def create_task(self, data: dict) -> TaskEntity:
        with self._session_factory() as session:
            task = TaskModel(**{key: data.get(key) or "" for key in TASK_FIELDS})
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def update_task(self, task_id: int, data: dict) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return None

            for key, value in data.items():
                if key in TASK_FIELDS:
                    setattr(task, key, value or "")
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def delete_task(self, task_id: int) -> bool:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return False
            session.delete(task)
            session.commit()
            return True
