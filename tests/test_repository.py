from __future__ import annotations

from datetime import date

from scheduler.domain.filters import TaskFilters
from scheduler.infra.repository import TaskRepository


def _add(repo: TaskRepository, title: str, day: str, comment: str = "", repeat: str = ""):
    return repo.create_task({"title": title, "date": day, "comment": comment, "repeat": repeat})


def test_create_and_get_task(repo: TaskRepository) -> None:
    task = _add(repo, "Dentist", "20240320", comment="bring card", repeat="y")

    assert task.id is not None
    assert repo.get_task(task.id) == task
    assert task.date == "20240320"
    assert task.repeat == "y"
    assert repo.get_task(task.id + 100) is None


def test_create_task_defaults_optional_fields(repo: TaskRepository) -> None:
    task = repo.create_task({"title": "Bare", "date": "20240320"})

    assert task.comment == ""
    assert task.repeat == ""


def test_update_task_changes_only_given_fields(repo: TaskRepository) -> None:
    task = _add(repo, "Gym", "20240315", comment="legs", repeat="d 2")

    updated = repo.update_task(task.id, {"date": "20240317"})

    assert updated.date == "20240317"
    assert updated.title == "Gym"
    assert updated.comment == "legs"
    assert updated.repeat == "d 2"
    assert repo.update_task(999, {"date": "20240317"}) is None


def test_delete_task(repo: TaskRepository) -> None:
    task = _add(repo, "Trash", "20240315")

    assert repo.delete_task(task.id) is True
    assert repo.delete_task(task.id) is False
    assert repo.get_task(task.id) is None


def test_list_tasks_orders_by_date_and_limits(repo: TaskRepository) -> None:
    _add(repo, "Later", "20240401")
    _add(repo, "Sooner", "20240316")
    _add(repo, "Soonest", "20240315")

    titles = [task.title for task in repo.list_tasks(TaskFilters())]
    assert titles == ["Soonest", "Sooner", "Later"]

    limited = repo.list_tasks(TaskFilters(limit=2))
    assert [task.title for task in limited] == ["Soonest", "Sooner"]


def test_list_tasks_by_day(repo: TaskRepository) -> None:
    _add(repo, "Morning run", "20240316")
    _add(repo, "Groceries", "20240317")

    found = repo.list_tasks(TaskFilters(due_on=date(2024, 3, 17)))

    assert [task.title for task in found] == ["Groceries"]


def test_list_tasks_search_matches_title_or_comment(repo: TaskRepository) -> None:
    _add(repo, "Buy MILK", "20240316")
    _add(repo, "Groceries", "20240317", comment="oat milk and bread")
    _add(repo, "Gym", "20240318")

    found = repo.list_tasks(TaskFilters(search="milk"))

    assert [task.title for task in found] == ["Buy MILK", "Groceries"]
