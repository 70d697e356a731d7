from __future__ import annotations

import argparse
import json
import logging
import sys

from scheduler.config import SETTINGS
from scheduler.domain.errors import SchedulerError
from scheduler.infra.db import init_db
from scheduler.infra.logging import setup_logging
from scheduler.infra.repository import TaskRepository
from scheduler.services.task_service import TaskService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scheduler", description="Personal task scheduler")
    parser.add_argument("--log-level", default=None, help="console and file log level, e.g. INFO")
    commands = parser.add_subparsers(dest="command", required=True)

    nextdate = commands.add_parser("nextdate", help="compute the next date of a repeat rule")
    nextdate.add_argument("--now", required=True, help="reference day, YYYYMMDD")
    nextdate.add_argument("--date", required=True, help="current task date, YYYYMMDD")
    nextdate.add_argument("--repeat", required=True, help="repeat rule, e.g. 'd 7' or 'm -1 2,8'")

    add = commands.add_parser("add", help="create a task")
    _add_task_fields(add)

    edit = commands.add_parser("edit", help="replace the fields of a task")
    edit.add_argument("id", type=int)
    _add_task_fields(edit)

    show = commands.add_parser("show", help="print one task")
    show.add_argument("id", type=int)

    listing = commands.add_parser("list", help="list upcoming tasks")
    listing.add_argument("--search", default="", help="text, or a day as DD.MM.YYYY")

    done = commands.add_parser("done", help="complete a task")
    done.add_argument("id", type=int)

    delete = commands.add_parser("delete", help="delete a task")
    delete.add_argument("id", type=int)

    return parser


def _add_task_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", required=True)
    parser.add_argument("--date", default="", help="due date, YYYYMMDD; today when empty")
    parser.add_argument("--repeat", default="")
    parser.add_argument("--comment", default="")


def _task_data(args: argparse.Namespace) -> dict:
    return {
        "title": args.title,
        "date": args.date,
        "repeat": args.repeat,
        "comment": args.comment,
    }


def _build_service() -> TaskService:
    init_db()
    return TaskService(TaskRepository(), limit=SETTINGS.tasks_limit)


def run(args: argparse.Namespace) -> object:
    if args.command == "nextdate":
        return TaskService(TaskRepository()).next_date(args.now, args.date, args.repeat)

    service = _build_service()
    if args.command == "add":
        return {"id": str(service.create_task(_task_data(args)).id)}
    if args.command == "edit":
        return service.update_task(args.id, _task_data(args)).to_dict()
    if args.command == "show":
        return service.get_task(args.id).to_dict()
    if args.command == "list":
        return {"tasks": [task.to_dict() for task in service.list_tasks(args.search)]}
    if args.command == "done":
        task = service.mark_done(args.id)
        return task.to_dict() if task else {}
    if args.command == "delete":
        service.delete_task(args.id)
        return {}
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        result = run(args)
    except SchedulerError as exc:
        logger.warning("%s rejected: %s", args.command, exc)
        print(json.dumps({"error": str(exc)}, ensure_ascii=False), file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
