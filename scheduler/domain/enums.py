from __future__ import annotations

from enum import StrEnum


class RuleKind(StrEnum):
    DAILY = "d"
    WEEKLY = "w"
    MONTHLY = "m"
    YEARLY = "y"


class CompletionAction(StrEnum):
    DELETE = "delete"
    UPDATE_DATE = "update_date"
