from __future__ import annotations

from dataclasses import dataclass
from datetime import date

DEFAULT_LIMIT = 50


@dataclass(frozen=True)
class TaskFilters:
    search: str | None = None
    due_on: date | None = None
    limit: int = DEFAULT_LIMIT
