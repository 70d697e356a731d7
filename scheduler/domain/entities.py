from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class TaskEntity:
    id: int | None
    title: str
    date: str
    repeat: str = ""
    comment: str = ""

    def to_dict(self) -> dict[str, str]:
        data = asdict(self)
        data["id"] = "" if self.id is None else str(self.id)
        return data
