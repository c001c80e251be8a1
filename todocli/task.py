"""Tasks and the in-memory list that holds them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIMESTAMP = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,9}))?(Z|[+-]\d{2}:\d{2})"
)


class TaskNotFoundError(LookupError):
    """Raised when no task carries the requested ID."""

    def __init__(self, task_id: int, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"tarefa com ID {task_id} não encontrada")


def _now() -> datetime:
    return datetime.now().astimezone()


def _format_timestamp(moment: datetime) -> str:
    """Render a datetime as an RFC 3339 timestamp."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def _parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping microsecond precision."""
    match = _TIMESTAMP.fullmatch(text)
    if match is None:
        raise ValueError(f"data inválida: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6] or 0)
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


def _field(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"campo '{key}' com tipo inválido: {value!r}")
    return value


@dataclass
class Task:
    """A single to-do item."""

    id: int
    title: str
    description: str = ""
    completed: bool = False
    created_at: datetime = field(default_factory=_now)

    def __str__(self) -> str:
        status = "✅ Concluída" if self.completed else "❌ Pendente"
        return f"[{self.id}] {self.title} - {self.description} ({status})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": _format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        if not isinstance(data, dict):
            raise ValueError(f"tarefa inválida: {data!r}")
        created = _field(data, "created_at", str, None)
        return cls(
            id=_field(data, "id", int, 0),
            title=_field(data, "title", str, ""),
            description=_field(data, "description", str, ""),
            completed=_field(data, "completed", bool, False),
            created_at=_ZERO_TIME if created is None else _parse_timestamp(created),
        )


@dataclass
class TodoList:
    """An ordered collection of tasks with an ID counter."""

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def add_task(self, title: str, description: str) -> Task:
        task = Task(id=self.next_id, title=title, description=description)
        self.tasks.append(task)
        self.next_id += 1
        return task

    def toggle_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        task.completed = not task.completed
        return task

    def remove_task(self, task_id: int) -> Task:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                del self.tasks[index]
                return task
        raise TaskNotFoundError(task_id)

    def get_task(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def list_pending_tasks(self) -> list[Task]:
        return [task for task in self.tasks if not task.completed]

    def search_tasks(self, query: str) -> list[Task]:
        needle = query.lower()
        return [
            task
            for task in self.tasks
            if needle in task.title.lower() or needle in task.description.lower()
        ]

    def stats(self) -> tuple[int, int, int]:
        """Return (total, completed, pending)."""
        total = len(self.tasks)
        completed = sum(1 for task in self.tasks if task.completed)
        return total, completed, total - completed

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self.tasks], "next_id": self.next_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TodoList:
        if not isinstance(data, dict):
            raise ValueError(f"lista de tarefas inválida: {data!r}")
        raw_tasks = data.get("tasks")
        if raw_tasks is None:
            raw_tasks = []
        if not isinstance(raw_tasks, list):
            raise ValueError(f"campo 'tasks' com tipo inválido: {raw_tasks!r}")
        return cls(
            tasks=[Task.from_dict(item) for item in raw_tasks],
            next_id=_field(data, "next_id", int, 0),
        )