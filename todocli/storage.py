"""Persistence back ends for a todo list."""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from todocli.task import TodoList

_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class Storage(ABC):
    """Somewhere a todo list can be saved to and loaded from."""

    @abstractmethod
    def save(self, todo_list: TodoList) -> None:
        """Persist the list."""

    @abstractmethod
    def load(self) -> TodoList:
        """Return the persisted list."""


@dataclass(frozen=True)
class JSONStorage(Storage):
    """Stores the todo list as an indented JSON document in one file."""

    filename: Union[str, "os.PathLike[str]"]

    def save(self, todo_list: TodoList) -> None:
        text = json.dumps(todo_list.to_dict(), indent=1, ensure_ascii=False)
        Path(self.filename).write_text(text.translate(_HTML_ESCAPES) + "\n", encoding="utf-8")

    def load(self) -> TodoList:
        """Load the list; a missing file yields a fresh, empty list."""
        path = Path(self.filename)
        if not path.exists():
            return TodoList()
        data = json.loads(path.read_text(encoding="utf-8"))
        return TodoList.from_dict({} if data is None else data)