"""
Storage for the todo collection.

The whole collection is read and written as one JSON document. Handlers go
through the TodoStore protocol so tests can swap in InMemoryTodoStore.
"""

import json
import logging
import os
from typing import List, Protocol, Sequence

import pydantic

from .errors import StorageReadError, StorageWriteError
from .models import Todo

logger = logging.getLogger(__name__)


class TodoStore(Protocol):
    def load_all(self) -> List[Todo]:
        ...

    def save_all(self, todos: Sequence[Todo]) -> None:
        ...


def next_id(current: Sequence[Todo]) -> int:
    if not current:
        return 1
    return max(todo.id for todo in current) + 1


class JsonFileTodoStore:
    """Todo collection kept as a pretty-printed JSON array in a single file."""

    def __init__(self, path: str):
        self.path = path

    def load_all(self) -> List[Todo]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            logger.info(f"Todo file {self.path} does not exist, creating it")
            self.save_all([])
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(e) from e

        try:
            records = json.loads(content)
            if not isinstance(records, list):
                raise ValueError("expected a JSON array of todos")
            return [Todo.model_validate(record) for record in records]
        except (ValueError, pydantic.ValidationError) as e:
            raise StorageReadError(e) from e

    def save_all(self, todos: Sequence[Todo]) -> None:
        content = json.dumps([todo.to_dict() for todo in todos], indent=2, ensure_ascii=False)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageWriteError(e) from e

    def __repr__(self):
        return f"JsonFileTodoStore({os.path.abspath(self.path)!r})"


class InMemoryTodoStore:
    def __init__(self, todos: Sequence[Todo] = ()):
        self._todos = list(todos)

    def load_all(self) -> List[Todo]:
        return list(self._todos)

    def save_all(self, todos: Sequence[Todo]) -> None:
        self._todos = list(todos)
