import logging
import threading
from typing import List, Optional

from .errors import NotFoundError
from .models import Todo, TodoCreate, TodoUpdate, parse_payload, utc_timestamp
from .store import TodoStore, next_id

logger = logging.getLogger(__name__)


class TodoService:
    """
    Load -> mutate -> save sequences over a TodoStore.

    Mutations hold a single lock for the whole sequence so concurrent
    requests in one process cannot overwrite each other or reuse an id.
    """

    def __init__(self, store: TodoStore):
        self.store = store
        self._write_lock = threading.Lock()

    def list_todos(self) -> List[Todo]:
        return self.store.load_all()

    def get_todo(self, todo_id: Optional[int], raw_id: str = None) -> Todo:
        todos = self.store.load_all()
        index = self._find(todos, todo_id)
        if index is None:
            raise NotFoundError(self._label(todo_id, raw_id), "read")
        return todos[index]

    def create_todo(self, payload: TodoCreate) -> Todo:
        with self._write_lock:
            todos = self.store.load_all()
            todo = Todo(
                id=next_id(todos),
                title=payload.title,
                completed=payload.completed,
                create_time=utc_timestamp(),
            )
            todos.append(todo)
            self.store.save_all(todos)
        logger.info(f"Created todo {todo.id}")
        return todo

    def update_todo(self, todo_id: Optional[int], body: dict, raw_id: str = None) -> Todo:
        with self._write_lock:
            todos = self.store.load_all()
            index = self._find(todos, todo_id)
            if index is None:
                raise NotFoundError(self._label(todo_id, raw_id), "update")
            payload = parse_payload(TodoUpdate, body)
            todos[index] = payload.apply(todos[index])
            self.store.save_all(todos)
        logger.info(f"Updated todo {todo_id}")
        return todos[index]

    def delete_todo(self, todo_id: Optional[int], raw_id: str = None) -> int:
        with self._write_lock:
            todos = self.store.load_all()
            index = self._find(todos, todo_id)
            if index is None:
                raise NotFoundError(self._label(todo_id, raw_id), "delete")
            del todos[index]
            self.store.save_all(todos)
        logger.info(f"Deleted todo {todo_id}")
        return todo_id

    @staticmethod
    def _find(todos: List[Todo], todo_id: Optional[int]) -> Optional[int]:
        if todo_id is None:
            return None
        for index, todo in enumerate(todos):
            if todo.id == todo_id:
                return index
        return None

    @staticmethod
    def _label(todo_id, raw_id):
        return raw_id if todo_id is None and raw_id is not None else todo_id
