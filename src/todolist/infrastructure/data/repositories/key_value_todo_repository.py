from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from todolist.domain.storage.key_value_store import KeyValueStore
from todolist.domain.todo.entities.todo import TodoItem
from todolist.domain.todo.exceptions.todo_exceptions import TodoLoadError, TodoSaveError
from todolist.domain.todo.repositories.todo_repository import TodoRepository
from todolist.infrastructure.data.codecs.todo_codec import decode_todos, encode_todos


logger = logging.getLogger(__name__)

TODOS_KEY = "todos"


class KeyValueTodoRepository(TodoRepository):
    """Keeps the whole list as one JSON blob under a fixed key."""

    def __init__(self, store: KeyValueStore, key: str = TODOS_KEY) -> None:
        self._store = store
        self._key = key

    def save_all(self, todos: Sequence[TodoItem]) -> None:
        try:
            data = encode_todos(todos)
            self._store.set(self._key, data)
        except (ValueError, OSError, SQLAlchemyError) as exc:
            logger.exception("Saving %d todos under %r failed", len(todos), self._key)
            raise TodoSaveError(TodoSaveError.message) from exc
        logger.debug("Saved %d todos under %r (%d bytes)", len(todos), self._key, len(data))

    def load_all(self) -> Optional[list[TodoItem]]:
        try:
            data = self._store.get(self._key)
        except (OSError, SQLAlchemyError) as exc:
            logger.exception("Reading %r failed", self._key)
            raise TodoLoadError(TodoLoadError.message) from exc
        if data is None:
            logger.info("No saved todos under %r", self._key)
            return None
        try:
            todos = decode_todos(data)
        except ValueError as exc:
            logger.exception("Saved todos under %r are malformed", self._key)
            raise TodoLoadError(TodoLoadError.message) from exc
        logger.debug("Loaded %d todos from %r", len(todos), self._key)
        return todos
