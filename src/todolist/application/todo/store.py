from __future__ import annotations

import logging
from typing import List, Optional

from todolist.domain.todo.entities.todo import TodoItem
from todolist.domain.todo.exceptions.todo_exceptions import TodoTitleEmptyError
from todolist.domain.todo.repositories.todo_repository import TodoRepository


logger = logging.getLogger(__name__)


class TodoStore:
    """Owns the canonical, insertion-ordered list of todos.

    Every mutation persists the full list through the repository. A failed
    save raises :class:`TodoSaveError` but leaves the mutation applied, so the
    in-memory list may run ahead of the saved copy until the next save
    succeeds.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository
        self._todos: List[TodoItem] = []

    def __len__(self) -> int:
        return len(self._todos)

    def add(self, title: str) -> TodoItem:
        title = (title or "").strip()
        if not title:
            raise TodoTitleEmptyError("Todo title cannot be empty.")
        item = TodoItem(title=title)
        self._todos.append(item)
        logger.debug("Added todo %s", item.id)
        self.save()
        return item

    def get(self, todo_id: str) -> Optional[TodoItem]:
        index = self._index_of(todo_id)
        return self._todos[index] if index is not None else None

    def toggle(self, todo_id: str) -> Optional[TodoItem]:
        index = self._index_of(todo_id)
        if index is None:
            logger.debug("Toggle ignored, todo %s not found", todo_id)
            return None
        item = self._todos[index].toggled()
        self._todos[index] = item
        logger.debug("Toggled todo %s to completed=%s", item.id, item.is_completed)
        self.save()
        return item

    def remove(self, todo_id: str) -> bool:
        index = self._index_of(todo_id)
        if index is None:
            logger.debug("Remove ignored, todo %s not found", todo_id)
            return False
        del self._todos[index]
        logger.debug("Removed todo %s", todo_id)
        self.save()
        return True

    def list(self, filter_text: str = "") -> tuple[TodoItem, ...]:
        return tuple(item for item in self._todos if item.matches(filter_text or ""))

    def save(self) -> None:
        self._repository.save_all(tuple(self._todos))

    def load(self) -> None:
        # Never keep a partially loaded list around.
        self._todos = []
        loaded = self._repository.load_all()
        if loaded is not None:
            self._todos = list(loaded)
        logger.info("Loaded %d todos", len(self._todos))

    def _index_of(self, todo_id: str) -> Optional[int]:
        for index, item in enumerate(self._todos):
            if item.id == todo_id:
                return index
        return None
