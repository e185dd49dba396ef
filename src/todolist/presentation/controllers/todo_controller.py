from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from todolist.application.contracts.todo_dtos import (
    CreateTodoRequest,
    ListTodosRequest,
    RemoveTodoRequest,
    ToggleTodoRequest,
)
from todolist.application.todo.commands.create_todo import CreateTodoCommand
from todolist.application.todo.commands.remove_todo import RemoveTodoCommand
from todolist.application.todo.commands.toggle_todo import ToggleTodoCommand
from todolist.application.todo.queries.list_todos import ListTodosQuery
from todolist.application.todo.store import TodoStore
from todolist.domain.todo.exceptions.todo_exceptions import StorageError, TodoTitleEmptyError
from todolist.presentation.ui.viewmodels.todo_viewmodel import todos_to_viewmodels


logger = logging.getLogger(__name__)

EMPTY_STATE_TEXT = "No todos yet!\nTap + to add a new todo"
EMPTY_TITLE_MESSAGE = "Please enter a title for the todo."


@dataclass(frozen=True)
class Notice:
    """A dismissible message for the user."""

    message: str
    title: str = "Error"


class TodoListController:
    """Glue between the todo list screen and the store.

    Holds a reference to the store only; the list itself is always read back
    from the store.
    """

    def __init__(self, store: TodoStore) -> None:
        self._store = store
        self._create = CreateTodoCommand(store)
        self._toggle = ToggleTodoCommand(store)
        self._remove = RemoveTodoCommand(store)
        self._query = ListTodosQuery(store)
        self.search_text = ""

    @property
    def store(self) -> TodoStore:
        return self._store

    def start(self) -> Optional[Notice]:
        try:
            self._store.load()
        except StorageError as exc:
            return self._notice(exc)
        return None

    def add_todo(self, title: str) -> Optional[Notice]:
        try:
            self._create.execute(CreateTodoRequest(title=title))
        except TodoTitleEmptyError:
            return Notice(message=EMPTY_TITLE_MESSAGE)
        except StorageError as exc:
            return self._notice(exc)
        return None

    def toggle_todo(self, todo_id: str) -> Optional[Notice]:
        try:
            self._toggle.execute(ToggleTodoRequest(todo_id=todo_id))
        except StorageError as exc:
            return self._notice(exc)
        return None

    def remove_todo(self, todo_id: str) -> Optional[Notice]:
        try:
            self._remove.execute(RemoveTodoRequest(todo_id=todo_id))
        except StorageError as exc:
            return self._notice(exc)
        return None

    def search(self, text: str) -> None:
        self.search_text = text or ""

    def rows(self) -> list[dict[str, str | bool]]:
        return todos_to_viewmodels(self._query.execute(ListTodosRequest(filter_text=self.search_text)))

    def empty_state_text(self) -> Optional[str]:
        return EMPTY_STATE_TEXT if len(self._store) == 0 else None

    @staticmethod
    def _notice(exc: StorageError) -> Notice:
        logger.warning("Showing storage notice: %s", exc.message)
        return Notice(message=exc.message)
