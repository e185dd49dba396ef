from __future__ import annotations

from todolist.application.contracts.todo_dtos import ListTodosRequest, TodoItemDto
from todolist.application.todo.store import TodoStore


class ListTodosQuery:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: ListTodosRequest | None = None) -> list[TodoItemDto]:
        filter_text = request.filter_text if request is not None else ""
        return [TodoItemDto.from_item(item) for item in self._store.list(filter_text)]
