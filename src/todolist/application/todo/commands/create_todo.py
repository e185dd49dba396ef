from __future__ import annotations

from todolist.application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto
from todolist.application.todo.store import TodoStore


class CreateTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: CreateTodoRequest) -> TodoItemDto:
        item = self._store.add(request.title)
        return TodoItemDto.from_item(item)
