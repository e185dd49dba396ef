from __future__ import annotations

from typing import Optional

from todolist.application.contracts.todo_dtos import TodoItemDto, ToggleTodoRequest
from todolist.application.todo.store import TodoStore


class ToggleTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: ToggleTodoRequest) -> Optional[TodoItemDto]:
        item = self._store.toggle(request.todo_id)
        return TodoItemDto.from_item(item) if item is not None else None
