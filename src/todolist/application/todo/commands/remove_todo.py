from __future__ import annotations

from todolist.application.contracts.todo_dtos import RemoveTodoRequest
from todolist.application.todo.store import TodoStore


class RemoveTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: RemoveTodoRequest) -> bool:
        return self._store.remove(request.todo_id)
